# CUI // SP-CTI
"""Tests for oscal_pages.catalog.assembler — block order, titles, slugs."""

import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).resolve().parent.parent))

from oscal_pages.catalog.assembler import (
    UNNAMED_TITLE,
    assemble_blocks,
    build_document,
    document_title,
    prop_values_joined,
)
from oscal_pages.catalog.models import ControlNode, DisplayRow, Group


def _ac1(sample_catalog):
    return ControlNode.from_dict(sample_catalog["catalog"]["groups"][0]["controls"][0])


GROUP = Group(id="ac", title="Access Control")


class TestBlockOrder:
    """Blocks appear in fixed order and empty ones are omitted."""

    def test_full_control(self, sample_catalog, display_config):
        blocks = assemble_blocks(_ac1(sample_catalog), GROUP, None,
                                 display_config.header_rows, display_config.extras_rows)
        assert [b.kind for b in blocks] == ["header", "statement", "description", "guidance", "extras"]

    def test_minimal_control_has_only_statement(self):
        control = ControlNode.from_dict({
            "id": "ac-10", "title": "Concurrent Session Control",
            "parts": [{"name": "statement", "prose": "Limit concurrent sessions."}],
        })
        blocks = assemble_blocks(control, GROUP)
        assert [b.kind for b in blocks] == ["statement"]
        assert blocks[0].text == "Limit concurrent sessions."
        assert blocks[0].heading == "Control Statement"

    def test_no_content_no_blocks(self):
        assert assemble_blocks(ControlNode(id="x", title="Empty"), GROUP) == []


class TestHeaderBlock:
    def test_values_joined_in_row_order(self, sample_catalog, display_config):
        header = assemble_blocks(_ac1(sample_catalog), GROUP, None, display_config.header_rows)[0]
        assert header.items == [
            {"label": "Implementation Level", "value": "organization"},
            {"label": "Contributor", "value": "NIST; DoD"},
        ]

    def test_rows_without_matching_props_are_skipped(self, sample_catalog):
        rows = [DisplayRow("baseline", "Baseline")]
        blocks = assemble_blocks(_ac1(sample_catalog), GROUP, None, rows)
        assert blocks[0].kind == "statement"

    def test_epoch_prop_in_date_field(self):
        props = [{"name": "Last-Modified", "value": 1704067200}]
        assert prop_values_joined(props, "last-modified") == "2024-01-01"


class TestStatementAndProse:
    """Parameter substitution flows into every prose block."""

    def test_statement_items_substituted(self, sample_catalog):
        statement = assemble_blocks(_ac1(sample_catalog), GROUP)[0]
        assert statement.kind == "statement"
        a, b = statement.items
        assert a["label"] == "a."
        assert a["text"] == (
            "Develop and disseminate to <em><strong>[Assignment: personnel or roles]</strong></em>:"
        )
        assert a["children"][0]["text"] == (
            "<em><strong>[Selection (one-or-more): Organization-level; Mission-level]</strong></em>"
            " access control policy"
        )
        assert b["text"] == "Review the policy <strong>annually</strong>."
        assert b["children"] == []

    def test_discussion_is_description(self, sample_catalog):
        blocks = {b.kind: b for b in assemble_blocks(_ac1(sample_catalog), GROUP)}
        assert blocks["description"].text == "Policies address access control."
        assert blocks["guidance"].collapsed is True

    def test_description_part_used_without_discussion(self):
        control = ControlNode.from_dict({
            "id": "x-1", "title": "X", "parts": [{"name": "description", "prose": "Described."}],
        })
        assert assemble_blocks(control, GROUP)[0].text == "Described."

    def test_extras_only_for_mapped_parts(self, sample_catalog, display_config):
        blocks = assemble_blocks(_ac1(sample_catalog), GROUP, None, (), display_config.extras_rows)
        extras = blocks[-1]
        assert extras.kind == "extras"
        assert extras.items == [{"label": "Assessment Objective", "text": "Determine if the policy exists."}]


class TestBuildDocument:
    """Title, slug and metadata."""

    def test_base_control(self, sample_catalog, display_config):
        doc = build_document(_ac1(sample_catalog), GROUP, None,
                             display_config.header_rows, display_config.extras_rows)
        assert doc.title == "AC-01 Policy and Procedures"
        assert doc.slug == "ac-01"
        assert doc.label == "AC-01"
        assert doc.control_id == "ac-1"
        assert doc.group_title == "Access Control"
        assert doc.parent_control_id == ""
        assert doc.template == "oscal-control"

    def test_enhancement_links_parent(self, sample_catalog):
        parent = _ac1(sample_catalog)
        enhancement = next(c for c in parent.children if c.id == "ac-1.1")
        doc = build_document(enhancement, GROUP, parent)
        assert doc.slug == "ac-01-01"
        assert doc.title == "AC-01(01) First Enhancement"
        assert doc.parent_control_id == "ac-1"

    def test_slug_falls_back_to_id(self):
        doc = build_document(ControlNode(id="ac-2.3", title="Disable Accounts"), GROUP)
        assert doc.slug == "ac-2-3"
        assert doc.title == "ac-2.3 Disable Accounts"

    def test_slug_falls_back_to_title(self):
        doc = build_document(ControlNode(id="", title="Orphan Control"), GROUP)
        assert doc.slug == "orphan-control"

    def test_unnamed_control(self):
        doc = build_document(ControlNode(id="", title=""), GROUP)
        assert doc.title == UNNAMED_TITLE
        assert doc.slug == "unnamed-control"

    def test_title_markup_stripped(self):
        control = ControlNode(id="ac-3", title="<b>Access</b> Enforcement")
        assert document_title("AC-03", control) == "AC-03 Access Enforcement"


class TestGroupModel:
    def test_group_keeps_only_identity(self):
        group = Group.from_dict({"id": "ac", "title": "Access Control", "controls": [{"id": "ac-1"}]})
        assert group == Group(id="ac", title="Access Control")
