# CUI // SP-CTI
"""Tests for oscal_pages.catalog.labels — label extraction, slugs, title stripping."""

import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).resolve().parent.parent))

import pytest

from oscal_pages.catalog.labels import (
    get_zero_padded_label,
    slugify_label,
    slugify_text,
    strip_leading_label,
)


class TestZeroPaddedLabel:
    """Label priority: zero-padded, then sp800-53a, then any label."""

    def test_prefers_zero_padded_class(self):
        props = [
            {"name": "label", "value": "AC-1"},
            {"name": "label", "class": "sp800-53a", "value": "AC-1a"},
            {"name": "label", "class": "zero-padded", "value": "AC-01"},
        ]
        assert get_zero_padded_label(props) == "AC-01"

    def test_falls_back_to_sp800_53a(self):
        props = [
            {"name": "label", "value": "AC-1"},
            {"name": "label", "class": "sp800-53a", "value": "AC-1a"},
        ]
        assert get_zero_padded_label(props) == "AC-1a"

    def test_falls_back_to_any_label(self):
        props = [{"name": "sort-id", "value": "ac-01"}, {"name": "label", "value": "AC-1"}]
        assert get_zero_padded_label(props) == "AC-1"

    def test_no_label_returns_empty(self):
        assert get_zero_padded_label([{"name": "sort-id", "value": "ac-01"}]) == ""
        assert get_zero_padded_label([]) == ""
        assert get_zero_padded_label(None) == ""

    def test_label_without_value_is_ignored(self):
        props = [{"name": "label", "class": "zero-padded"}, {"name": "label", "value": "AC-1"}]
        assert get_zero_padded_label(props) == "AC-1"

    def test_null_zero_padded_value_falls_through(self):
        props = [
            {"name": "label", "class": "zero-padded", "value": None},
            {"name": "label", "class": "sp800-53a", "value": "AC-1"},
        ]
        assert get_zero_padded_label(props) == "AC-1"


class TestSlugifyLabel:
    """Slug rule for labels and control ids."""

    def test_enhancement_label(self):
        assert slugify_label("AC-24(01)") == "ac-24-01"

    def test_base_label(self):
        assert slugify_label("SI-06") == "si-06"

    def test_dot_notation_id_becomes_hyphen(self):
        assert slugify_label("ac-2.1") == "ac-2-1"

    def test_collapses_and_trims_hyphens(self):
        assert slugify_label("  --AC   24 (x)-- ") == "ac-24-x"

    def test_non_ascii_falls_back_to_transliteration(self):
        assert slugify_label("ÄÖ") == "ao"

    def test_empty_label(self):
        assert slugify_label("") == ""

    @pytest.mark.parametrize("label", [
        "AC-24(01)", "SI-06", "ac-2.1", "PM-30(1)(a)", "Über Control", "x__y", "(((", "AU-02 (03)",
    ])
    def test_idempotent(self, label):
        once = slugify_label(label)
        assert slugify_label(once) == once

    def test_slugify_text_strips_accents(self):
        assert slugify_text("Contrôle d'accès") == "controle-d-acces"


class TestStripLeadingLabel:
    """Removal of a duplicated leading label from titles."""

    def test_strips_label_and_space(self):
        assert strip_leading_label("AC-01(01) First Enhancement", "AC-01(01)") == "First Enhancement"

    def test_strips_em_dash_separator(self):
        assert strip_leading_label("AC-01 — Policy", "AC-01") == "Policy"

    def test_strips_colon_case_insensitively(self):
        assert strip_leading_label("ac-01: Policy", "AC-01") == "Policy"

    def test_falls_back_to_control_id(self):
        assert strip_leading_label("ac-1 Policy", "AC-01", "ac-1") == "Policy"

    def test_leaves_unrelated_title(self):
        assert strip_leading_label("Policy and Procedures", "AC-01", "ac-1") == "Policy and Procedures"

    def test_label_prefix_of_longer_label_is_kept(self):
        assert strip_leading_label("AC-10 Concurrent Session Control", "AC-1") == "AC-10 Concurrent Session Control"

    def test_title_equal_to_label_becomes_empty(self):
        assert strip_leading_label("AC-01", "AC-01") == ""
