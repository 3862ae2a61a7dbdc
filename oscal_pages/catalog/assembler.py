# CUI // SP-CTI
"""Assemble the ordered content blocks and metadata for one control document.

Block order is fixed:

    header       configured prop lines (plain text)
    statement    lead-in prose + nested labeled items
    description  the ``discussion`` part, else ``description``
    guidance     collapsed
    extras       one collapsed entry per mapped extra part
    enhancements appended later by the enhancement indexer (base controls only)

Every block is omitted when it would be empty. Assembly is a pure function
of the control, its group, its parent and the two mapping lists.
"""

from typing import Dict, List, Optional, Sequence

from oscal_pages.catalog.extras import filter_extras
from oscal_pages.catalog.labels import get_zero_padded_label, slugify_label, slugify_text
from oscal_pages.catalog.models import ContentBlock, ControlNode, DisplayRow, Group, OutputDocument
from oscal_pages.catalog.params import ParamDescriptor, build_param_substitutions, render_inline
from oscal_pages.catalog.sanitize import strip_tags
from oscal_pages.catalog.scalars import normalize_scalar_display
from oscal_pages.catalog.statement import StatementItem, collect_statement_tree, extract_part_text

UNNAMED_TITLE = "Unnamed Control"


def prop_values_joined(props, want_name: str) -> str:
    """All values of props named ``want_name`` (case-insensitive), '; '-joined."""
    values = []
    for prop in props or []:
        if not isinstance(prop, dict) or "value" not in prop:
            continue
        if str(prop.get("name", "")).lower() != want_name:
            continue
        values.append(normalize_scalar_display(prop["value"], want_name))
    return "; ".join(values)


def _render_items(items: List[StatementItem], subs: Dict[str, ParamDescriptor]) -> List[dict]:
    return [
        {
            "label": item.label,
            "text": render_inline(item.text, subs),
            "children": _render_items(item.children, subs),
        }
        for item in items
    ]


def header_block(control: ControlNode, header_rows: Sequence[DisplayRow]) -> Optional[ContentBlock]:
    lines = []
    for row in header_rows:
        if not row.name or not row.label:
            continue
        value = prop_values_joined(control.props, row.name)
        if value == "":
            continue
        lines.append({"label": row.label, "value": value})
    if not lines:
        return None
    return ContentBlock(kind="header", items=lines)


def statement_block(control: ControlNode, subs) -> Optional[ContentBlock]:
    single, tree = collect_statement_tree(control.parts)
    text = render_inline(single, subs)
    items = _render_items(tree, subs)
    if not text and not items:
        return None
    return ContentBlock(kind="statement", heading="Control Statement", text=text, items=items)


def description_block(control: ControlNode, subs) -> Optional[ContentBlock]:
    raw = extract_part_text(control.parts, "discussion") or extract_part_text(control.parts, "description")
    text = render_inline(raw, subs)
    if not text:
        return None
    return ContentBlock(kind="description", heading="Description", text=text)


def guidance_block(control: ControlNode, subs) -> Optional[ContentBlock]:
    text = render_inline(extract_part_text(control.parts, "guidance"), subs)
    if not text:
        return None
    return ContentBlock(kind="guidance", heading="Guidance", text=text, collapsed=True)


def extras_block(control: ControlNode, subs, extras_rows: Sequence[DisplayRow]) -> Optional[ContentBlock]:
    entries = [
        {"label": entry.label, "text": render_inline(entry.text, subs)}
        for entry in filter_extras(control.parts, extras_rows)
    ]
    if not entries:
        return None
    return ContentBlock(kind="extras", items=entries, collapsed=True)


def assemble_blocks(
    control: ControlNode,
    group: Group,
    parent: Optional[ControlNode] = None,
    header_rows: Sequence[DisplayRow] = (),
    extras_rows: Sequence[DisplayRow] = (),
) -> List[ContentBlock]:
    """Build the ordered content blocks for a control.

    ``group`` and ``parent`` do not change the blocks today; they are part of
    the signature so that templates keyed on family or enhancement status can
    be added without touching callers.
    """
    subs = build_param_substitutions(control.params)
    blocks = [
        header_block(control, header_rows),
        statement_block(control, subs),
        description_block(control, subs),
        guidance_block(control, subs),
        extras_block(control, subs, extras_rows),
    ]
    return [b for b in blocks if b is not None]


def document_title(label: str, control: ControlNode) -> str:
    """``"<label or id> <title>"``, markup stripped."""
    lead = label or control.id
    title = strip_tags(((lead + " ") if lead else "") + control.title).strip()
    return title or lead or UNNAMED_TITLE


def build_document(
    control: ControlNode,
    group: Group,
    parent: Optional[ControlNode] = None,
    header_rows: Sequence[DisplayRow] = (),
    extras_rows: Sequence[DisplayRow] = (),
) -> OutputDocument:
    """Assemble the full output document (title, slug, metadata, blocks)."""
    label = get_zero_padded_label(control.props)
    title = document_title(label, control)
    slug = slugify_label(label or control.id) or slugify_text(title)
    return OutputDocument(
        title=title,
        slug=slug,
        control_id=control.id,
        label=label,
        group_id=group.id,
        group_title=group.title,
        parent_control_id=parent.id if parent is not None else "",
        blocks=assemble_blocks(control, group, parent, header_rows, extras_rows),
    )
