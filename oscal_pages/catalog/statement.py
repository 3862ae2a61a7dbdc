# CUI // SP-CTI
"""Control statement and named-part extraction.

A control's ``statement`` part holds an optional lead-in prose and a tree of
labeled items (a., 1., (a) ...) that must render as nested lists mirroring
the catalog's own nesting.
"""

from dataclasses import dataclass, field
from typing import List, Tuple

from oscal_pages.catalog.models import field_list, sval


@dataclass
class StatementItem:
    """One node of the statement tree."""

    label: str
    text: str
    children: List["StatementItem"] = field(default_factory=list)


def part_text(part) -> str:
    """Return a part's ``prose``, falling back to ``text``.

    Numeric scalars are rendered as strings; mappings and lists are ignored.
    """
    return sval(part.get("prose")) or sval(part.get("text"))


def extract_part_text(parts, target_name: str) -> str:
    """Text of the first part named ``target_name`` (case-insensitive) that has any."""
    wanted = target_name.lower()
    for part in parts or []:
        if not isinstance(part, dict):
            continue
        if str(part.get("name", "")).lower() != wanted:
            continue
        text = part_text(part)
        if text:
            return text
    return ""


def _item_label(part) -> str:
    for prop in field_list(part, "props"):
        if isinstance(prop, dict) and prop.get("name") == "label" and prop.get("value") is not None:
            return str(prop["value"])
    return ""


def collect_statement_items(node) -> List[StatementItem]:
    """Recursively collect a part's nested parts as statement items."""
    items = []
    for child in field_list(node, "parts", "part"):
        if not isinstance(child, dict):
            continue
        items.append(StatementItem(
            label=_item_label(child),
            text=part_text(child),
            children=collect_statement_items(child),
        ))
    return items


def collect_statement_tree(parts) -> Tuple[str, List[StatementItem]]:
    """Return ``(single_prose, items_tree)`` for the control's statement part.

    Both are empty when the control has no statement.
    """
    for part in parts or []:
        if not isinstance(part, dict):
            continue
        if str(part.get("name", "")).lower() != "statement":
            continue
        return part_text(part), collect_statement_items(part)
    return "", []
