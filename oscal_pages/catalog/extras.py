# CUI // SP-CTI
"""Selection of non-standard ("extra") control parts for display.

Only parts with an explicit (name -> label) mapping row are shown; an
unmapped part is dropped entirely, whatever its content.
"""

import re
from dataclasses import dataclass
from typing import List, Sequence

from oscal_pages.catalog.models import DisplayRow
from oscal_pages.catalog.statement import part_text

RESERVED_PART_NAMES = frozenset({"statement", "guidance", "discussion", "description"})

_NAME_STRIP_RE = re.compile(r"[^a-z0-9._-]")


def normalize_mapping_name(name) -> str:
    """Lower-case a prop/part name and keep only ``[a-z0-9._-]``."""
    return _NAME_STRIP_RE.sub("", str(name or "").strip().lower())


def lookup_mapping_label(name, rows: Sequence[DisplayRow]) -> str:
    """Label of the first row matching ``name``, or '' if none does."""
    wanted = normalize_mapping_name(name)
    if not wanted:
        return ""
    for row in rows:
        if row.name == wanted:
            return row.label
    return ""


@dataclass
class ExtraEntry:
    """A mapped extra part ready for rendering (text still raw)."""

    name: str
    label: str
    text: str


def filter_extras(parts, extras_rows: Sequence[DisplayRow]) -> List[ExtraEntry]:
    """Return the mapped, non-empty extra parts in catalog order."""
    entries = []
    for part in parts or []:
        if not isinstance(part, dict):
            continue
        name = part.get("name")
        name = name if isinstance(name, str) else ""
        if name.lower() in RESERVED_PART_NAMES:
            continue
        label = lookup_mapping_label(name, extras_rows)
        if not label:
            continue
        text = part_text(part)
        if text:
            entries.append(ExtraEntry(name=name, label=label, text=text))
    return entries
