# CUI // SP-CTI
"""Shared data models for the catalog transformation engine.

The raw catalog arrives as generic nested dicts/lists (parsed YAML or JSON).
Groups and controls are lifted into explicit node types; properties,
parameters and parts stay in their generic form and are read through
``field_list`` / ``sval`` so that missing or oddly-typed fields degrade to
empty values instead of raising.
"""

from dataclasses import asdict, dataclass, field
from typing import Any, Dict, List, Optional


def field_list(node: Any, key: str, alt_key: str = "") -> list:
    """Return ``node[key]`` (or ``node[alt_key]``) when it is a list, else ``[]``.

    The primary key wins whenever it is present, even if its value is not a
    list; OSCAL uses plural keys in JSON and singular keys in some YAML.
    """
    if not isinstance(node, dict):
        return []
    if key in node:
        value = node[key]
    elif alt_key and alt_key in node:
        value = node[alt_key]
    else:
        return []
    return value if isinstance(value, list) else []


def sval(value: Any) -> str:
    """Coerce a scalar to a display string; anything non-scalar becomes ''."""
    if isinstance(value, str):
        return value
    if isinstance(value, bool):
        return ""
    if isinstance(value, (int, float)):
        return str(value)
    return ""


@dataclass
class ControlNode:
    """A control or enhancement with an owned list of child controls.

    ``parent_id`` is a plain back-reference to the immediate parent's id;
    ownership runs only from parent to ``children``.
    """

    id: str
    title: str
    props: List[dict] = field(default_factory=list)
    params: List[dict] = field(default_factory=list)
    parts: List[dict] = field(default_factory=list)
    children: List["ControlNode"] = field(default_factory=list)
    parent_id: str = ""

    @property
    def is_enhancement(self) -> bool:
        return self.parent_id != ""

    @classmethod
    def from_dict(cls, raw: dict, parent_id: str = "") -> "ControlNode":
        node = cls(
            id=sval(raw.get("id", "")),
            title=sval(raw.get("title", "")),
            props=[p for p in field_list(raw, "props") if isinstance(p, dict)],
            params=[p for p in field_list(raw, "params", "param") if isinstance(p, dict)],
            parts=[p for p in field_list(raw, "parts", "part") if isinstance(p, dict)],
            parent_id=parent_id,
        )
        node.children = [
            cls.from_dict(child, parent_id=node.id)
            for child in field_list(raw, "controls", "control")
            if isinstance(child, dict)
        ]
        return node


@dataclass
class Group:
    """A control family (catalog group)."""

    id: str
    title: str

    @classmethod
    def from_dict(cls, raw: dict) -> "Group":
        return cls(id=sval(raw.get("id", "")), title=sval(raw.get("title", "")))


@dataclass
class DisplayRow:
    """One (name, label) display mapping row."""

    name: str
    label: str


@dataclass
class ContentBlock:
    """One ordered block of a control document.

    ``kind`` is one of header, statement, description, guidance, extras,
    enhancements. Inline-HTML fields (``text`` and the ``text`` keys inside
    ``items``) are already sanitized; ``heading`` and header ``value`` entries
    are plain text.
    """

    kind: str
    heading: str = ""
    text: str = ""
    items: List[Dict[str, Any]] = field(default_factory=list)
    collapsed: bool = False

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "ContentBlock":
        return cls(
            kind=data.get("kind", ""),
            heading=data.get("heading", ""),
            text=data.get("text", ""),
            items=list(data.get("items", [])),
            collapsed=bool(data.get("collapsed", False)),
        )


@dataclass
class OutputDocument:
    """The published page for one control."""

    title: str
    slug: str
    control_id: str = ""
    label: str = ""
    group_id: str = ""
    group_title: str = ""
    parent_control_id: str = ""
    blocks: List[ContentBlock] = field(default_factory=list)
    template: str = "oscal-control"
    id: Optional[int] = None

    @property
    def display_label(self) -> str:
        """Zero-padded label, falling back to the control id."""
        return self.label or self.control_id
