# CUI // SP-CTI
"""Control label extraction and slug derivation.

Labels come from ``props[name=label]``; the zero-padded class (``AC-01``,
``AC-24(01)``) is preferred because it sorts and reads consistently.

Slugs:
    SI-06      -> si-06
    AC-24(01)  -> ac-24-01   (no dots or parentheses in path segments)
"""

import re
import unicodedata

_ENHANCEMENT_RE = re.compile(r"\((\d+)\)")
_NON_SLUG_RE = re.compile(r"[^a-z0-9\-]+")
_HYPHENS_RE = re.compile(r"-+")
_LABEL_CLASS_PRIORITY = ("zero-padded", "sp800-53a")


def _label_value(prop):
    value = prop.get("value")
    if isinstance(value, bool) or not isinstance(value, (str, int, float)):
        return ""
    return str(value)


def get_zero_padded_label(props) -> str:
    """Return the control's display label, or '' if it has none.

    Order: label/zero-padded, label/sp800-53a, then any label prop.
    """
    labels = [
        p for p in (props or [])
        if isinstance(p, dict) and p.get("name") == "label" and p.get("value") is not None
    ]
    for wanted in _LABEL_CLASS_PRIORITY:
        for prop in labels:
            if prop.get("class") == wanted:
                return _label_value(prop)
    if labels:
        return _label_value(labels[0])
    return ""


def slugify_text(text: str) -> str:
    """Generic ASCII-safe slug: transliterate, lower-case, hyphenate."""
    ascii_text = (
        unicodedata.normalize("NFKD", text or "")
        .encode("ascii", "ignore")
        .decode("ascii")
        .lower()
    )
    slug = re.sub(r"[^a-z0-9]+", "-", ascii_text)
    return slug.strip("-")


def slugify_label(label: str) -> str:
    """Normalize a zero-padded label (or control id) into a URL slug."""
    s = (label or "").lower()
    s = _ENHANCEMENT_RE.sub(r"-\1", s)
    s = _NON_SLUG_RE.sub("-", s)
    s = _HYPHENS_RE.sub("-", s)
    s = s.strip("-")
    return s or slugify_text(label)


def strip_leading_label(title: str, label: str, control_id: str = "") -> str:
    """Remove a leading label (or control id) from a title, case-insensitively.

    Any run of ``-``, ``—`` or ``:`` after the label is removed with it, so
    ``"AC-1(01) — Policy"`` becomes ``"Policy"``.
    """
    text = (title or "").lstrip()
    candidates = []
    if label:
        candidates.append(label)
    if control_id and control_id.lower() != (label or "").lower():
        candidates.append(control_id)

    for candidate in candidates:
        pattern = re.compile(r"^" + re.escape(candidate) + r"(?![a-z0-9])\s*[-—:]*\s*", re.IGNORECASE)
        stripped, count = pattern.subn("", text, count=1)
        if count:
            text = stripped
            break
    return text.strip()
