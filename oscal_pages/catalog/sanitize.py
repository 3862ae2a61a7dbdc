# CUI // SP-CTI
"""Inline HTML sanitizer: keep ``<em>`` and ``<strong>``, neutralize the rest.

Allowed tags are kept bare (attributes dropped), any other tag is stripped,
and stray ``<``, ``>`` and ``&`` are escaped. Existing character references
are left as-is, so sanitizing already-sanitized text is a no-op; the
parameter resolver relies on that because it sanitizes at every level of
nested substitution.
"""

import re

from markupsafe import Markup

ALLOWED_TAGS = ("em", "strong")

_TAG_RE = re.compile(r"<(/?)([a-zA-Z][a-zA-Z0-9]*)\b[^<>]*>")
_COMMENT_RE = re.compile(r"<!--.*?-->", re.DOTALL)
_BARE_AMP_RE = re.compile(r"&(?!(?:#\d+|#[xX][0-9a-fA-F]+|[a-zA-Z][a-zA-Z0-9]*);)")
_PLACEHOLDER = "\x00{}\x00"


def safe_inline_html(text: str) -> Markup:
    """Sanitize inline text, permitting only emphasis and strong markup."""
    if not text:
        return Markup("")

    kept = []

    def _keep(match):
        closing, name = match.group(1), match.group(2).lower()
        if name not in ALLOWED_TAGS:
            return ""
        kept.append("<{}{}>".format(closing, name))
        return _PLACEHOLDER.format(len(kept) - 1)

    s = _COMMENT_RE.sub("", str(text).replace("\x00", ""))
    s = _TAG_RE.sub(_keep, s)
    s = _BARE_AMP_RE.sub("&amp;", s)
    s = s.replace("<", "&lt;").replace(">", "&gt;")
    for i, tag in enumerate(kept):
        s = s.replace(_PLACEHOLDER.format(i), tag, 1)
    return Markup(s)


def strip_tags(text: str) -> str:
    """Remove all markup from plain-text fields (titles, labels)."""
    return _TAG_RE.sub("", _COMMENT_RE.sub("", text or "")).strip()
