# CUI // SP-CTI
"""Natural, case-insensitive ordering for control labels and family names.

Digit runs compare as integers so that AC-2 sorts before AC-10 and
AC-1(02) before AC-1(10).
"""

import re

_DIGITS_RE = re.compile(r"(\d+)")


def natural_key(value):
    """Sort key comparing digit runs numerically, text case-insensitively.

    ``re.split`` with a capturing group alternates text and digit chunks
    starting with text, so keys of any two strings line up type-for-type.
    """
    chunks = _DIGITS_RE.split((value or "").strip().lower())
    return [int(chunk) if i % 2 else chunk for i, chunk in enumerate(chunks)]


def natural_sorted(items, key=None):
    """Return ``items`` sorted naturally by ``key(item)`` (default: the item)."""
    getter = key or (lambda item: item)
    return sorted(items, key=lambda item: natural_key(getter(item)))
