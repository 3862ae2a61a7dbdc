# CUI // SP-CTI
"""Display normalization for scalar catalog values (props, param values).

YAML loading turns ISO dates into ``date``/``datetime`` objects; some
catalogs instead carry Unix timestamps as plain integers. Integers are only
treated as timestamps when the owning field's name suggests a date, so that
ordinary numbers (counts, retention days) are left alone.
"""

import re
from datetime import date, datetime

from oscal_pages.compat.datetime_utils import ensure_utc, utc_from_epoch

# 2100-01-01T00:00:00Z
EPOCH_MAX = 4102444800

_DATE_CONTEXT_RE = re.compile(
    r"date|time|timestamp|modified|updated|issued|created|published", re.IGNORECASE
)


def looks_like_epoch(n: int, context_name: str) -> bool:
    """True if ``n`` is in 1970..2100 and the field name looks date-like."""
    if n < 0 or n > EPOCH_MAX:
        return False
    return bool(_DATE_CONTEXT_RE.search(context_name or ""))


def _format_datetime(value: datetime) -> str:
    value = ensure_utc(value)
    if value.hour == 0 and value.minute == 0 and value.second == 0:
        return value.strftime("%Y-%m-%d")
    return value.isoformat(timespec="seconds")


def normalize_scalar_display(value, context_name: str = "") -> str:
    """Format a primitive catalog value for display.

    - datetimes: ``YYYY-MM-DD`` at midnight, ISO 8601 otherwise
    - dates: ``YYYY-MM-DD``
    - integers / digit strings in a date-like context: converted from epoch
    - booleans: ``true`` / ``false``
    - anything else: stripped string form (``None`` becomes ``''``)
    """
    if isinstance(value, datetime):
        return _format_datetime(value)
    if isinstance(value, date):
        return value.isoformat()
    if isinstance(value, bool):
        return "true" if value else "false"
    if value is None:
        return ""

    if isinstance(value, int) or (isinstance(value, str) and value.isdigit() and value.isascii()):
        n = int(value)
        if looks_like_epoch(n, context_name):
            return _format_datetime(utc_from_epoch(n))

    return str(value).strip()
