# CUI // SP-CTI
"""Timezone-aware datetime utilities for OSCAL Pages.

All timestamps written to the document store and all epoch conversions in
the scalar normalizer go through these helpers so they are UTC-aware.
"""

from datetime import datetime, timezone


def utc_now_iso() -> str:
    """Return current UTC time as ISO 8601 string."""
    return datetime.now(timezone.utc).isoformat()


def utc_from_epoch(seconds: int) -> datetime:
    """Return the timezone-aware UTC datetime for a Unix timestamp."""
    return datetime.fromtimestamp(seconds, tz=timezone.utc)


def ensure_utc(value: datetime) -> datetime:
    """Attach UTC to a naive datetime; aware values are returned unchanged."""
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value
