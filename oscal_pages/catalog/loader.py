#!/usr/bin/env python3
# CUI // SP-CTI
"""Catalog file loader — reads OSCAL catalogs in YAML or JSON.

Expected root: ``catalog`` with a ``groups`` array; each group contains
``controls`` (or ``control``). YAML dates are kept as ``date``/``datetime``
objects and formatted later by the scalar normalizer.

Usage (library):
    from oscal_pages.catalog.loader import load_catalog, extract_groups
    data = load_catalog("NIST_SP-800-53_rev5_catalog.yaml")
    groups = extract_groups(data)
"""

import json
import logging
import re
from pathlib import Path

import yaml

from oscal_pages.catalog.models import field_list
from oscal_pages.resilience.errors import (
    CatalogParseError,
    MalformedCatalogError,
    UnsupportedFormatError,
)

logger = logging.getLogger(__name__)

FORMAT_BY_EXTENSION = {
    "json": "json",
    "yaml": "yaml",
    "yml": "yaml",
}
MAX_MESSAGE_LENGTH = 400
SNIFF_BYTES = 512

_YAML_SNIFF_RE = re.compile(r"^\s*(---|catalog\s*:)", re.MULTILINE)


def truncate_msg(message: str, max_length: int = MAX_MESSAGE_LENGTH) -> str:
    """Shorten a diagnostic to ``max_length`` characters, ending in an ellipsis."""
    if len(message) > max_length:
        return message[:max_length - 1] + "…"
    return message


def detect_format(path) -> str:
    """Return 'json' or 'yaml' for a catalog file.

    The extension decides; without a known extension the head of the file is
    sniffed for a YAML document marker or a top-level ``catalog:`` key.
    """
    path = Path(path)
    ext = path.suffix.lstrip(".").lower()
    if ext in FORMAT_BY_EXTENSION:
        return FORMAT_BY_EXTENSION[ext]

    try:
        with open(path, "rb") as f:
            head = f.read(SNIFF_BYTES).decode("utf-8", errors="replace")
    except OSError as exc:
        raise CatalogParseError(truncate_msg(f"Cannot read {path}: {exc}"), source=str(path)) from exc
    if _YAML_SNIFF_RE.search(head):
        return "yaml"
    raise UnsupportedFormatError(
        f"Unsupported file type ({ext or 'unknown'}). Upload YAML (.yaml/.yml) or JSON.",
        source=str(path),
        extension=ext,
    )


def load_catalog_text(text: str, fmt: str, source: str = "") -> dict:
    """Parse catalog text in the given format ('json' or 'yaml')."""
    if fmt == "json":
        try:
            data = json.loads(text)
        except json.JSONDecodeError as exc:
            raise CatalogParseError(truncate_msg(f"JSON parse error: {exc}"), source=source) from exc
    elif fmt == "yaml":
        try:
            data = yaml.safe_load(text)
        except yaml.YAMLError as exc:
            raise CatalogParseError(truncate_msg(f"YAML parse error: {exc}"), source=source) from exc
    else:
        raise UnsupportedFormatError(f"Unsupported catalog format: {fmt}", source=source, extension=fmt)

    if not isinstance(data, dict):
        raise CatalogParseError("Unable to parse the uploaded file as YAML/JSON catalog.", source=source)
    return data


def load_catalog(path) -> dict:
    """Load a catalog file and return the parsed mapping."""
    path = Path(path)
    fmt = detect_format(path)
    try:
        text = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise CatalogParseError(truncate_msg(f"Cannot read {path}: {exc}"), source=str(path)) from exc
    logger.info("Loading %s catalog from %s", fmt.upper(), path)
    return load_catalog_text(text, fmt, source=str(path))


def extract_groups(data: dict, source: str = "") -> list:
    """Return ``catalog.groups`` (or ``catalog.group``).

    Raises:
        MalformedCatalogError: the catalog has no non-empty groups list.
    """
    catalog = data.get("catalog") if isinstance(data, dict) else None
    groups = field_list(catalog, "groups", "group")
    if not groups:
        raise MalformedCatalogError(
            "Catalog missing groups[]. Expected catalog.groups array.", source=source
        )
    return groups
