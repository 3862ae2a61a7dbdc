#!/usr/bin/env python3
# CUI // SP-CTI
"""Display configuration: header-field rows, extras labels, permalinks, TOC defaults.

The two mapping lists are plain ordered (name, label) rows read from YAML
and handed to the renderer explicitly; nothing here is global state.

Config file (args/display_config.yaml):

    header_fields:
      - {name: implementation-level, label: Implementation Level}
    extras_labels:
      - {name: assessment-objective, label: Assessment Objective}
    permalink_base: /security-control/
    toc:
      group_by: family
      enhancements: nest
      title: ""
"""

import logging
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

import yaml

from oscal_pages.catalog.enhancements import DEFAULT_PERMALINK_BASE
from oscal_pages.catalog.extras import normalize_mapping_name
from oscal_pages.catalog.models import DisplayRow
from oscal_pages.catalog.sanitize import strip_tags
from oscal_pages.compat.db_utils import get_config_path
from oscal_pages.resilience.errors import ConfigurationError

logger = logging.getLogger(__name__)

DEFAULT_TOC = {"group_by": "family", "enhancements": "nest", "title": ""}


@dataclass
class DisplayConfig:
    """Display options applied to every imported control."""

    header_rows: List[DisplayRow] = field(default_factory=list)
    extras_rows: List[DisplayRow] = field(default_factory=list)
    permalink_base: str = DEFAULT_PERMALINK_BASE
    toc: Dict[str, str] = field(default_factory=lambda: dict(DEFAULT_TOC))


def normalize_rows(raw_rows, config_key: str = "") -> List[DisplayRow]:
    """Clean a list of ``{name, label}`` rows, dropping incomplete ones."""
    if raw_rows is None:
        return []
    if not isinstance(raw_rows, list):
        raise ConfigurationError(f"'{config_key}' must be a list of {{name, label}} rows",
                                 config_key=config_key)
    rows = []
    for raw in raw_rows:
        if isinstance(raw, DisplayRow):
            raw = {"name": raw.name, "label": raw.label}
        if not isinstance(raw, dict):
            continue
        name = normalize_mapping_name(raw.get("name", ""))
        label = strip_tags(str(raw.get("label") or ""))
        if name and label:
            rows.append(DisplayRow(name=name, label=label))
    return rows


def config_from_dict(data: Dict[str, Any]) -> DisplayConfig:
    """Build a DisplayConfig from an already-parsed mapping."""
    if data is None:
        data = {}
    if not isinstance(data, dict):
        raise ConfigurationError("Display config must be a mapping")

    toc = dict(DEFAULT_TOC)
    raw_toc = data.get("toc") or {}
    if not isinstance(raw_toc, dict):
        raise ConfigurationError("'toc' must be a mapping", config_key="toc")
    toc.update({k: str(v) for k, v in raw_toc.items() if k in DEFAULT_TOC and v is not None})

    return DisplayConfig(
        header_rows=normalize_rows(data.get("header_fields"), "header_fields"),
        extras_rows=normalize_rows(data.get("extras_labels"), "extras_labels"),
        permalink_base=str(data.get("permalink_base") or DEFAULT_PERMALINK_BASE),
        toc=toc,
    )


def load_display_config(path: Optional[str] = None) -> DisplayConfig:
    """Load display options from YAML; a missing file yields defaults."""
    config_path = get_config_path(path)
    if not config_path.exists():
        logger.info("No display config at %s; using defaults", config_path)
        return DisplayConfig()
    try:
        with open(config_path, encoding="utf-8") as f:
            data = yaml.safe_load(f)
    except yaml.YAMLError as exc:
        raise ConfigurationError(f"Invalid YAML in {config_path}: {exc}") from exc
    return config_from_dict(data)


def save_display_config(config: DisplayConfig, path: Optional[str] = None) -> None:
    """Write normalized display options back to YAML."""
    config_path = get_config_path(path)
    config_path.parent.mkdir(parents=True, exist_ok=True)
    data = {
        "header_fields": [
            {"name": r.name, "label": r.label}
            for r in normalize_rows(config.header_rows, "header_fields")
        ],
        "extras_labels": [
            {"name": r.name, "label": r.label}
            for r in normalize_rows(config.extras_rows, "extras_labels")
        ],
        "permalink_base": config.permalink_base,
        "toc": dict(config.toc),
    }
    with open(config_path, "w", encoding="utf-8") as f:
        yaml.safe_dump(data, f, sort_keys=False)
    logger.info("Display options saved to %s", config_path)
