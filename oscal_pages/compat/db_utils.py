#!/usr/bin/env python3
# CUI // SP-CTI
"""Centralized database and config path resolution for OSCAL Pages.

Provides functions to resolve the document database and display config paths
with a consistent fallback chain: explicit argument > env var > default.

Usage:
    from oscal_pages.compat.db_utils import get_pages_db_path, get_db_connection

    db_path = get_pages_db_path()                     # env var or default
    db_path = get_pages_db_path("/custom/pages.db")   # explicit override

    conn = get_db_connection()                        # default oscal_pages.db
    conn = get_db_connection(validate=True)           # raise if DB missing

Fallback chain:
    1. Explicit path argument (if provided)
    2. OSCAL_PAGES_DB_PATH / OSCAL_PAGES_CONFIG environment variable
    3. Default: <project_root>/data/oscal_pages.db, <project_root>/args/display_config.yaml
"""

import os
import sqlite3
from pathlib import Path
from typing import Optional, Union

# Project root: 3 levels up from oscal_pages/compat/db_utils.py
_PROJECT_ROOT = Path(__file__).resolve().parent.parent.parent
_DEFAULT_DB = _PROJECT_ROOT / "data" / "oscal_pages.db"
_DEFAULT_CONFIG = _PROJECT_ROOT / "args" / "display_config.yaml"


def get_project_root() -> Path:
    """Return the project root directory."""
    return _PROJECT_ROOT


def get_pages_db_path(explicit: Optional[Union[str, Path]] = None) -> Path:
    """Resolve the document database path.

    Args:
        explicit: Optional explicit path override (highest priority).

    Returns:
        Resolved Path to the SQLite document database.
    """
    if explicit:
        return Path(explicit)

    env_path = os.environ.get("OSCAL_PAGES_DB_PATH")
    if env_path:
        return Path(env_path)

    return _DEFAULT_DB


def get_config_path(explicit: Optional[Union[str, Path]] = None) -> Path:
    """Resolve the display configuration path.

    Fallback: OSCAL_PAGES_CONFIG env var > <project_root>/args/display_config.yaml
    """
    if explicit:
        return Path(explicit)

    env_path = os.environ.get("OSCAL_PAGES_CONFIG")
    if env_path:
        return Path(env_path)

    return _DEFAULT_CONFIG


def get_db_connection(
    db_path: Optional[Union[str, Path]] = None,
    validate: bool = False,
    row_factory: bool = True,
) -> sqlite3.Connection:
    """Get a SQLite connection to the document database.

    Args:
        db_path: Explicit path override.  Falls through the standard
                 ``get_pages_db_path`` chain when *None*.
        validate: When *True*, raise ``FileNotFoundError`` if the DB file
                  does not exist yet.
        row_factory: When *True* (default), set ``sqlite3.Row`` so columns
                     are accessible by name.

    Returns:
        An open ``sqlite3.Connection``.  Caller is responsible for closing it.
    """
    path = get_pages_db_path(db_path)
    if validate and not path.exists():
        raise FileNotFoundError(
            f"Database not found: {path}\n"
            "Run: python -m oscal_pages.db.init_pages_db"
        )
    if not validate:
        path.parent.mkdir(parents=True, exist_ok=True)
    conn = sqlite3.connect(str(path))
    if row_factory:
        conn.row_factory = sqlite3.Row
    return conn
