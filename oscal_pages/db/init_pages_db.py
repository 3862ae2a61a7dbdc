#!/usr/bin/env python3
# CUI // SP-CTI
"""Initialize the OSCAL Pages document database with full schema."""

import argparse
import sqlite3
import sys
from pathlib import Path

BASE_DIR = Path(__file__).resolve().parent.parent.parent
if str(BASE_DIR) not in sys.path:
    sys.path.insert(0, str(BASE_DIR))

from oscal_pages.compat.db_utils import get_pages_db_path

SCHEMA_SQL = """
-- ============================================================
-- CONTROL DOCUMENTS (one published page per control)
-- ============================================================
CREATE TABLE IF NOT EXISTS control_documents (
    id INTEGER PRIMARY KEY AUTOINCREMENT,
    slug TEXT NOT NULL UNIQUE,
    title TEXT NOT NULL,
    control_id TEXT NOT NULL DEFAULT '',
    label TEXT NOT NULL DEFAULT '',
    group_id TEXT NOT NULL DEFAULT '',
    group_title TEXT NOT NULL DEFAULT '',
    parent_control_id TEXT NOT NULL DEFAULT '',
    template TEXT NOT NULL DEFAULT 'oscal-control',
    content_json TEXT NOT NULL DEFAULT '[]',
    created_at TIMESTAMP DEFAULT CURRENT_TIMESTAMP,
    updated_at TIMESTAMP DEFAULT CURRENT_TIMESTAMP
);

CREATE INDEX IF NOT EXISTS idx_control_documents_parent
    ON control_documents(parent_control_id);
CREATE INDEX IF NOT EXISTS idx_control_documents_group
    ON control_documents(group_title);

-- ============================================================
-- IMPORT RUNS (one row per catalog import)
-- ============================================================
CREATE TABLE IF NOT EXISTS import_runs (
    id INTEGER PRIMARY KEY AUTOINCREMENT,
    source_path TEXT,
    documents_created INTEGER NOT NULL DEFAULT 0,
    documents_purged INTEGER NOT NULL DEFAULT 0,
    controls_skipped INTEGER NOT NULL DEFAULT 0,
    status TEXT NOT NULL DEFAULT 'completed' CHECK(status IN ('completed', 'failed')),
    message TEXT,
    started_at TIMESTAMP,
    finished_at TIMESTAMP DEFAULT CURRENT_TIMESTAMP
);
"""


def init_db(db_path=None):
    """Create all tables (idempotent). Returns the sorted list of table names."""
    path = get_pages_db_path(db_path)
    path.parent.mkdir(parents=True, exist_ok=True)
    conn = sqlite3.connect(str(path))
    try:
        conn.executescript(SCHEMA_SQL)
        conn.commit()
        rows = conn.execute(
            "SELECT name FROM sqlite_master WHERE type='table' "
            "AND name NOT LIKE 'sqlite_%' ORDER BY name"
        ).fetchall()
    finally:
        conn.close()
    return [r[0] for r in rows]


def main():
    parser = argparse.ArgumentParser(description="Initialize the OSCAL Pages document database")
    parser.add_argument("--db-path", type=Path, default=None, help="Database path")
    args = parser.parse_args()

    tables = init_db(args.db_path)
    print(f"Database initialized at {get_pages_db_path(args.db_path)}")
    print(f"Tables: {len(tables)}")
    for t in tables:
        print(f"  - {t}")


if __name__ == "__main__":
    main()
