#!/usr/bin/env python3
# CUI // SP-CTI
"""SQLite-backed store for generated control documents.

The engine talks to the store through four operations: create, query by
parent link, append content, and purge. Content blocks are kept as a JSON
array so that appending the enhancements block is a read-modify-write of a
single row.

Usage:
    from oscal_pages.db.document_store import DocumentStore

    store = DocumentStore("data/oscal_pages.db")
    doc_id = store.create(document)
    children = store.query_by_parent("ac-1", order_by_label=True)
    store.append_content(doc_id, block)
"""

import json
import logging
import sqlite3
from typing import List, Optional

from oscal_pages.catalog.models import ContentBlock, OutputDocument
from oscal_pages.catalog.natural import natural_sorted
from oscal_pages.compat.datetime_utils import utc_now_iso
from oscal_pages.compat.db_utils import get_db_connection, get_pages_db_path
from oscal_pages.db.init_pages_db import init_db
from oscal_pages.resilience.errors import DocumentStoreError

logger = logging.getLogger(__name__)

_COLUMNS = (
    "id, slug, title, control_id, label, group_id, group_title, "
    "parent_control_id, template, content_json"
)


def _row_to_document(row) -> OutputDocument:
    blocks = [ContentBlock.from_dict(b) for b in json.loads(row["content_json"] or "[]")]
    return OutputDocument(
        id=row["id"],
        slug=row["slug"],
        title=row["title"],
        control_id=row["control_id"],
        label=row["label"],
        group_id=row["group_id"],
        group_title=row["group_title"],
        parent_control_id=row["parent_control_id"],
        template=row["template"],
        blocks=blocks,
    )


class DocumentStore:
    """Persist and query control documents in SQLite."""

    def __init__(self, db_path: Optional[str] = None):
        self._db_path = get_pages_db_path(db_path)
        init_db(self._db_path)

    @property
    def db_path(self):
        return self._db_path

    def _connect(self) -> sqlite3.Connection:
        return get_db_connection(self._db_path)

    # ── Writes ───────────────────────────────────────────────────────────

    def create(self, document: OutputDocument) -> int:
        """Insert a document and return its id.

        Raises:
            DocumentStoreError: the slug is already taken.
        """
        now = utc_now_iso()
        conn = self._connect()
        try:
            cur = conn.execute(
                "INSERT INTO control_documents "
                "(slug, title, control_id, label, group_id, group_title, "
                "parent_control_id, template, content_json, created_at, updated_at) "
                "VALUES (?, ?, ?, ?, ?, ?, ?, ?, ?, ?, ?)",
                (
                    document.slug,
                    document.title,
                    document.control_id,
                    document.label,
                    document.group_id,
                    document.group_title,
                    document.parent_control_id,
                    document.template,
                    json.dumps([b.to_dict() for b in document.blocks]),
                    now,
                    now,
                ),
            )
            conn.commit()
            doc_id = cur.lastrowid
        except sqlite3.IntegrityError as exc:
            raise DocumentStoreError(
                f"Cannot create document '{document.slug}': {exc}"
            ) from exc
        finally:
            conn.close()
        document.id = doc_id
        return doc_id

    def append_content(self, document_id: int, block: ContentBlock) -> None:
        """Append a block after the document's existing content."""
        conn = self._connect()
        try:
            row = conn.execute(
                "SELECT content_json FROM control_documents WHERE id = ?", (document_id,)
            ).fetchone()
            if row is None:
                raise DocumentStoreError(f"Document {document_id} not found", document_id=document_id)
            blocks = json.loads(row["content_json"] or "[]")
            blocks.append(block.to_dict())
            conn.execute(
                "UPDATE control_documents SET content_json = ?, updated_at = ? WHERE id = ?",
                (json.dumps(blocks), utc_now_iso(), document_id),
            )
            conn.commit()
        finally:
            conn.close()

    def purge(self) -> int:
        """Delete every generated document. Returns the number removed."""
        conn = self._connect()
        try:
            cur = conn.execute("DELETE FROM control_documents")
            conn.commit()
            removed = cur.rowcount
        finally:
            conn.close()
        logger.info("Purged %d existing control document(s)", removed)
        return removed

    def record_import(self, source_path, created, purged, skipped, status="completed",
                      message="", started_at=None) -> None:
        conn = self._connect()
        try:
            conn.execute(
                "INSERT INTO import_runs "
                "(source_path, documents_created, documents_purged, controls_skipped, "
                "status, message, started_at, finished_at) "
                "VALUES (?, ?, ?, ?, ?, ?, ?, ?)",
                (source_path, created, purged, skipped, status, message,
                 started_at, utc_now_iso()),
            )
            conn.commit()
        finally:
            conn.close()

    # ── Reads ────────────────────────────────────────────────────────────

    def get(self, document_id: int) -> Optional[OutputDocument]:
        conn = self._connect()
        try:
            row = conn.execute(
                f"SELECT {_COLUMNS} FROM control_documents WHERE id = ?", (document_id,)
            ).fetchone()
        finally:
            conn.close()
        return _row_to_document(row) if row else None

    def get_by_slug(self, slug: str) -> Optional[OutputDocument]:
        conn = self._connect()
        try:
            row = conn.execute(
                f"SELECT {_COLUMNS} FROM control_documents WHERE slug = ?", (slug,)
            ).fetchone()
        finally:
            conn.close()
        return _row_to_document(row) if row else None

    def query_by_parent(self, parent_control_id: str, order_by_label: bool = False) -> List[OutputDocument]:
        """Documents whose parent link equals ``parent_control_id``.

        Insertion order unless ``order_by_label`` asks for natural label order.
        """
        conn = self._connect()
        try:
            rows = conn.execute(
                f"SELECT {_COLUMNS} FROM control_documents "
                "WHERE parent_control_id = ? ORDER BY id",
                (parent_control_id,),
            ).fetchall()
        finally:
            conn.close()
        docs = [_row_to_document(r) for r in rows]
        if order_by_label:
            docs = natural_sorted(docs, key=lambda d: d.display_label)
        return docs

    def list_documents(self) -> List[OutputDocument]:
        """All documents in insertion order."""
        conn = self._connect()
        try:
            rows = conn.execute(
                f"SELECT {_COLUMNS} FROM control_documents ORDER BY id"
            ).fetchall()
        finally:
            conn.close()
        return [_row_to_document(r) for r in rows]

    def count(self) -> int:
        conn = self._connect()
        try:
            return conn.execute("SELECT COUNT(*) FROM control_documents").fetchone()[0]
        finally:
            conn.close()
