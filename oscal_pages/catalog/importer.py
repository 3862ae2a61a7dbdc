#!/usr/bin/env python3
# CUI // SP-CTI
"""Import an OSCAL catalog and generate one document per control.

An import replaces everything: previously generated documents are purged
and the whole catalog is walked again. The purge happens only after the
input has been parsed and its groups found, so a bad upload leaves the
existing documents in place. Imports must not run concurrently against the
same store.

Usage:
    python -m oscal_pages.catalog.importer --file NIST_SP-800-53_rev5_catalog.yaml
    python -m oscal_pages.catalog.importer --file catalog.json --db data/pages.db --json
"""

import argparse
import json
import logging
import sys
from dataclasses import asdict, dataclass
from pathlib import Path
from typing import Optional

BASE_DIR = Path(__file__).resolve().parent.parent.parent
if str(BASE_DIR) not in sys.path:
    sys.path.insert(0, str(BASE_DIR))

from oscal_pages.catalog.loader import extract_groups, load_catalog
from oscal_pages.catalog.walker import ControlWalker
from oscal_pages.compat.datetime_utils import utc_now_iso
from oscal_pages.config.display_config import DisplayConfig, load_display_config
from oscal_pages.db.document_store import DocumentStore
from oscal_pages.resilience.errors import CatalogError

logger = logging.getLogger(__name__)


@dataclass
class ImportResult:
    """Summary of one catalog import."""

    created: int
    purged: int
    groups: int
    skipped: int
    source: str = ""

    @property
    def message(self) -> str:
        return f"Import complete. {self.created} control page(s) created."


def import_catalog(source, store: DocumentStore, config: Optional[DisplayConfig] = None) -> ImportResult:
    """Load ``source`` (a path or an already-parsed mapping) and regenerate all documents.

    Raises:
        CatalogParseError, UnsupportedFormatError: the input could not be read.
        MalformedCatalogError: the catalog has no groups.
    """
    config = config or DisplayConfig()
    started_at = utc_now_iso()
    source_name = "" if isinstance(source, dict) else str(source)
    logger.info("Importing catalog from %s", source_name or "<mapping>")

    try:
        data = source if isinstance(source, dict) else load_catalog(source)
        groups = extract_groups(data, source=source_name)
    except CatalogError as exc:
        logger.error("Import aborted: %s", exc)
        store.record_import(source_name, 0, 0, 0, status="failed", message=str(exc),
                            started_at=started_at)
        raise

    purged = store.purge()
    walker = ControlWalker(
        store,
        header_rows=config.header_rows,
        extras_rows=config.extras_rows,
        permalink_base=config.permalink_base,
    )
    created = walker.walk_groups(groups)

    result = ImportResult(created=created, purged=purged, groups=len(groups),
                          skipped=walker.skipped, source=source_name)
    store.record_import(source_name, created, purged, walker.skipped,
                        message=result.message, started_at=started_at)
    logger.info("%s (%d purged, %d skipped)", result.message, purged, walker.skipped)
    return result


def main():
    parser = argparse.ArgumentParser(description="Import an OSCAL catalog (YAML or JSON)")
    parser.add_argument("--file", required=True, help="Catalog file (.yaml/.yml or .json)")
    parser.add_argument("--db", help="Document database path")
    parser.add_argument("--config", help="Display config YAML path")
    parser.add_argument("--json", action="store_true", help="JSON output")
    parser.add_argument("--verbose", action="store_true", help="Debug logging")
    args = parser.parse_args()

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s [%(name)s] %(levelname)s: %(message)s",
    )

    store = DocumentStore(args.db)
    try:
        config = load_display_config(args.config)
        result = import_catalog(args.file, store, config)
    except CatalogError as exc:
        if args.json:
            print(json.dumps({"error": str(exc), "type": type(exc).__name__}))
        else:
            print(f"Import failed: {exc}")
        sys.exit(1)

    if args.json:
        print(json.dumps(dict(asdict(result), message=result.message), indent=2))
    else:
        print(result.message)


if __name__ == "__main__":
    main()
