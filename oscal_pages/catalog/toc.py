#!/usr/bin/env python3
# CUI // SP-CTI
"""Table of contents over all generated control documents.

Options:
    group_by      family (one section per group title) | none (one list)
    enhancements  nest (sub-list under the base) | flat (siblings right
                  after the base) | hide

Enhancements are attached to their base by parent control id within the
same group; an enhancement whose base is not in that group is not listed.

Usage:
    python -m oscal_pages.catalog.toc --group-by family --enhancements flat
    python -m oscal_pages.catalog.toc --json
"""

import argparse
import json
import logging
import sys
from dataclasses import asdict, dataclass, field
from pathlib import Path
from typing import Dict, List

BASE_DIR = Path(__file__).resolve().parent.parent.parent
if str(BASE_DIR) not in sys.path:
    sys.path.insert(0, str(BASE_DIR))

from oscal_pages.catalog.enhancements import DEFAULT_PERMALINK_BASE, link_entry
from oscal_pages.catalog.natural import natural_key, natural_sorted
from oscal_pages.catalog.render import render_toc_html
from oscal_pages.config.display_config import load_display_config
from oscal_pages.db.document_store import DocumentStore

logger = logging.getLogger(__name__)

GROUP_BY_FAMILY = "family"
GROUP_BY_NONE = "none"
ENH_NEST = "nest"
ENH_FLAT = "flat"
ENH_HIDE = "hide"

OTHER_GROUP = "Other"
_ALL = "_all"


@dataclass
class TocEntry:
    label: str
    title: str
    slug: str
    url: str
    is_enhancement: bool = False
    children: List["TocEntry"] = field(default_factory=list)


@dataclass
class TocGroup:
    name: str
    entries: List[TocEntry] = field(default_factory=list)


def _entry(doc, permalink_base, is_enhancement=False) -> TocEntry:
    return TocEntry(is_enhancement=is_enhancement, **link_entry(doc, permalink_base))


def build_toc(documents, group_by: str = GROUP_BY_FAMILY, enhancements: str = ENH_NEST,
              permalink_base: str = DEFAULT_PERMALINK_BASE) -> List[TocGroup]:
    """Group, order and nest documents into TOC sections.

    Unknown ``group_by`` values behave like ``none``; unknown
    ``enhancements`` values behave like ``hide``.
    """
    group_by = (group_by or "").lower()
    enhancements = (enhancements or "").lower()
    by_family = group_by == GROUP_BY_FAMILY

    buckets: Dict[str, Dict[str, dict]] = {}
    for doc in documents:
        key = (doc.group_title or OTHER_GROUP) if by_family else _ALL
        bucket = buckets.setdefault(key, {"bases": {}, "children": {}})
        if doc.parent_control_id:
            bucket["children"].setdefault(doc.parent_control_id, []).append(doc)
        else:
            bucket["bases"][doc.control_id] = doc

    if by_family:
        group_names = natural_sorted(buckets.keys())
    else:
        group_names = [_ALL] if _ALL in buckets else []

    groups = []
    for name in group_names:
        bucket = buckets[name]
        entries = []
        bases = sorted(bucket["bases"].items(), key=lambda kv: natural_key(kv[1].display_label))
        for control_id, base in bases:
            entry = _entry(base, permalink_base)
            children = natural_sorted(bucket["children"].get(control_id, []),
                                      key=lambda d: d.display_label)
            entries.append(entry)
            if enhancements == ENH_NEST:
                entry.children = [_entry(c, permalink_base, True) for c in children]
            elif enhancements == ENH_FLAT:
                entries.extend(_entry(c, permalink_base, True) for c in children)
        groups.append(TocGroup(name=name if by_family else "", entries=entries))
    return groups


def render_toc(documents, group_by: str = GROUP_BY_FAMILY, enhancements: str = ENH_NEST,
               title: str = "", permalink_base: str = DEFAULT_PERMALINK_BASE) -> str:
    """Build and render the TOC as HTML."""
    documents = list(documents)
    groups = build_toc(documents, group_by, enhancements, permalink_base)
    return render_toc_html(groups, title=title, grouped=(group_by or "").lower() == GROUP_BY_FAMILY,
                           empty=not documents)


def main():
    parser = argparse.ArgumentParser(description="Render the control table of contents")
    parser.add_argument("--group-by", choices=[GROUP_BY_FAMILY, GROUP_BY_NONE], default=None)
    parser.add_argument("--enhancements", choices=[ENH_NEST, ENH_FLAT, ENH_HIDE], default=None)
    parser.add_argument("--title", default=None, help="Heading shown above the listing")
    parser.add_argument("--db", help="Document database path")
    parser.add_argument("--config", help="Display config YAML path")
    parser.add_argument("--json", action="store_true", help="JSON output instead of HTML")
    args = parser.parse_args()

    logging.basicConfig(level=logging.WARNING,
                        format="%(asctime)s [%(name)s] %(levelname)s: %(message)s")

    config = load_display_config(args.config)
    group_by = args.group_by or config.toc.get("group_by", GROUP_BY_FAMILY)
    enhancements = args.enhancements or config.toc.get("enhancements", ENH_NEST)
    title = args.title if args.title is not None else config.toc.get("title", "")

    documents = DocumentStore(args.db).list_documents()
    if args.json:
        groups = build_toc(documents, group_by, enhancements, config.permalink_base)
        print(json.dumps({"groups": [asdict(g) for g in groups], "count": len(documents)}, indent=2))
    else:
        print(render_toc(documents, group_by, enhancements, title, config.permalink_base))


if __name__ == "__main__":
    main()
