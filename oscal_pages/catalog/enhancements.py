# CUI // SP-CTI
"""Cross-reference list of enhancements appended to each base control page."""

import logging
from typing import Optional

from oscal_pages.catalog.labels import strip_leading_label
from oscal_pages.catalog.models import ContentBlock, OutputDocument

logger = logging.getLogger(__name__)

DEFAULT_PERMALINK_BASE = "/security-control/"


def permalink(slug: str, base: str = DEFAULT_PERMALINK_BASE) -> str:
    """Public URL path for a document slug."""
    return base.rstrip("/") + "/" + slug + "/"


def link_entry(doc: OutputDocument, permalink_base: str = DEFAULT_PERMALINK_BASE) -> dict:
    """Listing entry for a document: label, de-duplicated title, url."""
    label = doc.display_label
    return {
        "label": label,
        "title": strip_leading_label(doc.title, label, doc.control_id),
        "slug": doc.slug,
        "url": permalink(doc.slug, permalink_base),
    }


def build_enhancements_block(store, base_control_id: str,
                             permalink_base: str = DEFAULT_PERMALINK_BASE) -> Optional[ContentBlock]:
    """List block of every document whose parent link is ``base_control_id``.

    Returns None when the base has no enhancement documents.
    """
    children = store.query_by_parent(base_control_id, order_by_label=True)
    if not children:
        return None
    return ContentBlock(
        kind="enhancements",
        heading="Enhancements",
        items=[link_entry(doc, permalink_base) for doc in children],
    )


def append_enhancements_section(store, document_id: int, base_control_id: str,
                                permalink_base: str = DEFAULT_PERMALINK_BASE) -> bool:
    """Append the enhancements block to a base document. True if appended."""
    block = build_enhancements_block(store, base_control_id, permalink_base)
    if block is None:
        return False
    store.append_content(document_id, block)
    logger.debug("Linked %d enhancement(s) to %s", len(block.items), base_control_id)
    return True
