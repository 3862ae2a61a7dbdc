# CUI // SP-CTI
"""Depth-first walk of the catalog tree, one document per control.

Order per control:
    1. create the control's document
    2. walk each enhancement, passing this control as parent
    3. for a base control, append the enhancements cross-reference

so every enhancement document is queryable before its base is indexed.
"""

import logging
from typing import Optional, Sequence

from oscal_pages.catalog.assembler import build_document
from oscal_pages.catalog.enhancements import DEFAULT_PERMALINK_BASE, append_enhancements_section
from oscal_pages.catalog.models import ControlNode, DisplayRow, Group, field_list
from oscal_pages.resilience.errors import DocumentStoreError

logger = logging.getLogger(__name__)


class ControlWalker:
    """Walk groups and controls, writing documents to a store.

    Args:
        store: Document store (create / query_by_parent / append_content).
        header_rows: Ordered header-field mapping rows.
        extras_rows: Ordered extras-label mapping rows.
        permalink_base: URL prefix used for enhancement links.
    """

    def __init__(self, store, header_rows: Sequence[DisplayRow] = (),
                 extras_rows: Sequence[DisplayRow] = (),
                 permalink_base: str = DEFAULT_PERMALINK_BASE):
        self.store = store
        self.header_rows = list(header_rows)
        self.extras_rows = list(extras_rows)
        self.permalink_base = permalink_base
        self.skipped = 0

    def walk_groups(self, raw_groups) -> int:
        """Process every control of every group. Returns documents created."""
        created = 0
        for raw_group in raw_groups:
            if not isinstance(raw_group, dict):
                logger.warning("Skipping group entry that is not a mapping: %r", raw_group)
                continue
            group = Group.from_dict(raw_group)
            raw_controls = field_list(raw_group, "controls", "control")
            logger.info("Group %s (%s): %d control(s)", group.id or "?", group.title, len(raw_controls))
            for raw_control in raw_controls:
                if not isinstance(raw_control, dict):
                    logger.warning("Skipping control entry in group %s that is not a mapping", group.id)
                    self.skipped += 1
                    continue
                created += self.process_control(ControlNode.from_dict(raw_control), group)
        return created

    def process_control(self, control: ControlNode, group: Group,
                        parent: Optional[ControlNode] = None) -> int:
        """Create this control's document, then its enhancements'. Returns count."""
        count = 0
        doc_id = self._create_document(control, group, parent)
        if doc_id:
            count += 1

        for child in control.children:
            count += self.process_control(child, group, control)

        if control.children and doc_id and parent is None and control.id:
            append_enhancements_section(self.store, doc_id, control.id, self.permalink_base)
        return count

    def _create_document(self, control, group, parent):
        document = build_document(control, group, parent, self.header_rows, self.extras_rows)
        try:
            return self.store.create(document)
        except DocumentStoreError as exc:
            logger.warning("Skipping control %s: %s", control.id or document.title, exc)
            self.skipped += 1
            return None
