#!/usr/bin/env python3
# CUI // SP-CTI
"""OSCAL Pages — Structured Exception Hierarchy.

Fatal errors (parse failure, unsupported format, malformed catalog) are
raised before any previously generated documents are purged. Per-control
problems are absorbed by the walker and never surface as exceptions.

Usage:
    from oscal_pages.resilience.errors import MalformedCatalogError

    raise MalformedCatalogError("Catalog missing groups[].", source="catalog.yaml")
"""


class CatalogError(Exception):
    """Base exception for all catalog import and rendering errors.

    Attributes:
        source: Path or name of the input that caused the error (may be empty).
        retryable: Whether the caller should retry the operation.
    """

    def __init__(self, message: str, source: str = "", retryable: bool = False):
        super().__init__(message)
        self.source = source
        self.retryable = retryable


class CatalogParseError(CatalogError):
    """The raw YAML/JSON input could not be parsed.

    The message is already truncated for display.
    """


class UnsupportedFormatError(CatalogError):
    """The input is neither YAML nor JSON (by extension or content sniffing)."""

    def __init__(self, message: str, source: str = "", extension: str = ""):
        super().__init__(message, source=source)
        self.extension = extension


class MalformedCatalogError(CatalogError):
    """The parsed input has no usable structure (e.g. missing catalog.groups)."""


class DocumentStoreError(CatalogError):
    """A write to the document store failed.

    Examples: duplicate slug, unknown document id on append.
    """

    def __init__(self, message: str, document_id=None):
        super().__init__(message, source="store")
        self.document_id = document_id


class ConfigurationError(CatalogError):
    """Display configuration is missing or invalid."""

    def __init__(self, message: str, config_key: str = ""):
        super().__init__(message, source="config")
        self.config_key = config_key
