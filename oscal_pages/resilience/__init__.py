#!/usr/bin/env python3
# CUI // SP-CTI
"""OSCAL Pages Resilience Package — structured errors for catalog imports."""

from oscal_pages.resilience.errors import (  # noqa: F401
    CatalogError,
    CatalogParseError,
    ConfigurationError,
    DocumentStoreError,
    MalformedCatalogError,
    UnsupportedFormatError,
)
