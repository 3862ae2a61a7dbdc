#!/usr/bin/env python3
# CUI // SP-CTI
"""Shared pytest fixtures for the OSCAL Pages test suite.

Centralizes the sample catalog, temporary document stores and display
configuration so the per-module test files stay short.
"""

import copy
import sys
from pathlib import Path

import pytest

# Ensure project root is on sys.path
BASE_DIR = Path(__file__).resolve().parent.parent
if str(BASE_DIR) not in sys.path:
    sys.path.insert(0, str(BASE_DIR))

from oscal_pages.catalog.models import DisplayRow
from oscal_pages.config.display_config import DisplayConfig
from oscal_pages.db.document_store import DocumentStore


# ---------------------------------------------------------------------------
# Sample catalog (subset of NIST SP 800-53 Rev 5 shapes)
# ---------------------------------------------------------------------------
SAMPLE_CATALOG = {
    "catalog": {
        "uuid": "a1b2c3d4-0000-0000-0000-000000000000",
        "metadata": {"title": "Test Catalog", "version": "5.1.1"},
        "groups": [
            {
                "id": "ac",
                "title": "Access Control",
                "controls": [
                    {
                        "id": "ac-1",
                        "title": "Policy and Procedures",
                        "props": [
                            {"name": "label", "value": "AC-1"},
                            {"name": "label", "class": "zero-padded", "value": "AC-01"},
                            {"name": "implementation-level", "value": "organization"},
                            {"name": "contributor", "value": "NIST"},
                            {"name": "contributor", "value": "DoD"},
                        ],
                        "params": [
                            {
                                "id": "ac-01_odp.01",
                                "props": [{"name": "alt-identifier", "value": "ac-1_prm_1"}],
                                "label": "personnel or roles",
                            },
                            {
                                "id": "ac-01_odp.02",
                                "select": {
                                    "how-many": "one-or-more",
                                    "choice": ["Organization-level", "Mission-level"],
                                },
                            },
                            {"id": "ac-01_odp.03", "values": ["annually"]},
                        ],
                        "parts": [
                            {
                                "id": "ac-1_smt",
                                "name": "statement",
                                "parts": [
                                    {
                                        "id": "ac-1_smt.a",
                                        "name": "item",
                                        "props": [{"name": "label", "value": "a."}],
                                        "prose": "Develop and disseminate to {{ insert: param, ac-1_prm_1 }}:",
                                        "parts": [
                                            {
                                                "id": "ac-1_smt.a.1",
                                                "name": "item",
                                                "props": [{"name": "label", "value": "1."}],
                                                "prose": "{{ insert: param, ac-01_odp.02 }} access control policy",
                                            },
                                        ],
                                    },
                                    {
                                        "id": "ac-1_smt.b",
                                        "name": "item",
                                        "props": [{"name": "label", "value": "b."}],
                                        "prose": "Review the policy {{ insert: param, ac-01_odp.03 }}.",
                                    },
                                ],
                            },
                            {"name": "guidance", "prose": "Access control policy guidance."},
                            {"name": "discussion", "prose": "Policies address access control."},
                            {"name": "assessment-objective", "prose": "Determine if the policy exists."},
                            {"name": "x-custom", "prose": "Custom extra content."},
                        ],
                        "controls": [
                            {
                                "id": "ac-1.2",
                                "title": "Second Enhancement",
                                "props": [{"name": "label", "class": "zero-padded", "value": "AC-01(02)"}],
                                "parts": [{"name": "statement", "prose": "Second enhancement statement."}],
                            },
                            {
                                "id": "ac-1.1",
                                "title": "First Enhancement",
                                "props": [{"name": "label", "class": "zero-padded", "value": "AC-01(01)"}],
                                "parts": [{"name": "statement", "prose": "First enhancement statement."}],
                            },
                        ],
                    },
                    {
                        "id": "ac-10",
                        "title": "Concurrent Session Control",
                        "props": [{"name": "label", "class": "zero-padded", "value": "AC-10"}],
                        "parts": [{"name": "statement", "prose": "Limit concurrent sessions."}],
                    },
                    {
                        "id": "ac-2",
                        "title": "Account Management",
                        "props": [{"name": "label", "class": "zero-padded", "value": "AC-02"}],
                        "parts": [{"name": "statement", "prose": "Manage system accounts."}],
                    },
                ],
            },
            {
                "id": "au",
                "title": "Audit and Accountability",
                "controls": [
                    {
                        "id": "au-2",
                        "title": "Event Logging",
                        "props": [{"name": "label", "class": "zero-padded", "value": "AU-02"}],
                        "parts": [{"name": "statement", "prose": "Identify the types of events."}],
                    },
                ],
            },
        ],
    }
}


@pytest.fixture
def sample_catalog():
    """A fresh deep copy of the sample catalog (tests may mutate it)."""
    return copy.deepcopy(SAMPLE_CATALOG)


@pytest.fixture
def store(tmp_path):
    """Document store backed by a temporary SQLite file."""
    return DocumentStore(str(tmp_path / "oscal_pages_test.db"))


@pytest.fixture
def display_config():
    """Display config with two header rows and one extras row."""
    return DisplayConfig(
        header_rows=[
            DisplayRow("implementation-level", "Implementation Level"),
            DisplayRow("contributor", "Contributor"),
        ],
        extras_rows=[DisplayRow("assessment-objective", "Assessment Objective")],
    )
