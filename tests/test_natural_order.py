# CUI // SP-CTI
"""Tests for oscal_pages.catalog.natural — label ordering."""

import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).resolve().parent.parent))

from oscal_pages.catalog.natural import natural_key, natural_sorted


class TestNaturalSorted:
    def test_numbers_compare_numerically(self):
        assert natural_sorted(["AC-10", "AC-2", "AC-1"]) == ["AC-1", "AC-2", "AC-10"]

    def test_enhancement_labels(self):
        labels = ["AC-1(10)", "AC-1(2)", "AC-1", "AC-1(1)"]
        assert natural_sorted(labels) == ["AC-1", "AC-1(1)", "AC-1(2)", "AC-1(10)"]

    def test_case_insensitive(self):
        assert natural_sorted(["b", "A", "c"]) == ["A", "b", "c"]

    def test_with_key(self):
        items = [{"l": "SI-10"}, {"l": "SI-4"}]
        assert natural_sorted(items, key=lambda d: d["l"]) == [{"l": "SI-4"}, {"l": "SI-10"}]

    def test_key_shape(self):
        assert natural_key("AC-01(02)") == ["ac-", 1, "(", 2, ")"]
        assert natural_key(None) == [""]
