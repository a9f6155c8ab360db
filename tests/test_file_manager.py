# tests/test_file_manager.py

"""Tests for the FileManager export module."""

import csv
import json
import tempfile
import unittest
from pathlib import Path
from typing import Any

from src.models.product import GroupedProduct, VendorOffer
from src.storage.file_manager import FileManager


class TestFileManager(unittest.TestCase):
    """Tests for JSON save and CSV export."""

    def setUp(self) -> None:
        """Set up a temp directory for results."""
        self.tmp_dir = Path(tempfile.mkdtemp())
        self.fm = FileManager(self.tmp_dir)

    def _sample_groups(self) -> list[GroupedProduct]:
        """Return a small list of grouped products."""
        return [
            GroupedProduct(
                name="Phone X",
                category="Smartphones",
                image="phone-x.jpg",
                vendors=[
                    VendorOffer(vendor="B", price=90.0, rating=4.0, id=2),
                    VendorOffer(vendor="A", price=100.0, rating=0.0, id=1),
                ],
            ),
            GroupedProduct(
                name="Tablet Y",
                category="Smartphones",
                image="",
                vendors=[
                    VendorOffer(vendor="A", price=200.0, rating=3.5, id=3),
                ],
            ),
        ]

    def test_save_json_writes_groups(self) -> None:
        """save_json writes products with nested vendor offers."""
        path = self.fm.save_json("phone x", self._sample_groups())

        self.assertTrue(path.exists())
        self.assertTrue(path.name.startswith("results_phone_x_"))
        with open(path, encoding="utf-8") as f:
            data: list[dict[str, Any]] = json.load(f)
        self.assertEqual(len(data), 2)
        self.assertEqual(data[0]["name"], "Phone X")
        self.assertEqual(data[0]["vendors"][0]["vendor"], "B")

    def test_save_json_empty_list(self) -> None:
        """An empty result set still produces a file."""
        path = self.fm.save_json("", [])
        self.assertIn("_all_", path.name)
        with open(path, encoding="utf-8") as f:
            self.assertEqual(json.load(f), [])

    def test_export_csv_one_row_per_offer(self) -> None:
        """export_csv writes a header and one row per vendor offer."""
        path = self.fm.export_csv("Smartphones", self._sample_groups())

        self.assertTrue(path.name.endswith(".csv"))
        with open(path, newline="", encoding="utf-8") as f:
            rows = list(csv.reader(f))
        self.assertEqual(rows[0][0], "Product")
        self.assertEqual(len(rows), 4)
        self.assertEqual(rows[1][:4], ["Phone X", "Smartphones", "B", "90.0"])

    def test_default_dir_from_settings(self) -> None:
        """Without an explicit dir, results land in RESULTS_DIR."""
        from src.config.settings import Settings

        fm = FileManager()
        self.assertEqual(fm.results_dir, Settings.RESULTS_DIR)
        self.assertTrue(fm.results_dir.exists())


if __name__ == "__main__":
    unittest.main()
