# tests/test_settings.py

"""Tests for the Settings configuration class."""

import unittest
from pathlib import Path

from src.config.settings import Settings


class TestSettings(unittest.TestCase):
    """Verify Settings constants and the category registry."""

    def test_scoring_weights(self) -> None:
        """Default weights are 10 / 5 / 3."""
        self.assertEqual(Settings.SUBSTRING_SCORE, 10)
        self.assertEqual(Settings.PREFIX_SCORE, 5)
        self.assertEqual(Settings.TYPO_SCORE, 3)

    def test_typo_thresholds(self) -> None:
        """Typo bonus: distance <= 2, terms longer than 3 chars."""
        self.assertEqual(Settings.TYPO_MAX_DISTANCE, 2)
        self.assertEqual(Settings.TYPO_MIN_TERM_LENGTH, 4)

    def test_recommendation_limit(self) -> None:
        """Six recommendations by default."""
        self.assertEqual(Settings.RECOMMENDATION_LIMIT, 6)

    def test_category_map_labels(self) -> None:
        """Exactly the six user-facing labels are mapped."""
        self.assertEqual(
            list(Settings.CATEGORY_MAP),
            ["Smartphones", "Laptops", "Audio", "Cameras", "Gaming", "Wearables"],
        )

    def test_each_label_covers_itself(self) -> None:
        """Every label maps onto at least its own catalog name."""
        for label, mapped in Settings.CATEGORY_MAP.items():
            with self.subTest(label=label):
                self.assertIn(label, mapped)
                self.assertEqual(len(mapped), len(set(mapped)))

    def test_all_is_not_a_mapped_label(self) -> None:
        """'all' is handled separately from the map."""
        self.assertEqual(Settings.ALL_CATEGORIES, "all")
        self.assertNotIn("all", Settings.CATEGORY_MAP)

    def test_request_timeout_positive(self) -> None:
        """REQUEST_TIMEOUT must be a positive integer."""
        self.assertIsInstance(Settings.REQUEST_TIMEOUT, int)
        self.assertGreater(Settings.REQUEST_TIMEOUT, 0)

    def test_paths_are_paths(self) -> None:
        """Directory settings are Path objects."""
        for attr in ("BASE_DIR", "DATA_DIR", "RESULTS_DIR", "LOGS_DIR"):
            with self.subTest(attr=attr):
                self.assertIsInstance(getattr(Settings, attr), Path)


if __name__ == "__main__":
    unittest.main()
