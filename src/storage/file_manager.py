# src/storage/file_manager.py

"""Export grouped comparison results to disk."""

import csv
import json
import logging
from dataclasses import asdict
from datetime import datetime
from pathlib import Path

from src.config.settings import Settings
from src.models.product import GroupedProduct

logger = logging.getLogger("pricecompare.storage")


def _slug(label: str) -> str:
    return "_".join(label.split()) or "all"


class FileManager:
    """Writes grouped results as timestamped JSON or CSV files."""

    def __init__(self, results_dir: Path | None = None) -> None:
        self.results_dir: Path = results_dir or Settings.RESULTS_DIR
        self.results_dir.mkdir(parents=True, exist_ok=True)
        logger.debug("FileManager initialised — results_dir=%s", self.results_dir)

    def _path(self, prefix: str, label: str, suffix: str) -> Path:
        timestamp = datetime.now().strftime("%Y%m%d_%H%M%S")
        return self.results_dir / f"{prefix}_{_slug(label)}_{timestamp}.{suffix}"

    def save_json(
        self, label: str, groups: list[GroupedProduct],
    ) -> Path:
        """Save grouped products, vendors included, as JSON."""
        filepath = self._path("results", label, "json")
        data = [asdict(g) for g in groups]

        with open(filepath, "w", encoding="utf-8") as f:
            json.dump(data, f, ensure_ascii=False, indent=2)

        logger.info(
            "Saved %d products for '%s' to %s",
            len(groups),
            label,
            filepath,
        )
        return filepath

    def export_csv(
        self, label: str, groups: list[GroupedProduct],
    ) -> Path:
        """Export one CSV row per vendor offer, grouped by product."""
        filepath = self._path("export", label, "csv")

        with open(filepath, "w", newline="", encoding="utf-8") as f:
            writer = csv.writer(f)
            writer.writerow(
                ["Product", "Category", "Vendor", "Price", "Rating", "Listing ID"]
            )
            for g in groups:
                for v in g.vendors:
                    writer.writerow(
                        [g.name, g.category, v.vendor, v.price, v.rating, v.id]
                    )

        logger.info(
            "Exported %d products for '%s' to %s",
            len(groups),
            label,
            filepath,
        )
        return filepath
