# src/filters/category_filter.py

"""Map user-facing category labels onto catalog category labels."""

import logging

from src.catalog.catalog import Catalog
from src.config.settings import Settings
from src.models.product import ProductListing

logger = logging.getLogger("pricecompare.filters")


class CategoryFilter:
    """Filter catalog listings by a user-facing category label."""

    def __init__(self, catalog: Catalog) -> None:
        self.catalog = catalog
        self.settings = Settings()

    def labels(self) -> list[str]:
        """User-facing labels in display order, ``"all"`` first."""
        return [self.settings.ALL_CATEGORIES, *self.settings.CATEGORY_MAP]

    def is_known(self, label: str) -> bool:
        """True for ``"all"`` and every mapped label."""
        return (
            label == self.settings.ALL_CATEGORIES
            or label in self.settings.CATEGORY_MAP
        )

    def filter_by_category(self, label: str) -> list[ProductListing]:
        """Return listings under *label*, preserving catalog order.

        ``"all"`` returns the whole catalog; an unknown label returns
        an empty list.
        """
        if label == self.settings.ALL_CATEGORIES:
            return list(self.catalog)

        mapped = self.settings.CATEGORY_MAP.get(label)
        if mapped is None:
            logger.info("Unknown category label '%s'", label)
            return []

        return self.catalog.in_categories(mapped)
