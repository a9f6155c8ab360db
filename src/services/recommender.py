# src/services/recommender.py

"""Related-product suggestions drawn from the current result categories."""

import logging
from collections.abc import Sequence

from src.catalog.catalog import Catalog
from src.config.settings import Settings
from src.filters.grouper import ProductGrouper
from src.models.product import GroupedProduct, ProductListing

logger = logging.getLogger("pricecompare.recommender")


class Recommender:
    """Suggest other products from the categories of a result set."""

    def __init__(self, catalog: Catalog) -> None:
        self.catalog = catalog

    def recommend(
        self,
        current: Sequence[ProductListing],
        limit: int = Settings.RECOMMENDATION_LIMIT,
    ) -> list[GroupedProduct]:
        """Return up to *limit* grouped products not already shown.

        Categories are visited in the order they first appear in
        *current*; every product name present in *current* is
        excluded.  Candidates keep category order, then grouping
        order, and the first occurrence of each name wins.
        """
        if not current or limit <= 0:
            return []

        categories = list(dict.fromkeys(p.category for p in current))
        excluded = {p.name for p in current}

        candidates: list[GroupedProduct] = []
        for category in categories:
            similar = [
                p
                for p in self.catalog.in_categories([category])
                if p.name not in excluded
            ]
            candidates.extend(ProductGrouper.group(similar))

        seen: set[str] = set()
        unique: list[GroupedProduct] = []
        for candidate in candidates:
            if candidate.name in seen:
                continue
            seen.add(candidate.name)
            unique.append(candidate)

        picked = unique[:limit]
        logger.debug(
            "Recommendations: %d categories, %d candidates, %d returned",
            len(categories),
            len(unique),
            len(picked),
        )
        return picked
