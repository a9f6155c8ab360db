# src/services/search_session.py

"""Per-user search session: catalog state plus query entry points."""

import asyncio
import logging
from collections.abc import Sequence
from dataclasses import dataclass, field

from src.catalog.catalog import Catalog
from src.catalog.loader import CatalogLoader, CatalogLoadError
from src.config.settings import Settings
from src.filters.category_filter import CategoryFilter
from src.filters.grouper import ProductGrouper
from src.models.product import GroupedProduct, ProductListing
from src.search.search_engine import SearchEngine
from src.services.recommender import Recommender

logger = logging.getLogger("pricecompare.session")


@dataclass
class SearchOutcome:
    """Everything the shell needs to render one user action."""

    label: str
    listings: list[ProductListing] = field(
        default_factory=lambda: list[ProductListing]()
    )
    results: list[GroupedProduct] = field(
        default_factory=lambda: list[GroupedProduct]()
    )
    recommendations: list[GroupedProduct] = field(
        default_factory=lambda: list[GroupedProduct]()
    )

    @property
    def is_empty(self) -> bool:
        """True when nothing matched."""
        return not self.results


class SearchSession:
    """Holds one catalog and the user's current query or category.

    Create one per user session.  The catalog is replaced only by
    :meth:`load` / :meth:`load_async`; every query rebuilds its
    outcome from scratch.
    """

    def __init__(
        self,
        catalog: Catalog | None = None,
        recommendation_limit: int = Settings.RECOMMENDATION_LIMIT,
    ) -> None:
        self.loader = CatalogLoader()
        self.recommendation_limit = recommendation_limit
        self.current_query: str = ""
        self.current_category: str = Settings.ALL_CATEGORIES
        self.last_outcome: SearchOutcome | None = None
        self._loading = False
        self._set_catalog(catalog if catalog is not None else Catalog())

    def _set_catalog(self, catalog: Catalog) -> None:
        self.catalog = catalog
        self.engine = SearchEngine(catalog)
        self.category_filter = CategoryFilter(catalog)
        self.recommender = Recommender(catalog)

    # ── Catalog loading ──────────────────────────────────

    def load(self, source: str | None = None) -> Catalog:
        """Load the catalog, leaving the session empty on failure."""
        try:
            catalog = self.loader.load(source)
        except CatalogLoadError:
            logger.error("Catalog load failed", exc_info=True)
            self._set_catalog(Catalog())
            raise
        self._set_catalog(catalog)
        return catalog

    async def load_async(self, source: str | None = None) -> Catalog:
        """Load the catalog in a worker thread; one load at a time."""
        if self._loading:
            msg = "A catalog load is already in progress"
            raise CatalogLoadError(msg)
        self._loading = True
        try:
            return await asyncio.to_thread(self.load, source)
        finally:
            self._loading = False

    @property
    def is_loading(self) -> bool:
        """True while :meth:`load_async` is pending."""
        return self._loading

    # ── Query entry points ───────────────────────────────

    def _build_outcome(
        self, label: str, listings: Sequence[ProductListing],
    ) -> SearchOutcome:
        outcome = SearchOutcome(label=label, listings=list(listings))
        if listings:
            outcome.results = ProductGrouper.group(listings)
            outcome.recommendations = self.recommender.recommend(
                listings, self.recommendation_limit
            )
        self.last_outcome = outcome
        logger.info(
            "'%s': %d listings, %d products, %d recommendations",
            label,
            len(outcome.listings),
            len(outcome.results),
            len(outcome.recommendations),
        )
        return outcome

    def perform_search(self, query: str) -> SearchOutcome:
        """Run a free-text search and derive recommendations."""
        self.current_query = query
        scored = self.engine.search(query)
        return self._build_outcome(query, [s.listing for s in scored])

    def filter_by_category(self, label: str) -> SearchOutcome:
        """Show a category (or ``"all"``) and derive recommendations."""
        self.current_category = label
        listings = self.category_filter.filter_by_category(label)
        if label in Settings.CATEGORY_MAP:
            self.current_query = label
        return self._build_outcome(label, listings)
