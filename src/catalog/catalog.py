# src/catalog/catalog.py

"""Read-only, in-memory snapshot of the product catalog."""

from collections.abc import Iterable, Iterator

from src.models.product import ProductListing


class Catalog:
    """Immutable sequence of catalog listings in source order."""

    def __init__(
        self, listings: Iterable[ProductListing] = (),
    ) -> None:
        self._listings: tuple[ProductListing, ...] = tuple(listings)

    def __iter__(self) -> Iterator[ProductListing]:
        return iter(self._listings)

    def __len__(self) -> int:
        return len(self._listings)

    def __bool__(self) -> bool:
        return bool(self._listings)

    @property
    def listings(self) -> tuple[ProductListing, ...]:
        """All listings, in the order the source supplied them."""
        return self._listings

    def in_categories(
        self, categories: Iterable[str],
    ) -> list[ProductListing]:
        """Return listings whose category is in *categories*."""
        wanted = set(categories)
        return [p for p in self._listings if p.category in wanted]
