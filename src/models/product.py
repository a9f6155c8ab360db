# src/models/product.py

"""Catalog listing and grouped-product models shared by every module."""

from dataclasses import dataclass, field


@dataclass(frozen=True)
class ProductListing:
    """One vendor's offer of one product, as stored in the catalog.

    ``name`` is the product identity: listings with the same name are
    the same product sold by different vendors.  ``rating`` is ``None``
    when the catalog has no rating; aggregations read it through
    :meth:`rating_or_default`.
    """

    id: str | int
    name: str
    category: str
    vendor: str
    price: float
    rating: float | None = None
    image: str = ""

    RATING_DEFAULT = 0.0

    def rating_or_default(self) -> float:
        """Return the rating, or ``0.0`` when the listing has none."""
        if self.rating is None:
            return self.RATING_DEFAULT
        return self.rating


@dataclass(frozen=True)
class ScoredListing:
    """A listing paired with its relevance score for one query."""

    listing: ProductListing
    score: int


@dataclass
class VendorOffer:
    """Per-vendor view of a grouped product."""

    vendor: str
    price: float
    rating: float
    id: str | int


@dataclass
class GroupedProduct:
    """All listings sharing a name, with offers sorted by price."""

    name: str
    category: str
    image: str
    vendors: list[VendorOffer] = field(
        default_factory=lambda: list[VendorOffer]()
    )

    @property
    def lowest_price(self) -> float:
        """Cheapest offer price (0.0 for a group without offers)."""
        return min((v.price for v in self.vendors), default=0.0)

    @property
    def average_rating(self) -> float:
        """Mean rating across offers, missing ratings counted as 0."""
        if not self.vendors:
            return 0.0
        return sum(v.rating for v in self.vendors) / len(self.vendors)

    @property
    def vendor_count(self) -> int:
        """Number of vendors offering this product."""
        return len(self.vendors)
