# tests/test_product_model.py

"""Tests for the listing and grouped-product models."""

import dataclasses
import unittest

from src.models.product import (
    GroupedProduct,
    ProductListing,
    ScoredListing,
    VendorOffer,
)


class TestProductListing(unittest.TestCase):
    """ProductListing behaviour."""

    def test_defaults(self) -> None:
        """Rating defaults to None and image to empty string."""
        p = ProductListing(
            id=1, name="Phone X", category="Phones", vendor="A", price=10.0
        )
        self.assertIsNone(p.rating)
        self.assertEqual(p.image, "")
        self.assertEqual(p.rating_or_default(), 0.0)

    def test_rating_kept_when_present(self) -> None:
        """A present rating is returned unchanged."""
        p = ProductListing(
            id=1, name="X", category="C", vendor="A", price=1.0, rating=4.5
        )
        self.assertEqual(p.rating_or_default(), 4.5)

    def test_immutable(self) -> None:
        """Listings cannot be modified after loading."""
        p = ProductListing(id=1, name="X", category="C", vendor="A", price=1.0)
        with self.assertRaises(dataclasses.FrozenInstanceError):
            p.price = 2.0  # type: ignore[misc]


class TestScoredListing(unittest.TestCase):
    """ScoredListing wrapper."""

    def test_holds_listing_and_score(self) -> None:
        """The listing is reachable only through ``.listing``."""
        p = ProductListing(id=7, name="X", category="C", vendor="A", price=1.0)
        s = ScoredListing(p, 13)
        self.assertIs(s.listing, p)
        self.assertEqual((s.listing.id, s.listing.name, s.score), (7, "X", 13))

    def test_listing_fields_not_forwarded(self) -> None:
        """Listing fields are not readable on the wrapper itself."""
        p = ProductListing(id=7, name="X", category="C", vendor="A", price=1.0)
        with self.assertRaises(AttributeError):
            _ = ScoredListing(p, 1).name  # type: ignore[attr-defined]


class TestGroupedProduct(unittest.TestCase):
    """GroupedProduct derived properties."""

    def test_properties(self) -> None:
        """Lowest price, average rating and vendor count."""
        g = GroupedProduct(
            name="X",
            category="C",
            image="",
            vendors=[
                VendorOffer(vendor="B", price=90.0, rating=4.0, id=2),
                VendorOffer(vendor="A", price=100.0, rating=3.0, id=1),
            ],
        )
        self.assertEqual(g.lowest_price, 90.0)
        self.assertEqual(g.average_rating, 3.5)
        self.assertEqual(g.vendor_count, 2)

    def test_empty_group_properties(self) -> None:
        """An offer-less group reports zeros."""
        g = GroupedProduct(name="X", category="C", image="")
        self.assertEqual(g.lowest_price, 0.0)
        self.assertEqual(g.average_rating, 0.0)
        self.assertEqual(g.vendor_count, 0)


if __name__ == "__main__":
    unittest.main()
