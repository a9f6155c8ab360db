# src/filters/grouper.py

"""Merge listings from different vendors into one product per name."""

import logging
from collections.abc import Iterable

from src.models.product import GroupedProduct, ProductListing, VendorOffer

logger = logging.getLogger("pricecompare.filters")


class ProductGrouper:
    """Group listings by product name, cheapest vendor first."""

    @staticmethod
    def _offer(listing: ProductListing) -> VendorOffer:
        return VendorOffer(
            vendor=listing.vendor,
            price=listing.price,
            rating=listing.rating_or_default(),
            id=listing.id,
        )

    @staticmethod
    def group(
        listings: Iterable[ProductListing],
    ) -> list[GroupedProduct]:
        """Group *listings* by name.

        Groups come out in the order each name is first seen.  The
        first listing of a name supplies the group's category and
        image; later listings that disagree are logged and otherwise
        ignored for those two fields.  Offers are sorted ascending by
        price, equal prices keeping input order.
        """
        order: list[str] = []
        groups: dict[str, GroupedProduct] = {}

        for listing in listings:
            group = groups.get(listing.name)
            if group is None:
                group = GroupedProduct(
                    name=listing.name,
                    category=listing.category,
                    image=listing.image,
                )
                groups[listing.name] = group
                order.append(listing.name)
            elif (
                listing.category != group.category
                or listing.image != group.image
            ):
                logger.warning(
                    "Listing %s of '%s' disagrees with first-seen "
                    "category/image (%s, %s); keeping first-seen",
                    listing.id,
                    listing.name,
                    listing.category,
                    listing.image,
                )
            group.vendors.append(ProductGrouper._offer(listing))

        result: list[GroupedProduct] = []
        for name in order:
            group = groups[name]
            group.vendors.sort(key=lambda v: v.price)
            result.append(group)
        return result
