# src/ui/presenter.py

"""Turn grouped products into display-ready card views."""

from dataclasses import dataclass, field

from src.config.settings import Settings
from src.models.product import GroupedProduct


@dataclass
class VendorRow:
    """One vendor line on a product card."""

    vendor: str
    price: str
    rating: str
    is_best: bool


@dataclass
class ProductCard:
    """A grouped product ready for rendering."""

    name: str
    category: str
    image: str
    average_rating: str
    vendor_count: int
    vendors: list[VendorRow] = field(
        default_factory=lambda: list[VendorRow]()
    )


@dataclass
class RecommendationCard:
    """Compact view of a suggested product."""

    name: str
    category: str
    image: str
    price: str


def _group_indian(digits: str) -> str:
    """Insert commas the Indian way: last three digits, then pairs."""
    if len(digits) <= 3:
        return digits
    head, tail = digits[:-3], digits[-3:]
    pairs: list[str] = []
    while len(head) > 2:
        pairs.insert(0, head[-2:])
        head = head[:-2]
    if head:
        pairs.insert(0, head)
    return ",".join(pairs) + "," + tail


def format_price(price: float) -> str:
    """Format a price like ``₹1,23,456`` or ``₹1,299.50``."""
    negative = price < 0
    amount = f"{abs(price):.2f}"
    whole, fraction = amount.split(".")
    text = _group_indian(whole)
    fraction = fraction.rstrip("0")
    if fraction:
        text = f"{text}.{fraction}"
    sign = "-" if negative else ""
    return f"{sign}{Settings.CURRENCY_SYMBOL}{text}"


def resolve_image(image: str) -> str:
    """Prefix bare image filenames with the local image directory."""
    if not image or image.startswith("http"):
        return image
    return Settings.IMAGE_PREFIX + image


def build_card(group: GroupedProduct) -> ProductCard:
    """Build the full comparison card for a grouped product."""
    lowest = group.lowest_price
    return ProductCard(
        name=group.name,
        category=group.category,
        image=resolve_image(group.image),
        average_rating=f"{group.average_rating:.1f}",
        vendor_count=group.vendor_count,
        vendors=[
            VendorRow(
                vendor=v.vendor,
                price=format_price(v.price),
                rating=f"{v.rating:.1f}",
                is_best=v.price == lowest,
            )
            for v in group.vendors
        ],
    )


def build_recommendation(group: GroupedProduct) -> RecommendationCard:
    """Build the compact suggestion card for a grouped product."""
    return RecommendationCard(
        name=group.name,
        category=group.category,
        image=resolve_image(group.image),
        price=format_price(group.lowest_price),
    )
