# src/catalog/loader.py

"""Load the product catalog from a JSON file or an HTTP(S) URL."""

import json
import logging
import math
from pathlib import Path
from typing import Any

from curl_cffi import requests as curl_requests

from src.catalog.catalog import Catalog
from src.config.settings import Settings
from src.models.product import ProductListing

logger = logging.getLogger("pricecompare.catalog")

_REQUIRED_FIELDS = ("id", "name", "category", "vendor", "price")


class CatalogLoadError(Exception):
    """The catalog source was unreachable or could not be parsed."""


def _is_url(source: str) -> bool:
    return source.lower().startswith(("http://", "https://"))


def _to_number(raw: Any) -> float | None:
    """Coerce a JSON number to float; ``None`` for bools, NaN and infinity."""
    if isinstance(raw, bool):
        return None
    try:
        value = float(raw)
    except (TypeError, ValueError):
        return None
    if not math.isfinite(value):
        return None
    return value


def parse_listing(record: Any) -> ProductListing | None:
    """Build a listing from one raw record, or ``None`` if malformed."""
    if not isinstance(record, dict):
        return None
    if any(record.get(key) in (None, "") for key in _REQUIRED_FIELDS):
        return None

    price = _to_number(record["price"])
    if price is None or price < 0:
        return None

    raw_rating = record.get("rating")
    rating: float | None = None
    if raw_rating is not None:
        rating = _to_number(raw_rating)
        if rating is None or not 0 <= rating <= 5:
            return None

    return ProductListing(
        id=record["id"],
        name=str(record["name"]),
        category=str(record["category"]),
        vendor=str(record["vendor"]),
        price=price,
        rating=rating,
        image=str(record.get("image") or ""),
    )


class CatalogLoader:
    """Fetch and parse a catalog document into a :class:`Catalog`.

    Accepted documents are ``{"products": [...]}`` or a bare list of
    records.  Malformed records are dropped and counted; anything that
    prevents reading the document raises :class:`CatalogLoadError`.
    """

    def __init__(self) -> None:
        self.settings = Settings()

    def _fetch_url(self, url: str) -> Any:
        """GET *url* once and decode the JSON body."""
        session = curl_requests.Session(
            impersonate=self.settings.IMPERSONATE_BROWSER
        )
        try:
            resp = session.get(
                url,
                headers=self.settings.DEFAULT_HEADERS,
                timeout=self.settings.REQUEST_TIMEOUT,
            )
        except Exception as exc:
            msg = f"Could not reach catalog at {url}: {exc}"
            raise CatalogLoadError(msg) from exc
        finally:
            session.close()

        if resp.status_code != 200:
            msg = f"Catalog request to {url} returned HTTP {resp.status_code}"
            raise CatalogLoadError(msg)

        try:
            return json.loads(resp.text)
        except json.JSONDecodeError as exc:
            msg = f"Catalog at {url} is not valid JSON: {exc}"
            raise CatalogLoadError(msg) from exc

    @staticmethod
    def _read_file(path: Path) -> Any:
        """Read and decode a JSON catalog file."""
        try:
            with open(path, encoding="utf-8") as f:
                return json.load(f)
        except OSError as exc:
            msg = f"Could not read catalog file {path}: {exc}"
            raise CatalogLoadError(msg) from exc
        except (UnicodeDecodeError, json.JSONDecodeError) as exc:
            msg = f"Catalog file {path} is not valid UTF-8 JSON: {exc}"
            raise CatalogLoadError(msg) from exc

    @staticmethod
    def parse_document(document: Any) -> Catalog:
        """Turn a decoded JSON document into a catalog."""
        if isinstance(document, dict):
            records = document.get("products")
        else:
            records = document
        if not isinstance(records, list):
            msg = "Catalog document has no 'products' list"
            raise CatalogLoadError(msg)

        listings: list[ProductListing] = []
        dropped = 0
        for index, record in enumerate(records):
            listing = parse_listing(record)
            if listing is None:
                logger.debug(
                    "Skipped malformed catalog record #%d: %r",
                    index,
                    record,
                )
                dropped += 1
                continue
            listings.append(listing)

        if dropped:
            logger.info(
                "Catalog parsing dropped %d malformed records",
                dropped,
            )
        return Catalog(listings)

    def load(self, source: str | None = None) -> Catalog:
        """Load the catalog from *source* (defaults to settings)."""
        target = source or self.settings.CATALOG_SOURCE
        logger.info("Loading catalog from %s", target)

        if _is_url(target):
            document = self._fetch_url(target)
        else:
            document = self._read_file(Path(target))

        catalog = self.parse_document(document)
        logger.info("Products loaded: %d", len(catalog))
        return catalog
