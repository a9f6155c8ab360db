# src/config/settings.py

"""Central configuration for the pricecompare engine."""

import os
from pathlib import Path

from curl_cffi.requests import BrowserTypeLiteral
from dotenv import load_dotenv

load_dotenv()


class Settings:
    """Central configuration for the pricecompare engine."""

    # --- Paths ---
    BASE_DIR: Path = Path(__file__).resolve().parent.parent.parent
    DATA_DIR: Path = BASE_DIR / "data"
    RESULTS_DIR: Path = BASE_DIR / "results"
    LOGS_DIR: Path = BASE_DIR / "logs"

    # --- Catalog source ---
    CATALOG_SOURCE: str = os.getenv(
        "PRICECOMPARE_CATALOG", str(DATA_DIR / "data.json")
    )
    REQUEST_TIMEOUT: int = int(
        os.getenv("PRICECOMPARE_REQUEST_TIMEOUT", "15")
    )                                   # Seconds before a fetch times out
    IMPERSONATE_BROWSER: BrowserTypeLiteral = "chrome131"
    DEFAULT_HEADERS: dict[str, str] = {
        "Accept": "application/json,text/plain;q=0.9,*/*;q=0.8",
        "Accept-Language": "en-US,en;q=0.9",
    }

    # --- Scoring ---
    SUBSTRING_SCORE: int = 10           # Term inside name or category
    PREFIX_SCORE: int = 5               # Term/word prefix either way
    TYPO_SCORE: int = 3                 # Close edit distance bonus
    TYPO_MAX_DISTANCE: int = 2
    TYPO_MIN_TERM_LENGTH: int = 4       # Shorter terms get no typo bonus

    # --- Recommendations ---
    RECOMMENDATION_LIMIT: int = 6

    # --- Categories (user-facing label -> catalog labels) ---
    ALL_CATEGORIES: str = "all"
    CATEGORY_MAP: dict[str, list[str]] = {
        "Smartphones": ["Smartphones", "Mobiles", "Phones"],
        "Laptops": ["Laptops", "Computers", "Electronics"],
        "Audio": ["Audio", "Headphones", "Earbuds", "Speakers"],
        "Cameras": ["Cameras", "Camera"],
        "Gaming": ["Gaming", "Consoles"],
        "Wearables": [
            "Wearables",
            "Smartwatches",
            "Fitness Bands",
            "Watches",
        ],
    }

    # --- Presentation ---
    CURRENCY_SYMBOL: str = "₹"
    IMAGE_PREFIX: str = "images/"
