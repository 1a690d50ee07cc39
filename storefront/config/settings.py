# storefront/config/settings.py

"""Central configuration for the dropship storefront."""

import os
from pathlib import Path

from dotenv import load_dotenv

load_dotenv()


class Settings:
    """Central configuration for the dropship storefront."""

    # --- Currency ---
    BDT_TO_USD: float = 0.0091          # Fixed rate, 1 BDT in USD

    # --- Filter defaults ---
    DEFAULT_SEARCH: str = ""
    DEFAULT_CATEGORY: str = "all"       # Wildcard
    DEFAULT_CURRENCY: str = "any"       # Wildcard
    DEFAULT_MAX_PRICE: float = 3000.0   # USD equivalent
    DEFAULT_SORT: str = "recommended"

    # --- Budget slider ---
    MAX_PRICE_FLOOR: int = 200
    MAX_PRICE_CEILING: int = 3000
    MAX_PRICE_STEP: int = 50

    # --- Registries ---
    CATEGORIES: list[dict[str, str]] = [
        {"id": "Premium Accounts", "label": "Premium accounts"},
        {"id": "Marketing Kits", "label": "Marketing kits"},
        {"id": "Merchandise", "label": "Merchandise"},
        {"id": "Bundles", "label": "Bundles"},
    ]
    CURRENCIES: list[dict[str, str]] = [
        {"id": "USD", "label": "USD denominated"},
        {"id": "BDT", "label": "BDT denominated"},
    ]
    SORT_OPTIONS: list[dict[str, str]] = [
        {"id": "recommended", "label": "Recommended"},
        {"id": "price-asc", "label": "Price: low to high"},
        {"id": "price-desc", "label": "Price: high to low"},
        {"id": "fulfillment", "label": "Fulfillment speed"},
    ]

    # --- Paths ---
    BASE_DIR: Path = Path(__file__).resolve().parent.parent.parent
    CATALOG_PATH: Path = Path(
        os.getenv(
            "STOREFRONT_CATALOG",
            str(BASE_DIR / "storefront" / "config" / "catalog.json"),
        )
    )
    # Relative to the launch directory, never inside the installed package
    LOGS_DIR: Path = Path(
        os.getenv("STOREFRONT_LOGS_DIR", str(Path.cwd() / "logs"))
    )

    # --- Logging ---
    LOG_LEVEL: str = os.getenv("STOREFRONT_LOG_LEVEL", "DEBUG").upper()


def clamp_budget(value: float) -> int:
    """Snap a requested budget onto the slider grid.

    Values are clamped to ``[MAX_PRICE_FLOOR, MAX_PRICE_CEILING]`` and
    rounded down to the nearest ``MAX_PRICE_STEP`` above the floor.
    """
    floor = Settings.MAX_PRICE_FLOOR
    ceiling = Settings.MAX_PRICE_CEILING
    step = Settings.MAX_PRICE_STEP

    bounded = min(max(value, floor), ceiling)
    steps = int((bounded - floor) // step)
    return floor + steps * step
