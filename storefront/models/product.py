# storefront/models/product.py

"""Product data model shared by the engine and the front ends."""

from dataclasses import dataclass
from enum import Enum


class Currency(str, Enum):
    """Currencies a product can be denominated in."""

    USD = "USD"
    BDT = "BDT"


class Category(str, Enum):
    """Fixed set of catalog categories."""

    PREMIUM_ACCOUNTS = "Premium Accounts"
    MARKETING_KITS = "Marketing Kits"
    MERCHANDISE = "Merchandise"
    BUNDLES = "Bundles"


@dataclass(frozen=True)
class Product:
    """A single dropshipping SKU as listed on the storefront."""

    id: str
    name: str
    description: str
    category: Category
    currency: Currency
    price: float
    popularity: float
    fulfillment_time: str
    min_order: int = 1
    origin: str = ""
    margin: str = ""
    badges: tuple[str, ...] = ()
    image: str = ""
