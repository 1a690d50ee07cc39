# storefront/storage/catalog_loader.py

"""Load the static product catalog from disk."""

import json
import logging
from pathlib import Path
from typing import Any

from storefront.config.settings import Settings
from storefront.filters.catalog_validator import CatalogValidator
from storefront.models.product import Category, Currency, Product

logger = logging.getLogger("storefront.storage")

_REQUIRED_KEYS = (
    "id",
    "name",
    "description",
    "category",
    "currency",
    "price",
    "popularity",
    "fulfillmentTime",
)


class CatalogError(ValueError):
    """The catalog file cannot be turned into products."""


def product_from_dict(record: dict[str, Any], index: int = 0) -> Product:
    """Build a :class:`Product` from one catalog record.

    Raises:
        CatalogError: a required key is missing or a value has the
            wrong shape.
    """
    if not isinstance(record, dict):
        msg = f"Record {index}: expected an object, got {type(record).__name__}"
        raise CatalogError(msg)

    missing = [key for key in _REQUIRED_KEYS if key not in record]
    if missing:
        msg = f"Record {index}: missing keys {', '.join(missing)}"
        raise CatalogError(msg)

    try:
        return Product(
            id=str(record["id"]),
            name=str(record["name"]),
            description=str(record["description"]),
            category=Category(record["category"]),
            currency=Currency(record["currency"]),
            price=float(record["price"]),
            popularity=float(record["popularity"]),
            fulfillment_time=str(record["fulfillmentTime"]),
            min_order=int(record.get("minOrder", 1)),
            origin=str(record.get("origin", "")),
            margin=str(record.get("margin", "")),
            badges=tuple(str(b) for b in record.get("badges") or ()),
            image=str(record.get("image", "")),
        )
    except (TypeError, ValueError) as exc:
        msg = f"Record {index} ({record.get('id')!r}): {exc}"
        raise CatalogError(msg) from exc


def product_to_dict(product: Product) -> dict[str, object]:
    """Serialise a product using the catalog file's key names."""
    return {
        "id": product.id,
        "name": product.name,
        "description": product.description,
        "category": product.category.value,
        "currency": product.currency.value,
        "price": product.price,
        "popularity": product.popularity,
        "fulfillmentTime": product.fulfillment_time,
        "minOrder": product.min_order,
        "origin": product.origin,
        "margin": product.margin,
        "badges": list(product.badges),
        "image": product.image,
    }


class CatalogLoader:
    """Read a JSON catalog into validated products."""

    def __init__(self, path: Path | None = None) -> None:
        self.path: Path = path if path is not None else Settings.CATALOG_PATH

    def load(self) -> list[Product]:
        """Read, parse and validate the catalog file.

        Raises:
            CatalogError: the file is missing, is not a JSON list, or
                holds a malformed record.
        """
        logger.debug("Loading catalog from %s", self.path)
        try:
            with open(self.path, encoding="utf-8") as f:
                raw = json.load(f)
        except FileNotFoundError as exc:
            msg = f"Catalog file not found: {self.path}"
            raise CatalogError(msg) from exc
        except json.JSONDecodeError as exc:
            msg = f"Catalog file is not valid JSON: {self.path} ({exc})"
            raise CatalogError(msg) from exc

        if not isinstance(raw, list):
            msg = f"Catalog must be a JSON list, got {type(raw).__name__}"
            raise CatalogError(msg)

        products = [
            product_from_dict(record, idx)
            for idx, record in enumerate(raw)
        ]
        valid, dropped = CatalogValidator.validate(products)

        logger.info(
            "Loaded %d products from %s (%d dropped)",
            len(valid),
            self.path,
            dropped,
        )
        return valid
