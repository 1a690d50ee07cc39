# storefront/filters/catalog_validator.py

"""Record-level checks applied to a freshly loaded catalog."""

import logging
import math

from storefront.models.product import Product

logger = logging.getLogger("storefront.filters")


class CatalogValidator:
    """Drop products that would break catalog invariants."""

    @staticmethod
    def validate(
        products: list[Product],
    ) -> tuple[list[Product], int]:
        """Drop blank/duplicate ids, negative prices and bad minimum orders.

        The first record for a given id wins. Returns the valid products
        and the count of dropped records.
        """
        valid: list[Product] = []
        seen_ids: set[str] = set()
        dropped = 0

        for product in products:
            if not product.id.strip():
                logger.debug(
                    "Dropped product with blank id (name=%s)",
                    product.name,
                )
                dropped += 1
                continue
            if product.id in seen_ids:
                logger.debug(
                    "Dropped duplicate product id %s (name=%s)",
                    product.id,
                    product.name,
                )
                dropped += 1
                continue
            if not math.isfinite(product.price) or product.price < 0:
                logger.debug(
                    "Dropped product with invalid price "
                    "(id=%s, price=%s)",
                    product.id,
                    product.price,
                )
                dropped += 1
                continue
            if not math.isfinite(product.popularity):
                logger.debug(
                    "Dropped product with non-finite popularity "
                    "(id=%s, popularity=%s)",
                    product.id,
                    product.popularity,
                )
                dropped += 1
                continue
            if product.min_order < 1:
                logger.debug(
                    "Dropped product with non-positive minimum order "
                    "(id=%s, min_order=%s)",
                    product.id,
                    product.min_order,
                )
                dropped += 1
                continue
            seen_ids.add(product.id)
            valid.append(product)

        if dropped:
            logger.info(
                "Catalog validation dropped %d invalid products",
                dropped,
            )

        return valid, dropped
