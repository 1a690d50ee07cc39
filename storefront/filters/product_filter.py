# storefront/filters/product_filter.py

"""Catalog filtering by category, currency, budget and free text."""

import logging

from storefront.models.filter_config import (
    ALL_CATEGORIES,
    ANY_CURRENCY,
    FilterConfig,
)
from storefront.models.product import Product
from storefront.pricing.currency_converter import CurrencyConverter

logger = logging.getLogger("storefront.filters")


class ProductFilter:
    """Select the products that satisfy every active filter."""

    @staticmethod
    def _search_text(product: Product) -> str:
        """Lower-cased haystack of name, description and badge labels."""
        return " ".join(
            [product.name, product.description, " ".join(product.badges)]
        ).lower()

    @staticmethod
    def matches(product: Product, config: FilterConfig) -> bool:
        """Return True when *product* passes all criteria in *config*."""
        if (
            config.category != ALL_CATEGORIES
            and product.category != config.category
        ):
            return False

        if (
            config.currency != ANY_CURRENCY
            and product.currency != config.currency
        ):
            return False

        if CurrencyConverter.usd_price(product) > config.max_price:
            return False

        needle = config.search.strip().lower()
        if not needle:
            return True
        return needle in ProductFilter._search_text(product)

    @staticmethod
    def apply(
        products: list[Product],
        config: FilterConfig,
    ) -> list[Product]:
        """Return the matching products, keeping their input order."""
        kept = [p for p in products if ProductFilter.matches(p, config)]

        excluded = len(products) - len(kept)
        if excluded:
            logger.debug(
                "Filtered out %d of %d products "
                "(category=%s, currency=%s, max_price=%s, search=%r)",
                excluded,
                len(products),
                config.category,
                config.currency,
                config.max_price,
                config.search,
            )

        return kept
