# storefront/filters/product_sorter.py

"""Catalog ordering strategies."""

import logging

from storefront.filters.duration_parser import parse_hours
from storefront.models.filter_config import SortStrategy
from storefront.models.product import Product
from storefront.pricing.currency_converter import CurrencyConverter

logger = logging.getLogger("storefront.filters")


class ProductSorter:
    """Order products by one of the :class:`SortStrategy` members.

    Python's ``sorted`` is stable (also with ``reverse=True``), so
    products that compare equal keep their input order.
    """

    @staticmethod
    def sort(
        products: list[Product],
        strategy: SortStrategy | str,
    ) -> list[Product]:
        """Return a new list ordered by *strategy*.

        Raises:
            ValueError: *strategy* is not a known sort key.
        """
        strategy = SortStrategy(strategy)

        if strategy is SortStrategy.RECOMMENDED:
            ordered = sorted(
                products, key=lambda p: p.popularity, reverse=True
            )
        elif strategy is SortStrategy.PRICE_ASC:
            ordered = sorted(products, key=CurrencyConverter.usd_price)
        elif strategy is SortStrategy.PRICE_DESC:
            ordered = sorted(
                products, key=CurrencyConverter.usd_price, reverse=True
            )
        elif strategy is SortStrategy.FULFILLMENT:
            ordered = sorted(
                products, key=lambda p: parse_hours(p.fulfillment_time)
            )
        else:
            msg = f"Unhandled sort strategy: {strategy}"
            raise ValueError(msg)

        logger.debug(
            "Sorted %d products by %s", len(ordered), strategy.value
        )
        return ordered
