# tests/test_catalog_query.py

"""Tests for the CatalogQuery view composition."""

import math
import unittest

from storefront.models.filter_config import FilterConfig, SortStrategy
from storefront.models.product import Category, Currency, Product
from storefront.services.cart import CartAggregator, SelectionSet
from storefront.services.catalog_query import CatalogQuery


def _make(
    product_id: str,
    price: float,
    currency: Currency,
    popularity: float,
    category: Category = Category.MERCHANDISE,
    fulfillment_time: str = "1 day",
) -> Product:
    """Create a minimal Product."""
    return Product(
        id=product_id,
        name=f"Product {product_id}",
        description="",
        category=category,
        currency=currency,
        price=price,
        popularity=popularity,
        fulfillment_time=fulfillment_time,
    )


class TestTwoProductScenario(unittest.TestCase):
    """One BDT and one USD product at BDT_TO_USD = 0.0091."""

    def setUp(self) -> None:
        self.a = _make("A", 1000, Currency.BDT, popularity=5)
        self.b = _make("B", 10, Currency.USD, popularity=9)
        self.products = [self.a, self.b]

    def test_budget_of_five_excludes_both(self) -> None:
        """A is 9.1 USD and B is 10 USD; a 5 USD cap keeps neither."""
        config = FilterConfig(max_price=5)
        self.assertEqual(CatalogQuery.view(self.products, config), [])

    def test_budget_of_ten_keeps_both(self) -> None:
        config = FilterConfig(max_price=10)
        self.assertEqual(
            CatalogQuery.view(self.products, config), [self.b, self.a]
        )

    def test_budget_between_excludes_b(self) -> None:
        """9.5 USD admits A (9.1) but not B (10)."""
        config = FilterConfig(max_price=9.5)
        self.assertEqual(CatalogQuery.view(self.products, config), [self.a])

    def test_usd_currency_filter_yields_b(self) -> None:
        config = FilterConfig(currency="USD", max_price=10)
        self.assertEqual(CatalogQuery.view(self.products, config), [self.b])

    def test_recommended_order(self) -> None:
        """Popularity 9 before 5."""
        config = FilterConfig(max_price=math.inf)
        self.assertEqual(
            CatalogQuery.view(self.products, config), [self.b, self.a]
        )

    def test_price_ascending_order(self) -> None:
        config = FilterConfig(
            max_price=math.inf, sort=SortStrategy.PRICE_ASC
        )
        self.assertEqual(
            CatalogQuery.view(self.products, config), [self.a, self.b]
        )

    def test_cart_for_both(self) -> None:
        summary = CartAggregator.summarize(
            self.products, SelectionSet(["A", "B"])
        )
        self.assertEqual(summary.count, 2)
        self.assertAlmostEqual(summary.usd_total, 19.1)
        self.assertAlmostEqual(summary.bdt_total, 2098.9, places=1)


class TestView(unittest.TestCase):
    """General CatalogQuery.view behaviour."""

    def setUp(self) -> None:
        self.products = [
            _make("m1", 40, Currency.USD, 3, fulfillment_time="5 days"),
            _make(
                "p1",
                600,
                Currency.USD,
                8,
                category=Category.PREMIUM_ACCOUNTS,
                fulfillment_time="24 hours",
            ),
            _make("m2", 4_000, Currency.BDT, 6, fulfillment_time="2-3 days"),
            _make("m3", 90, Currency.USD, 6, fulfillment_time="unknown"),
        ]

    def test_filter_then_sort(self) -> None:
        config = FilterConfig(
            category=Category.MERCHANDISE.value,
            sort=SortStrategy.FULFILLMENT,
        )
        view = CatalogQuery.view(self.products, config)
        self.assertEqual([p.id for p in view], ["m2", "m1", "m3"])

    def test_sort_key_as_plain_string(self) -> None:
        config = FilterConfig()
        config.sort = "price-desc"  # type: ignore[assignment]
        view = CatalogQuery.view(self.products, config)
        self.assertEqual([p.id for p in view], ["p1", "m3", "m1", "m2"])

    def test_recommended_ties_keep_catalog_order(self) -> None:
        view = CatalogQuery.view(self.products, FilterConfig())
        self.assertEqual([p.id for p in view], ["p1", "m2", "m3", "m1"])

    def test_pure(self) -> None:
        """Same inputs, same outputs; inputs untouched."""
        config = FilterConfig(sort=SortStrategy.PRICE_ASC)
        before = list(self.products)
        first = CatalogQuery.view(self.products, config)
        second = CatalogQuery.view(self.products, config)
        self.assertEqual(first, second)
        self.assertEqual(self.products, before)
        self.assertEqual(config, FilterConfig(sort=SortStrategy.PRICE_ASC))

    def test_unknown_sort_raises(self) -> None:
        config = FilterConfig()
        config.sort = "newest"  # type: ignore[assignment]
        with self.assertRaises(ValueError):
            CatalogQuery.view(self.products, config)


if __name__ == "__main__":
    unittest.main()
