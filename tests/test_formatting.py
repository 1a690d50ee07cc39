# tests/test_formatting.py

"""Tests for price, cart and manifest formatting."""

import unittest

from storefront.models.product import Category, Currency, Product
from storefront.services.cart import CartAggregator, CartSummary
from storefront.ui.formatting import (
    format_cart_totals,
    format_manifest_tsv,
    format_price,
)


def _make(product_id: str, price: float, currency: Currency) -> Product:
    """Create a minimal Product."""
    return Product(
        id=product_id,
        name=f"Item {product_id}",
        description="",
        category=Category.BUNDLES,
        currency=currency,
        price=price,
        popularity=1,
        fulfillment_time="3-5 days",
        min_order=5,
    )


class TestFormatPrice(unittest.TestCase):
    """format_price per currency."""

    def test_usd_two_decimals(self) -> None:
        self.assertEqual(format_price(1480, Currency.USD), "$1,480.00")

    def test_usd_rounds_cents(self) -> None:
        self.assertEqual(format_price(19.104, "USD"), "$19.10")

    def test_bdt_whole_taka(self) -> None:
        self.assertEqual(format_price(2098.9, Currency.BDT), "৳2,099")

    def test_zero(self) -> None:
        self.assertEqual(format_price(0, Currency.USD), "$0.00")

    def test_unknown_currency(self) -> None:
        with self.assertRaises(ValueError):
            format_price(1, "EUR")


class TestFormatCartTotals(unittest.TestCase):
    """format_cart_totals one-liner."""

    def test_empty(self) -> None:
        self.assertEqual(
            format_cart_totals(CartSummary()), "0 SKUs · $0.00 · ৳0"
        )

    def test_singular(self) -> None:
        summary = CartSummary(count=1, usd_total=10, bdt_total=1098.9)
        self.assertEqual(
            format_cart_totals(summary), "1 SKU · $10.00 · ৳1,099"
        )


class TestFormatManifestTsv(unittest.TestCase):
    """format_manifest_tsv rows."""

    def test_header_rows_and_totals(self) -> None:
        products = [
            _make("a", 1000, Currency.BDT),
            _make("b", 10, Currency.USD),
        ]
        summary = CartAggregator.summarize(products, {"a", "b"})
        lines = format_manifest_tsv(summary).split("\n")

        self.assertTrue(lines[0].startswith("ID\tName\t"))
        self.assertEqual(len(lines), 1 + 2 + 2)
        self.assertEqual(
            lines[1].split("\t"),
            ["a", "Item a", "Bundles", "1000", "BDT", "5", "3-5 days"],
        )
        self.assertIn("19.10\tUSD", lines[3])
        self.assertIn("2099\tBDT", lines[4])

    def test_every_row_has_same_column_count(self) -> None:
        summary = CartAggregator.summarize(
            [_make("a", 1, Currency.USD)], {"a"}
        )
        widths = {
            len(line.split("\t"))
            for line in format_manifest_tsv(summary).split("\n")
        }
        self.assertEqual(widths, {7})

    def test_empty_summary(self) -> None:
        lines = format_manifest_tsv(CartSummary()).split("\n")
        self.assertEqual(len(lines), 3)


if __name__ == "__main__":
    unittest.main()
