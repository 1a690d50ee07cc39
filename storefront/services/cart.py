# storefront/services/cart.py

"""Quote-cart selection state and derived totals."""

import logging
from collections.abc import Iterable, Iterator
from dataclasses import dataclass, field

from storefront.models.product import Currency, Product
from storefront.pricing.currency_converter import CurrencyConverter

logger = logging.getLogger("storefront.cart")


class SelectionSet:
    """Set of selected product ids.

    Ids are not checked against the catalog; unknown ids are allowed
    here and simply contribute nothing to :meth:`CartAggregator.summarize`.
    """

    def __init__(self, ids: Iterable[str] = ()) -> None:
        self._ids: set[str] = set(ids)

    def __contains__(self, product_id: object) -> bool:
        return product_id in self._ids

    def __iter__(self) -> Iterator[str]:
        return iter(self._ids)

    def __len__(self) -> int:
        return len(self._ids)

    def __eq__(self, other: object) -> bool:
        if isinstance(other, SelectionSet):
            return self._ids == other._ids
        return NotImplemented

    def __repr__(self) -> str:
        return f"SelectionSet({sorted(self._ids)!r})"

    @property
    def ids(self) -> frozenset[str]:
        """Snapshot of the selected ids."""
        return frozenset(self._ids)

    def toggle(self, product_id: str) -> bool:
        """Flip membership of *product_id*; return True if now selected."""
        if product_id in self._ids:
            self._ids.remove(product_id)
            return False
        self._ids.add(product_id)
        return True

    def select_all(self, all_ids: Iterable[str]) -> None:
        """Replace the selection with exactly *all_ids*."""
        self._ids = set(all_ids)

    def clear(self) -> None:
        """Deselect everything."""
        self._ids.clear()


@dataclass
class CartSummary:
    """Totals for the current quote cart."""

    count: int = 0
    usd_total: float = 0.0
    bdt_total: float = 0.0
    products: list[Product] = field(default_factory=list)

    @property
    def is_empty(self) -> bool:
        return self.count == 0


class CartAggregator:
    """Join a selection against the catalog and total it up."""

    @staticmethod
    def bdt_amount(product: Product) -> float:
        """Price of *product* in BDT.

        BDT items contribute their raw price; USD items are converted
        with the inverse rate. The BDT total is never derived from the
        USD total.
        """
        if product.currency == Currency.BDT:
            return product.price
        return CurrencyConverter.to_native(product.price, Currency.BDT)

    @staticmethod
    def summarize(
        products: list[Product],
        selection: Iterable[str],
    ) -> CartSummary:
        """Compute the cart summary for *selection* over *products*.

        Ids not present in *products* are ignored. The returned
        ``products`` follow catalog order.
        """
        selected_ids = set(selection)
        matched = [p for p in products if p.id in selected_ids]

        dangling = len(selected_ids) - len({p.id for p in matched})
        if dangling:
            logger.debug(
                "Ignoring %d selected ids missing from the catalog",
                dangling,
            )

        return CartSummary(
            count=len(matched),
            usd_total=sum(
                (CurrencyConverter.usd_price(p) for p in matched), 0.0
            ),
            bdt_total=sum(
                (CartAggregator.bdt_amount(p) for p in matched), 0.0
            ),
            products=matched,
        )
