# storefront/services/storefront_session.py

"""Presentation-side state holder shared by the TUI and the CLI."""

import dataclasses
import logging
from typing import Any

from storefront.models.filter_config import FilterConfig, SortStrategy
from storefront.models.product import Product
from storefront.services.cart import CartAggregator, CartSummary, SelectionSet
from storefront.services.catalog_query import CatalogQuery

logger = logging.getLogger("storefront.session")


class StorefrontSession:
    """Own the catalog, the filter choices and the quote-cart selection.

    The catalog is read-only for the lifetime of the session. Each
    interaction replaces or mutates the filter/selection state in one
    step, then :meth:`view` and :meth:`cart` are recomputed from that
    snapshot.
    """

    def __init__(
        self,
        products: list[Product],
        filters: FilterConfig | None = None,
        selection: SelectionSet | None = None,
    ) -> None:
        self.products: tuple[Product, ...] = tuple(products)
        self.filters = filters if filters is not None else FilterConfig()
        self.selection = (
            selection if selection is not None else SelectionSet()
        )
        logger.debug(
            "Session started with %d products", len(self.products)
        )

    # ── Derived views ────────────────────────────────────

    def view(self) -> list[Product]:
        """Filtered, sorted products for display."""
        return CatalogQuery.view(list(self.products), self.filters)

    def cart(self) -> CartSummary:
        """Totals for the current selection."""
        return CartAggregator.summarize(list(self.products), self.selection)

    def is_selected(self, product_id: str) -> bool:
        return product_id in self.selection

    # ── Filter changes ───────────────────────────────────

    def update_filters(self, **changes: Any) -> FilterConfig:
        """Apply field changes to the filter config and return it.

        Raises:
            TypeError: a keyword is not a ``FilterConfig`` field.
            ValueError: ``sort`` is not a known strategy.
        """
        if "sort" in changes:
            changes["sort"] = SortStrategy(changes["sort"])
        self.filters = dataclasses.replace(self.filters, **changes)
        logger.debug("Filters updated: %s", self.filters)
        return self.filters

    def reset_filters(self) -> FilterConfig:
        """Restore the default filter config."""
        self.filters = FilterConfig()
        logger.debug("Filters reset to defaults")
        return self.filters

    # ── Selection changes ────────────────────────────────

    def toggle(self, product_id: str) -> bool:
        """Toggle one product; return True if it is now selected."""
        selected = self.selection.toggle(product_id)
        logger.debug(
            "%s %s", "Selected" if selected else "Deselected", product_id
        )
        return selected

    def select_all(self) -> None:
        """Select the whole catalog, regardless of the active filters."""
        self.selection.select_all(p.id for p in self.products)
        logger.debug("Selected full catalog (%d ids)", len(self.selection))

    def clear_selection(self) -> None:
        self.selection.clear()
        logger.debug("Selection cleared")
