# storefront/ui/app.py

"""Terminal storefront for the dropship catalog."""

import logging
from typing import cast

from rich.text import Text
from textual.app import App, ComposeResult
from textual.binding import Binding
from textual.containers import Container, Horizontal, Vertical
from textual.widgets import (
    Button,
    DataTable,
    Footer,
    Header,
    Input,
    Select,
    Static,
)

from storefront.config.settings import Settings, clamp_budget
from storefront.models.filter_config import ALL_CATEGORIES, ANY_CURRENCY
from storefront.models.product import Currency, Product
from storefront.services.storefront_session import StorefrontSession
from storefront.storage.catalog_loader import CatalogLoader
from storefront.ui.formatting import format_manifest_tsv, format_price

logger = logging.getLogger("storefront.ui")

_BRIEFING_MESSAGE = (
    "We will assemble your Bangladesh fulfillment brief and email you "
    "shipping quotes within 24 hours."
)


class StorefrontApp(App[object]):
    """Terminal storefront: browse, filter and build a quote cart."""

    CSS_PATH = "styles.tcss"
    TITLE = "Dropship Storefront"

    BINDINGS = [
        Binding("q", "quit", "Quit"),
        Binding("space", "toggle_row", "Add/Remove"),
        Binding("a", "select_all", "Add catalog"),
        Binding("x", "clear_selection", "Clear cart"),
        Binding("r", "reset_filters", "Reset filters"),
        Binding("c", "copy_manifest", "Copy manifest"),
        Binding("b", "request_briefing", "Briefing"),
    ]

    def __init__(self, products: list[Product] | None = None) -> None:
        super().__init__()
        if products is None:
            products = CatalogLoader().load()
        self.session = StorefrontSession(products)
        self.shown: list[Product] = []

    def compose(self) -> ComposeResult:
        """Build the widget tree for the storefront."""
        filters = self.session.filters
        category_options = [("All categories", ALL_CATEGORIES)] + [
            (c["label"], c["id"]) for c in Settings.CATEGORIES
        ]
        currency_options = [("Any currency", ANY_CURRENCY)] + [
            (c["label"], c["id"]) for c in Settings.CURRENCIES
        ]
        sort_options = [
            (s["label"], s["id"]) for s in Settings.SORT_OPTIONS
        ]

        yield Header()
        yield Container(
            Static(
                "🎧 Spotify-first Bangladesh dropship partner", id="title"
            ),

            # Filter bar
            Horizontal(
                Input(
                    placeholder="Search SKUs, badges...",
                    value=filters.search,
                    id="search_input",
                ),
                Select(
                    category_options,
                    value=filters.category,
                    allow_blank=False,
                    id="category_select",
                ),
                Select(
                    currency_options,
                    value=filters.currency,
                    allow_blank=False,
                    id="currency_select",
                ),
                Select(
                    sort_options,
                    value=filters.sort.value,
                    allow_blank=False,
                    id="sort_select",
                ),
                id="filter_bar",
            ),

            # Budget cap (USD equivalent)
            Horizontal(
                Static("Cap budget (USD equivalent)", id="budget_label"),
                Input(
                    value=str(int(filters.max_price)),
                    type="integer",
                    id="max_price_input",
                ),
                Button("Reset filters", id="reset_btn"),
                id="budget_bar",
            ),

            Static("Ready", id="status"),

            Horizontal(
                cast(
                    DataTable[str | Text],
                    DataTable(
                        id="catalog_table",
                        zebra_stripes=True,
                        cursor_type="row",
                    ),
                ),
                Vertical(
                    Static("Quote cart summary", id="cart_title"),
                    Static("", id="cart_summary"),
                    Static("", id="cart_manifest"),
                    Button(
                        "Add full catalog",
                        variant="success",
                        id="select_all_btn",
                    ),
                    Button("Clear selection", id="clear_btn"),
                    Button(
                        "Request fulfillment briefing",
                        variant="primary",
                        id="briefing_btn",
                    ),
                    id="cart_panel",
                ),
                id="body",
            ),
            id="main_container",
        )
        yield Footer()

    def on_mount(self) -> None:
        """Configure the catalog table and render the initial view."""
        table = self._table()
        table.add_columns(
            "", "Name", "Category", "Price", "Min order", "Fulfillment", "Origin"
        )
        self.refresh_view()

    # ── Rendering ────────────────────────────────────────

    def _table(self) -> DataTable[str | Text]:
        return cast(
            DataTable[str | Text],
            self.query_one("#catalog_table", DataTable),
        )

    def refresh_view(self) -> None:
        """Recompute the view and cart from the session and redraw."""
        self.shown = self.session.view()
        self.populate_table()
        self.update_cart()

        status = self.query_one("#status", Static)
        if self.shown:
            status.update(
                f"Showing {len(self.shown)} of "
                f"{len(self.session.products)} SKUs"
            )
        else:
            status.update("No SKUs match the current filters")

    def populate_table(self) -> None:
        """Fill the DataTable with the current view."""
        table = self._table()
        cursor_row = table.cursor_row
        table.clear()

        for p in self.shown:
            selected = self.session.is_selected(p.id)
            table.add_row(
                Text("✓", style="bold green") if selected else "",
                Text(p.name[:48], style="bold" if selected else ""),
                p.category.value,
                format_price(p.price, p.currency),
                str(p.min_order),
                p.fulfillment_time,
                p.origin,
                key=p.id,
            )

        if self.shown:
            table.move_cursor(row=min(cursor_row, len(self.shown) - 1))

    def cart_text(self) -> str:
        """Plain-text cart totals, as shown in the summary panel."""
        summary = self.session.cart()
        return (
            f"Selected SKUs: {summary.count}\n"
            f"Est. wholesale USD: "
            f"{format_price(summary.usd_total, Currency.USD)}\n"
            f"Est. wholesale BDT: "
            f"{format_price(summary.bdt_total, Currency.BDT)}"
        )

    def update_cart(self) -> None:
        """Redraw the quote-cart panel."""
        summary = self.session.cart()
        self.query_one("#cart_summary", Static).update(self.cart_text())

        manifest = self.query_one("#cart_manifest", Static)
        if summary.is_empty:
            manifest.update(
                "Select SKUs to generate a shipping-ready manifest."
            )
        else:
            manifest.update(
                "\n".join(
                    f"• {p.name} ({p.category.value}, "
                    f"min {p.min_order})"
                    for p in summary.products
                )
            )

    # ── Filter events ────────────────────────────────────

    def on_input_changed(self, event: Input.Changed) -> None:
        """Live-filter on search text and budget edits."""
        if event.input.id == "search_input":
            self.session.update_filters(search=event.value)
            self.refresh_view()
        elif event.input.id == "max_price_input":
            try:
                budget = float(event.value)
            except ValueError:
                return
            self.session.update_filters(max_price=clamp_budget(budget))
            self.refresh_view()

    def on_input_submitted(self, event: Input.Submitted) -> None:
        """Snap the budget input onto the slider grid."""
        if event.input.id == "max_price_input":
            event.input.value = str(int(self.session.filters.max_price))

    def on_select_changed(self, event: Select.Changed) -> None:
        """Apply category, currency and sort choices."""
        if event.value is Select.BLANK:
            return
        field_by_id = {
            "category_select": "category",
            "currency_select": "currency",
            "sort_select": "sort",
        }
        field_name = field_by_id.get(event.select.id or "")
        if field_name is None:
            return
        self.session.update_filters(**{field_name: event.value})
        self.refresh_view()

    # ── Buttons and table ────────────────────────────────

    def on_button_pressed(self, event: Button.Pressed) -> None:
        """Handle button click events."""
        if event.button.id == "select_all_btn":
            self.action_select_all()
        elif event.button.id == "clear_btn":
            self.action_clear_selection()
        elif event.button.id == "reset_btn":
            self.action_reset_filters()
        elif event.button.id == "briefing_btn":
            self.action_request_briefing()

    def on_data_table_row_selected(
        self, event: DataTable.RowSelected
    ) -> None:
        """Enter on a row adds/removes it from the quote cart."""
        if 0 <= event.cursor_row < len(self.shown):
            self._toggle(self.shown[event.cursor_row])

    def _toggle(self, product: Product) -> None:
        selected = self.session.toggle(product.id)
        verb = "Added" if selected else "Removed"
        self.notify(f"{verb} {product.name}", timeout=2)
        self.refresh_view()

    # ── Actions ──────────────────────────────────────────

    def action_toggle_row(self) -> None:
        """Add or remove the highlighted SKU."""
        row = self._table().cursor_row
        if 0 <= row < len(self.shown):
            self._toggle(self.shown[row])

    def action_select_all(self) -> None:
        """Add the full catalog (not only the filtered view)."""
        self.session.select_all()
        self.refresh_view()

    def action_clear_selection(self) -> None:
        self.session.clear_selection()
        self.refresh_view()

    def action_reset_filters(self) -> None:
        """Restore default filters and sync the widgets."""
        filters = self.session.reset_filters()
        self.query_one("#search_input", Input).value = filters.search
        self.query_one("#max_price_input", Input).value = str(
            int(filters.max_price)
        )
        self.query_one("#category_select", Select).value = filters.category
        self.query_one("#currency_select", Select).value = filters.currency
        self.query_one("#sort_select", Select).value = filters.sort.value
        self.refresh_view()

    def action_request_briefing(self) -> None:
        """Acknowledge a briefing request; nothing is sent anywhere."""
        if self.session.cart().is_empty:
            self.notify("Add SKUs to the quote cart first", severity="warning")
            return
        logger.info(
            "Briefing requested for %d SKUs", self.session.cart().count
        )
        self.notify(_BRIEFING_MESSAGE)

    def action_copy_manifest(self) -> None:
        """Copy the quote manifest as TSV to the clipboard."""
        summary = self.session.cart()
        if summary.is_empty:
            self.notify("Quote cart is empty", severity="warning")
            return
        try:
            import pyperclip  # type: ignore[import-untyped]

            pyperclip.copy(format_manifest_tsv(summary))
            self.notify(f"Copied manifest ({summary.count} SKUs)")
        except Exception:
            logger.error(
                "Failed to copy manifest to clipboard",
                exc_info=True,
            )
            self.notify(
                "Clipboard unavailable", severity="warning"
            )
