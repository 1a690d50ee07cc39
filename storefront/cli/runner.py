# storefront/cli/runner.py

"""Headless catalog runner: print the current view and quote cart."""

import json
import logging
import sys
from pathlib import Path

from rich.console import Console
from rich.table import Table

from storefront.models.product import Currency, Product
from storefront.services.cart import CartSummary
from storefront.services.storefront_session import StorefrontSession
from storefront.storage.catalog_loader import (
    CatalogError,
    CatalogLoader,
    product_to_dict,
)
from storefront.ui.formatting import (
    format_cart_totals,
    format_manifest_tsv,
    format_price,
)

logger = logging.getLogger("storefront.cli")

# Stderr console for status messages so stdout stays clean for JSON
_err = Console(stderr=True)


def parse_id_list(id_csv: str | None) -> list[str]:
    """Split a comma-separated id list, dropping blanks."""
    if not id_csv:
        return []
    return [i.strip() for i in id_csv.split(",") if i.strip()]


def _summary_to_dict(summary: CartSummary) -> dict[str, object]:
    """Serialise a cart summary for JSON output."""
    return {
        "count": summary.count,
        "usdTotal": summary.usd_total,
        "bdtTotal": summary.bdt_total,
        "productIds": [p.id for p in summary.products],
    }


def _print_table(
    products: list[Product],
    summary: CartSummary,
    session: StorefrontSession,
) -> None:
    """Render the catalog view and cart totals as Rich tables."""
    table = Table(
        title="Catalog",
        show_lines=True,
        title_style="bold green",
    )
    table.add_column("#", style="dim", width=4)
    table.add_column("", width=2)
    table.add_column("Name", max_width=44)
    table.add_column("Category", style="magenta")
    table.add_column("Price", justify="right", style="green")
    table.add_column("Min order", justify="right")
    table.add_column("Fulfillment")
    table.add_column("Origin", style="dim")

    for idx, p in enumerate(products, 1):
        table.add_row(
            str(idx),
            "✓" if session.is_selected(p.id) else "",
            p.name,
            p.category.value,
            format_price(p.price, p.currency),
            str(p.min_order),
            p.fulfillment_time,
            p.origin,
        )

    console = Console()
    console.print(table)

    cart = Table(title="Quote cart", title_style="bold green")
    cart.add_column("Selected SKUs", justify="right")
    cart.add_column("Est. wholesale USD", justify="right")
    cart.add_column("Est. wholesale BDT", justify="right")
    cart.add_row(
        str(summary.count),
        format_price(summary.usd_total, Currency.USD),
        format_price(summary.bdt_total, Currency.BDT),
    )
    console.print(cart)


def cli_view(
    search: str | None,
    category: str,
    currency: str,
    max_price: float,
    sort: str,
    select_csv: str | None,
    select_all: bool,
    output_format: str,
    catalog_path: str | None,
) -> int:
    """Print the filtered/sorted catalog and cart; return an exit code."""
    loader = CatalogLoader(Path(catalog_path) if catalog_path else None)
    try:
        products = loader.load()
    except CatalogError as exc:
        logger.error("Catalog load failed: %s", exc, exc_info=True)
        _err.print(f"[red]Catalog load failed: {exc}[/red]")
        return 1

    session = StorefrontSession(products)
    session.update_filters(
        search=search or "",
        category=category,
        currency=currency,
        max_price=max_price,
        sort=sort,
    )

    if select_all:
        session.select_all()
    for product_id in parse_id_list(select_csv):
        if product_id not in session.selection:
            session.toggle(product_id)

    known_ids = {p.id for p in session.products}
    unknown = sorted(i for i in session.selection if i not in known_ids)
    if unknown:
        _err.print(
            f"[yellow]Not in catalog, ignored: {', '.join(unknown)}[/yellow]"
        )

    view = session.view()
    summary = session.cart()

    _err.print(
        f"[bold]Catalog:[/bold] {len(view)} of {len(products)} products  "
        f"[dim]sort={session.filters.sort.value}[/dim]"
    )
    if not summary.is_empty:
        _err.print(f"[green]Cart: {format_cart_totals(summary)}[/green]")

    if output_format == "table":
        _print_table(view, summary, session)
    elif output_format == "tsv":
        sys.stdout.write(format_manifest_tsv(summary))
        sys.stdout.write("\n")
    else:
        json.dump(
            {
                "products": [product_to_dict(p) for p in view],
                "cart": _summary_to_dict(summary),
            },
            sys.stdout,
            ensure_ascii=False,
            indent=2,
        )
        sys.stdout.write("\n")

    if not view:
        _err.print("[yellow]No products match the current filters.[/yellow]")
        return 1
    return 0
