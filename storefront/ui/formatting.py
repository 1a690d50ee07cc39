# storefront/ui/formatting.py

"""Display formatting shared by the TUI and the CLI."""

from storefront.models.product import Currency
from storefront.services.cart import CartSummary

_SYMBOLS = {Currency.USD: "$", Currency.BDT: "৳"}
_DECIMALS = {Currency.USD: 2, Currency.BDT: 0}


def format_price(amount: float, currency: Currency | str) -> str:
    """Format an amount with its currency symbol.

    USD keeps cents, BDT is shown in whole taka.
    """
    currency = Currency(currency)
    decimals = _DECIMALS[currency]
    return f"{_SYMBOLS[currency]}{amount:,.{decimals}f}"


def format_cart_totals(summary: CartSummary) -> str:
    """One-line cart summary, e.g. ``3 SKUs · $1,250.00 · ৳137,363``."""
    noun = "SKU" if summary.count == 1 else "SKUs"
    return (
        f"{summary.count} {noun} · "
        f"{format_price(summary.usd_total, Currency.USD)} · "
        f"{format_price(summary.bdt_total, Currency.BDT)}"
    )


def _plain_number(value: float) -> str:
    """Render whole amounts without a trailing `.0`."""
    if float(value).is_integer():
        return str(int(value))
    return str(value)


def format_manifest_tsv(summary: CartSummary) -> str:
    """Quote manifest as tab-separated text, in catalog order."""
    lines: list[str] = [
        "ID\tName\tCategory\tPrice\tCurrency\tMin order\tFulfillment",
    ]
    for p in summary.products:
        lines.append(
            f"{p.id}\t{p.name}\t{p.category.value}\t{_plain_number(p.price)}"
            f"\t{p.currency.value}\t{p.min_order}\t{p.fulfillment_time}"
        )
    lines.append(
        f"TOTAL\t{summary.count} SKUs\t\t{summary.usd_total:.2f}\tUSD\t\t"
    )
    lines.append(
        f"TOTAL\t{summary.count} SKUs\t\t{summary.bdt_total:.0f}\tBDT\t\t"
    )
    return "\n".join(lines)
