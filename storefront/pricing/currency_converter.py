# storefront/pricing/currency_converter.py

"""Fixed-rate conversion between USD and BDT."""

from storefront.config.settings import Settings
from storefront.models.product import Currency, Product


class CurrencyConverter:
    """Convert amounts between the two supported currencies.

    No rounding happens here; display formatting rounds.
    """

    @staticmethod
    def to_usd(amount: float, currency: Currency | str) -> float:
        """Express *amount* (denominated in *currency*) in USD."""
        if currency == Currency.USD:
            return amount
        if currency == Currency.BDT:
            return amount * Settings.BDT_TO_USD
        msg = f"Unsupported currency: {currency!r}"
        raise ValueError(msg)

    @staticmethod
    def to_native(usd_amount: float, target: Currency | str) -> float:
        """Express a USD amount in *target* currency."""
        if target == Currency.USD:
            return usd_amount
        if target == Currency.BDT:
            return usd_amount / Settings.BDT_TO_USD
        msg = f"Unsupported currency: {target!r}"
        raise ValueError(msg)

    @staticmethod
    def usd_price(product: Product) -> float:
        """Return the product's USD-equivalent price."""
        return CurrencyConverter.to_usd(product.price, product.currency)
