# storefront/models/filter_config.py

"""Filter and sort configuration driven by the presentation layer."""

from dataclasses import dataclass, field
from enum import Enum

from storefront.config.settings import Settings

ALL_CATEGORIES = "all"
ANY_CURRENCY = "any"


class SortStrategy(str, Enum):
    """Closed set of catalog orderings."""

    RECOMMENDED = "recommended"
    PRICE_ASC = "price-asc"
    PRICE_DESC = "price-desc"
    FULFILLMENT = "fulfillment"


@dataclass
class FilterConfig:
    """Current filter/sort choices.

    ``category`` and ``currency`` hold either a concrete enum value or
    the wildcards :data:`ALL_CATEGORIES` / :data:`ANY_CURRENCY`.
    ``max_price`` is a ceiling in USD-equivalent terms.
    """

    search: str = Settings.DEFAULT_SEARCH
    category: str = Settings.DEFAULT_CATEGORY
    currency: str = Settings.DEFAULT_CURRENCY
    max_price: float = Settings.DEFAULT_MAX_PRICE
    sort: SortStrategy = field(
        default_factory=lambda: SortStrategy(Settings.DEFAULT_SORT)
    )
