# storefront/services/catalog_query.py

"""Single entry point for the displayed catalog view."""

from storefront.filters.product_filter import ProductFilter
from storefront.filters.product_sorter import ProductSorter
from storefront.models.filter_config import FilterConfig
from storefront.models.product import Product


class CatalogQuery:
    """Compose filtering and sorting into the current view."""

    @staticmethod
    def view(
        products: list[Product],
        config: FilterConfig,
    ) -> list[Product]:
        """Return the products matching *config*, ordered by ``config.sort``."""
        return ProductSorter.sort(
            ProductFilter.apply(products, config), config.sort
        )
