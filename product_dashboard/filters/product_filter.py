# product_dashboard/filters/product_filter.py

"""Search-text and category filtering of the product list."""

import logging

from product_dashboard.models.filter_criteria import (
    ALL_CATEGORIES,
    FilterCriteria,
)
from product_dashboard.models.product import Product

logger = logging.getLogger("product_dashboard.filters")


class ProductFilter:
    """Derive the filtered view from the authoritative product list."""

    @staticmethod
    def matches(product: Product, criteria: FilterCriteria) -> bool:
        """Return True if *product* satisfies both criteria.

        The search term matches as a case-insensitive substring of the
        title or the description; the category must match exactly
        unless it is the ``"all"`` sentinel.
        """
        if criteria.search_term:
            needle = criteria.search_term.lower()
            if (
                needle not in product.title.lower()
                and needle not in product.description.lower()
            ):
                return False
        if criteria.category != ALL_CATEGORIES:
            return product.category == criteria.category
        return True

    @staticmethod
    def apply(
        products: list[Product],
        criteria: FilterCriteria,
    ) -> list[Product]:
        """Return the products matching *criteria*, in their original order."""
        if not criteria.is_active:
            return list(products)

        kept = [
            p for p in products if ProductFilter.matches(p, criteria)
        ]
        logger.debug(
            "Filter search=%r category=%r kept %d of %d products",
            criteria.search_term,
            criteria.category,
            len(kept),
            len(products),
        )
        return kept
