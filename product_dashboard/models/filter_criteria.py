# product_dashboard/models/filter_criteria.py

"""Search and category criteria for the filtered product view."""

from dataclasses import dataclass

# Category sentinel meaning "no category filter"; never a real category.
ALL_CATEGORIES = "all"


@dataclass(frozen=True)
class FilterCriteria:
    """Current search text and selected category."""

    search_term: str = ""
    category: str = ALL_CATEGORIES

    @property
    def is_active(self) -> bool:
        """True when either criterion narrows the product list."""
        return bool(self.search_term) or self.category != ALL_CATEGORIES
