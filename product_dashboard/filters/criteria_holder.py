# product_dashboard/filters/criteria_holder.py

"""Holder for the dashboard's current filter criteria."""

import logging
from dataclasses import replace
from typing import Protocol

from product_dashboard.models.filter_criteria import (
    ALL_CATEGORIES,
    FilterCriteria,
)

logger = logging.getLogger("product_dashboard.filters")


class FilterTarget(Protocol):
    """Anything that can recompute a view from criteria (the store)."""

    def apply_filter(self, criteria: FilterCriteria) -> None: ...


class FilterCriteriaHolder:
    """Keep the search text and category, re-filtering on every change.

    Each setter applies the new criteria to the target immediately and
    synchronously; there is no debouncing.
    """

    def __init__(self, target: FilterTarget) -> None:
        self._target = target
        self._criteria = FilterCriteria()

    @property
    def criteria(self) -> FilterCriteria:
        return self._criteria

    @property
    def is_active(self) -> bool:
        """True when a "clear filters" action would change anything."""
        return self._criteria.is_active

    def set_search_term(self, search_term: str) -> None:
        self._update(replace(self._criteria, search_term=search_term))

    def set_category(self, category: str) -> None:
        self._update(replace(self._criteria, category=category))

    def clear_search(self) -> None:
        """Empty the search text, keeping the selected category."""
        self._update(replace(self._criteria, search_term=""))

    def clear_filters(self) -> None:
        """Reset to an empty search across all categories."""
        self._update(FilterCriteria())

    @staticmethod
    def category_options(categories: list[str]) -> list[str]:
        """Category choices for a selector, led by the "all" sentinel."""
        return [ALL_CATEGORIES] + [
            c for c in categories if c != ALL_CATEGORIES
        ]

    def _update(self, criteria: FilterCriteria) -> None:
        self._criteria = criteria
        logger.debug("Filter criteria changed: %s", criteria)
        self._target.apply_filter(criteria)
