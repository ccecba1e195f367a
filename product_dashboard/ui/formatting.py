# product_dashboard/ui/formatting.py

"""Display helpers shared by the TUI table and the CLI output."""

import math

from product_dashboard.config.settings import Settings
from product_dashboard.models.filter_criteria import ALL_CATEGORIES
from product_dashboard.models.product import Rating


def format_price(price: float) -> str:
    """Format an amount in USD, e.g. ``$1,299.00``."""
    return f"${price:,.2f}"


def rating_stars(rate: float) -> str:
    """Render a 0-5 rating as stars: full, an optional half, then empty."""
    rate = min(max(rate, 0.0), 5.0)
    full = math.floor(rate)
    half = rate % 1 >= 0.5
    empty = 5 - full - (1 if half else 0)
    return f"{'★' * full}{'½' if half else ''}{'☆' * empty} ({rate:.1f})"


def rating_summary(rating: Rating) -> str:
    return f"{rating_stars(rating.rate)} {rating.count} reviews"


def truncate_description(
    text: str, limit: int = Settings.DESCRIPTION_PREVIEW_LENGTH
) -> str:
    if len(text) <= limit:
        return text
    return text[:limit] + "..."


def category_label(category: str) -> str:
    """Human label for a category option."""
    if category == ALL_CATEGORIES:
        return "All Categories"
    return category[:1].upper() + category[1:]
