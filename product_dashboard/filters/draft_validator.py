# product_dashboard/filters/draft_validator.py

"""Form input validation: turn raw field values into a ProductDraft."""

import logging
import math

from product_dashboard.config.settings import Settings
from product_dashboard.models.filter_criteria import ALL_CATEGORIES
from product_dashboard.models.product import ProductDraft, Rating

logger = logging.getLogger("product_dashboard.filters")


class DraftValidator:
    """Validate product form fields before they reach the store."""

    @staticmethod
    def parse_price(raw: str | float) -> float | None:
        """Return the price as a float, or None if not a positive number."""
        try:
            value = float(str(raw).strip())
        except ValueError:
            return None
        if not math.isfinite(value) or value <= 0:
            return None
        return value

    @staticmethod
    def validate(
        title: str,
        price: str | float,
        description: str,
        category: str,
        image: str = "",
        rating: Rating | None = None,
    ) -> tuple[ProductDraft | None, list[str]]:
        """Check every field and build a draft if all of them pass.

        Text fields are trimmed first. An empty image falls back to the
        default image and a missing rating to zero reviews. Returns the
        draft (None when invalid) and the list of problems found.
        """
        errors: list[str] = []
        title = title.strip()
        description = description.strip()
        category = category.strip()

        parsed_price = DraftValidator.parse_price(price)
        if parsed_price is None:
            errors.append("Please enter a valid price greater than 0")

        if not (
            Settings.TITLE_MIN_LENGTH
            <= len(title)
            <= Settings.TITLE_MAX_LENGTH
        ):
            errors.append(
                f"Title must be {Settings.TITLE_MIN_LENGTH}-"
                f"{Settings.TITLE_MAX_LENGTH} characters"
            )

        if not (
            Settings.DESCRIPTION_MIN_LENGTH
            <= len(description)
            <= Settings.DESCRIPTION_MAX_LENGTH
        ):
            errors.append(
                f"Description must be {Settings.DESCRIPTION_MIN_LENGTH}-"
                f"{Settings.DESCRIPTION_MAX_LENGTH} characters"
            )

        if not category or category == ALL_CATEGORIES:
            errors.append("Please choose a category")

        if errors or parsed_price is None:
            logger.debug("Draft rejected: %s", "; ".join(errors))
            return None, errors

        draft = ProductDraft(
            title=title,
            price=parsed_price,
            description=description,
            category=category,
            image=image.strip() or Settings.DEFAULT_IMAGE_URL,
            rating=rating if rating is not None else Rating(),
        )
        return draft, []
