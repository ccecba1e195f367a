# tests/test_formatting.py

"""Tests for the display formatting helpers."""

import unittest

from product_dashboard.models.product import Rating
from product_dashboard.ui.formatting import (
    category_label,
    format_price,
    rating_stars,
    rating_summary,
    truncate_description,
)


class TestFormatPrice(unittest.TestCase):
    """USD currency formatting."""

    def test_two_decimals(self) -> None:
        self.assertEqual(format_price(9.5), "$9.50")

    def test_thousands_separator(self) -> None:
        self.assertEqual(format_price(1299), "$1,299.00")


class TestRatingStars(unittest.TestCase):
    """Star rendering: full, half, empty."""

    def test_whole_number(self) -> None:
        self.assertEqual(rating_stars(3.0), "★★★☆☆ (3.0)")

    def test_half_star(self) -> None:
        self.assertEqual(rating_stars(3.9), "★★★½☆ (3.9)")

    def test_below_half_rounds_down(self) -> None:
        self.assertEqual(rating_stars(4.1), "★★★★☆ (4.1)")

    def test_zero(self) -> None:
        self.assertEqual(rating_stars(0), "☆☆☆☆☆ (0.0)")

    def test_always_five_symbols(self) -> None:
        for rate in (0.0, 0.5, 1.2, 2.5, 4.6, 5.0):
            with self.subTest(rate=rate):
                symbols = rating_stars(rate).split(" ")[0]
                self.assertEqual(len(symbols), 5)

    def test_out_of_range_is_clamped(self) -> None:
        self.assertEqual(rating_stars(9), "★★★★★ (5.0)")

    def test_summary_includes_count(self) -> None:
        self.assertEqual(
            rating_summary(Rating(2.0, 12)), "★★☆☆☆ (2.0) 12 reviews"
        )


class TestTruncateDescription(unittest.TestCase):
    """Description previews."""

    def test_short_text_unchanged(self) -> None:
        self.assertEqual(truncate_description("Short"), "Short")

    def test_long_text_cut_at_limit(self) -> None:
        text = "x" * 150
        self.assertEqual(truncate_description(text), "x" * 100 + "...")

    def test_custom_limit(self) -> None:
        self.assertEqual(truncate_description("abcdef", 3), "abc...")


class TestCategoryLabel(unittest.TestCase):
    """Category option labels."""

    def test_all_sentinel(self) -> None:
        self.assertEqual(category_label("all"), "All Categories")

    def test_capitalises_first_letter_only(self) -> None:
        self.assertEqual(category_label("men's clothing"), "Men's clothing")

    def test_empty(self) -> None:
        self.assertEqual(category_label(""), "")


if __name__ == "__main__":
    unittest.main()
