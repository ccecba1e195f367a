# tests/test_product_model.py

"""Tests for the Product, ProductDraft and FilterCriteria dataclasses."""

import unittest

from product_dashboard.config.settings import Settings
from product_dashboard.models.filter_criteria import (
    ALL_CATEGORIES,
    FilterCriteria,
)
from product_dashboard.models.product import Product, ProductDraft, Rating


class TestProductModel(unittest.TestCase):
    """Product dataclass unit tests."""

    def test_init_with_all_fields(self) -> None:
        """All fields are stored correctly."""
        product = Product(
            id=7,
            title="Red Shirt",
            price=19.99,
            description="Cotton shirt",
            category="clothing",
            image="https://example.com/shirt.jpg",
            rating=Rating(rate=4.5, count=120),
        )
        self.assertEqual(product.id, 7)
        self.assertEqual(product.title, "Red Shirt")
        self.assertEqual(product.price, 19.99)
        self.assertEqual(product.category, "clothing")
        self.assertEqual(product.image, "https://example.com/shirt.jpg")
        self.assertEqual(product.rating, Rating(4.5, 120))

    def test_defaults(self) -> None:
        """Optional fields default to empty text and a zero rating."""
        product = Product(id="a1", title="X", price=1.0)
        self.assertEqual(product.description, "")
        self.assertEqual(product.category, "")
        self.assertEqual(product.rating, Rating(0.0, 0))

    def test_missing_image_falls_back_to_default(self) -> None:
        """An empty image reference is replaced by the default image."""
        product = Product(id=1, title="X", price=1.0, image="")
        self.assertEqual(product.image, Settings.DEFAULT_IMAGE_URL)

    def test_ratings_are_not_shared(self) -> None:
        """Each product gets its own default Rating instance."""
        a = Product(id=1, title="A", price=1.0)
        b = Product(id=2, title="B", price=1.0)
        self.assertIsNot(a.rating, b.rating)

    def test_equality(self) -> None:
        """Two products with identical fields are equal."""
        a = Product(id=1, title="A", price=10.0, category="home")
        b = Product(id=1, title="A", price=10.0, category="home")
        self.assertEqual(a, b)

    def test_inequality_different_id(self) -> None:
        """Products with different ids are not equal."""
        a = Product(id=1, title="A", price=10.0)
        b = Product(id=2, title="A", price=10.0)
        self.assertNotEqual(a, b)


class TestProductDraft(unittest.TestCase):
    """ProductDraft defaults and payload serialisation."""

    def test_default_category_and_image(self) -> None:
        draft = ProductDraft(title="Lamp", price=30.0)
        self.assertEqual(draft.category, Settings.DEFAULT_CATEGORY)
        self.assertEqual(draft.image, Settings.DEFAULT_IMAGE_URL)

    def test_to_payload_has_no_id(self) -> None:
        """The payload carries every field except an id."""
        draft = ProductDraft(
            title="Lamp",
            price=30.0,
            description="Desk lamp with LED bulb",
            category="home",
            image="https://example.com/lamp.jpg",
            rating=Rating(3.5, 4),
        )
        payload = draft.to_payload()
        self.assertNotIn("id", payload)
        self.assertEqual(payload["title"], "Lamp")
        self.assertEqual(payload["price"], 30.0)
        self.assertEqual(payload["category"], "home")
        self.assertEqual(payload["rating"], {"rate": 3.5, "count": 4})


class TestFilterCriteria(unittest.TestCase):
    """FilterCriteria defaults and activity flag."""

    def test_defaults_are_inactive(self) -> None:
        criteria = FilterCriteria()
        self.assertEqual(criteria.search_term, "")
        self.assertEqual(criteria.category, ALL_CATEGORIES)
        self.assertFalse(criteria.is_active)

    def test_search_term_makes_active(self) -> None:
        self.assertTrue(FilterCriteria(search_term="mug").is_active)

    def test_category_makes_active(self) -> None:
        self.assertTrue(FilterCriteria(category="home").is_active)

    def test_frozen(self) -> None:
        """Criteria are immutable values."""
        criteria = FilterCriteria()
        with self.assertRaises(AttributeError):
            criteria.search_term = "x"  # type: ignore[misc]


if __name__ == "__main__":
    unittest.main()
