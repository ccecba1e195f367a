# product_dashboard/models/product.py

"""Product entities exchanged between the catalog client, store and UI."""

from dataclasses import dataclass, field

from product_dashboard.config.settings import Settings

ProductId = int | str


@dataclass
class Rating:
    """Average review score (0-5) and number of reviews."""

    rate: float = 0.0
    count: int = 0


@dataclass
class Product:
    """A catalog product with its server-assigned identifier."""

    id: ProductId
    title: str
    price: float
    description: str = ""
    category: str = ""
    image: str = ""
    rating: Rating = field(default_factory=Rating)

    def __post_init__(self) -> None:
        if not self.image:
            self.image = Settings.DEFAULT_IMAGE_URL


@dataclass
class ProductDraft:
    """Product payload without an id, sent on create and update."""

    title: str
    price: float
    description: str = ""
    category: str = Settings.DEFAULT_CATEGORY
    image: str = ""
    rating: Rating = field(default_factory=Rating)

    def __post_init__(self) -> None:
        if not self.image:
            self.image = Settings.DEFAULT_IMAGE_URL

    def to_payload(self) -> dict[str, object]:
        """Serialise to the JSON body the catalog expects."""
        return {
            "title": self.title,
            "price": self.price,
            "description": self.description,
            "category": self.category,
            "image": self.image,
            "rating": {
                "rate": self.rating.rate,
                "count": self.rating.count,
            },
        }
