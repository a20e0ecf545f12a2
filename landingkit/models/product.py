# landingkit/models/product.py

"""Product candidate model shared by providers and the aggregator."""

from dataclasses import dataclass, field
from enum import Enum


class Availability(str, Enum):
    """Stock state reported by a provider."""

    IN_STOCK = "in_stock"
    OUT_OF_STOCK = "out_of_stock"
    LIMITED = "limited"


@dataclass(frozen=True)
class ProductCandidate:
    """A single product record returned by one search provider."""

    title: str
    description: str = ""
    price: str = ""
    original_price: str | None = None
    currency: str = "USD"
    images: list[str] = field(default_factory=lambda: list[str]())
    features: list[str] = field(default_factory=lambda: list[str]())
    rating: float = 0.0
    review_count: int = 0
    availability: Availability = Availability.IN_STOCK
    url: str = ""
    source: str = ""
    brand: str = ""
    category: str = ""
    specifications: dict[str, str] = field(
        default_factory=lambda: dict[str, str]()
    )

    def to_dict(self) -> dict[str, object]:
        """Serialise to the camelCase shape used in saved results."""
        return {
            "title": self.title,
            "description": self.description,
            "price": self.price,
            "originalPrice": self.original_price,
            "currency": self.currency,
            "images": list(self.images),
            "features": list(self.features),
            "rating": self.rating,
            "reviewCount": self.review_count,
            "availability": self.availability.value,
            "url": self.url,
            "source": self.source,
            "brand": self.brand,
            "category": self.category,
            "specifications": dict(self.specifications),
        }
