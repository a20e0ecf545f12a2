# landingkit/providers/mock_factory.py

"""Synthetic stand-ins used when every upstream source is unavailable."""

import random

from landingkit.models.image_analysis import ImageAnalysis
from landingkit.models.product import Availability, ProductCandidate

MOCK_PRODUCT_NAMES: tuple[str, ...] = (
    "Premium Wireless Headphones",
    "Smart Fitness Tracker",
    "Eco-Friendly Water Bottle",
    "Professional Camera Lens",
    "Ergonomic Office Chair",
    "Portable Bluetooth Speaker",
    "Stainless Steel Watch",
    "Organic Skincare Set",
)

MOCK_IMAGES: tuple[str, ...] = (
    "https://images.pexels.com/photos/90946/pexels-photo-90946.jpeg?auto=compress&cs=tinysrgb&w=800",
    "https://images.pexels.com/photos/279906/pexels-photo-279906.jpeg?auto=compress&cs=tinysrgb&w=800",
    "https://images.pexels.com/photos/1649771/pexels-photo-1649771.jpeg?auto=compress&cs=tinysrgb&w=800",
)

MOCK_FEATURES: tuple[str, ...] = (
    "Premium Quality Materials",
    "Advanced Technology Integration",
    "User-Friendly Interface",
    "Durable Construction",
    "Excellent Performance",
)

MOCK_LABELS: tuple[str, ...] = (
    "Product",
    "Object",
    "Item",
    "Technology",
    "Design",
    "Quality",
    "Modern",
    "Professional",
    "Premium",
    "Innovative",
)

MOCK_COLORS: tuple[str, ...] = ("#2563eb", "#7c3aed", "#dc2626", "#059669")


class MockDataFactory:
    """Builds syntactically valid synthetic records from a seedable RNG.

    Ranges: price in [50, 250), original price 20..69 above it, rating
    in [4.5, 5.0], review count in [100, 1100), mock image confidence
    in [0.85, 1.0).
    """

    def __init__(self, rng: random.Random | None = None) -> None:
        self.rng = rng or random.Random()

    def product(self, query: str = "") -> ProductCandidate:
        """A plausible product; the query names it when non-empty."""
        title = query.strip() or self.rng.choice(MOCK_PRODUCT_NAMES)
        price = self.rng.randrange(50, 250)
        original = price + self.rng.randrange(20, 70)
        return ProductCandidate(
            title=title,
            description=(
                "Experience the perfect blend of innovation and quality "
                f"with this exceptional {title.lower()}. Designed with "
                "precision and crafted for excellence, this product "
                "delivers outstanding performance and lasting value."
            ),
            price=f"${price}",
            original_price=f"${original}",
            currency="USD",
            images=list(MOCK_IMAGES),
            features=list(MOCK_FEATURES),
            rating=round(4.5 + self.rng.random() * 0.5, 1),
            review_count=self.rng.randrange(100, 1100),
            availability=Availability.IN_STOCK,
            source="mock",
            brand="Premium Brand",
            category="General",
            specifications={
                "Material": "Premium Grade",
                "Warranty": "2 Years",
                "Color": "Multiple Options",
                "Weight": "Lightweight Design",
            },
        )

    def image_analysis(self, image_url: str) -> ImageAnalysis:
        """A product-flagged analysis with a random subset of labels."""
        count = 5 + self.rng.randrange(3)
        labels = self.rng.sample(list(MOCK_LABELS), count)
        return ImageAnalysis(
            labels=labels,
            is_product_image=True,
            confidence=0.85 + self.rng.random() * 0.15,
            dominant_colors=list(MOCK_COLORS),
            image_url=image_url,
            provider="mock",
        )
