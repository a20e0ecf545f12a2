# landingkit/models/content.py

"""Landing page content model and generation options."""

from dataclasses import dataclass, field
from typing import Any

AUDIENCES: tuple[str, ...] = ("mena", "america", "europe")
LANGUAGES: tuple[str, ...] = ("en", "ar", "es", "fr", "de")


@dataclass(frozen=True)
class GenerationOptions:
    """Caller choices that shape the generated content."""

    target_audience: str = "america"
    language: str = "en"
    include_upsells: bool = True
    include_reviews: bool = True
    include_trust_badges: bool = True
    enable_tracking: bool = True
    media: list[str] = field(default_factory=lambda: list[str]())


@dataclass(frozen=True)
class Hero:
    headline: str
    subheadline: str
    cta: str
    background_image: str


@dataclass(frozen=True)
class ProductSection:
    title: str
    description: str
    features: list[str]
    specifications: dict[str, str]
    media: list[str]


@dataclass(frozen=True)
class Pricing:
    current: str
    original: str
    discount: str
    currency: str
    urgency: str


@dataclass(frozen=True)
class Review:
    name: str
    rating: int
    comment: str
    verified: bool
    date: str
    avatar: str


@dataclass(frozen=True)
class Upsell:
    title: str
    description: str
    price: str
    image: str


@dataclass(frozen=True)
class Contact:
    whatsapp: str
    messenger: str
    chatbot: bool
    phone: str
    email: str


@dataclass(frozen=True)
class Tracking:
    facebook_pixel: str
    google_analytics: str
    custom_events: list[str]


@dataclass(frozen=True)
class SocialProof:
    total_customers: int
    average_rating: float
    countries_served: int
    monthly_users: int


@dataclass(frozen=True)
class NormalizedContent:
    """Fully resolved landing page content; no field is ever ``None``."""

    hero: Hero
    product: ProductSection
    pricing: Pricing
    reviews: list[Review]
    trust_badges: list[str]
    upsells: list[Upsell]
    contact: Contact
    tracking: Tracking
    social_proof: SocialProof

    def to_dict(self) -> dict[str, Any]:
        """Serialise using the camelCase keys of the model JSON shape."""
        return {
            "hero": {
                "headline": self.hero.headline,
                "subheadline": self.hero.subheadline,
                "cta": self.hero.cta,
                "backgroundImage": self.hero.background_image,
            },
            "product": {
                "title": self.product.title,
                "description": self.product.description,
                "features": list(self.product.features),
                "specifications": dict(self.product.specifications),
                "media": list(self.product.media),
            },
            "pricing": {
                "current": self.pricing.current,
                "original": self.pricing.original,
                "discount": self.pricing.discount,
                "currency": self.pricing.currency,
                "urgency": self.pricing.urgency,
            },
            "reviews": [
                {
                    "name": r.name,
                    "rating": r.rating,
                    "comment": r.comment,
                    "verified": r.verified,
                    "date": r.date,
                    "avatar": r.avatar,
                }
                for r in self.reviews
            ],
            "trustBadges": list(self.trust_badges),
            "upsells": [
                {
                    "title": u.title,
                    "description": u.description,
                    "price": u.price,
                    "image": u.image,
                }
                for u in self.upsells
            ],
            "contact": {
                "whatsapp": self.contact.whatsapp,
                "messenger": self.contact.messenger,
                "chatbot": self.contact.chatbot,
                "phone": self.contact.phone,
                "email": self.contact.email,
            },
            "tracking": {
                "facebookPixel": self.tracking.facebook_pixel,
                "googleAnalytics": self.tracking.google_analytics,
                "customEvents": list(self.tracking.custom_events),
            },
            "socialProof": {
                "totalCustomers": self.social_proof.total_customers,
                "averageRating": self.social_proof.average_rating,
                "countriesServed": self.social_proof.countries_served,
                "monthlyUsers": self.social_proof.monthly_users,
            },
        }
