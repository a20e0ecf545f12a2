# landingkit/content/defaults.py

"""Static copy used when a model reply leaves a field unresolved.

Every table here is read-only; lookups fall back to ``america``/``en``.
"""

from collections.abc import Mapping
from types import MappingProxyType

DEFAULT_AUDIENCE = "america"
DEFAULT_LANGUAGE = "en"

DEFAULT_BACKGROUND_IMAGE = (
    "https://images.pexels.com/photos/90946/pexels-photo-90946.jpeg"
    "?auto=compress&cs=tinysrgb&w=1200"
)

DEFAULT_PRODUCT_TITLE = "Premium Product"
DEFAULT_PRICE = "$0.00"
DEFAULT_CURRENCY = "USD"

DEFAULT_CUSTOM_EVENTS: tuple[str, ...] = ("page_view", "add_to_cart", "purchase")

TRUST_BADGES: tuple[str, ...] = (
    "https://images.pexels.com/photos/6801648/pexels-photo-6801648.jpeg"
    "?auto=compress&cs=tinysrgb&w=200",
    "https://images.pexels.com/photos/6801649/pexels-photo-6801649.jpeg"
    "?auto=compress&cs=tinysrgb&w=200",
)

AVATAR_URL = (
    "https://images.pexels.com/photos/{id}/pexels-photo-{id}.jpeg"
    "?auto=compress&cs=tinysrgb&w=100"
)

ANONYMOUS_REVIEWER = "Anonymous Customer"
DEFAULT_REVIEW_COMMENT = "Great product!"

# (title template, description, price, image)
UPSELL_TEMPLATES: tuple[tuple[str, str, str, str], ...] = (
    (
        "{product} Accessories Kit",
        "Complete your purchase with essential accessories",
        "$29.99",
        "https://images.pexels.com/photos/279906/pexels-photo-279906.jpeg"
        "?auto=compress&cs=tinysrgb&w=400",
    ),
    (
        "Extended Warranty",
        "2-year extended warranty for peace of mind",
        "$19.99",
        "https://images.pexels.com/photos/1649771/pexels-photo-1649771.jpeg"
        "?auto=compress&cs=tinysrgb&w=400",
    ),
)

AUDIENCE_COPY: Mapping[str, Mapping[str, Mapping[str, str]]] = MappingProxyType(
    {
        "mena": MappingProxyType(
            {
                "en": MappingProxyType(
                    {
                        "headline": "Transform Your Life with {product} - Premium Quality Guaranteed",
                        "subheadline": "Join thousands of satisfied customers who chose quality and value",
                        "cta": "Order Now - Free Shipping",
                        "description": "Experience the perfect blend of innovation and quality with {product}. Designed for families who value excellence and reliability.",
                        "urgency": "Limited Stock - Order Today!",
                    }
                ),
                "ar": MappingProxyType(
                    {
                        "headline": "غيّر حياتك مع {product} - جودة مضمونة",
                        "subheadline": "انضم لآلاف العملاء الراضين الذين اختاروا الجودة والقيمة",
                        "cta": "اطلب الآن - شحن مجاني",
                        "description": "اكتشف المزيج المثالي من الابتكار والجودة مع {product}. مصمم للعائلات التي تقدر التميز والموثوقية.",
                        "urgency": "كمية محدودة - اطلب اليوم!",
                    }
                ),
            }
        ),
        "america": MappingProxyType(
            {
                "en": MappingProxyType(
                    {
                        "headline": "Get {product} - The Smart Choice for Modern Living",
                        "subheadline": "Trusted by over 10,000 customers nationwide with 5-star reviews",
                        "cta": "Buy Now - Fast Delivery",
                        "description": "{product} combines cutting-edge technology with user-friendly design to make your life easier and more efficient.",
                        "urgency": "Flash Sale - 48 Hours Only!",
                    }
                ),
            }
        ),
        "europe": MappingProxyType(
            {
                "en": MappingProxyType(
                    {
                        "headline": "Discover {product} - Crafted for Excellence",
                        "subheadline": "Sustainable quality meets innovative design for the conscious consumer",
                        "cta": "Order Now - Eco-Friendly Packaging",
                        "description": "{product} represents the pinnacle of European craftsmanship and sustainable innovation, designed to last for years.",
                        "urgency": "Limited Edition - While Supplies Last",
                    }
                ),
            }
        ),
    }
)

# (name, rating, comment)
REVIEW_TEMPLATES: Mapping[
    str, Mapping[str, tuple[tuple[str, int, str], ...]]
] = MappingProxyType(
    {
        "mena": MappingProxyType(
            {
                "en": (
                    ("Ahmed Hassan", 5, "Excellent quality and fast delivery. Highly recommend to all families!"),
                    ("Fatima Al-Zahra", 5, "Amazing product! Worth every penny. My whole family loves it."),
                    ("Omar Khalil", 4, "Good value for money. Customer service was very helpful."),
                ),
                "ar": (
                    ("أحمد حسن", 5, "جودة ممتازة وتوصيل سريع. أنصح به بشدة لجميع العائلات!"),
                    ("فاطمة الزهراء", 5, "منتج رائع! يستحق كل قرش. عائلتي كلها تحبه."),
                    ("عمر خليل", 4, "قيمة جيدة مقابل المال. خدمة العملاء كانت مفيدة جداً."),
                ),
            }
        ),
        "america": MappingProxyType(
            {
                "en": (
                    ("Sarah Johnson", 5, "Game changer! This product exceeded all my expectations. Fast shipping too!"),
                    ("Mike Chen", 5, "Outstanding quality and customer service. Will definitely buy again."),
                    ("Emily Davis", 4, "Great product, easy to use. Arrived exactly as described."),
                ),
            }
        ),
        "europe": MappingProxyType(
            {
                "en": (
                    ("Hans Mueller", 5, "Exceptional craftsmanship and sustainable packaging. Truly impressed!"),
                    ("Sophie Dubois", 5, "Beautiful design and excellent functionality. Worth the investment."),
                    ("Marco Rossi", 4, "High quality product with attention to detail. Recommended."),
                ),
            }
        ),
    }
)


def _localized(table: Mapping[str, Mapping], audience: str, language: str):
    by_language = table.get(audience) or table[DEFAULT_AUDIENCE]
    return (
        by_language.get(language)
        or by_language.get(DEFAULT_LANGUAGE)
        or table[DEFAULT_AUDIENCE][DEFAULT_LANGUAGE]
    )


def audience_copy(audience: str, language: str) -> Mapping[str, str]:
    """Copy block for *audience*/*language*, falling back to English."""
    return _localized(AUDIENCE_COPY, audience, language)


def review_templates(
    audience: str, language: str
) -> tuple[tuple[str, int, str], ...]:
    return _localized(REVIEW_TEMPLATES, audience, language)
