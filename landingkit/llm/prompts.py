# landingkit/llm/prompts.py

"""Audience-aware prompts for the landing page copywriter."""

from collections.abc import Mapping
from types import MappingProxyType

from landingkit.models.content import GenerationOptions
from landingkit.models.product import ProductCandidate

AUDIENCE_STYLES: Mapping[str, str] = MappingProxyType(
    {
        "mena": (
            "Use rich, emotional language with emphasis on value and family "
            "benefits. Include cultural sensitivity for Middle Eastern and "
            "North African markets."
        ),
        "america": (
            "Focus on convenience, quality, and social proof. Use direct, "
            "benefit-focused language with trust indicators."
        ),
        "europe": (
            "Emphasize quality, sustainability, and craftsmanship. Use "
            "sophisticated, informative language with attention to detail."
        ),
    }
)

AUDIENCE_CONTEXTS: Mapping[str, str] = MappingProxyType(
    {
        "mena": (
            "Middle East & North Africa - Focus on family values, quality, "
            "and value for money. Emphasize trust and reliability."
        ),
        "america": (
            "American market - Emphasize convenience, innovation, and social "
            "proof. Focus on time-saving and lifestyle benefits."
        ),
        "europe": (
            "European market - Highlight quality, sustainability, and "
            "craftsmanship. Focus on long-term value and environmental "
            "consciousness."
        ),
    }
)

LANGUAGE_NAMES: Mapping[str, str] = MappingProxyType(
    {
        "en": "English",
        "ar": "Arabic",
        "es": "Spanish",
        "fr": "French",
        "de": "German",
    }
)

# Shape the normaliser reads first; spelled out so the model mirrors it
RESPONSE_SHAPE = """{
  "hero": {"headline": "...", "subheadline": "...", "cta": "..."},
  "product": {"description": "...", "features": ["...", "..."]},
  "pricing": {"urgency": "..."},
  "reviews": [{"name": "...", "rating": 5, "comment": "..."}]
}"""


def system_prompt(options: GenerationOptions) -> str:
    style = AUDIENCE_STYLES.get(
        options.target_audience, AUDIENCE_STYLES["america"]
    )
    language = LANGUAGE_NAMES.get(options.language, "English")
    return (
        "You are an expert copywriter specializing in high-converting "
        f"landing pages for {options.target_audience} markets.\n\n"
        f"Style Guidelines:\n{style}\n\n"
        "Always:\n"
        "- Focus on benefits over features\n"
        "- Use emotional triggers appropriate for the target audience\n"
        "- Include social proof and trust elements\n"
        "- Create urgency without being pushy\n"
        f"- Write in {language} language\n"
        "- Ensure cultural appropriateness for the target region"
    )


def user_prompt(product: ProductCandidate, options: GenerationOptions) -> str:
    """Product facts plus the list of sections to write, as JSON."""
    context = AUDIENCE_CONTEXTS.get(
        options.target_audience, AUDIENCE_CONTEXTS["america"]
    )
    features = ", ".join(product.features) or "n/a"
    return (
        "Create compelling landing page content for this product:\n\n"
        "PRODUCT DETAILS:\n"
        f"- Title: {product.title}\n"
        f"- Description: {product.description or 'n/a'}\n"
        f"- Price: {product.price or 'n/a'}\n"
        f"- Brand: {product.brand or 'n/a'}\n"
        f"- Category: {product.category or 'n/a'}\n"
        f"- Rating: {product.rating}/5 ({product.review_count} reviews)\n"
        f"- Features: {features}\n\n"
        f"TARGET AUDIENCE: {context}\n"
        f"LANGUAGE: {options.language}\n\n"
        "Generate the following sections:\n"
        "1. Hero headline (compelling, benefit-focused)\n"
        "2. Hero subheadline (supporting detail)\n"
        "3. Call-to-action text\n"
        "4. Product description (persuasive, benefit-focused)\n"
        "5. Key features list (5-7 items)\n"
        "6. Customer testimonials (3-5 realistic testimonials)\n"
        "7. Urgency/scarcity messaging\n\n"
        f"Respond with a single JSON object shaped like:\n{RESPONSE_SHAPE}"
    )
