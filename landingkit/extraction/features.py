# landingkit/extraction/features.py

"""Keyword-based feature extraction from free product text."""

import logging

from landingkit.config.settings import Settings

logger = logging.getLogger("landingkit.extraction")

FEATURE_KEYWORDS: tuple[str, ...] = (
    "waterproof",
    "wireless",
    "bluetooth",
    "rechargeable",
    "portable",
    "durable",
    "lightweight",
    "premium",
    "professional",
    "advanced",
    "smart",
    "digital",
    "automatic",
    "manual",
    "adjustable",
)

GENERIC_FEATURES: tuple[str, ...] = (
    "High Quality",
    "Reliable",
    "User Friendly",
)


class FeatureExtractor:
    """Scan text against a fixed keyword dictionary."""

    def __init__(
        self,
        keywords: tuple[str, ...] = FEATURE_KEYWORDS,
        fallback: tuple[str, ...] = GENERIC_FEATURES,
        limit: int = Settings.MAX_FEATURES,
    ) -> None:
        self.keywords = keywords
        self.fallback = fallback
        self.limit = limit

    def extract(self, text: str | None) -> list[str]:
        """Return matched keywords, capitalised and in dictionary order.

        A keyword matches when any whitespace-separated word contains
        it. Empty results fall back to the generic feature list.
        """
        words = (text or "").lower().split()
        features: list[str] = []
        for keyword in self.keywords:
            label = keyword[:1].upper() + keyword[1:]
            if label in features:
                continue
            if any(keyword in word for word in words):
                features.append(label)

        if not features:
            logger.debug("No feature keywords found, using generic list")
            features = list(self.fallback)

        return features[: self.limit]
