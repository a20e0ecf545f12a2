# landingkit/validation/image_validator.py

"""Scores how well a set of image analyses fits a product title."""

import logging
from collections.abc import Mapping, Sequence
from types import MappingProxyType

from landingkit.config.settings import Settings
from landingkit.matching.normalizer import normalize
from landingkit.models.image_analysis import ImageAnalysis

logger = logging.getLogger("landingkit.validation")

CATEGORY_KEYWORDS: Mapping[str, tuple[str, ...]] = MappingProxyType(
    {
        "electronics": (
            "device",
            "gadget",
            "technology",
            "digital",
            "electronic",
        ),
        "clothing": ("apparel", "wear", "fashion", "textile", "garment"),
        "home": ("furniture", "decor", "household", "domestic", "interior"),
        "beauty": (
            "cosmetic",
            "skincare",
            "makeup",
            "beauty",
            "personal care",
        ),
        "sports": ("fitness", "exercise", "athletic", "sport", "training"),
        "automotive": ("car", "vehicle", "automotive", "motor", "transport"),
    }
)


def _token_matches(token: str, labels: Sequence[str]) -> bool:
    """Substring containment in either direction counts as a match."""
    return any(token in label or label in token for label in labels if label)


class ImageProductValidator:
    """Weighted direct/semantic overlap between a title and image labels.

    Per image: ``(direct_weight * direct + semantic_weight * semantic)
    * confidence``; the final score is the mean over product images,
    clamped to ``[0, 1]``. Without any product image the neutral score
    is returned.
    """

    def __init__(
        self,
        categories: Mapping[str, tuple[str, ...]] = CATEGORY_KEYWORDS,
        direct_weight: float = Settings.DIRECT_MATCH_WEIGHT,
        semantic_weight: float = Settings.SEMANTIC_MATCH_WEIGHT,
        neutral_score: float = Settings.NEUTRAL_VALIDATION_SCORE,
    ) -> None:
        self.categories = categories
        self.direct_weight = direct_weight
        self.semantic_weight = semantic_weight
        self.neutral_score = neutral_score

    def direct_score(
        self, title_tokens: Sequence[str], labels: Sequence[str]
    ) -> float:
        """Fraction of title tokens found in the labels."""
        if not title_tokens:
            return 0.0
        matched = [t for t in title_tokens if _token_matches(t, labels)]
        return len(matched) / len(title_tokens)

    def title_categories(self, title_tokens: Sequence[str]) -> set[str]:
        return {
            name
            for name, keywords in self.categories.items()
            if any(token in keywords for token in title_tokens)
        }

    def label_categories(self, labels: Sequence[str]) -> set[str]:
        return {
            name
            for name, keywords in self.categories.items()
            if any(kw in label for label in labels for kw in keywords)
        }

    def semantic_score(
        self,
        title_tokens: Sequence[str],
        labels: Sequence[str],
        direct: float,
    ) -> float:
        """Fraction of the title's categories that the labels confirm.

        Credit is partial: a title in two categories with one confirmed
        scores 0.5, where an any-shared-category rule would give 1.0.
        A title outside every category gives no semantic evidence, so
        the direct score stands in for it.
        """
        wanted = self.title_categories(title_tokens)
        if not wanted:
            return direct
        confirmed = wanted & self.label_categories(labels)
        return len(confirmed) / len(wanted)

    def validate(
        self, title: str, analyses: Sequence[ImageAnalysis]
    ) -> float:
        """Return the match score of *analyses* against *title*."""
        eligible = [a for a in analyses if a.is_product_image]
        if not eligible:
            logger.info(
                "No product images to validate '%s', neutral score %.2f",
                title,
                self.neutral_score,
            )
            return self.neutral_score

        title_tokens = normalize(title).split()
        total = 0.0
        for analysis in eligible:
            labels = [normalize(label) for label in analysis.labels]
            direct = self.direct_score(title_tokens, labels)
            semantic = self.semantic_score(title_tokens, labels, direct)
            image_score = (
                self.direct_weight * direct
                + self.semantic_weight * semantic
            ) * analysis.confidence
            logger.debug(
                "Image %s: direct=%.2f semantic=%.2f confidence=%.2f",
                analysis.image_url or "?",
                direct,
                semantic,
                analysis.confidence,
            )
            total += image_score

        final = min(max(total / len(eligible), 0.0), 1.0)
        logger.info(
            "Product validation score for '%s': %.1f%%",
            title,
            final * 100,
        )
        return final
