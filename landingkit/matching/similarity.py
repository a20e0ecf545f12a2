# landingkit/matching/similarity.py

"""Bigram similarity scoring and best-match selection."""

import logging
from collections import Counter
from collections.abc import Sequence
from dataclasses import dataclass

from landingkit.config.settings import Settings
from landingkit.matching.normalizer import normalize
from landingkit.models.product import ProductCandidate

logger = logging.getLogger("landingkit.matching")

MATCH_THRESHOLD: float = Settings.MATCH_THRESHOLD


def _bigrams(text: str) -> Counter[str]:
    return Counter(text[i:i + 2] for i in range(len(text) - 1))


def similarity(a: str, b: str) -> float:
    """Dice coefficient over the character bigrams of *a* and *b*.

    Whitespace is ignored. Identical strings score 1.0 and strings
    that share no bigram score 0.0.
    """
    first = "".join(a.split())
    second = "".join(b.split())
    if first == second:
        return 1.0
    if len(first) < 2 or len(second) < 2:
        return 0.0

    first_grams = _bigrams(first)
    second_grams = _bigrams(second)
    overlap = sum((first_grams & second_grams).values())
    total = (len(first) - 1) + (len(second) - 1)
    return 2.0 * overlap / total


@dataclass(frozen=True)
class MatchResult:
    """Best candidate for a query together with its raw score."""

    candidate: ProductCandidate | None
    similarity: float
    threshold: float = MATCH_THRESHOLD

    @property
    def accepted(self) -> bool:
        """True when the score is strictly above the threshold."""
        return (
            self.candidate is not None
            and self.similarity > self.threshold
        )


def best_match(
    query: str,
    candidates: Sequence[ProductCandidate],
    threshold: float = MATCH_THRESHOLD,
) -> MatchResult:
    """Pick the candidate whose normalised title is closest to *query*.

    The first candidate wins ties. The score is reported whether or
    not it clears *threshold* so callers can audit the decision.
    """
    target = normalize(query)
    best: ProductCandidate | None = None
    best_score = 0.0

    for candidate in candidates:
        score = similarity(normalize(candidate.title), target)
        logger.debug(
            "Similarity %.3f for '%s'", score, candidate.title
        )
        if best is None or score > best_score:
            best = candidate
            best_score = score

    result = MatchResult(
        candidate=best, similarity=best_score, threshold=threshold
    )
    if best is not None:
        logger.info(
            "Best match for '%s': '%s' (%.1f%%, %s)",
            query,
            best.title,
            best_score * 100,
            "accepted" if result.accepted else "rejected",
        )
    return result
