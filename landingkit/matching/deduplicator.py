# landingkit/matching/deduplicator.py

"""Candidate deduplication and popularity ranking."""

import logging
import math

from landingkit.matching.normalizer import normalize
from landingkit.models.product import ProductCandidate

logger = logging.getLogger("landingkit.matching")


class CandidateDeduplicator:
    """Collapse candidates whose titles normalise to the same key."""

    @staticmethod
    def deduplicate(
        candidates: list[ProductCandidate],
    ) -> tuple[list[ProductCandidate], int]:
        """Keep the first candidate per normalised title.

        Returns the deduplicated list (discovery order preserved) and
        the count of removed duplicates.
        """
        seen_titles: set[str] = set()
        kept: list[ProductCandidate] = []
        removed = 0

        for candidate in candidates:
            title_key = normalize(candidate.title)
            if title_key in seen_titles:
                removed += 1
                continue
            seen_titles.add(title_key)
            kept.append(candidate)

        if removed:
            logger.info(
                "Deduplication removed %d duplicate candidates",
                removed,
            )

        return kept, removed


def popularity_score(candidate: ProductCandidate) -> float:
    """``rating * ln(review_count + 1)``; negatives count as zero."""
    reviews = max(candidate.review_count, 0)
    return candidate.rating * math.log(reviews + 1)


def rank_candidates(
    candidates: list[ProductCandidate],
) -> list[ProductCandidate]:
    """Sort by popularity, highest first; ties keep discovery order."""
    return sorted(candidates, key=popularity_score, reverse=True)
