# landingkit/validation/candidate_validator.py

"""Candidate validation: drop records that cannot name a product."""

import logging

from landingkit.models.product import ProductCandidate

logger = logging.getLogger("landingkit.validation")


class CandidateValidator:
    """Drop candidates with missing essential fields."""

    @staticmethod
    def validate(
        candidates: list[ProductCandidate],
    ) -> tuple[list[ProductCandidate], int]:
        """Drop candidates whose title is empty or whitespace.

        Returns the valid candidates and the count of dropped items.
        """
        valid: list[ProductCandidate] = []
        dropped = 0

        for candidate in candidates:
            if not candidate.title.strip():
                logger.debug(
                    "Dropped candidate with empty title "
                    "(source=%s, url=%s)",
                    candidate.source,
                    candidate.url,
                )
                dropped += 1
                continue
            valid.append(candidate)

        if dropped:
            logger.info(
                "Validation dropped %d invalid candidates",
                dropped,
            )

        return valid, dropped
