# landingkit/services/search_aggregator.py

"""Fans a query out to every search provider and merges the results."""

import asyncio
import inspect
import logging
import random
from collections.abc import Sequence
from dataclasses import dataclass, field
from typing import Any, Protocol

from landingkit.errors import ProviderError
from landingkit.matching.deduplicator import (
    CandidateDeduplicator,
    rank_candidates,
)
from landingkit.matching.similarity import (
    MATCH_THRESHOLD,
    MatchResult,
    best_match,
)
from landingkit.models.product import ProductCandidate
from landingkit.providers.mock_factory import MockDataFactory
from landingkit.validation.candidate_validator import CandidateValidator

logger = logging.getLogger("landingkit.aggregator")


class SearchProviderLike(Protocol):
    """Anything with a ``search(query)`` returning candidates.

    ``search`` may be a plain function (run in a worker thread) or a
    coroutine function (awaited on the loop).
    """

    def search(self, query: str) -> Any: ...


@dataclass
class AggregatedResult:
    """Container for a completed search across several providers."""

    query: str
    candidates: list[ProductCandidate] = field(
        default_factory=lambda: list[ProductCandidate]()
    )
    match: MatchResult = field(
        default_factory=lambda: MatchResult(candidate=None, similarity=0.0)
    )
    errors: list[str] = field(default_factory=lambda: list[str]())
    deduplicated_count: int = 0
    invalid_count: int = 0
    used_fallback: bool = False

    @property
    def primary(self) -> ProductCandidate:
        """The accepted match, else the top-ranked candidate."""
        if self.match.accepted and self.match.candidate is not None:
            return self.match.candidate
        return self.candidates[0]


def _provider_name(provider: SearchProviderLike) -> str:
    return str(getattr(provider, "name", type(provider).__name__))


class ProductSearchAggregator:
    """Coordinates concurrent provider searches, dedup and ranking."""

    def __init__(
        self,
        mock_factory: MockDataFactory | None = None,
        threshold: float = MATCH_THRESHOLD,
        rng: random.Random | None = None,
    ) -> None:
        self.mock_factory = mock_factory or MockDataFactory(rng)
        self.threshold = threshold

    async def _run_one(
        self, provider: SearchProviderLike, query: str
    ) -> list[ProductCandidate]:
        if inspect.iscoroutinefunction(provider.search):
            found = await provider.search(query)
        else:
            found = await asyncio.to_thread(provider.search, query)
        batch = list(found or [])
        if not all(isinstance(item, ProductCandidate) for item in batch):
            raise ProviderError(_provider_name(provider), "malformed payload")
        return batch

    async def _run_providers(
        self,
        query: str,
        providers: Sequence[SearchProviderLike],
    ) -> tuple[list[ProductCandidate], list[str]]:
        """Dispatch providers concurrently and wait for all to settle.

        Returns the raw candidate list (provider order preserved) and
        one ``"<provider>: <reason>"`` message per failed provider.
        """
        batches = await asyncio.gather(
            *(self._run_one(p, query) for p in providers),
            return_exceptions=True,
        )

        candidates: list[ProductCandidate] = []
        errors: list[str] = []
        for provider, batch in zip(providers, batches):
            name = _provider_name(provider)
            if isinstance(batch, BaseException):
                if not isinstance(batch, Exception):
                    raise batch
                reason = getattr(batch, "reason", None) or str(batch)
                errors.append(f"{name}: {reason or type(batch).__name__}")
                logger.error(
                    "Provider %s failed for query '%s': %s",
                    name,
                    query,
                    batch,
                    exc_info=batch,
                )
                continue
            logger.info(
                "Provider %s returned %d candidates", name, len(batch)
            )
            candidates.extend(batch)

        return candidates, errors

    async def search(
        self,
        query: str,
        providers: Sequence[SearchProviderLike],
    ) -> AggregatedResult:
        """Search every provider and return ranked, deduplicated candidates.

        Never raises for provider failures. When nothing usable comes
        back the result holds exactly one synthetic candidate and
        ``used_fallback`` is set.
        """
        result = AggregatedResult(query=query)
        raw, result.errors = await self._run_providers(query, providers)

        valid, result.invalid_count = CandidateValidator.validate(raw)
        unique, result.deduplicated_count = (
            CandidateDeduplicator.deduplicate(valid)
        )

        if not unique:
            logger.warning(
                "No candidates for '%s' from %d providers, using mock data",
                query,
                len(providers),
            )
            result.candidates = [self.mock_factory.product(query)]
            result.used_fallback = True
            # A synthetic record is never reported as a match
            result.match = MatchResult(
                candidate=None, similarity=0.0, threshold=self.threshold
            )
            return result

        result.candidates = rank_candidates(unique)
        result.match = best_match(
            query, result.candidates, threshold=self.threshold
        )
        return result
