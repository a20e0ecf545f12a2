# landingkit/services/pipeline.py

"""End-to-end generation: search, validate, write copy, normalise."""

import asyncio
import logging
import random
import time
from collections.abc import Callable, Sequence
from dataclasses import dataclass, field
from datetime import datetime
from typing import Any

from landingkit.config.settings import Settings
from landingkit.content.normalizer import ContentNormalizer
from landingkit.errors import ProviderError
from landingkit.extraction.query_builder import is_url, product_name_from_url
from landingkit.llm.groq_client import GroqCopywriter
from landingkit.matching.similarity import MatchResult
from landingkit.models.content import GenerationOptions, NormalizedContent
from landingkit.models.image_analysis import ImageAnalysis
from landingkit.models.product import ProductCandidate
from landingkit.providers.mock_factory import MockDataFactory
from landingkit.services.image_analysis import ImageAnalysisService
from landingkit.services.provider_registry import build_search_providers
from landingkit.services.search_aggregator import (
    ProductSearchAggregator,
    SearchProviderLike,
)
from landingkit.validation.image_validator import ImageProductValidator

logger = logging.getLogger("landingkit.pipeline")


@dataclass
class GenerationResult:
    """Everything produced for one generation request."""

    query: str
    product: ProductCandidate
    content: NormalizedContent
    match: MatchResult
    validation_score: float
    generation_time_ms: int = 0
    used_fallback: bool = False
    image_analyses: list[ImageAnalysis] = field(
        default_factory=lambda: list[ImageAnalysis]()
    )
    errors: list[str] = field(default_factory=lambda: list[str]())
    warnings: list[str] = field(default_factory=lambda: list[str]())

    def to_dict(self) -> dict[str, Any]:
        return {
            "query": self.query,
            "product": self.product.to_dict(),
            "content": self.content.to_dict(),
            "match": {
                "title": (
                    self.match.candidate.title
                    if self.match.candidate is not None
                    else None
                ),
                "similarity": round(self.match.similarity, 4),
                "accepted": self.match.accepted,
            },
            "validationScore": round(self.validation_score, 4),
            "generationTimeMs": self.generation_time_ms,
            "usedFallback": self.used_fallback,
            "errors": list(self.errors),
            "warnings": list(self.warnings),
        }


class LandingPagePipeline:
    """Orchestrates one landing page generation.

    Collaborators are injectable; by default they are built from
    :class:`Settings`, so a run without any API key still completes on
    mock data and static copy.
    """

    def __init__(
        self,
        providers: Sequence[SearchProviderLike] | None = None,
        aggregator: ProductSearchAggregator | None = None,
        image_service: ImageAnalysisService | None = None,
        validator: ImageProductValidator | None = None,
        copywriter: GroqCopywriter | None = None,
        normalizer: ContentNormalizer | None = None,
        rng: random.Random | None = None,
        clock: Callable[[], datetime] | None = None,
    ) -> None:
        mock_factory = MockDataFactory(rng)
        self.providers = providers
        self.aggregator = aggregator or ProductSearchAggregator(
            mock_factory=mock_factory
        )
        self.image_service = image_service or ImageAnalysisService(
            mock_factory=mock_factory, rng=rng
        )
        self.validator = validator or ImageProductValidator()
        self.copywriter = copywriter or GroqCopywriter()
        self.normalizer = normalizer or ContentNormalizer(rng=rng, clock=clock)

    def _providers_for(self, text: str) -> Sequence[SearchProviderLike]:
        if self.providers is not None:
            return self.providers
        return build_search_providers(
            page_url=text.strip() if is_url(text) else None
        )

    async def _write_copy(
        self,
        product: ProductCandidate,
        options: GenerationOptions,
        errors: list[str],
        warnings: list[str],
    ) -> str:
        if not self.copywriter.configured:
            warnings.append("Copywriter not configured, using template copy")
            return ""
        try:
            return await asyncio.to_thread(
                self.copywriter.generate, product, options
            )
        except ProviderError as exc:
            errors.append(str(exc))
            logger.error("Copy generation failed: %s", exc, exc_info=True)
            return ""

    async def generate(
        self,
        url_or_query: str,
        options: GenerationOptions | None = None,
    ) -> GenerationResult:
        """Generate landing page content for a product URL or free text."""
        options = options or GenerationOptions()
        started = time.perf_counter()
        errors: list[str] = []
        warnings: list[str] = []

        query = product_name_from_url(url_or_query)
        logger.info("Generating landing page for '%s'", query)

        search = await self.aggregator.search(
            query, self._providers_for(url_or_query)
        )
        errors.extend(search.errors)
        product = search.primary
        if search.used_fallback:
            warnings.append("No live product data found, using a sample product")
        elif not search.match.accepted:
            warnings.append(
                f"No close match for '{query}' "
                f"(best similarity {search.match.similarity:.2f}), "
                "using the top-ranked candidate"
            )

        analyses, image_errors = await self.image_service.analyze(
            product.images
        )
        errors.extend(image_errors)
        score = self.validator.validate(product.title, analyses)
        if score < Settings.LOW_VALIDATION_WARNING:
            warnings.append(
                f"Images may not match the product (score {score:.2f})"
            )
            logger.warning(
                "Low validation score %.2f for '%s'", score, product.title
            )

        raw_copy = await self._write_copy(product, options, errors, warnings)
        content = self.normalizer.normalize(raw_copy, product, options)

        elapsed_ms = int((time.perf_counter() - started) * 1000)
        logger.info(
            "Generated '%s' in %d ms (%d errors, %d warnings)",
            product.title,
            elapsed_ms,
            len(errors),
            len(warnings),
        )
        return GenerationResult(
            query=query,
            product=product,
            content=content,
            match=search.match,
            validation_score=score,
            generation_time_ms=elapsed_ms,
            used_fallback=search.used_fallback,
            image_analyses=analyses,
            errors=errors,
            warnings=warnings,
        )
