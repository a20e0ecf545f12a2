# landingkit/services/image_analysis.py

"""Concurrent image labelling with per-image provider fallback."""

import asyncio
import logging
import random
from collections.abc import Sequence

from landingkit.config.settings import Settings
from landingkit.errors import ProviderError
from landingkit.models.image_analysis import ImageAnalysis
from landingkit.providers.base_provider import VisionProvider
from landingkit.providers.clarifai_provider import ClarifaiProvider
from landingkit.providers.google_vision_provider import GoogleVisionProvider
from landingkit.providers.mock_factory import MockDataFactory

logger = logging.getLogger("landingkit.images")


def default_vision_providers(
    rng: random.Random | None = None,
) -> list[VisionProvider]:
    """Vision providers whose API key is configured, in preference order."""
    providers: list[VisionProvider] = []
    if Settings.GOOGLE_VISION_API_KEY:
        providers.append(GoogleVisionProvider(rng=rng))
    if Settings.CLARIFAI_API_KEY:
        providers.append(ClarifaiProvider(rng=rng))
    return providers


class ImageAnalysisService:
    """Analyse up to ``max_images`` images concurrently.

    Each image walks the provider chain in order; the first successful
    analysis wins. An image that no provider can label gets a mock
    analysis, so the output always has one entry per input image.
    """

    def __init__(
        self,
        providers: Sequence[VisionProvider] | None = None,
        mock_factory: MockDataFactory | None = None,
        max_images: int = Settings.MAX_IMAGES,
        rng: random.Random | None = None,
    ) -> None:
        self.providers = (
            list(providers)
            if providers is not None
            else default_vision_providers(rng)
        )
        self.mock_factory = mock_factory or MockDataFactory(rng)
        self.max_images = max_images

    async def _analyze_one(
        self, image_url: str, errors: list[str]
    ) -> ImageAnalysis:
        for provider in self.providers:
            try:
                return await asyncio.to_thread(provider.analyze, image_url)
            except ProviderError as exc:
                errors.append(str(exc))
                logger.warning(
                    "Vision provider %s failed for %s: %s",
                    provider.name,
                    image_url,
                    exc.reason,
                )
        return self.mock_factory.image_analysis(image_url)

    async def analyze(
        self, image_urls: Sequence[str]
    ) -> tuple[list[ImageAnalysis], list[str]]:
        """Return one analysis per image (input order) and error messages."""
        urls = [u for u in image_urls if u][: self.max_images]
        if not urls:
            return [], []
        if not self.providers:
            logger.info(
                "No vision provider configured, mocking %d analyses",
                len(urls),
            )

        errors: list[str] = []
        settled = await asyncio.gather(
            *(self._analyze_one(url, errors) for url in urls),
            return_exceptions=True,
        )

        analyses: list[ImageAnalysis] = []
        for url, outcome in zip(urls, settled):
            if isinstance(outcome, BaseException):
                if not isinstance(outcome, Exception):
                    raise outcome
                errors.append(f"images: {outcome}")
                logger.error(
                    "Image analysis crashed for %s", url, exc_info=outcome
                )
                outcome = self.mock_factory.image_analysis(url)
            analyses.append(outcome)

        return analyses, errors
