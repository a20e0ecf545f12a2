# tests/test_image_analysis.py

"""Tests for the concurrent image analysis service."""

import random
import unittest

from landingkit.errors import ProviderError
from landingkit.models.image_analysis import ImageAnalysis
from landingkit.services.image_analysis import (
    ImageAnalysisService,
    default_vision_providers,
)


class _FakeVision:
    """Vision provider stub keyed on image URL."""

    def __init__(self, name: str, fail_on: set[str] | None = None) -> None:
        self.name = name
        self.fail_on = fail_on or set()
        self.calls: list[str] = []

    def analyze(self, image_url: str) -> ImageAnalysis:
        self.calls.append(image_url)
        if image_url in self.fail_on:
            raise ProviderError(self.name, "HTTP 500")
        return ImageAnalysis(
            labels=["Product"],
            is_product_image=True,
            confidence=0.9,
            image_url=image_url,
            provider=self.name,
        )


class TestImageAnalysisService(unittest.IsolatedAsyncioTestCase):
    """ImageAnalysisService.analyze behaviour."""

    async def test_one_analysis_per_image_in_order(self) -> None:
        service = ImageAnalysisService(providers=[_FakeVision("google")])
        urls = ["https://img/1.jpg", "https://img/2.jpg"]
        analyses, errors = await service.analyze(urls)
        self.assertEqual([a.image_url for a in analyses], urls)
        self.assertEqual(errors, [])

    async def test_second_provider_used_after_failure(self) -> None:
        first = _FakeVision("google", fail_on={"https://img/1.jpg"})
        second = _FakeVision("clarifai")
        service = ImageAnalysisService(providers=[first, second])
        analyses, errors = await service.analyze(["https://img/1.jpg"])
        self.assertEqual(analyses[0].provider, "clarifai")
        self.assertEqual(errors, ["google: HTTP 500"])

    async def test_mock_when_every_provider_fails(self) -> None:
        url = "https://img/1.jpg"
        service = ImageAnalysisService(
            providers=[
                _FakeVision("google", fail_on={url}),
                _FakeVision("clarifai", fail_on={url}),
            ],
            rng=random.Random(3),
        )
        analyses, errors = await service.analyze([url])
        self.assertEqual(len(analyses), 1)
        self.assertEqual(analyses[0].provider, "mock")
        self.assertTrue(analyses[0].is_product_image)
        self.assertEqual(len(errors), 2)

    async def test_no_providers_gives_mocks(self) -> None:
        service = ImageAnalysisService(providers=[], rng=random.Random(3))
        analyses, errors = await service.analyze(["https://img/1.jpg"])
        self.assertEqual(analyses[0].provider, "mock")
        self.assertGreaterEqual(analyses[0].confidence, 0.85)
        self.assertEqual(errors, [])

    async def test_capped_at_max_images(self) -> None:
        provider = _FakeVision("google")
        service = ImageAnalysisService(providers=[provider])
        urls = [f"https://img/{i}.jpg" for i in range(15)]
        analyses, _ = await service.analyze(urls)
        self.assertEqual(len(analyses), 10)
        self.assertEqual(len(provider.calls), 10)

    async def test_blank_urls_skipped(self) -> None:
        service = ImageAnalysisService(providers=[_FakeVision("google")])
        analyses, _ = await service.analyze(["", "https://img/1.jpg"])
        self.assertEqual(len(analyses), 1)

    async def test_empty_input(self) -> None:
        service = ImageAnalysisService(providers=[_FakeVision("google")])
        self.assertEqual(await service.analyze([]), ([], []))


class TestDefaultVisionProviders(unittest.TestCase):

    def test_none_without_keys(self) -> None:
        self.assertEqual(default_vision_providers(), [])


if __name__ == "__main__":
    unittest.main()
