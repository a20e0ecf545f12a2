# tests/test_pipeline.py

"""End-to-end tests for LandingPagePipeline with stubbed collaborators."""

import json
import random
import unittest
from datetime import datetime
from unittest.mock import MagicMock

from landingkit.errors import ProviderError
from landingkit.models.content import GenerationOptions
from landingkit.models.product import ProductCandidate
from landingkit.services.image_analysis import ImageAnalysisService
from landingkit.services.pipeline import LandingPagePipeline

FIXED_NOW = datetime(2025, 3, 1, 12, 0, 0)


class _StaticProvider:
    def __init__(self, name: str, candidates: list[ProductCandidate]) -> None:
        self.name = name
        self.candidates = candidates

    def search(self, query: str) -> list[ProductCandidate]:
        return list(self.candidates)


class _BrokenProvider:
    def __init__(self, name: str, reason: str) -> None:
        self.name = name
        self.reason = reason

    def search(self, query: str) -> list[ProductCandidate]:
        raise ProviderError(self.name, self.reason)


def _copywriter(reply: str = "", api_key: str = "gsk-test") -> MagicMock:
    writer = MagicMock()
    writer.api_key = api_key
    writer.configured = bool(api_key)
    writer.generate.return_value = reply
    return writer


def _pipeline(providers, copywriter) -> LandingPagePipeline:
    rng = random.Random(11)
    return LandingPagePipeline(
        providers=providers,
        image_service=ImageAnalysisService(providers=[], rng=rng),
        copywriter=copywriter,
        rng=rng,
        clock=lambda: FIXED_NOW,
    )


HEADPHONES = ProductCandidate(
    title="Sony WH-1000XM5 Headphones",
    description="Industry-leading noise cancellation.",
    price="$348.00",
    original_price="$399.99",
    features=["Noise cancelling", "30 hour battery"],
    rating=4.7,
    review_count=1520,
    source="serpapi",
)


class TestLandingPagePipeline(unittest.IsolatedAsyncioTestCase):
    """LandingPagePipeline.generate outcomes."""

    async def test_matched_product_with_model_copy(self) -> None:
        reply = json.dumps(
            {"hero": {"headline": "Hear Everything", "cta": "Order Today"}}
        )
        writer = _copywriter(reply)
        pipeline = _pipeline([_StaticProvider("serpapi", [HEADPHONES])], writer)

        result = await pipeline.generate("Sony WH-1000XM5 Headphones")

        self.assertTrue(result.match.accepted)
        self.assertFalse(result.used_fallback)
        self.assertEqual(result.product, HEADPHONES)
        self.assertEqual(result.content.hero.headline, "Hear Everything")
        self.assertEqual(result.content.hero.cta, "Order Today")
        self.assertEqual(result.content.pricing.current, "$348.00")
        self.assertEqual(result.content.pricing.discount, "13%")
        self.assertEqual(result.validation_score, 0.5)
        self.assertEqual(result.errors, [])
        self.assertEqual(result.warnings, [])
        writer.generate.assert_called_once()

    async def test_no_providers_uses_sample_product(self) -> None:
        writer = _copywriter(api_key="")
        pipeline = _pipeline([], writer)
        result = await pipeline.generate("Smart Water Bottle")
        writer.generate.assert_not_called()

        self.assertTrue(result.used_fallback)
        self.assertIsNone(result.match.candidate)
        self.assertEqual(result.product.title, "Smart Water Bottle")
        self.assertEqual(result.product.source, "mock")
        self.assertTrue(
            any("sample product" in w for w in result.warnings)
        )
        self.assertTrue(
            any("Copywriter not configured" in w for w in result.warnings)
        )
        self.assertTrue(result.content.hero.headline)
        self.assertEqual(len(result.image_analyses), len(result.product.images))

    async def test_copywriter_failure_is_recorded(self) -> None:
        writer = _copywriter()
        writer.generate.side_effect = ProviderError("groq", "HTTP 500")
        pipeline = _pipeline([_StaticProvider("serpapi", [HEADPHONES])], writer)

        result = await pipeline.generate("Sony WH-1000XM5 Headphones")

        self.assertIn("groq: HTTP 500", result.errors)
        self.assertTrue(result.content.hero.headline)
        self.assertTrue(result.content.hero.cta)
        self.assertEqual(result.content.product.title, HEADPHONES.title)

    async def test_failing_provider_reported(self) -> None:
        broken = _BrokenProvider("ebay", "Connection timeout")
        pipeline = _pipeline(
            [broken, _StaticProvider("serpapi", [HEADPHONES])], _copywriter()
        )

        result = await pipeline.generate("Sony WH-1000XM5 Headphones")

        self.assertEqual(result.errors, ["ebay: Connection timeout"])
        self.assertEqual(result.product, HEADPHONES)

    async def test_poor_match_warns_and_keeps_top_candidate(self) -> None:
        pipeline = _pipeline(
            [_StaticProvider("serpapi", [HEADPHONES])], _copywriter()
        )
        result = await pipeline.generate("garden hose")

        self.assertFalse(result.match.accepted)
        self.assertEqual(result.product, HEADPHONES)
        self.assertTrue(any("No close match" in w for w in result.warnings))

    async def test_url_input_becomes_query(self) -> None:
        pipeline = _pipeline([], _copywriter(api_key=""))
        result = await pipeline.generate(
            "https://www.amazon.com/Smart-Water-Bottle/dp/B0C1234567"
        )
        self.assertEqual(result.query, "Smart Water Bottle")

    async def test_options_reach_normalizer(self) -> None:
        pipeline = _pipeline(
            [_StaticProvider("serpapi", [HEADPHONES])], _copywriter()
        )
        result = await pipeline.generate(
            "Sony WH-1000XM5 Headphones",
            GenerationOptions(include_upsells=False, include_reviews=False),
        )
        self.assertEqual(result.content.upsells, [])
        self.assertEqual(result.content.reviews, [])

    async def test_to_dict(self) -> None:
        pipeline = _pipeline(
            [_StaticProvider("serpapi", [HEADPHONES])], _copywriter()
        )
        data = (await pipeline.generate("Sony WH-1000XM5 Headphones")).to_dict()

        self.assertEqual(data["query"], "Sony WH-1000XM5 Headphones")
        self.assertEqual(data["match"]["title"], HEADPHONES.title)
        self.assertTrue(data["match"]["accepted"])
        self.assertEqual(data["product"]["originalPrice"], "$399.99")
        self.assertIn("hero", data["content"])
        self.assertIn("socialProof", data["content"])
        self.assertFalse(data["usedFallback"])
        self.assertIsInstance(data["generationTimeMs"], int)
        json.dumps(data)


if __name__ == "__main__":
    unittest.main()
