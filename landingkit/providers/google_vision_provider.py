# landingkit/providers/google_vision_provider.py

"""Image labelling through the Google Cloud Vision REST API."""

import random
from typing import Any

from landingkit.errors import ProviderError
from landingkit.models.image_analysis import (
    SAFE_SEARCH_CATEGORIES,
    ImageAnalysis,
)
from landingkit.providers.base_provider import VisionProvider


def rgb_to_hex(color: dict[str, Any]) -> str:
    """``{'red': 255, 'green': 0}`` -> ``'#ff0000'``; missing channels are 0."""
    channels = (
        max(0, min(255, round(float(color.get(name) or 0))))
        for name in ("red", "green", "blue")
    )
    return "#" + "".join(f"{value:02x}" for value in channels)


class GoogleVisionProvider(VisionProvider):
    """Labels, safe-search, text and colours from ``images:annotate``."""

    name = "google_vision"
    credential_setting = "GOOGLE_VISION_API_KEY"

    ANNOTATE_URL = "https://vision.googleapis.com/v1/images:annotate"

    # Confidence is drawn from these ranges depending on the verdict
    PRODUCT_CONFIDENCE: tuple[float, float] = (0.8, 1.0)
    OTHER_CONFIDENCE: tuple[float, float] = (0.3, 0.7)

    def __init__(
        self,
        api_key: str | None = None,
        rng: random.Random | None = None,
    ) -> None:
        super().__init__(api_key)
        self.rng = rng or random.Random()

    def analyze(self, image_url: str) -> ImageAnalysis:
        """Annotate one image by URL."""
        api_key = self._require_key()
        payload = {
            "requests": [
                {
                    "image": {"source": {"imageUri": image_url}},
                    "features": [
                        {"type": "LABEL_DETECTION", "maxResults": 10},
                        {"type": "SAFE_SEARCH_DETECTION"},
                        {"type": "TEXT_DETECTION"},
                        {"type": "IMAGE_PROPERTIES"},
                    ],
                }
            ]
        }
        resp = self._fetch_post(
            f"{self.ANNOTATE_URL}?key={api_key}", payload
        )
        data = self._json(resp)
        responses = data.get("responses") or []
        if not responses or not isinstance(responses[0], dict):
            raise ProviderError(self.name, "empty annotate response")
        result: dict[str, Any] = responses[0]
        if result.get("error"):
            message = result["error"].get("message", "unknown error")
            raise ProviderError(self.name, str(message))

        labels = [
            str(label.get("description", ""))
            for label in result.get("labelAnnotations") or []
            if label.get("description")
        ]
        safe = result.get("safeSearchAnnotation") or {}
        texts = [
            str(text.get("description", ""))
            for text in result.get("textAnnotations") or []
            if text.get("description")
        ]
        colors = (
            (result.get("imagePropertiesAnnotation") or {})
            .get("dominantColors", {})
            .get("colors", [])
        )
        is_product = self._is_product_image(labels)
        low, high = (
            self.PRODUCT_CONFIDENCE if is_product else self.OTHER_CONFIDENCE
        )

        return ImageAnalysis(
            labels=labels,
            is_product_image=is_product,
            confidence=self.rng.uniform(low, high),
            safe_search={
                name: str(safe.get(name) or "VERY_UNLIKELY")
                for name in SAFE_SEARCH_CATEGORIES
            },
            dominant_colors=[
                rgb_to_hex(entry.get("color") or {}) for entry in colors
            ],
            text_annotations=texts,
            image_url=image_url,
            provider=self.name,
        )
