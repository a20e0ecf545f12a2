# landingkit/providers/serpapi_provider.py

"""Google Shopping search through SerpAPI."""

import math
import re
from typing import Any

from landingkit.errors import ProviderError
from landingkit.extraction.features import FeatureExtractor
from landingkit.extraction.pricing import extract_currency
from landingkit.models.product import Availability, ProductCandidate
from landingkit.providers.base_provider import SearchProvider


def _rating(value: Any) -> float:
    try:
        rating = float(value or 0.0)
    except (TypeError, ValueError):
        return 0.0
    return rating if math.isfinite(rating) else 0.0


def _review_count(value: Any) -> int:
    """Review counts arrive as ints or strings like ``"1,520"``."""
    if isinstance(value, int) and not isinstance(value, bool):
        return max(value, 0)
    if isinstance(value, float):
        return int(value) if math.isfinite(value) and value > 0 else 0
    digits = re.sub(r"[^\d]", "", str(value or ""))
    return int(digits) if digits else 0


class SerpApiProvider(SearchProvider):
    """Search provider backed by SerpAPI's ``google_shopping`` engine."""

    name = "serpapi"
    credential_setting = "SERP_API_KEY"

    SEARCH_URL = "https://serpapi.com/search.json"

    def __init__(
        self,
        api_key: str | None = None,
        feature_extractor: FeatureExtractor | None = None,
    ) -> None:
        super().__init__(api_key)
        self.features = feature_extractor or FeatureExtractor()

    def _parse_result(self, item: dict[str, Any]) -> ProductCandidate:
        """Map one ``shopping_results`` entry to a ProductCandidate."""
        price = str(item.get("price") or "$0.00")
        snippet = str(item.get("snippet") or "")
        images = [
            str(url)
            for url in [item.get("thumbnail"), *(item.get("images") or [])]
            if url
        ][: self.settings.MAX_IMAGES]
        delivery = str(item.get("delivery") or "")

        return ProductCandidate(
            title=str(item.get("title") or "Unknown Product"),
            description=snippet or "No description available",
            price=price,
            original_price=(
                str(item["original_price"])
                if item.get("original_price")
                else None
            ),
            currency=extract_currency(price),
            images=images,
            features=self.features.extract(snippet),
            rating=_rating(item.get("rating")),
            review_count=_review_count(item.get("reviews")),
            availability=Availability.IN_STOCK,
            url=str(item.get("link") or item.get("product_link") or ""),
            source=str(item.get("source") or "Google Shopping"),
            brand=str(item.get("brand") or "Unknown"),
            category=str(item.get("category") or "General"),
            specifications=(
                {"Delivery": delivery} if delivery else {}
            ),
        )

    def search(self, query: str) -> list[ProductCandidate]:
        """Query Google Shopping and return every parsed result."""
        api_key = self._require_key()
        self.logger.info("[serpapi] Searching for '%s'", query)
        resp = self._fetch_get(
            self.SEARCH_URL,
            params={
                "engine": "google_shopping",
                "q": query,
                "hl": "en",
                "gl": "us",
                "num": str(self.settings.SERP_RESULTS_PER_QUERY),
                "api_key": api_key,
            },
        )
        data = self._json(resp)
        if data.get("error"):
            raise ProviderError(self.name, str(data["error"]))

        results = data.get("shopping_results") or []
        if not isinstance(results, list):
            raise ProviderError(self.name, "unexpected shopping_results shape")

        candidates: list[ProductCandidate] = []
        for item in results:
            if not isinstance(item, dict):
                continue
            try:
                candidates.append(self._parse_result(item))
            except (TypeError, ValueError) as exc:
                self.logger.warning(
                    "[serpapi] Skipping malformed result: %s", exc
                )
        self.logger.info(
            "[serpapi] %d results for '%s'", len(candidates), query
        )
        return candidates
