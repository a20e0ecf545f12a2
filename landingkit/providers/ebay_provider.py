# landingkit/providers/ebay_provider.py

"""eBay Finding API keyword search."""

from typing import Any

from landingkit.errors import ProviderError
from landingkit.extraction.features import FeatureExtractor
from landingkit.extraction.pricing import format_price
from landingkit.models.product import Availability, ProductCandidate
from landingkit.providers.base_provider import SearchProvider

def _first(value: Any) -> Any:
    """The Finding API wraps every scalar in a one-element list."""
    if isinstance(value, list):
        return value[0] if value else None
    return value


class EbayProvider(SearchProvider):
    """Search provider backed by ``findItemsByKeywords``."""

    name = "ebay"
    credential_setting = "EBAY_API_KEY"

    FINDING_URL = (
        "https://svcs.ebay.com/services/search/FindingService/v1"
    )

    def __init__(
        self,
        api_key: str | None = None,
        feature_extractor: FeatureExtractor | None = None,
    ) -> None:
        super().__init__(api_key)
        self.features = feature_extractor or FeatureExtractor()

    def _parse_item(self, item: dict[str, Any]) -> ProductCandidate:
        """Map one Finding API ``item`` to a ProductCandidate."""
        title = str(_first(item.get("title")) or "Unknown Product")
        selling = _first(item.get("sellingStatus")) or {}
        current = _first(selling.get("currentPrice")) or {}
        amount = str(current.get("__value__") or "0.00")
        currency = str(current.get("@currencyId") or "USD")
        gallery = _first(item.get("galleryURL"))
        category = _first(item.get("primaryCategory")) or {}
        condition = _first(item.get("condition")) or {}
        condition_name = _first(condition.get("conditionDisplayName"))
        state = str(_first(selling.get("sellingState")) or "Active")

        return ProductCandidate(
            title=title,
            description=str(_first(item.get("subtitle")) or title),
            price=format_price(amount, currency),
            currency=currency,
            images=[str(gallery)] if gallery else [],
            features=self.features.extract(title),
            availability=(
                Availability.IN_STOCK
                if state == "Active"
                else Availability.OUT_OF_STOCK
            ),
            url=str(_first(item.get("viewItemURL")) or ""),
            source="eBay",
            category=str(_first(category.get("categoryName")) or "General"),
            specifications=(
                {"Condition": str(condition_name)} if condition_name else {}
            ),
        )

    def search(self, query: str) -> list[ProductCandidate]:
        """Run a keyword search and return the first page of items."""
        app_name = self._require_key()
        self.logger.info("[ebay] Searching for '%s'", query)
        resp = self._fetch_get(
            self.FINDING_URL,
            params={
                "OPERATION-NAME": "findItemsByKeywords",
                "SERVICE-VERSION": "1.0.0",
                "SECURITY-APPNAME": app_name,
                "RESPONSE-DATA-FORMAT": "JSON",
                "REST-PAYLOAD": "",
                "keywords": query,
                "paginationInput.entriesPerPage": str(
                    self.settings.EBAY_RESULTS_PER_QUERY
                ),
            },
        )
        data = self._json(resp)
        response = _first(data.get("findItemsByKeywordsResponse"))
        if not isinstance(response, dict):
            raise ProviderError(self.name, "unexpected response shape")

        ack = _first(response.get("ack"))
        if ack not in ("Success", "Warning"):
            raise ProviderError(self.name, f"ack={ack}")

        search_result = _first(response.get("searchResult")) or {}
        items = search_result.get("item") or []
        candidates = [
            self._parse_item(item) for item in items if isinstance(item, dict)
        ]
        self.logger.info(
            "[ebay] %d results for '%s'", len(candidates), query
        )
        return candidates
