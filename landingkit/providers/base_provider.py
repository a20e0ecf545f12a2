# landingkit/providers/base_provider.py

"""Shared HTTP plumbing for search and vision providers."""

import logging
from abc import ABC, abstractmethod
from typing import Any

import cloudscraper  # type: ignore[import-untyped]
from bs4 import BeautifulSoup
from curl_cffi import requests as curl_requests

from landingkit.config.settings import Settings
from landingkit.errors import ProviderError
from landingkit.models.image_analysis import ImageAnalysis
from landingkit.models.product import ProductCandidate


class BaseProvider:
    """HTTP session and error mapping common to every provider.

    Request-level timeouts come from ``Settings.REQUEST_TIMEOUT``;
    retries are left to the caller. Every failure surfaces as a
    :class:`ProviderError` naming this provider.
    """

    name: str = "base"
    credential_setting: str = ""

    def __init__(self, api_key: str | None = None) -> None:
        self.logger = logging.getLogger(
            f"landingkit.providers.{self.name}"
        )
        self.settings = Settings()
        if api_key is None and self.credential_setting:
            api_key = getattr(Settings, self.credential_setting, "")
        self.api_key: str = api_key or ""
        self.session = curl_requests.Session(
            impersonate=self.settings.IMPERSONATE_BROWSER
        )
        self._request_timeout: int = self.settings.REQUEST_TIMEOUT

    def _require_key(self) -> str:
        """Return the API key or fail when it is not configured."""
        if not self.api_key:
            raise ProviderError(self.name, "API key not configured")
        return self.api_key

    def _check_status(self, resp: curl_requests.Response) -> None:
        if resp.status_code == 401:
            raise ProviderError(self.name, "invalid API key (HTTP 401)")
        if resp.status_code == 429:
            raise ProviderError(self.name, "rate limit exceeded (HTTP 429)")
        if not 200 <= resp.status_code < 300:
            raise ProviderError(self.name, f"HTTP {resp.status_code}")

    def _json(self, resp: curl_requests.Response) -> dict[str, Any]:
        """Decode a JSON object body or fail with a ProviderError."""
        try:
            data = resp.json()
        except ValueError as exc:
            raise ProviderError(self.name, "invalid JSON response") from exc
        if not isinstance(data, dict):
            raise ProviderError(self.name, "unexpected response shape")
        return data

    def _fetch_get(
        self,
        url: str,
        params: dict[str, str] | None = None,
        headers: dict[str, str] | None = None,
    ) -> curl_requests.Response:
        """Single GET; transport errors and non-2xx become ProviderError."""
        try:
            resp = self.session.get(
                url,
                params=params,
                headers=headers,
                timeout=self._request_timeout,
            )
        except Exception as exc:
            self.logger.warning(
                "[%s] Request error: %s", self.name, exc, exc_info=True
            )
            raise ProviderError(self.name, f"request failed: {exc}") from exc
        self._check_status(resp)
        return resp

    def _fetch_post(
        self,
        url: str,
        payload: dict[str, Any],
        headers: dict[str, str] | None = None,
    ) -> curl_requests.Response:
        """Single JSON POST with the same error mapping as GET."""
        try:
            resp = self.session.post(
                url,
                json=payload,
                headers=headers,
                timeout=self._request_timeout,
            )
        except Exception as exc:
            self.logger.warning(
                "[%s] Request error: %s", self.name, exc, exc_info=True
            )
            raise ProviderError(self.name, f"request failed: {exc}") from exc
        self._check_status(resp)
        return resp

    def _get_page(self, url: str) -> BeautifulSoup:
        """Fetch an HTML page, falling back to cloudscraper when blocked."""
        headers = dict(self.settings.DEFAULT_HEADERS)
        try:
            resp = self._fetch_get(url, headers=headers)
            return BeautifulSoup(resp.text, "lxml")
        except ProviderError as primary_error:
            self.logger.info(
                "[%s] curl_cffi fetch failed (%s), falling back to cloudscraper",
                self.name,
                primary_error.reason,
            )

        try:
            _cs: Any = cloudscraper
            scraper: Any = _cs.create_scraper()
            fallback_resp: Any = scraper.get(
                url,
                headers=headers,
                timeout=self._request_timeout,
            )
        except Exception as exc:
            self.logger.error(
                "[%s] cloudscraper fallback also failed: %s",
                self.name,
                exc,
                exc_info=True,
            )
            raise ProviderError(self.name, f"page fetch failed: {exc}") from exc

        if fallback_resp.status_code != 200:
            raise ProviderError(
                self.name, f"HTTP {fallback_resp.status_code}"
            )
        return BeautifulSoup(str(fallback_resp.text), "lxml")


class SearchProvider(BaseProvider, ABC):
    """A product data source queried by the search aggregator."""

    @abstractmethod
    def search(self, query: str) -> list[ProductCandidate]:
        """Return candidates for *query* or raise ProviderError."""
        ...


class VisionProvider(BaseProvider, ABC):
    """An image labelling service used by the image analysis step."""

    # A label containing any of these marks the image as a product shot
    PRODUCT_KEYWORDS: tuple[str, ...] = (
        "product",
        "item",
        "goods",
        "merchandise",
        "object",
        "tool",
        "device",
        "equipment",
    )

    def _is_product_image(self, labels: list[str]) -> bool:
        return any(
            keyword in label.lower()
            for label in labels
            for keyword in self.PRODUCT_KEYWORDS
        )

    @abstractmethod
    def analyze(self, image_url: str) -> ImageAnalysis:
        """Label *image_url* or raise ProviderError."""
        ...
