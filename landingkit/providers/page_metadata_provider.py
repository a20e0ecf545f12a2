# landingkit/providers/page_metadata_provider.py

"""Candidate built from a product page's own HTML metadata."""

from urllib.parse import urljoin

from bs4 import BeautifulSoup

from landingkit.errors import ProviderError
from landingkit.extraction.features import FeatureExtractor
from landingkit.extraction.pricing import extract_currency, format_price
from landingkit.extraction.query_builder import is_url
from landingkit.models.product import ProductCandidate
from landingkit.providers.base_provider import SearchProvider


def _meta(soup: BeautifulSoup, *keys: str) -> str:
    """Content of the first ``<meta>`` whose name or property matches."""
    for key in keys:
        tag = soup.find("meta", attrs={"property": key}) or soup.find(
            "meta", attrs={"name": key}
        )
        if tag and tag.get("content"):
            return str(tag["content"]).strip()
    return ""


class PageMetadataProvider(SearchProvider):
    """Reads title, description, price and images from the product page.

    Needs no credential. The page is *page_url* when given, otherwise
    the query itself; a query that is not a URL fails with a
    ProviderError.
    """

    name = "page"

    def __init__(
        self,
        api_key: str | None = None,
        feature_extractor: FeatureExtractor | None = None,
        page_url: str | None = None,
    ) -> None:
        super().__init__(api_key)
        self.features = feature_extractor or FeatureExtractor()
        self.page_url = page_url

    def _images(self, soup: BeautifulSoup, base_url: str) -> list[str]:
        images: list[str] = []
        for tag in soup.find_all("meta", attrs={"property": "og:image"}):
            src = tag.get("content")
            if src:
                images.append(urljoin(base_url, str(src)))
        return list(dict.fromkeys(images))[: self.settings.MAX_IMAGES]

    def parse(self, soup: BeautifulSoup, url: str) -> ProductCandidate:
        """Build a candidate from an already fetched page."""
        title = _meta(soup, "og:title", "twitter:title")
        if not title and soup.title and soup.title.string:
            title = soup.title.string.strip()
        if not title:
            raise ProviderError(self.name, "page has no title")

        description = _meta(
            soup, "og:description", "description", "twitter:description"
        )
        amount = _meta(soup, "product:price:amount", "og:price:amount")
        currency = _meta(
            soup, "product:price:currency", "og:price:currency"
        )
        price = format_price(amount, currency) if amount else ""

        return ProductCandidate(
            title=title,
            description=description,
            price=price,
            currency=currency or extract_currency(price),
            images=self._images(soup, url),
            features=self.features.extract(f"{title} {description}"),
            url=url,
            source="page",
            brand=_meta(soup, "product:brand", "og:brand"),
        )

    def search(self, query: str) -> list[ProductCandidate]:
        """Fetch the product page and return a single candidate."""
        url = self.page_url or query
        if not is_url(url):
            raise ProviderError(self.name, "query is not a URL")
        self.logger.info("[page] Fetching %s", url)
        soup = self._get_page(url)
        return [self.parse(soup, url)]
