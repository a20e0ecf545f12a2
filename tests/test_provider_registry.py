# tests/test_provider_registry.py

"""Tests for building search providers from the registry."""

import unittest

from landingkit.config.settings import Settings
from landingkit.errors import LandingKitError
from landingkit.providers.page_metadata_provider import PageMetadataProvider
from landingkit.providers.serpapi_provider import SerpApiProvider
from landingkit.services.provider_registry import (
    _load_provider_class,
    build_search_providers,
)

SERP_SPEC = {
    "id": "serpapi",
    "label": "Google Shopping (SerpAPI)",
    "provider": "landingkit.providers.serpapi_provider.SerpApiProvider",
    "credential": "SERP_API_KEY",
    "target": "query",
}
PAGE_SPEC = {
    "id": "page",
    "label": "Product page metadata",
    "provider": "landingkit.providers.page_metadata_provider.PageMetadataProvider",
    "credential": "",
    "target": "url",
}


class TestProviderRegistry(unittest.TestCase):

    def test_load_provider_class(self) -> None:
        cls = _load_provider_class(SERP_SPEC["provider"])
        self.assertIs(cls, SerpApiProvider)

    def test_all_registry_paths_import(self) -> None:
        for spec in Settings.AVAILABLE_PROVIDERS:
            with self.subTest(provider=spec["id"]):
                self.assertTrue(callable(_load_provider_class(spec["provider"])))

    def test_url_provider_skipped_without_url(self) -> None:
        providers = build_search_providers([SERP_SPEC, PAGE_SPEC])
        self.assertEqual([p.name for p in providers], ["serpapi"])

    def test_url_provider_gets_page_url(self) -> None:
        providers = build_search_providers(
            [PAGE_SPEC], page_url="https://shop.example/p/1"
        )
        self.assertEqual(len(providers), 1)
        self.assertIsInstance(providers[0], PageMetadataProvider)
        self.assertEqual(providers[0].page_url, "https://shop.example/p/1")

    def test_defaults_follow_configured_credentials(self) -> None:
        # No keys are configured under test, so only the page reader remains
        self.assertEqual(build_search_providers(), [])
        providers = build_search_providers(page_url="https://shop.example/p/1")
        self.assertEqual([type(p) for p in providers], [PageMetadataProvider])

    def test_bad_path_raises(self) -> None:
        for path in (
            "landingkit.providers.missing_provider.MissingProvider",
            "landingkit.providers.serpapi_provider.Missing",
        ):
            with self.subTest(path=path):
                spec = dict(SERP_SPEC, provider=path)
                with self.assertRaises(LandingKitError):
                    build_search_providers([spec])


if __name__ == "__main__":
    unittest.main()
