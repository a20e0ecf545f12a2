# landingkit/config/settings.py

"""Central configuration for the landingkit pipeline."""

import os
from pathlib import Path

from curl_cffi.requests import BrowserTypeLiteral
from dotenv import load_dotenv

load_dotenv()

# Values shipped in example .env files that mean "not configured"
_PLACEHOLDER_PREFIXES: tuple[str, ...] = ("your_", "changeme")


def _credential(name: str) -> str:
    """Read a credential from the environment, blanking placeholders."""
    value = os.getenv(name, "").strip()
    if not value or value.lower().startswith(_PLACEHOLDER_PREFIXES):
        return ""
    return value


class Settings:
    """Central configuration for the landingkit pipeline."""

    # --- Credentials ---
    SERP_API_KEY: str = _credential("SERP_API_KEY")
    EBAY_API_KEY: str = _credential("EBAY_API_KEY")
    GOOGLE_VISION_API_KEY: str = _credential("GOOGLE_VISION_API_KEY")
    CLARIFAI_API_KEY: str = _credential("CLARIFAI_API_KEY")
    GROQ_API_KEY: str = _credential("GROQ_API_KEY")

    # --- Contact & tracking ---
    WHATSAPP_NUMBER: str = os.getenv("WHATSAPP_NUMBER", "+1234567890")
    MESSENGER_URL: str = os.getenv(
        "MESSENGER_URL", "https://m.me/yourpage"
    )
    SUPPORT_PHONE: str = os.getenv("SUPPORT_PHONE", "+1-800-PRODUCT")
    SUPPORT_EMAIL: str = os.getenv(
        "SUPPORT_EMAIL", "support@landingpage.com"
    )
    FACEBOOK_PIXEL_ID: str = os.getenv("FACEBOOK_PIXEL_ID", "")
    GOOGLE_ANALYTICS_ID: str = os.getenv("GOOGLE_ANALYTICS_ID", "")

    # --- HTTP ---
    REQUEST_TIMEOUT: int = 15           # Seconds before a request times out
    IMPERSONATE_BROWSER: BrowserTypeLiteral = "chrome131"
    DEFAULT_HEADERS: dict[str, str] = {
        "Accept": (
            "text/html,application/xhtml+xml,"
            "application/xml;q=0.9,image/avif,"
            "image/webp,image/apng,*/*;q=0.8"
        ),
        "Accept-Language": "en-US,en;q=0.9",
        "sec-ch-ua": (
            '"Google Chrome";v="131", '
            '"Chromium";v="131", '
            '"Not_A Brand";v="24"'
        ),
        "sec-ch-ua-mobile": "?0",
        "sec-ch-ua-platform": '"Windows"',
    }

    # --- Search ---
    SERP_RESULTS_PER_QUERY: int = 10
    EBAY_RESULTS_PER_QUERY: int = 5

    # --- Matching & validation (tunable, inherited values) ---
    MATCH_THRESHOLD: float = 0.8        # Accept strictly above this
    DIRECT_MATCH_WEIGHT: float = 0.7
    SEMANTIC_MATCH_WEIGHT: float = 0.3
    NEUTRAL_VALIDATION_SCORE: float = 0.5
    LOW_VALIDATION_WARNING: float = 0.3

    # --- Caps ---
    MAX_FEATURES: int = 5
    MAX_IMAGES: int = 10
    MAX_REVIEWS: int = 5
    MAX_TRUST_BADGES: int = 6
    MAX_CUSTOM_EVENTS: int = 10

    # --- Copywriter ---
    GROQ_ENDPOINT: str = (
        "https://api.groq.com/openai/v1/chat/completions"
    )
    GROQ_MODEL: str = os.getenv("GROQ_MODEL", "llama-3.1-8b-instant")
    GROQ_TEMPERATURE: float = 0.7
    GROQ_MAX_TOKENS: int = 2000

    # --- Paths ---
    BASE_DIR: Path = Path(__file__).resolve().parent.parent.parent
    RESULTS_DIR: Path = BASE_DIR / "results"
    LOGS_DIR: Path = BASE_DIR / "logs"

    # --- Search providers (enabled by credential presence) ---
    AVAILABLE_PROVIDERS: list[dict[str, str]] = [
        {
            "id": "serpapi",
            "label": "Google Shopping (SerpAPI)",
            "provider": "landingkit.providers.serpapi_provider.SerpApiProvider",
            "credential": "SERP_API_KEY",
            "target": "query",
        },
        {
            "id": "ebay",
            "label": "eBay",
            "provider": "landingkit.providers.ebay_provider.EbayProvider",
            "credential": "EBAY_API_KEY",
            "target": "query",
        },
        {
            "id": "page",
            "label": "Product page metadata",
            "provider": (
                "landingkit.providers.page_metadata_provider"
                ".PageMetadataProvider"
            ),
            "credential": "",
            "target": "url",
        },
    ]

    @classmethod
    def available_provider_specs(cls) -> list[dict[str, str]]:
        """Return the registry entries whose credential is configured."""
        return [
            spec
            for spec in cls.AVAILABLE_PROVIDERS
            if not spec["credential"]
            or getattr(cls, spec["credential"], "")
        ]
