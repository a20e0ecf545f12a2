# tests/conftest.py

"""Shared pytest fixtures for all landingkit tests."""

from collections.abc import Generator
from unittest.mock import patch

import pytest


@pytest.fixture(autouse=True)
def mock_sleep() -> Generator[None, None, None]:
    """Patch time.sleep globally so nothing in a test waits."""
    with patch("time.sleep"):
        yield


@pytest.fixture(autouse=True)
def no_credentials() -> Generator[None, None, None]:
    """Blank every API key so no test reaches a live service."""
    with (
        patch("landingkit.config.settings.Settings.SERP_API_KEY", ""),
        patch("landingkit.config.settings.Settings.EBAY_API_KEY", ""),
        patch("landingkit.config.settings.Settings.GOOGLE_VISION_API_KEY", ""),
        patch("landingkit.config.settings.Settings.CLARIFAI_API_KEY", ""),
        patch("landingkit.config.settings.Settings.GROQ_API_KEY", ""),
    ):
        yield
