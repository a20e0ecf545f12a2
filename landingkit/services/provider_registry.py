# landingkit/services/provider_registry.py

"""Builds search providers from the settings registry."""

import importlib
import logging
from typing import Any

from landingkit.config.settings import Settings
from landingkit.errors import LandingKitError
from landingkit.providers.base_provider import SearchProvider

logger = logging.getLogger("landingkit.registry")


def _load_provider_class(dotted_path: str) -> type[Any]:
    """Dynamically import a provider class from its dotted module path."""
    module_path, class_name = dotted_path.rsplit(".", 1)
    module = importlib.import_module(module_path)
    cls: type[Any] = getattr(module, class_name)
    return cls


def build_search_providers(
    specs: list[dict[str, str]] | None = None,
    page_url: str | None = None,
) -> list[SearchProvider]:
    """Instantiate the providers described by *specs*.

    Entries targeting a URL are only built when *page_url* is given.
    Defaults to every registry entry whose credential is configured.
    """
    if specs is None:
        specs = Settings.available_provider_specs()

    providers: list[SearchProvider] = []
    for spec in specs:
        if spec.get("target") == "url":
            if not page_url:
                logger.debug("Skipping %s: input is not a URL", spec["id"])
                continue
            kwargs: dict[str, Any] = {"page_url": page_url}
        else:
            kwargs = {}
        try:
            cls = _load_provider_class(spec["provider"])
        except (ImportError, AttributeError) as exc:
            raise LandingKitError(
                f"Cannot load provider {spec['id']!r} from {spec['provider']}"
            ) from exc
        providers.append(cls(**kwargs))

    logger.info(
        "Search providers: %s",
        ", ".join(p.name for p in providers) or "none",
    )
    return providers
