# landingkit/extraction/query_builder.py

"""Derive a product search query from a product URL or free text."""

import logging
import re
from urllib.parse import urlparse

logger = logging.getLogger("landingkit.extraction")

DEFAULT_QUERY = "Product Search"

_PAGE_EXTENSION_RE = re.compile(r"\.(html?|php|aspx?|jsp)$", re.IGNORECASE)


def is_url(text: str) -> bool:
    """True for ``http(s)://`` inputs."""
    return text.strip().lower().startswith(("http://", "https://"))


def _slug_before(parts: list[str], marker: str) -> str | None:
    """Return the path segment just before *marker*, if any."""
    if marker in parts:
        index = parts.index(marker)
        if index > 0:
            return parts[index - 1].replace("-", " ")
    return None


def _slug_after(parts: list[str], marker: str) -> str | None:
    """Return the path segment just after *marker*, if any."""
    if marker in parts:
        index = parts.index(marker)
        if index + 1 < len(parts):
            return parts[index + 1].replace("-", " ")
    return None


def product_name_from_url(text: str) -> str:
    """Turn a product page URL into a human search query.

    Amazon ``/<slug>/dp/<asin>`` and eBay ``/itm/<slug>/<id>`` links
    use their slug; other URLs use the last path segment (or the host)
    with separators turned into spaces and page extensions dropped.
    Input that is not a URL is returned stripped.
    """
    raw = (text or "").strip()
    if not raw:
        return DEFAULT_QUERY
    if not is_url(raw):
        return raw

    try:
        parsed = urlparse(raw)
    except ValueError:
        logger.warning("Unparseable product URL: %s", raw)
        return DEFAULT_QUERY

    host = (parsed.hostname or "").lower()
    parts = [part for part in parsed.path.split("/") if part]

    if "amazon." in host:
        slug = _slug_before(parts, "dp")
        if slug:
            return slug
    if "ebay." in host:
        slug = _slug_before(parts, "itm") or _slug_after(parts, "itm")
        if slug and not slug.isdigit():
            return slug

    last = parts[-1] if parts else host
    if not last:
        return DEFAULT_QUERY
    name = _PAGE_EXTENSION_RE.sub("", last)
    name = re.sub(r"[-_]+", " ", name).strip()
    if not name:
        return DEFAULT_QUERY
    return " ".join(word[:1].upper() + word[1:] for word in name.split())
