# landingkit/matching/normalizer.py

"""Text normalisation shared by every matching step."""

import re
import unicodedata

# Latin lowercase letters, digits, the Arabic letter block and whitespace
_DISALLOWED_RE = re.compile(r"[^a-z0-9\u0621-\u064a\s]")


def normalize(text: str | None) -> str:
    """Return a comparable key for *text*.

    Lowercases, drops diacritics, removes punctuation and symbols while
    keeping Arabic letters, collapses whitespace runs and trims. Total
    and idempotent: ``normalize(normalize(s)) == normalize(s)``.
    """
    if not text:
        return ""
    decomposed = unicodedata.normalize("NFKD", text).lower()
    stripped = "".join(
        ch for ch in decomposed if not unicodedata.combining(ch)
    )
    kept = _DISALLOWED_RE.sub("", stripped)
    return " ".join(kept.split())
