# landingkit/extraction/pricing.py

"""Price string parsing, discount maths and currency detection."""

import math
import re

_NON_PRICE_RE = re.compile(r"[^0-9.]")

CURRENCY_SYMBOLS: tuple[tuple[str, str], ...] = (
    ("د.إ", "AED"),
    ("ر.س", "SAR"),
    ("$", "USD"),
    ("€", "EUR"),
    ("£", "GBP"),
    ("¥", "JPY"),
    ("₹", "INR"),
)

# Prefix used when rendering an amount in a given ISO currency
PRICE_PREFIXES: dict[str, str] = {
    "USD": "$",
    "EUR": "€",
    "GBP": "£",
    "JPY": "¥",
    "INR": "₹",
}


def parse_price(text: str | None) -> float:
    """Parse ``'$1,299.00'`` style strings into a float.

    Every character that is not a digit or a dot is dropped before
    parsing. Malformed or empty input yields ``nan``; callers guard
    with :func:`math.isnan`.
    """
    cleaned = _NON_PRICE_RE.sub("", text or "")
    try:
        return float(cleaned)
    except ValueError:
        return math.nan


def discount_percent(current: str, original: str) -> str:
    """Percentage saved going from *original* to *current*, e.g. ``'20%'``.

    Rounds half up to a whole percent. Unparseable prices, a
    non-positive original or no saving at all give ``'0%'``.
    """
    current_price = parse_price(current)
    original_price = parse_price(original)
    if math.isnan(current_price) or math.isnan(original_price):
        return "0%"
    if original_price <= 0 or current_price >= original_price:
        return "0%"
    saved = (original_price - current_price) / original_price * 100
    return f"{math.floor(saved + 0.5)}%"


def extract_currency(price: str | None, default: str = "USD") -> str:
    """Map the first known currency symbol in *price* to its ISO code."""
    text = price or ""
    for symbol, code in CURRENCY_SYMBOLS:
        if symbol in text:
            return code
    return default


def format_price(amount: str, currency: str) -> str:
    """Render *amount* as ``'$39.00'``.

    Codes without a known symbol are spelled out: ``'AUD 10.00'``.
    """
    code = currency.strip().upper() or "USD"
    prefix = PRICE_PREFIXES.get(code, f"{code} ")
    return f"{prefix}{amount.strip()}"
