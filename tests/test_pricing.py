# tests/test_pricing.py

"""Tests for price parsing, discounts and currency detection."""

import math
import unittest

from landingkit.extraction.pricing import (
    discount_percent,
    extract_currency,
    format_price,
    parse_price,
)


class TestParsePrice(unittest.TestCase):
    """parse_price() behaviour."""

    def test_symbol_and_separators(self) -> None:
        self.assertEqual(parse_price("$1,299.00"), 1299.0)
        self.assertEqual(parse_price("€ 79.99"), 79.99)
        self.assertEqual(parse_price("149 AED"), 149.0)

    def test_malformed_is_nan(self) -> None:
        for text in ("", None, "free", "1.2.3"):
            with self.subTest(text=text):
                self.assertTrue(math.isnan(parse_price(text)))


class TestDiscountPercent(unittest.TestCase):
    """discount_percent() behaviour."""

    def test_reference_example(self) -> None:
        """(99.99 - 79.99) / 99.99 is 20.002%, shown as 20%."""
        self.assertEqual(discount_percent("$79.99", "$99.99"), "20%")

    def test_rounds_half_up(self) -> None:
        """12.5% rounds up to 13%."""
        self.assertEqual(discount_percent("$70", "$80"), "13%")

    def test_no_saving(self) -> None:
        self.assertEqual(discount_percent("$100", "$100"), "0%")
        self.assertEqual(discount_percent("$120", "$100"), "0%")

    def test_invalid_prices(self) -> None:
        self.assertEqual(discount_percent("", "$100"), "0%")
        self.assertEqual(discount_percent("$10", "n/a"), "0%")
        self.assertEqual(discount_percent("$0", "$0"), "0%")

    def test_full_discount(self) -> None:
        self.assertEqual(discount_percent("$0", "$50"), "100%")


class TestExtractCurrency(unittest.TestCase):
    """extract_currency() symbol table."""

    def test_known_symbols(self) -> None:
        cases = {
            "$10": "USD",
            "€10": "EUR",
            "£10": "GBP",
            "¥10": "JPY",
            "₹10": "INR",
            "د.إ 10": "AED",
            "ر.س 10": "SAR",
        }
        for price, code in cases.items():
            with self.subTest(price=price):
                self.assertEqual(extract_currency(price), code)

    def test_default(self) -> None:
        self.assertEqual(extract_currency("10"), "USD")
        self.assertEqual(extract_currency(None, default="EUR"), "EUR")


class TestFormatPrice(unittest.TestCase):
    """format_price() symbol prefixes."""

    def test_known_codes_use_symbol(self) -> None:
        self.assertEqual(format_price("79.99", "USD"), "$79.99")
        self.assertEqual(format_price(" 39.00 ", "eur"), "€39.00")

    def test_unknown_code_spelled_out(self) -> None:
        self.assertEqual(format_price("10.00", "AUD"), "AUD 10.00")

    def test_blank_code_is_usd(self) -> None:
        self.assertEqual(format_price("5", ""), "$5")

    def test_round_trips_through_extract_currency(self) -> None:
        for code in ("USD", "EUR", "GBP", "JPY", "INR"):
            with self.subTest(code=code):
                self.assertEqual(
                    extract_currency(format_price("1.00", code)), code
                )


if __name__ == "__main__":
    unittest.main()
