# tests/test_json_extraction.py

"""Tests for locating the JSON object inside a model reply."""

import unittest

from landingkit.content.json_extraction import (
    balanced_span,
    decode_object,
    find_json_object,
    split_reply,
    strip_code_fences,
)
from landingkit.errors import ParseError


class TestStripCodeFences(unittest.TestCase):

    def test_json_fence(self) -> None:
        text = 'Intro\n```json\n{"a": 1}\n```\nOutro'
        self.assertEqual(strip_code_fences(text), '{"a": 1}')

    def test_bare_fence(self) -> None:
        self.assertEqual(strip_code_fences('```\n{"a": 1}```'), '{"a": 1}')

    def test_skips_fence_without_object(self) -> None:
        text = '```bash\nls\n```\n```json\n{"b": 2}\n```'
        self.assertEqual(strip_code_fences(text), '{"b": 2}')

    def test_no_fence_returns_input(self) -> None:
        text = 'plain {"a": 1}'
        self.assertIs(strip_code_fences(text), text)


class TestBalancedSpan(unittest.TestCase):

    def test_nested(self) -> None:
        text = 'x {"a": {"b": 1}} y'
        start, end = balanced_span(text, 2)
        self.assertEqual(text[start:end], '{"a": {"b": 1}}')

    def test_braces_inside_strings_ignored(self) -> None:
        text = r'{"a": "}{ \"}\" "} tail'
        start, end = balanced_span(text, 0)
        self.assertEqual(text[start:end], r'{"a": "}{ \"}\" "}')

    def test_unbalanced_raises(self) -> None:
        with self.assertRaises(ParseError):
            balanced_span('{"a": {"b": 1}', 0)


class TestDecode(unittest.TestCase):

    def test_object(self) -> None:
        self.assertEqual(decode_object('{"a": [1, 2]}'), {"a": [1, 2]})

    def test_array_rejected(self) -> None:
        with self.assertRaises(ParseError):
            decode_object("[1, 2]")

    def test_invalid_rejected(self) -> None:
        with self.assertRaises(ParseError):
            decode_object("{'single': 'quotes'}")

    def test_deep_nesting_rejected(self) -> None:
        text = '{"a": ' + "[" * 100000 + "]" * 100000 + "}"
        with self.assertRaises(ParseError):
            decode_object(text)
        with self.assertRaises(ParseError):
            find_json_object(text)
        reply = split_reply(text)
        self.assertFalse(reply.has_json)
        self.assertTrue(reply.errors)

    def test_skips_non_json_braces(self) -> None:
        text = 'Use {product} in the copy. {"headline": "X"}'
        data, (start, end) = find_json_object(text)
        self.assertEqual(data, {"headline": "X"})
        self.assertEqual(text[start:end], '{"headline": "X"}')

    def test_nothing_found(self) -> None:
        with self.assertRaises(ParseError):
            find_json_object("no object here")


class TestSplitReply(unittest.TestCase):
    """split_reply never raises and separates JSON from prose."""

    def test_plain_json(self) -> None:
        reply = split_reply('  {"hero": {"headline": "Hi"}}  ')
        self.assertTrue(reply.has_json)
        self.assertEqual(reply.data, {"hero": {"headline": "Hi"}})
        self.assertEqual(reply.prose, "")

    def test_fenced_json_with_prose(self) -> None:
        raw = 'Here you go:\n```json\n{"a": 1}\n```\nEnjoy!'
        reply = split_reply(raw)
        self.assertEqual(reply.data, {"a": 1})
        self.assertIn("Here you go:", reply.prose)
        self.assertIn("Enjoy!", reply.prose)
        self.assertNotIn("{", reply.prose)

    def test_unfenced_json_inside_prose(self) -> None:
        reply = split_reply('Sure! {"a": {"b": "}"}} Thanks')
        self.assertEqual(reply.data, {"a": {"b": "}"}})
        self.assertIn("Sure!", reply.prose)
        self.assertIn("Thanks", reply.prose)

    def test_invalid_json_becomes_prose(self) -> None:
        raw = 'Headline: Big {broken'
        reply = split_reply(raw)
        self.assertFalse(reply.has_json)
        self.assertEqual(reply.prose, raw)
        self.assertTrue(reply.errors)

    def test_empty_and_none(self) -> None:
        for raw in ("", "   ", None):
            with self.subTest(raw=raw):
                reply = split_reply(raw)
                self.assertIsNone(reply.data)
                self.assertEqual(reply.prose, "")

    def test_object_inside_array_is_found(self) -> None:
        reply = split_reply('[{"a": 1}]')
        self.assertEqual(reply.data, {"a": 1})


if __name__ == "__main__":
    unittest.main()
