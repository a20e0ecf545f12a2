# tests/test_similarity.py

"""Tests for bigram similarity and best-match selection."""

import unittest

from landingkit.matching.similarity import (
    MATCH_THRESHOLD,
    MatchResult,
    best_match,
    similarity,
)
from landingkit.models.product import ProductCandidate


class TestSimilarity(unittest.TestCase):
    """similarity() properties."""

    def test_identical_strings(self) -> None:
        self.assertEqual(similarity("headphones", "headphones"), 1.0)
        self.assertEqual(similarity("", ""), 1.0)
        self.assertEqual(similarity("a", "a"), 1.0)

    def test_disjoint_strings(self) -> None:
        self.assertEqual(similarity("abc", "xyz"), 0.0)

    def test_short_strings_score_zero(self) -> None:
        self.assertEqual(similarity("a", "ab"), 0.0)
        self.assertEqual(similarity("", "abc"), 0.0)

    def test_symmetric(self) -> None:
        pairs = [
            ("night", "nacht"),
            ("wireless headphones", "headphones wireless"),
            ("aaab", "ab"),
        ]
        for a, b in pairs:
            with self.subTest(a=a, b=b):
                self.assertAlmostEqual(similarity(a, b), similarity(b, a))

    def test_whitespace_ignored(self) -> None:
        self.assertEqual(similarity("head phones", "headphones"), 1.0)

    def test_known_value(self) -> None:
        """night/nacht share only 'ht': 2 * 1 / (4 + 4)."""
        self.assertAlmostEqual(similarity("night", "nacht"), 0.25)

    def test_repeated_bigrams_counted_as_multiset(self) -> None:
        """'aaaa' has three 'aa' bigrams, 'aa' only one."""
        self.assertAlmostEqual(similarity("aaaa", "aa"), 2 * 1 / (3 + 1))

    def test_in_unit_interval(self) -> None:
        for a, b in [("abcd", "abce"), ("hello world", "yellow"), ("x", "")]:
            with self.subTest(a=a, b=b):
                score = similarity(a, b)
                self.assertGreaterEqual(score, 0.0)
                self.assertLessEqual(score, 1.0)


class TestBestMatch(unittest.TestCase):
    """best_match() selection and acceptance."""

    def test_headphones_scenario_accepted(self) -> None:
        """A punctuated variant of the query clears the threshold."""
        candidate = ProductCandidate(
            title="wireless bluetooth head-phones (black)"
        )
        result = best_match("Wireless Bluetooth Headphones", [candidate])
        self.assertIs(result.candidate, candidate)
        self.assertGreater(result.similarity, MATCH_THRESHOLD)
        self.assertTrue(result.accepted)

    def test_picks_highest_score(self) -> None:
        far = ProductCandidate(title="Garden Hose 50ft")
        near = ProductCandidate(title="Wireless Headphones")
        result = best_match("wireless headphones", [far, near])
        self.assertIs(result.candidate, near)
        self.assertEqual(result.similarity, 1.0)

    def test_first_wins_ties(self) -> None:
        first = ProductCandidate(title="Blue Mug", source="a")
        second = ProductCandidate(title="blue mug!", source="b")
        result = best_match("blue mug", [first, second])
        self.assertIs(result.candidate, first)

    def test_low_score_is_reported_but_rejected(self) -> None:
        candidate = ProductCandidate(title="Garden Hose")
        result = best_match("Wireless Headphones", [candidate])
        self.assertIs(result.candidate, candidate)
        self.assertLess(result.similarity, MATCH_THRESHOLD)
        self.assertFalse(result.accepted)

    def test_empty_candidates(self) -> None:
        result = best_match("anything", [])
        self.assertIsNone(result.candidate)
        self.assertEqual(result.similarity, 0.0)
        self.assertFalse(result.accepted)

    def test_threshold_is_strict(self) -> None:
        candidate = ProductCandidate(title="x")
        at_threshold = MatchResult(candidate=candidate, similarity=0.8)
        above = MatchResult(candidate=candidate, similarity=0.81)
        self.assertFalse(at_threshold.accepted)
        self.assertTrue(above.accepted)

    def test_custom_threshold(self) -> None:
        candidate = ProductCandidate(title="Garden Hose")
        result = best_match("Garden Hoses", [candidate], threshold=0.99)
        self.assertFalse(result.accepted)


if __name__ == "__main__":
    unittest.main()
