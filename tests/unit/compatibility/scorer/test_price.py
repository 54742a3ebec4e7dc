#!/usr/bin/env python3
"""
Test suite for the price / budget scorer.
"""

import unittest

from compatibility.config_loader import ScorerConfig
from compatibility.scorer.price import score_price
from tests.fixtures.compatibility_fixtures import make_listing, make_profile


class TestPriceScorer(unittest.TestCase):
    """Profile target 100 with an acceptable range of 80-130 unless stated otherwise."""

    def setUp(self):
        self.config = ScorerConfig()
        self.profile = make_profile()

    def _score(self, price, profile=None):
        score, _ = score_price(profile or self.profile, make_listing(price=price), self.config)
        return score

    def test_target_price_scores_full(self):
        self.assertEqual(self._score(100.0), 100.0)

    def test_decays_linearly_toward_each_edge(self):
        """Each side decays toward its own edge of the range."""
        self.assertAlmostEqual(self._score(120.0), 33.33, places=2)  # 20 of 30 above target
        self.assertEqual(self._score(90.0), 50.0)                    # 10 of 20 below target

    def test_range_edges_and_outside_score_zero(self):
        """Edges score 0 and prices outside the range clamp to 0, never negative."""
        for price in (80.0, 130.0, 70.0, 500.0):
            with self.subTest(price=price):
                self.assertEqual(self._score(price), 0.0)

    def test_missing_target_uses_range_midpoint(self):
        profile = make_profile(target_price=None)
        self.assertEqual(self._score(105.0, profile), 100.0)

    def test_target_outside_range_is_clamped(self):
        """A target above the range is treated as the upper edge."""
        profile = make_profile(target_price=150.0)
        self.assertEqual(self._score(130.0, profile), 100.0)
        self.assertEqual(self._score(105.0, profile), 50.0)

    def test_inverted_range_is_swapped(self):
        profile = make_profile(price_min=130.0, price_max=80.0)
        self.assertAlmostEqual(self._score(120.0, profile), 33.33, places=2)

    def test_missing_data_is_neutral(self):
        """Missing listing price or an incomplete range scores 50."""
        self.assertEqual(self._score(None), 50.0)
        self.assertEqual(self._score(100.0, make_profile(price_min=None)), 50.0)
        self.assertEqual(self._score(100.0, make_profile(price_max=None)), 50.0)


if __name__ == '__main__':
    unittest.main()
