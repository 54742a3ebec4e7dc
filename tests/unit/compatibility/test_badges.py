#!/usr/bin/env python3
"""
Test suite for the badge threshold table.
"""

import unittest

from compatibility.badges import BadgeFactors, derive_badges
from compatibility.config_loader import EngineConfig
from compatibility.engine import CompatibilityEngine
from compatibility.models import Badge
from tests.fixtures.compatibility_fixtures import fixed_clock, make_listing, make_profile


class TestBadgeThresholds(unittest.TestCase):
    """Every threshold is inclusive; absent factors skip their badge."""

    def test_perfect_match_boundary(self):
        self.assertIn(Badge.PERFECT_MATCH, derive_badges(95))
        self.assertNotIn(Badge.PERFECT_MATCH, derive_badges(94))

    def test_skill_expert_boundary(self):
        self.assertIn(Badge.SKILL_EXPERT, derive_badges(50, BadgeFactors(skill_match=0.90)))
        self.assertNotIn(Badge.SKILL_EXPERT, derive_badges(50, BadgeFactors(skill_match=0.899999)))

    def test_location_perfect_boundary(self):
        self.assertIn(Badge.LOCATION_PERFECT, derive_badges(50, BadgeFactors(location_proximity=0.95)))
        self.assertNotIn(Badge.LOCATION_PERFECT, derive_badges(50, BadgeFactors(location_proximity=0.94)))

    def test_top_rated_boundary(self):
        self.assertIn(Badge.TOP_RATED, derive_badges(50, BadgeFactors(reputation_score=0.90)))
        self.assertNotIn(Badge.TOP_RATED, derive_badges(50, BadgeFactors(reputation_score=0.89)))

    def test_quick_responder_is_strictly_under_fifteen_minutes(self):
        self.assertIn(Badge.QUICK_RESPONDER, derive_badges(50, BadgeFactors(response_time_minutes=14.9)))
        self.assertNotIn(Badge.QUICK_RESPONDER, derive_badges(50, BadgeFactors(response_time_minutes=15)))

    def test_urgent_match(self):
        for urgency in ("high", "Urgent"):
            with self.subTest(urgency=urgency):
                self.assertIn(Badge.URGENT_MATCH, derive_badges(50, BadgeFactors(urgency=urgency)))
        self.assertNotIn(Badge.URGENT_MATCH, derive_badges(50, BadgeFactors(urgency="low")))

    def test_flags(self):
        badges = derive_badges(50, BadgeFactors(is_verified=True, is_premium=True))
        self.assertEqual(badges, frozenset({Badge.VERIFIED, Badge.PREMIUM}))
        self.assertEqual(derive_badges(50, BadgeFactors(is_verified=False, is_premium=False)), frozenset())

    def test_client_favorite_boundary(self):
        self.assertIn(Badge.CLIENT_FAVORITE, derive_badges(50, BadgeFactors(counterpart_rating=4.8)))
        self.assertNotIn(Badge.CLIENT_FAVORITE, derive_badges(50, BadgeFactors(counterpart_rating=4.79)))

    def test_absent_factors_award_nothing(self):
        self.assertEqual(derive_badges(50), frozenset())
        self.assertEqual(derive_badges(50, BadgeFactors()), frozenset())

    def test_rows_are_independent(self):
        factors = BadgeFactors(skill_match=1.0, location_proximity=1.0, reputation_score=0.98)
        badges = derive_badges(97, factors)
        self.assertEqual(
            badges,
            frozenset({Badge.PERFECT_MATCH, Badge.SKILL_EXPERT, Badge.LOCATION_PERFECT, Badge.TOP_RATED})
        )

    def test_badge_values_are_tags(self):
        self.assertEqual(Badge.SKILL_EXPERT.value, "skill-expert")
        self.assertEqual(Badge("client-favorite"), Badge.CLIENT_FAVORITE)


class TestBadgeFactorsFromListing(unittest.TestCase):
    """Listing attributes that arrive as strings are coerced before the table reads them."""

    def setUp(self):
        self.engine = CompatibilityEngine(EngineConfig(), clock=fixed_clock)

    def test_numeric_strings_are_coerced(self):
        listing = make_listing(owner_rating="4.9", response_time_minutes="10")
        result = self.engine.compute_compatibility("jobs", make_profile(), listing)

        self.assertEqual(result.dimension("quality").score, 98.0)
        self.assertIn(Badge.CLIENT_FAVORITE, result.badges)
        self.assertIn(Badge.QUICK_RESPONDER, result.badges)

    def test_malformed_values_skip_their_badge(self):
        listing = make_listing(owner_rating="excellent", response_time_minutes="fast")
        factors = BadgeFactors.from_result(
            self.engine.compute_compatibility("jobs", make_profile(), listing), make_profile(), listing
        )

        self.assertIsNone(factors.counterpart_rating)
        self.assertIsNone(factors.response_time_minutes)
        self.assertNotIn(Badge.CLIENT_FAVORITE, derive_badges(50, factors))
        self.assertNotIn(Badge.QUICK_RESPONDER, derive_badges(50, factors))


if __name__ == '__main__':
    unittest.main()
