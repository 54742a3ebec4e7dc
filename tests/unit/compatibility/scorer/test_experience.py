#!/usr/bin/env python3
"""
Test suite for the experience level scorer.
"""

import unittest

from compatibility.config_loader import ScorerConfig
from compatibility.scorer.experience import EXPERIENCE_LEVELS, experience_rank, score_experience
from tests.fixtures.compatibility_fixtures import make_listing, make_profile


class TestExperienceScorer(unittest.TestCase):

    def setUp(self):
        self.config = ScorerConfig()

    def _score(self, wanted, required):
        return score_experience(
            make_profile(experience_level=wanted),
            make_listing(experience_level=required),
            self.config
        )

    def test_same_level_is_full_match(self):
        score, description = self._score("senior", "Senior")
        self.assertEqual(score, 100.0)
        self.assertIn("senior", description)

    def test_score_falls_with_distance(self):
        self.assertEqual(self._score("mid", "senior")[0], 80.0)
        self.assertEqual(self._score("senior", "junior")[0], 60.0)
        self.assertEqual(self._score("entry", "lead")[0], 0.0)

    def test_distance_is_symmetric(self):
        self.assertEqual(self._score("junior", "expert")[0], self._score("expert", "junior")[0])

    def test_description_names_direction(self):
        self.assertIn("above", self._score("junior", "senior")[1])
        self.assertIn("below", self._score("lead", "mid")[1])
        self.assertIn("1 level below", self._score("senior", "mid")[1])

    def test_missing_or_unknown_level_is_neutral(self):
        for wanted, required in ((None, "mid"), ("mid", None), ("wizard", "mid"), ("mid", 3)):
            with self.subTest(wanted=wanted, required=required):
                self.assertEqual(self._score(wanted, required)[0], 50.0)

    def test_rank(self):
        self.assertEqual(experience_rank(" Entry "), 0)
        self.assertEqual(experience_rank("lead"), len(EXPERIENCE_LEVELS) - 1)
        self.assertIsNone(experience_rank("principal"))


if __name__ == '__main__':
    unittest.main()
