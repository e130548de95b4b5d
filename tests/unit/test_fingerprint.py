#!/usr/bin/env python3
"""
Tests for ScoreFingerprinter cache keys.
"""

import unittest

from sponsorscout.config_loader import ScoringConfig
from sponsorscout.utils import ScoreFingerprinter
from tests.fixtures.scoring_fixtures import make_job, make_profile, make_visa_signal


class TestScoreFingerprinter(unittest.TestCase):

    def setUp(self):
        self.job = make_job()
        self.profile = make_profile()
        self.signal = make_visa_signal()

    def test_stable_for_equal_inputs(self):
        first = ScoreFingerprinter.calculate(self.job, self.profile, self.signal)
        second = ScoreFingerprinter.calculate(make_job(), make_profile(), make_visa_signal())
        self.assertEqual(first, second)
        self.assertEqual(len(first), 64)

    def test_default_config_equals_explicit_default(self):
        self.assertEqual(
            ScoreFingerprinter.calculate(self.job, self.profile, self.signal),
            ScoreFingerprinter.calculate(self.job, self.profile, self.signal, ScoringConfig())
        )

    def test_changes_with_each_input(self):
        base = ScoreFingerprinter.calculate(self.job, self.profile, self.signal)
        variants = [
            (make_job(title="Product Owner"), self.profile, self.signal, None),
            (self.job, make_profile(years_of_experience=3), self.signal, None),
            (self.job, self.profile, make_visa_signal(registry_match=True), None),
            (self.job, self.profile, self.signal, ScoringConfig(visa_score_weight=0.5)),
        ]
        digests = {ScoreFingerprinter.calculate(*variant) for variant in variants}
        self.assertEqual(len(digests), len(variants))
        self.assertNotIn(base, digests)

    def test_normalized_duplicates_do_not_change_key(self):
        messy = make_job(skills=["payments", "Payments", "roadmapping", "stakeholder management",
                                 "jira", "sql", "a/b testing", " "])
        self.assertEqual(
            ScoreFingerprinter.calculate(messy, self.profile, self.signal),
            ScoreFingerprinter.calculate(self.job, self.profile, self.signal)
        )


if __name__ == '__main__':
    unittest.main()
