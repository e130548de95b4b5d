#!/usr/bin/env python3
"""
Unit tests for the visa sponsorship scorer.
"""

import unittest

from sponsorscout.scorer.salary import SalaryThresholdStatus
from sponsorscout.scorer.visa_score import VisaScorer
from tests.fixtures.scoring_fixtures import make_job, make_visa_signal, perfect_visa_signal


class _FixedChecker:
    """Salary checker stub returning a fixed status."""

    def __init__(self, status):
        self.status = status
        self.jobs_seen = []

    def check(self, job):
        self.jobs_seen.append(job)
        return self.status


class TestVisaScoreFactors(unittest.TestCase):
    """Each additive factor scored in isolation."""

    def setUp(self):
        self.scorer = VisaScorer(_FixedChecker(SalaryThresholdStatus.BELOW))
        self.job = make_job()

    def test_empty_signal_scores_zero(self):
        result = self.scorer.score(make_visa_signal(), self.job)
        self.assertEqual(result.total, 0)
        self.assertEqual(result.rating, "POOR")
        self.assertEqual(result.breakdown.registry_match.status, "not_found")
        self.assertEqual(result.breakdown.recent_activity.status, "none")
        self.assertEqual(result.breakdown.community_signals.status, "no_data")
        self.assertEqual(result.breakdown.jd_keywords.status, "not_mentioned")
        self.assertEqual(result.breakdown.penalties, ())

    def test_registry_match(self):
        result = self.scorer.score(make_visa_signal(registry_match=True), self.job)
        self.assertEqual(result.total, 40)
        self.assertEqual(result.breakdown.registry_match.score, 40)
        self.assertEqual(result.breakdown.registry_match.status, "confirmed")

    def test_recent_activity_monotonic_until_cap(self):
        """Activity never decreases the total and saturates at 20."""
        previous = -1
        for count, expected in [(0, 0), (1, 5), (2, 10), (3, 15), (4, 20), (5, 20), (12, 20)]:
            result = self.scorer.score(make_visa_signal(recent_activity_count=count), self.job)
            self.assertEqual(result.breakdown.recent_activity.score, expected)
            self.assertEqual(result.breakdown.recent_activity.count, count)
            self.assertGreaterEqual(result.total, previous)
            previous = result.total
        self.assertEqual(previous, 20)

    def test_community_positive_reports(self):
        signal = make_visa_signal(community_signals={"positive_count": 3, "negative_count": 5})
        result = self.scorer.score(signal, self.job)
        community = result.breakdown.community_signals
        self.assertEqual(community.score, 6)
        self.assertEqual(community.positive, 3)
        self.assertEqual(community.negative, 5)
        self.assertEqual(community.status, "reported")
        # negatives are recorded but never subtracted
        self.assertEqual(result.total, 6)

    def test_community_capped_at_20(self):
        signal = make_visa_signal(community_signals={"positive_count": 50, "negative_count": 0})
        result = self.scorer.score(signal, self.job)
        self.assertEqual(result.breakdown.community_signals.score, 20)

    def test_jd_keywords(self):
        result = self.scorer.score(make_visa_signal(jd_keywords_found=True), self.job)
        self.assertEqual(result.total, 10)
        self.assertEqual(result.breakdown.jd_keywords.status, "explicit_mention")

    def test_salary_threshold_statuses(self):
        expected = {
            SalaryThresholdStatus.MEETS: 10,
            SalaryThresholdStatus.CLOSE: 5,
            SalaryThresholdStatus.BELOW: 0,
            SalaryThresholdStatus.UNKNOWN: 0,
        }
        for status, points in expected.items():
            checker = _FixedChecker(status)
            result = VisaScorer(checker).score(make_visa_signal(), self.job)
            self.assertEqual(result.breakdown.salary_threshold.score, points)
            self.assertEqual(result.breakdown.salary_threshold.status, status)
            self.assertIs(checker.jobs_seen[0], self.job)

    def test_default_checker_uses_country_table(self):
        # Base job: GB, 80000 GBP
        result = VisaScorer().score(make_visa_signal(), make_job())
        self.assertEqual(result.breakdown.salary_threshold.status, SalaryThresholdStatus.MEETS)
        self.assertEqual(result.total, 10)


class TestVisaScorePenalty(unittest.TestCase):
    """The explicit no-sponsorship penalty."""

    def setUp(self):
        self.scorer = VisaScorer()
        self.job = make_job()

    def test_perfect_signal_scores_100(self):
        result = self.scorer.score(perfect_visa_signal(), self.job)
        self.assertEqual(result.total, 100)
        self.assertEqual(result.rating, "EXCELLENT")

    def test_penalty_subtracts_exactly_30(self):
        result = self.scorer.score(perfect_visa_signal(explicit_no_sponsorship=True), self.job)
        self.assertEqual(result.total, 70)
        self.assertEqual(len(result.breakdown.penalties), 1)
        self.assertEqual(result.breakdown.penalties[0].reason, "explicit_no_sponsorship")
        self.assertEqual(result.breakdown.penalties[0].points, -30)

    def test_penalty_floors_at_zero(self):
        signal = make_visa_signal(registry_match=False, explicit_no_sponsorship=True)
        result = VisaScorer(_FixedChecker(SalaryThresholdStatus.CLOSE)).score(signal, self.job)
        self.assertEqual(result.total, 0)

    def test_penalty_strictly_reduces_total(self):
        signals = [
            dict(registry_match=True),
            dict(recent_activity_count=2, jd_keywords_found=True),
            dict(registry_match=True, recent_activity_count=4,
                 community_signals={"positive_count": 10, "negative_count": 2}),
        ]
        for fields in signals:
            without = self.scorer.score(make_visa_signal(**fields), self.job).total
            with_penalty = self.scorer.score(
                make_visa_signal(explicit_no_sponsorship=True, **fields), self.job
            ).total
            self.assertEqual(with_penalty, max(0, without - 30))
            self.assertLess(with_penalty, without)

    def test_rating_does_not_change_total(self):
        result = self.scorer.score(make_visa_signal(registry_match=True, recent_activity_count=4), self.job)
        self.assertEqual(result.total, 70)
        self.assertEqual(result.rating, "GOOD")

    def test_breakdown_to_dict(self):
        result = self.scorer.score(perfect_visa_signal(explicit_no_sponsorship=True), self.job)
        data = result.to_dict()
        self.assertEqual(data["total"], 70)
        self.assertEqual(data["breakdown"]["registry_match"], {"score": 40, "status": "confirmed"})
        self.assertEqual(data["breakdown"]["recent_activity"],
                         {"score": 20, "count": 4, "status": "active"})
        self.assertEqual(data["breakdown"]["salary_threshold"],
                         {"score": 10, "status": "above_minimum"})
        self.assertEqual(data["breakdown"]["penalties"],
                         [{"reason": "explicit_no_sponsorship", "points": -30}])


class TestVisaExplainability(unittest.TestCase):
    """Confidence, visa routes and explanation lines."""

    def setUp(self):
        self.scorer = VisaScorer()
        self.job = make_job()

    def test_explanation_lines_follow_factors(self):
        result = self.scorer.score(perfect_visa_signal(explicit_no_sponsorship=True), self.job)
        self.assertEqual(result.breakdown.explanation, (
            "Company is on an official visa sponsor registry",
            "4 recent sponsorship activities",
            "10 positive community mentions about sponsorship",
            "Job description mentions visa sponsorship",
            "Job description explicitly states no sponsorship",
            "Salary meets the visa minimum threshold for GB",
            "Penalties applied: 30 points",
        ))

    def test_explanation_for_weak_evidence(self):
        signal = make_visa_signal(community_signals={"positive_count": 0, "negative_count": 3})
        result = VisaScorer(_FixedChecker(SalaryThresholdStatus.BELOW)).score(signal, self.job)
        self.assertEqual(result.breakdown.explanation, (
            "Company not found in official sponsor registries",
            "3 negative community mentions",
            "Salary below the visa minimum threshold for GB",
        ))

    def test_unknown_salary_and_country_add_no_salary_line(self):
        job = make_job(country_code=None, location=None)
        result = self.scorer.score(make_visa_signal(), job)
        self.assertEqual(result.breakdown.explanation,
                         ("Company not found in official sponsor registries",))
        self.assertIsNone(result.country_code)
        self.assertEqual(result.visa_categories, ())

    def test_confidence(self):
        self.assertEqual(self.scorer.score(perfect_visa_signal(), self.job).confidence, "very_high")
        self.assertEqual(self.scorer.score(make_visa_signal(), self.job).confidence, "very_low")
        result = self.scorer.score(make_visa_signal(registry_match=True, recent_activity_count=2), self.job)
        # 40 + 10 + 10 salary = 60 with a registry hit
        self.assertEqual(result.total, 60)
        self.assertEqual(result.confidence, "high")

    def test_visa_categories_for_job_country(self):
        result = self.scorer.score(make_visa_signal(), self.job)
        self.assertEqual(result.country_code, "GB")
        self.assertEqual(result.visa_categories, ("Skilled Worker Visa", "Global Talent Visa"))

    def test_country_detected_from_location(self):
        job = make_job(country_code=None, location="Amsterdam, Netherlands")
        result = self.scorer.score(make_visa_signal(), job)
        # 80000 GBP clears the NL threshold
        self.assertEqual(result.breakdown.salary_threshold.status, SalaryThresholdStatus.MEETS)
        self.assertEqual(result.total, 10)
        self.assertEqual(result.country_code, "NL")
        self.assertIn("30% Ruling", result.visa_categories)

    def test_to_dict_includes_explanation(self):
        data = self.scorer.score(perfect_visa_signal(), self.job).to_dict()
        self.assertEqual(data["confidence"], "very_high")
        self.assertEqual(data["country_code"], "GB")
        self.assertEqual(data["visa_categories"], ["Skilled Worker Visa", "Global Talent Visa"])
        self.assertEqual(data["breakdown"]["explanation"][0],
                         "Company is on an official visa sponsor registry")


if __name__ == '__main__':
    unittest.main()
