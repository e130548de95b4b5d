#!/usr/bin/env python3
"""
Visa Score (sponsorship likelihood) - additive point model, 0-100.

Factors, each independent and always evaluated:
- Registry match:      +40
- Recent activity:     5 per recent sponsorship, up to 20
- Community signals:   2 per positive report, up to 20
- JD keyword mention:  +10
- Salary threshold:    +10 meets, +5 within 10% below, else 0

Penalty: an explicit "no sponsorship" statement subtracts 30 once, after
all additive factors, floored at 0. The total is capped at 100 even
though the factor caps already sum to 100.

Alongside the number, a VisaScore carries a confidence level, the visa
routes open in the job's country and plain-text explanation lines.
"""

from dataclasses import replace
from typing import List, Optional, Tuple
import logging

from sponsorscout.schema_models import NormalizedJob, VisaSignal
from sponsorscout.scorer.countries import determine_visa_categories, resolve_country_code
from sponsorscout.scorer.models import (
    ActivityFactor, CommunityFactor, JdKeywordFactor, Penalty, RegistryFactor,
    SalaryThresholdFactor, VisaBreakdown, VisaScore
)
from sponsorscout.scorer.ratings import get_confidence_level, get_rating
from sponsorscout.scorer.salary import (
    SalaryThresholdChecker, SalaryThresholdStatus, TableSalaryThresholdChecker
)

logger = logging.getLogger(__name__)

REGISTRY_POINTS = 40
ACTIVITY_POINTS_PER_EVENT = 5
ACTIVITY_MAX_POINTS = 20
COMMUNITY_POINTS_PER_POSITIVE = 2
COMMUNITY_MAX_POINTS = 20
JD_KEYWORD_POINTS = 10
SALARY_THRESHOLD_POINTS = {
    SalaryThresholdStatus.MEETS: 10,
    SalaryThresholdStatus.CLOSE: 5,
    SalaryThresholdStatus.BELOW: 0,
    SalaryThresholdStatus.UNKNOWN: 0,
}
NO_SPONSORSHIP_PENALTY = 30
MAX_SCORE = 100


def build_explanation(breakdown: VisaBreakdown, country_code: Optional[str] = None) -> Tuple[str, ...]:
    """Human-readable reason lines for a visa breakdown, in factor order."""
    lines: List[str] = []

    if breakdown.registry_match.status == 'confirmed':
        lines.append("Company is on an official visa sponsor registry")
    else:
        lines.append("Company not found in official sponsor registries")

    activity = breakdown.recent_activity
    if activity.count > 0:
        lines.append(f"{activity.count} recent sponsorship activities")

    community = breakdown.community_signals
    if community.positive > 0:
        lines.append(f"{community.positive} positive community mentions about sponsorship")
    if community.negative > 0:
        lines.append(f"{community.negative} negative community mentions")

    if breakdown.jd_keywords.status == 'explicit_mention':
        lines.append("Job description mentions visa sponsorship")

    if any(p.reason == 'explicit_no_sponsorship' for p in breakdown.penalties):
        lines.append("Job description explicitly states no sponsorship")

    where = f" for {country_code}" if country_code else ""
    status = breakdown.salary_threshold.status
    if status == SalaryThresholdStatus.MEETS:
        lines.append(f"Salary meets the visa minimum threshold{where}")
    elif status == SalaryThresholdStatus.CLOSE:
        lines.append(f"Salary is within 10% of the visa minimum threshold{where}")
    elif status == SalaryThresholdStatus.BELOW:
        lines.append(f"Salary below the visa minimum threshold{where}")

    penalty_points = sum(p.points for p in breakdown.penalties)
    if penalty_points < 0:
        lines.append(f"Penalties applied: {abs(penalty_points)} points")

    return tuple(lines)


class VisaScorer:
    """Score sponsorship likelihood from visa intelligence signals."""

    def __init__(self, salary_checker: Optional[SalaryThresholdChecker] = None):
        self.salary_checker = salary_checker or TableSalaryThresholdChecker()

    def score(self, visa_signal: VisaSignal, job: NormalizedJob) -> VisaScore:
        """
        Calculate the visa score.

        The job is only read by the salary threshold check.

        Returns: VisaScore with total, per-factor breakdown, rating,
        confidence and visa routes for the job's country
        """
        registry = self.score_registry(visa_signal)
        activity = self.score_recent_activity(visa_signal)
        community = self.score_community(visa_signal)
        jd_keywords = self.score_jd_keywords(visa_signal)
        salary_threshold = self.score_salary_threshold(job)

        score = (
            registry.score + activity.score + community.score
            + jd_keywords.score + salary_threshold.score
        )

        penalties = []
        if visa_signal.explicit_no_sponsorship:
            penalties.append(Penalty(reason='explicit_no_sponsorship', points=-NO_SPONSORSHIP_PENALTY))

        score = max(0, score + sum(p.points for p in penalties))
        total = min(MAX_SCORE, score)

        logger.debug(f"Visa score for job {job.job_id}: {total} "
                     f"(registry={registry.score}, activity={activity.score}, "
                     f"community={community.score}, jd={jd_keywords.score}, "
                     f"salary={salary_threshold.score}, penalties={len(penalties)})")

        breakdown = VisaBreakdown(
            registry_match=registry,
            recent_activity=activity,
            community_signals=community,
            jd_keywords=jd_keywords,
            salary_threshold=salary_threshold,
            penalties=tuple(penalties)
        )
        country_code = resolve_country_code(job)

        return VisaScore(
            total=total,
            breakdown=replace(breakdown, explanation=build_explanation(breakdown, country_code)),
            rating=get_rating(total),
            confidence=get_confidence_level(total, visa_signal.registry_match),
            country_code=country_code,
            visa_categories=determine_visa_categories(country_code)
        )

    def score_registry(self, visa_signal: VisaSignal) -> RegistryFactor:
        if visa_signal.registry_match:
            return RegistryFactor(score=REGISTRY_POINTS, status='confirmed')
        return RegistryFactor(score=0, status='not_found')

    def score_recent_activity(self, visa_signal: VisaSignal) -> ActivityFactor:
        count = visa_signal.recent_activity_count
        points = min(ACTIVITY_MAX_POINTS, count * ACTIVITY_POINTS_PER_EVENT)
        return ActivityFactor(score=points, count=count, status='active' if count > 0 else 'none')

    def score_community(self, visa_signal: VisaSignal) -> CommunityFactor:
        signals = visa_signal.community_signals
        if signals is None:
            return CommunityFactor(score=0, positive=0, negative=0, status='no_data')
        points = min(COMMUNITY_MAX_POINTS, signals.positive_count * COMMUNITY_POINTS_PER_POSITIVE)
        return CommunityFactor(
            score=points,
            positive=signals.positive_count,
            negative=signals.negative_count,
            status='reported'
        )

    def score_jd_keywords(self, visa_signal: VisaSignal) -> JdKeywordFactor:
        if visa_signal.jd_keywords_found:
            return JdKeywordFactor(score=JD_KEYWORD_POINTS, status='explicit_mention')
        return JdKeywordFactor(score=0, status='not_mentioned')

    def score_salary_threshold(self, job: NormalizedJob) -> SalaryThresholdFactor:
        status = self.salary_checker.check(job)
        return SalaryThresholdFactor(score=SALARY_THRESHOLD_POINTS[status], status=status)
