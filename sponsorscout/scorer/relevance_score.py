#!/usr/bin/env python3
"""
Job Relevance Score - fit of location, salary, role, experience and
industry, 0-100.

Each factor has fixed bands checked in priority order (first match wins):
- Location   (25): preferred city 25, target country 20, remote 15, else 0
- Salary     (25): unknown 12, in/above range 25, within 10% below 15, else 0
- Role       (25): preferred 25, acceptable 20, generic PM keyword 10, else 0
- Experience (15): in range 15, up to 2 years over 12, up to 2 under 10, else 0
- Industry   (10): shared industry 10, shared common keyword 7, else 3

Missing data falls back to neutral values rather than zero where the
absence says nothing about fit (salary unknown, industry neutral floor).

Two missing-data cases keep the loose semantics of the legacy scorer:
- A missing or empty job title is contained in every role, so it scores
  as the first preferred (else acceptable) role.
- A missing expectation max compares below every salary, so any known
  job salary scores "above_range".
"""

from typing import Tuple
import logging

from sponsorscout.matcher.text_matching import normalize_terms
from sponsorscout.schema_models import NormalizedJob, UserProfile
from sponsorscout.scorer.models import (
    ExperienceMatch, IndustryMatch, LocationMatch, RelevanceBreakdown,
    RelevanceScore, RoleMatch, SalaryMatch
)
from sponsorscout.scorer.ratings import get_rating
from sponsorscout.scorer.salary import normalize_to_reference

logger = logging.getLogger(__name__)

ROLE_KEYWORDS: Tuple[str, ...] = ('product', 'manager', 'pm', 'lead')
COMMON_INDUSTRIES: Tuple[str, ...] = ('fintech', 'finance', 'banking', 'payments', 'tech')

SALARY_SLIGHTLY_BELOW_RATIO = 0.9
EXPERIENCE_TOLERANCE_YEARS = 2
DEFAULT_JOB_EXPERIENCE_MAX = 99
MAX_SCORE = 100


def _title_matches(job_title: str, role: str) -> bool:
    """Bidirectional containment. An empty title is contained in any role."""
    role = role.lower()
    return role in job_title or job_title in role


class RelevanceScorer:
    """Score the non-skill fit of a job against the user's preferences."""

    def score(self, job: NormalizedJob, profile: UserProfile) -> RelevanceScore:
        location = self.calculate_location_match(job, profile)
        salary = self.calculate_salary_match(job, profile)
        role = self.calculate_role_match(job, profile)
        experience = self.calculate_experience_match(job, profile)
        industry = self.calculate_industry_match(job, profile)

        breakdown = RelevanceBreakdown(
            location=location,
            salary=salary,
            role=role,
            experience=experience,
            industry=industry
        )
        total = min(MAX_SCORE, sum(factor.score for factor in breakdown.factors()))

        logger.debug(f"Relevance score for job {job.job_id}: {total} "
                     f"(location={location.match_type}, salary={salary.match_type}, "
                     f"role={role.match_type}, experience={experience.match_type}, "
                     f"industry={industry.match_type})")

        return RelevanceScore(total=total, breakdown=breakdown, rating=get_rating(total))

    def calculate_location_match(self, job: NormalizedJob, profile: UserProfile) -> LocationMatch:
        job_location = (job.location or '').lower()
        job_country = (job.country_code or '').upper()

        for city in normalize_terms(profile.preferred_locations):
            if city in job_location:
                return LocationMatch(score=25, match_type='preferred_city', location=job_location,
                                     country=job.country_code)

        if job_country and job_country in profile.target_countries:
            return LocationMatch(score=20, match_type='target_country', location=job_location,
                                 country=job_country)

        if job.is_remote:
            return LocationMatch(score=15, match_type='remote', location='remote',
                                 country=job.country_code)

        return LocationMatch(score=0, match_type='no_match', location=job_location,
                             country=job.country_code)

    def calculate_salary_match(self, job: NormalizedJob, profile: UserProfile) -> SalaryMatch:
        expected_min = profile.salary_expectation.min
        expected_max = profile.salary_expectation.max
        job_min = job.salary.min if job.salary else None

        # Zero is treated like missing: no usable figure on one side
        if not expected_min or not job_min:
            return SalaryMatch(score=12, match_type='unknown',
                               expected_min=expected_min, expected_max=expected_max)

        job_salary = normalize_to_reference(job_min, job.salary.currency)

        def band(score: int, match_type: str) -> SalaryMatch:
            return SalaryMatch(score=score, match_type=match_type, job_salary=job_salary,
                               expected_min=expected_min, expected_max=expected_max)

        if expected_max is None:
            return band(25, 'above_range')
        if expected_min <= job_salary <= expected_max:
            return band(25, 'in_range')
        if job_salary > expected_max:
            return band(25, 'above_range')
        if job_salary >= expected_min * SALARY_SLIGHTLY_BELOW_RATIO:
            return band(15, 'slightly_below')
        return band(0, 'below_minimum')

    def calculate_role_match(self, job: NormalizedJob, profile: UserProfile) -> RoleMatch:
        job_title = (job.title or '').lower()
        roles = profile.role_flexibility

        if any(_title_matches(job_title, role) for role in roles.preferred):
            return RoleMatch(score=25, match_type='preferred', role=job_title)

        if any(_title_matches(job_title, role) for role in roles.acceptable):
            return RoleMatch(score=20, match_type='acceptable', role=job_title)

        if any(keyword in job_title for keyword in ROLE_KEYWORDS):
            return RoleMatch(score=10, match_type='partial', role=job_title)

        return RoleMatch(score=0, match_type='no_match', role=job_title)

    def calculate_experience_match(self, job: NormalizedJob, profile: UserProfile) -> ExperienceMatch:
        user_years = profile.years_of_experience or 0
        job_min = job.experience_min or 0
        job_max = job.experience_max or DEFAULT_JOB_EXPERIENCE_MAX

        def band(score: int, match_type: str) -> ExperienceMatch:
            return ExperienceMatch(score=score, match_type=match_type, user_years=user_years,
                                   job_min=job_min, job_max=job_max)

        if job_min <= user_years <= job_max:
            return band(15, 'perfect')
        if job_max < user_years <= job_max + EXPERIENCE_TOLERANCE_YEARS:
            return band(12, 'slightly_over')
        if job_min - EXPERIENCE_TOLERANCE_YEARS <= user_years < job_min:
            return band(10, 'slightly_under')
        return band(0, 'mismatch')

    def calculate_industry_match(self, job: NormalizedJob, profile: UserProfile) -> IndustryMatch:
        job_domains = normalize_terms(job.domains)
        user_industries = normalize_terms(profile.industries)

        shared = [industry for industry in user_industries if industry in job_domains]
        if shared:
            return IndustryMatch(score=10, match_type='perfect', industries=tuple(job_domains),
                                 matched=tuple(shared))

        related = [
            keyword for keyword in COMMON_INDUSTRIES
            if any(keyword in domain for domain in job_domains)
            and any(keyword in industry for industry in user_industries)
        ]
        if related:
            return IndustryMatch(score=7, match_type='related', industries=tuple(job_domains),
                                 matched=tuple(related))

        # Never 0: a mismatch keeps the neutral floor
        return IndustryMatch(score=3, match_type='neutral', industries=tuple(job_domains))
