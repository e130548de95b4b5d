#!/usr/bin/env python3
"""
Resume Match Score - tiered skill overlap, 0-100.

| Tier      | Profile skills  | Matched against        | Max | Weight key            |
|-----------|-----------------|------------------------|-----|-----------------------|
| domain    | skills_domain   | job.skills + domains   | 50  | domain_skills_weight  |
| core_pm   | skills_core_pm  | job.skills             | 30  | core_pm_skills_weight |
| tools     | skills_tools    | job.skills             | 15  | tools_skills_weight   |
| technical | skills_tech     | job.skills             | 5   | tech_skills_weight    |

Tier points = round(max * weight * 2 * match_pct / 100).

Weight coupling: ``2 * weight`` is the share of the tier maximum awarded
at a 100% match. Only a weight of 0.50 yields exactly the tier max; the
domain default (0.50 == 50 / 100) is the one tier calibrated that way.
With default weights a full match earns:

    domain 50/50, core_pm 18/30, tools 5/15 (4.5 rounded), technical 1/5

so the resume total tops out at 74. A weight above 0.50 pushes a tier past
its nominal max. Retune weights against this table, not as free
multipliers.
"""

from typing import Sequence
import logging

from sponsorscout.config_loader import ScoringConfig
from sponsorscout.matcher.text_matching import (
    match_percentage, matched_terms, round_half_up
)
from sponsorscout.schema_models import NormalizedJob, UserProfile
from sponsorscout.scorer.models import (
    ResumeBreakdown, ResumeMatchScore, SkillTier, SkillTierMatch
)
from sponsorscout.scorer.ratings import get_rating

logger = logging.getLogger(__name__)

DOMAIN_MAX_POINTS = 50
CORE_PM_MAX_POINTS = 30
TOOLS_MAX_POINTS = 15
TECH_MAX_POINTS = 5
MAX_SCORE = 100


def score_skill_tier(
    tier: SkillTier,
    user_skills: Sequence[str],
    job_terms: Sequence[str],
    max_points: int,
    weight: float
) -> SkillTierMatch:
    """Score one skill tier. An empty user tier scores 0, not full credit."""
    pct = match_percentage(user_skills, job_terms)
    points = round_half_up(max_points * weight * 2 * (pct / 100))
    return SkillTierMatch(
        tier=tier,
        score=points,
        max=max_points,
        weight=weight,
        match_percentage=pct,
        matched_skills=tuple(matched_terms(user_skills, job_terms))
    )


class ResumeMatchScorer:
    """Score how well the profile's skill tiers cover a job's skill tags."""

    def __init__(self, config: ScoringConfig):
        self.config = config

    def score(self, job: NormalizedJob, profile: UserProfile) -> ResumeMatchScore:
        job_skills = list(job.skills)
        job_skills_and_domains = job_skills + list(job.domains)

        domain = score_skill_tier(
            'domain', profile.skills_domain, job_skills_and_domains,
            DOMAIN_MAX_POINTS, self.config.domain_skills_weight
        )
        core_pm = score_skill_tier(
            'core_pm', profile.skills_core_pm, job_skills,
            CORE_PM_MAX_POINTS, self.config.core_pm_skills_weight
        )
        tools = score_skill_tier(
            'tools', profile.skills_tools, job_skills,
            TOOLS_MAX_POINTS, self.config.tools_skills_weight
        )
        technical = score_skill_tier(
            'technical', profile.skills_tech, job_skills,
            TECH_MAX_POINTS, self.config.tech_skills_weight
        )

        raw_total = domain.score + core_pm.score + tools.score + technical.score
        total = max(0, min(MAX_SCORE, raw_total))

        logger.debug(f"Resume score for job {job.job_id}: {total} "
                     f"(domain={domain.match_percentage}%, core_pm={core_pm.match_percentage}%, "
                     f"tools={tools.match_percentage}%, tech={technical.match_percentage}%)")

        return ResumeMatchScore(
            total=total,
            breakdown=ResumeBreakdown(
                domain_match=domain,
                core_pm_match=core_pm,
                tools_match=tools,
                technical_match=technical,
                raw_total=raw_total
            ),
            rating=get_rating(total)
        )
