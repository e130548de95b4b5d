#!/usr/bin/env python3
"""
Scoring Service - combines Visa, Resume Match and Job Relevance scores.

- Visa Score: "Will they sponsor me" (registry, activity, community, JD, salary)
- Resume Match Score: "Do my skills fit" (four weighted skill tiers)
- Job Relevance Score: "Is it the job I want" (location, salary, role, ...)
- Overall Score: weighted blend of the three, plus a recommendation

Scoring is pure: no I/O, no shared mutable state. The three component
scorers do not depend on each other and may run in any order.

Post-scoring ResultPolicy can be applied to filter, order and truncate
batch results.
"""

from functools import lru_cache
from typing import Iterable, List, Optional, Tuple
import logging

from sponsorscout.config_loader import ResultPolicy, ScoringConfig
from sponsorscout.matcher.text_matching import round_half_up
from sponsorscout.schema_models import NormalizedJob, UserProfile, VisaSignal
from sponsorscout.scorer.models import MultiScoreResult, ScoreBreakdown, ScoredJob
from sponsorscout.scorer.ratings import get_recommendation
from sponsorscout.scorer.relevance_score import RelevanceScorer
from sponsorscout.scorer.resume_score import ResumeMatchScorer
from sponsorscout.scorer.salary import SalaryThresholdChecker
from sponsorscout.scorer.visa_score import VisaScorer

logger = logging.getLogger(__name__)

WEIGHT_SUM_TOLERANCE = 1e-6


def _apply_result_policy(
    results: List[ScoredJob],
    policy: Optional[ResultPolicy]
) -> List[ScoredJob]:
    """Apply ResultPolicy to filter, order and truncate results.

    Ordering is descending on ``policy.sort_by``; ties fall back to
    overall_score, then to input order.
    """
    if policy is None:
        return results

    filtered = [
        r for r in results
        if r.result.overall_score >= policy.min_overall_score
        and r.result.visa_score >= policy.min_visa_score
        and r.result.resume_match_score >= policy.min_resume_score
        and r.result.job_relevance_score >= policy.min_relevance_score
    ]

    filtered.sort(key=lambda r: (-r.score_for(policy.sort_by), -r.result.overall_score, r.position))

    if policy.top_k is not None:
        filtered = filtered[:policy.top_k]
    return filtered


class ScoringService:
    """
    Service for multi-score job evaluation.

    Holds only immutable configuration, so one instance can score any
    number of jobs, from any number of threads.
    """

    def __init__(
        self,
        config: Optional[ScoringConfig] = None,
        salary_checker: Optional[SalaryThresholdChecker] = None
    ):
        self.config = config or ScoringConfig()
        self.visa_scorer = VisaScorer(salary_checker)
        self.resume_scorer = ResumeMatchScorer(self.config)
        self.relevance_scorer = RelevanceScorer()

        weight_sum = self.config.top_level_weight_sum()
        if abs(weight_sum - 1.0) > WEIGHT_SUM_TOLERANCE:
            logger.warning(f"Top-level score weights sum to {weight_sum:.3f}, expected 1.0; "
                           f"overall scores will not be renormalized")

    def aggregate(
        self,
        job: NormalizedJob,
        profile: UserProfile,
        visa_signal: VisaSignal
    ) -> MultiScoreResult:
        """Score one job against a profile.

        Args:
            job: Normalized job posting
            profile: User profile with tiered skills and preferences
            visa_signal: Sponsorship intelligence for the job's company

        Returns:
            MultiScoreResult with overall and component scores, the
            recommendation and the full breakdown (including weights used)
        """
        visa = self.visa_scorer.score(visa_signal, job)
        resume = self.resume_scorer.score(job, profile)
        relevance = self.relevance_scorer.score(job, profile)

        weighted = (
            visa.total * self.config.visa_score_weight
            + resume.total * self.config.resume_score_weight
            + relevance.total * self.config.relevance_score_weight
        )
        overall = max(0, min(100, round_half_up(weighted)))

        recommendation = get_recommendation(overall, visa.total)

        logger.debug(f"Job {job.job_id}: overall={overall}, visa={visa.total}, "
                     f"resume={resume.total}, relevance={relevance.total} -> {recommendation.action}")

        return MultiScoreResult(
            overall_score=overall,
            visa_score=visa.total,
            resume_match_score=resume.total,
            job_relevance_score=relevance.total,
            recommendation=recommendation,
            breakdown=ScoreBreakdown(
                visa=visa,
                resume=resume,
                relevance=relevance,
                weights=self.config
            )
        )

    def score_jobs(
        self,
        candidates: Iterable[Tuple[NormalizedJob, VisaSignal]],
        profile: UserProfile,
        result_policy: Optional[ResultPolicy] = None
    ) -> List[ScoredJob]:
        """Score a batch of (job, visa signal) pairs against one profile.

        Args:
            candidates: Jobs paired with their visa signals
            profile: User profile
            result_policy: Optional policy for filtering/ordering/truncation

        Returns:
            ScoredJob list; in input order without a policy, otherwise
            ordered and filtered by the policy
        """
        scored = [
            ScoredJob(job=job, result=self.aggregate(job, profile, visa_signal), position=index)
            for index, (job, visa_signal) in enumerate(candidates)
        ]

        if result_policy:
            total = len(scored)
            scored = _apply_result_policy(scored, result_policy)
            logger.info(f"Scored {total} jobs, returning {len(scored)} "
                        f"(policy: sort_by={result_policy.sort_by}, "
                        f"min_overall={result_policy.min_overall_score}, top_k={result_policy.top_k})")
        else:
            logger.info(f"Scored {len(scored)} jobs")

        return scored


@lru_cache()
def get_scoring_service(config: Optional[ScoringConfig] = None) -> ScoringService:
    """
    Get a ScoringService for a weight set, with caching.

    ScoringConfig is frozen and hashable, so equal configs share one
    service and the weight-sum warning is logged once per config rather
    than once per job.
    """
    return ScoringService(config)


def aggregate(
    job: NormalizedJob,
    profile: UserProfile,
    visa_signal: VisaSignal,
    config: Optional[ScoringConfig] = None
) -> MultiScoreResult:
    """Score one job with the given (or default) weights."""
    return get_scoring_service(config).aggregate(job, profile, visa_signal)
