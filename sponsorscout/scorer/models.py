#!/usr/bin/env python3
"""
Scoring Models - Immutable value objects for scoring results.

Every factor keeps a fixed set of fields; the ``status`` / ``match_type``
tag tells which branch produced it, so a breakdown answers "why this
number" without re-running the scorer.
"""

from dataclasses import dataclass, fields, is_dataclass
from enum import Enum
from typing import Any, Dict, Literal, Optional, Tuple

from pydantic import BaseModel

from sponsorscout.config_loader import ScoringConfig
from sponsorscout.scorer.salary import SalaryThresholdStatus


def _to_native_types(obj: Any) -> Any:
    """Recursively convert value objects to JSON-ready Python types."""
    if obj is None:
        return None
    if isinstance(obj, Enum):
        return obj.value
    if isinstance(obj, BaseModel):
        return obj.model_dump()
    if is_dataclass(obj):
        return {f.name: _to_native_types(getattr(obj, f.name)) for f in fields(obj)}
    if isinstance(obj, dict):
        return {k: _to_native_types(v) for k, v in obj.items()}
    if isinstance(obj, (list, tuple)):
        return [_to_native_types(item) for item in obj]
    return obj


class _Serializable:
    def to_dict(self) -> Dict[str, Any]:
        return _to_native_types(self)


# ----------------------------
# Visa factors
# ----------------------------

@dataclass(frozen=True)
class Penalty(_Serializable):
    reason: str
    points: int


@dataclass(frozen=True)
class RegistryFactor(_Serializable):
    score: int
    status: Literal['confirmed', 'not_found']


@dataclass(frozen=True)
class ActivityFactor(_Serializable):
    score: int
    count: int
    status: Literal['active', 'none']


@dataclass(frozen=True)
class CommunityFactor(_Serializable):
    # Negative reports are recorded for display only; they do not subtract.
    score: int
    positive: int
    negative: int
    status: Literal['reported', 'no_data']


@dataclass(frozen=True)
class JdKeywordFactor(_Serializable):
    score: int
    status: Literal['explicit_mention', 'not_mentioned']


@dataclass(frozen=True)
class SalaryThresholdFactor(_Serializable):
    score: int
    status: SalaryThresholdStatus


@dataclass(frozen=True)
class VisaBreakdown(_Serializable):
    registry_match: RegistryFactor
    recent_activity: ActivityFactor
    community_signals: CommunityFactor
    jd_keywords: JdKeywordFactor
    salary_threshold: SalaryThresholdFactor
    penalties: Tuple[Penalty, ...] = ()
    explanation: Tuple[str, ...] = ()  # human-readable reason lines


@dataclass(frozen=True)
class VisaScore(_Serializable):
    total: int
    breakdown: VisaBreakdown
    rating: str
    confidence: str = 'very_low'
    country_code: Optional[str] = None  # explicit or detected from location
    visa_categories: Tuple[str, ...] = ()


# ----------------------------
# Resume factors
# ----------------------------

SkillTier = Literal['domain', 'core_pm', 'tools', 'technical']


@dataclass(frozen=True)
class SkillTierMatch(_Serializable):
    tier: SkillTier
    score: int
    max: int
    weight: float
    match_percentage: int
    matched_skills: Tuple[str, ...]


@dataclass(frozen=True)
class ResumeBreakdown(_Serializable):
    domain_match: SkillTierMatch
    core_pm_match: SkillTierMatch
    tools_match: SkillTierMatch
    technical_match: SkillTierMatch
    raw_total: int  # sum of tier points before the 100 cap

    def tiers(self) -> Tuple[SkillTierMatch, ...]:
        return (self.domain_match, self.core_pm_match, self.tools_match, self.technical_match)


@dataclass(frozen=True)
class ResumeMatchScore(_Serializable):
    total: int
    breakdown: ResumeBreakdown
    rating: str


# ----------------------------
# Relevance factors
# ----------------------------

@dataclass(frozen=True)
class LocationMatch(_Serializable):
    score: int
    match_type: Literal['preferred_city', 'target_country', 'remote', 'no_match']
    location: str
    country: Optional[str] = None


@dataclass(frozen=True)
class SalaryMatch(_Serializable):
    score: int
    match_type: Literal['unknown', 'in_range', 'above_range', 'slightly_below', 'below_minimum']
    job_salary: Optional[float] = None  # reference currency
    expected_min: Optional[float] = None
    expected_max: Optional[float] = None


@dataclass(frozen=True)
class RoleMatch(_Serializable):
    score: int
    match_type: Literal['preferred', 'acceptable', 'partial', 'no_match']
    role: str


@dataclass(frozen=True)
class ExperienceMatch(_Serializable):
    score: int
    match_type: Literal['perfect', 'slightly_over', 'slightly_under', 'mismatch']
    user_years: int
    job_min: int
    job_max: int


@dataclass(frozen=True)
class IndustryMatch(_Serializable):
    score: int
    match_type: Literal['perfect', 'related', 'neutral']
    industries: Tuple[str, ...]
    matched: Tuple[str, ...] = ()


@dataclass(frozen=True)
class RelevanceBreakdown(_Serializable):
    location: LocationMatch
    salary: SalaryMatch
    role: RoleMatch
    experience: ExperienceMatch
    industry: IndustryMatch

    def factors(self) -> Tuple[Any, ...]:
        return (self.location, self.salary, self.role, self.experience, self.industry)


@dataclass(frozen=True)
class RelevanceScore(_Serializable):
    total: int
    breakdown: RelevanceBreakdown
    rating: str


# ----------------------------
# Aggregate
# ----------------------------

@dataclass(frozen=True)
class Recommendation(_Serializable):
    action: str
    priority: str
    confidence: str
    reason: str


@dataclass(frozen=True)
class ScoreBreakdown(_Serializable):
    visa: VisaScore
    resume: ResumeMatchScore
    relevance: RelevanceScore
    weights: ScoringConfig


@dataclass(frozen=True)
class MultiScoreResult(_Serializable):
    """Complete scored result with overall, component scores and explanation."""
    overall_score: int
    visa_score: int
    resume_match_score: int
    job_relevance_score: int
    recommendation: Recommendation
    breakdown: ScoreBreakdown


@dataclass(frozen=True)
class ScoredJob:
    """A job paired with its score, as returned by batch scoring."""
    job: Any  # NormalizedJob
    result: MultiScoreResult
    position: int = 0  # index in the input batch

    def score_for(self, field_name: str) -> int:
        return getattr(self.result, field_name)
