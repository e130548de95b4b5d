"""
Pydantic models for the records the scoring engine consumes.

This module provides:
1. NormalizedJob - structured attributes produced by the external job normalizer
2. UserProfile - the candidate profile with its four priority skill tiers
3. VisaSignal - sponsorship intelligence gathered by external visa providers

Malformed input (non-numeric salary, negative counts, unknown keys) is
rejected here with a ValidationError. The scorers downstream assume
well-typed records and never raise for missing business data.
"""
from typing import Any, Dict, List, Optional, Tuple

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, field_validator, model_validator


def _ordered_unique(values: Any) -> Tuple[str, ...]:
    """Strip entries, drop blanks and duplicates, keep first-seen order."""
    if values is None:
        return ()
    if isinstance(values, str):
        values = [values]
    seen = set()
    result = []
    for value in values:
        text = str(value).strip()
        if not text:
            continue
        key = text.lower()
        if key in seen:
            continue
        seen.add(key)
        result.append(text)
    return tuple(result)


# ============================================================================
# JOB MODELS
# ============================================================================

class SalaryRange(BaseModel):
    """Advertised salary band of a job posting."""
    model_config = ConfigDict(extra='forbid', frozen=True)

    min: Optional[float] = Field(default=None, description="Lower bound, annual")
    max: Optional[float] = Field(default=None, description="Upper bound, annual")
    currency: str = Field(default="GBP", description="ISO currency code")

    @field_validator('currency', mode='before')
    @classmethod
    def _upper_currency(cls, value: Any) -> str:
        if value is None:
            return "GBP"
        return str(value).strip().upper()


class NormalizedJob(BaseModel):
    """A job posting after HTML extraction."""
    model_config = ConfigDict(extra='forbid', frozen=True)

    job_id: Optional[str] = Field(default=None, description="Store identifier, if any")
    title: Optional[str] = None
    company: Optional[str] = None
    location: Optional[str] = None
    country_code: Optional[str] = Field(default=None, description="ISO 3166 alpha-2")
    skills: Tuple[str, ...] = Field(default=(), description="Case-insensitive skill tags")
    domains: Tuple[str, ...] = Field(default=(), description="Industry/domain tags")
    is_remote: bool = False
    salary: Optional[SalaryRange] = None
    experience_min: Optional[int] = None
    experience_max: Optional[int] = None

    @model_validator(mode='before')
    @classmethod
    def _fold_flat_salary(cls, data: Any) -> Any:
        # The job store keeps salary_min/salary_max/salary_currency as columns.
        if not isinstance(data, dict):
            return data
        flat_keys = ('salary_min', 'salary_max', 'salary_currency')
        if not any(key in data for key in flat_keys):
            return data
        data = dict(data)
        flat = {
            'min': data.pop('salary_min', None),
            'max': data.pop('salary_max', None),
            'currency': data.pop('salary_currency', None),
        }
        if data.get('salary') is None and (flat['min'] is not None or flat['max'] is not None):
            data['salary'] = flat
        return data

    @field_validator('skills', 'domains', mode='before')
    @classmethod
    def _clean_tags(cls, value: Any) -> Tuple[str, ...]:
        return _ordered_unique(value)

    @field_validator('country_code', mode='before')
    @classmethod
    def _upper_country(cls, value: Any) -> Optional[str]:
        if value is None:
            return None
        code = str(value).strip().upper()
        return code or None


# ============================================================================
# PROFILE MODELS
# ============================================================================

class RoleFlexibility(BaseModel):
    """Job titles the user is after, split by preference."""
    model_config = ConfigDict(extra='forbid', frozen=True)

    preferred: Tuple[str, ...] = ()
    acceptable: Tuple[str, ...] = ()

    @field_validator('preferred', 'acceptable', mode='before')
    @classmethod
    def _clean_roles(cls, value: Any) -> Tuple[str, ...]:
        return _ordered_unique(value)


class SalaryExpectation(BaseModel):
    """User salary expectation, in the reference currency."""
    model_config = ConfigDict(extra='forbid', frozen=True)

    min: Optional[float] = None
    max: Optional[float] = None
    currency: str = "GBP"


class UserProfile(BaseModel):
    """
    Candidate profile.

    Skills are split into four disjoint tiers, highest priority first.
    Set-like fields are kept as ordered, de-duplicated tuples so that
    matched-skill lists in score breakdowns are identical across runs.
    """
    model_config = ConfigDict(extra='forbid', frozen=True, populate_by_name=True)

    skills_domain: Tuple[str, ...] = Field(
        default=(),
        validation_alias=AliasChoices('skills_domain', 'skills_must_have_domain'),
    )
    skills_core_pm: Tuple[str, ...] = Field(
        default=(),
        validation_alias=AliasChoices('skills_core_pm', 'skills_must_have_core_pm'),
    )
    skills_tools: Tuple[str, ...] = Field(
        default=(),
        validation_alias=AliasChoices('skills_tools', 'skills_good_to_have'),
    )
    skills_tech: Tuple[str, ...] = Field(
        default=(),
        validation_alias=AliasChoices('skills_tech', 'skills_okay_to_have'),
    )
    role_flexibility: RoleFlexibility = Field(default_factory=RoleFlexibility)
    preferred_locations: Tuple[str, ...] = ()
    target_countries: Tuple[str, ...] = ()
    salary_expectation: SalaryExpectation = Field(default_factory=SalaryExpectation)
    years_of_experience: int = 0
    industries: Tuple[str, ...] = ()

    @field_validator(
        'skills_domain', 'skills_core_pm', 'skills_tools', 'skills_tech',
        'preferred_locations', 'industries',
        mode='before',
    )
    @classmethod
    def _clean_terms(cls, value: Any) -> Tuple[str, ...]:
        return _ordered_unique(value)

    @field_validator('target_countries', mode='before')
    @classmethod
    def _clean_countries(cls, value: Any) -> Tuple[str, ...]:
        return tuple(code.upper() for code in _ordered_unique(value))

    @field_validator('role_flexibility', 'salary_expectation', mode='before')
    @classmethod
    def _none_to_default(cls, value: Any) -> Any:
        return {} if value is None else value

    @field_validator('years_of_experience', mode='before')
    @classmethod
    def _none_to_zero(cls, value: Any) -> Any:
        return 0 if value is None else value


# ============================================================================
# VISA INTELLIGENCE MODELS
# ============================================================================

class CommunitySignals(BaseModel):
    """Aggregated community reports about a company's sponsorship record."""
    model_config = ConfigDict(extra='forbid', frozen=True)

    positive_count: int = Field(default=0, ge=0)
    negative_count: int = Field(default=0, ge=0)


class VisaSignal(BaseModel):
    """Sponsorship evidence for one job, as returned by the visa providers."""
    model_config = ConfigDict(extra='forbid', frozen=True)

    registry_match: bool = False
    recent_activity_count: int = Field(default=0, ge=0)
    community_signals: Optional[CommunitySignals] = None
    jd_keywords_found: bool = False
    explicit_no_sponsorship: bool = False

    def with_jd_signals(self, jd_signals: 'JdKeywordSignals') -> 'VisaSignal':
        """Return a copy whose job-description flags come from ``jd_signals``."""
        return self.model_copy(update={
            'jd_keywords_found': jd_signals.jd_keywords_found,
            'explicit_no_sponsorship': jd_signals.explicit_no_sponsorship,
        })


class JdKeywordSignals(BaseModel):
    """Sponsorship phrases found in a job description."""
    model_config = ConfigDict(frozen=True)

    positive_matches: Tuple[str, ...] = ()
    negative_matches: Tuple[str, ...] = ()

    @property
    def explicit_no_sponsorship(self) -> bool:
        return bool(self.negative_matches)

    @property
    def jd_keywords_found(self) -> bool:
        return bool(self.positive_matches) and not self.negative_matches

    def to_dict(self) -> Dict[str, List[str]]:
        return {
            'positive_matches': list(self.positive_matches),
            'negative_matches': list(self.negative_matches),
        }
