import logging
import os
from typing import Literal, Optional

import yaml
from pydantic import BaseModel, ConfigDict, Field

logger = logging.getLogger(__name__)

LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'

ScoreField = Literal['overall_score', 'visa_score', 'resume_match_score', 'job_relevance_score']


class ScoringConfig(BaseModel):
    """
    Weights for the multi-score engine.

    overall = visa * visa_score_weight
            + resume * resume_score_weight
            + relevance * relevance_score_weight

    The three top-level weights are expected to sum to 1.0; nothing here
    renormalizes them. Values outside [0, 1] are a caller error and show up
    only as out-of-range component points before clamping.

    Skill tier weights scale each tier's maximum points:
    tier points = round(max_points * weight * 2 * match_pct / 100). At a
    100% match a tier earns max_points * 2 * weight, so 0.50 means full
    credit (the domain default: 50 of 50) while the other defaults cap
    their tiers at 18/30, 5/15 and 1/5. Above 0.50 a tier exceeds its
    nominal maximum. See sponsorscout.scorer.resume_score.

    Unknown keys are rejected; a misspelled weight raises ValidationError.
    """
    model_config = ConfigDict(frozen=True, extra='forbid')

    visa_score_weight: float = 0.40
    resume_score_weight: float = 0.35
    relevance_score_weight: float = 0.25

    domain_skills_weight: float = 0.50
    core_pm_skills_weight: float = 0.30
    tools_skills_weight: float = 0.15
    tech_skills_weight: float = 0.05

    def top_level_weight_sum(self) -> float:
        return self.visa_score_weight + self.resume_score_weight + self.relevance_score_weight


class ResultPolicy(BaseModel):
    """Post-scoring filtering, ordering and truncation for batches.

    Thresholds are inclusive (score >= threshold passes).
    """
    model_config = ConfigDict(extra='forbid')

    min_overall_score: int = 0
    min_visa_score: int = 0
    min_resume_score: int = 0
    min_relevance_score: int = 0
    sort_by: ScoreField = 'overall_score'
    top_k: Optional[int] = None  # None = keep everything


class AppConfig(BaseModel):
    scoring: ScoringConfig = Field(default_factory=ScoringConfig)
    result_policy: ResultPolicy = Field(default_factory=ResultPolicy)
    log_level: str = "INFO"


_WEIGHT_ENV_OVERRIDES = {
    'SCORING_VISA_WEIGHT': 'visa_score_weight',
    'SCORING_RESUME_WEIGHT': 'resume_score_weight',
    'SCORING_RELEVANCE_WEIGHT': 'relevance_score_weight',
}


def load_config(config_path: str = "config.yaml") -> AppConfig:
    # If not found at relative path (e.g. running from a subdirectory), try the repo root
    if not os.path.exists(config_path):
        base_dir = os.path.dirname(os.path.abspath(__file__))
        config_path = os.path.join(base_dir, "..", "config.yaml")

    data = {}
    if os.path.exists(config_path):
        with open(config_path, "r") as f:
            data = yaml.safe_load(f) or {}
    else:
        logger.info("No config file found, using default scoring weights")

    # Allow env var overrides for the top-level weights
    for env_name, field_name in _WEIGHT_ENV_OVERRIDES.items():
        raw = os.environ.get(env_name)
        if raw:
            if data.get('scoring') is None:
                data['scoring'] = {}
            data['scoring'][field_name] = raw

    env_log_level = os.environ.get("LOG_LEVEL")
    if env_log_level:
        data['log_level'] = env_log_level

    return AppConfig(**data)


def configure_logging(config: AppConfig) -> None:
    """Apply the configured log level with the standard format."""
    logging.basicConfig(
        level=getattr(logging, config.log_level.upper(), logging.INFO),
        format=LOG_FORMAT
    )
