#!/usr/bin/env python3
"""
Scoring Module - Visa / Resume Match / Job Relevance multi-score engine.

Public API:
- ScoringService: Main scoring service orchestrator
- aggregate: One-shot scoring of a single job
- get_scoring_service: Cached ScoringService per weight set
- MultiScoreResult: Scored result with recommendation and breakdown

The scoring module is split into focused, single-responsibility modules:

- models.py: Immutable result value objects
- salary.py: Currency normalization and visa salary thresholds
- countries.py: Country detection and visa routes
- ratings.py: Rating labels and the recommendation table
- visa_score.py: Sponsorship likelihood
- resume_score.py: Tiered skill overlap
- relevance_score.py: Location/salary/role/experience/industry fit
- jd_signals.py: Sponsorship phrases in job descriptions
- service.py: ScoringService orchestrator
"""

from sponsorscout.scorer.models import MultiScoreResult, Recommendation, ScoredJob
from sponsorscout.scorer.service import ScoringService, aggregate, get_scoring_service

__all__ = ['ScoringService', 'aggregate', 'get_scoring_service', 'MultiScoreResult', 'Recommendation', 'ScoredJob']
