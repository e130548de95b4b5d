#!/usr/bin/env python3
"""
Ratings and Recommendations - Fixed label tables over scores.

Ratings are display labels only and never feed back into a score.
"""

from typing import Tuple

from sponsorscout.scorer.models import Recommendation

RATING_BANDS: Tuple[Tuple[int, str], ...] = (
    (90, "EXCELLENT"),
    (80, "STRONG"),
    (70, "GOOD"),
    (60, "FAIR"),
    (50, "WEAK"),
)
LOWEST_RATING = "POOR"


def get_rating(score: int) -> str:
    for threshold, label in RATING_BANDS:
        if score >= threshold:
            return label
    return LOWEST_RATING


# (min_overall, min_visa, recommendation); first match wins, bounds inclusive
RECOMMENDATION_TABLE: Tuple[Tuple[int, int, Recommendation], ...] = (
    (85, 80, Recommendation(
        action='APPLY NOW',
        priority='HIGH',
        confidence='Very High',
        reason='Strong visa sponsorship likelihood and excellent profile match'
    )),
    (75, 60, Recommendation(
        action='STRONGLY CONSIDER',
        priority='HIGH',
        confidence='High',
        reason='Good visa chances and solid profile fit'
    )),
    (65, 0, Recommendation(
        action='CONSIDER',
        priority='MEDIUM',
        confidence='Moderate',
        reason='Decent match but verify visa sponsorship availability'
    )),
    (50, 0, Recommendation(
        action='REVIEW CAREFULLY',
        priority='LOW',
        confidence='Low',
        reason='Marginal fit - apply only if few better options'
    )),
)

SKIP = Recommendation(
    action='SKIP',
    priority='VERY LOW',
    confidence='Very Low',
    reason='Poor match on multiple factors'
)


def get_recommendation(overall_score: int, visa_score: int) -> Recommendation:
    """Look up the action for an (overall, visa) score pair."""
    for min_overall, min_visa, recommendation in RECOMMENDATION_TABLE:
        if overall_score >= min_overall and visa_score >= min_visa:
            return recommendation
    return SKIP


def get_confidence_level(visa_score: int, registry_match: bool) -> str:
    """How much to trust a visa score; a registry hit lowers the bar."""
    if registry_match and visa_score >= 80:
        return 'very_high'
    if registry_match and visa_score >= 60:
        return 'high'
    if visa_score >= 70:
        return 'high'
    if visa_score >= 50:
        return 'medium'
    if visa_score >= 30:
        return 'low'
    return 'very_low'
