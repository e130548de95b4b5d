"""Matcher Module - Case-insensitive term matching shared by the scorers."""
from sponsorscout.matcher.text_matching import (
    contains_either, match_percentage, matched_terms, normalize_terms, round_half_up
)

__all__ = [
    'contains_either', 'match_percentage', 'matched_terms',
    'normalize_terms', 'round_half_up'
]
