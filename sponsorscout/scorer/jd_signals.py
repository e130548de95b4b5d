#!/usr/bin/env python3
"""
JD Sponsorship Signals - detect sponsorship phrases in job description text.

Produces the ``jd_keywords_found`` / ``explicit_no_sponsorship`` flags of a
VisaSignal. A single negative phrase overrides any number of positive ones.
"""

import re
from typing import List, Tuple

from sponsorscout.schema_models import JdKeywordSignals

POSITIVE_PHRASES: Tuple[str, ...] = (
    'visa sponsorship',
    'work permit',
    'relocation support',
    'relocation package',
    'right to work',
    'eligible to work',
    'sponsorship available',
    'sponsor visa',
    'work authorization',
    'immigration support',
)

NEGATIVE_PHRASES: Tuple[str, ...] = (
    'no sponsorship',
    'must have right to work',
    'existing work permit',
    'already eligible',
    'sponsorship not available',
    'no visa support',
    'cannot sponsor',
    'visa not provided',
)


def _find_phrases(text: str, phrases: Tuple[str, ...]) -> List[str]:
    return [phrase for phrase in phrases if phrase in text]


def analyze_jd_keywords(text: str) -> JdKeywordSignals:
    """Scan job description text for sponsorship phrases.

    Whitespace runs are collapsed before matching so phrases split across
    line breaks are still found.
    """
    normalized = re.sub(r'\s+', ' ', (text or '').lower())
    return JdKeywordSignals(
        positive_matches=tuple(_find_phrases(normalized, POSITIVE_PHRASES)),
        negative_matches=tuple(_find_phrases(normalized, NEGATIVE_PHRASES)),
    )
