#!/usr/bin/env python3
"""
Text Matching - Loose, case-insensitive term matching.

Skills and roles are compared by bidirectional substring containment
rather than exact tokens, so "payments" matches "payment processing".
This is knowingly permissive ("java" also matches "javascript");
switching to token-boundary matching would change every score.
"""

import math
from typing import Iterable, List


def normalize_terms(values: Iterable[str]) -> List[str]:
    """Lowercase and strip terms, dropping blanks and repeats (first seen wins)."""
    seen = set()
    result = []
    for value in values or ():
        term = (value or '').strip().lower()
        if term and term not in seen:
            seen.add(term)
            result.append(term)
    return result


def contains_either(a: str, b: str) -> bool:
    """True when either string contains the other, ignoring case.

    Blank strings never match, so an empty skill tag never counts as a hit.
    """
    a = (a or '').strip().lower()
    b = (b or '').strip().lower()
    if not a or not b:
        return False
    return a in b or b in a


def matched_terms(user_terms: Iterable[str], job_terms: Iterable[str]) -> List[str]:
    """User terms that loosely match at least one job term, in user order."""
    job = normalize_terms(job_terms)
    return [
        term for term in normalize_terms(user_terms)
        if any(contains_either(term, job_term) for job_term in job)
    ]


def match_percentage(user_terms: Iterable[str], job_terms: Iterable[str]) -> int:
    """Share of user terms found in the job terms, 0-100. Zero for an empty user set."""
    user = normalize_terms(user_terms)
    if not user:
        return 0
    hits = len(matched_terms(user, job_terms))
    return round_half_up(hits / len(user) * 100)


def round_half_up(value: float) -> int:
    """Round halves up (2.5 -> 3), unlike Python's banker's round()."""
    return int(math.floor(value + 0.5))
