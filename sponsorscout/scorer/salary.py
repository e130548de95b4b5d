#!/usr/bin/env python3
"""
Salary Normalization - Currency conversion and visa salary thresholds.

All salary comparisons happen in a single reference currency (GBP).
"""

from enum import Enum
from typing import Dict, Optional, Protocol, Tuple, runtime_checkable

from sponsorscout.schema_models import NormalizedJob
from sponsorscout.scorer.countries import resolve_country_code

REFERENCE_CURRENCY = "GBP"

# Multiplicative factors into the reference currency
CURRENCY_TO_REFERENCE: Dict[str, float] = {
    'GBP': 1.0,
    'USD': 0.79,
    'EUR': 0.85,
    'AUD': 0.52,
    'CAD': 0.58,
    'SEK': 0.074,
    'AED': 0.21,
}

# Minimum annual salary for a sponsored work visa: country -> (amount, currency)
VISA_SALARY_THRESHOLDS: Dict[str, Tuple[float, str]] = {
    'GB': (38700, 'GBP'),
    'NL': (45000, 'GBP'),
    'DE': (45300, 'GBP'),
    'SE': (156000, 'SEK'),
    'AU': (70000, 'GBP'),
    'CA': (54000, 'GBP'),
}

CLOSE_TO_THRESHOLD_RATIO = 0.9


def normalize_to_reference(amount: float, currency: Optional[str]) -> float:
    """Convert ``amount`` to the reference currency.

    Unknown or missing currencies are taken as already being in the
    reference currency (factor 1).
    """
    factor = CURRENCY_TO_REFERENCE.get((currency or '').strip().upper(), 1.0)
    return amount * factor


class SalaryThresholdStatus(str, Enum):
    MEETS = "above_minimum"
    CLOSE = "close_to_minimum"
    BELOW = "below_minimum"
    UNKNOWN = "unknown"


@runtime_checkable
class SalaryThresholdChecker(Protocol):
    """Decides whether a job's salary clears the sponsorship threshold."""

    def check(self, job: NormalizedJob) -> SalaryThresholdStatus:
        ...


class TableSalaryThresholdChecker:
    """Threshold check backed by a static country table."""

    def __init__(self, thresholds: Optional[Dict[str, Tuple[float, str]]] = None):
        self.thresholds = dict(VISA_SALARY_THRESHOLDS if thresholds is None else thresholds)

    def threshold_for(self, country_code: Optional[str]) -> Optional[float]:
        """Threshold for a country in the reference currency, if known."""
        entry = self.thresholds.get((country_code or '').upper())
        if not entry:
            return None
        amount, currency = entry
        return normalize_to_reference(amount, currency)

    def check(self, job: NormalizedJob) -> SalaryThresholdStatus:
        """Compare the job salary min with its country's threshold.

        Without an explicit country code the country is detected from the
        job location.
        """
        threshold = self.threshold_for(resolve_country_code(job))
        job_min = job.salary.min if job.salary else None
        if not threshold or not job_min:
            return SalaryThresholdStatus.UNKNOWN

        job_salary = normalize_to_reference(job_min, job.salary.currency)

        if job_salary >= threshold:
            return SalaryThresholdStatus.MEETS
        if job_salary >= threshold * CLOSE_TO_THRESHOLD_RATIO:
            return SalaryThresholdStatus.CLOSE
        return SalaryThresholdStatus.BELOW
