"""
Pytest configuration and fixtures.

This file provides pytest-specific fixtures. Plain builders usable from
unittest.TestCase classes live in tests/fixtures/scoring_fixtures.py.
"""

import pytest

from sponsorscout.config_loader import ScoringConfig
from sponsorscout.scorer.service import ScoringService
from tests.fixtures.scoring_fixtures import (
    make_job, make_profile, make_visa_signal, perfect_visa_signal
)


@pytest.fixture
def scoring_config():
    return ScoringConfig()


@pytest.fixture
def scoring_service(scoring_config):
    return ScoringService(scoring_config)


@pytest.fixture
def job():
    return make_job()


@pytest.fixture
def profile():
    return make_profile()


@pytest.fixture
def visa_signal():
    return make_visa_signal()


@pytest.fixture
def strong_visa_signal():
    return perfect_visa_signal()
