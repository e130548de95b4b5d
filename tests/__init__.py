#!/usr/bin/env python3
"""
Test suite for the SponsorScout scoring engine.

All tests are pure unit tests (no database, no network) and can be run
with standard Python tools:

    # Run all tests
    python -m pytest tests/ -v

    # Run only the scorer tests
    python -m pytest tests/unit/scorer -v

Shared input builders live in tests/fixtures/scoring_fixtures.py; pytest
fixtures wrapping them live in tests/conftest.py.
"""
