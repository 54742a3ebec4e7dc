"""
Pytest configuration and fixtures.

This file provides pytest-specific configuration and fixtures.
For builders of profiles and listings, see tests/fixtures/compatibility_fixtures.py
"""

import pytest

from compatibility.config_loader import EngineConfig
from compatibility.engine import CompatibilityEngine
from tests.fixtures.compatibility_fixtures import fixed_clock


def pytest_configure(config):
    """Configure pytest markers."""
    config.addinivalue_line(
        "markers", "web: marks tests that go through the HTTP layer (deselect with '-m \"not web\"')"
    )


@pytest.fixture
def engine():
    """Engine with default weights and a fixed clock."""
    return CompatibilityEngine(EngineConfig(), clock=fixed_clock)
