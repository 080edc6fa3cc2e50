"""
Pytest configuration and fixtures for cronexpand tests
"""

from datetime import date

import pytest

from core.config import AppConfig, YearConfig


@pytest.fixture
def today():
    """Fixed date so year bounds are reproducible (2024..2051)"""
    return date(2026, 10, 18)


@pytest.fixture
def default_config():
    return AppConfig()


@pytest.fixture
def strict_config():
    return AppConfig(year=YearConfig(policy="strict"))


@pytest.fixture
def no_year_config():
    return AppConfig(year=YearConfig(enabled=False))
