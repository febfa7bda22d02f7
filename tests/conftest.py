"""Pytest configuration.

This configuration ensures:
1. Settings load in the testing environment (JSON logs on stderr)
2. Cached settings and logger singletons are rebuilt for every test
"""

import os

import pytest

os.environ.setdefault("ENUMIZER_ENVIRONMENT", "testing")

from enumizer.core.config import get_settings  # noqa: E402
from enumizer.core.container import get_logger  # noqa: E402


@pytest.fixture(autouse=True)
def fresh_singletons():
    """Rebuild settings and logger so env patches and capture streams apply."""
    get_settings.cache_clear()
    get_logger.cache_clear()
    yield
    get_settings.cache_clear()
    get_logger.cache_clear()


# Pytest markers for different test types
def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line("markers", "unit: Unit tests with mocked dependencies")
