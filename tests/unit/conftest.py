"""Unit-test fixtures."""

import pytest

from domainpy.core.config import get_settings


@pytest.fixture(autouse=True)
def _fresh_settings():
    """Drop cached environment settings around every test."""
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()
