"""
Shared fixtures.
"""

import pytest
import structlog

from eannorm.config import get_settings


@pytest.fixture(autouse=True)
def clean_settings(monkeypatch):
    """Keep cached Settings and structlog config from leaking between tests."""
    for name in ("ADD_CHECKSUM", "UPCE_FALLBACK", "LOG_LEVEL", "LOG_FORMAT", "ENVIRONMENT"):
        monkeypatch.delenv(name, raising=False)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()
    structlog.reset_defaults()
