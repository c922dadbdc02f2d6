"""Shared pytest fixtures for the translation runtime test suite."""

import pytest
import structlog

from localization.configuration import get_settings
from localization.logging import configure_logging


@pytest.fixture(autouse=True, scope="session")
def silence_logging():
    """Configure structlog once; output is suppressed under pytest."""
    configure_logging()


@pytest.fixture(autouse=True)
def clear_logging_context():
    """Prevent bound log context from leaking between tests."""
    yield
    structlog.contextvars.clear_contextvars()


@pytest.fixture(autouse=True)
def fresh_settings():
    """Drop cached settings so env changes made by a test are picked up."""
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()
