"""Pytest configuration shared by unit and integration tests.

Provides:
1. Markers (unit, integration) and automatic asyncio marking
2. Fast, real security services (bcrypt cost 4, HS256 sessions)
3. A logger double that accepts every LoggerProtocol call
"""

import inspect
from unittest.mock import Mock

import pytest
import structlog

from rend_auth.core.config import SessionTokenConfig
from rend_auth.infrastructure.security import (
    BcryptPasswordService,
    JWTSessionService,
    PasswordResetTokenService,
)
from tests.utils import TEST_SECRET_KEY


@pytest.fixture(autouse=True)
def _reset_structlog():
    """Undo global structlog configuration made by a test (it may capture a
    per-test stdout that is closed once the test ends)."""
    yield
    structlog.reset_defaults()


@pytest.fixture
def logger():
    """Logger double; assertions inspect its call list."""
    return Mock()


@pytest.fixture
def session_config() -> SessionTokenConfig:
    return SessionTokenConfig(secret_key=TEST_SECRET_KEY)


@pytest.fixture
def session_service(session_config) -> JWTSessionService:
    return JWTSessionService(session_config)


@pytest.fixture
def password_service() -> BcryptPasswordService:
    """bcrypt at the minimum cost so tests stay fast."""
    return BcryptPasswordService(cost_factor=4)


@pytest.fixture
def reset_token_service() -> PasswordResetTokenService:
    return PasswordResetTokenService(expiration_minutes=60)


# Pytest markers for different test types
def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line("markers", "unit: Unit tests with mocked dependencies")
    config.addinivalue_line(
        "markers",
        "integration: Integration tests with real in-memory stores and real crypto",
    )


def pytest_collection_modifyitems(config, items):
    """Automatically add asyncio marker to async test functions.

    This ensures all async tests are properly marked even if
    the developer forgets to add @pytest.mark.asyncio.
    """
    for item in items:
        function = getattr(item, "function", None)
        if function is not None and inspect.iscoroutinefunction(function):
            item.add_marker(pytest.mark.asyncio)
