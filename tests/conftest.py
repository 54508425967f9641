"""Pytest configuration and fixtures."""

import logging

import pytest
import structlog

from tokensign.common.settings import Settings
from tokensign.signing.registry import SigningMethodRegistry


@pytest.fixture
def settings() -> Settings:
    """Create test settings."""
    return Settings(
        log_level="DEBUG",
        log_json=False,
        default_algorithm="HS256",
    )


@pytest.fixture
def registry() -> SigningMethodRegistry:
    """Isolated registry so tests never touch the process-wide one."""
    return SigningMethodRegistry()


@pytest.fixture
def secret_key() -> bytes:
    """Sample shared secret."""
    return b"secret"


@pytest.fixture
def reset_structlog():
    """Restore structlog defaults after a test configures logging."""
    root = logging.getLogger()
    level = root.level
    yield
    structlog.reset_defaults()
    root.setLevel(level)
