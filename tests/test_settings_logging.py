"""Tests for settings and logging setup."""

import json
import logging

import pytest
import structlog
from pydantic import ValidationError

from tokensign.common.logging import get_logger, setup_logging
from tokensign.common.settings import Settings, get_settings


class TestSettings:
    """Test environment-driven configuration."""

    def test_defaults(self, monkeypatch):
        """Defaults apply when nothing is configured."""
        monkeypatch.delenv("TOKENSIGN_DEFAULT_ALGORITHM", raising=False)
        monkeypatch.delenv("TOKENSIGN_LOG_LEVEL", raising=False)
        monkeypatch.delenv("TOKENSIGN_LOG_JSON", raising=False)

        settings = Settings(_env_file=None)

        assert settings.default_algorithm == "HS256"
        assert settings.log_level == "INFO"
        assert settings.log_json is False

    def test_env_prefix(self, monkeypatch):
        """Values are read from TOKENSIGN_ variables."""
        monkeypatch.setenv("TOKENSIGN_DEFAULT_ALGORITHM", "HS384")
        monkeypatch.setenv("TOKENSIGN_LOG_JSON", "true")

        settings = Settings(_env_file=None)

        assert settings.default_algorithm == "HS384"
        assert settings.log_json is True

    def test_rejects_unknown_algorithm(self):
        """Only HMAC designators are accepted."""
        with pytest.raises(ValidationError):
            Settings(default_algorithm="RS256")

    def test_get_settings_cached(self):
        """get_settings returns a cached instance."""
        get_settings.cache_clear()
        try:
            assert get_settings() is get_settings()
        finally:
            get_settings.cache_clear()


@pytest.mark.usefixtures("reset_structlog")
class TestLogging:
    """Test structlog configuration."""

    def test_setup_console(self, settings):
        """Console logging configures the root level."""
        setup_logging(settings)

        assert structlog.is_configured()
        assert logging.getLogger().level == logging.DEBUG

    def test_setup_json(self, caplog):
        """JSON logging renders events as JSON lines."""
        setup_logging(Settings(log_json=True, log_level="INFO"))
        logger = get_logger("tokensign.test")

        logger.info("hello", alg="HS256")
        logger.debug("filtered")

        assert len(caplog.records) == 1
        payload = json.loads(caplog.records[0].getMessage())
        assert payload["event"] == "hello"
        assert payload["alg"] == "HS256"
        assert payload["level"] == "info"
        assert payload["logger"] == "tokensign.test"
        assert "timestamp" in payload

    def test_get_logger_binds(self):
        """Loggers accept bound key-value context."""
        logger = get_logger(__name__).bind(alg="HS512")
        assert logger is not None
