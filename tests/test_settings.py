"""
Tests for settings and logging configuration.
"""

import structlog
from structlog.testing import capture_logs

from eannorm.config import Settings, configure_logging, get_settings


class TestSettings:
    """Tests for Settings."""

    def test_defaults(self):
        """Test default settings."""
        settings = get_settings()

        assert settings.environment == "dev"
        assert settings.add_checksum is False
        assert settings.upce_fallback is False
        assert settings.log_level == "INFO"
        assert not settings.is_production

    def test_environment_override(self, monkeypatch):
        """Test values read from environment variables."""
        monkeypatch.setenv("ADD_CHECKSUM", "1")
        monkeypatch.setenv("ENVIRONMENT", "prod")

        settings = Settings()

        assert settings.add_checksum is True
        assert settings.is_production

    def test_cached(self):
        """Test that get_settings returns the same instance."""
        assert get_settings() is get_settings()


class TestConfigureLogging:
    """Tests for structlog configuration."""

    def test_level_filter(self):
        """Test that events below the configured level are dropped."""
        configure_logging(Settings(log_level="WARNING", log_format="text"))
        logger = structlog.get_logger("test")

        with capture_logs() as logs:
            logger.info("dropped")
            logger.warning("kept", code="123")

        assert [e["event"] for e in logs] == ["kept"]
        assert logs[0]["code"] == "123"

    def test_unknown_level_defaults_to_info(self):
        """Test that an unknown level name falls back to INFO."""
        configure_logging(Settings(log_level="verbose"))
        logger = structlog.get_logger("test")

        with capture_logs() as logs:
            logger.debug("dropped")
            logger.info("kept")

        assert [e["event"] for e in logs] == ["kept"]
