"""Tests for the config and logging modules."""

import logging
from unittest.mock import patch

from templatebind import logging_setup
from templatebind.config import Settings, _parse_cors_origins


class TestParseCorsOrigins:
    """Test CORS origins parsing."""

    def test_parse_cors_origins_with_value(self, monkeypatch):
        """Test parsing CORS origins from environment variable."""
        monkeypatch.setenv("CORS_ALLOW_ORIGINS", "http://localhost:3000,http://localhost:8080")
        assert _parse_cors_origins() == ["http://localhost:3000", "http://localhost:8080"]

    def test_parse_cors_origins_without_value(self, monkeypatch):
        """Test default CORS origins when not set."""
        monkeypatch.delenv("CORS_ALLOW_ORIGINS", raising=False)
        assert _parse_cors_origins() == ["*"]


class TestSettings:
    """Test Settings configuration."""

    def test_defaults(self):
        settings = Settings()

        assert settings.log_level in {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}
        assert settings.max_identifiers_per_request > 0

    def test_explicit_values(self):
        settings = Settings(log_level="DEBUG", debug=True, max_identifiers_per_request=10)

        assert settings.log_level == "DEBUG"
        assert settings.debug is True
        assert settings.max_identifiers_per_request == 10


class TestConfigureLogging:
    """Test logging bootstrap."""

    def test_configures_root_once(self, monkeypatch):
        """Test dictConfig is applied with the requested level."""
        monkeypatch.setattr(logging.getLogger(), "handlers", [])

        with patch.object(logging_setup, "dictConfig") as dict_config:
            logging_setup.configure_logging("warning")

        dict_config.assert_called_once()
        config = dict_config.call_args[0][0]
        assert config["root"]["level"] == "WARNING"
        assert config["handlers"]["console"]["stream"] == "ext://sys.stdout"

    def test_skips_when_handlers_exist(self, monkeypatch):
        monkeypatch.setattr(logging.getLogger(), "handlers", [logging.NullHandler()])

        with patch.object(logging_setup, "dictConfig") as dict_config:
            logging_setup.configure_logging()

        dict_config.assert_not_called()
