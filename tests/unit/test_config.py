"""Test settings and logging setup."""
import pytest
import structlog
from pydantic import ValidationError

from utilkit.config import Settings
from utilkit.utils.logging import configure_from_settings, get_logger, setup_logging


class TestSettings:
    def test_defaults(self, monkeypatch):
        monkeypatch.delenv("UTILKIT_LOG_LEVEL", raising=False)
        monkeypatch.delenv("UTILKIT_JSON_LOGS", raising=False)
        settings = Settings()
        assert settings.log_level == "INFO"
        assert settings.json_logs is True

    def test_env_prefix(self, monkeypatch):
        monkeypatch.setenv("UTILKIT_LOG_LEVEL", "DEBUG")
        monkeypatch.setenv("UTILKIT_JSON_LOGS", "false")
        settings = Settings()
        assert settings.log_level == "DEBUG"
        assert settings.json_logs is False


    def test_rejects_unknown_log_level(self):
        with pytest.raises(ValidationError):
            Settings(log_level="VERBOSE")


class TestLogging:
    def teardown_method(self):
        structlog.reset_defaults()

    def test_json_output(self, capsys):
        setup_logging("INFO")
        get_logger("test").info("hello_event", key="value")
        out = capsys.readouterr().out
        assert '"event": "hello_event"' in out
        assert '"key": "value"' in out

    def test_level_filtering(self, capsys):
        setup_logging("WARNING")
        get_logger("test").info("hidden_event")
        assert "hidden_event" not in capsys.readouterr().out

    def test_configure_from_settings(self, capsys):
        configure_from_settings(Settings(log_level="ERROR", json_logs=True))
        logger = get_logger("test")
        logger.warning("hidden_event")
        logger.error("shown_event")
        out = capsys.readouterr().out
        assert "hidden_event" not in out
        assert "shown_event" in out
