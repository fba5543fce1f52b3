"""Tests for application settings."""

import pytest
from pydantic import ValidationError

from echeck_config import Settings, clear_settings_cache, get_settings


class TestSettings:
    """Test settings defaults and environment overrides."""

    def test_defaults(self):
        settings = Settings(_env_file=None)

        assert settings.debug is False
        assert settings.log_level == "WARNING"
        assert settings.effective_log_level == "WARNING"

    def test_environment_override(self, monkeypatch):
        monkeypatch.setenv("ECHECK_LOG_LEVEL", "info")

        settings = Settings(_env_file=None)

        assert settings.log_level == "INFO"

    def test_debug_forces_debug_level(self, monkeypatch):
        monkeypatch.setenv("ECHECK_DEBUG", "true")

        settings = Settings(_env_file=None)

        assert settings.effective_log_level == "DEBUG"

    def test_unknown_log_level_rejected(self, monkeypatch):
        monkeypatch.setenv("ECHECK_LOG_LEVEL", "chatty")

        with pytest.raises(ValidationError, match="Unknown log level"):
            Settings(_env_file=None)

    def test_env_file(self, tmp_path):
        env_file = tmp_path / ".env"
        env_file.write_text("ECHECK_LOG_LEVEL=error\n")

        settings = Settings(_env_file=env_file)

        assert settings.log_level == "ERROR"

    def test_get_settings_is_cached(self):
        first = get_settings()

        assert get_settings() is first

        clear_settings_cache()
        assert get_settings() is not first
