"""
Tests for environment-based settings and logging setup.
"""

import pytest

from gbmvar.config import Settings, get_settings
from gbmvar.logging_config import build_logging_config

SETTING_NAMES = ["GBMVAR_LOG_LEVEL", "GBMVAR_LOG_FILE", "GBMVAR_SEED", "GBMVAR_MAX_PLOTTED_PATHS"]


@pytest.fixture
def clean_env(monkeypatch):
    """Unset all settings variables and restore them after the test."""
    for name in SETTING_NAMES:
        # setenv first so monkeypatch also removes values written by load_dotenv
        monkeypatch.setenv(name, "")
        monkeypatch.delenv(name)
    return monkeypatch


class TestSettings:
    """Test suite for get_settings."""

    def test_defaults(self, clean_env, tmp_path):
        """Test defaults when nothing is configured."""
        settings = get_settings(env_file=str(tmp_path / "missing.env"))

        assert settings == Settings()
        assert settings.log_level == "INFO"
        assert settings.seed is None
        assert settings.max_plotted_paths == 100

    def test_environment_variables(self, clean_env, tmp_path):
        """Test reading settings from the environment."""
        clean_env.setenv("GBMVAR_LOG_LEVEL", "DEBUG")
        clean_env.setenv("GBMVAR_SEED", "42")
        clean_env.setenv("GBMVAR_MAX_PLOTTED_PATHS", "25")
        clean_env.setenv("GBMVAR_LOG_FILE", str(tmp_path / "gbmvar.log"))

        settings = get_settings(env_file=str(tmp_path / "missing.env"))

        assert settings.log_level == "DEBUG"
        assert settings.seed == 42
        assert settings.max_plotted_paths == 25
        assert settings.log_file.endswith("gbmvar.log")

    def test_env_file(self, clean_env, tmp_path):
        """Test loading settings from a .env file."""
        env_file = tmp_path / ".env"
        env_file.write_text("GBMVAR_SEED=7\nGBMVAR_LOG_LEVEL=WARNING\n")

        settings = get_settings(env_file=str(env_file))

        assert settings.seed == 7
        assert settings.log_level == "WARNING"

    def test_environment_overrides_env_file(self, clean_env, tmp_path):
        """Test that existing variables win over the file."""
        env_file = tmp_path / ".env"
        env_file.write_text("GBMVAR_SEED=7\n")
        clean_env.setenv("GBMVAR_SEED", "11")

        assert get_settings(env_file=str(env_file)).seed == 11

    def test_invalid_integer(self, clean_env, tmp_path):
        """Test that a malformed integer raises."""
        clean_env.setenv("GBMVAR_SEED", "abc")

        with pytest.raises(ValueError, match="GBMVAR_SEED must be an integer"):
            get_settings(env_file=str(tmp_path / "missing.env"))


class TestLoggingConfig:
    """Test suite for the logging configuration."""

    def test_console_only(self):
        """Test the configuration without a log file."""
        config = build_logging_config("warning")

        assert set(config["handlers"]) == {"console"}
        assert config["handlers"]["console"]["level"] == "WARNING"
        assert config["loggers"]["gbmvar"]["level"] == "WARNING"

    def test_with_log_file(self, tmp_path):
        """Test that a log file adds a rotating DEBUG handler."""
        config = build_logging_config("INFO", str(tmp_path / "sim.log"))

        assert config["handlers"]["file"]["class"] == "logging.handlers.RotatingFileHandler"
        assert config["loggers"]["gbmvar"]["handlers"] == ["console", "file"]
        assert config["loggers"]["gbmvar"]["level"] == "DEBUG"
