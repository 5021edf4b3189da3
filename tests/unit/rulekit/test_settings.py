"""Tests for environment-backed settings."""

from datetime import UTC, datetime

from rulekit.settings import Settings, get_settings
from rulekit.validation import render_message


class TestSettings:
    """Test suite for Settings and get_settings()."""

    def test_defaults(self, monkeypatch):
        monkeypatch.delenv("RULEKIT_TIME_FORMAT", raising=False)
        monkeypatch.delenv("RULEKIT_LOG_LEVEL", raising=False)
        settings = Settings()
        assert settings.time_format == "%Y-%m-%d %H:%M:%S %z %Z"
        assert settings.naive_time_format == "%Y-%m-%d %H:%M:%S"
        assert settings.log_level == "WARNING"

    def test_env_prefix(self, monkeypatch):
        monkeypatch.setenv("RULEKIT_LOG_LEVEL", "DEBUG")
        assert get_settings().log_level == "DEBUG"

    def test_cached(self):
        assert get_settings() is get_settings()

    def test_env_file(self, tmp_path, monkeypatch):
        monkeypatch.delenv("RULEKIT_TIME_FORMAT", raising=False)
        env_file = tmp_path / "rulekit.env"
        env_file.write_text("RULEKIT_TIME_FORMAT=%d/%m/%Y\n", encoding="utf-8")
        assert get_settings((str(env_file),)).time_format == "%d/%m/%Y"

    def test_time_format_drives_rendering(self, monkeypatch):
        monkeypatch.setenv("RULEKIT_TIME_FORMAT", "%Y/%m/%d")
        moment = datetime(2024, 2, 29, tzinfo=UTC)
        assert render_message("after {{.t}}", {"t": moment}) == "after 2024/02/29"
