"""Tests for settings loading."""

import pytest

from today_i_ran.shared import config
from today_i_ran.shared.config import Settings, get_settings, reset_settings
from today_i_ran.shared.models import UnitSystem


@pytest.fixture(autouse=True)
def clean_environment(monkeypatch, tmp_path):
    """Isolate settings from the real environment and .env files."""
    for name in ("UNIT_SYSTEM", "VERBOSE", "LOG_LEVEL"):
        monkeypatch.delenv(f"TODAY_I_RAN_{name}", raising=False)
    monkeypatch.chdir(tmp_path)
    reset_settings()
    yield
    reset_settings()


def test_defaults():
    """Test default settings."""
    settings = Settings()

    assert settings.unit_system == UnitSystem.METRIC
    assert settings.verbose is False
    assert settings.log_level == "WARNING"


def test_environment_overrides(monkeypatch):
    """Test that prefixed environment variables are picked up."""
    monkeypatch.setenv("TODAY_I_RAN_UNIT_SYSTEM", "imperial")
    monkeypatch.setenv("TODAY_I_RAN_VERBOSE", "1")
    monkeypatch.setenv("TODAY_I_RAN_LOG_LEVEL", "debug")

    settings = Settings()

    assert settings.unit_system == UnitSystem.IMPERIAL
    assert settings.verbose is True
    assert settings.log_level == "DEBUG"


def test_env_file(tmp_path):
    """Test loading settings from a .env file in the working directory."""
    (tmp_path / ".env").write_text("TODAY_I_RAN_UNIT_SYSTEM=imperial\nOTHER_KEY=ignored\n")

    assert Settings().unit_system == UnitSystem.IMPERIAL


def test_get_settings_is_cached():
    """Test that settings are loaded once until reset."""
    first = get_settings()

    assert get_settings() is first
    reset_settings()
    assert config._settings is None
    assert get_settings() is not first
