import datetime

import pytest

from config import LOCATIONS, SKY_GLYPHS, load_settings
from errors import ConfigError


def test_load_settings_defaults(weather_env):
    settings = load_settings()
    assert settings.api_key == "test-key"
    assert settings.location == LOCATIONS["Plaz"]
    assert settings.timezone.zone == "Europe/Athens"
    assert isinstance(settings.timezone, datetime.tzinfo)
    assert settings.email_to == "you@example.com"


def test_load_settings_location_override(weather_env, monkeypatch):
    monkeypatch.setenv("WORKOUT_LOCATION", "Plaz")
    assert load_settings("South Park").location.lat == 38.234688


def test_missing_api_key(weather_env, monkeypatch):
    monkeypatch.delenv("WEATHERAPI_KEY")
    with pytest.raises(ConfigError, match="WEATHERAPI_KEY"):
        load_settings()


def test_missing_email_only_matters_when_sending(weather_env, monkeypatch):
    monkeypatch.delenv("EMAIL_PASSWORD")
    with pytest.raises(ConfigError, match="EMAIL_PASSWORD"):
        load_settings()
    assert load_settings(require_email=False).email_password == ""


def test_unknown_location(weather_env):
    with pytest.raises(ConfigError):
        load_settings("Atlantis")


def test_unknown_timezone(weather_env, monkeypatch):
    monkeypatch.setenv("REPORT_TIMEZONE", "Mars/Olympus")
    with pytest.raises(ConfigError):
        load_settings()


def test_lookup_tables_are_read_only():
    with pytest.raises(TypeError):
        SKY_GLYPHS["Sunny"] = "X"
    with pytest.raises(TypeError):
        LOCATIONS["Beach"] = LOCATIONS["Plaz"]
    assert SKY_GLYPHS["Sunny"] == "☀️"
    assert "Beach" not in LOCATIONS
