import datetime

import pytest


def _payload(start, days, text="Sunny", temp=21.4):
    forecastday = []
    for offset in range(days):
        day = start + datetime.timedelta(days=offset)
        forecastday.append({
            "date": day.isoformat(),
            "date_epoch": 0,
            "hour": [
                {"time": f"{day.isoformat()} {h:02d}:00", "temp_c": temp,
                 "condition": {"text": text, "code": 1000}}
                for h in range(24)
            ],
        })
    return {"location": {"name": "Patras"}, "forecast": {"forecastday": forecastday}}


@pytest.fixture
def make_payload():
    return _payload


@pytest.fixture
def weather_env(monkeypatch):
    monkeypatch.setenv("WEATHERAPI_KEY", "test-key")
    monkeypatch.setenv("EMAIL_FROM", "me@example.com")
    monkeypatch.setenv("EMAIL_TO", "you@example.com")
    monkeypatch.setenv("EMAIL_PASSWORD", "secret")
    monkeypatch.delenv("WORKOUT_LOCATION", raising=False)
    monkeypatch.delenv("REPORT_TIMEZONE", raising=False)
