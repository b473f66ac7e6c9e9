import datetime
import logging
import os
from dataclasses import dataclass
from types import MappingProxyType

import pytz

from errors import ConfigError


@dataclass(frozen=True)
class Location:
    name: str
    lat: float
    lon: float


# Places we run at
LOCATIONS = MappingProxyType({
    "Plaz": Location("Plaz", 38.280795, 21.746126),
    "South Park": Location("South Park", 38.234688, 21.724288),
})
DEFAULT_LOCATION = "Plaz"

# Best workout hours
WORKOUT_HOURS = (16, 17, 18, 19, 20)

SKY_GLYPHS = MappingProxyType({
    "Sunny": "☀️",
    "Clear": "🌙",
    "Cloudy": "☁️",
    "Partly Cloudy": "⛅",
    "Patchy rain nearby": "🌧️",
    "Light rain shower": "🌧️",
    "Light rain": "🌧️",
    "Moderate rain": "🌧️",
    "Light Drizzle": "🌧️",
    "Moderate or heavy rain shower": "🌧️",
    "Overcast": "☁️",
})

FORECAST_URL = "http://api.weatherapi.com/v1/forecast.json"
REQUEST_TIMEOUT = 15

SMTP_HOST = "smtp.gmail.com"
SMTP_PORT = 587
EMAIL_SUBJECT = "Weather Report"

DEFAULT_TIMEZONE = "Europe/Athens"


@dataclass(frozen=True)
class Settings:
    api_key: str
    location: Location
    timezone: datetime.tzinfo
    email_from: str = ""
    email_to: str = ""
    email_password: str = ""


def _require(name):
    value = os.getenv(name, "").strip()
    if not value:
        raise ConfigError(f"{name} env variable not set")
    return value


def load_settings(location_name=None, require_email=True):
    """Read run settings from the environment.

    ``location_name`` overrides ``WORKOUT_LOCATION``. Email credentials are
    only mandatory when the report is actually going to be sent.
    """
    api_key = _require("WEATHERAPI_KEY")

    name = location_name or os.getenv("WORKOUT_LOCATION", "").strip() or DEFAULT_LOCATION
    if name not in LOCATIONS:
        known = ", ".join(sorted(LOCATIONS))
        raise ConfigError(f"Unknown location '{name}' (known: {known})")

    tz_name = os.getenv("REPORT_TIMEZONE", "").strip() or DEFAULT_TIMEZONE
    try:
        tz = pytz.timezone(tz_name)
    except pytz.UnknownTimeZoneError:
        raise ConfigError(f"Unknown timezone '{tz_name}'")

    if require_email:
        email_from = _require("EMAIL_FROM")
        email_to = _require("EMAIL_TO")
        email_password = _require("EMAIL_PASSWORD")
    else:
        email_from = os.getenv("EMAIL_FROM", "")
        email_to = os.getenv("EMAIL_TO", "")
        email_password = os.getenv("EMAIL_PASSWORD", "")

    return Settings(
        api_key=api_key,
        location=LOCATIONS[name],
        timezone=tz,
        email_from=email_from,
        email_to=email_to,
        email_password=email_password,
    )


def setup_logging(level=None):
    level = (level or os.getenv("LOG_LEVEL", "INFO")).upper()
    logging.basicConfig(
        level=getattr(logging, level, logging.INFO),
        format="%(asctime)s | %(levelname)-8s | %(name)s | %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )
    # requests/urllib3 are chatty at DEBUG
    logging.getLogger("urllib3").setLevel(logging.WARNING)
