import datetime
import logging
from types import MappingProxyType
from urllib.parse import urlencode

import requests

from config import REQUEST_TIMEOUT
from errors import ForecastFetchError, MalformedResponseError
from models import (ForecastDay, ForecastResponse, HourlyCondition,
                    parse_forecast_response)

logger = logging.getLogger(__name__)

# Sunday-first, matching how the week is counted below
WEEKDAY_NAMES = ("Sunday", "Monday", "Tuesday", "Wednesday", "Thursday",
                 "Friday", "Saturday")
SATURDAY = 6


def sunday_weekday(day):
    """Weekday number with Sunday as 0 and Saturday as 6."""
    return day.isoweekday() % 7


def days_remaining_in_week(today):
    # today included, week ends on Saturday
    return SATURDAY - sunday_weekday(today) + 1


def build_forecast_url(base_url, api_key, lat, lon, days):
    params = {
        "key": api_key,
        "q": f"{lat:f},{lon:f}",
        "days": str(days),
        "aqi": "no",
    }
    return f"{base_url}?{urlencode(params)}"


def fetch_forecast(url, timeout=REQUEST_TIMEOUT):
    """GET the forecast and return the decoded JSON body.

    Network errors and non-2xx answers raise ForecastFetchError, a body that
    is not JSON raises MalformedResponseError.
    """
    logger.info("📡 Requesting forecast from WeatherAPI...")
    try:
        with requests.get(url, timeout=timeout) as response:
            response.raise_for_status()
            if not 200 <= response.status_code < 300:
                raise ForecastFetchError(f"Non-OK HTTP status: {response.status_code}")
            try:
                data = response.json()
            except ValueError as e:
                raise MalformedResponseError(f"Error decoding JSON response: {e}") from e
    except requests.exceptions.HTTPError as e:
        raise ForecastFetchError(f"Non-OK HTTP status: {e}") from e
    except requests.exceptions.RequestException as e:
        raise ForecastFetchError(f"Error making GET request: {e}") from e
    logger.info("✅ Forecast received.")
    return data


def _parse_api_date(value):
    try:
        return datetime.date.fromisoformat(value)
    except ValueError as e:
        raise MalformedResponseError(f"Malformed API response: bad date {value!r}") from e


def extract_workout_forecast(response, today, workout_hours):
    """Pick the workout hours of every day from today through Saturday.

    ``response`` is a decoded ForecastResponse (or the raw decoded JSON). Day
    ``i`` of the week is read from ``forecastday[i - today's weekday]``: the
    API returns days in order starting with today.
    """
    if not isinstance(response, ForecastResponse):
        response = parse_forecast_response(response)

    forecast_days = response.forecast.forecastday
    current = sunday_weekday(today)
    needed = days_remaining_in_week(today)
    if len(forecast_days) < needed:
        raise MalformedResponseError(
            f"Malformed API response: expected {needed} forecast days, got {len(forecast_days)}")

    forecasts = {}
    for i in range(current, SATURDAY + 1):
        day = forecast_days[i - current]
        hours = {}
        for workout_hour in workout_hours:
            if workout_hour >= len(day.hour):
                raise MalformedResponseError(
                    f"Malformed API response: no hour {workout_hour} for {day.date}")
            entry = day.hour[workout_hour]
            hours[f"{workout_hour}:00"] = HourlyCondition(text=entry.condition.text,
                                                          temp_c=entry.temp_c)

        label = f"{WEEKDAY_NAMES[i % 7]} ({day.date})"
        forecasts[label] = ForecastDay(date=_parse_api_date(day.date), hours=MappingProxyType(hours))

    return forecasts
