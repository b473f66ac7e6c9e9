import argparse
import datetime
import logging
import sys

from dotenv import load_dotenv

from config import FORECAST_URL, WORKOUT_HOURS, load_settings, setup_logging
from errors import WeatherReportError
from mailer import send_email
from report import render_report
from weather_logic import (build_forecast_url, days_remaining_in_week,
                           extract_workout_forecast, fetch_forecast)

logger = logging.getLogger(__name__)


def run(settings, today=None, dry_run=False):
    """Fetch, render and (unless dry_run) email one weekly workout report.

    Returns the rendered report text. Any failure raises WeatherReportError.
    """
    if today is None:
        today = datetime.datetime.now(settings.timezone).date()

    location = settings.location
    url = build_forecast_url(FORECAST_URL, settings.api_key, location.lat,
                             location.lon, days_remaining_in_week(today))
    data = fetch_forecast(url)

    forecasts = extract_workout_forecast(data, today, WORKOUT_HOURS)
    text = render_report(forecasts)
    print(text)

    if dry_run:
        logger.info("Dry run, email not sent.")
    else:
        send_email(settings.email_from, settings.email_to,
                   settings.email_password, text)
    return text


def send_weekly_weather_email():
    load_dotenv()
    settings = load_settings()
    return run(settings)


def parse_args(argv=None):
    parser = argparse.ArgumentParser(
        description="Email the workout-hour forecast for the rest of the week.")
    parser.add_argument("--location", help="location name (default: WORKOUT_LOCATION or Plaz)")
    parser.add_argument("--dry-run", action="store_true",
                        help="print the report without sending it")
    return parser.parse_args(argv)


def main(argv=None):
    args = parse_args(argv)
    load_dotenv()
    setup_logging()
    try:
        settings = load_settings(args.location, require_email=not args.dry_run)
        run(settings, dry_run=args.dry_run)
    except WeatherReportError as e:
        logger.error("❌ %s", e)
        sys.exit(1)


if __name__ == "__main__":
    main()
