import logging

from dotenv import load_dotenv
from flask import Flask

from config import setup_logging
from errors import WeatherReportError
from weather_report import send_weekly_weather_email

logger = logging.getLogger(__name__)

app = Flask(__name__)


@app.route("/")
def home():
    return "Workout Weather Report is running!"


@app.route("/run")
def run_script():
    try:
        send_weekly_weather_email()
    except WeatherReportError as e:
        logger.error("❌ %s", e)
        return f"❌ Weather report failed: {e}", 500
    return "✅ Weather report built and email sent."


if __name__ == "__main__":
    load_dotenv()
    setup_logging()
    app.run(host="0.0.0.0", port=3000)
