"""Turn extracted workout-hour forecasts into the plain-text email body."""

import datetime
import re
from dataclasses import dataclass
from typing import Mapping, Tuple

from config import SKY_GLYPHS
from errors import MalformedDateError
from models import ForecastDay

ISO_DATE = re.compile(r"[0-9]{4}-[0-9]{2}-[0-9]{2}")


def label_date(label):
    """Return the date embedded as ``(YYYY-MM-DD)`` at the end of a day label."""
    start = label.rfind("(")
    end = label.rfind(")")
    if start == -1 or end <= start:
        raise MalformedDateError(f"Error parsing date: no date in {label!r}")
    raw = label[start + 1:end]
    if not ISO_DATE.fullmatch(raw):
        raise MalformedDateError(f"Error parsing date: {raw!r} is not YYYY-MM-DD")
    try:
        return datetime.date.fromisoformat(raw)
    except ValueError as e:
        raise MalformedDateError(f"Error parsing date: {e}") from e


def sort_day_labels(labels):
    return sorted(labels, key=label_date)


def glyph_for(text, glyphs=SKY_GLYPHS):
    return glyphs.get(text.strip(), "")


@dataclass(frozen=True)
class Report:
    days: Tuple[Tuple[str, ForecastDay], ...]

    def render(self, glyphs=SKY_GLYPHS):
        lines = []
        for label, day in self.days:
            lines.append(label)
            for hour in sorted(day.hours):
                condition = day.hours[hour]
                text = condition.text.strip()
                lines.append(f"  {hour}: {text} {glyph_for(text, glyphs)} ({condition.temp_c:.0f} °C)")
        return "".join(line + "\n" for line in lines)


def build_report(forecasts: Mapping[str, ForecastDay]) -> Report:
    return Report(days=tuple((label, forecasts[label]) for label in sort_day_labels(forecasts)))


def render_report(forecasts, glyphs=SKY_GLYPHS):
    return build_report(forecasts).render(glyphs)
