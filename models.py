from dataclasses import dataclass, field
from datetime import date
from types import MappingProxyType
from typing import List, Mapping

from pydantic import BaseModel, ConfigDict, ValidationError

from errors import MalformedResponseError


# --- weatherapi.com payload ---------------------------------------------------

class _Payload(BaseModel):
    model_config = ConfigDict(frozen=True, extra="ignore")


class ConditionPayload(_Payload):
    text: str


class HourPayload(_Payload):
    condition: ConditionPayload
    temp_c: float


class ForecastDayPayload(_Payload):
    date: str
    hour: List[HourPayload]


class Forecast(_Payload):
    forecastday: List[ForecastDayPayload]


class ForecastResponse(_Payload):
    forecast: Forecast


def parse_forecast_response(data) -> ForecastResponse:
    try:
        return ForecastResponse.model_validate(data)
    except ValidationError as e:
        raise MalformedResponseError(f"Malformed API response: {e}") from e


# --- report side ---------------------------------------------------------------

@dataclass(frozen=True)
class HourlyCondition:
    text: str
    temp_c: float


@dataclass(frozen=True)
class ForecastDay:
    date: date
    hours: Mapping[str, HourlyCondition] = field(default_factory=lambda: MappingProxyType({}))
