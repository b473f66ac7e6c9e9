class WeatherReportError(Exception):
    """Base class for every failure that should stop a report run."""


class ConfigError(WeatherReportError):
    pass


class ForecastFetchError(WeatherReportError):
    pass


class MalformedResponseError(WeatherReportError):
    """The weather API answered, but not with the shape we expect."""


class MalformedDateError(WeatherReportError):
    pass


class EmailSendError(WeatherReportError):
    pass
