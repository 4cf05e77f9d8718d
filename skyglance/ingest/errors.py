"""Typed failures raised by the weather gateway."""


class WeatherError(Exception):
    """Base class. ``str(error)`` is the message shown to the user."""

    default_message = "Unable to load weather"

    def __init__(self, message: str | None = None):
        super().__init__(message or self.default_message)


class ConfigError(WeatherError):
    """Request could not be built: bad URL or coordinates. Not retryable."""

    default_message = "Invalid URL"


class RemoteError(WeatherError):
    """Non-2xx response or unreachable server. Retryable by the user."""

    default_message = "Server error. Please try again."

    def __init__(self, message: str | None = None, status_code: int | None = None):
        super().__init__(message)
        self.status_code = status_code


class IncompleteDataError(WeatherError):
    default_message = "Not enough weather data available"


class DecodeError(WeatherError):
    default_message = "Unable to read weather data"


class Cancelled(WeatherError):
    """A request was superseded. Never shown to the user."""

    default_message = "Request was superseded"
