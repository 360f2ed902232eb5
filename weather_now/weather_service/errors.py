"""Exceptions raised by the weather lookup pipeline."""


class WeatherLookupError(Exception):
    """Base exception for weather lookup failures."""
    pass


class NotFoundError(WeatherLookupError):
    """Raised when a city lookup returns no results."""
    pass


class NetworkError(WeatherLookupError):
    """Raised when an upstream call fails at the transport level."""
    pass


class DataShapeError(WeatherLookupError):
    """Raised when an upstream payload is missing expected fields."""
    pass


class LookupFailure(WeatherLookupError):
    """Single failure surfaced to callers of the lookup service.

    The originating error is kept on ``cause`` for logging and diagnostics.
    """

    def __init__(self, message: str, cause: Exception | None = None):
        super().__init__(message)
        self.cause = cause
