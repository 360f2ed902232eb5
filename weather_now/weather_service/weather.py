"""Weather lookup service: geocode, fetch the forecast, build a snapshot."""

from decimal import ROUND_HALF_UP, Decimal

from prometheus_client import Counter

from weather_now.logging_config import logger
from weather_now.models.forecast import RawForecast
from weather_now.models.location import GeoLocation
from weather_now.models.weather import WeatherSnapshot
from weather_now.weather_service.errors import (
    DataShapeError,
    LookupFailure,
    NetworkError,
    NotFoundError,
    WeatherLookupError,
)
from weather_now.weather_service.forecast import ForecastClient
from weather_now.weather_service.geocoding import GeocodingClient
from weather_now.weather_service.weather_codes import describe

LOOKUP_FAILED_MESSAGE = (
    "Failed to fetch weather data. Please check the city name and try again."
)

LOOKUP_OUTCOMES = Counter(
    "weather_lookups_total", "Weather lookups by outcome", ["outcome"]
)

_OUTCOME_BY_ERROR = {
    NotFoundError: "not_found",
    NetworkError: "network_error",
    DataShapeError: "data_shape_error",
}


def round_half_away(value: float) -> int:
    """Round to the nearest integer, with ties away from zero.

    ``Decimal(str(value))`` keeps the decimal digits the API sent, so 24.5
    rounds to 25 and -2.5 to -3.
    """
    return int(Decimal(str(value)).quantize(Decimal("1"), rounding=ROUND_HALF_UP))


def build_snapshot(location: GeoLocation, forecast: RawForecast) -> WeatherSnapshot:
    """Combine a geocoding match and raw readings into display units."""
    entry = describe(forecast.weather_code)
    return WeatherSnapshot(
        location=f"{location.display_name}, {location.country}",
        temperature_celsius=round_half_away(forecast.temperature_c),
        description=entry.description,
        humidity_percent=round_half_away(forecast.humidity_percent),
        wind_speed_kmh=round_half_away(forecast.wind_speed_kmh),
        visibility_km=round_half_away(forecast.visibility_meters / 1000),
        icon=entry.icon,
    )


class WeatherLookupService:
    """Resolve a city and return its current weather snapshot."""

    def __init__(
        self,
        geocoding: GeocodingClient | None = None,
        forecast: ForecastClient | None = None,
    ):
        self.geocoding = geocoding or GeocodingClient()
        self.forecast = forecast or ForecastClient()

    def lookup(self, city_name: str) -> WeatherSnapshot:
        """Return the current weather for a city.

        Args:
            city_name: Trimmed, non-empty city name.

        Returns:
            A WeatherSnapshot built from both upstream responses.

        Raises:
            LookupFailure: If geocoding or the forecast call fails. The
                originating error is available on ``cause``.
        """
        try:
            location = self.geocoding.resolve(city_name)
            forecast = self.forecast.fetch_current(
                location.latitude, location.longitude
            )
        except WeatherLookupError as exc:
            outcome = _OUTCOME_BY_ERROR.get(type(exc), "error")
            LOOKUP_OUTCOMES.labels(outcome=outcome).inc()
            logger.warning(
                "LOOKUP_FAILED",
                city=city_name,
                cause=type(exc).__name__,
                error=str(exc),
            )
            raise LookupFailure(LOOKUP_FAILED_MESSAGE, cause=exc) from exc

        snapshot = build_snapshot(location, forecast)
        LOOKUP_OUTCOMES.labels(outcome="success").inc()
        logger.info(
            "LOOKUP_SUCCEEDED",
            city=city_name,
            location=snapshot.location,
            weather_code=forecast.weather_code,
        )
        return snapshot


def lookup_weather(city_name: str) -> WeatherSnapshot:
    """Look up a city with clients built from the environment settings.

    Args:
        city_name: Trimmed, non-empty city name.

    Returns:
        A WeatherSnapshot for the city.
    """
    return WeatherLookupService().lookup(city_name)
