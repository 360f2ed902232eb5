"""Forecast client for current conditions and nearest visibility."""

from weather_now.config import FORECAST_URL, HTTP_TIMEOUT_S
from weather_now.logging_config import logger
from weather_now.models.forecast import RawForecast
from weather_now.weather_service.errors import DataShapeError
from weather_now.weather_service.http import get_json

CURRENT_FIELDS = (
    "temperature_2m",
    "relative_humidity_2m",
    "wind_speed_10m",
    "weather_code",
)


class ForecastClient:
    """Fetch instantaneous readings for a pair of coordinates."""

    def __init__(self, url: str = FORECAST_URL, timeout: float = HTTP_TIMEOUT_S):
        self.url = url
        self.timeout = timeout

    def fetch_current(self, latitude: float, longitude: float) -> RawForecast:
        """Fetch current conditions and the first hourly visibility sample.

        Args:
            latitude: Location latitude in degrees.
            longitude: Location longitude in degrees.

        Returns:
            Unrounded readings for the location.

        Raises:
            NetworkError: If the request or response decoding fails.
            DataShapeError: If current readings or visibility are missing.
        """
        log_context = {"latitude": latitude, "longitude": longitude}
        payload = get_json(
            url=self.url,
            params={
                "latitude": latitude,
                "longitude": longitude,
                "current": ",".join(CURRENT_FIELDS),
                "hourly": "visibility",
                "timezone": "auto",
            },
            timeout=self.timeout,
            event_prefix="FORECAST",
            log_context=log_context,
            error_message="Forecast lookup failed",
        )

        try:
            current = payload["current"]
            missing = [field for field in CURRENT_FIELDS if current.get(field) is None]
            if missing:
                raise KeyError(", ".join(missing))
            visibility = payload["hourly"]["visibility"]
            if not visibility or visibility[0] is None:
                raise KeyError("visibility")
            return RawForecast(
                temperature_c=current["temperature_2m"],
                humidity_percent=current["relative_humidity_2m"],
                wind_speed_kmh=current["wind_speed_10m"],
                weather_code=current["weather_code"],
                visibility_meters=visibility[0],
            )
        except (TypeError, KeyError, ValueError, AttributeError) as exc:
            logger.error("FORECAST_BAD_PAYLOAD", **log_context, error=str(exc))
            raise DataShapeError("Forecast response is missing fields") from exc
