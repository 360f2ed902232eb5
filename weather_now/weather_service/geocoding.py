"""Geocoding client resolving city names to coordinates."""

from weather_now.config import GEOCODING_LANGUAGE, GEOCODING_URL, HTTP_TIMEOUT_S
from weather_now.logging_config import logger
from weather_now.models.location import GeoLocation
from weather_now.weather_service.errors import DataShapeError, NotFoundError
from weather_now.weather_service.http import get_json


class GeocodingClient:
    """Resolve a free-text city name to its best geocoding match."""

    def __init__(self, url: str = GEOCODING_URL, timeout: float = HTTP_TIMEOUT_S):
        self.url = url
        self.timeout = timeout

    def resolve(self, city_name: str) -> GeoLocation:
        """Fetch the first geocoding result for a city.

        Args:
            city_name: Trimmed, non-empty city name.

        Returns:
            A GeoLocation for the best match.

        Raises:
            NotFoundError: If the API returns no results.
            NetworkError: If the request or response decoding fails.
            DataShapeError: If the first result lacks required fields.
        """
        payload = get_json(
            url=self.url,
            params={
                "name": city_name,
                "count": 1,
                "language": GEOCODING_LANGUAGE,
                "format": "json",
            },
            timeout=self.timeout,
            event_prefix="CITY_LOOKUP",
            log_context={"city": city_name},
            error_message="City lookup failed",
        )

        results = payload.get("results") if isinstance(payload, dict) else None
        if not results:
            logger.info("CITY_NOT_FOUND", city=city_name)
            raise NotFoundError(f"City not found: {city_name}")

        try:
            data = results[0]
            return GeoLocation(
                latitude=data["latitude"],
                longitude=data["longitude"],
                display_name=data["name"],
                country=data["country"],
            )
        except (TypeError, KeyError, ValueError) as exc:
            logger.error("CITY_LOOKUP_BAD_PAYLOAD", city=city_name, error=str(exc))
            raise DataShapeError("City lookup returned an incomplete result") from exc
