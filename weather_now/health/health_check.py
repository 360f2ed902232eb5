"""Health checks for the upstream geocoding and forecast APIs."""

import httpx

from weather_now.config import FORECAST_URL, GEOCODING_URL, HTTP_TIMEOUT_S
from weather_now.logging_config import logger
from weather_now.models.health import ServiceStatus


async def _probe(url: str, params: dict, expected_key: str) -> ServiceStatus:
    try:
        async with httpx.AsyncClient(timeout=HTTP_TIMEOUT_S) as client:
            response = await client.get(url, params=params)
            if response.status_code == 200 and expected_key in response.json():
                return ServiceStatus.available
    except (httpx.HTTPError, ValueError) as exc:
        logger.error("HEALTH_PROBE_FAILED", url=url, error=str(exc))
        return ServiceStatus.not_available
    logger.error("HEALTH_PROBE_UNEXPECTED", url=url, status=response.status_code)
    return ServiceStatus.not_available


async def geocoding_api_status() -> ServiceStatus:
    """Check the geocoding API with a known city.

    Returns:
        ServiceStatus.available when the API returns a results payload.
    """
    return await _probe(
        GEOCODING_URL, {"name": "London", "count": 1, "format": "json"}, "results"
    )


async def forecast_api_status() -> ServiceStatus:
    """Check the forecast API for availability.

    Returns:
        ServiceStatus.available when the API returns current conditions.
    """
    return await _probe(
        FORECAST_URL,
        {"latitude": 51.5, "longitude": 0.12, "current": "temperature_2m"},
        "current",
    )
