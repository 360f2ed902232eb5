"""Single-attempt upstream GET helper with consistent logging."""

import httpx

from weather_now.logging_config import logger
from weather_now.weather_service.errors import NetworkError


def get_json(
    *,
    url: str,
    params: dict,
    timeout: float,
    event_prefix: str,
    log_context: dict,
    error_message: str,
):
    """Execute one HTTP GET and decode the JSON body.

    Args:
        url: The URL to call.
        params: Query parameters to include in the request.
        timeout: Request timeout in seconds.
        event_prefix: Log event prefix for consistent names.
        log_context: Extra log fields for all events.
        error_message: Error message to wrap in NetworkError.

    Returns:
        The decoded JSON payload.

    Raises:
        NetworkError: When the request fails, returns a non-2xx status, or
            the body is not valid JSON.
    """
    try:
        response = httpx.get(url, params=params, timeout=timeout)
        logger.info(
            f"{event_prefix}_RESPONSE", **log_context, status=response.status_code
        )
        response.raise_for_status()
    except httpx.HTTPStatusError as exc:
        logger.error(
            f"{event_prefix}_BAD_STATUS",
            **log_context,
            status=exc.response.status_code,
        )
        raise NetworkError(error_message) from exc
    except httpx.RequestError as exc:
        logger.error(f"{event_prefix}_REQUEST_FAILED", **log_context, error=str(exc))
        raise NetworkError(error_message) from exc

    try:
        return response.json()
    except ValueError as exc:
        logger.error(f"{event_prefix}_INVALID_JSON", **log_context, error=str(exc))
        raise NetworkError(error_message) from exc
