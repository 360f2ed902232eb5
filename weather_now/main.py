"""FastAPI application routes, middleware, and metrics."""

import time
import uuid

from fastapi import FastAPI, HTTPException, Request, Response
from fastapi.responses import JSONResponse
from prometheus_client import CONTENT_TYPE_LATEST, Counter, Histogram, generate_latest
from structlog.contextvars import bind_contextvars, clear_contextvars

from weather_now.health.health_check import forecast_api_status, geocoding_api_status
from weather_now.logging_config import logger
from weather_now.models.health import Dependencies, HealthResponse
from weather_now.models.weather import WeatherSnapshot
from weather_now.weather_service.errors import LookupFailure, NotFoundError
from weather_now.weather_service.weather import lookup_weather

app = FastAPI(title="Weather Now")

REQUEST_COUNT = Counter(
    "http_requests_total", "Total HTTP requests", ["method", "path", "status_code"]
)
REQUEST_LATENCY = Histogram(
    "http_request_duration_seconds", "HTTP request duration in seconds", ["path"]
)


@app.middleware("http")
async def request_logging(request: Request, call_next):
    """Log request details, attach a request ID, and record metrics.

    Args:
        request: Incoming HTTP request.
        call_next: FastAPI handler for the next middleware/app.

    Returns:
        The response produced by the downstream handler.
    """
    request_id = request.headers.get("x-request-id") or str(uuid.uuid4())
    bind_contextvars(request_id=request_id)
    start = time.perf_counter()
    response = None
    try:
        response = await call_next(request)
        response.headers["x-request-id"] = request_id
        return response
    finally:
        duration_s = time.perf_counter() - start
        status_code = getattr(response, "status_code", 500)
        logger.info(
            "HTTP_REQUEST",
            method=request.method,
            path=request.url.path,
            status_code=status_code,
            duration_ms=round(duration_s * 1000, 2),
        )
        REQUEST_COUNT.labels(
            method=request.method, path=request.url.path, status_code=status_code
        ).inc()
        REQUEST_LATENCY.labels(path=request.url.path).observe(duration_s)
        clear_contextvars()


@app.exception_handler(LookupFailure)
async def lookup_failure_handler(request: Request, exc: LookupFailure):
    """Convert lookup failures into a uniform JSON error.

    Unresolvable cities map to 404 and every other cause to 502. The detail
    message is the same for all causes.

    Args:
        request: Incoming HTTP request.
        exc: Raised lookup failure.

    Returns:
        A JSON response with the error detail.
    """
    status_code = 404 if isinstance(exc.cause, NotFoundError) else 502
    return JSONResponse(status_code=status_code, content={"detail": str(exc)})


@app.get("/")
async def root():
    """Return a basic liveness response."""
    return {"message": "Weather Now"}


@app.get("/weather")
def get_weather_for_city(city_name: str) -> WeatherSnapshot:
    """Fetch the current weather snapshot for the requested city.

    Args:
        city_name: City name string from the query parameter.

    Returns:
        A WeatherSnapshot for the best-matching city.
    """
    city = city_name.strip()
    if not city:
        raise HTTPException(status_code=400, detail="City name must not be blank")
    return lookup_weather(city)


@app.get("/health", response_model=HealthResponse)
async def health() -> HealthResponse:
    """Report API health and upstream availability.

    Returns:
        A HealthResponse containing dependency status.
    """
    return HealthResponse(
        status="ok",
        dependencies=Dependencies(
            geocoding_api=await geocoding_api_status(),
            forecast_api=await forecast_api_status(),
        ),
    )


@app.get("/metrics")
async def metrics():
    """Expose Prometheus metrics for scraping."""
    return Response(generate_latest(), media_type=CONTENT_TYPE_LATEST)
