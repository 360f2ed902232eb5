"""Environment-driven settings for upstream APIs and logging."""

import os

GEOCODING_URL = os.getenv(
    "GEOCODING_URL", "https://geocoding-api.open-meteo.com/v1/search"
)
FORECAST_URL = os.getenv("FORECAST_URL", "https://api.open-meteo.com/v1/forecast")
HTTP_TIMEOUT_S = float(os.getenv("HTTP_TIMEOUT_S", "5"))

# Geocoding results are always requested in English.
GEOCODING_LANGUAGE = "en"

LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()
LOG_FORMAT = os.getenv("LOG_FORMAT", "json").lower()
