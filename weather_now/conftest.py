import httpx
import pytest

from weather_now.config import FORECAST_URL, GEOCODING_URL

LONDON_GEOCODING = {
    "results": [
        {
            "name": "London",
            "country": "United Kingdom",
            "latitude": 51.51,
            "longitude": -0.13,
        }
    ]
}

LONDON_FORECAST = {
    "current": {
        "temperature_2m": 15.4,
        "relative_humidity_2m": 70,
        "wind_speed_10m": 11.6,
        "weather_code": 2,
    },
    "hourly": {"visibility": [24140, 24000, 23800]},
}


class FakeResponse:
    def __init__(self, json_data=None, status_code=200, url="https://example.test"):
        self._json_data = json_data
        self.status_code = status_code
        self.url = url

    def json(self):
        if isinstance(self._json_data, Exception):
            raise self._json_data
        return self._json_data

    def raise_for_status(self):
        if self.status_code >= 400:
            raise httpx.HTTPStatusError(
                f"HTTP {self.status_code}",
                request=httpx.Request("GET", self.url),
                response=self,
            )


class FakeUpstream:
    """Stands in for both Open-Meteo endpoints and records every call."""

    def __init__(self):
        self.geocoding = FakeResponse(LONDON_GEOCODING, url=GEOCODING_URL)
        self.forecast = FakeResponse(LONDON_FORECAST, url=FORECAST_URL)
        self.calls = []

    def get(self, url, params=None, timeout=None):
        self.calls.append((url, params))
        if url == GEOCODING_URL:
            response = self.geocoding
        elif url == FORECAST_URL:
            response = self.forecast
        else:
            raise AssertionError(f"Unexpected URL: {url}")
        if isinstance(response, Exception):
            raise response
        return response

    def respond_geocoding(self, json_data, status_code=200):
        self.geocoding = FakeResponse(json_data, status_code, url=GEOCODING_URL)

    def respond_forecast(self, json_data, status_code=200):
        self.forecast = FakeResponse(json_data, status_code, url=FORECAST_URL)

    def urls(self):
        return [url for url, _ in self.calls]


@pytest.fixture
def upstream(monkeypatch):
    fake = FakeUpstream()
    monkeypatch.setattr("weather_now.weather_service.http.httpx.get", fake.get)
    return fake
