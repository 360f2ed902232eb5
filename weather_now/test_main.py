from fastapi.testclient import TestClient

from weather_now.main import app
from weather_now.models.health import ServiceStatus
from weather_now.models.weather import WeatherSnapshot
from weather_now.weather_service.errors import (
    LookupFailure,
    NetworkError,
    NotFoundError,
)

FAILED_DETAIL = "Failed to fetch weather data. Please check the city name and try again."


def test_root():
    client = TestClient(app)
    response = client.get("/")
    assert response.status_code == 200
    assert response.json() == {"message": "Weather Now"}


def test_get_weather_success(monkeypatch):
    client = TestClient(app)
    snapshot = WeatherSnapshot(
        location="London, United Kingdom",
        temperature_celsius=12,
        description="Mainly clear",
        humidity_percent=81,
        wind_speed_kmh=5,
        visibility_km=30,
        icon="🌤️",
    )
    seen = []

    def fake_lookup_weather(city_name: str):
        seen.append(city_name)
        return snapshot

    monkeypatch.setattr("weather_now.main.lookup_weather", fake_lookup_weather)
    response = client.get("/weather", params={"city_name": "  London "})
    assert response.status_code == 200
    assert response.json() == snapshot.model_dump()
    assert seen == ["London"]


def test_get_weather_blank_city(monkeypatch):
    client = TestClient(app)

    def fake_lookup_weather(city_name: str):
        raise AssertionError("lookup should not run for a blank city")

    monkeypatch.setattr("weather_now.main.lookup_weather", fake_lookup_weather)
    response = client.get("/weather", params={"city_name": "   "})
    assert response.status_code == 400


def test_get_weather_city_not_found(monkeypatch):
    client = TestClient(app)

    def fake_lookup_weather(city_name: str):
        raise LookupFailure(FAILED_DETAIL, cause=NotFoundError("City not found"))

    monkeypatch.setattr("weather_now.main.lookup_weather", fake_lookup_weather)
    response = client.get("/weather", params={"city_name": "Nowhere"})
    assert response.status_code == 404
    assert response.json()["detail"] == FAILED_DETAIL


def test_get_weather_upstream_failure(monkeypatch):
    client = TestClient(app)

    def fake_lookup_weather(city_name: str):
        raise LookupFailure(FAILED_DETAIL, cause=NetworkError("Forecast lookup failed"))

    monkeypatch.setattr("weather_now.main.lookup_weather", fake_lookup_weather)
    response = client.get("/weather", params={"city_name": "London"})
    assert response.status_code == 502
    assert response.json()["detail"] == FAILED_DETAIL


def test_health(monkeypatch):
    client = TestClient(app)

    async def fake_geocoding_api_status():
        return ServiceStatus.available

    async def fake_forecast_api_status():
        return ServiceStatus.not_available

    monkeypatch.setattr(
        "weather_now.main.geocoding_api_status", fake_geocoding_api_status
    )
    monkeypatch.setattr("weather_now.main.forecast_api_status", fake_forecast_api_status)

    response = client.get("/health")
    assert response.status_code == 200
    assert response.json() == {
        "status": "ok",
        "dependencies": {
            "geocoding_api": "available",
            "forecast_api": "not_available",
        },
    }


def test_metrics():
    client = TestClient(app)
    response = client.get("/metrics")
    assert response.status_code == 200
    assert "http_requests_total" in response.text


def test_request_id_is_echoed():
    client = TestClient(app)
    response = client.get("/", headers={"x-request-id": "abc-123"})
    assert response.headers["x-request-id"] == "abc-123"


def test_get_weather_integration_with_mocked_upstream(upstream):
    client = TestClient(app)

    response = client.get("/weather", params={"city_name": "London"})
    assert response.status_code == 200
    assert response.json() == {
        "location": "London, United Kingdom",
        "temperature_celsius": 15,
        "description": "Partly cloudy",
        "humidity_percent": 70,
        "wind_speed_kmh": 12,
        "visibility_km": 24,
        "icon": "⛅",
    }


def test_get_weather_integration_not_found(upstream):
    client = TestClient(app)
    upstream.respond_geocoding({"results": []})

    response = client.get("/weather", params={"city_name": "Loooonnddonnn"})
    assert response.status_code == 404
    assert response.json() == {"detail": FAILED_DETAIL}
    assert len(upstream.calls) == 1
