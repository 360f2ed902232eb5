"""Weather code entries and the display snapshot."""

from pydantic import BaseModel, ConfigDict


class WeatherCodeEntry(BaseModel):
    """Human-readable description and icon for a weather code."""

    model_config = ConfigDict(frozen=True)

    description: str
    icon: str


class WeatherSnapshot(BaseModel):
    """Fully populated, display-ready weather for one search."""

    model_config = ConfigDict(frozen=True)

    location: str
    temperature_celsius: int
    description: str
    humidity_percent: int
    wind_speed_kmh: int
    visibility_km: int
    icon: str
