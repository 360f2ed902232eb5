"""Raw current-conditions model read from the forecast API."""

from pydantic import BaseModel, ConfigDict


class RawForecast(BaseModel):
    """Unrounded readings as reported by the forecast API."""

    model_config = ConfigDict(frozen=True, allow_inf_nan=False)

    temperature_c: float
    humidity_percent: float
    wind_speed_kmh: float
    weather_code: int
    visibility_meters: float
