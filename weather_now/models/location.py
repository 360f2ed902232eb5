"""Geographic location model for geocoding results."""

from pydantic import BaseModel, ConfigDict


class GeoLocation(BaseModel):
    """Best match returned by the geocoding API for a city name."""

    model_config = ConfigDict(frozen=True, allow_inf_nan=False)

    latitude: float
    longitude: float
    display_name: str
    country: str
