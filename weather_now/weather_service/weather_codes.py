"""Static weather code catalog."""

from types import MappingProxyType

from weather_now.models.weather import WeatherCodeEntry

UNKNOWN_ENTRY = WeatherCodeEntry(description="Unknown", icon="🌡️")

WEATHER_CODE_MAP = MappingProxyType(
    {
        code: WeatherCodeEntry(description=description, icon=icon)
        for code, (description, icon) in {
            0: ("Clear sky", "☀️"),
            1: ("Mainly clear", "🌤️"),
            2: ("Partly cloudy", "⛅"),
            3: ("Overcast", "☁️"),
            45: ("Foggy", "🌫️"),
            48: ("Depositing rime fog", "🌫️"),
            51: ("Light drizzle", "🌦️"),
            53: ("Moderate drizzle", "🌦️"),
            55: ("Dense drizzle", "🌧️"),
            61: ("Slight rain", "🌧️"),
            63: ("Moderate rain", "🌧️"),
            65: ("Heavy rain", "⛈️"),
            71: ("Slight snow fall", "🌨️"),
            73: ("Moderate snow fall", "❄️"),
            75: ("Heavy snow fall", "❄️"),
            95: ("Thunderstorm", "⛈️"),
        }.items()
    }
)


def describe(code: int) -> WeatherCodeEntry:
    """Return the description and icon for a weather code.

    Unknown codes map to ``UNKNOWN_ENTRY`` rather than raising.
    """
    return WEATHER_CODE_MAP.get(code, UNKNOWN_ENTRY)
