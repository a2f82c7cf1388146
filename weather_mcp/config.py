# ABOUTME: Environment-driven configuration for the weather tool.
# ABOUTME: Loads .env values and defines ForecastSettings, the explicit request configuration for upstream calls.

import os

from dotenv import load_dotenv
from pydantic import BaseModel

load_dotenv()

GEOCODING_URL = os.environ.get("GEOCODING_URL", "https://nominatim.openstreetmap.org/search")
FORECAST_URL = os.environ.get("FORECAST_URL", "https://api.open-meteo.com/v1/forecast")

# Nominatim rejects clients that do not identify themselves
USER_AGENT = os.environ.get("WEATHER_USER_AGENT", "weather-mcp-server/1.0")

LOG_LEVEL = os.environ.get("LOG_LEVEL", "INFO").upper()


def _read_timeout(raw: str | None) -> float | None:
    """Parse WEATHER_HTTP_TIMEOUT; unset or empty means wait indefinitely."""
    if raw is None or not raw.strip():
        return None
    try:
        return float(raw)
    except ValueError as e:
        raise ValueError(f"WEATHER_HTTP_TIMEOUT must be a number of seconds, got {raw!r}") from e


HTTP_TIMEOUT = _read_timeout(os.environ.get("WEATHER_HTTP_TIMEOUT"))

_TEMPERATURE_SYMBOLS = {"fahrenheit": "°F", "celsius": "°C"}


class ForecastSettings(BaseModel):
    """Upstream endpoints, requested variables, units, timezone mode, and horizon.

    Passed into the geocoder, fetcher, and normalizer so units or horizon can change
    without touching the orchestration code.
    """

    geocoding_url: str = GEOCODING_URL
    forecast_url: str = FORECAST_URL
    user_agent: str = USER_AGENT

    current_variables: tuple[str, ...] = ("temperature_2m", "weather_code")
    hourly_variables: tuple[str, ...] = ("temperature_2m", "weather_code")
    daily_variables: tuple[str, ...] = ("temperature_2m_max", "temperature_2m_min", "weather_code")

    temperature_unit: str = "fahrenheit"
    # Requested for parity with the upstream unit system; wind is never reported.
    wind_speed_unit: str = "mph"
    timezone: str = "auto"
    forecast_days: int = 7
    hourly_hours: int = 24

    @property
    def temperature_symbol(self) -> str:
        return _TEMPERATURE_SYMBOLS.get(self.temperature_unit, self.temperature_unit)

    def forecast_params(self, latitude: float, longitude: float) -> dict:
        """Build Open-Meteo query parameters for a coordinate pair."""
        return {
            "latitude": latitude,
            "longitude": longitude,
            "current": ",".join(self.current_variables),
            "hourly": ",".join(self.hourly_variables),
            "daily": ",".join(self.daily_variables),
            "temperature_unit": self.temperature_unit,
            "wind_speed_unit": self.wind_speed_unit,
            "timezone": self.timezone,
            "forecast_days": self.forecast_days,
        }
