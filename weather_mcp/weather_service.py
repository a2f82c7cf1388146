# ABOUTME: Service layer for Nominatim geocoding, Open-Meteo forecasts, and report formatting.
# ABOUTME: Resolves a place name, fetches its forecast, and normalizes it into a WeatherReport.

import logging
from datetime import date, datetime

import httpx

from weather_mcp.config import ForecastSettings
from weather_mcp.exceptions import LocationNotFound, UpstreamUnavailable
from weather_mcp.models import (
    CurrentConditions,
    CurrentWeather,
    DailyForecast,
    DailyWeather,
    ForecastResponse,
    HourlyForecast,
    HourlyWeather,
    ResolvedLocation,
    WeatherReport,
)
from weather_mcp.weather_codes import describe_weather

logger = logging.getLogger(__name__)

# Fixed en-US labels so output does not depend on the process locale
_WEEKDAYS = ("Monday", "Tuesday", "Wednesday", "Thursday", "Friday", "Saturday", "Sunday")
_MONTHS = ("Jan", "Feb", "Mar", "Apr", "May", "Jun", "Jul", "Aug", "Sep", "Oct", "Nov", "Dec")


async def geocode(client: httpx.AsyncClient, query: str, settings: ForecastSettings) -> ResolvedLocation:
    """Resolve a place name to its best Nominatim match.

    Raises:
        LocationNotFound: The geocoder returned no matches.
        UpstreamUnavailable: The request failed or returned a non-success status.
    """
    try:
        resp = await client.get(
            settings.geocoding_url,
            params={"q": query, "format": "json", "limit": 1},
            headers={"User-Agent": settings.user_agent},
        )
        resp.raise_for_status()
    except httpx.HTTPStatusError as e:
        raise UpstreamUnavailable(f'Geocoding failed for "{query}": {e.response.reason_phrase}') from e
    except httpx.HTTPError as e:
        raise UpstreamUnavailable(f'Geocoding failed for "{query}": {e}') from e

    results = resp.json()
    if not results:
        raise LocationNotFound(f'Location not found: "{query}"')

    r = results[0]
    return ResolvedLocation(name=r["display_name"], latitude=r["lat"], longitude=r["lon"])


async def get_forecast(
    client: httpx.AsyncClient,
    latitude: float,
    longitude: float,
    settings: ForecastSettings,
) -> ForecastResponse:
    """Fetch current, hourly, and daily forecast data from Open-Meteo.

    Raises:
        UpstreamUnavailable: The request failed or returned a non-success status.
    """
    try:
        resp = await client.get(settings.forecast_url, params=settings.forecast_params(latitude, longitude))
        resp.raise_for_status()
    except httpx.HTTPStatusError as e:
        raise UpstreamUnavailable(f"Weather fetch failed: {e.response.reason_phrase}") from e
    except httpx.HTTPError as e:
        raise UpstreamUnavailable(f"Weather fetch failed: {e}") from e

    data = resp.json()

    return ForecastResponse(
        latitude=data["latitude"],
        longitude=data["longitude"],
        timezone=data.get("timezone", settings.timezone),
        current=parse_current_data(data.get("current")),
        hourly=parse_hourly_data(data.get("hourly", {})),
        daily=parse_daily_data(data.get("daily", {})),
    )


def parse_current_data(raw: dict | None) -> CurrentWeather | None:
    if not raw:
        return None
    return CurrentWeather(
        time=raw.get("time"),
        temperature_2m=raw.get("temperature_2m"),
        weather_code=raw.get("weather_code"),
    )


def parse_hourly_data(raw: dict) -> list[HourlyWeather]:
    """Parse Open-Meteo column-oriented hourly data into row-oriented HourlyWeather objects."""
    times = raw.get("time", [])
    if not times:
        return []

    result = []
    for i, t in enumerate(times):
        result.append(
            HourlyWeather(
                time=datetime.fromisoformat(t),
                temperature_2m=_get_at(raw, "temperature_2m", i),
                weather_code=_get_at(raw, "weather_code", i),
            )
        )
    return result


def parse_daily_data(raw: dict) -> list[DailyWeather]:
    """Parse Open-Meteo column-oriented daily data into row-oriented DailyWeather objects."""
    dates = raw.get("time", [])
    if not dates:
        return []

    result = []
    for i, d in enumerate(dates):
        result.append(
            DailyWeather(
                date=date.fromisoformat(d),
                temperature_2m_max=_get_at(raw, "temperature_2m_max", i),
                temperature_2m_min=_get_at(raw, "temperature_2m_min", i),
                weather_code=_get_at(raw, "weather_code", i),
            )
        )
    return result


def _get_at(data: dict, key: str, index: int):
    """Safely get value at index from a column array, returning None if missing."""
    col = data.get(key)
    if col is None or index >= len(col):
        return None
    return col[index]


def format_temperature(value: float | None, symbol: str) -> str:
    """Render a temperature with its unit suffix, e.g. 72.5 -> '72.5°F', 72.0 -> '72°F'."""
    if value is None:
        return "N/A"
    if value == 0:
        # -0.0 renders as 0
        value = 0.0
    return f"{value:.15g}{symbol}"


def format_hour(moment: datetime) -> str:
    """Render a local time as a 12-hour clock label, e.g. '1:00 PM'."""
    hour = moment.hour % 12 or 12
    suffix = "AM" if moment.hour < 12 else "PM"
    return f"{hour}:{moment.minute:02d} {suffix}"


def format_day(day: date) -> str:
    """Render a calendar date as 'Wednesday, Jan 15'.

    Open-Meteo daily dates carry no time of day; handling them as plain dates (local noon)
    keeps the label from shifting across timezone boundaries.
    """
    return f"{_WEEKDAYS[day.weekday()]}, {_MONTHS[day.month - 1]} {day.day}"


def build_report(location_name: str, forecast: ForecastResponse, settings: ForecastSettings) -> WeatherReport:
    """Normalize a parsed forecast into the current / next 24 hours / weekly report shape."""
    symbol = settings.temperature_symbol
    current = forecast.current or CurrentWeather()

    next_hours = [
        HourlyForecast(
            time=format_hour(h.time),
            temperature=format_temperature(h.temperature_2m, symbol),
            condition=describe_weather(h.weather_code),
        )
        for h in forecast.hourly[: settings.hourly_hours]
    ]

    # Capped at the requested horizon, never padded
    days = [
        DailyForecast(
            day=format_day(d.date),
            high=format_temperature(d.temperature_2m_max, symbol),
            low=format_temperature(d.temperature_2m_min, symbol),
            condition=describe_weather(d.weather_code),
        )
        for d in forecast.daily[: settings.forecast_days]
    ]

    return WeatherReport(
        location=location_name,
        current=CurrentConditions(
            temperature=format_temperature(current.temperature_2m, symbol),
            condition=describe_weather(current.weather_code),
        ),
        next_24_hours=next_hours,
        weekly_forecast=days,
    )
