# ABOUTME: Pydantic BaseModels for geocoding results, Open-Meteo forecast data, and tool reports.
# ABOUTME: LocationReport is a tagged union of WeatherReport and ErrorReport, discriminated on status.

from datetime import date, datetime
from typing import Annotated, Literal

from pydantic import BaseModel, Field


class ResolvedLocation(BaseModel):
    """Best geocoding match for a location query."""

    name: str
    latitude: float
    longitude: float


class CurrentWeather(BaseModel):
    """Current conditions from the Open-Meteo forecast endpoint."""

    time: datetime | None = None
    temperature_2m: float | None = None
    weather_code: int | None = None


class HourlyWeather(BaseModel):
    """One hour of weather data from Open-Meteo hourly endpoint."""

    time: datetime
    temperature_2m: float | None = None
    weather_code: int | None = None


class DailyWeather(BaseModel):
    """One day of weather data from Open-Meteo daily endpoint."""

    date: date
    temperature_2m_max: float | None = None
    temperature_2m_min: float | None = None
    weather_code: int | None = None


class ForecastResponse(BaseModel):
    """Parsed response from the Open-Meteo forecast endpoint."""

    latitude: float
    longitude: float
    timezone: str
    current: CurrentWeather | None = None
    hourly: list[HourlyWeather] = []
    daily: list[DailyWeather] = []


class CurrentConditions(BaseModel):
    temperature: str
    condition: str


class HourlyForecast(BaseModel):
    time: str
    temperature: str
    condition: str


class DailyForecast(BaseModel):
    day: str
    high: str
    low: str
    condition: str


class WeatherReport(BaseModel):
    """Successful report for one location.

    The status discriminant is excluded from serialized output; consumers of the JSON
    payload tell the variants apart by the presence of ``error``.
    """

    status: Literal["ok"] = Field(default="ok", exclude=True)
    location: str
    current: CurrentConditions
    next_24_hours: list[HourlyForecast]
    weekly_forecast: list[DailyForecast]


class ErrorReport(BaseModel):
    """Failed report for one location, carrying the original query text."""

    status: Literal["error"] = Field(default="error", exclude=True)
    location: str
    error: str


LocationReport = Annotated[WeatherReport | ErrorReport, Field(discriminator="status")]
