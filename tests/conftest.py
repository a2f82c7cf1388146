# ABOUTME: Shared test fixtures for the weather tool test suite.
# ABOUTME: Provides canned Nominatim and Open-Meteo payloads and an httpx MockTransport factory.

from datetime import date, datetime, timedelta

import httpx
import pytest

ORLANDO = {"display_name": "Orlando, Orange County, Florida, United States", "lat": "28.5421109", "lon": "-81.3790304"}
LONDON = {"display_name": "London, Greater London, England, United Kingdom", "lat": "51.5074456", "lon": "-0.1277653"}


def build_forecast_payload(hours: int = 168, days: int = 7, current_code: int = 0) -> dict:
    """Build an Open-Meteo style forecast body with column-oriented hourly and daily arrays."""
    start = datetime(2025, 1, 15, 0, 0)
    first_day = date(2025, 1, 15)
    return {
        "latitude": 28.54,
        "longitude": -81.38,
        "timezone": "America/New_York",
        "current": {"time": "2025-01-15T13:45", "temperature_2m": 72.5, "weather_code": current_code},
        "hourly": {
            "time": [(start + timedelta(hours=i)).strftime("%Y-%m-%dT%H:%M") for i in range(hours)],
            "temperature_2m": [60.0 + i % 24 for i in range(hours)],
            "weather_code": [(0, 1, 2, 3)[i % 4] for i in range(hours)],
        },
        "daily": {
            "time": [(first_day + timedelta(days=i)).isoformat() for i in range(days)],
            "temperature_2m_max": [80.0 + i for i in range(days)],
            "temperature_2m_min": [60.5 + i for i in range(days)],
            "weather_code": [(0, 61, 95, 3)[i % 4] for i in range(days)],
        },
    }


@pytest.fixture
def places() -> dict:
    return {"Orlando": ORLANDO, "London": LONDON}


@pytest.fixture
def forecast_payload() -> dict:
    return build_forecast_payload()


@pytest.fixture
def make_forecast():
    return build_forecast_payload


@pytest.fixture
def make_transport():
    """Factory for an httpx.MockTransport that routes by host.

    ``places`` maps a query string to its Nominatim match (missing queries return no results).
    ``forecast_status`` maps a latitude string to a status code for the forecast endpoint.
    ``unreachable`` lists latitude strings whose forecast request fails to connect.
    Every request seen is appended to ``transport.requests``.
    """

    def factory(
        places: dict | None = None,
        forecast_status: dict | None = None,
        geocode_status: int = 200,
        unreachable: tuple = (),
    ):
        places = places or {}
        forecast_status = forecast_status or {}
        requests: list[httpx.Request] = []

        def handler(request: httpx.Request) -> httpx.Response:
            requests.append(request)
            if request.url.host == "nominatim.openstreetmap.org":
                if geocode_status != 200:
                    return httpx.Response(geocode_status)
                match = places.get(request.url.params["q"])
                return httpx.Response(200, json=[match] if match else [])
            if request.url.host == "api.open-meteo.com":
                latitude = request.url.params["latitude"]
                if latitude in unreachable:
                    raise httpx.ConnectError("connection refused", request=request)
                status = forecast_status.get(latitude, 200)
                if status != 200:
                    return httpx.Response(status)
                return httpx.Response(200, json=build_forecast_payload())
            return httpx.Response(404)

        transport = httpx.MockTransport(handler)
        transport.requests = requests
        return transport

    return factory
