# ABOUTME: Batch orchestration for multi-location weather lookups.
# ABOUTME: Runs geocode -> forecast -> report concurrently per location and isolates failures per item.

import asyncio
import logging
from collections.abc import Sequence

from weather_mcp.deps import WeatherDeps
from weather_mcp.exceptions import RequestShapeError
from weather_mcp.models import ErrorReport, LocationReport
from weather_mcp.weather_service import build_report, geocode, get_forecast

logger = logging.getLogger(__name__)


def validate_locations(locations: object) -> list[str]:
    """Check that the request carries a non-empty list of location strings."""
    if not isinstance(locations, (list, tuple)) or not locations:
        raise RequestShapeError('The "locations" argument must be a non-empty array of strings.')
    if not all(isinstance(loc, str) for loc in locations):
        raise RequestShapeError('Every entry in "locations" must be a string.')
    return list(locations)


async def get_location_report(deps: WeatherDeps, query: str) -> LocationReport:
    """Build the report for one location; any failure becomes an ErrorReport."""
    try:
        location = await geocode(deps.http_client, query, deps.settings)
        forecast = await get_forecast(deps.http_client, location.latitude, location.longitude, deps.settings)
        return build_report(location.name, forecast, deps.settings)
    except Exception as e:
        logger.warning("Weather lookup failed for %r: %s", query, e)
        return ErrorReport(location=query, error=str(e))


async def get_weather_reports(deps: WeatherDeps, locations: Sequence[str]) -> list[LocationReport]:
    """Look up every location concurrently and return reports in input order.

    Raises:
        RequestShapeError: ``locations`` is empty or not a list of strings.
    """
    queries = validate_locations(locations)
    logger.info("Fetching weather for %d location(s)", len(queries))

    reports = await asyncio.gather(*(get_location_report(deps, q) for q in queries))

    failed = sum(1 for r in reports if isinstance(r, ErrorReport))
    logger.info("Weather batch complete: %d succeeded, %d failed", len(reports) - failed, failed)
    return list(reports)
