# ABOUTME: Dependency container for the weather pipeline using Pydantic BaseModel.
# ABOUTME: Holds the httpx.AsyncClient and ForecastSettings shared by every location in a batch.

import httpx
from pydantic import BaseModel, ConfigDict, Field

from weather_mcp.config import HTTP_TIMEOUT, ForecastSettings


class WeatherDeps(BaseModel):
    """Dependencies passed through the batch pipeline."""

    model_config = ConfigDict(arbitrary_types_allowed=True)

    http_client: httpx.AsyncClient
    settings: ForecastSettings = Field(default_factory=ForecastSettings)


def create_http_client(settings: ForecastSettings | None = None) -> httpx.AsyncClient:
    """Create an httpx client that identifies the application to upstream services.

    Failed requests are not retried; a failure is reported for the affected location only.
    """
    settings = settings or ForecastSettings()
    return httpx.AsyncClient(headers={"User-Agent": settings.user_agent}, timeout=HTTP_TIMEOUT)
