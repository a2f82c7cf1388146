# ABOUTME: MCP server entry point exposing the get_weather tool over stdio.
# ABOUTME: Registers the tool on FastMCP, rejects unknown tool names, and routes all logging to stderr.

import argparse
import json
import logging
import sys
from collections.abc import Sequence
from typing import Annotated, Any

from mcp.server.fastmcp import FastMCP
from pydantic import Field

from weather_mcp.batch import get_weather_reports
from weather_mcp.config import LOG_LEVEL, ForecastSettings
from weather_mcp.deps import WeatherDeps, create_http_client
from weather_mcp.exceptions import UnknownTool
from weather_mcp.models import LocationReport

logger = logging.getLogger(__name__)

SERVER_NAME = "weather-server"
TOOL_NAME = "get_weather"
TOOL_DESCRIPTION = (
    "Get weather information for one or more locations. Returns current conditions, "
    "hourly forecast for the next 24 hours, and daily high/low forecast for the next 7 days."
)


class WeatherServer(FastMCP):
    """FastMCP server that fails the call with UnknownTool for any unregistered tool name."""

    async def call_tool(self, name: str, arguments: dict[str, Any]):
        tool_names = {tool.name for tool in await self.list_tools()}
        if name not in tool_names:
            raise UnknownTool(f"Unknown tool: {name}")
        return await super().call_tool(name, arguments)


mcp = WeatherServer(SERVER_NAME)


def format_batch(reports: Sequence[LocationReport]) -> str:
    """Serialize a batch of reports as pretty-printed JSON text."""
    return json.dumps([r.model_dump(mode="json") for r in reports], indent=2, ensure_ascii=False)


@mcp.tool(name=TOOL_NAME, description=TOOL_DESCRIPTION)
async def get_weather(
    locations: Annotated[
        list[str],
        Field(min_length=1, description='One or more location names, e.g. ["New York", "Tokyo", "London"]'),
    ],
) -> str:
    settings = ForecastSettings()
    async with create_http_client(settings) as client:
        reports = await get_weather_reports(WeatherDeps(http_client=client, settings=settings), locations)
    return format_batch(reports)


def configure_logging(level: str = LOG_LEVEL) -> None:
    """Send all log records to stderr; stdout carries MCP protocol messages only."""
    formatter = logging.Formatter(
        fmt="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )

    root_logger = logging.getLogger()
    root_logger.setLevel(level)
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(formatter)
    root_logger.addHandler(handler)


def main() -> None:
    """Console entry point for the weather-mcp-server command."""
    parser = argparse.ArgumentParser(description="Run the weather MCP server over stdio")
    parser.add_argument("--verbose", "-v", action="store_true", help="Enable debug logging")
    args = parser.parse_args()

    configure_logging("DEBUG" if args.verbose else LOG_LEVEL)
    logger.info("Weather MCP server running. Waiting for requests...")
    mcp.run(transport="stdio")


if __name__ == "__main__":
    main()
