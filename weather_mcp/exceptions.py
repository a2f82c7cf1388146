# ABOUTME: Error taxonomy for the weather tool.
# ABOUTME: Call-level errors abort a tool call; per-location errors become error reports.


class WeatherToolError(Exception):
    """Base class for all weather tool errors."""


class RequestShapeError(WeatherToolError, ValueError):
    """The tool input does not carry a non-empty list of location strings."""


class UnknownTool(WeatherToolError, LookupError):
    """The invocation named a tool this server does not provide."""


class LocationNotFound(WeatherToolError):
    """The geocoder returned no match for a location query."""


class UpstreamUnavailable(WeatherToolError):
    """An upstream service answered with a non-success status or could not be reached."""
