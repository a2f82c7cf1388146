# ABOUTME: Multi-location weather lookup exposed as an MCP tool.
# ABOUTME: Geocodes place names with Nominatim and fetches forecasts from Open-Meteo.

__version__ = "1.0.0"
