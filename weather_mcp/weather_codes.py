# ABOUTME: WMO weather code descriptions used by Open-Meteo.
# ABOUTME: Maps integer condition codes to readable text, degrading gracefully for unknown codes.

# https://open-meteo.com/en/docs#weathervariables
WMO_CODES: dict[int, str] = {
    0: "Clear sky",
    1: "Mainly clear",
    2: "Partly cloudy",
    3: "Overcast",
    45: "Foggy",
    48: "Icy fog",
    51: "Light drizzle",
    53: "Moderate drizzle",
    55: "Dense drizzle",
    61: "Slight rain",
    63: "Moderate rain",
    65: "Heavy rain",
    71: "Slight snow",
    73: "Moderate snow",
    75: "Heavy snow",
    77: "Snow grains",
    80: "Slight rain showers",
    81: "Moderate rain showers",
    82: "Violent rain showers",
    85: "Slight snow showers",
    86: "Heavy snow showers",
    95: "Thunderstorm",
    96: "Thunderstorm with slight hail",
    99: "Thunderstorm with heavy hail",
}


def describe_weather(code: int | None) -> str:
    """Return a readable condition for a WMO code, or an 'Unknown' label that keeps the code."""
    description = WMO_CODES.get(code) if code is not None else None
    if description is None:
        return f"Unknown (code {code})"
    return description
