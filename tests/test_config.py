# ABOUTME: Contract tests for environment-driven configuration.
# ABOUTME: Validates timeout parsing and the request parameters built from ForecastSettings.

import pytest

from weather_mcp.config import ForecastSettings, _read_timeout


class TestReadTimeout:
    def test_unset_means_no_timeout(self):
        """An unset or blank WEATHER_HTTP_TIMEOUT disables the timeout.

        Implementation: Parses None and a whitespace-only value.
        Passing implies: Requests wait indefinitely unless a timeout is configured.
        """
        assert _read_timeout(None) is None
        assert _read_timeout("  ") is None

    def test_numeric_value(self):
        """A numeric WEATHER_HTTP_TIMEOUT is parsed as seconds.

        Implementation: Parses an integer and a fractional value.
        Passing implies: Deployments can bound upstream waits.
        """
        assert _read_timeout("5") == 5.0
        assert _read_timeout("2.5") == 2.5

    def test_malformed_value_names_the_variable(self):
        """A malformed WEATHER_HTTP_TIMEOUT raises an error naming the variable.

        Implementation: Parses a value with a unit suffix.
        Passing implies: Startup failures point at the misconfigured setting.
        """
        with pytest.raises(ValueError, match="WEATHER_HTTP_TIMEOUT"):
            _read_timeout("5s")


class TestForecastSettings:
    def test_temperature_symbol(self):
        """The temperature suffix follows the configured unit.

        Implementation: Reads the symbol for the default and a celsius configuration.
        Passing implies: Report formatting needs no unit literals.
        """
        assert ForecastSettings().temperature_symbol == "°F"
        assert ForecastSettings(temperature_unit="celsius").temperature_symbol == "°C"
