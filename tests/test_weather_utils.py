"""
Unit tests for display formatting helpers.

Tests the formatting in citycast.utils.weather_utils for both unit
systems, including half-up rounding of display values.
"""

from datetime import datetime

import pytest
import pytz

from citycast.models.weather import UnitMode
from citycast.utils.weather_utils import (
    format_clock,
    format_humidity,
    format_temperature,
    format_wind,
    round_half_up,
    unit_toggle_label,
)


class TestRounding:
    """Test round_half_up helper."""

    @pytest.mark.parametrize(
        "value, expected",
        [(0, 0), (31.4, 31), (31.6, 32), (2.5, 3), (0.5, 1), (-2.5, -2), (-2.6, -3)],
    )
    def test_round_half_up(self, value, expected):
        assert round_half_up(value) == expected

    def test_returns_int(self):
        assert isinstance(round_half_up(7.2), int)


class TestFormatTemperature:
    """Test format_temperature for both unit systems."""

    def test_metric_suffix(self):
        assert format_temperature(31.4, UnitMode.METRIC) == "31°C"

    def test_imperial_suffix(self):
        assert format_temperature(88.6, UnitMode.IMPERIAL) == "89°F"

    @pytest.mark.parametrize("unit, suffix", [(UnitMode.METRIC, "°C"), (UnitMode.IMPERIAL, "°F")])
    @pytest.mark.parametrize("value", [0, 0.49, 12.2, 99.9, 1000.01])
    def test_prefix_is_rounded_value(self, value, unit, suffix):
        text = format_temperature(value, unit)
        assert text.endswith(suffix)
        assert int(text[: -len(suffix)]) == round(value)

    def test_below_zero(self):
        assert format_temperature(-3.7, UnitMode.METRIC) == "-4°C"


class TestFormatWind:
    """Test format_wind for both unit systems."""

    def test_metric(self):
        assert format_wind(5.1, UnitMode.METRIC) == "5 km/h"

    def test_imperial(self):
        assert format_wind(11.4, UnitMode.IMPERIAL) == "11 mph"

    def test_calm(self):
        assert format_wind(0, UnitMode.METRIC) == "0 km/h"


class TestFormatHumidity:
    def test_integer(self):
        assert format_humidity(40) == "40%"

    def test_float(self):
        assert format_humidity(40.0) == "40%"


class TestUnitToggleLabel:
    """The toggle offers the unit that is not active."""

    def test_metric_offers_fahrenheit(self):
        assert unit_toggle_label(UnitMode.METRIC) == ("Show °F", False)

    def test_imperial_offers_celsius(self):
        assert unit_toggle_label(UnitMode.IMPERIAL) == ("Show °C", True)


class TestFormatClock:
    """Test format_clock output."""

    def test_naive_time(self):
        now = datetime(2024, 1, 1, 14, 5)  # a Monday
        assert format_clock(now) == now.strftime("%a %I:%M %p")
        assert "02:05" in format_clock(now)

    def test_timezone_conversion(self):
        now = datetime(2024, 1, 1, 12, 0, tzinfo=pytz.utc)
        text = format_clock(now, tz_name="Africa/Lagos")  # UTC+1
        assert "01:00" in text

    def test_naive_time_localized(self):
        now = datetime(2024, 1, 1, 9, 30)
        assert "09:30" in format_clock(now, tz_name="America/Los_Angeles")

    def test_defaults_to_now(self):
        assert format_clock()
