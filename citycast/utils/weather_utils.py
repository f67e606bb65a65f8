"""
Weather utility functions for formatting display values.

This module provides the unit-aware formatting used by every rendering
surface, so the Streamlit page and the CLI print identical strings.
"""

import math
from datetime import datetime
from typing import Optional, Union

import pytz

from citycast.models.weather import UnitMode

Number = Union[int, float]

TEMPERATURE_SUFFIX = {UnitMode.METRIC: "°C", UnitMode.IMPERIAL: "°F"}
WIND_SUFFIX = {UnitMode.METRIC: "km/h", UnitMode.IMPERIAL: "mph"}


def round_half_up(value: Number) -> int:
    """
    Round to the nearest integer, halves rounding towards positive infinity.

    :param value: Finite number
    :return: Rounded integer
    """
    return int(math.floor(value + 0.5))


def format_temperature(value: Number, unit: UnitMode) -> str:
    """
    Format a temperature with its unit suffix.

    :param value: Temperature in the unit the provider was asked for
    :param unit: Active unit system
    :return: e.g. "31°C" or "88°F"
    """
    return f"{round_half_up(value)}{TEMPERATURE_SUFFIX[unit]}"


def format_wind(value: Number, unit: UnitMode) -> str:
    """
    Format a wind speed with its unit suffix.

    :param value: Wind speed as reported by the provider
    :param unit: Active unit system
    :return: e.g. "5 km/h" or "11 mph"
    """
    return f"{round_half_up(value)} {WIND_SUFFIX[unit]}"


def format_humidity(value: Number) -> str:
    return f"{round_half_up(value)}%"


def unit_toggle_label(unit: UnitMode) -> tuple[str, bool]:
    """
    Label and pressed state for the unit toggle button.

    The label offers the unit that is *not* active; the button reads as
    pressed while imperial units are shown.

    :param unit: Active unit system
    :return: Tuple of (label, pressed)
    """
    if unit is UnitMode.METRIC:
        return "Show °F", False
    return "Show °C", True


def format_clock(now: Optional[datetime] = None, tz_name: Optional[str] = None) -> str:
    """
    Format the page clock as short weekday, hour and minute.

    :param now: Time to format; defaults to the current time
    :param tz_name: Optional IANA timezone name, local time when omitted
    :return: e.g. "Mon 02:15 PM" (weekday and meridiem follow the process locale)
    """
    if now is None:
        now = datetime.now(pytz.timezone(tz_name)) if tz_name else datetime.now()
    elif tz_name:
        tz = pytz.timezone(tz_name)
        now = tz.localize(now) if now.tzinfo is None else now.astimezone(tz)
    return now.strftime("%a %I:%M %p")
