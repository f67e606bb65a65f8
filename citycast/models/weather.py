"""
Weather data models and type definitions.

This module provides type-safe data structures for the weather lookup
widget: the unit system, the normalized current-conditions record, and the
per-session search state.
"""

from dataclasses import dataclass
from enum import Enum

from citycast.config import ICON_URL_TEMPLATE


class UnitMode(Enum):
    """Unit system; the value is the provider's ``units`` query parameter."""

    METRIC = "metric"
    IMPERIAL = "imperial"

    def toggled(self) -> "UnitMode":
        """Return the other unit system."""
        return UnitMode.IMPERIAL if self is UnitMode.METRIC else UnitMode.METRIC


@dataclass(frozen=True)
class WeatherRecord:
    """Current conditions for one city, in the unit system they were requested in."""

    city: str
    country: str
    description: str
    icon: str
    temperature: float
    humidity: float
    wind_speed: float

    @property
    def icon_url(self) -> str:
        """Provider image URL for the condition icon."""
        return ICON_URL_TEMPLATE.format(icon=self.icon)

    @property
    def location_label(self) -> str:
        return f"{self.city}, {self.country}"


@dataclass
class SearchState:
    """Mutable state for one page session."""

    unit: UnitMode = UnitMode.METRIC
    last_city: str = ""
