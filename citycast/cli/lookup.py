"""
One-shot current-conditions lookup from the terminal.

Runs the same SearchController the page uses, with a console surface in place
of Streamlit.

Usage:
    python -m citycast.cli.lookup "New York"
    python -m citycast.cli.lookup Abuja --imperial
"""

import argparse
import asyncio
import sys
from typing import Optional, Sequence, TextIO

from citycast.api.openweather_client import WeatherClient
from citycast.config import ConfigError, load_settings
from citycast.core.search_controller import SearchController
from citycast.models.weather import SearchState, UnitMode, WeatherRecord
from citycast.utils.log_util import app_logger
from citycast.utils.weather_utils import (
    format_humidity,
    format_temperature,
    format_wind,
)

logger = app_logger(__name__)


class ConsoleSurface:
    """RenderSurface that prints to a text stream."""

    def __init__(self, out: Optional[TextIO] = None) -> None:
        self.out = out or sys.stdout

    def show_loading(self, visible: bool) -> None:
        logger.debug("Loading..." if visible else "Done.")

    def show_error(self, message: str) -> None:
        print(f"❌ {message}", file=self.out)

    def clear_error(self) -> None:
        pass

    def render_weather(self, record: WeatherRecord, unit: UnitMode) -> None:
        print(f"📍 {record.location_label}", file=self.out)
        print(f"   {record.description}", file=self.out)
        print(f"🌡️  {format_temperature(record.temperature, unit)}", file=self.out)
        print(f"💧 Humidity: {format_humidity(record.humidity)}", file=self.out)
        print(f"💨 Wind: {format_wind(record.wind_speed, unit)}", file=self.out)

    def render_recent(self, cities: Sequence[str]) -> None:
        pass

    def set_unit_label(self, label: str, pressed: bool) -> None:
        pass


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = argparse.ArgumentParser(description="Current weather for a city")
    parser.add_argument("city", help="City name, e.g. 'New York'")
    parser.add_argument(
        "--imperial", action="store_true", help="Report °F and mph instead of °C and km/h"
    )
    args = parser.parse_args(argv)
    if not args.city.strip():
        parser.error("city must not be blank")

    try:
        settings = load_settings()
    except ConfigError as e:
        print(f"❌ Configuration error: {e}", file=sys.stderr)
        return 2

    unit = UnitMode.IMPERIAL if args.imperial else UnitMode.METRIC
    surface = ConsoleSurface()
    with WeatherClient(
        settings.api_key, base_url=settings.api_base, timeout=settings.request_timeout
    ) as client:
        controller = SearchController(client, surface, state=SearchState(unit=unit))
        asyncio.run(controller.search(args.city))

    if not controller.state.last_city:
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
