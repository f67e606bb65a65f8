"""
Reusable UI components for the citycast weather lookup page.

HTML builders here are pure so they can be tested without a running
Streamlit session; the ``render_*`` functions draw widgets.
"""

import html
from typing import Callable, Optional, Sequence

import streamlit as st

from citycast.config import CLOCK_REFRESH_SECONDS
from citycast.core.styles import get_style_manager
from citycast.models.weather import UnitMode, WeatherRecord
from citycast.utils.weather_utils import (
    format_clock,
    format_humidity,
    format_temperature,
    format_wind,
)


def weather_card_html(record: WeatherRecord, unit: UnitMode) -> str:
    """
    Build the inner HTML of the current-conditions card.

    :param record: Current conditions to show
    :param unit: Unit system the record was fetched in
    :return: HTML string, all provider text escaped
    """
    style_manager = get_style_manager()
    description = html.escape(record.description)
    metrics = style_manager.build_metrics_line(
        [
            f"Humidity: {format_humidity(record.humidity)}",
            f"Wind: {format_wind(record.wind_speed, unit)}",
        ]
    )
    return (
        f'<div class="weather-location">{html.escape(record.location_label)}</div>'
        f'<div class="weather-condition">'
        f'<img src="{html.escape(record.icon_url, quote=True)}" alt="{html.escape(record.description, quote=True)}">'
        f"<span>{description}</span></div>"
        f'<div class="weather-temperature">{format_temperature(record.temperature, unit)}</div>'
        f"{metrics}"
    )


@st.fragment(run_every=CLOCK_REFRESH_SECONDS)
def render_clock(tz_name: Optional[str] = None) -> None:
    """Date/time caption, refreshed on its own timer without rerunning the page."""
    st.caption(format_clock(tz_name=tz_name))


def render_unit_toggle(
    label: str, pressed: bool, on_click: Callable[..., None], args: tuple = ()
) -> None:
    """
    Draw the unit toggle button.

    :param label: Text offering the other unit, e.g. "Show °F"
    :param pressed: True while imperial units are shown
    :param on_click: Callback run at the start of the next rerun
    :param args: Positional arguments for the callback
    """
    st.button(
        label,
        key="unit_toggle",
        type="primary" if pressed else "secondary",
        on_click=on_click,
        args=args,
        help="Switch between metric and imperial units",
    )


def render_recent_pills(
    cities: Sequence[str],
    on_select: Callable[[str], None],
    on_remove: Callable[[str], None],
) -> None:
    """
    Draw one selectable, removable pill per recent city.

    :param cities: Recent cities, most recent first
    :param on_select: Callback receiving the city to search
    :param on_remove: Callback receiving the city to drop from the list
    """
    if not cities:
        return

    columns = st.columns(len(cities))
    for i, (column, city) in enumerate(zip(columns, cities)):
        with column:
            pick_col, del_col = st.columns([4, 1])
            with pick_col:
                st.button(
                    city,
                    key=f"recent_pick_{i}",
                    on_click=on_select,
                    args=(city,),
                    use_container_width=True,
                )
            with del_col:
                st.button(
                    "×",
                    key=f"recent_remove_{i}",
                    on_click=on_remove,
                    args=(city,),
                    help=f"Remove {city} from recent searches",
                )
