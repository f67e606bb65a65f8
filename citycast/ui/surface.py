"""
Streamlit rendering and input surfaces for the SearchController.

Streamlit reruns the whole script on every interaction, so the surfaces keep
what is displayed in a ``WeatherView`` stored in ``st.session_state`` and
redraw it into fresh placeholders each run. Widget callbacks only queue an
action; ``StreamlitInput.dispatch`` runs it once the page skeleton exists, so
the loading indicator is visible while the lookup is in flight.
"""

import asyncio
from dataclasses import dataclass
from typing import Any, Optional, Sequence

import streamlit as st

from citycast.core.search_controller import CityHandler, RemoveHandler, SearchHandler
from citycast.core.styles import get_style_manager
from citycast.models.weather import UnitMode, WeatherRecord
from citycast.ui.components import (
    render_recent_pills,
    render_unit_toggle,
    weather_card_html,
)
from citycast.utils.log_util import app_logger

logger = app_logger(__name__)

CITY_INPUT_KEY = "city_input"
PENDING_KEY = "pending_action"


@dataclass
class WeatherView:
    """What the page currently shows."""

    loading: bool = False
    error: str = ""
    record: Optional[WeatherRecord] = None
    unit: UnitMode = UnitMode.METRIC
    recent: tuple[str, ...] = ()
    unit_label: str = "Show °F"
    unit_pressed: bool = False


@dataclass
class Slots:
    """Placeholders created at the top of each script run."""

    error: Any
    loading: Any
    weather: Any


class StreamlitSurface:
    """RenderSurface that records into a WeatherView and redraws attached slots."""

    def __init__(self, view: Optional[WeatherView] = None) -> None:
        self.view = view or WeatherView()
        self.slots: Optional[Slots] = None

    def attach(self, slots: Slots) -> None:
        """Bind this run's placeholders and draw the current view into them."""
        self.slots = slots
        self._draw_error()
        self._draw_loading()
        self._draw_weather()

    def show_loading(self, visible: bool) -> None:
        self.view.loading = visible
        self._draw_loading()

    def show_error(self, message: str) -> None:
        self.view.error = message
        self._draw_error()

    def clear_error(self) -> None:
        self.view.error = ""
        self._draw_error()

    def render_weather(self, record: WeatherRecord, unit: UnitMode) -> None:
        self.view.record = record
        self.view.unit = unit
        self._draw_weather()

    def render_recent(self, cities: Sequence[str]) -> None:
        self.view.recent = tuple(cities)

    def set_unit_label(self, label: str, pressed: bool) -> None:
        self.view.unit_label = label
        self.view.unit_pressed = pressed

    def _draw_error(self) -> None:
        if self.slots is None:
            return
        if self.view.error:
            self.slots.error.error(self.view.error)
        else:
            self.slots.error.empty()

    def _draw_loading(self) -> None:
        if self.slots is None:
            return
        if self.view.loading:
            self.slots.loading.markdown(
                get_style_manager().build_loading_indicator(), unsafe_allow_html=True
            )
        else:
            self.slots.loading.empty()

    def _draw_weather(self) -> None:
        if self.slots is None:
            return
        if self.view.record is None:
            self.slots.weather.empty()
            return
        with self.slots.weather.container():
            get_style_manager().render_weather_card(
                weather_card_html(self.view.record, self.view.unit)
            )


class StreamlitInput:
    """InputSurface backed by widget callbacks and a queued action."""

    def __init__(self) -> None:
        self._submit: Optional[SearchHandler] = None
        self._toggle: Optional[SearchHandler] = None
        self._select: Optional[CityHandler] = None
        self._remove: Optional[RemoveHandler] = None

    def current_text(self) -> str:
        return st.session_state.get(CITY_INPUT_KEY, "")

    def on_submit(self, handler: SearchHandler) -> None:
        self._submit = handler

    def on_toggle(self, handler: SearchHandler) -> None:
        self._toggle = handler

    def on_select_recent(self, handler: CityHandler) -> None:
        self._select = handler

    def on_remove_recent(self, handler: RemoveHandler) -> None:
        self._remove = handler

    @staticmethod
    def queue(action: str, city: str = "") -> None:
        """Widget callback: remember the action for this rerun."""
        st.session_state[PENDING_KEY] = (action, city)

    def dispatch(self) -> None:
        """Run the queued action, if any, against the registered handlers."""
        pending = st.session_state.pop(PENDING_KEY, None)
        if pending is None:
            return
        action, city = pending
        logger.debug(f"Dispatching {action} {city!r}")

        if action == "submit" and self._submit is not None:
            asyncio.run(self._submit())
        elif action == "toggle" and self._toggle is not None:
            asyncio.run(self._toggle())
        elif action == "select" and self._select is not None:
            asyncio.run(self._select(city))
        elif action == "remove" and self._remove is not None:
            self._remove(city)
        else:
            logger.warning(f"No handler registered for action {action!r}")

    def render_search_form(self) -> None:
        with st.form("search_form", clear_on_submit=False, border=False):
            input_col, button_col = st.columns([5, 1])
            with input_col:
                st.text_input(
                    "City",
                    key=CITY_INPUT_KEY,
                    placeholder="Search for a city",
                    label_visibility="collapsed",
                )
            with button_col:
                st.form_submit_button(
                    "Search",
                    on_click=self.queue,
                    args=("submit",),
                    use_container_width=True,
                )

    def render_controls(self, view: WeatherView, toggle_area: Any, recent_area: Any) -> None:
        """
        Draw the widgets whose content depends on the view.

        Called after ``dispatch`` so the toggle label and recent pills reflect
        the action that just ran.

        :param view: Current WeatherView
        :param toggle_area: Container for the unit toggle
        :param recent_area: Container for the recent-search pills
        """
        with toggle_area:
            render_unit_toggle(
                view.unit_label, view.unit_pressed, on_click=self.queue, args=("toggle",)
            )
        with recent_area:
            render_recent_pills(
                view.recent,
                on_select=lambda city: self.queue("select", city),
                on_remove=lambda city: self.queue("remove", city),
            )
