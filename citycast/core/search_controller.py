"""
search_controller.py: Orchestrates weather searches for one page session.

The controller owns the session's SearchState and RecentList, calls the
WeatherClient, and writes results to a RenderSurface. It never touches a UI
toolkit directly; Streamlit and the CLI each provide their own surfaces.

Overlapping searches are neither deduplicated nor cancelled: each call shows
and hides the loading indicator on its own, and the last one to finish wins
the display.
"""

from typing import Awaitable, Callable, Optional, Protocol, Sequence

from citycast.api.errors import WeatherLookupError
from citycast.core.recent_list import RecentList
from citycast.models.weather import SearchState, UnitMode, WeatherRecord
from citycast.utils.log_util import app_logger
from citycast.utils.weather_utils import unit_toggle_label

logger = app_logger(__name__)

SearchHandler = Callable[[], Awaitable[None]]
CityHandler = Callable[[str], Awaitable[None]]
RemoveHandler = Callable[[str], None]


class WeatherSource(Protocol):
    async def fetch_current(self, city: str, unit: UnitMode) -> WeatherRecord: ...


class RenderSurface(Protocol):
    """Everything the controller may draw."""

    def show_loading(self, visible: bool) -> None: ...

    def show_error(self, message: str) -> None: ...

    def clear_error(self) -> None: ...

    def render_weather(self, record: WeatherRecord, unit: UnitMode) -> None: ...

    def render_recent(self, cities: Sequence[str]) -> None: ...

    def set_unit_label(self, label: str, pressed: bool) -> None: ...


class InputSurface(Protocol):
    """Where user input comes from; handlers are registered, not polled."""

    def current_text(self) -> str: ...

    def on_submit(self, handler: SearchHandler) -> None: ...

    def on_toggle(self, handler: SearchHandler) -> None: ...

    def on_select_recent(self, handler: CityHandler) -> None: ...

    def on_remove_recent(self, handler: RemoveHandler) -> None: ...


class SearchController:
    """
    Runs searches and unit toggles against a weather source.

    :param client: Anything with an async ``fetch_current(city, unit)``.
    :param surface: Rendering surface for results, errors and loading state.
    :param state: Optional initial SearchState (metric, no last city by default).
    :param recent: Optional RecentList to start from.
    """

    def __init__(
        self,
        client: WeatherSource,
        surface: RenderSurface,
        state: Optional[SearchState] = None,
        recent: Optional[RecentList] = None,
    ) -> None:
        self.client = client
        self.surface = surface
        self._state = state or SearchState()
        self._recent = recent or RecentList()
        self._input: Optional[InputSurface] = None

    @property
    def state(self) -> SearchState:
        return self._state

    @property
    def recent(self) -> RecentList:
        return self._recent

    def bind(self, input_surface: InputSurface) -> None:
        """Register the controller's handlers on an input surface."""
        self._input = input_surface
        input_surface.on_submit(self.search)
        input_surface.on_toggle(self.toggle_unit)
        input_surface.on_select_recent(self.search)
        input_surface.on_remove_recent(self.remove_recent)

    async def start(self, default_city: str) -> None:
        """Draw the initial recent list and toggle label, then load ``default_city``."""
        self.surface.render_recent(self._recent.snapshot())
        self._render_unit_label()
        await self.search(default_city)

    def _resolve_city(self, city_input: Optional[str]) -> str:
        if city_input is not None and city_input.strip():
            return city_input.strip()
        if self._input is None:
            return ""
        return (self._input.current_text() or "").strip()

    async def search(self, city_input: Optional[str] = None) -> None:
        """
        Look up ``city_input``, or the input surface's text when omitted.

        A blank city is ignored without touching the surface. On success the
        provider's canonical name goes into the recent list and becomes the
        last city; on failure only the error message is shown.

        :param city_input: Optional explicit city name.
        """
        city = self._resolve_city(city_input)
        if not city:
            return

        logger.debug(f"Search: {city!r} ({self._state.unit.value})")
        self.surface.clear_error()
        self.surface.show_loading(True)
        try:
            record = await self.client.fetch_current(city, self._state.unit)
            self.surface.render_weather(record, self._state.unit)
            self._recent.add(record.city)
            self.surface.render_recent(self._recent.snapshot())
            self._state.last_city = record.city
        except WeatherLookupError as e:
            self.surface.show_error(e.user_message)
        finally:
            self.surface.show_loading(False)

    async def toggle_unit(self) -> None:
        """Switch unit systems and re-fetch the displayed city, if any."""
        self._state.unit = self._state.unit.toggled()
        self._render_unit_label()
        if self._state.last_city:
            await self.search(self._state.last_city)

    def remove_recent(self, city: str) -> None:
        self._recent.remove(city)
        self.surface.render_recent(self._recent.snapshot())

    def _render_unit_label(self) -> None:
        label, pressed = unit_toggle_label(self._state.unit)
        self.surface.set_unit_label(label, pressed)
