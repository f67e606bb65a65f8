"""
Shared fakes for controller and surface tests.
"""

import pytest

from citycast.api.errors import WeatherLookupError
from citycast.models.weather import WeatherRecord


ABUJA_BODY = {
    "name": "Abuja",
    "sys": {"country": "NG"},
    "main": {"temp": 31.4, "humidity": 40},
    "weather": [{"description": "clear sky", "icon": "01d"}],
    "wind": {"speed": 5.1},
}


class RecordingSurface:
    """RenderSurface that keeps every call in order."""

    def __init__(self):
        self.calls = []

    def show_loading(self, visible):
        self.calls.append(("loading", visible))

    def show_error(self, message):
        self.calls.append(("error", message))

    def clear_error(self):
        self.calls.append(("clear_error",))

    def render_weather(self, record, unit):
        self.calls.append(("weather", record, unit))

    def render_recent(self, cities):
        self.calls.append(("recent", tuple(cities)))

    def set_unit_label(self, label, pressed):
        self.calls.append(("unit_label", label, pressed))

    def named(self, name):
        return [c for c in self.calls if c[0] == name]


class FakeInput:
    """InputSurface with settable text and directly callable handlers."""

    def __init__(self, text=""):
        self.text = text
        self.handlers = {}

    def current_text(self):
        return self.text

    def on_submit(self, handler):
        self.handlers["submit"] = handler

    def on_toggle(self, handler):
        self.handlers["toggle"] = handler

    def on_select_recent(self, handler):
        self.handlers["select"] = handler

    def on_remove_recent(self, handler):
        self.handlers["remove"] = handler


class FakeClient:
    """Async weather source returning canned records or raising canned errors."""

    def __init__(self, results=None):
        self.results = dict(results or {})
        self.requests = []

    async def fetch_current(self, city, unit):
        self.requests.append((city, unit))
        result = self.results.get(city.lower())
        if isinstance(result, WeatherLookupError):
            raise result
        if result is None:
            raise AssertionError(f"Unexpected lookup for {city!r}")
        return result


def make_record(city="Abuja", **overrides):
    fields = dict(
        city=city,
        country="NG",
        description="clear sky",
        icon="01d",
        temperature=31.4,
        humidity=40,
        wind_speed=5.1,
    )
    fields.update(overrides)
    return WeatherRecord(**fields)


@pytest.fixture
def surface():
    return RecordingSurface()


@pytest.fixture
def abuja():
    return make_record()
