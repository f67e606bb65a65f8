"""
openweather_client.py: Interface to the OpenWeatherMap current-conditions endpoint.

One lookup is exactly one GET request. Transport failures, HTTP statuses and
malformed bodies are mapped onto the errors in ``citycast.api.errors``; no
request is ever retried.

Classes:
- WeatherClient: async ``fetch_current(city, unit)`` returning a WeatherRecord.

Functions:
- build_query: Encode the query string for a lookup.
- parse_current: Map a provider JSON body onto a WeatherRecord.
"""

import asyncio
import math
from typing import Any, Dict, Optional
from urllib.parse import quote, urlencode

import requests

from citycast.api.errors import CityNotFoundError, NetworkError, ProviderError
from citycast.config import API_BASE
from citycast.models.weather import UnitMode, WeatherRecord
from citycast.utils.log_util import app_logger

logger = app_logger(__name__)


def build_query(city: str, unit: UnitMode, api_key: str) -> str:
    """
    Build the percent-encoded query string for a current-conditions lookup.

    :param city: City name; surrounding whitespace is stripped.
    :param unit: Unit system for the response values.
    :param api_key: Provider application key.
    :return: Query string such as ``q=New%20York&units=metric&appid=...``.
    """
    params = {"q": city.strip(), "units": unit.value, "appid": api_key}
    return urlencode(params, quote_via=quote, safe="")


def _number(value: Any, field: str) -> float:
    if isinstance(value, bool) or not isinstance(value, (int, float)) or not math.isfinite(value):
        raise ProviderError(f"Malformed current-conditions body: {field}={value!r}")
    return value


def _text(value: Any, field: str) -> str:
    if not isinstance(value, str):
        raise ProviderError(f"Malformed current-conditions body: {field}={value!r}")
    return value


def parse_current(data: Dict[str, Any]) -> WeatherRecord:
    """
    Map a provider response body onto a WeatherRecord.

    The first entry of ``weather`` is authoritative.

    :param data: Decoded JSON body.
    :return: WeatherRecord.
    :raises ProviderError: if any expected field is missing or of the wrong type.
    """
    try:
        condition = data["weather"][0]
        return WeatherRecord(
            city=_text(data["name"], "name"),
            country=_text(data["sys"]["country"], "sys.country"),
            description=_text(condition["description"], "weather.description"),
            icon=_text(condition["icon"], "weather.icon"),
            temperature=_number(data["main"]["temp"], "main.temp"),
            humidity=_number(data["main"]["humidity"], "main.humidity"),
            wind_speed=_number(data["wind"]["speed"], "wind.speed"),
        )
    except (KeyError, IndexError, TypeError) as e:
        raise ProviderError(f"Malformed current-conditions body: {e!r}") from e


class WeatherClient:
    """
    Client for the provider's current-conditions endpoint.

    :param api_key: Provider application key.
    :param base_url: Endpoint root, without trailing slash.
    :param timeout: Optional request timeout in seconds; None waits indefinitely.
    :param session: Optional requests session, mainly for tests.
    """

    def __init__(
        self,
        api_key: str,
        base_url: str = API_BASE,
        timeout: Optional[float] = None,
        session: Optional[requests.Session] = None,
    ) -> None:
        self.api_key = api_key
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self.session = session or requests.Session()

    def __enter__(self) -> "WeatherClient":
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()

    def close(self) -> None:
        self.session.close()

    def current_url(self, city: str, unit: UnitMode) -> str:
        return f"{self.base_url}/weather?{build_query(city, unit, self.api_key)}"

    async def fetch_current(self, city: str, unit: UnitMode) -> WeatherRecord:
        """
        Fetch current conditions for ``city`` in ``unit``.

        The blocking request runs in a worker thread; the caller is suspended
        until a response or a transport failure is available.

        :param city: City name as typed by the user.
        :param unit: Unit system for temperature and wind speed.
        :return: WeatherRecord with the provider's canonical city name.
        :raises NetworkError: if no response could be obtained.
        :raises CityNotFoundError: on HTTP 404.
        :raises ProviderError: on any other bad status or a malformed body.
        """
        return await asyncio.to_thread(self.get_current, city, unit)

    def get_current(self, city: str, unit: UnitMode) -> WeatherRecord:
        """Blocking variant of ``fetch_current``."""
        query_city = city.strip()
        logger.info(f"Fetching current weather: city={query_city!r}, units={unit.value}")

        try:
            resp = self.session.get(self.current_url(query_city, unit), timeout=self.timeout)
        except requests.RequestException as e:
            logger.warning(f"Request error for {query_city!r}: {e}")
            raise NetworkError(f"Request error for {query_city!r}: {e}") from e

        if resp.status_code == 404:
            logger.warning(f"City not found: {query_city!r}")
            raise CityNotFoundError(query_city)
        if not resp.ok:
            logger.warning(
                f"Weather fetch failed: {resp.status_code} {resp.text[:200]}"
            )
            raise ProviderError(
                f"HTTP {resp.status_code} for {query_city!r}", status_code=resp.status_code
            )

        try:
            data = resp.json()
        except ValueError as e:
            logger.warning(f"Invalid JSON for {query_city!r}: {e}")
            raise ProviderError(
                f"Invalid JSON for {query_city!r}", status_code=resp.status_code
            ) from e

        record = parse_current(data)
        logger.debug(f"Current weather for {record.location_label}: {record}")
        return record
