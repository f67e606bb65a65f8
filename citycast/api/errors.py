"""
Error taxonomy for weather lookups.

Every error carries ``user_message``, the only text a rendering surface ever
shows for it.
"""

from typing import Optional

UNAVAILABLE_MESSAGE = "Unable to fetch weather right now."
NOT_FOUND_MESSAGE = "City not found. Try another search."


class WeatherLookupError(Exception):
    """Base class for failures of a single current-conditions lookup."""

    user_message = UNAVAILABLE_MESSAGE


class NetworkError(WeatherLookupError):
    """No response could be obtained from the provider."""


class CityNotFoundError(WeatherLookupError):
    """The provider answered 404 for the queried city."""

    user_message = NOT_FOUND_MESSAGE

    def __init__(self, city: str) -> None:
        super().__init__(f"City not found: {city}")
        self.city = city


class ProviderError(WeatherLookupError):
    """Non-success status other than 404, or a malformed response body."""

    def __init__(self, detail: str, status_code: Optional[int] = None) -> None:
        super().__init__(detail)
        self.status_code = status_code
