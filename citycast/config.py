# config.py
"""
Configurations for the citycast weather lookup application.

Holds the provider endpoints and widget constants shared across the
application, plus the runtime settings (API key, timezone, timeout) read from
Streamlit secrets with an environment-variable fallback.
"""

import os
from dataclasses import dataclass
from typing import Any, Optional

import streamlit as st

from citycast.utils.log_util import app_logger

logger = app_logger(__name__)

API_BASE = "https://api.openweathermap.org/data/2.5"
ICON_URL_TEMPLATE = "https://openweathermap.org/img/wn/{icon}@2x.png"

DEFAULT_CITY = "Abuja"
RECENT_LIMIT = 4
CLOCK_REFRESH_SECONDS = 1


class ConfigError(RuntimeError):
    """Raised when a required setting is missing or malformed."""


@dataclass(frozen=True)
class Settings:
    """Runtime settings for one application session."""

    api_key: str
    api_base: str = API_BASE
    default_city: str = DEFAULT_CITY
    timezone: Optional[str] = None
    request_timeout: Optional[float] = None


def _lookup(key: str, default: Any = None) -> Any:
    """Read a setting from Streamlit secrets, falling back to the environment."""
    try:
        if key in st.secrets:
            return st.secrets[key]
    except Exception as e:
        # No secrets.toml outside of a configured Streamlit deployment.
        logger.debug(f"Secrets unavailable for {key}: {e}")
    return os.getenv(key, default)


def load_settings() -> Settings:
    """
    Build the settings for this session.

    :return: Settings instance.
    :raises ConfigError: if OPENWEATHER_API_KEY is unset or REQUEST_TIMEOUT is not a number.
    """
    api_key = _lookup("OPENWEATHER_API_KEY")
    if not api_key:
        raise ConfigError("OPENWEATHER_API_KEY is not set")

    raw_timeout = _lookup("REQUEST_TIMEOUT")
    try:
        request_timeout = float(raw_timeout) if raw_timeout not in (None, "") else None
    except (TypeError, ValueError) as e:
        raise ConfigError(f"REQUEST_TIMEOUT must be a number, got {raw_timeout!r}") from e

    settings = Settings(
        api_key=str(api_key),
        api_base=str(_lookup("OPENWEATHER_ENDPOINT", API_BASE)).rstrip("/"),
        default_city=str(_lookup("DEFAULT_CITY", DEFAULT_CITY)),
        timezone=_lookup("TIMEZONE") or None,
        request_timeout=request_timeout,
    )
    logger.debug(
        f"Settings loaded: base={settings.api_base}, default_city={settings.default_city}"
    )
    return settings
