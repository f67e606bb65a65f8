"""
Centralized style management for the weather lookup page.

This module owns the CSS injected into the Streamlit page and the small HTML
builders used by the weather card and the loading indicator.
"""

from dataclasses import dataclass
from typing import Optional

import streamlit as st

from citycast.utils.log_util import app_logger

logger = app_logger(__name__)


@dataclass
class StyleConfig:
    """Configuration dataclass for style parameters."""

    # Weather card
    card_bg: str = "#f8f9fa"
    card_border: str = "#e9ecef"
    card_radius: str = "10px"
    temperature_font_size: str = "2.6rem"
    location_font_size: str = "1.2rem"
    metric_spacing: str = "0.75rem"

    # Colors
    text_color: str = "#262730"
    muted_color: str = "#666666"
    spinner_color: str = "#1f77b4"

    # Responsive breakpoints
    mobile_breakpoint: str = "768px"


class StyleManager:
    """
    Centralized style management with singleton pattern.

    Usage:
        style_manager = get_style_manager()
        style_manager.inject_styles()  # Call on every rerun
        style_manager.render_weather_card(html_content)

    CSS Classes:
        - .weather-card: Container for the current conditions
        - .weather-location: City and country line
        - .weather-temperature: Large temperature figure
        - .weather-condition: Condition description beside the icon
        - .weather-metrics-line: Flex container for humidity and wind
        - .loading-indicator: Inline spinner shown while a lookup is in flight
    """

    _instance: Optional["StyleManager"] = None

    def __new__(cls) -> "StyleManager":
        """Implement singleton pattern."""
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __init__(self) -> None:
        if not hasattr(self, "_config"):
            self._config = StyleConfig()

    @property
    def config(self) -> StyleConfig:
        return self._config

    def inject_styles(self) -> None:
        """Inject global CSS styles; Streamlit drops them on every rerun."""
        st.markdown(f"<style>{self.generate_css()}</style>", unsafe_allow_html=True)
        logger.debug("CSS styles injected/reinjected")

    def generate_css(self) -> str:
        """Generate CSS rules from configuration."""
        c = self.config
        return f"""
        .weather-card {{
            background-color: {c.card_bg};
            border: 1px solid {c.card_border};
            border-radius: {c.card_radius};
            padding: 1rem 1.25rem;
            margin: 0.5rem 0;
            color: {c.text_color};
        }}

        .weather-location {{
            font-size: {c.location_font_size};
            font-weight: 600;
        }}

        .weather-condition {{
            display: flex;
            align-items: center;
            color: {c.muted_color};
            text-transform: capitalize;
        }}

        .weather-condition img {{
            width: 64px;
            height: 64px;
        }}

        .weather-temperature {{
            font-size: {c.temperature_font_size};
            font-weight: 700;
            line-height: 1.1;
        }}

        .weather-metrics-line {{
            display: flex;
            flex-wrap: wrap;
            gap: {c.metric_spacing};
            color: {c.muted_color};
        }}

        .loading-indicator {{
            display: inline-block;
            width: 1.2rem;
            height: 1.2rem;
            border: 3px solid {c.card_border};
            border-top-color: {c.spinner_color};
            border-radius: 50%;
            animation: citycast-spin 0.8s linear infinite;
        }}

        @keyframes citycast-spin {{
            to {{ transform: rotate(360deg); }}
        }}

        @media (max-width: {c.mobile_breakpoint}) {{
            .weather-card {{
                padding: 0.6rem 0.8rem;
            }}

            .weather-temperature {{
                font-size: 2rem;
            }}

            .weather-metrics-line {{
                flex-direction: column;
                gap: 0.2rem;
            }}
        }}
        """

    def render_weather_card(self, html_content: str) -> None:
        """
        Render the current-conditions card.

        :param html_content: Inner HTML for the card
        """
        wrapped_html = f'<div class="weather-card">{html_content}</div>'
        st.markdown(wrapped_html, unsafe_allow_html=True)

    def build_metrics_line(self, metrics: list[str]) -> str:
        """
        Build HTML for a line of weather metrics.

        :param metrics: Already-escaped metric strings
        :return: HTML string for the metrics line, empty if no metrics
        """
        if not metrics:
            return ""
        spans = "".join(f"<span>{m}</span>" for m in metrics)
        return f'<div class="weather-metrics-line">{spans}</div>'

    def build_loading_indicator(self, text: str = "Loading weather…") -> str:
        return f'<span class="loading-indicator"></span>&nbsp;{text}'


def get_style_manager() -> StyleManager:
    """
    Get the singleton StyleManager instance.

    :return: StyleManager instance
    """
    return StyleManager()
