"""
Main streamlit.io application
"""

import asyncio

import streamlit as st

from citycast.api.openweather_client import WeatherClient
from citycast.config import ConfigError, load_settings
from citycast.core.search_controller import SearchController
from citycast.core.styles import get_style_manager
from citycast.ui.components import render_clock
from citycast.ui.surface import Slots, StreamlitInput, StreamlitSurface
from citycast.utils.log_util import app_logger

logger = app_logger(__name__)

st.set_page_config(
    page_title="City Weather",
    page_icon="🌤️",
    layout="centered",
    initial_sidebar_state="collapsed",
)

# Initialize global styles
style_manager = get_style_manager()
style_manager.inject_styles()

try:
    settings = load_settings()
except ConfigError as e:
    logger.error(f"Configuration error: {e}")
    st.error(f"Configuration error: {e}")
    st.stop()


# Setup session ########################

if "controller" not in st.session_state:
    client = WeatherClient(
        settings.api_key,
        base_url=settings.api_base,
        timeout=settings.request_timeout,
    )
    surface = StreamlitSurface()
    controller = SearchController(client, surface)
    st.session_state["controller"] = controller
    st.session_state["started"] = False
    logger.info("New weather session")

controller: SearchController = st.session_state["controller"]
surface: StreamlitSurface = controller.surface

# Widgets are recreated every rerun; handlers are rebound to the new ones.
user_input = StreamlitInput()
controller.bind(user_input)


# Page skeleton ########################

title_col, clock_col = st.columns([3, 1])
with title_col:
    st.title("City Weather")
with clock_col:
    render_clock(settings.timezone)

user_input.render_search_form()
toggle_area = st.container()
recent_area = st.container()

surface.attach(
    Slots(
        error=st.empty(),
        loading=st.empty(),
        weather=st.empty(),
    )
)


# Run actions ########################

if not st.session_state["started"]:
    st.session_state["started"] = True
    asyncio.run(controller.start(settings.default_city))
else:
    user_input.dispatch()


# Controls reflecting the updated view ########################

user_input.render_controls(surface.view, toggle_area, recent_area)
