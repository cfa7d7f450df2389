# app.py
from __future__ import annotations

import logging
import os

import streamlit as st

from activity_log import init_activity_log
from app_constants import APP_ICON, APP_TITLE, QUESTION_COUNT
from gemini_client import GeminiGateway
from session_proxy import PressSessionProxy
from session_state import current_position, ensure_state
from ui.create import CreatePageContext, render_current_step
from ui.home import render_home_screen
from ui.styles import render_app_styles
from wizard import ScreenKind, progress_fraction

st.set_page_config(page_title=APP_TITLE, page_icon=APP_ICON, layout="wide")

logging.basicConfig(
    level=(os.getenv("LOG_LEVEL") or "INFO").upper(),
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)


@st.cache_resource(show_spinner=False)
def get_gateway() -> GeminiGateway:
    """One gateway per process, configured from the environment (.env)."""
    return GeminiGateway.from_env()


init_activity_log()

ensure_state()
session = PressSessionProxy(st.session_state)
position = current_position()

render_app_styles(show_intro_hero=position.kind is ScreenKind.INTRO)

if position.kind is ScreenKind.INTRO:
    render_home_screen()
    st.stop()

# ─────────────────────────────────────────────────────────────────────
# Header / progress
# ─────────────────────────────────────────────────────────────────────
header_cols = st.columns([6, 1])
with header_cols[0]:
    st.markdown(f"### {APP_ICON} {APP_TITLE}")
with header_cols[1]:
    if position.kind is ScreenKind.QUESTION:
        st.caption(f"Stap {position.step} van {QUESTION_COUNT}")

if position.kind is ScreenKind.QUESTION:
    st.progress(progress_fraction(position))

render_current_step(
    CreatePageContext(
        session=session,
        gateway=get_gateway(),
        position=position,
    )
)
