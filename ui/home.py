"""Introduction screen."""
from __future__ import annotations

import streamlit as st

from app_constants import STEP_WHAT
from session_state import go_step
from telemetry import emit_log_event


def render_home_screen() -> None:
    _, center, _ = st.columns([1, 2, 1])
    with center:
        if st.button("Start Generator", type="primary", width='stretch'):
            go_step(STEP_WHAT)
            emit_log_event(type="wizard", action="wizard start", result="success")
            st.rerun()


__all__ = ["render_home_screen"]
