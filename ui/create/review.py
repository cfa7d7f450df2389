"""Review screen: check every answer before generation starts."""
from __future__ import annotations

import streamlit as st

from app_constants import QUESTIONS
from session_state import advance, jump_to, retreat
from telemetry import emit_log_event

from .context import CreatePageContext


def render_step(context: CreatePageContext) -> None:
    session = context.session

    st.subheader("Controleer je antwoorden")

    for question in QUESTIONS:
        with st.container(border=True):
            title_col, edit_col = st.columns([5, 1])
            title_col.markdown(f"**{question.title}**")
            if edit_col.button("Bewerken", key=f"edit_{question.field}", width='stretch'):
                jump_to(question.step)
                st.rerun()
            answer = session.answer(question.field)
            st.text(answer if answer.strip() else "Geen antwoord ingevuld.")

    with st.container(border=True):
        st.markdown("**Uploads**")
        image_count = session.image_count
        text_line = "✅ Tekstbestand geüpload" if session.file_content else "❌ Geen tekstbestand"
        image_line = f"✅ {image_count} afbeelding(en) geüpload" if image_count else "❌ Geen afbeeldingen"
        st.markdown(f"{text_line}  \n{image_line}")

    back_col, generate_col = st.columns([1, 2])
    with back_col:
        if st.button("Terug", width='stretch'):
            retreat()
            st.rerun()
    with generate_col:
        if st.button("Genereer Persbericht", type="primary", width='stretch'):
            emit_log_event(
                type="wizard",
                action="review confirm",
                result="success",
                params=[str(image_count), "text" if session.file_content else None],
            )
            advance()
            st.rerun()


__all__ = ["render_step"]
