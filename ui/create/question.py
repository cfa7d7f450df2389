"""Question screens: one answer field each, uploads and the suggestion sidebar."""
from __future__ import annotations

import streamlit as st

from app_constants import QUESTION_COUNT, STEP_WHAT, UPLOAD_EXTENSIONS, question_for_step
from file_ingestion import ingest_file
from gemini_client import is_suggestions_error
from session_state import ANSWER_INPUT_PREFIX, advance, retreat, snapshot_press_release, update_answer
from telemetry import emit_log_event
from ui.styles import upload_badges_html

from .context import CreatePageContext


def _render_uploads(context: CreatePageContext) -> None:
    session = context.session

    uploaded = st.file_uploader(
        "Upload bestand",
        type=list(UPLOAD_EXTENSIONS),
        key="upload_input",
        help="Upload bijv. een playlist afbeelding of een bio als tekstbestand.",
    )
    st.caption("Ondersteund: .txt, .md, .csv, .json, .png, .jpg, .webp")

    if uploaded is not None:
        try:
            ingested = ingest_file(uploaded)
        except (OSError, ValueError) as exc:  # pragma: no cover - surfaced inline
            session.upload_error = f"Bestand kon niet gelezen worden: {exc}"
            emit_log_event(type="upload", action="file upload", result="fail", params=[uploaded.name, str(exc)])
        else:
            if ingested is not None:
                session.upload_error = None
                emit_log_event(
                    type="upload",
                    action="file upload",
                    result="success",
                    params=[ingested.filename, ingested.mime_type, "image" if ingested.is_image else "text"],
                )

    if session.upload_error:
        st.warning(session.upload_error)

    badges = upload_badges_html(has_text=bool(session.file_content), image_count=session.image_count)
    if badges:
        st.markdown(badges, unsafe_allow_html=True)


def _render_assistant(context: CreatePageContext, field_name: str, title: str, focus_hint: str) -> None:
    session = context.session

    st.markdown("#### ✨ AI Assistent")
    st.caption("Hulp nodig? Vraag de AI om suggesties op basis van je input.")

    if st.button("Suggesties vragen", key=f"suggest_{field_name}", width='stretch'):
        data = snapshot_press_release()
        with st.spinner("Suggesties ophalen..."):
            text = context.gateway.get_suggestions(
                title,
                data.answer(field_name),
                data,
                focus_hint=focus_hint,
            )
        session.store_suggestion(field_name, text)
        emit_log_event(
            type="assist",
            action="suggestions",
            result="fail" if is_suggestions_error(text) else "success",
            params=[field_name],
        )

    suggestion = session.suggestion_for(field_name)
    if suggestion:
        with st.container(border=True):
            st.markdown(suggestion)
    else:
        st.caption("_Klik op de knop voor suggesties..._")


def render_step(context: CreatePageContext) -> None:
    session = context.session
    position = context.position
    question = question_for_step(position.step)
    field_name = question.field

    st.subheader(f"{question.step} / {QUESTION_COUNT} · {question.title}")
    st.write(question.description)

    main_col, side_col = st.columns([2, 1])
    with main_col:
        value = st.text_area(
            question.title,
            value=session.answer(field_name),
            placeholder=question.placeholder,
            height=256,
            key=f"{ANSWER_INPUT_PREFIX}{field_name}",
            label_visibility="collapsed",
        )
        update_answer(field_name, value)
        _render_uploads(context)

    with side_col:
        _render_assistant(context, field_name, question.title, question.ai_prompt_context)

    st.markdown("---")
    back_col, _, next_col = st.columns([1, 2, 1])
    with back_col:
        if st.button("← Vorige", width='stretch', disabled=position.step == STEP_WHAT):
            retreat()
            st.rerun()
    with next_col:
        next_label = "Overzicht bekijken →" if position.is_last_question else "Volgende →"
        if st.button(next_label, type="primary", width='stretch'):
            advance()
            st.rerun()


__all__ = ["render_step"]
