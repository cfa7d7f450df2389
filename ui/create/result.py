"""Result screen: press release text, refinement, poster and promo website."""
from __future__ import annotations

import streamlit as st
import streamlit.components.v1 as components

from app_constants import DISTRIBUTION_TIPS
from services import result_actions
from services.export_service import poster_download, press_release_download, website_download
from session_state import REFINEMENT_INPUT_KEY, consume_refinement_reset, reset_all_state
from telemetry import emit_log_event

from .context import CreatePageContext


def _render_text(context: CreatePageContext) -> None:
    text = result_actions.press_release_text()

    with st.container(border=True):
        st.markdown(text)

    copy_col, download_col = st.columns(2)
    with copy_col:
        with st.popover("📋 Kopieer tekst", width='stretch'):
            st.code(text, language="markdown")
    with download_col:
        payload = press_release_download(text)
        st.download_button(
            "⬇️ Download Markdown",
            data=payload.data,
            file_name=payload.file_name,
            mime=payload.mime,
            width='stretch',
        )

    st.markdown("#### ✏️ Tekst aanpassen")
    consume_refinement_reset()

    instruction = st.text_input(
        "Instructie",
        key=REFINEMENT_INPUT_KEY,
        placeholder="Bijv: 'Maak het enthousiaster' of 'Voeg toe dat kaartverkoop start op 1 dec'",
        label_visibility="collapsed",
    )
    st.caption("Geef instructies aan de AI om de tekst te herschrijven of details toe te voegen.")

    if st.button("Aanpassen", disabled=not result_actions.is_instruction_usable(instruction), key="refine_submit"):
        with st.spinner("Tekst aanpassen..."):
            committed = result_actions.refine_press_release(context.gateway, instruction)
        if committed:
            st.rerun()


def _render_poster(context: CreatePageContext) -> None:
    st.markdown("#### 🖼️ Poster Generator")

    payload = None
    poster_uri = result_actions.poster_to_show()
    if poster_uri is not None:
        try:
            payload = poster_download(poster_uri)
        except ValueError as exc:
            st.warning(f"Poster kon niet weergegeven worden: {exc}")

    if payload is None:
        st.caption("Genereer een concertposter met datum, artiest en QR-code.")
        clicked = st.button("Genereer Poster", key="poster_generate", width='stretch')
    else:
        st.image(payload.data, caption="Gegenereerde poster", width='stretch')
        st.download_button(
            "Download",
            data=payload.data,
            file_name=payload.file_name,
            mime=payload.mime,
            key="poster_download",
            width='stretch',
        )
        clicked = st.button("Nieuwe variant", key="poster_regenerate", width='stretch')

    if clicked:
        with st.spinner("Poster ontwerpen..."):
            committed = result_actions.generate_poster(context.gateway)
        if committed:
            st.rerun()


def _render_website(context: CreatePageContext) -> None:
    st.markdown("#### 🌐 Promo Website")
    code = result_actions.website_to_show()

    if not code:
        st.caption("Maak een 'single-page' promotie website code (HTML+Tailwind) voor je event.")
        clicked = st.button("Genereer Website", key="website_generate", width='stretch')
    else:
        components.html(code, height=320, scrolling=True)
        payload = website_download(code)
        download_col, regenerate_col = st.columns([3, 1])
        with download_col:
            st.download_button(
                "⬇️ Download HTML",
                data=payload.data,
                file_name=payload.file_name,
                mime=payload.mime,
                key="website_download",
                width='stretch',
            )
        with regenerate_col:
            clicked = st.button("🔄", key="website_regenerate", help="Opnieuw genereren", width='stretch')

    if clicked:
        with st.spinner("Code schrijven..."):
            committed = result_actions.generate_website(context.gateway)
        if committed:
            st.rerun()


def render_step(context: CreatePageContext) -> None:
    if result_actions.needs_press_release():
        with st.spinner("Je persbericht wordt geschreven... De AI combineert je antwoorden tot een professioneel verhaal."):
            result_actions.generate_press_release(context.gateway)

    title_col, restart_col = st.columns([4, 1])
    title_col.subheader("Je Persbericht is Klaar")
    if restart_col.button("🔄 Opnieuw beginnen", width='stretch'):
        reset_all_state()
        emit_log_event(type="wizard", action="wizard restart", result="success")
        st.rerun()

    text_col, assets_col = st.columns([8, 4])
    with text_col:
        _render_text(context)
    with assets_col:
        with st.container(border=True):
            _render_poster(context)
        with st.container(border=True):
            _render_website(context)

        st.markdown("---")
        st.markdown("**Distributie Tips**")
        st.markdown("\n".join(f"- {tip}" for tip in DISTRIBUTION_TIPS))


__all__ = ["render_step"]
