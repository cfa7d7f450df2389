"""State transitions behind the result screen.

The screen only draws widgets; generating, refining and regenerating artifacts
happens here against the session store, so every step works on a plain dict
and any object with the gateway's four generation methods.
"""
from __future__ import annotations

from collections.abc import MutableMapping
from typing import Any, Protocol

from gemini_client import WEBSITE_ERROR_PLACEHOLDER, is_press_release_error, is_refine_error
from press_release import PressReleaseData
from services.artifacts import ARTIFACT_POSTER, ARTIFACT_TEXT, ARTIFACT_WEBSITE
from session_state import (
    artifact_slot,
    begin_artifact,
    commit_artifact,
    request_refinement_reset,
    snapshot_press_release,
)
from telemetry import emit_log_event


class ResultGateway(Protocol):
    def generate_press_release(self, data: PressReleaseData) -> str: ...

    def refine_press_release(self, current_text: str, instruction: str) -> str: ...

    def generate_poster(self, data: PressReleaseData) -> str | None: ...

    def generate_website(self, data: PressReleaseData) -> str: ...


def _result_label(failed: bool) -> str:
    return "fail" if failed else "success"


# Press release text ----------------------------------------------------------------

def needs_press_release(session: MutableMapping[str, Any] | None = None) -> bool:
    """True until some text (fallback messages included) has been committed."""

    return artifact_slot(ARTIFACT_TEXT, session).value is None


def press_release_text(session: MutableMapping[str, Any] | None = None) -> str:
    return artifact_slot(ARTIFACT_TEXT, session).value or ""


def generate_press_release(gateway: ResultGateway, session: MutableMapping[str, Any] | None = None) -> bool:
    data = snapshot_press_release(session)
    ticket = begin_artifact(ARTIFACT_TEXT, session)
    text = gateway.generate_press_release(data)
    if not commit_artifact(ticket, text, session):
        return False

    emit_log_event(
        type="artifact",
        action="press release generate",
        result=_result_label(is_press_release_error(text)),
        params=[str(len(text)), str(len(data.uploaded_images))],
    )
    return True


def is_instruction_usable(instruction: str | None) -> bool:
    return bool((instruction or "").strip())


def refine_press_release(
    gateway: ResultGateway,
    instruction: str,
    session: MutableMapping[str, Any] | None = None,
) -> bool:
    """Rewrite the text; the instruction box is cleared only once the new text is committed."""

    if not is_instruction_usable(instruction):
        return False

    current_text = press_release_text(session)
    ticket = begin_artifact(ARTIFACT_TEXT, session)
    new_text = gateway.refine_press_release(current_text, instruction)
    if not commit_artifact(ticket, new_text, session):
        return False

    request_refinement_reset(session)
    emit_log_event(
        type="artifact",
        action="press release refine",
        result=_result_label(is_refine_error(current_text, new_text)),
        params=[str(len(instruction)), str(len(new_text))],
    )
    return True


# Poster and website ----------------------------------------------------------------

def poster_to_show(session: MutableMapping[str, Any] | None = None) -> str | None:
    """The committed poster URI, or ``None`` when there is nothing to show."""

    slot = artifact_slot(ARTIFACT_POSTER, session)
    return slot.value if slot.has_value else None


def generate_poster(gateway: ResultGateway, session: MutableMapping[str, Any] | None = None) -> bool:
    data = snapshot_press_release(session)
    ticket = begin_artifact(ARTIFACT_POSTER, session)
    uri = gateway.generate_poster(data)
    if not commit_artifact(ticket, uri, session):
        return False

    emit_log_event(
        type="artifact",
        action="poster generate",
        result=_result_label(uri is None),
        params=[str(len(data.uploaded_images))],
    )
    return True


def website_to_show(session: MutableMapping[str, Any] | None = None) -> str:
    """The committed HTML, or ``""`` so the screen offers the generate button again."""

    slot = artifact_slot(ARTIFACT_WEBSITE, session)
    return (slot.value or "") if slot.has_value else ""


def generate_website(gateway: ResultGateway, session: MutableMapping[str, Any] | None = None) -> bool:
    data = snapshot_press_release(session)
    ticket = begin_artifact(ARTIFACT_WEBSITE, session)
    html_doc = gateway.generate_website(data)
    if not commit_artifact(ticket, html_doc, session):
        return False

    emit_log_event(
        type="artifact",
        action="website generate",
        result=_result_label(html_doc == WEBSITE_ERROR_PLACEHOLDER),
        params=[str(len(html_doc))],
    )
    return True


__all__ = [
    "ResultGateway",
    "generate_poster",
    "generate_press_release",
    "generate_website",
    "is_instruction_usable",
    "needs_press_release",
    "poster_to_show",
    "press_release_text",
    "refine_press_release",
    "website_to_show",
]
