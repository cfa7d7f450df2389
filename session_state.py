"""Session state helpers for the Streamlit app."""
from __future__ import annotations

from collections.abc import MutableMapping
from typing import Any, Iterable

import streamlit as st

from app_constants import ANSWER_FIELDS, STEP_INTRO
from press_release import PressReleaseData, UploadedImage, coerce_uploaded_images
from services.artifacts import ArtifactSlot, ArtifactTicket, new_slots
from session_proxy import PressSessionProxy
from wizard import (
    WizardPosition,
    advance as advance_position,
    jump_to as jump_position,
    retreat as retreat_position,
)

ANSWER_INPUT_PREFIX = "answer_input_"
REFINEMENT_INPUT_KEY = "refinement_input"
REFINEMENT_RESET_FLAG = "reset_refinement_pending"


def _state_defaults() -> dict[str, Any]:
    defaults: dict[str, Any] = {
        # Flow state
        "step": STEP_INTRO,
        "session_epoch": 0,

        # Upload state
        "file_content": "",
        "uploaded_images": [],
        "last_upload_id": None,
        "upload_error": None,

        # Suggestion sidebar, keyed by answer field
        "suggestions": {},

        # Result screen helpers
        REFINEMENT_INPUT_KEY: "",
        REFINEMENT_RESET_FLAG: False,
    }
    for field_name in ANSWER_FIELDS:
        defaults[field_name] = ""
    return defaults


def _proxy(session: MutableMapping[str, Any] | None = None) -> PressSessionProxy:
    """Return a proxy around ``session`` or the current Streamlit session state."""

    return PressSessionProxy(st.session_state if session is None else session)


def ensure_state(session: MutableMapping[str, Any] | None = None) -> None:
    proxy = _proxy(session)
    for key, default in _state_defaults().items():
        proxy.setdefault(key, default)

    artifacts = proxy.get("artifacts")
    if not isinstance(artifacts, dict) or not artifacts:
        proxy["artifacts"] = new_slots(proxy.epoch)


# Wizard ------------------------------------------------------------------------

def current_position(session: MutableMapping[str, Any] | None = None) -> WizardPosition:
    proxy = _proxy(session)
    try:
        return WizardPosition.from_step(proxy.step)
    except ValueError:
        proxy.step = STEP_INTRO
        return WizardPosition.intro()


def go_step(step: int, session: MutableMapping[str, Any] | None = None) -> WizardPosition:
    position = jump_position(step)
    _proxy(session).step = position.step
    return position


def advance(session: MutableMapping[str, Any] | None = None) -> WizardPosition:
    position = advance_position(current_position(session))
    _proxy(session).step = position.step
    return position


def retreat(session: MutableMapping[str, Any] | None = None) -> WizardPosition:
    position = retreat_position(current_position(session))
    _proxy(session).step = position.step
    return position


def jump_to(step: int, session: MutableMapping[str, Any] | None = None) -> WizardPosition:
    """Jump straight to ``step``; used by the review screen's edit links."""

    return go_step(step, session)


def reset_all_state(session: MutableMapping[str, Any] | None = None) -> None:
    """Forget every answer, upload and artifact and return to the intro screen."""

    proxy = _proxy(session)
    keys_to_clear: Iterable[str] = [
        *ANSWER_FIELDS,
        *(f"{ANSWER_INPUT_PREFIX}{field_name}" for field_name in ANSWER_FIELDS),
        "file_content",
        "uploaded_images",
        "last_upload_id",
        "upload_error",
        "suggestions",
        REFINEMENT_INPUT_KEY,
        REFINEMENT_RESET_FLAG,
        "artifacts",
    ]
    for key in keys_to_clear:
        proxy.pop(key, None)

    proxy.bump_epoch()
    proxy.step = STEP_INTRO
    ensure_state(session)


# Form data ---------------------------------------------------------------------

def update_answer(field_name: str, value: str, session: MutableMapping[str, Any] | None = None) -> None:
    if field_name not in ANSWER_FIELDS:
        raise KeyError(field_name)
    _proxy(session)[field_name] = value or ""


def append_uploaded_image(image: UploadedImage, session: MutableMapping[str, Any] | None = None) -> None:
    proxy = _proxy(session)
    images = list(proxy.get("uploaded_images") or [])
    images.append(image)
    proxy["uploaded_images"] = images


def replace_file_content(text: str, session: MutableMapping[str, Any] | None = None) -> None:
    _proxy(session)["file_content"] = text


def mark_upload_ingested(upload_id: str, session: MutableMapping[str, Any] | None = None) -> bool:
    """Remember the latest upload event; returns ``False`` when it is the one already applied.

    Only the last id is kept, so uploading an earlier file again counts as a new upload.
    """

    proxy = _proxy(session)
    if proxy.get("last_upload_id") == upload_id:
        return False
    proxy["last_upload_id"] = upload_id
    return True


def snapshot_press_release(session: MutableMapping[str, Any] | None = None) -> PressReleaseData:
    """Freeze the current answers and uploads for prompt assembly."""

    proxy = _proxy(session)
    answers = {field_name: str(proxy.get(field_name) or "") for field_name in ANSWER_FIELDS}
    return PressReleaseData(
        **answers,
        file_content=str(proxy.get("file_content") or ""),
        uploaded_images=coerce_uploaded_images(proxy.get("uploaded_images")),
    )


def request_refinement_reset(session: MutableMapping[str, Any] | None = None) -> None:
    """Clear the instruction box on the next run, before its widget is created."""

    _proxy(session)[REFINEMENT_RESET_FLAG] = True


def consume_refinement_reset(session: MutableMapping[str, Any] | None = None) -> bool:
    proxy = _proxy(session)
    if not proxy.pop(REFINEMENT_RESET_FLAG, False):
        return False
    proxy[REFINEMENT_INPUT_KEY] = ""
    return True


# Artifacts ---------------------------------------------------------------------

def artifact_slot(name: str, session: MutableMapping[str, Any] | None = None) -> ArtifactSlot:
    proxy = _proxy(session)
    artifacts = proxy.get("artifacts")
    if not isinstance(artifacts, dict) or name not in artifacts:
        ensure_state(session)
        artifacts = proxy["artifacts"]
    return artifacts[name]


def begin_artifact(name: str, session: MutableMapping[str, Any] | None = None) -> ArtifactTicket:
    return artifact_slot(name, session).begin()


def commit_artifact(ticket: ArtifactTicket, value: Any, session: MutableMapping[str, Any] | None = None) -> bool:
    """Commit a response; returns ``False`` when the ticket has been superseded."""

    proxy = _proxy(session)
    if ticket.generation != proxy.epoch:
        return False
    artifacts = proxy.get("artifacts")
    if not isinstance(artifacts, dict):
        return False
    slot = artifacts.get(ticket.name)
    if slot is None:
        return False
    return slot.commit(ticket, value)


__all__ = [
    "ANSWER_INPUT_PREFIX",
    "REFINEMENT_INPUT_KEY",
    "REFINEMENT_RESET_FLAG",
    "advance",
    "append_uploaded_image",
    "artifact_slot",
    "begin_artifact",
    "commit_artifact",
    "consume_refinement_reset",
    "current_position",
    "ensure_state",
    "go_step",
    "jump_to",
    "mark_upload_ingested",
    "replace_file_content",
    "request_refinement_reset",
    "reset_all_state",
    "retreat",
    "snapshot_press_release",
    "update_answer",
]
