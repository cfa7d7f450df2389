from __future__ import annotations

from typing import Callable

import pytest

import session_state
from gemini_client import REFINE_ERROR_MARKER, WEBSITE_ERROR_PLACEHOLDER
from services import result_actions
from services.artifacts import ARTIFACT_POSTER, ARTIFACT_TEXT, ArtifactStatus


class FakeGateway:
    def __init__(self, *, text="# Persbericht", refined="# Korter", poster=None, website="<!DOCTYPE html>"):
        self.text = text
        self.refined = refined
        self.poster = poster
        self.website = website
        self.calls: list[tuple] = []
        self.during_call: Callable[[], None] | None = None

    def _record(self, *call) -> None:
        self.calls.append(call)
        if self.during_call is not None:
            self.during_call()

    def generate_press_release(self, data):
        self._record("press_release", data.what)
        return self.text

    def refine_press_release(self, current_text, instruction):
        self._record("refine", current_text, instruction)
        return self.refined

    def generate_poster(self, data):
        self._record("poster", data.who)
        return self.poster

    def generate_website(self, data):
        self._record("website", data.what)
        return self.website


@pytest.fixture()
def session() -> dict:
    state: dict = {}
    session_state.ensure_state(state)
    session_state.update_answer("what", "Release X", state)
    session_state.update_answer("who", "Artist Y", state)
    return state


@pytest.fixture()
def events(monkeypatch) -> list[dict]:
    recorded: list[dict] = []
    monkeypatch.setattr(result_actions, "emit_log_event", lambda **kwargs: recorded.append(kwargs))
    return recorded


def test_press_release_is_generated_once(session, events):
    gateway = FakeGateway()
    assert result_actions.needs_press_release(session) is True

    assert result_actions.generate_press_release(gateway, session) is True

    assert result_actions.needs_press_release(session) is False
    assert result_actions.press_release_text(session) == "# Persbericht"
    assert gateway.calls == [("press_release", "Release X")]
    assert [event["result"] for event in events] == ["success"]


def test_fallback_text_counts_as_content_and_logs_fail(session, events):
    gateway = FakeGateway(text="Fout bij het genereren van het persbericht.\n\nFoutmelding: boom")

    result_actions.generate_press_release(gateway, session)

    assert result_actions.needs_press_release(session) is False
    assert events[0]["result"] == "fail"


@pytest.mark.parametrize("instruction", ["", "   ", "\n\t"])
def test_blank_instruction_is_ignored(session, events, instruction):
    gateway = FakeGateway()
    result_actions.generate_press_release(gateway, session)
    session[session_state.REFINEMENT_INPUT_KEY] = instruction

    assert result_actions.refine_press_release(gateway, instruction, session) is False

    assert [call[0] for call in gateway.calls] == ["press_release"]
    assert result_actions.press_release_text(session) == "# Persbericht"
    assert session_state.consume_refinement_reset(session) is False


def test_instruction_is_cleared_only_after_commit(session, events):
    gateway = FakeGateway()
    result_actions.generate_press_release(gateway, session)
    session[session_state.REFINEMENT_INPUT_KEY] = "make it shorter"

    assert result_actions.refine_press_release(gateway, "make it shorter", session) is True

    assert gateway.calls[-1] == ("refine", "# Persbericht", "make it shorter")
    assert result_actions.press_release_text(session) == "# Korter"
    assert session[session_state.REFINEMENT_INPUT_KEY] == "make it shorter"

    assert session_state.consume_refinement_reset(session) is True
    assert session[session_state.REFINEMENT_INPUT_KEY] == ""
    assert session_state.consume_refinement_reset(session) is False
    assert events[-1]["action"] == "press release refine"
    assert events[-1]["result"] == "success"


def test_superseded_refinement_keeps_instruction(session, events):
    gateway = FakeGateway()
    result_actions.generate_press_release(gateway, session)
    session[session_state.REFINEMENT_INPUT_KEY] = "korter"
    gateway.during_call = lambda: session_state.begin_artifact(ARTIFACT_TEXT, session)

    assert result_actions.refine_press_release(gateway, "korter", session) is False

    assert result_actions.press_release_text(session) == "# Persbericht"
    assert session_state.consume_refinement_reset(session) is False
    assert session[session_state.REFINEMENT_INPUT_KEY] == "korter"


def test_failed_refinement_is_logged_as_fail(session, events):
    gateway = FakeGateway()
    result_actions.generate_press_release(gateway, session)
    gateway.refined = f"# Persbericht\n\n{REFINE_ERROR_MARKER} quota]"

    assert result_actions.refine_press_release(gateway, "korter", session) is True
    assert events[-1]["result"] == "fail"


def test_missing_poster_renders_as_not_requested(session, events):
    gateway = FakeGateway(poster=None)
    assert result_actions.poster_to_show(session) is None

    assert result_actions.generate_poster(gateway, session) is True

    slot = session_state.artifact_slot(ARTIFACT_POSTER, session)
    assert slot.status is ArtifactStatus.READY
    assert result_actions.poster_to_show(session) is None
    assert events[-1]["result"] == "fail"


def test_generated_poster_is_shown(session, events):
    gateway = FakeGateway(poster="data:image/png;base64,AAAA")

    result_actions.generate_poster(gateway, session)

    assert result_actions.poster_to_show(session) == "data:image/png;base64,AAAA"
    assert gateway.calls == [("poster", "Artist Y")]
    assert events[-1]["result"] == "success"


def test_empty_website_offers_generate_again(session, events):
    gateway = FakeGateway(website="")

    assert result_actions.generate_website(gateway, session) is True

    assert result_actions.website_to_show(session) == ""
    assert events[-1]["result"] == "success"


def test_website_placeholder_is_logged_as_fail(session, events):
    gateway = FakeGateway(website=WEBSITE_ERROR_PLACEHOLDER)

    result_actions.generate_website(gateway, session)

    assert result_actions.website_to_show(session) == WEBSITE_ERROR_PLACEHOLDER
    assert events[-1]["result"] == "fail"


def test_restart_during_generation_drops_the_response(session, events):
    gateway = FakeGateway(poster="data:image/png;base64,AAAA")
    gateway.during_call = lambda: session_state.reset_all_state(session)

    assert result_actions.generate_poster(gateway, session) is False

    assert result_actions.poster_to_show(session) is None
    assert events == []
