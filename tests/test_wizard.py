from __future__ import annotations

import pytest

from app_constants import QUESTION_COUNT, STEP_RESULT, STEP_REVIEW
from wizard import ScreenKind, WizardPosition, advance, jump_to, progress_fraction, retreat


def test_from_step_maps_every_screen():
    assert WizardPosition.from_step(0).kind is ScreenKind.INTRO
    for step in range(1, QUESTION_COUNT + 1):
        position = WizardPosition.from_step(step)
        assert position.kind is ScreenKind.QUESTION
        assert position.question_index == step
    assert WizardPosition.from_step(STEP_REVIEW).kind is ScreenKind.REVIEW
    assert WizardPosition.from_step(STEP_RESULT).kind is ScreenKind.RESULT


@pytest.mark.parametrize("step", [-1, 8, 42, "3", 2.0, True, None])
def test_from_step_rejects_invalid_values(step):
    with pytest.raises(ValueError):
        WizardPosition.from_step(step)


def test_question_position_requires_index_in_range():
    with pytest.raises(ValueError):
        WizardPosition(ScreenKind.QUESTION, 0)
    with pytest.raises(ValueError):
        WizardPosition(ScreenKind.QUESTION, QUESTION_COUNT + 1)
    with pytest.raises(ValueError):
        WizardPosition(ScreenKind.REVIEW, 2)


def test_advance_walks_the_full_line_and_stops_at_result():
    position = WizardPosition.intro()
    steps = [position.step]
    for _ in range(STEP_RESULT + 3):
        position = advance(position)
        steps.append(position.step)
    assert steps[: STEP_RESULT + 1] == list(range(STEP_RESULT + 1))
    assert steps[-1] == STEP_RESULT
    assert position.kind is ScreenKind.RESULT


def test_retreat_is_floored_at_intro():
    position = WizardPosition.question(2)
    position = retreat(position)
    assert position == WizardPosition.question(1)
    position = retreat(position)
    assert position == WizardPosition.intro()
    assert retreat(position) == WizardPosition.intro()


def test_retreat_from_review_returns_to_last_question():
    assert retreat(WizardPosition.review()) == WizardPosition.question(QUESTION_COUNT)


def test_last_question_flag():
    assert WizardPosition.question(QUESTION_COUNT).is_last_question is True
    assert WizardPosition.question(1).is_last_question is False
    assert WizardPosition.review().is_last_question is False


def test_jump_to_and_progress_fraction():
    assert jump_to(3) == WizardPosition.question(3)
    assert progress_fraction(WizardPosition.intro()) == 0.0
    assert progress_fraction(WizardPosition.question(1)) == pytest.approx(1 / QUESTION_COUNT)
    assert progress_fraction(WizardPosition.question(QUESTION_COUNT)) == pytest.approx(1.0)
    assert progress_fraction(WizardPosition.result()) == 1.0
