"""Wizard position model and its transitions.

The wizard walks a fixed line of screens: an introduction, one screen per
question, a review screen and the result screen. Positions are stored in the
session as plain integers (``0..7``) and converted to :class:`WizardPosition`
whenever a screen has to be chosen, so an out-of-range step can never be
rendered by accident.
"""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from app_constants import QUESTION_COUNT, STEP_INTRO, STEP_RESULT, STEP_REVIEW


class ScreenKind(str, Enum):
    INTRO = "intro"
    QUESTION = "question"
    REVIEW = "review"
    RESULT = "result"


@dataclass(frozen=True, slots=True)
class WizardPosition:
    kind: ScreenKind
    question_index: int | None = None  # 1..QUESTION_COUNT for questions only

    def __post_init__(self) -> None:
        if self.kind is ScreenKind.QUESTION:
            if self.question_index is None or not 1 <= self.question_index <= QUESTION_COUNT:
                raise ValueError(f"question index out of range: {self.question_index!r}")
        elif self.question_index is not None:
            raise ValueError(f"{self.kind.value} position takes no question index")

    @classmethod
    def intro(cls) -> "WizardPosition":
        return cls(ScreenKind.INTRO)

    @classmethod
    def question(cls, index: int) -> "WizardPosition":
        return cls(ScreenKind.QUESTION, index)

    @classmethod
    def review(cls) -> "WizardPosition":
        return cls(ScreenKind.REVIEW)

    @classmethod
    def result(cls) -> "WizardPosition":
        return cls(ScreenKind.RESULT)

    @classmethod
    def from_step(cls, step: int) -> "WizardPosition":
        if isinstance(step, bool) or not isinstance(step, int):
            raise ValueError(f"step must be an integer, got {step!r}")
        if step == STEP_INTRO:
            return cls.intro()
        if 1 <= step <= QUESTION_COUNT:
            return cls.question(step)
        if step == STEP_REVIEW:
            return cls.review()
        if step == STEP_RESULT:
            return cls.result()
        raise ValueError(f"step out of range: {step}")

    @property
    def step(self) -> int:
        if self.kind is ScreenKind.INTRO:
            return STEP_INTRO
        if self.kind is ScreenKind.QUESTION:
            return int(self.question_index or 0)
        if self.kind is ScreenKind.REVIEW:
            return STEP_REVIEW
        return STEP_RESULT

    @property
    def is_last_question(self) -> bool:
        return self.kind is ScreenKind.QUESTION and self.question_index == QUESTION_COUNT


def advance(position: WizardPosition) -> WizardPosition:
    """Move one screen forward; the result screen is terminal."""

    if position.kind is ScreenKind.RESULT:
        return position
    return WizardPosition.from_step(position.step + 1)


def retreat(position: WizardPosition) -> WizardPosition:
    """Move one screen back; the introduction is the floor."""

    if position.kind is ScreenKind.INTRO:
        return position
    return WizardPosition.from_step(position.step - 1)


def jump_to(step: int) -> WizardPosition:
    return WizardPosition.from_step(step)


def progress_fraction(position: WizardPosition) -> float:
    if position.kind is ScreenKind.QUESTION:
        return (position.question_index or 0) / QUESTION_COUNT
    if position.kind is ScreenKind.INTRO:
        return 0.0
    return 1.0


__all__ = [
    "ScreenKind",
    "WizardPosition",
    "advance",
    "jump_to",
    "progress_fraction",
    "retreat",
]
