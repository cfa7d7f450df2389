"""Helpers for orchestrating the create flow screens."""
from __future__ import annotations

from wizard import ScreenKind

from .context import CreatePageContext
from . import question, result, review


_SCREEN_RENDERERS = {
    ScreenKind.QUESTION: question.render_step,
    ScreenKind.REVIEW: review.render_step,
    ScreenKind.RESULT: result.render_step,
}


def render_current_step(context: CreatePageContext) -> None:
    renderer = _SCREEN_RENDERERS.get(context.position.kind)
    if renderer is None:
        return
    renderer(context)


__all__ = ["CreatePageContext", "render_current_step"]
