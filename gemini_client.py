"""Press release operations on top of the Gemini transport.

Every operation makes exactly one attempt and never raises: failures are logged
and turned into the fallback value shown in that artifact's slot.
"""
from __future__ import annotations

import logging
import re

from press_release import PressReleaseData
from prompts.press_release import (
    build_content_parts,
    build_poster_brief_prompt,
    build_poster_fallback_prompt,
    build_press_release_prompt,
    build_refinement_prompt,
    build_suggestions_prompt,
    build_website_prompt,
)
from services import gemini_api
from services.gemini_api import GeminiSettings, ModelFactory

logger = logging.getLogger(__name__)

NO_SUGGESTIONS_MESSAGE = "Geen suggesties beschikbaar."
NO_PRESS_RELEASE_MESSAGE = "Kon geen persbericht genereren."
SUGGESTIONS_ERROR_PREFIX = "Kan geen suggesties ophalen:"
PRESS_RELEASE_ERROR_PREFIX = "Fout bij het genereren van het persbericht."
REFINE_ERROR_MARKER = "[Fout bij aanpassen:"
WEBSITE_ERROR_PLACEHOLDER = "<!-- Fout bij het genereren van de website -->"

_CODE_FENCE_RE = re.compile(r"```(?:html)?", re.IGNORECASE)


def strip_html_code_fences(text: str) -> str:
    """Remove every ```html and ``` marker the model may wrap around markup."""

    return _CODE_FENCE_RE.sub("", text or "")


def is_suggestions_error(text: str) -> bool:
    return (text or "").startswith(SUGGESTIONS_ERROR_PREFIX)


def is_press_release_error(text: str) -> bool:
    return (text or "").startswith(PRESS_RELEASE_ERROR_PREFIX)


def is_refine_error(current_text: str, new_text: str) -> bool:
    """A failed refinement is the current text with the error marker appended."""

    if not (new_text or "").startswith(current_text or ""):
        return False
    return (new_text or "")[len(current_text or ""):].lstrip().startswith(REFINE_ERROR_MARKER)


def _error_detail(error: dict | None) -> str:
    if not error:
        return "Onbekende fout"
    return str(error.get("error") or "Onbekende fout")


class GeminiGateway:
    """Remote generation gateway bound to one explicit settings handle."""

    def __init__(self, settings: GeminiSettings, *, model_factory: ModelFactory | None = None):
        self.settings = settings
        self._model_factory = model_factory

    @classmethod
    def from_env(cls) -> "GeminiGateway":
        return cls(GeminiSettings.from_env())

    def _text(self, parts: list[dict]) -> gemini_api.TextGenerationResult:
        return gemini_api.generate_text(
            parts,
            settings=self.settings,
            model_factory=self._model_factory,
        )

    def get_suggestions(
        self,
        question_title: str,
        current_value: str,
        data: PressReleaseData,
        *,
        focus_hint: str | None = None,
    ) -> str:
        prompt = build_suggestions_prompt(
            question_title=question_title,
            current_value=current_value,
            data=data,
            focus_hint=focus_hint,
        )
        result = self._text(build_content_parts(prompt, data.uploaded_images))
        if not result.ok:
            logger.warning("Suggestions failed: %s", _error_detail(result.error))
            return f"{SUGGESTIONS_ERROR_PREFIX} {_error_detail(result.error)}"
        return result.payload or NO_SUGGESTIONS_MESSAGE

    def generate_press_release(self, data: PressReleaseData) -> str:
        prompt = build_press_release_prompt(data)
        result = self._text(build_content_parts(prompt, data.uploaded_images))
        if not result.ok:
            logger.warning("Press release generation failed: %s", _error_detail(result.error))
            return (
                f"{PRESS_RELEASE_ERROR_PREFIX}\n\n"
                f"Foutmelding: {_error_detail(result.error)}\n\n"
                "Probeer het opnieuw of controleer je uploads."
            )
        return result.payload or NO_PRESS_RELEASE_MESSAGE

    def refine_press_release(self, current_text: str, instruction: str) -> str:
        prompt = build_refinement_prompt(current_text=current_text, instruction=instruction)
        result = self._text(build_content_parts(prompt))
        if not result.ok:
            logger.warning("Refinement failed: %s", _error_detail(result.error))
            return f"{current_text}\n\n{REFINE_ERROR_MARKER} {_error_detail(result.error)}]"
        return result.payload or current_text

    def generate_poster(self, data: PressReleaseData) -> str | None:
        """Return the poster as a data URI, or ``None`` when no image came back."""

        brief = self._text(build_content_parts(build_poster_brief_prompt(data), data.uploaded_images))
        if not brief.ok:
            logger.warning("Poster prompt generation failed: %s", _error_detail(brief.error))
            return None
        image_prompt = brief.payload or build_poster_fallback_prompt(data)

        image = gemini_api.generate_image(
            image_prompt,
            settings=self.settings,
            model_factory=self._model_factory,
        )
        if not image.ok:
            logger.warning("Poster image generation failed: %s", _error_detail(image.error))
            return None
        return image.as_data_uri()

    def generate_website(self, data: PressReleaseData) -> str:
        result = self._text(build_content_parts(build_website_prompt(data)))
        if not result.ok:
            logger.warning("Website generation failed: %s", _error_detail(result.error))
            return WEBSITE_ERROR_PLACEHOLDER
        return strip_html_code_fences(result.payload or "")


__all__ = [
    "GeminiGateway",
    "NO_PRESS_RELEASE_MESSAGE",
    "NO_SUGGESTIONS_MESSAGE",
    "PRESS_RELEASE_ERROR_PREFIX",
    "REFINE_ERROR_MARKER",
    "SUGGESTIONS_ERROR_PREFIX",
    "WEBSITE_ERROR_PLACEHOLDER",
    "is_press_release_error",
    "is_refine_error",
    "is_suggestions_error",
    "strip_html_code_fences",
]
