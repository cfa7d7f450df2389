"""Gemini SDK bootstrap and transport helpers."""
from __future__ import annotations

import base64
import os
from dataclasses import dataclass
from typing import Any, Callable, Iterable, Mapping

from dotenv import load_dotenv

# Quiet gRPC/absl logs before importing the SDK.
os.environ.setdefault("GRPC_VERBOSITY", "ERROR")
os.environ.setdefault("GRPC_TRACE", "")

load_dotenv()

DEFAULT_TEXT_MODEL = "gemini-2.5-flash"
DEFAULT_IMAGE_MODEL = "gemini-2.5-flash-image"

ModelFactory = Callable[[str], Any]


class GenerationError(RuntimeError):
    """Raised when a Gemini call cannot produce a result."""


class MissingCredentialError(GenerationError):
    def __init__(self) -> None:
        super().__init__("GEMINI_API_KEY is niet ingesteld (controleer .env).")


@dataclass(frozen=True, slots=True)
class GeminiSettings:
    api_key: str = ""
    text_model: str = DEFAULT_TEXT_MODEL
    image_model: str = DEFAULT_IMAGE_MODEL

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> "GeminiSettings":
        env = os.environ if environ is None else environ
        api_key = (env.get("GEMINI_API_KEY") or env.get("API_KEY") or "").strip()
        text_model = (env.get("GEMINI_TEXT_MODEL") or "").strip() or DEFAULT_TEXT_MODEL
        image_model = (env.get("GEMINI_IMAGE_MODEL") or "").strip() or DEFAULT_IMAGE_MODEL
        return cls(api_key=api_key, text_model=text_model, image_model=image_model)

    def require_api_key(self) -> str:
        if not self.api_key:
            raise MissingCredentialError()
        return self.api_key


@dataclass(frozen=True, slots=True)
class TextGenerationResult:
    ok: bool
    payload: str | None = None
    error: dict | None = None


@dataclass(frozen=True, slots=True)
class ImageGenerationResult:
    ok: bool
    mime_type: str | None = None
    data: str | None = None  # base64 text
    error: dict | None = None

    def as_data_uri(self) -> str | None:
        if not self.ok or not self.data:
            return None
        return f"data:{self.mime_type or 'image/png'};base64,{self.data}"


def sdk_model_factory(settings: GeminiSettings) -> ModelFactory:
    """Configure ``google.generativeai`` for ``settings`` and return its model constructor."""

    import google.generativeai as genai

    genai.configure(api_key=settings.require_api_key())
    return genai.GenerativeModel


def error_payload(exc: BaseException) -> dict:
    if isinstance(exc, GenerationError):
        return {"error": str(exc), "kind": type(exc).__name__}
    return {"error": f"{type(exc).__name__}: {exc}", "kind": type(exc).__name__}


def to_sdk_parts(parts: Iterable[Mapping[str, Any]]) -> list[Any]:
    """Convert prompt parts (base64 inline data) into SDK content parts (raw bytes)."""

    sdk_parts: list[Any] = []
    for part in parts:
        inline = part.get("inline_data")
        if inline:
            sdk_parts.append(
                {
                    "mime_type": inline["mime_type"],
                    "data": _coerce_bytes(inline["data"]),
                }
            )
        elif "text" in part:
            sdk_parts.append(str(part["text"]))
    return sdk_parts


def extract_text_from_response(resp) -> str:
    try:
        if hasattr(resp, "text") and resp.text:
            return str(resp.text)
    except ValueError:
        # The SDK raises when the response has no text parts (e.g. safety blocks).
        pass

    try:
        candidates = getattr(resp, "candidates", []) or []
        if candidates:
            content = getattr(candidates[0], "content", None)
            parts = getattr(content, "parts", None) if content else None
            if parts:
                return " ".join(
                    getattr(part, "text", "") for part in parts if getattr(part, "text", "")
                )
    except (AttributeError, IndexError, TypeError):
        return ""

    return ""


def _coerce_bytes(value) -> bytes | None:
    if value is None:
        return None
    if isinstance(value, bytes):
        return value
    if isinstance(value, str):
        return base64.b64decode(value)
    data_attr = getattr(value, "data", None)
    if data_attr is not None and data_attr is not value:
        return _coerce_bytes(data_attr)
    return None


def extract_image_from_response(resp) -> tuple[bytes | None, str | None]:
    """Return the first inline image of the first candidate as ``(bytes, mime)``."""

    candidates = getattr(resp, "candidates", None) or []
    if not candidates:
        return None, None
    content = getattr(candidates[0], "content", None)
    parts = getattr(content, "parts", None) or []
    for part in parts:
        blob = getattr(part, "inline_data", None)
        if not blob:
            continue
        data = getattr(blob, "data", None)
        if data:
            return _coerce_bytes(data), getattr(blob, "mime_type", None) or "image/png"
    return None, None


def generate_text(
    parts: Iterable[Mapping[str, Any]],
    *,
    settings: GeminiSettings,
    model_factory: ModelFactory | None = None,
    model_name: str | None = None,
) -> TextGenerationResult:
    """Single attempt at a text generation call; errors are captured, not raised."""

    try:
        settings.require_api_key()
        factory = model_factory or sdk_model_factory(settings)
        model = factory(model_name or settings.text_model)
        response = model.generate_content(to_sdk_parts(parts))
    except Exception as exc:
        return TextGenerationResult(ok=False, error=error_payload(exc))

    text = (extract_text_from_response(response) or "").strip()
    return TextGenerationResult(ok=True, payload=text)


def generate_image(
    prompt: str,
    *,
    settings: GeminiSettings,
    model_factory: ModelFactory | None = None,
) -> ImageGenerationResult:
    """Single attempt at an image call. Only the text prompt is sent."""

    try:
        settings.require_api_key()
        factory = model_factory or sdk_model_factory(settings)
        model = factory(settings.image_model)
        response = model.generate_content([prompt])
    except Exception as exc:
        return ImageGenerationResult(ok=False, error=error_payload(exc))

    image_bytes, mime_type = extract_image_from_response(response)
    if not image_bytes:
        feedback = getattr(response, "prompt_feedback", None) or "geen afbeelding in het antwoord"
        return ImageGenerationResult(ok=False, error={"error": f"Model gaf geen afbeelding terug: {feedback}"})

    return ImageGenerationResult(
        ok=True,
        mime_type=mime_type or "image/png",
        data=base64.b64encode(image_bytes).decode("ascii"),
    )


__all__ = [
    "DEFAULT_IMAGE_MODEL",
    "DEFAULT_TEXT_MODEL",
    "GeminiSettings",
    "GenerationError",
    "ImageGenerationResult",
    "MissingCredentialError",
    "ModelFactory",
    "TextGenerationResult",
    "error_payload",
    "extract_image_from_response",
    "extract_text_from_response",
    "generate_image",
    "generate_text",
    "sdk_model_factory",
    "to_sdk_parts",
]
