"""Value types for the press release form."""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Mapping, Sequence

from app_constants import ANSWER_FIELDS


@dataclass(frozen=True, slots=True)
class UploadedImage:
    mime_type: str
    data: str  # base64 text


@dataclass(frozen=True, slots=True)
class PressReleaseData:
    """Snapshot of everything the user supplied before generation."""

    what: str = ""
    who: str = ""
    when: str = ""
    where: str = ""
    why_how: str = ""
    file_content: str = ""
    uploaded_images: tuple[UploadedImage, ...] = field(default_factory=tuple)

    def answer(self, field_name: str) -> str:
        if field_name not in ANSWER_FIELDS:
            raise KeyError(field_name)
        return getattr(self, field_name)


def coerce_uploaded_images(values: Sequence[Any] | None) -> tuple[UploadedImage, ...]:
    """Normalize session payloads (dataclasses or dicts) into ``UploadedImage`` values."""

    images: list[UploadedImage] = []
    for item in values or ():
        if isinstance(item, UploadedImage):
            images.append(item)
        elif isinstance(item, Mapping):
            images.append(
                UploadedImage(
                    mime_type=str(item.get("mime_type") or ""),
                    data=str(item.get("data") or ""),
                )
            )
    return tuple(images)


__all__ = ["PressReleaseData", "UploadedImage", "coerce_uploaded_images"]
