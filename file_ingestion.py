"""Turn uploaded files into form context: images or supplementary text."""
from __future__ import annotations

import base64
import hashlib
from collections.abc import MutableMapping
from dataclasses import dataclass
from typing import Any, Protocol

from press_release import UploadedImage
from session_state import append_uploaded_image, mark_upload_ingested, replace_file_content

IMAGE_MIME_PREFIX = "image/"


class UploadLike(Protocol):
    name: str
    type: str | None

    def getvalue(self) -> bytes: ...


@dataclass(frozen=True, slots=True)
class IngestedUpload:
    filename: str
    mime_type: str
    image: UploadedImage | None = None
    text: str | None = None

    @property
    def is_image(self) -> bool:
        return self.image is not None


def is_image_type(mime_type: str | None) -> bool:
    return (mime_type or "").lower().startswith(IMAGE_MIME_PREFIX)


def read_upload(filename: str, mime_type: str | None, payload: bytes) -> IngestedUpload:
    """Classify by declared media type and decode the payload.

    The extension is ignored; a ``.png`` declared as ``text/plain`` is read as text.
    """

    declared = (mime_type or "").strip()
    if is_image_type(declared):
        encoded = base64.b64encode(payload).decode("ascii")
        return IngestedUpload(
            filename=filename,
            mime_type=declared,
            image=UploadedImage(mime_type=declared, data=encoded),
        )

    text = payload.decode("utf-8", errors="replace")
    if text.startswith("\ufeff"):
        text = text[1:]
    return IngestedUpload(filename=filename, mime_type=declared, text=text)


def upload_fingerprint(filename: str, payload: bytes) -> str:
    """Content key for uploads that carry no ``file_id``."""

    digest = hashlib.sha256()
    digest.update(filename.encode("utf-8"))
    digest.update(b"\0")
    digest.update(payload)
    return digest.hexdigest()


def upload_event_id(file: UploadLike, payload: bytes) -> str:
    """Identify one upload event: Streamlit's per-upload ``file_id``, else name and bytes."""

    file_id = getattr(file, "file_id", None)
    if file_id:
        return f"id:{file_id}"
    return f"sha256:{upload_fingerprint(file.name, payload)}"


def apply_upload(upload: IngestedUpload, session: MutableMapping[str, Any] | None = None) -> None:
    """Images are appended; text replaces the previous supplementary document."""

    if upload.image is not None:
        append_uploaded_image(upload.image, session)
    else:
        replace_file_content(upload.text or "", session)


def ingest_file(file: UploadLike, session: MutableMapping[str, Any] | None = None) -> IngestedUpload | None:
    """Ingest a Streamlit upload once; returns ``None`` when it was already applied.

    Streamlit hands the same file back on every rerun while it stays in the
    uploader, so the id of the last applied upload event is remembered.
    """

    payload = file.getvalue()
    if not mark_upload_ingested(upload_event_id(file, payload), session):
        return None

    upload = read_upload(file.name, file.type, payload)
    apply_upload(upload, session)
    return upload


__all__ = [
    "IMAGE_MIME_PREFIX",
    "IngestedUpload",
    "apply_upload",
    "ingest_file",
    "is_image_type",
    "read_upload",
    "upload_event_id",
    "upload_fingerprint",
]
