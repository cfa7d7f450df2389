"""In-memory downloads for generated artifacts."""
from __future__ import annotations

import base64
import binascii
import io
import re
from dataclasses import dataclass
from urllib.parse import unquote_to_bytes

from PIL import Image, UnidentifiedImageError

from app_constants import POSTER_FILENAME, WEBSITE_FILENAME

_DATA_URI_RE = re.compile(r"^data:(?P<mime>[\w.+-]+/[\w.+-]+)?(?P<params>(?:;[^,;]*)*?),(?P<payload>.*)$", re.DOTALL)


@dataclass(frozen=True, slots=True)
class DownloadPayload:
    data: bytes
    file_name: str
    mime: str


def decode_data_uri(uri: str) -> tuple[str, bytes]:
    """Split a ``data:`` URI into ``(mime, bytes)``; raises ``ValueError`` on bad input."""

    match = _DATA_URI_RE.match(uri or "")
    if not match:
        raise ValueError("not a data URI")
    mime = match.group("mime") or "text/plain"
    payload = match.group("payload")
    if ";base64" in (match.group("params") or ""):
        try:
            return mime, base64.b64decode(payload, validate=True)
        except binascii.Error as exc:
            raise ValueError(f"invalid base64 payload: {exc}") from exc
    return mime, unquote_to_bytes(payload)


def _to_png(image_bytes: bytes) -> bytes:
    try:
        with Image.open(io.BytesIO(image_bytes)) as img:
            if img.mode not in ("RGB", "RGBA", "L", "LA", "P"):
                img = img.convert("RGBA")
            buffer = io.BytesIO()
            img.save(buffer, format="PNG")
    except (UnidentifiedImageError, OSError) as exc:
        raise ValueError(f"poster is not a readable image: {exc}") from exc
    return buffer.getvalue()


def poster_download(data_uri: str) -> DownloadPayload:
    """Poster downloads are always PNG, whatever format the model returned."""

    mime, image_bytes = decode_data_uri(data_uri)
    if mime != "image/png":
        image_bytes = _to_png(image_bytes)
    return DownloadPayload(data=image_bytes, file_name=POSTER_FILENAME, mime="image/png")


def website_download(html_doc: str) -> DownloadPayload:
    return DownloadPayload(data=html_doc.encode("utf-8"), file_name=WEBSITE_FILENAME, mime="text/html")


def _slugify_filename(value: str) -> str:
    value = value.lower().strip()
    value = re.sub(r"[^a-z0-9]+", "-", value)
    slug = value.strip("-")
    return slug or "persbericht"


def press_release_headline(markdown_text: str) -> str | None:
    for line in (markdown_text or "").splitlines():
        stripped = line.strip()
        if stripped.startswith("# "):
            return re.sub(r"[*_`]", "", stripped[2:]).strip() or None
    return None


def press_release_download(markdown_text: str) -> DownloadPayload:
    slug = _slugify_filename(press_release_headline(markdown_text) or "")
    return DownloadPayload(
        data=(markdown_text or "").encode("utf-8"),
        file_name=f"{slug}.md",
        mime="text/markdown",
    )


__all__ = [
    "DownloadPayload",
    "decode_data_uri",
    "poster_download",
    "press_release_download",
    "press_release_headline",
    "website_download",
]
