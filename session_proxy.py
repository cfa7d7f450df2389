"""Typed view over Streamlit's session state for the press release wizard."""
from __future__ import annotations

from collections.abc import MutableMapping
from typing import Any


class PressSessionProxy:
    """Wraps ``st.session_state`` (or any dict in tests) with named accessors."""

    def __init__(self, backing: MutableMapping[str, Any]):
        self._backing = backing

    def __getitem__(self, key: str) -> Any:
        return self._backing[key]

    def __setitem__(self, key: str, value: Any) -> None:
        self._backing[key] = value

    def get(self, key: str, default: Any = None) -> Any:
        return self._backing.get(key, default)

    def setdefault(self, key: str, default: Any) -> Any:
        return self._backing.setdefault(key, default)

    def pop(self, key: str, default: Any | None = None) -> Any:
        return self._backing.pop(key, default)

    # Wizard ------------------------------------------------------------------------
    @property
    def step(self) -> int:
        return int(self._backing.get("step", 0) or 0)

    @step.setter
    def step(self, value: int) -> None:
        self._backing["step"] = int(value)

    @property
    def epoch(self) -> int:
        """Bumped on every restart; responses from an older epoch are dropped."""
        return int(self._backing.get("session_epoch", 0) or 0)

    def bump_epoch(self) -> int:
        self._backing["session_epoch"] = self.epoch + 1
        return self.epoch

    # Answers and uploads -------------------------------------------------------------
    def answer(self, field_name: str) -> str:
        return str(self._backing.get(field_name) or "")

    @property
    def file_content(self) -> str:
        return str(self._backing.get("file_content") or "")

    @property
    def image_count(self) -> int:
        return len(self._backing.get("uploaded_images") or [])

    @property
    def upload_error(self) -> str | None:
        return self._backing.get("upload_error")

    @upload_error.setter
    def upload_error(self, message: str | None) -> None:
        self._backing["upload_error"] = message

    # Suggestions ---------------------------------------------------------------------
    def suggestion_for(self, field_name: str) -> str:
        return str((self._backing.get("suggestions") or {}).get(field_name) or "")

    def store_suggestion(self, field_name: str, text: str) -> None:
        suggestions = dict(self._backing.get("suggestions") or {})
        suggestions[field_name] = text
        self._backing["suggestions"] = suggestions


__all__ = ["PressSessionProxy"]
