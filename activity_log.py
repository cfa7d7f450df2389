"""Firestore-backed activity log for wizard and generation events.

Events are fire-and-forget. When Firestore is unreachable or not configured the
log switches itself off for the rest of the process and records why; the app
keeps working without it.
"""
from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from datetime import datetime
from functools import lru_cache
from typing import Any, Mapping, Sequence
from zoneinfo import ZoneInfo

from google.cloud import firestore

from google_credentials import get_service_account_credentials

logger = logging.getLogger(__name__)

LOCAL_TZ = ZoneInfo("Europe/Amsterdam")
PARAM_SLOTS = 5
DEFAULT_COLLECTION = "activity_logs"

RESULT_SUCCESS = "success"
RESULT_FAIL = "fail"
_FAILURE_RESULTS = frozenset({"", "fail", "failed", "failure", "error"})
_FALSE_VALUES = frozenset({"0", "false", "no", "off"})


@dataclass(frozen=True, slots=True)
class ActivityLogConfig:
    enabled: bool = True
    collection: str = DEFAULT_COLLECTION
    project_id: str | None = None

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> "ActivityLogConfig":
        env = os.environ if environ is None else environ
        return cls(
            enabled=(env.get("ACTIVITY_LOG_ENABLED") or "true").strip().lower() not in _FALSE_VALUES,
            collection=(env.get("FIRESTORE_ACTIVITY_COLLECTION") or "").strip() or DEFAULT_COLLECTION,
            project_id=(env.get("GCP_PROJECT_ID") or "").strip() or None,
        )


CONFIG = ActivityLogConfig.from_env()


@dataclass(slots=True)
class _LogState:
    active: bool = False
    disabled_reason: str | None = None


_state = _LogState()


@dataclass(frozen=True, slots=True)
class ActivityLogEntry:
    """One persisted event; ``params`` always holds ``PARAM_SLOTS`` values."""

    id: str
    type: str
    action: str
    result: str
    client_ip: str | None
    timestamp: datetime
    params: tuple[str | None, ...]
    metadata: Mapping[str, Any] | None = None

    def to_document(self) -> dict[str, Any]:
        document: dict[str, Any] = {
            "type": self.type,
            "action": self.action,
            "result": self.result,
            "client_ip": self.client_ip,
            "timestamp": self.timestamp,
            "timestamp_iso": self.timestamp.isoformat(),
        }
        for idx, value in enumerate(self.params, start=1):
            document[f"param{idx}"] = value
        if self.metadata:
            document["metadata"] = dict(self.metadata)
        return document


@lru_cache(maxsize=1)
def _get_firestore_client():
    credentials = get_service_account_credentials()
    project_id = CONFIG.project_id or getattr(credentials, "project_id", None)
    if not project_id:
        raise RuntimeError(
            "No Firestore project for activity logging; set GCP_PROJECT_ID or provide service-account credentials."
        )

    client_kwargs: dict[str, Any] = {"project": project_id}
    if credentials is not None:
        client_kwargs["credentials"] = credentials
    return firestore.Client(**client_kwargs)


def _collection():
    return _get_firestore_client().collection(CONFIG.collection)


def _deactivate(reason: str) -> None:
    if _state.active:
        logger.warning("Activity logging switched off: %s", reason)
    _state.active = False
    _state.disabled_reason = reason


def init_activity_log() -> None:
    """Check that the Firestore collection is reachable and enable logging."""

    if not CONFIG.enabled:
        _deactivate("ACTIVITY_LOG_ENABLED is false")
        return

    try:
        list(_collection().limit(1).stream())
    except Exception as exc:  # pragma: no cover - initialization failure surfaced via status
        _deactivate(str(exc))
        logger.info("Activity logging unavailable: %s", exc)
        return

    _state.active = True
    _state.disabled_reason = None
    logger.debug("Activity logging to Firestore collection '%s'", CONFIG.collection)


def is_activity_logging_enabled() -> bool:
    return _state.active


def get_activity_logging_status() -> tuple[bool, str | None]:
    return _state.active, _state.disabled_reason


def _clean(value: Any) -> str:
    return "" if value is None else str(value).strip()


def normalize_result(result: Any) -> str:
    return RESULT_FAIL if _clean(result).lower() in _FAILURE_RESULTS else RESULT_SUCCESS


def pad_params(params: Sequence[Any] | None) -> tuple[str | None, ...]:
    values = [_clean(value) or None for value in list(params or [])[:PARAM_SLOTS]]
    values.extend([None] * (PARAM_SLOTS - len(values)))
    return tuple(values)


def log_event(
    *,
    type: str,
    action: str,
    result: str,
    params: Sequence[Any] | None = None,
    client_ip: str | None = None,
    metadata: Mapping[str, Any] | None = None,
) -> ActivityLogEntry | None:
    """Write one event; returns ``None`` when logging is off or the write fails."""

    if not _state.active:
        return None

    timestamp = datetime.now(LOCAL_TZ)
    entry_fields = dict(
        type=_clean(type) or "unknown",
        action=_clean(action) or "unknown",
        result=normalize_result(result),
        client_ip=_clean(client_ip) or None,
        timestamp=timestamp,
        params=pad_params(params),
        metadata=dict(metadata) if metadata else None,
    )

    try:
        doc_ref = _collection().document()
        entry = ActivityLogEntry(id=str(getattr(doc_ref, "id", "")), **entry_fields)
        doc_ref.set(entry.to_document())
    except Exception as exc:  # pragma: no cover - avoid hard failure path in UI
        _deactivate(str(exc))
        logger.warning("Failed to log activity event %s/%s: %s", type, action, exc)
        return None

    return entry


__all__ = [
    "ActivityLogConfig",
    "ActivityLogEntry",
    "CONFIG",
    "LOCAL_TZ",
    "PARAM_SLOTS",
    "get_activity_logging_status",
    "init_activity_log",
    "is_activity_logging_enabled",
    "log_event",
    "normalize_result",
    "pad_params",
]
