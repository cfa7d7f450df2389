"""Telemetry helpers around the activity log module."""
from __future__ import annotations

import logging
from typing import Any, Sequence

from activity_log import log_event
from utils.network import get_client_ip

logger = logging.getLogger("musicpr.activity")


def emit_log_event(
    *,
    type: str,
    action: str,
    result: str,
    params: Sequence[str | None] | None = None,
    client_ip: str | None = None,
) -> Any:
    """Record an activity event in the process log and, when enabled, in Firestore."""

    resolved_ip = client_ip if client_ip is not None else get_client_ip()
    logger.info("%s/%s -> %s %s", type, action, result, list(params or []))
    return log_event(
        type=type,
        action=action,
        result=result,
        params=params,
        client_ip=resolved_ip,
    )


__all__ = ["emit_log_event"]
