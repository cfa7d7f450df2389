"""Network and request related helper functions."""
from __future__ import annotations

from typing import Mapping, Optional

import streamlit as st

_IP_HEADERS = ("X-Real-IP", "CF-Connecting-IP", "Remote-Addr")


def client_ip_from_headers(headers: Mapping[str, str] | None) -> Optional[str]:
    if not headers:
        return None
    forwarded_for = headers.get("X-Forwarded-For")
    if forwarded_for:
        return forwarded_for.split(",")[0].strip() or None
    for header_key in _IP_HEADERS:
        candidate = headers.get(header_key)
        if candidate and candidate.strip():
            return candidate.strip()
    return None


def get_client_ip() -> Optional[str]:
    """Best-effort extraction of the visitor's IP address from the Streamlit request."""
    try:
        headers = st.context.headers
    except Exception:  # pragma: no cover - outside a Streamlit script run
        return None
    return client_ip_from_headers(headers)


__all__ = ["client_ip_from_headers", "get_client_ip"]
