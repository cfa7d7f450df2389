"""Service account lookup for the Firestore activity log."""
from __future__ import annotations

import json
import logging
import os
from functools import lru_cache
from pathlib import Path
from typing import Any, Iterator, Mapping

from google.auth.credentials import Credentials
from google.oauth2 import service_account

logger = logging.getLogger(__name__)

_SECRET_KEYS = ("google_credentials", "gcp_service_account", "service_account")
_ENV_JSON_KEYS = ("GOOGLE_CREDENTIALS_JSON", "GOOGLE_APPLICATION_CREDENTIALS_JSON", "GCP_SERVICE_ACCOUNT_INFO")
_REQUIRED_FIELDS = {"type", "project_id", "private_key", "client_email"}
_DEFAULT_CREDENTIAL_FILE = Path("google-credential.json")


def _as_service_account_info(candidate: Any) -> dict[str, Any] | None:
    """Accept a mapping or a JSON string; return it only if it looks like a service account."""

    if candidate is None:
        return None
    if isinstance(candidate, str):
        candidate = candidate.strip()
        if not candidate:
            return None
        try:
            candidate = json.loads(candidate)
        except ValueError:
            return None
    if hasattr(candidate, "keys") and hasattr(candidate, "__getitem__"):
        info = {str(key): candidate[key] for key in candidate.keys()}
        if _REQUIRED_FIELDS.issubset(info.keys()):
            return info
    return None


def _infos_from_env() -> Iterator[dict[str, Any]]:
    for env_key in _ENV_JSON_KEYS:
        info = _as_service_account_info(os.getenv(env_key))
        if info:
            yield info


def _infos_from_streamlit() -> Iterator[dict[str, Any]]:
    import streamlit as st

    try:
        secrets: Mapping[str, Any] = st.secrets
        sections = [secrets.get(key) for key in _SECRET_KEYS]
        sections.append(secrets.get("GOOGLE_CREDENTIALS_JSON"))
        sections.append(secrets)
    except Exception as exc:  # pragma: no cover - no secrets.toml configured
        logger.debug("Streamlit secrets unavailable: %s", exc)
        return

    for section in sections:
        info = _as_service_account_info(section)
        if info:
            yield info


def _credentials_from_file() -> Credentials | None:
    paths: list[Path] = []
    env_path = os.getenv("GOOGLE_APPLICATION_CREDENTIALS")
    if env_path:
        paths.append(Path(env_path).expanduser())
    paths.append(_DEFAULT_CREDENTIAL_FILE)

    for path in paths:
        if not path.is_file():
            continue
        try:
            return service_account.Credentials.from_service_account_file(str(path))
        except (ValueError, OSError) as exc:
            logger.warning("Failed to load Google credentials from %s: %s", path, exc)
    return None


@lru_cache(maxsize=1)
def get_service_account_credentials() -> Credentials | None:
    """Return service-account credentials from a file, env JSON, or Streamlit secrets."""

    credentials = _credentials_from_file()
    if credentials is not None:
        return credentials

    for source in (_infos_from_env, _infos_from_streamlit):
        for info in source():
            try:
                return service_account.Credentials.from_service_account_info(info)
            except ValueError as exc:
                logger.warning("Failed to construct Google credentials from mapping: %s", exc)
    return None


__all__ = ["get_service_account_credentials"]
