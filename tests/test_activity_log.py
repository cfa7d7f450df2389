from __future__ import annotations

import importlib
import sys
from types import SimpleNamespace
from zoneinfo import ZoneInfo


def _reload_activity_log(monkeypatch, **env):
    for key, value in env.items():
        if value is None:
            monkeypatch.delenv(key, raising=False)
        else:
            monkeypatch.setenv(key, value)
    sys.modules.pop("activity_log", None)
    module = importlib.import_module("activity_log")
    return module


class FakeDocumentRef:
    def __init__(self, store: list[tuple[str, dict]], doc_id: str):
        self._store = store
        self.id = doc_id

    def set(self, data: dict) -> None:
        self._store.append((self.id, data))


class FakeQuery:
    def stream(self):
        return []


class FakeCollection:
    def __init__(self, store: list[tuple[str, dict]]):
        self._store = store
        self._counter = 0

    def document(self):
        self._counter += 1
        return FakeDocumentRef(self._store, f"doc{self._counter}")

    def limit(self, *_):
        return FakeQuery()


def _install_fake_firestore(monkeypatch, module, entries: list[tuple[str, dict]], captured: dict):
    collection = FakeCollection(entries)

    class FakeClient:
        def __init__(self, **kwargs):
            captured.update(kwargs)

        def collection(self, name):
            captured["collection"] = name
            return collection

    monkeypatch.setattr(module, "firestore", SimpleNamespace(Client=FakeClient), raising=False)
    monkeypatch.setattr(module, "get_service_account_credentials", lambda: None)
    module._get_firestore_client.cache_clear()  # type: ignore[attr-defined]


def test_activity_logging_disabled_by_env(monkeypatch):
    module = _reload_activity_log(monkeypatch, ACTIVITY_LOG_ENABLED="false")
    module.init_activity_log()
    assert module.is_activity_logging_enabled() is False
    assert module.get_activity_logging_status() == (False, "ACTIVITY_LOG_ENABLED is false")
    assert module.log_event(type="wizard", action="wizard start", result="success") is None


def test_activity_logging_disabled_without_project(monkeypatch):
    module = _reload_activity_log(monkeypatch, ACTIVITY_LOG_ENABLED="true", GCP_PROJECT_ID=None)
    monkeypatch.setattr(module, "get_service_account_credentials", lambda: None)
    module._get_firestore_client.cache_clear()  # type: ignore[attr-defined]

    module.init_activity_log()

    enabled, reason = module.get_activity_logging_status()
    assert enabled is False
    assert "GCP_PROJECT_ID" in (reason or "")


def test_activity_logging_emits_documents(monkeypatch):
    entries: list[tuple[str, dict]] = []
    captured: dict = {}
    module = _reload_activity_log(
        monkeypatch,
        ACTIVITY_LOG_ENABLED="true",
        GCP_PROJECT_ID="demo-project",
        FIRESTORE_ACTIVITY_COLLECTION="musicpr_events",
    )
    _install_fake_firestore(monkeypatch, module, entries, captured)

    module.init_activity_log()
    assert module.is_activity_logging_enabled() is True
    assert captured["project"] == "demo-project"
    assert captured["collection"] == "musicpr_events"

    entry = module.log_event(
        type="artifact",
        action="press release generate",
        result="success",
        params=[" 1200 ", "2", "", "x", "y", "dropped"],
        client_ip="203.0.113.9",
    )
    assert entry is not None
    assert entry.type == "artifact"
    assert entry.timestamp.tzinfo == ZoneInfo("Europe/Amsterdam")
    assert entry.params == ("1200", "2", None, "x", "y")

    assert entries, "expected activity payload to be written"
    doc_id, payload = entries[0]
    assert doc_id == "doc1"
    assert payload["action"] == "press release generate"
    assert payload["client_ip"] == "203.0.113.9"
    assert payload["param1"] == "1200"
    assert payload["param3"] is None
    assert "param6" not in payload


def test_result_values_are_normalized(monkeypatch):
    entries: list[tuple[str, dict]] = []
    module = _reload_activity_log(monkeypatch, ACTIVITY_LOG_ENABLED="true", GCP_PROJECT_ID="demo-project")
    _install_fake_firestore(monkeypatch, module, entries, {})
    module.init_activity_log()

    module.log_event(type="upload", action="file upload", result="ERROR")
    module.log_event(type="upload", action="file upload", result="ok")

    assert [payload["result"] for _, payload in entries] == ["fail", "success"]


def test_config_from_env_defaults_and_overrides(monkeypatch):
    module = _reload_activity_log(monkeypatch)
    assert module.ActivityLogConfig.from_env({}) == module.ActivityLogConfig()

    config = module.ActivityLogConfig.from_env(
        {"ACTIVITY_LOG_ENABLED": " Off ", "FIRESTORE_ACTIVITY_COLLECTION": "  ", "GCP_PROJECT_ID": " p1 "}
    )
    assert config.enabled is False
    assert config.collection == "activity_logs"
    assert config.project_id == "p1"
