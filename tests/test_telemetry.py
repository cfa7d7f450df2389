from __future__ import annotations

import logging

import telemetry
from utils.network import client_ip_from_headers


def test_client_ip_prefers_forwarded_for():
    headers = {"X-Forwarded-For": "198.51.100.7, 10.0.0.1", "X-Real-IP": "10.0.0.2"}
    assert client_ip_from_headers(headers) == "198.51.100.7"


def test_client_ip_falls_back_to_other_headers():
    assert client_ip_from_headers({"X-Real-IP": " 10.0.0.2 "}) == "10.0.0.2"
    assert client_ip_from_headers({"CF-Connecting-IP": "192.0.2.1"}) == "192.0.2.1"
    assert client_ip_from_headers({}) is None
    assert client_ip_from_headers(None) is None


def test_emit_log_event_logs_and_forwards(monkeypatch, caplog):
    forwarded: list[dict] = []
    monkeypatch.setattr(telemetry, "log_event", lambda **kwargs: forwarded.append(kwargs) or "entry")
    monkeypatch.setattr(telemetry, "get_client_ip", lambda: "203.0.113.5")

    with caplog.at_level(logging.INFO, logger="musicpr.activity"):
        result = telemetry.emit_log_event(type="wizard", action="wizard start", result="success", params=["1"])

    assert result == "entry"
    assert forwarded == [
        {
            "type": "wizard",
            "action": "wizard start",
            "result": "success",
            "params": ["1"],
            "client_ip": "203.0.113.5",
        }
    ]
    assert "wizard/wizard start -> success" in caplog.text
