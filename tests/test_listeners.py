"""Tests for listener sinks and the JSONL notification log."""

from __future__ import annotations

import json
import logging

import pytest

from lander.supervisor import (
    CallbackListener,
    Controller,
    JsonlListener,
    Listener,
    LoggingListener,
    RecordingListener,
)
from lander.utils.event_logger import NotificationLogger


def test_listener_is_abstract():
    with pytest.raises(TypeError):
        Listener()


def test_logging_listener_prefixes_name(caplog):
    caplog.set_level(logging.INFO, logger="lander")
    LoggingListener("Ground Station").on_notify("Landed: Mission successful")
    assert "Ground Station: Landed: Mission successful" in caplog.messages


def test_recording_listener_clear():
    r = RecordingListener()
    r.on_notify("a")
    r.clear()
    assert r.messages == []


def test_callback_listener_forwards():
    got = []
    CallbackListener(got.append).on_notify("x")
    assert got == ["x"]


class TestJsonlListener:

    def test_writes_one_line_per_notification(self, tmp_path):
        path = tmp_path / "logs" / "notifications.jsonl"
        controller = Controller()
        controller.attach(JsonlListener(path))
        for _ in range(3):
            controller.advance()

        lines = path.read_text(encoding="utf-8").splitlines()
        entries = [json.loads(line) for line in lines]
        assert [e["message"] for e in entries] == [
            "Deployed in Orbit: Preparing for descent",
            "Descending: Engines are operational",
            "Engine Cut Off: At 30 meters",
        ]
        assert all(e["event"] == "notification" for e in entries)
        assert all(e["source"] == "lander" for e in entries)
        assert len({e["session"] for e in entries}) == 1

    def test_path_property(self, tmp_path):
        listener = JsonlListener(tmp_path / "n.jsonl")
        assert listener.path == tmp_path / "n.jsonl"


class TestNotificationLogger:

    def test_read_missing_file(self, tmp_path):
        log = NotificationLogger(tmp_path / "none.jsonl")
        assert log.read() == []

    def test_log_and_read(self, tmp_path):
        log = NotificationLogger(tmp_path / "events.jsonl")
        log.log("custom", {"k": 1})
        log.log_notification("hello", source="test")
        entries = log.read()
        assert entries[0]["event"] == "custom"
        assert entries[0]["k"] == 1
        assert entries[1]["message"] == "hello"
        assert entries[1]["session"] == log.session_id
