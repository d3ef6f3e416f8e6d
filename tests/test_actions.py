"""Tests for the placeholder action client."""

from __future__ import annotations

import json
import logging

import pytest

from lander.actions import ActionResult, LanderActionClient, PlaceholderActionClient


def test_interface_is_abstract():
    with pytest.raises(TypeError):
        LanderActionClient()


def test_every_action_succeeds_by_default(caplog):
    caplog.set_level(logging.INFO, logger="lander")
    client = PlaceholderActionClient()
    results = [
        client.prepare_descent(),
        client.fire_descent_engines(),
        client.cut_off_engines(30.0),
        client.confirm_touchdown(),
    ]
    assert all(isinstance(r, ActionResult) and r.success and r.simulated for r in results)
    assert client.calls == ["prepare_descent", "fire_descent_engines", "cut_off_engines", "confirm_touchdown"]
    assert "Engines cut off at 30 meters above the surface. Final descent phase." in caplog.messages
    assert "Lunar Lander has landed on the surface. Mission successful." in caplog.messages


def test_fail_actions(tmp_path):
    client = PlaceholderActionClient(fail_actions=["confirm_touchdown"])
    result = client.confirm_touchdown(reason="landed")
    assert not result.success
    assert "confirm_touchdown" in result.details
    assert client.prepare_descent().success


def test_unknown_fail_action_rejected():
    with pytest.raises(ValueError):
        PlaceholderActionClient(fail_actions=["self_destruct"])


def test_jsonl_action_log(tmp_path):
    path = tmp_path / "actions" / "calls.jsonl"
    client = PlaceholderActionClient(log_path=path)
    client.cut_off_engines(30.0, reason="engine_cutoff")
    entry = json.loads(path.read_text(encoding="utf-8").strip())
    assert entry == {"action": "cut_off_engines", "args": {"altitude_m": 30.0}, "reason": "engine_cutoff"}
