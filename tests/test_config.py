"""Tests for LanderConfig loading: defaults, env vars, overrides, validation."""

from __future__ import annotations

import pytest

from lander.config import LanderConfig, load_config


def test_defaults():
    config = load_config()
    assert config == LanderConfig()
    assert config.initial_phase == "orbit"
    assert config.steps == 3
    assert config.failure_policy == "continue"
    assert config.fail_actions == ()


def test_env_vars(monkeypatch):
    monkeypatch.setenv("LANDER_STEPS", "5")
    monkeypatch.setenv("LANDER_INITIAL_PHASE", "descending")
    monkeypatch.setenv("LANDER_FAILURE_POLICY", "ABORT")
    monkeypatch.setenv("LANDER_FAIL_ACTIONS", "prepare_descent, confirm_touchdown")
    monkeypatch.setenv("LANDER_EVENT_LOG", "logs/n.jsonl")
    config = load_config()
    assert config.steps == 5
    assert config.initial_phase == "descending"
    assert config.failure_policy == "abort"
    assert config.fail_actions == ("prepare_descent", "confirm_touchdown")
    assert config.event_log_path == "logs/n.jsonl"


def test_overrides_beat_env(monkeypatch):
    monkeypatch.setenv("LANDER_STEPS", "5")
    monkeypatch.setenv("LANDER_FAIL_ACTIONS", "prepare_descent")
    config = load_config(steps=1, fail_actions=[])
    assert config.steps == 1
    assert config.fail_actions == ()


@pytest.mark.parametrize("kwargs", [
    {"initial_phase": "bogus"},
    {"failure_policy": "retry"},
    {"steps": -1},
])
def test_invalid_values_rejected(kwargs):
    with pytest.raises(ValueError):
        load_config(**kwargs)


def test_config_is_frozen():
    config = LanderConfig()
    with pytest.raises(AttributeError):
        config.steps = 10


def test_setup_logging_level():
    import io
    import logging

    from lander.utils.logging import setup_logging

    root = logging.getLogger()
    saved = root.handlers[:], root.level
    try:
        assert setup_logging("debug", stream=io.StringIO()) == logging.DEBUG
        assert setup_logging("nonsense", stream=io.StringIO()) == logging.INFO
    finally:
        root.handlers[:] = saved[0]
        root.setLevel(saved[1])
