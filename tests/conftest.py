"""Shared fixtures: isolate env vars and the process-wide controller."""

from __future__ import annotations

import os

import pytest

from lander.actions import ActionResult, PlaceholderActionClient
from lander.supervisor import teardown_controller


@pytest.fixture(autouse=True)
def clean_lander_env(monkeypatch):
    for key in list(os.environ):
        if key.startswith("LANDER_"):
            monkeypatch.delenv(key, raising=False)


@pytest.fixture(autouse=True)
def reset_process_controller():
    teardown_controller()
    yield
    teardown_controller()


class ExplodingActionClient(PlaceholderActionClient):
    """Placeholder whose descent engines raise instead of returning a result."""

    def fire_descent_engines(self, reason: str = "") -> ActionResult:
        self.calls.append("fire_descent_engines")
        raise RuntimeError("engine bus timeout")


@pytest.fixture
def exploding_actions():
    return ExplodingActionClient()
