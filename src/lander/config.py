"""Lander configuration - dataclass, env vars, and CLI overrides."""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import find_dotenv, load_dotenv

from .supervisor.controller import FAILURE_POLICIES
from .supervisor.registry import PHASE_IDENTIFIERS

# config.py lives in src/lander/ -> 3 levels up = project root
_ROOT = Path(__file__).resolve().parent.parent.parent
load_dotenv(_ROOT / ".env")
load_dotenv(find_dotenv(usecwd=True))  # .env in the working directory, if any


def _env(key: str, default: str) -> str:
    """Read env var with default."""
    return os.environ.get(key, default)


def load_config(
    *,
    log_level: str | None = None,
    initial_phase: str | None = None,
    steps: int | None = None,
    failure_policy: str | None = None,
    event_log_path: str | None = None,
    action_log_path: str | None = None,
    fail_actions: list[str] | tuple[str, ...] | None = None,
) -> LanderConfig:
    """Load config. CLI/args override env vars."""
    def _str(k: str, d: str, override: str | None) -> str:
        return override if override is not None else _env(k, d)

    def _int(k: str, d: int, override: int | None) -> int:
        if override is not None:
            return override
        return int(_env(k, str(d)))

    if fail_actions is None:
        raw = _env("LANDER_FAIL_ACTIONS", "")
        fail_actions = [a.strip() for a in raw.split(",") if a.strip()]

    config = LanderConfig(
        log_level=_str("LANDER_LOG_LEVEL", "INFO", log_level),
        initial_phase=_str("LANDER_INITIAL_PHASE", "orbit", initial_phase).strip(),
        steps=_int("LANDER_STEPS", 3, steps),
        failure_policy=_str("LANDER_FAILURE_POLICY", "continue", failure_policy).strip().lower(),
        event_log_path=_str("LANDER_EVENT_LOG", "", event_log_path),
        action_log_path=_str("LANDER_ACTION_LOG", "", action_log_path),
        fail_actions=tuple(fail_actions),
    )
    config.validate()
    return config


@dataclass(frozen=True)
class LanderConfig:
    """Configuration for the lander supervisor and its CLI driver."""

    # Log level for setup_logging
    log_level: str = "INFO"

    # Phase the controller starts in (one of PHASE_IDENTIFIERS)
    initial_phase: str = "orbit"

    # Number of advance() calls the driver makes
    steps: int = 3

    # continue: notify and stay in the failed phase | abort: notify, then raise PhaseActionError
    failure_policy: str = "continue"

    # JSONL file for notifications (empty = no JSONL listener)
    event_log_path: str = ""

    # JSONL file for placeholder action calls (empty = log only)
    action_log_path: str = ""

    # Placeholder actions that should fail (demo of the recovery path)
    fail_actions: tuple[str, ...] = ()

    def validate(self) -> None:
        if self.initial_phase not in PHASE_IDENTIFIERS:
            raise ValueError(
                f"initial_phase must be one of {PHASE_IDENTIFIERS}, got {self.initial_phase!r}"
            )
        if self.failure_policy not in FAILURE_POLICIES:
            raise ValueError(
                f"failure_policy must be one of {FAILURE_POLICIES}, got {self.failure_policy!r}"
            )
        if self.steps < 0:
            raise ValueError(f"steps must be >= 0, got {self.steps}")
