"""
Placeholder LanderActionClient: log the action line, optionally append it to
JSONL, return success. Actions listed in fail_actions return a failed result
so the recovery path can be demoed without hardware.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, Iterable

from .action_client import LanderActionClient
from .types import ActionResult

logger = logging.getLogger(__name__)

ACTION_NAMES = (
    "prepare_descent",
    "fire_descent_engines",
    "cut_off_engines",
    "confirm_touchdown",
)


class PlaceholderActionClient(LanderActionClient):
    """Simulation: every action logs its console line and returns success."""

    def __init__(
        self,
        log_path: str | Path | None = None,
        fail_actions: Iterable[str] = (),
    ) -> None:
        self._log_path = Path(log_path) if log_path else None
        self._fail_actions = frozenset(fail_actions)
        unknown = self._fail_actions - set(ACTION_NAMES)
        if unknown:
            raise ValueError(f"Unknown action(s) in fail_actions: {sorted(unknown)}")
        self.calls: list[str] = []

    @property
    def fail_actions(self) -> frozenset[str]:
        return self._fail_actions

    def _log_action(self, name: str, args: dict[str, Any], reason: str) -> None:
        if self._log_path is None:
            return
        self._log_path.parent.mkdir(parents=True, exist_ok=True)
        line = json.dumps({"action": name, "args": args, "reason": reason}) + "\n"
        with open(self._log_path, "a", encoding="utf-8") as f:
            f.write(line)

    def _run(self, name: str, args: dict[str, Any], reason: str, console: str) -> ActionResult:
        self.calls.append(name)
        self._log_action(name, args, reason)
        if name in self._fail_actions:
            logger.warning("ACTION[%s] simulated fault (reason=%r)", name, reason)
            return ActionResult(success=False, details=f"simulated fault in {name}", simulated=True)
        logger.info(console)
        return ActionResult(success=True, details={"logged": self._log_path is not None}, simulated=True)

    def prepare_descent(self, reason: str = "") -> ActionResult:
        return self._run(
            "prepare_descent", {}, reason,
            "Lunar Lander is deployed in orbit. Preparing for descent.",
        )

    def fire_descent_engines(self, reason: str = "") -> ActionResult:
        return self._run(
            "fire_descent_engines", {}, reason,
            "Lunar Lander is descending. Engines are operational.",
        )

    def cut_off_engines(self, altitude_m: float, reason: str = "") -> ActionResult:
        return self._run(
            "cut_off_engines", {"altitude_m": altitude_m}, reason,
            f"Engines cut off at {altitude_m:g} meters above the surface. Final descent phase.",
        )

    def confirm_touchdown(self, reason: str = "") -> ActionResult:
        return self._run(
            "confirm_touchdown", {}, reason,
            "Lunar Lander has landed on the surface. Mission successful.",
        )
