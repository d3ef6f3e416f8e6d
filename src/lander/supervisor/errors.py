"""Supervisor exceptions."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .phases import PhaseOutcome


class LanderError(Exception):
    """Base class for supervisor errors."""


class UnknownPhaseError(LanderError):
    """Registry was asked for an identifier it does not know."""

    def __init__(self, identifier: object) -> None:
        super().__init__(f"Unknown phase: {identifier!r}")
        self.identifier = identifier


class PhaseActionError(LanderError):
    """A phase action failed and the controller runs with failure_policy='abort'."""

    def __init__(self, outcome: PhaseOutcome) -> None:
        super().__init__(f"Phase {outcome.phase.value} failed: {outcome.detail}")
        self.outcome = outcome


class ControllerClosedError(LanderError):
    """Controller was used after close()."""
