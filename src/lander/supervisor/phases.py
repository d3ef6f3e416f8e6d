"""Mission phases: ORBIT -> DESCENDING -> ENGINE_CUTOFF -> LANDED.

The phase set is closed. Every per-phase table below is keyed by PhaseKind
and checked at import so a new kind cannot be added without its behavior.
"""

from __future__ import annotations

import logging
import time
from dataclasses import dataclass, field
from enum import Enum
from typing import TYPE_CHECKING, Any, Callable

from ..actions import ActionResult, LanderActionClient

if TYPE_CHECKING:
    from .controller import Controller

logger = logging.getLogger(__name__)

# Engine cut-off height above the surface
CUTOFF_ALTITUDE_M = 30.0


class PhaseKind(Enum):
    ORBIT = "orbit"
    DESCENDING = "descending"
    ENGINE_CUTOFF = "engine-cutoff"
    LANDED = "landed"


PHASE_ORDER = [
    PhaseKind.ORBIT,
    PhaseKind.DESCENDING,
    PhaseKind.ENGINE_CUTOFF,
    PhaseKind.LANDED,
]

PHASE_LABELS: dict[PhaseKind, str] = {
    PhaseKind.ORBIT: "Deployed in Orbit",
    PhaseKind.DESCENDING: "Descending",
    PhaseKind.ENGINE_CUTOFF: "Engine Cut Off",
    PhaseKind.LANDED: "Landed",
}

# Notification sent to listeners when the phase action succeeds
PHASE_MESSAGES: dict[PhaseKind, str] = {
    PhaseKind.ORBIT: "Deployed in Orbit: Preparing for descent",
    PhaseKind.DESCENDING: "Descending: Engines are operational",
    PhaseKind.ENGINE_CUTOFF: "Engine Cut Off: At 30 meters",
    PhaseKind.LANDED: "Landed: Mission successful",
}

# Notification sent instead when the phase action or its notification fails
PHASE_FAILURE_MESSAGES: dict[PhaseKind, str] = {
    PhaseKind.ORBIT: "Error while deploying in orbit.",
    PhaseKind.DESCENDING: "Error during descent.",
    PhaseKind.ENGINE_CUTOFF: "Error during engine cut-off.",
    PhaseKind.LANDED: "Error during landing phase.",
}

PHASE_ACTIONS: dict[PhaseKind, Callable[[LanderActionClient], ActionResult]] = {
    PhaseKind.ORBIT: lambda a: a.prepare_descent(reason="orbit"),
    PhaseKind.DESCENDING: lambda a: a.fire_descent_engines(reason="descending"),
    PhaseKind.ENGINE_CUTOFF: lambda a: a.cut_off_engines(CUTOFF_ALTITUDE_M, reason="engine_cutoff"),
    PhaseKind.LANDED: lambda a: a.confirm_touchdown(reason="landed"),
}


def _check_tables() -> None:
    for name, table in (
        ("PHASE_LABELS", PHASE_LABELS),
        ("PHASE_MESSAGES", PHASE_MESSAGES),
        ("PHASE_FAILURE_MESSAGES", PHASE_FAILURE_MESSAGES),
        ("PHASE_ACTIONS", PHASE_ACTIONS),
    ):
        missing = set(PhaseKind) - set(table)
        if missing:
            raise RuntimeError(f"{name} missing phases: {sorted(k.value for k in missing)}")
    if PHASE_ORDER != list(PhaseKind):
        raise RuntimeError("PHASE_ORDER must list every PhaseKind once, in mission order")


_check_tables()


def next_phase(kind: PhaseKind) -> PhaseKind | None:
    """Return next phase in sequence, or None if LANDED."""
    i = PHASE_ORDER.index(kind)
    if i + 1 < len(PHASE_ORDER):
        return PHASE_ORDER[i + 1]
    return None


class OutcomeStatus(Enum):
    TRANSITION = "transition"
    REMAIN = "remain"  # terminal phase
    FAILED = "failed"  # action or notification failed; phase stays current


@dataclass
class PhaseOutcome:
    """Structured result of one Phase.run()."""
    status: OutcomeStatus
    phase: PhaseKind
    next_phase: PhaseKind | None = None
    detail: str = ""

    @property
    def ok(self) -> bool:
        return self.status != OutcomeStatus.FAILED

    def to_dict(self) -> dict[str, Any]:
        return {
            "status": self.status.value,
            "phase": self.phase.value,
            "next_phase": self.next_phase.value if self.next_phase else None,
            "detail": self.detail,
        }


@dataclass(eq=False)
class Phase:
    """
    One mission stage. Built only by the registry; owned by the controller
    while current. Identity is per instance: two phases of the same kind are
    different objects.
    """
    kind: PhaseKind
    created_at: float = field(default_factory=time.monotonic)

    @property
    def name(self) -> str:
        return self.kind.value

    @property
    def label(self) -> str:
        return PHASE_LABELS[self.kind]

    @property
    def is_terminal(self) -> bool:
        return next_phase(self.kind) is None

    def run(self, controller: Controller) -> PhaseOutcome:
        """
        Run the phase action, notify through the controller, then report which
        phase (if any) should follow. The transition itself is left to the
        controller, so listeners always see this phase's message before the swap.

        A failure in the action or in delivering the phase's message becomes
        the phase's failure notification and a FAILED outcome. An error raised
        while delivering the failure notification propagates.
        """
        try:
            result = PHASE_ACTIONS[self.kind](controller.actions)
            if result.success:
                controller.notify(PHASE_MESSAGES[self.kind])
        except Exception as e:
            logger.exception("Phase %s raised", self.name)
            result = ActionResult(success=False, details=f"{type(e).__name__}: {e}")

        if not result.success:
            detail = str(result.details or "action failed")
            logger.warning("Phase %s failed: %s", self.name, detail)
            controller.notify(PHASE_FAILURE_MESSAGES[self.kind])
            return PhaseOutcome(OutcomeStatus.FAILED, self.kind, detail=detail)

        nxt = next_phase(self.kind)
        if nxt is None:
            return PhaseOutcome(OutcomeStatus.REMAIN, self.kind)
        return PhaseOutcome(OutcomeStatus.TRANSITION, self.kind, next_phase=nxt)

    def __repr__(self) -> str:
        return f"Phase({self.name!r})"
