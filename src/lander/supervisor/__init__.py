"""Supervisor: phases, registry, listeners and the mission-phase controller."""

from .controller import Controller, get_controller, teardown_controller
from .errors import ControllerClosedError, LanderError, PhaseActionError, UnknownPhaseError
from .listeners import CallbackListener, JsonlListener, Listener, LoggingListener, RecordingListener
from .phases import (
    PHASE_LABELS,
    PHASE_MESSAGES,
    PHASE_ORDER,
    OutcomeStatus,
    Phase,
    PhaseKind,
    PhaseOutcome,
    next_phase,
)
from .registry import PHASE_IDENTIFIERS, create_phase, require_phase

__all__ = [
    "Controller",
    "get_controller",
    "teardown_controller",
    "LanderError",
    "UnknownPhaseError",
    "PhaseActionError",
    "ControllerClosedError",
    "Listener",
    "LoggingListener",
    "RecordingListener",
    "CallbackListener",
    "JsonlListener",
    "Phase",
    "PhaseKind",
    "PhaseOutcome",
    "OutcomeStatus",
    "PHASE_ORDER",
    "PHASE_LABELS",
    "PHASE_MESSAGES",
    "next_phase",
    "PHASE_IDENTIFIERS",
    "create_phase",
    "require_phase",
]
