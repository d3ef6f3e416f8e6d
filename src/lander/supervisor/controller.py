"""
Controller: owns the current phase and the attached listeners.

advance() runs the current phase once. The phase notifies through the
controller and returns a PhaseOutcome; the controller then applies the
transition, so a listener never observes a half-swapped phase.

Single-threaded: concurrent advance() callers must be serialized by the owner.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from ..actions import LanderActionClient, PlaceholderActionClient
from .errors import ControllerClosedError, PhaseActionError
from .listeners import Listener
from .phases import OutcomeStatus, Phase, PhaseKind, PhaseOutcome
from .registry import require_phase

if TYPE_CHECKING:
    from ..config import LanderConfig

logger = logging.getLogger(__name__)

FAILURE_POLICIES = ("continue", "abort")

TRANSITION_MARKER = "State transitioned."


class Controller:
    """Mission-phase controller. Build one per mission; tests build as many as they like."""

    def __init__(
        self,
        actions: LanderActionClient | None = None,
        *,
        initial_phase: str | PhaseKind = PhaseKind.ORBIT,
        failure_policy: str = "continue",
    ) -> None:
        if failure_policy not in FAILURE_POLICIES:
            raise ValueError(f"failure_policy must be one of {FAILURE_POLICIES}, got {failure_policy!r}")
        self._actions = actions if actions is not None else PlaceholderActionClient()
        self._failure_policy = failure_policy
        self._listeners: list[Listener] = []
        self._phase: Phase | None = require_phase(initial_phase)
        logger.debug("Controller created in phase %s", self._phase.name)

    @classmethod
    def from_config(cls, config: LanderConfig) -> Controller:
        actions = PlaceholderActionClient(
            log_path=config.action_log_path or None,
            fail_actions=config.fail_actions,
        )
        return cls(
            actions,
            initial_phase=config.initial_phase,
            failure_policy=config.failure_policy,
        )

    # -- state --

    @property
    def phase(self) -> Phase:
        return self._require_open()

    @property
    def actions(self) -> LanderActionClient:
        return self._actions

    @property
    def failure_policy(self) -> str:
        return self._failure_policy

    @property
    def listeners(self) -> tuple[Listener, ...]:
        return tuple(self._listeners)

    @property
    def closed(self) -> bool:
        return self._phase is None

    # -- operations --

    def advance(self) -> PhaseOutcome:
        """Run the current phase once and apply whatever transition it asks for."""
        phase = self._require_open()
        outcome = phase.run(self)
        if outcome.status == OutcomeStatus.TRANSITION:
            if outcome.next_phase is None:
                raise RuntimeError(f"Phase {phase.name} requested a transition without a successor")
            self.set_phase(require_phase(outcome.next_phase))
        elif outcome.status == OutcomeStatus.FAILED:
            logger.warning("Phase %s failed (policy=%s): %s",
                           phase.name, self._failure_policy, outcome.detail)
            if self._failure_policy == "abort":
                raise PhaseActionError(outcome)
        return outcome

    def set_phase(self, phase: Phase) -> None:
        """Replace the current phase; the previous object is dropped."""
        self._require_open()
        if not isinstance(phase, Phase):
            raise TypeError(f"set_phase expects a Phase, got {type(phase).__name__}")
        previous = self._phase
        self._phase = phase
        logger.info(TRANSITION_MARKER)
        logger.debug("Transition %s -> %s", previous.name if previous else "-", phase.name)

    def notify(self, message: str) -> None:
        """Deliver message to every listener, in attachment order."""
        for listener in list(self._listeners):
            listener.on_notify(message)

    def attach(self, listener: Listener) -> None:
        """Append listener. Attaching twice means two deliveries per message."""
        self._listeners.append(listener)

    def detach(self, listener: Listener) -> None:
        """Remove the first attachment of listener. ValueError if not attached."""
        self._listeners.remove(listener)

    def close(self) -> None:
        """Release the current phase and listeners. Safe to call twice."""
        if self._phase is None:
            return
        logger.debug("Controller closed in phase %s", self._phase.name)
        self._phase = None
        self._listeners.clear()

    def _require_open(self) -> Phase:
        if self._phase is None:
            raise ControllerClosedError("Controller is closed")
        return self._phase


# ---------------------------------------------------------------------------
# Process-wide instance
# ---------------------------------------------------------------------------

_instance: Controller | None = None


def get_controller(config: LanderConfig | None = None) -> Controller:
    """Return the process-wide controller, creating it on first call."""
    global _instance
    if _instance is None:
        if config is None:
            from ..config import load_config
            config = load_config()
        _instance = Controller.from_config(config)
        logger.info("Controller initialized in phase %s", _instance.phase.name)
    elif config is not None:
        logger.warning("get_controller: controller already exists; ignoring the config passed in")
    return _instance


def teardown_controller() -> None:
    """Close and forget the process-wide controller."""
    global _instance
    if _instance is not None:
        _instance.close()
        _instance = None
