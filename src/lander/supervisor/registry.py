"""Phase registry: the only place Phase objects are constructed."""

from __future__ import annotations

import logging

from .errors import UnknownPhaseError
from .phases import Phase, PhaseKind

logger = logging.getLogger(__name__)

PHASE_IDENTIFIERS: tuple[str, ...] = tuple(k.value for k in PhaseKind)

_BY_IDENTIFIER: dict[str, PhaseKind] = {k.value: k for k in PhaseKind}


def create_phase(identifier: str | PhaseKind) -> Phase | None:
    """Return a new Phase for identifier, or None if it names no phase."""
    if isinstance(identifier, PhaseKind):
        kind: PhaseKind | None = identifier
    else:
        kind = _BY_IDENTIFIER.get(identifier)
    if kind is None:
        logger.debug("create_phase: no phase named %r", identifier)
        return None
    return Phase(kind)


def require_phase(identifier: str | PhaseKind) -> Phase:
    """Like create_phase, but raise UnknownPhaseError instead of returning None."""
    phase = create_phase(identifier)
    if phase is None:
        raise UnknownPhaseError(identifier)
    return phase
