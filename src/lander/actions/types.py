"""Action result type. Same for placeholders and real flight software."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any


@dataclass
class ActionResult:
    """Result of an action call."""

    success: bool
    details: str | dict[str, Any] | None = None
    simulated: bool = True  # False when real hardware was used
