"""
LanderActionClient: interface for the per-phase actions of the lander.
The placeholder implementation only logs; a real client drives the vehicle.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from .types import ActionResult


class LanderActionClient(ABC):
    """
    Action layer interface. All methods return ActionResult.
    Implemented in placeholders.py (simulation) or by a real flight client.
    """

    @abstractmethod
    def prepare_descent(self, reason: str = "") -> ActionResult:
        """Orbit: configure the vehicle for descent."""
        ...

    @abstractmethod
    def fire_descent_engines(self, reason: str = "") -> ActionResult:
        """Descending: bring the descent engines up."""
        ...

    @abstractmethod
    def cut_off_engines(self, altitude_m: float, reason: str = "") -> ActionResult:
        """Engine cut-off at altitude_m above the surface."""
        ...

    @abstractmethod
    def confirm_touchdown(self, reason: str = "") -> ActionResult:
        """Landed: confirm the vehicle is on the surface."""
        ...
