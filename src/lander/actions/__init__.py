"""Actions: LanderActionClient interface + PlaceholderActionClient for simulation."""

from .action_client import LanderActionClient
from .placeholders import PlaceholderActionClient
from .types import ActionResult

__all__ = [
    "LanderActionClient",
    "PlaceholderActionClient",
    "ActionResult",
]
