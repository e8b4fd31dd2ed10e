"""Final-state and success evaluation.

A pure predicate over registry contents, bridge capacity and torch side.
"""

from __future__ import annotations

from enum import Enum
from typing import Optional

from bridge_torch.config.defaults import MIN_BRIDGE_CAPACITY
from bridge_torch.registry import ActorRegistry
from bridge_torch.sides import Side


class TerminationReason(Enum):
    """Why no further turns will be scheduled."""

    SUCCESS = "success"
    CAPACITY_DEADLOCK = "capacity_deadlock"
    TORCH_STRANDED = "torch_stranded"


class TerminationEvaluator:
    """Decides whether the puzzle has reached a final state."""

    def is_successful(self, registry: ActorRegistry) -> bool:
        """Everyone is at the end (vacuously true with no actors)."""
        return len(registry.at_start()) == 0

    def reason(
        self,
        registry: ActorRegistry,
        bridge_capacity: int,
        torch_side: Side,
    ) -> Optional[TerminationReason]:
        """Return the terminal condition that holds, or None if play continues."""
        if self.is_successful(registry):
            return TerminationReason.SUCCESS
        # Nobody can ever move the remainder across
        if bridge_capacity < MIN_BRIDGE_CAPACITY and len(registry.at_start()) > 1:
            return TerminationReason.CAPACITY_DEADLOCK
        # Nobody can ever bring the torch back
        if torch_side is Side.END and len(registry.at_end()) == 0:
            return TerminationReason.TORCH_STRANDED
        return None

    def is_final(self, registry: ActorRegistry, bridge_capacity: int, torch_side: Side) -> bool:
        return self.reason(registry, bridge_capacity, torch_side) is not None
