"""Turn advancement: who crosses the bridge next.

This is a deterministic greedy heuristic, not an optimal solver.

Standard rule
-------------
The fastest actor on the torch side always crosses. Leaving ``start`` with
company available, the slowest actors fill the remaining capacity. Leaving
``end``, the fastest returns alone: anyone carried back would undo crossing
time already banked.

First-turn rule
---------------
When the puzzle begins with somebody already on the far side (and the torch
side holds more actors than fit on the bridge), the standard rule is not
always best, since some crossing time is already "secured" over there. Two
candidate plans are scored as ``secured - elapsed``:

    Plan A (slowest only):
        secured = cap slowest + everyone on far side - fastest of that pool
        elapsed = slowest + fastest of that pool (who ferries the torch back)

    Plan B (fastest with the slowest):
        secured = (cap - 1) slowest + everyone on far side
        elapsed = slowest + local fastest (who returns)

Plan A runs only when it scores strictly higher. After the first turn the
standard rule always applies.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from typing import List, Optional, Sequence, Tuple

from bridge_torch.actors import Actor, CrossDuration
from bridge_torch.registry import ActorRegistry
from bridge_torch.sides import Side

logger = logging.getLogger(__name__)


class SelectionRule(Enum):
    """Which rule selected a crossing group."""

    STANDARD = "standard"
    SLOWEST_ONLY = "slowest_only"  # first-turn plan A
    FASTEST_WITH_SLOWEST = "fastest_with_slowest"  # first-turn plan B


@dataclass(frozen=True)
class PlanEstimate:
    """Secured vs. elapsed time for one first-turn candidate."""

    secured: CrossDuration
    elapsed: CrossDuration

    @property
    def net(self) -> CrossDuration:
        return self.secured - self.elapsed


@dataclass(frozen=True)
class CrossingPlan:
    """The group chosen for one turn."""

    actor_ids: Tuple[int, ...]
    origin: Side
    destination: Side
    cost: CrossDuration
    rule: SelectionRule
    estimates: Optional[Tuple[PlanEstimate, PlanEstimate]] = None


@dataclass
class SimulationCounters:
    """Elapsed simulated time and turns."""

    time_elapsed: CrossDuration = 0
    turns_elapsed: int = 0

    def reset(self) -> None:
        self.time_elapsed = 0
        self.turns_elapsed = 0


def sort_by_duration(actors: Sequence[Actor]) -> List[Actor]:
    """Fastest first. Stable, so ties keep registration order."""
    return sorted(actors, key=lambda actor: actor.cross_duration)


class CrossingScheduler:
    """Selects and applies the crossing group for each turn."""

    def plan(
        self,
        registry: ActorRegistry,
        bridge_capacity: int,
        torch_side: Side,
        turns_elapsed: int,
    ) -> Optional[CrossingPlan]:
        """Choose who crosses next without changing anything.

        Returns:
            The CrossingPlan, or None when nobody stands with the torch
        """
        origin = torch_side
        destination = origin.opposite
        near = sort_by_duration(registry.at_side(origin))
        far = registry.at_side(destination)

        if not near:
            return None

        estimates = None
        if turns_elapsed == 0 and far and len(near) > bridge_capacity:
            estimates = self._first_turn_estimates(near, far, bridge_capacity)
            plan_a, plan_b = estimates
            if plan_a.net > plan_b.net:
                rule = SelectionRule.SLOWEST_ONLY
                selected = self._slowest(near, bridge_capacity)
            else:
                rule = SelectionRule.FASTEST_WITH_SLOWEST
                selected = [near[0]] + self._slowest_after_fastest(near, bridge_capacity)
        else:
            rule = SelectionRule.STANDARD
            selected = [near[0]]
            if origin is Side.START and len(near) > 1:
                selected += self._slowest_after_fastest(near, bridge_capacity)

        return CrossingPlan(
            actor_ids=tuple(actor.id for actor in selected),
            origin=origin,
            destination=destination,
            cost=max(actor.cross_duration for actor in selected),
            rule=rule,
            estimates=estimates,
        )

    def apply(
        self,
        plan: CrossingPlan,
        registry: ActorRegistry,
        counters: SimulationCounters,
    ) -> Side:
        """Move the planned group across and advance the counters.

        Returns:
            The torch's new side
        """
        for actor_id in plan.actor_ids:
            registry.set_side(actor_id, plan.destination)
        counters.turns_elapsed += 1
        counters.time_elapsed += plan.cost
        logger.debug(
            f"Turn {counters.turns_elapsed}: {list(plan.actor_ids)} crossed "
            f"{plan.origin.value} -> {plan.destination.value} "
            f"(+{plan.cost}, rule={plan.rule.value})",
            extra={
                "turn": counters.turns_elapsed,
                "actor_ids": plan.actor_ids,
                "cost": plan.cost,
                "rule": plan.rule.value,
                "time_elapsed": counters.time_elapsed,
            },
        )
        return plan.destination

    # ------------------------------------------------------------------
    # Selection helpers (``near`` is sorted fastest first)
    # ------------------------------------------------------------------

    @staticmethod
    def _slowest(near: Sequence[Actor], count: int) -> List[Actor]:
        return list(near[max(0, len(near) - count):])

    @staticmethod
    def _slowest_after_fastest(near: Sequence[Actor], bridge_capacity: int) -> List[Actor]:
        """The slowest actors filling the capacity left after ``near[0]``."""
        return list(near[max(1, len(near) - (bridge_capacity - 1)):])

    @staticmethod
    def _first_turn_estimates(
        near: Sequence[Actor],
        far: Sequence[Actor],
        bridge_capacity: int,
    ) -> Tuple[PlanEstimate, PlanEstimate]:
        slowest = near[max(0, len(near) - bridge_capacity):]
        far_total = sum(actor.cross_duration for actor in far)
        ferry = min(actor.cross_duration for actor in list(slowest) + list(far))
        binding = near[-1].cross_duration

        plan_a = PlanEstimate(
            secured=sum(actor.cross_duration for actor in slowest) + far_total - ferry,
            elapsed=binding + ferry,
        )
        # The fastest of the slowest group stays behind to make room for near[0]
        plan_b = PlanEstimate(
            secured=sum(actor.cross_duration for actor in slowest[1:]) + far_total,
            elapsed=binding + near[0].cross_duration,
        )
        return plan_a, plan_b
