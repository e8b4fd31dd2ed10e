"""Snapshot models handed to observers, and the projector that builds them."""

from __future__ import annotations

from typing import Any, Dict, List

from pydantic import BaseModel

from bridge_torch.actors import Actor, CrossDuration
from bridge_torch.registry import ActorRegistry
from bridge_torch.scheduler import SimulationCounters
from bridge_torch.sides import Side
from bridge_torch.termination import TerminationEvaluator


class ActorData(BaseModel):
    """Represents an actor in a snapshot."""

    id: int
    name: str
    cross_duration: CrossDuration
    side: Side

    @classmethod
    def from_actor(cls, actor: Actor) -> "ActorData":
        return cls(id=actor.id, name=actor.name, cross_duration=actor.cross_duration, side=actor.side)


class ModelState(BaseModel):
    """Complete simulation state after a mutation."""

    is_final: bool
    is_successful: bool
    actors_at_start: List[ActorData]
    actors_at_end: List[ActorData]
    time_elapsed: CrossDuration
    turns_elapsed: int
    torch_side: Side

    @property
    def actor_count(self) -> int:
        return len(self.actors_at_start) + len(self.actors_at_end)

    def to_payload(self) -> Dict[str, Any]:
        """Plain JSON-compatible dict for observers."""
        return self.model_dump(mode="json")


class StateProjector:
    """Builds ModelState snapshots from live engine state."""

    def __init__(self, evaluator: TerminationEvaluator) -> None:
        self._evaluator = evaluator

    def build(
        self,
        registry: ActorRegistry,
        counters: SimulationCounters,
        bridge_capacity: int,
        torch_side: Side,
    ) -> ModelState:
        return ModelState(
            is_final=self._evaluator.is_final(registry, bridge_capacity, torch_side),
            is_successful=self._evaluator.is_successful(registry),
            actors_at_start=[ActorData.from_actor(actor) for actor in registry.at_start()],
            actors_at_end=[ActorData.from_actor(actor) for actor in registry.at_end()],
            time_elapsed=counters.time_elapsed,
            turns_elapsed=counters.turns_elapsed,
            torch_side=torch_side,
        )
