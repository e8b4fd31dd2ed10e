"""Authoritative list of live actors.

The registry owns actor identity and side tracking. Every query returns
copies, so a caller holding a returned ``Actor`` can never change what the
registry reports next.

Id assignment:
    new id = max(-1, *existing ids) + 1

Removal never renumbers the remaining actors, and a gap is only re-used
when it becomes the new maximum.
"""

from __future__ import annotations

import logging
from typing import List, Optional, Union

from bridge_torch.actors import Actor, ActorTemplate, CrossDuration, is_cross_duration
from bridge_torch.exceptions import ErrorCode, InvalidValueError
from bridge_torch.sides import Side

logger = logging.getLogger(__name__)


class ActorRegistry:
    """Registry of live actors, kept in registration order.

    Example:
        registry = ActorRegistry()
        louise = registry.add("Louise", 1)
        registry.set_side(louise, Side.END)
        registry.at_end()  # [Actor(id=0, name='Louise', ...)]
    """

    def __init__(self) -> None:
        self._actors: List[Actor] = []

    # ------------------------------------------------------------------
    # Mutation
    # ------------------------------------------------------------------

    def add(
        self,
        template_or_name: Union[ActorTemplate, str],
        cross_duration: Optional[CrossDuration] = None,
        side: Optional[Union[Side, str]] = None,
    ) -> int:
        """Register an actor and return its new id.

        Args:
            template_or_name: An ActorTemplate, or the actor's name
            cross_duration: Crossing duration. Required with a name, and
                not allowed with a template, which carries its own
            side: Starting side. Overrides a template's side; ``start``
                when omitted

        Raises:
            InvalidValueError: For an unknown side or a non-positive duration
            TypeError: When a template is combined with ``cross_duration``
        """
        if isinstance(template_or_name, ActorTemplate):
            if cross_duration is not None:
                raise TypeError("cross_duration cannot be combined with an ActorTemplate")
            name = template_or_name.name
            cross_duration = template_or_name.cross_duration
            resolved_side = template_or_name.side if side is None else Side.parse(side)
        else:
            name = template_or_name
            resolved_side = Side.START if side is None else Side.parse(side)

        if not is_cross_duration(cross_duration):
            raise InvalidValueError(
                ErrorCode.ACTOR_INVALID_CROSS_DURATION,
                f"Cross duration must be a positive number, got {cross_duration!r}",
                value=cross_duration,
            )

        actor_id = self._next_id()
        self._actors.append(
            Actor(id=actor_id, name=name, cross_duration=cross_duration, side=resolved_side)
        )
        logger.debug(f"Registered actor #{actor_id} '{name}' ({cross_duration}) at {resolved_side.value}")
        return actor_id

    def remove(self, actor_id: int) -> Optional[int]:
        """Remove an actor. Returns the id, or None when it is not registered."""
        index = self._index_of(actor_id)
        if index is None:
            return None
        del self._actors[index]
        return actor_id

    def set_side(self, actor_id: int, side: Union[Side, str]) -> Optional[int]:
        """Move an actor to ``side``. Returns the id, or None when not registered."""
        resolved = Side.parse(side)
        index = self._index_of(actor_id)
        if index is None:
            return None
        self._actors[index].side = resolved
        return actor_id

    def clear(self) -> None:
        self._actors.clear()

    # ------------------------------------------------------------------
    # Queries (all copies)
    # ------------------------------------------------------------------

    def by_id(self, actor_id: int) -> Optional[Actor]:
        index = self._index_of(actor_id)
        return None if index is None else self._actors[index].copy()

    def by_name(self, name: str) -> Optional[Actor]:
        """First actor registered under ``name``."""
        for actor in self._actors:
            if actor.name == name:
                return actor.copy()
        return None

    def at_side(self, side: Union[Side, str]) -> List[Actor]:
        resolved = Side.parse(side)
        return [actor.copy() for actor in self._actors if actor.side is resolved]

    def at_start(self) -> List[Actor]:
        return self.at_side(Side.START)

    def at_end(self) -> List[Actor]:
        return self.at_side(Side.END)

    def all(self) -> List[Actor]:
        return [actor.copy() for actor in self._actors]

    def ids(self) -> List[int]:
        return [actor.id for actor in self._actors]

    @property
    def count(self) -> int:
        return len(self._actors)

    def __len__(self) -> int:
        return len(self._actors)

    def __contains__(self, actor_id: object) -> bool:
        return any(actor.id == actor_id for actor in self._actors)

    # ------------------------------------------------------------------
    # Internals
    # ------------------------------------------------------------------

    def _next_id(self) -> int:
        return max([-1] + [actor.id for actor in self._actors]) + 1

    def _index_of(self, actor_id: int) -> Optional[int]:
        for index, actor in enumerate(self._actors):
            if actor.id == actor_id:
                return index
        return None
