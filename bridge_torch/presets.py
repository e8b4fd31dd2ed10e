"""Named puzzle configurations.

A Preset bundles a bridge capacity, an initial actor roster and the torch's
starting side. Presets are immutable once built; hand-constructed presets are
trusted beyond the name/capacity checks (untrusted data goes through
``bridge_torch.preset_import``).
"""

from __future__ import annotations

from typing import Any, Dict, Iterable, List, Union

from bridge_torch.actors import ActorTemplate, is_whole_number
from bridge_torch.config.defaults import (
    DEFAULT_ACTORS,
    DEFAULT_BRIDGE_CAPACITY,
    DEFAULT_PRESET_NAME,
    DEFAULT_TORCH_SIDE,
    MIN_BRIDGE_CAPACITY,
)
from bridge_torch.exceptions import ErrorCode, InvalidValueError
from bridge_torch.sides import Side


class Preset:
    """An immutable, named puzzle configuration.

    Equality ignores the name: two presets are equal when capacity, torch
    side and the ordered roster (name, duration, side) all match.
    """

    __slots__ = ("_name", "_bridge_capacity", "_actors", "_torch_side")

    def __init__(
        self,
        name: str,
        bridge_capacity: int,
        actors: Iterable[ActorTemplate] = (),
        torch_side: Union[Side, str] = Side.START,
    ) -> None:
        if not name:
            raise InvalidValueError(
                ErrorCode.PRESET_EMPTY_NAME,
                "Preset name must not be empty",
                value=name,
            )
        if not is_whole_number(bridge_capacity):
            raise InvalidValueError(
                ErrorCode.PRESET_BRIDGE_WIDTH_NOT_INTEGER,
                f"Bridge width must be a whole number, got {bridge_capacity!r}",
                value=bridge_capacity,
            )
        if bridge_capacity < MIN_BRIDGE_CAPACITY:
            raise InvalidValueError(
                ErrorCode.PRESET_BRIDGE_WIDTH_TOO_SMALL,
                f"Bridge width must be at least {MIN_BRIDGE_CAPACITY}, got {bridge_capacity}",
                value=bridge_capacity,
            )

        self._name = name
        self._bridge_capacity = int(bridge_capacity)
        self._actors = tuple(actors)
        self._torch_side = Side.parse(torch_side)

    @property
    def name(self) -> str:
        return self._name

    @property
    def bridge_capacity(self) -> int:
        return self._bridge_capacity

    @property
    def actors(self) -> List[ActorTemplate]:
        """A fresh list on every access."""
        return list(self._actors)

    @property
    def torch_side(self) -> Side:
        return self._torch_side

    def clone(self, name: str) -> "Preset":
        """Copy this configuration under a new name."""
        return Preset(name, self._bridge_capacity, self._actors, self._torch_side)

    def to_dict(self) -> Dict[str, Any]:
        """Render in the external configuration format."""
        return {
            "name": self._name,
            "bridgeWidth": self._bridge_capacity,
            "people": [
                {"name": actor.name, "crossTime": actor.cross_duration, "side": actor.side.value}
                for actor in self._actors
            ],
            "torchSide": self._torch_side.value,
        }

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Preset):
            return NotImplemented
        return (
            self._bridge_capacity == other._bridge_capacity
            and self._torch_side is other._torch_side
            and [actor.key for actor in self._actors] == [actor.key for actor in other._actors]
        )

    def __hash__(self) -> int:
        return hash((self._bridge_capacity, self._torch_side, tuple(actor.key for actor in self._actors)))

    def __repr__(self) -> str:
        return (
            f"Preset(name={self._name!r}, bridge_capacity={self._bridge_capacity}, "
            f"actors={len(self._actors)}, torch_side={self._torch_side.value!r})"
        )


def default_preset() -> Preset:
    """The classic four-actor puzzle."""
    return Preset(
        DEFAULT_PRESET_NAME,
        DEFAULT_BRIDGE_CAPACITY,
        [ActorTemplate(name, duration) for name, duration in DEFAULT_ACTORS],
        DEFAULT_TORCH_SIDE,
    )
