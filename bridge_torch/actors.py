"""Actor records.

``Actor`` is the live, registry-owned record. ``ActorTemplate`` is the id-less
description used by presets and "add actor" requests before registration.
"""

from __future__ import annotations

import math
from dataclasses import dataclass, replace
from numbers import Real
from typing import Any, Tuple, Union

from bridge_torch.sides import Side

CrossDuration = Union[int, float]


def is_number(value: Any) -> bool:
    """True for a finite real number. Bools are not numbers here.

    Integers too large for a float are treated like infinity and rejected.
    """
    if not isinstance(value, Real) or isinstance(value, bool):
        return False
    try:
        return math.isfinite(value)
    except OverflowError:
        return False


def is_whole_number(value: Any) -> bool:
    return is_number(value) and int(value) == value


def is_cross_duration(value: Any) -> bool:
    """True for a positive finite number."""
    return is_number(value) and value > 0


@dataclass(frozen=True)
class ActorTemplate:
    """An actor before it has been assigned an id."""

    name: str
    cross_duration: CrossDuration
    side: Side = Side.START

    def __post_init__(self) -> None:
        # Accept plain strings for side; frozen, so go through object.__setattr__
        object.__setattr__(self, "side", Side.parse(self.side))

    @property
    def key(self) -> Tuple[str, CrossDuration, Side]:
        """The triple used for preset equality."""
        return (self.name, self.cross_duration, self.side)


@dataclass
class Actor:
    """A registered actor. Ids are assigned by ActorRegistry only."""

    id: int
    name: str
    cross_duration: CrossDuration
    side: Side = Side.START

    def copy(self) -> "Actor":
        return replace(self)

    def to_template(self) -> ActorTemplate:
        return ActorTemplate(name=self.name, cross_duration=self.cross_duration, side=self.side)
