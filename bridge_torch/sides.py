"""The two banks of the river."""

from __future__ import annotations

from enum import Enum
from typing import Any

from bridge_torch.exceptions import ErrorCode, InvalidValueError


class Side(str, Enum):
    """Location of an actor or of the torch."""

    START = "start"
    END = "end"

    @property
    def opposite(self) -> "Side":
        return Side.END if self is Side.START else Side.START

    @staticmethod
    def parse(value: Any) -> "Side":
        """Return the Side for ``value`` (a Side or its string value)."""
        if isinstance(value, Side):
            return value
        try:
            return Side(value)
        except (TypeError, ValueError) as exc:
            raise InvalidValueError(
                ErrorCode.INVALID_SIDE,
                f"Unknown side: {value!r} (expected 'start' or 'end')",
                value=value,
            ) from exc

    @staticmethod
    def is_valid(value: Any) -> bool:
        return isinstance(value, str) and value in (Side.START.value, Side.END.value)
