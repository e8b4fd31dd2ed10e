"""Bridge & Torch exception hierarchy.

Every failure the engine reports is a ``BridgeError`` carrying a stable
machine-readable ``code`` plus structured ``data``, so callers can branch on
error identity instead of matching message strings.

- ``InvalidValueError``: a single supplied scalar is out of domain.
- ``ObjectError``: a structural defect in an imported composite object.
- ``ResourceError``: a reference to a named resource that does not exist.
"""

from __future__ import annotations

from enum import Enum
from typing import Any, Dict, Optional


class ErrorCode(str, Enum):
    """Stable error identifiers."""

    # Scalar validation
    INVALID_SIDE = "INVALID_SIDE"
    ACTOR_INVALID_CROSS_DURATION = "ACTOR_INVALID_CROSS_DURATION"
    BRIDGE_WIDTH_TOO_SMALL = "BRIDGE_WIDTH_TOO_SMALL"
    BRIDGE_WIDTH_NOT_INTEGER = "BRIDGE_WIDTH_NOT_INTEGER"
    PRESET_EMPTY_NAME = "PRESET_EMPTY_NAME"
    PRESET_BRIDGE_WIDTH_TOO_SMALL = "PRESET_BRIDGE_WIDTH_TOO_SMALL"
    PRESET_BRIDGE_WIDTH_NOT_INTEGER = "PRESET_BRIDGE_WIDTH_NOT_INTEGER"

    # Resources
    PRESET_NOT_FOUND = "PRESET_NOT_FOUND"
    PRESET_ACTIVE_DELETE = "PRESET_ACTIVE_DELETE"

    # Import (structural)
    OBJECT_NOT_A_MAPPING = "OBJECT_NOT_A_MAPPING"
    MISSING_NAME = "MISSING_NAME"
    INVALID_NAME = "INVALID_NAME"
    MISSING_BRIDGE_WIDTH = "MISSING_BRIDGE_WIDTH"
    INVALID_BRIDGE_WIDTH = "INVALID_BRIDGE_WIDTH"
    MISSING_PEOPLE = "MISSING_PEOPLE"
    INVALID_PEOPLE = "INVALID_PEOPLE"
    INVALID_PERSON = "INVALID_PERSON"
    MISSING_PERSON_NAME = "MISSING_PERSON_NAME"
    INVALID_PERSON_NAME = "INVALID_PERSON_NAME"
    MISSING_CROSS_TIME = "MISSING_CROSS_TIME"
    INVALID_CROSS_TIME = "INVALID_CROSS_TIME"
    INVALID_PERSON_SIDE = "INVALID_PERSON_SIDE"
    MISSING_TORCH_SIDE = "MISSING_TORCH_SIDE"
    INVALID_TORCH_SIDE = "INVALID_TORCH_SIDE"


class BridgeError(Exception):
    """Root of all Bridge & Torch domain exceptions."""

    def __init__(
        self,
        code: ErrorCode,
        message: Optional[str] = None,
        data: Optional[Dict[str, Any]] = None,
    ) -> None:
        self.code = ErrorCode(code)
        self.message = message or self.code.value
        self.data: Dict[str, Any] = dict(data or {})
        super().__init__(self.message)

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(code={self.code.value!r}, message={self.message!r})"


class InvalidValueError(BridgeError, ValueError):
    """An individually supplied value is out of domain (empty name, capacity < 2)."""

    def __init__(
        self,
        code: ErrorCode,
        message: Optional[str] = None,
        value: Any = None,
        data: Optional[Dict[str, Any]] = None,
    ) -> None:
        payload = dict(data or {})
        payload["value"] = value
        super().__init__(code, message, payload)

    @property
    def value(self) -> Any:
        return self.data["value"]


class ObjectError(BridgeError):
    """A structural defect found while importing an external object.

    Always carries the offending object. Importers collect these instead of
    raising them.
    """

    def __init__(
        self,
        code: ErrorCode,
        message: Optional[str] = None,
        obj: Any = None,
        field: Optional[str] = None,
        value: Any = None,
    ) -> None:
        super().__init__(code, message, {"object": obj, "field": field, "value": value})

    @property
    def object(self) -> Any:
        return self.data["object"]

    @property
    def field(self) -> Optional[str]:
        return self.data["field"]

    @property
    def value(self) -> Any:
        return self.data["value"]


class ResourceError(BridgeError, LookupError):
    """A named resource (preset) does not exist or cannot be touched."""

    def __init__(
        self,
        code: ErrorCode,
        message: Optional[str] = None,
        resource: Optional[str] = None,
    ) -> None:
        super().__init__(code, message, {"resource": resource})

    @property
    def resource(self) -> Optional[str]:
        return self.data["resource"]
