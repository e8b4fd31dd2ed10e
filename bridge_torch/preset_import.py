"""Validation and import of untrusted preset data.

External configurations arrive as plain decoded JSON:

    [
        {
            "name": "Classic",
            "bridgeWidth": 2,
            "people": [{"name": "Louise", "crossTime": 1, "side": "start"}, ...],
            "torchSide": "start"
        },
        ...
    ]

Each field check is a rule producing zero or one ``ObjectError``. All rules
run for every object (no short-circuit), so one pass reports every defect.
An object is imported only when its error list is empty; a malformed object
never aborts the batch.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any, Callable, Dict, Iterable, List, Optional, Sequence

from bridge_torch.actors import ActorTemplate, is_cross_duration, is_number
from bridge_torch.exceptions import ErrorCode, InvalidValueError, ObjectError
from bridge_torch.presets import Preset
from bridge_torch.sides import Side

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class FieldRule:
    """Presence + shape check for one key of a mapping."""

    key: str
    invalid_code: ErrorCode
    check: Callable[[Any], bool]
    expected: str
    missing_code: Optional[ErrorCode] = None  # None: the key is optional

    def apply(self, target: Mapping, owner: Any, path: str = "") -> Optional[ObjectError]:
        """Check ``target[key]``; errors always carry ``owner``, the imported object."""
        location = f"{path}{self.key}"
        if self.key not in target:
            if self.missing_code is None:
                return None
            return ObjectError(
                self.missing_code,
                f"Missing required field '{location}'",
                obj=owner,
                field=location,
                value=target if path else None,
            )
        value = target[self.key]
        if not self.check(value):
            return ObjectError(
                self.invalid_code,
                f"Field '{location}' must be {self.expected}, got {value!r}",
                obj=owner,
                field=location,
                value=value,
            )
        return None


def _is_str(value: Any) -> bool:
    return isinstance(value, str)


def _is_list(value: Any) -> bool:
    return isinstance(value, list)


CONFIGURATION_RULES: Sequence[FieldRule] = (
    FieldRule("name", ErrorCode.INVALID_NAME, _is_str, "a string", ErrorCode.MISSING_NAME),
    FieldRule("bridgeWidth", ErrorCode.INVALID_BRIDGE_WIDTH, is_number, "a number", ErrorCode.MISSING_BRIDGE_WIDTH),
    FieldRule("people", ErrorCode.INVALID_PEOPLE, _is_list, "an array", ErrorCode.MISSING_PEOPLE),
)

PERSON_RULES: Sequence[FieldRule] = (
    FieldRule("name", ErrorCode.INVALID_PERSON_NAME, _is_str, "a string", ErrorCode.MISSING_PERSON_NAME),
    FieldRule("crossTime", ErrorCode.INVALID_CROSS_TIME, is_cross_duration, "a positive number", ErrorCode.MISSING_CROSS_TIME),
    FieldRule("side", ErrorCode.INVALID_PERSON_SIDE, Side.is_valid, "'start' or 'end'"),
)

TORCH_RULE = FieldRule(
    "torchSide", ErrorCode.INVALID_TORCH_SIDE, Side.is_valid, "'start' or 'end'", ErrorCode.MISSING_TORCH_SIDE
)


@dataclass
class ImportResult:
    """Outcome of a bulk import.

    Attributes:
        successful: Presets built from valid objects, in input order.
        failed: One error list per rejected object, in input order.
    """

    successful: List[Preset] = field(default_factory=list)
    failed: List[List[ObjectError]] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return not self.failed


def validate_configuration(raw: Any) -> List[ObjectError]:
    """Collect every structural error in one raw configuration object."""
    if not isinstance(raw, Mapping):
        return [
            ObjectError(
                ErrorCode.OBJECT_NOT_A_MAPPING,
                f"Configuration must be an object, got {type(raw).__name__}",
                obj=raw,
                value=raw,
            )
        ]

    errors = [error for error in (rule.apply(raw, raw) for rule in CONFIGURATION_RULES) if error]

    people = raw.get("people")
    if _is_list(people):
        for index, person in enumerate(people):
            errors.extend(_validate_person(person, index, raw))

    torch_error = TORCH_RULE.apply(raw, raw)
    if torch_error:
        errors.append(torch_error)
    return errors


def _validate_person(person: Any, index: int, owner: Any) -> List[ObjectError]:
    path = f"people[{index}]."
    if not isinstance(person, Mapping):
        return [
            ObjectError(
                ErrorCode.INVALID_PERSON,
                f"Entry 'people[{index}]' must be an object, got {type(person).__name__}",
                obj=owner,
                field=f"people[{index}]",
                value=person,
            )
        ]
    return [error for error in (rule.apply(person, owner, path) for rule in PERSON_RULES) if error]


def build_preset(raw: Mapping) -> Preset:
    """Construct a Preset from an already validated raw object.

    Raises:
        InvalidValueError: When a well-typed value is still out of domain
    """
    actors = [
        ActorTemplate(
            name=person["name"],
            cross_duration=person["crossTime"],
            side=person.get("side", Side.START),
        )
        for person in raw["people"]
    ]
    return Preset(raw["name"], raw["bridgeWidth"], actors, raw["torchSide"])


def import_configurations(raw_objects: Iterable[Any]) -> ImportResult:
    """Validate and build presets from untrusted data. Never raises per item."""
    result = ImportResult()
    for raw in raw_objects:
        errors = validate_configuration(raw)
        if not errors:
            try:
                result.successful.append(build_preset(raw))
                continue
            except InvalidValueError as exc:
                errors = [
                    ObjectError(
                        exc.code,
                        exc.message,
                        obj=raw,
                        field=_field_for(exc.code),
                        value=exc.value,
                    )
                ]
        result.failed.append(errors)
        logger.warning(
            f"Rejected configuration {_label(raw)}: "
            f"{', '.join(error.code.value for error in errors)}"
        )

    logger.info(f"Imported {len(result.successful)} configuration(s), rejected {len(result.failed)}")
    return result


def export_configurations(presets: Iterable[Preset]) -> List[Dict[str, Any]]:
    """Render presets in the external format accepted by import_configurations."""
    return [preset.to_dict() for preset in presets]


def _field_for(code: ErrorCode) -> Optional[str]:
    if code in (ErrorCode.PRESET_BRIDGE_WIDTH_TOO_SMALL, ErrorCode.PRESET_BRIDGE_WIDTH_NOT_INTEGER):
        return "bridgeWidth"
    if code is ErrorCode.PRESET_EMPTY_NAME:
        return "name"
    return None


def _label(raw: Any) -> str:
    if isinstance(raw, Mapping) and isinstance(raw.get("name"), str):
        return repr(raw["name"])
    return f"<{type(raw).__name__}>"
