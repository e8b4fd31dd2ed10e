"""Tests for importing presets from untrusted external data."""

import copy
import json

import pytest

from bridge_torch.exceptions import ErrorCode, ObjectError
from bridge_torch.preset_import import (
    export_configurations,
    import_configurations,
    validate_configuration,
)
from bridge_torch.sides import Side


def codes(errors):
    return [error.code for error in errors]


class TestMixedBatch:
    def test_mixed_validity(self, valid_configuration):
        """One valid object, one missing name, one person missing crossTime."""
        missing_name = copy.deepcopy(valid_configuration)
        del missing_name["name"]
        missing_cross_time = copy.deepcopy(valid_configuration)
        missing_cross_time["name"] = "No time"
        del missing_cross_time["people"][1]["crossTime"]

        result = import_configurations([valid_configuration, missing_name, missing_cross_time])

        assert len(result.successful) == 1
        assert len(result.failed) == 2
        assert result.successful[0].name == "Valid"
        assert result.failed[0][0].object is missing_name
        assert codes(result.failed[0]) == [ErrorCode.MISSING_NAME]
        assert result.failed[1][0].object is missing_cross_time
        assert codes(result.failed[1]) == [ErrorCode.MISSING_CROSS_TIME]
        assert result.failed[1][0].field == "people[1].crossTime"
        assert result.ok is False

    def test_never_raises(self):
        result = import_configurations([None, 5, "text", [], {"bridgeWidth": 1}])
        assert result.successful == []
        assert len(result.failed) == 5
        assert all(isinstance(error, ObjectError) for errors in result.failed for error in errors)

    def test_out_of_range_integers_are_reported(self):
        """JSON integers beyond float range are invalid, not a crash."""
        raw = json.loads(
            '[{"name": "Big", "bridgeWidth": 1' + "0" * 400 + ', "people": [], "torchSide": "start"},'
            ' {"name": "Slow", "bridgeWidth": 2, "people": [{"name": "A", "crossTime": 9' + "9" * 400 + "}],"
            ' "torchSide": "start"}]'
        )

        result = import_configurations(raw)

        assert result.successful == []
        assert codes(result.failed[0]) == [ErrorCode.INVALID_BRIDGE_WIDTH]
        assert codes(result.failed[1]) == [ErrorCode.INVALID_CROSS_TIME]
        assert result.failed[1][0].field == "people[0].crossTime"

    def test_empty_batch(self):
        result = import_configurations([])
        assert result.successful == [] and result.failed == []
        assert result.ok is True


class TestValidPresets:
    def test_builds_preset(self, valid_configuration):
        preset = import_configurations([valid_configuration]).successful[0]

        assert preset.bridge_capacity == 2
        assert preset.torch_side is Side.START
        assert [(a.name, a.cross_duration, a.side) for a in preset.actors] == [
            ("Louise", 1, Side.START),
            ("Mark", 2, Side.START),
            ("Anne", 5, Side.END),
        ]

    def test_export_is_importable(self, valid_configuration):
        preset = import_configurations([valid_configuration]).successful[0]
        reimported = import_configurations(export_configurations([preset])).successful[0]
        assert reimported == preset
        assert reimported.name == preset.name


class TestErrorAccumulation:
    def test_collects_every_error_in_order(self):
        raw = {
            "bridgeWidth": "2",
            "people": [{"name": "A", "side": "middle"}, {"crossTime": 0}],
            "torchSide": "left",
        }

        errors = validate_configuration(raw)

        assert codes(errors) == [
            ErrorCode.MISSING_NAME,
            ErrorCode.INVALID_BRIDGE_WIDTH,
            ErrorCode.MISSING_CROSS_TIME,
            ErrorCode.INVALID_PERSON_SIDE,
            ErrorCode.MISSING_PERSON_NAME,
            ErrorCode.INVALID_CROSS_TIME,
            ErrorCode.INVALID_TORCH_SIDE,
        ]
        assert all(error.object is raw for error in errors)

    def test_missing_top_level_fields(self):
        assert codes(validate_configuration({})) == [
            ErrorCode.MISSING_NAME,
            ErrorCode.MISSING_BRIDGE_WIDTH,
            ErrorCode.MISSING_PEOPLE,
            ErrorCode.MISSING_TORCH_SIDE,
        ]

    def test_people_not_a_list_skips_person_checks(self, valid_configuration):
        valid_configuration["people"] = {"name": "A"}
        assert codes(validate_configuration(valid_configuration)) == [ErrorCode.INVALID_PEOPLE]

    def test_person_not_an_object(self, valid_configuration):
        valid_configuration["people"].append(7)
        errors = validate_configuration(valid_configuration)

        assert codes(errors) == [ErrorCode.INVALID_PERSON]
        assert errors[0].value == 7
        assert errors[0].field == "people[3]"

    def test_not_a_mapping(self):
        errors = validate_configuration(["name"])
        assert codes(errors) == [ErrorCode.OBJECT_NOT_A_MAPPING]
        assert errors[0].object == ["name"]

    @pytest.mark.parametrize("width", [True, None, "3", [2]])
    def test_bridge_width_must_be_a_number(self, valid_configuration, width):
        valid_configuration["bridgeWidth"] = width
        assert codes(validate_configuration(valid_configuration)) == [ErrorCode.INVALID_BRIDGE_WIDTH]

    def test_invalid_value_carries_offending_value(self, valid_configuration):
        valid_configuration["people"][0]["crossTime"] = "fast"
        errors = validate_configuration(valid_configuration)
        assert errors[0].value == "fast"


class TestConstructionFailures:
    def test_width_too_small_is_wrapped(self, valid_configuration):
        valid_configuration["bridgeWidth"] = 1
        result = import_configurations([valid_configuration])

        assert result.successful == []
        [errors] = result.failed
        assert len(errors) == 1
        assert errors[0].code is ErrorCode.PRESET_BRIDGE_WIDTH_TOO_SMALL
        assert errors[0].value == 1
        assert errors[0].field == "bridgeWidth"
        assert errors[0].object is valid_configuration

    def test_empty_name_is_wrapped(self, valid_configuration):
        valid_configuration["name"] = ""
        [errors] = import_configurations([valid_configuration]).failed
        assert codes(errors) == [ErrorCode.PRESET_EMPTY_NAME]

    def test_fractional_width_is_wrapped(self, valid_configuration):
        valid_configuration["bridgeWidth"] = 2.5
        [errors] = import_configurations([valid_configuration]).failed
        assert codes(errors) == [ErrorCode.PRESET_BRIDGE_WIDTH_NOT_INTEGER]
