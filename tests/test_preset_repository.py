"""Tests for PresetRepository storage and activation."""

import pytest

from bridge_torch.actors import ActorTemplate
from bridge_torch.exceptions import ErrorCode, ResourceError
from bridge_torch.preset_repository import PresetRepository
from bridge_torch.presets import Preset, default_preset


@pytest.fixture
def repository():
    return PresetRepository.with_defaults()


def wide_preset(name="Wide"):
    return Preset(name, 3, [ActorTemplate("a", 1), ActorTemplate("b", 4)])


class TestStorage:
    def test_with_defaults(self, repository):
        assert repository.names() == ["Default"]
        assert repository.get_active() == default_preset()
        assert repository.active_name == "Default"

    def test_empty_repository_has_no_active(self):
        repository = PresetRepository()
        assert repository.get_active() is None
        assert len(repository) == 0

    def test_save_new(self, repository):
        assert repository.save(wide_preset()) is True
        assert "Wide" in repository
        assert repository.get("Wide") == wide_preset()

    def test_save_existing_without_overwrite_is_refused(self, repository):
        replacement = Preset("Default", 4)
        assert repository.save(replacement) is False
        assert repository.get("Default") == default_preset()

    def test_save_existing_with_overwrite(self, repository):
        replacement = Preset("Default", 4)
        assert repository.save(replacement, overwrite=True) is True
        assert repository.get("Default").bridge_capacity == 4

    def test_list_is_a_copy(self, repository):
        presets = repository.list()
        presets.clear()
        assert len(repository.list()) == 1

    def test_get_unknown(self, repository):
        assert repository.get("Nope") is None

    def test_delete(self, repository):
        repository.save(wide_preset())
        assert repository.delete("Wide") is True
        assert repository.delete("Wide") is False

    def test_delete_active_is_refused(self, repository):
        with pytest.raises(ResourceError) as excinfo:
            repository.delete("Default")
        assert excinfo.value.code is ErrorCode.PRESET_ACTIVE_DELETE


class TestActivation:
    def test_load_by_name(self, repository):
        repository.save(wide_preset())
        loaded = repository.load("Wide")
        assert loaded.name == "Wide"
        assert repository.get_active().name == "Wide"

    def test_load_unknown_name(self, repository):
        with pytest.raises(ResourceError) as excinfo:
            repository.load("Missing")
        assert excinfo.value.code is ErrorCode.PRESET_NOT_FOUND
        assert excinfo.value.resource == "Missing"
        assert repository.active_name == "Default"

    def test_resource_error_is_a_lookup_error(self, repository):
        with pytest.raises(LookupError):
            repository.load("Missing")

    def test_resolve_does_not_activate(self, repository):
        repository.save(wide_preset())
        assert repository.resolve("Wide").name == "Wide"
        fresh = wide_preset("Fresh")
        assert repository.resolve(fresh) is fresh
        assert "Fresh" not in repository
        assert repository.active_name == "Default"

        with pytest.raises(ResourceError):
            repository.resolve("Missing")

    def test_load_instance_stores_it(self, repository):
        repository.load(wide_preset("Fresh"))
        assert repository.active_name == "Fresh"
        assert repository.get("Fresh") == wide_preset()


class TestDivergence:
    def test_matching_live_state_has_not_diverged(self, repository):
        assert repository.has_diverged(default_preset()) is False

    def test_different_live_state_has_diverged(self, repository):
        assert repository.has_diverged(wide_preset("Default")) is True

    def test_update_active_keeps_name(self, repository):
        updated = repository.update_active(wide_preset("Scratch"))

        assert updated.name == "Default"
        assert repository.get("Default") == wide_preset()
        assert repository.has_diverged(wide_preset()) is False

    def test_update_active_without_active(self):
        with pytest.raises(ResourceError):
            PresetRepository().update_active(wide_preset())


class TestImport:
    def test_imports_and_stores_valid(self, repository, valid_configuration):
        result = repository.import_configurations([valid_configuration, {"name": 3}])

        assert len(result.successful) == 1
        assert len(result.failed) == 1
        assert "Valid" in repository

    def test_name_clash_is_not_overwritten_by_default(self, repository, valid_configuration):
        valid_configuration["name"] = "Default"
        repository.import_configurations([valid_configuration])
        assert repository.get("Default") == default_preset()

        repository.import_configurations([valid_configuration], overwrite=True)
        assert repository.get("Default") != default_preset()
