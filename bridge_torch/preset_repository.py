"""Named preset storage with a single active preset."""

from __future__ import annotations

import logging
from typing import Any, Dict, Iterable, List, Optional, Union

from bridge_torch.exceptions import ErrorCode, ResourceError
from bridge_torch.preset_import import ImportResult, import_configurations
from bridge_torch.presets import Preset, default_preset

logger = logging.getLogger(__name__)


class PresetRepository:
    """Stores presets by name and tracks which one is active.

    Presets are immutable, so stored instances are handed out directly;
    callers can never alter what the repository holds.

    Example:
        repository = PresetRepository.with_defaults()
        repository.save(Preset("Wide", 3, roster))
        active = repository.load("Wide")
    """

    def __init__(self, presets: Iterable[Preset] = ()) -> None:
        self._presets: Dict[str, Preset] = {}
        self._active_name: Optional[str] = None
        for preset in presets:
            self.save(preset)

    @classmethod
    def with_defaults(cls) -> "PresetRepository":
        """A repository holding the default preset, already active."""
        repository = cls([default_preset()])
        repository.load(default_preset().name)
        return repository

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    def get(self, name: str) -> Optional[Preset]:
        return self._presets.get(name)

    def get_active(self) -> Optional[Preset]:
        if self._active_name is None:
            return None
        return self._presets[self._active_name]

    @property
    def active_name(self) -> Optional[str]:
        return self._active_name

    def list(self) -> List[Preset]:
        """All presets in insertion order."""
        return list(self._presets.values())

    def names(self) -> List[str]:
        return list(self._presets)

    def __contains__(self, name: object) -> bool:
        return name in self._presets

    def __len__(self) -> int:
        return len(self._presets)

    # ------------------------------------------------------------------
    # Mutation
    # ------------------------------------------------------------------

    def save(self, preset: Preset, overwrite: bool = False) -> bool:
        """Store ``preset`` under its name.

        Returns:
            False (storage untouched) when the name is taken and ``overwrite``
            is not set, True otherwise
        """
        if preset.name in self._presets and not overwrite:
            logger.debug(f"Preset '{preset.name}' already exists; not overwriting")
            return False
        self._presets[preset.name] = preset
        return True

    def delete(self, name: str) -> bool:
        """Remove a stored preset. The active preset cannot be deleted."""
        if name == self._active_name:
            raise ResourceError(
                ErrorCode.PRESET_ACTIVE_DELETE,
                f"Cannot delete the active preset '{name}'",
                resource=name,
            )
        return self._presets.pop(name, None) is not None

    def load(self, name_or_preset: Union[str, Preset]) -> Preset:
        """Make a preset active and return it.

        A Preset instance is stored under its name first, replacing any
        preset already saved under that name.

        Raises:
            ResourceError: PRESET_NOT_FOUND for an unknown name
        """
        preset = self.resolve(name_or_preset)
        self._presets[preset.name] = preset
        self._active_name = preset.name
        logger.info(f"Activated preset '{preset.name}'")
        return preset

    def resolve(self, name_or_preset: Union[str, Preset]) -> Preset:
        """Look up a preset by name (instances pass through) without activating it.

        Raises:
            ResourceError: PRESET_NOT_FOUND for an unknown name
        """
        if isinstance(name_or_preset, Preset):
            return name_or_preset
        preset = self._presets.get(name_or_preset)
        if preset is None:
            raise ResourceError(
                ErrorCode.PRESET_NOT_FOUND,
                f"No preset named '{name_or_preset}'",
                resource=name_or_preset,
            )
        return preset

    def update_active(self, live: Preset) -> Preset:
        """Replace the active preset with ``live``, keeping the active name."""
        active = self.get_active()
        if active is None:
            raise ResourceError(ErrorCode.PRESET_NOT_FOUND, "No preset is active")
        updated = live if live.name == active.name else live.clone(active.name)
        self._presets[active.name] = updated
        return updated

    def has_diverged(self, live: Preset) -> bool:
        """True when ``live`` no longer matches the active preset."""
        active = self.get_active()
        return active is None or active != live

    def import_configurations(self, raw_objects: Iterable[Any], overwrite: bool = False) -> ImportResult:
        """Import untrusted configurations and store the valid ones."""
        result = import_configurations(raw_objects)
        for preset in result.successful:
            if not self.save(preset, overwrite=overwrite):
                logger.warning(f"Imported preset '{preset.name}' skipped: name already in use")
        return result
