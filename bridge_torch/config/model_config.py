"""Construction-time configuration for BridgeModel."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Optional, Sequence

from bridge_torch.config.defaults import DEFAULT_PRESET_NAME
from bridge_torch.exceptions import ErrorCode, InvalidValueError


@dataclass
class ModelConfig:
    """Configuration toggles for a BridgeModel instance.

    Attributes:
        active_preset: Name of the preset activated on construction.
        include_default_preset: Seed the repository with the default preset.
        preset_data: Optional raw external configurations (the JSON shape
            with ``bridgeWidth``/``people``/``torchSide``) imported on
            construction. Invalid entries are logged and skipped.
    """

    active_preset: str = DEFAULT_PRESET_NAME
    include_default_preset: bool = True
    preset_data: Optional[Sequence[Any]] = None

    def __post_init__(self) -> None:
        if not self.active_preset:
            raise InvalidValueError(
                ErrorCode.PRESET_EMPTY_NAME,
                "active_preset must be a non-empty preset name",
                value=self.active_preset,
            )
