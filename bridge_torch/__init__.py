"""Bridge & torch crossing simulation engine.

Public API:
    BridgeModel        composition root (one independent simulation)
    Preset             immutable named configuration
    PresetRepository   preset storage with an active preset
    import_configurations / export_configurations
                       untrusted external data <-> presets
    ModelState         serializable snapshot for observers
    configure_logging  console logging for embedding applications
"""

from bridge_torch.actors import Actor, ActorTemplate
from bridge_torch.config.model_config import ModelConfig
from bridge_torch.exceptions import (
    BridgeError,
    ErrorCode,
    InvalidValueError,
    ObjectError,
    ResourceError,
)
from bridge_torch.logging_config import configure_logging
from bridge_torch.model import BridgeModel
from bridge_torch.preset_import import ImportResult, export_configurations, import_configurations
from bridge_torch.preset_repository import PresetRepository
from bridge_torch.presets import Preset, default_preset
from bridge_torch.registry import ActorRegistry
from bridge_torch.scheduler import CrossingPlan, CrossingScheduler, SelectionRule
from bridge_torch.sides import Side
from bridge_torch.state import ActorData, ModelState
from bridge_torch.termination import TerminationEvaluator, TerminationReason

__all__ = [
    "Actor",
    "ActorData",
    "ActorRegistry",
    "ActorTemplate",
    "BridgeError",
    "BridgeModel",
    "CrossingPlan",
    "CrossingScheduler",
    "ErrorCode",
    "ImportResult",
    "InvalidValueError",
    "ModelConfig",
    "ModelState",
    "ObjectError",
    "Preset",
    "PresetRepository",
    "ResourceError",
    "SelectionRule",
    "Side",
    "TerminationEvaluator",
    "TerminationReason",
    "configure_logging",
    "default_preset",
    "export_configurations",
    "import_configurations",
]
