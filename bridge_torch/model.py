"""BridgeModel: the composition root for one simulation.

Wires the actor registry, termination evaluator, crossing scheduler, state
projector and preset repository together, and exposes the mutation/query
surface used by a controller. Each instance is fully independent; there is
no module-level state.

Data flows one way per call:
    mutation -> registry/repository -> scheduler/evaluator -> ModelState
"""

from __future__ import annotations

import logging
from typing import Any, Iterable, List, Optional, Union

from bridge_torch.actors import Actor, ActorTemplate, CrossDuration, is_whole_number
from bridge_torch.config.defaults import MIN_BRIDGE_CAPACITY
from bridge_torch.config.model_config import ModelConfig
from bridge_torch.exceptions import ErrorCode, InvalidValueError
from bridge_torch.preset_import import ImportResult
from bridge_torch.preset_repository import PresetRepository
from bridge_torch.presets import Preset, default_preset
from bridge_torch.registry import ActorRegistry
from bridge_torch.scheduler import CrossingPlan, CrossingScheduler, SimulationCounters
from bridge_torch.sides import Side
from bridge_torch.state import ModelState, StateProjector
from bridge_torch.termination import TerminationEvaluator

logger = logging.getLogger(__name__)


class BridgeModel:
    """One bridge & torch simulation.

    Example:
        model = BridgeModel()
        state = model.step_forward()
        while not state.is_final:
            state = model.step_forward()
        state.is_successful  # True
    """

    def __init__(
        self,
        config: Optional[ModelConfig] = None,
        repository: Optional[PresetRepository] = None,
    ) -> None:
        """Build the model and activate its starting preset.

        Args:
            config: Construction options; defaults to ModelConfig()
            repository: Preset storage to use instead of a fresh one

        Raises:
            ResourceError: If ``config.active_preset`` is not in the repository
        """
        self._config = config or ModelConfig()
        self._registry = ActorRegistry()
        self._evaluator = TerminationEvaluator()
        self._scheduler = CrossingScheduler()
        self._projector = StateProjector(self._evaluator)
        self._counters = SimulationCounters()
        self._presets = repository if repository is not None else PresetRepository()

        if self._config.include_default_preset:
            self._presets.save(default_preset())
        if self._config.preset_data is not None:
            self._presets.import_configurations(self._config.preset_data)

        self._bridge_capacity = 0
        self._torch_side = Side.START
        self.load_preset(self._config.active_preset)

    # ------------------------------------------------------------------
    # Lifecycle
    # ------------------------------------------------------------------

    def init(self) -> ModelState:
        """Reset actors, capacity, torch and counters from the active preset."""
        preset = self._presets.get_active()
        return self._reset(preset, self._build_registry(preset))

    def load_configuration(self, preset: Preset) -> ModelState:
        """Activate ``preset`` and reset the simulation from it."""
        return self.load_preset(preset)

    @staticmethod
    def _build_registry(preset: Preset) -> ActorRegistry:
        # Raises before any live state is touched if a template is invalid
        registry = ActorRegistry()
        for template in preset.actors:
            registry.add(template)
        return registry

    def _reset(self, preset: Preset, registry: ActorRegistry) -> ModelState:
        self._registry = registry
        self._bridge_capacity = preset.bridge_capacity
        self._torch_side = preset.torch_side
        self._counters.reset()
        logger.info(
            f"Model initialized from preset '{preset.name}' "
            f"({self._registry.count} actors, width {self._bridge_capacity})"
        )
        return self.get_state()

    # ------------------------------------------------------------------
    # Actor and bridge mutation
    # ------------------------------------------------------------------

    def add_actor(
        self,
        name_or_template: Union[str, ActorTemplate],
        cross_duration: Optional[CrossDuration] = None,
        side: Optional[Union[Side, str]] = None,
    ) -> int:
        return self._registry.add(name_or_template, cross_duration, side)

    def remove_actor(self, actor_id: int) -> Optional[int]:
        removed = self._registry.remove(actor_id)
        if removed is None:
            logger.warning(f"remove_actor: no actor with id {actor_id}")
        return removed

    def set_actor_side(self, actor: Union[int, str], side: Union[Side, str]) -> Optional[int]:
        """Move an actor (by id, or by name) without advancing time."""
        if isinstance(actor, str):
            found = self._registry.by_name(actor)
            if found is None:
                logger.warning(f"set_actor_side: no actor named '{actor}'")
                return None
            actor = found.id
        moved = self._registry.set_side(actor, side)
        if moved is None:
            logger.warning(f"set_actor_side: no actor with id {actor}")
        return moved

    def set_capacity(self, bridge_capacity: int) -> int:
        """Set how many actors may cross together.

        Raises:
            InvalidValueError: For a non-integral capacity or one below 2
        """
        if not is_whole_number(bridge_capacity):
            raise InvalidValueError(
                ErrorCode.BRIDGE_WIDTH_NOT_INTEGER,
                f"Bridge width must be a whole number, got {bridge_capacity!r}",
                value=bridge_capacity,
            )
        if bridge_capacity < MIN_BRIDGE_CAPACITY:
            raise InvalidValueError(
                ErrorCode.BRIDGE_WIDTH_TOO_SMALL,
                f"Bridge width must be at least {MIN_BRIDGE_CAPACITY}, got {bridge_capacity}",
                value=bridge_capacity,
            )
        self._bridge_capacity = int(bridge_capacity)
        return self._bridge_capacity

    # ------------------------------------------------------------------
    # Simulation
    # ------------------------------------------------------------------

    def step_forward(self) -> ModelState:
        """Advance one turn. A no-op once the model is final."""
        plan = self.plan_next_crossing()
        if plan is None:
            return self.get_state()
        self._torch_side = self._scheduler.apply(plan, self._registry, self._counters)

        state = self.get_state()
        if state.is_final:
            finished = self._evaluator.reason(self._registry, self._bridge_capacity, self._torch_side)
            logger.info(
                f"Reached final state ({finished.value}) after {state.turns_elapsed} turns, "
                f"time elapsed {state.time_elapsed}"
            )
        return state

    def plan_next_crossing(self) -> Optional[CrossingPlan]:
        """The group the next step_forward() would send, or None if final."""
        if self._evaluator.is_final(self._registry, self._bridge_capacity, self._torch_side):
            return None
        return self._scheduler.plan(
            self._registry,
            self._bridge_capacity,
            self._torch_side,
            self._counters.turns_elapsed,
        )

    def get_state(self) -> ModelState:
        return self._projector.build(
            self._registry,
            self._counters,
            self._bridge_capacity,
            self._torch_side,
        )

    def is_final(self) -> bool:
        return self._evaluator.is_final(self._registry, self._bridge_capacity, self._torch_side)

    def is_successful(self) -> bool:
        return self._evaluator.is_successful(self._registry)

    # ------------------------------------------------------------------
    # Read-only views
    # ------------------------------------------------------------------

    @property
    def bridge_capacity(self) -> int:
        return self._bridge_capacity

    @property
    def torch_side(self) -> Side:
        return self._torch_side

    @property
    def time_elapsed(self) -> CrossDuration:
        return self._counters.time_elapsed

    @property
    def turns_elapsed(self) -> int:
        return self._counters.turns_elapsed

    @property
    def actors(self) -> List[Actor]:
        return self._registry.all()

    def get_actor(self, actor_id: int) -> Optional[Actor]:
        return self._registry.by_id(actor_id)

    def get_actor_by_name(self, name: str) -> Optional[Actor]:
        return self._registry.by_name(name)

    def actors_at(self, side: Union[Side, str]) -> List[Actor]:
        return self._registry.at_side(side)

    # ------------------------------------------------------------------
    # Presets
    # ------------------------------------------------------------------

    def get_presets(self) -> List[Preset]:
        return self._presets.list()

    def get_preset(self, name: str) -> Optional[Preset]:
        return self._presets.get(name)

    def get_active_preset(self) -> Preset:
        return self._presets.get_active()

    def save_preset(self, preset: Preset, overwrite: bool = False) -> bool:
        return self._presets.save(preset, overwrite=overwrite)

    def load_preset(self, name_or_preset: Union[str, Preset]) -> ModelState:
        """Activate a preset (by name or instance) and reset from it.

        Nothing changes when the preset cannot be loaded.

        Raises:
            ResourceError: PRESET_NOT_FOUND for an unknown name
            InvalidValueError: When a template in the preset is invalid
        """
        preset = self._presets.resolve(name_or_preset)
        registry = self._build_registry(preset)
        self._presets.load(preset)
        return self._reset(preset, registry)

    def update_active_preset(self) -> Preset:
        """Overwrite the active preset with the live configuration."""
        return self._presets.update_active(self.current_configuration())

    def has_been_modified(self) -> bool:
        """True when the live configuration differs from the active preset."""
        return self._presets.has_diverged(self.current_configuration())

    def import_presets(self, raw_objects: Iterable[Any], overwrite: bool = False) -> ImportResult:
        return self._presets.import_configurations(raw_objects, overwrite=overwrite)

    def current_configuration(self) -> Preset:
        """The live state as a Preset under the active preset's name."""
        return Preset(
            self._presets.active_name,
            self._bridge_capacity,
            [actor.to_template() for actor in self._registry.all()],
            self._torch_side,
        )
