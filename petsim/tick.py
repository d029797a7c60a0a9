"""The tick engine.

``process_pet_tick`` is the pure per-tick function: it runs the seven
``TickPhase`` steps in order and returns a new pet. It never fails; a pet
whose species or stage data is missing simply gets no regeneration, no care
life change and no stage gains.

``TickProcessor`` is the engine a caller constructs and owns. On top of the
pure tick it progresses exploration (whose completion rolls drops with the
injected RNG), applies the daily sleep reset, publishes notification events
and replays batches of ticks for offline catch-up. There is no global engine
instance; two processors built with the same seed replay identically.
"""

import logging
import random
from dataclasses import dataclass, field, replace
from typing import Callable, List, Optional, Tuple

from petsim.care.care_life import apply_care_life_change
from petsim.care.care_stats import apply_care_decay
from petsim.care.poop import process_poop_tick
from petsim.config.engine_config import EngineConfig
from petsim.config.time import TICK_DURATION_MS, TICKS_PER_DAY
from petsim.content.registry import DEFAULT_CONTENT, ContentRegistry
from petsim.energy import apply_energy_regen
from petsim.events.domain_events import (
    ExplorationCompleteEvent,
    StageTransitionEvent,
    SubstageTransitionEvent,
    TrainingCompleteEvent,
)
from petsim.events.event_bus import EventBus
from petsim.foraging import (
    ExplorationDrop,
    ExplorationResult,
    apply_exploration_completion,
    process_exploration_tick,
)
from petsim.growth import GrowthTickResult, process_growth_tick
from petsim.pet.models import Exploring, Pet, Training
from petsim.pet.stats import calculate_pet_max_stats
from petsim.sleep import process_sleep_tick, reset_daily_sleep
from petsim.training import (
    TrainingResult,
    apply_training_completion,
    complete_training,
    process_training_tick,
)
from petsim.update_phases import TickPhase
from petsim.util.rng import require_rng_param

logger = logging.getLogger(__name__)


# ============================================================================
# Pure per-tick step
# ============================================================================


@dataclass(frozen=True)
class PetTickOutcome:
    """What a pure tick did, for callers that need more than the new pet."""

    pet: Pet
    growth: GrowthTickResult
    training_result: Optional[TrainingResult] = None
    training_facility_id: Optional[str] = None


def run_pet_tick(pet: Pet, content: ContentRegistry = DEFAULT_CONTENT) -> PetTickOutcome:
    """Run the seven tick phases against ``pet``.

    Phases 1 to 5 all read the pet as it stood at the start of the tick.
    Stage changes from phase 6 raise the caps used by the next tick.
    """
    max_stats = calculate_pet_max_stats(pet, content)
    sleeping = pet.is_sleeping

    # TickPhase.CARE_LIFE
    care_life = pet.care_life_stats.care_life
    if max_stats is not None:
        care_life = apply_care_life_change(care_life, pet.care_stats, pet.poop.count, max_stats)

    # TickPhase.ENERGY
    energy = pet.energy_stats.energy
    if max_stats is not None:
        energy = apply_energy_regen(energy, max_stats.energy, sleeping)

    # TickPhase.POOP
    poop = process_poop_tick(pet.poop, sleeping)

    # TickPhase.CARE_DECAY
    care_stats = apply_care_decay(pet.care_stats, sleeping, pet.poop.count, max_stats)

    # TickPhase.SLEEP
    sleep = process_sleep_tick(pet.sleep, sleeping)

    # TickPhase.GROWTH
    growth = process_growth_tick(pet, content)

    updated = replace(
        pet,
        growth=growth.growth,
        battle_stats=growth.battle_stats,
        care_stats=care_stats,
        energy_stats=replace(pet.energy_stats, energy=energy),
        care_life_stats=replace(pet.care_life_stats, care_life=care_life),
        poop=poop,
        sleep=sleep,
    )

    # TickPhase.ACTIVITY (training; exploration needs an RNG and runs in TickProcessor)
    training_result = None
    facility_id = None
    active = updated.active_training
    if active is not None:
        next_training = process_training_tick(active)
        if next_training is None:
            training_result = complete_training(updated, content)
            facility_id = active.facility_id
            updated = apply_training_completion(updated, content)
        else:
            updated = replace(updated, activity=Training(next_training))

    return PetTickOutcome(updated, growth, training_result, facility_id)


def process_pet_tick(pet: Pet, content: ContentRegistry = DEFAULT_CONTENT) -> Pet:
    """Advance ``pet`` one tick. Pure and total."""
    return run_pet_tick(pet, content).pet


# ============================================================================
# Engine
# ============================================================================


@dataclass(frozen=True)
class TickReport:
    """Everything one engine tick produced."""

    pet: Pet
    events: Tuple[object, ...] = ()
    training_result: Optional[TrainingResult] = None
    training_facility_id: Optional[str] = None
    exploration_result: Optional[ExplorationResult] = None
    exploration_location_id: Optional[str] = None


@dataclass(frozen=True)
class CareStatsSnapshot:
    satiety: int
    hydration: int
    happiness: int
    energy: int

    @classmethod
    def of(cls, pet: Pet) -> "CareStatsSnapshot":
        return cls(
            satiety=pet.care_stats.satiety,
            hydration=pet.care_stats.hydration,
            happiness=pet.care_stats.happiness,
            energy=pet.energy_stats.energy,
        )


@dataclass(frozen=True)
class MaxStatsSnapshot:
    satiety: int
    hydration: int
    happiness: int
    energy: int
    care_life: int


@dataclass(frozen=True)
class OfflineExplorationResult:
    location_name: str
    items_found: Tuple[ExplorationDrop, ...]
    message: str


@dataclass(frozen=True)
class OfflineTrainingResult:
    facility_name: str
    result: TrainingResult


@dataclass(frozen=True)
class OfflineReport:
    """Summary shown to the player after time away.

    Attributes:
        elapsed_ms: Wall-clock time away
        ticks_processed: Ticks actually replayed (after capping)
        was_capped: True when the time away exceeded the offline cap
        pet_name: Name of the pet that was advanced
        before_stats: Care and energy before catch-up (micro)
        after_stats: Care and energy after catch-up (micro)
        max_stats: Caps at the start of catch-up; None for unknown species
        poop_before: Poop count before catch-up
        poop_after: Poop count after catch-up
        exploration_results: Foraging trips that finished while away
        training_results: Training sessions that finished while away
    """

    elapsed_ms: int
    ticks_processed: int
    was_capped: bool
    pet_name: str
    before_stats: CareStatsSnapshot
    after_stats: CareStatsSnapshot
    max_stats: Optional[MaxStatsSnapshot]
    poop_before: int
    poop_after: int
    exploration_results: Tuple[OfflineExplorationResult, ...] = field(default_factory=tuple)
    training_results: Tuple[OfflineTrainingResult, ...] = field(default_factory=tuple)


@dataclass(frozen=True)
class OfflineCatchupResult:
    pet: Pet
    ticks_processed: int
    was_capped: bool
    report: OfflineReport


TickCallback = Callable[[TickReport, int], None]


class TickProcessor:
    """Engine instance that advances one pet at a time.

    Args:
        rng: Seeded random source for drop rolls; required
        content: Content tables to read
        event_bus: Where notification events are published
        config: Engine toggles and limits
    """

    def __init__(
        self,
        rng: Optional[random.Random] = None,
        content: ContentRegistry = DEFAULT_CONTENT,
        event_bus: Optional[EventBus] = None,
        config: Optional[EngineConfig] = None,
    ) -> None:
        self.rng = require_rng_param(rng, "TickProcessor.__init__")
        self.content = content
        self.event_bus = event_bus if event_bus is not None else EventBus()
        self.config = config if config is not None else EngineConfig()

    def process_tick(self, pet: Pet) -> Pet:
        return self.advance(pet).pet

    def advance(self, pet: Pet) -> TickReport:
        """Advance one tick and publish what happened."""
        outcome = run_pet_tick(pet, self.content)
        updated = outcome.pet
        events: List[object] = []

        growth = outcome.growth
        age = growth.growth.age_ticks
        if growth.stage_transitioned:
            events.append(
                StageTransitionEvent(
                    pet_id=pet.identity.id,
                    pet_name=pet.identity.name,
                    previous_stage=growth.previous_stage,
                    new_stage=growth.growth.stage,
                    tick=age,
                )
            )
        elif growth.substage_transitioned:
            events.append(
                SubstageTransitionEvent(
                    pet_id=pet.identity.id,
                    stage=growth.growth.stage,
                    previous_substage=growth.previous_substage,
                    new_substage=growth.growth.substage,
                    tick=age,
                )
            )

        training_result = outcome.training_result
        if training_result is not None and training_result.success:
            events.append(
                TrainingCompleteEvent(
                    pet_id=pet.identity.id,
                    facility_id=outcome.training_facility_id,
                    message=training_result.message,
                    stats_gained=tuple(sorted(training_result.stats_gained.items())),
                    tick=age,
                )
            )

        exploration_result = None
        location_id = None
        active = updated.active_exploration
        if active is not None:
            next_exploration = process_exploration_tick(active)
            if next_exploration is None:
                location_id = active.location_id
                updated, exploration_result = apply_exploration_completion(
                    updated, self.rng, self.config.foraging_skill_level, self.content
                )
                events.append(
                    ExplorationCompleteEvent(
                        pet_id=pet.identity.id,
                        location_id=location_id,
                        message=exploration_result.message,
                        items_found=tuple(
                            (drop.item_id, drop.quantity) for drop in exploration_result.items_found
                        ),
                        tick=age,
                    )
                )
            else:
                updated = replace(updated, activity=Exploring(next_exploration))

        if self.config.daily_sleep_reset and age // TICKS_PER_DAY > pet.growth.age_ticks // TICKS_PER_DAY:
            updated = replace(updated, sleep=reset_daily_sleep(updated.sleep))

        for event in events:
            self.event_bus.emit(event)

        return TickReport(
            pet=updated,
            events=tuple(events),
            training_result=training_result,
            training_facility_id=outcome.training_facility_id,
            exploration_result=exploration_result,
            exploration_location_id=location_id,
        )

    def process_multiple_ticks(
        self, pet: Pet, tick_count: int, on_tick: Optional[TickCallback] = None
    ) -> Pet:
        """Replay ``tick_count`` ticks in order, as a live clock would."""
        for index in range(tick_count):
            report = self.advance(pet)
            pet = report.pet
            if on_tick is not None:
                on_tick(report, index)
        return pet

    def process_offline_catchup(
        self, pet: Pet, ticks_elapsed: int, elapsed_ms: Optional[int] = None
    ) -> OfflineCatchupResult:
        """Replay time spent away, capped at ``config.max_offline_ticks``."""
        cap = self.config.max_offline_ticks
        ticks = max(0, min(ticks_elapsed, cap))
        was_capped = ticks_elapsed > cap

        before = CareStatsSnapshot.of(pet)
        max_stats = calculate_pet_max_stats(pet, self.content)
        max_snapshot = None
        if max_stats is not None:
            max_snapshot = MaxStatsSnapshot(
                satiety=max_stats.satiety,
                hydration=max_stats.hydration,
                happiness=max_stats.happiness,
                energy=max_stats.energy,
                care_life=max_stats.care_life,
            )

        explorations: List[OfflineExplorationResult] = []
        trainings: List[OfflineTrainingResult] = []

        def collect(report: TickReport, _index: int) -> None:
            if report.exploration_result is not None:
                location = self.content.get_location(report.exploration_location_id)
                explorations.append(
                    OfflineExplorationResult(
                        location_name=location.name if location else "Unknown Location",
                        items_found=report.exploration_result.items_found,
                        message=report.exploration_result.message,
                    )
                )
            if report.training_result is not None:
                facility = self.content.get_facility(report.training_facility_id)
                trainings.append(
                    OfflineTrainingResult(
                        facility_name=facility.name if facility else "Unknown Facility",
                        result=report.training_result,
                    )
                )

        logger.info("Catching up %s: %d ticks (capped=%s)", pet.identity.name, ticks, was_capped)
        caught_up = self.process_multiple_ticks(pet, ticks, collect)

        report = OfflineReport(
            elapsed_ms=elapsed_ms if elapsed_ms is not None else ticks_elapsed * TICK_DURATION_MS,
            ticks_processed=ticks,
            was_capped=was_capped,
            pet_name=pet.identity.name,
            before_stats=before,
            after_stats=CareStatsSnapshot.of(caught_up),
            max_stats=max_snapshot,
            poop_before=pet.poop.count,
            poop_after=caught_up.poop.count,
            exploration_results=tuple(explorations),
            training_results=tuple(trainings),
        )
        return OfflineCatchupResult(caught_up, ticks, was_capped, report)


__all__ = [
    "OfflineCatchupResult",
    "OfflineReport",
    "PetTickOutcome",
    "TickPhase",
    "TickProcessor",
    "TickReport",
    "process_pet_tick",
    "run_pet_tick",
]
