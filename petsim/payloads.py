"""Data transfer objects for the UI layer.

The engine works on frozen dataclasses in micro-units. The UI wants display
units, plain strings for enums and JSON bytes, so these pydantic models are
built at the edge and serialized with orjson.
"""

from typing import Dict, List, Optional

import orjson
from pydantic import BaseModel

from petsim.activity import calculate_progress
from petsim.care.care_stats import get_care_stat_threshold
from petsim.content.registry import DEFAULT_CONTENT, ContentRegistry
from petsim.growth import get_stage_progress_percent
from petsim.pet.models import Pet
from petsim.pet.stats import calculate_max_health, calculate_pet_max_stats
from petsim.tick import CareStatsSnapshot, OfflineReport
from petsim.util.units import to_display


class CareStatData(BaseModel):
    """One care stat as shown on the status screen."""

    value: int
    max: Optional[int] = None
    threshold: Optional[str] = None


class ActivityData(BaseModel):
    state: str
    target_id: Optional[str] = None
    progress: Optional[int] = None  # Percentage (0-100)
    ticks_remaining: Optional[int] = None


class PetStatusPayload(BaseModel):
    """Snapshot of a pet for rendering."""

    type: str = "pet_status"
    id: str
    name: str
    species_id: str
    stage: str
    substage: int
    age_ticks: int
    stage_progress: int  # Percentage (0-100)
    care: Dict[str, CareStatData]
    energy: CareStatData
    care_life: CareStatData
    health: CareStatData
    poop_count: int
    battle_stats: Dict[str, int]
    activity: ActivityData

    def to_json(self) -> bytes:
        return orjson.dumps(self.model_dump())


class ItemFoundData(BaseModel):
    item_id: str
    quantity: int


class OfflineExplorationData(BaseModel):
    location_name: str
    message: str
    items_found: List[ItemFoundData]


class OfflineTrainingData(BaseModel):
    facility_name: str
    message: str
    stats_gained: Dict[str, int]


class StatsSnapshotData(BaseModel):
    satiety: int
    hydration: int
    happiness: int
    energy: int


class OfflineReportPayload(BaseModel):
    """Summary of time spent away, in display units."""

    type: str = "offline_report"
    pet_name: str
    elapsed_ms: int
    ticks_processed: int
    was_capped: bool
    before: StatsSnapshotData
    after: StatsSnapshotData
    poop_before: int
    poop_after: int
    explorations: List[OfflineExplorationData] = []
    trainings: List[OfflineTrainingData] = []

    def to_json(self) -> bytes:
        return orjson.dumps(self.model_dump())


def _care_stat(value: int, max_value: Optional[int]) -> CareStatData:
    if max_value is None:
        return CareStatData(value=to_display(value))
    return CareStatData(
        value=to_display(value),
        max=to_display(max_value),
        threshold=get_care_stat_threshold(value, max_value).value,
    )


def _activity_data(pet: Pet) -> ActivityData:
    training = pet.active_training
    if training is not None:
        return ActivityData(
            state=pet.activity_state.value,
            target_id=training.facility_id,
            progress=calculate_progress(training.duration_ticks, training.ticks_remaining),
            ticks_remaining=training.ticks_remaining,
        )
    exploration = pet.active_exploration
    if exploration is not None:
        return ActivityData(
            state=pet.activity_state.value,
            target_id=exploration.location_id,
            progress=calculate_progress(exploration.duration_ticks, exploration.ticks_remaining),
            ticks_remaining=exploration.ticks_remaining,
        )
    battle = pet.active_battle
    if battle is not None:
        return ActivityData(state=pet.activity_state.value, target_id=battle.battle_id)
    return ActivityData(state=pet.activity_state.value)


def build_pet_status(pet: Pet, content: ContentRegistry = DEFAULT_CONTENT) -> PetStatusPayload:
    max_stats = calculate_pet_max_stats(pet, content)
    care = pet.care_stats
    return PetStatusPayload(
        id=pet.identity.id,
        name=pet.identity.name,
        species_id=pet.identity.species_id,
        stage=pet.growth.stage.value,
        substage=pet.growth.substage,
        age_ticks=pet.growth.age_ticks,
        stage_progress=get_stage_progress_percent(pet.growth.stage, pet.growth.age_ticks, content),
        care={
            "satiety": _care_stat(care.satiety, max_stats.satiety if max_stats else None),
            "hydration": _care_stat(care.hydration, max_stats.hydration if max_stats else None),
            "happiness": _care_stat(care.happiness, max_stats.happiness if max_stats else None),
        },
        energy=_care_stat(pet.energy_stats.energy, max_stats.energy if max_stats else None),
        care_life=_care_stat(pet.care_life_stats.care_life, max_stats.care_life if max_stats else None),
        # Health is already in display units
        health=CareStatData(value=pet.health_stats.health, max=calculate_max_health(pet.battle_stats)),
        poop_count=pet.poop.count,
        battle_stats=pet.battle_stats.to_dict(),
        activity=_activity_data(pet),
    )


def _snapshot_data(snapshot: CareStatsSnapshot) -> StatsSnapshotData:
    return StatsSnapshotData(
        satiety=to_display(snapshot.satiety),
        hydration=to_display(snapshot.hydration),
        happiness=to_display(snapshot.happiness),
        energy=to_display(snapshot.energy),
    )


def build_offline_report(report: OfflineReport) -> OfflineReportPayload:
    return OfflineReportPayload(
        pet_name=report.pet_name,
        elapsed_ms=report.elapsed_ms,
        ticks_processed=report.ticks_processed,
        was_capped=report.was_capped,
        before=_snapshot_data(report.before_stats),
        after=_snapshot_data(report.after_stats),
        poop_before=report.poop_before,
        poop_after=report.poop_after,
        explorations=[
            OfflineExplorationData(
                location_name=entry.location_name,
                message=entry.message,
                items_found=[ItemFoundData(item_id=d.item_id, quantity=d.quantity) for d in entry.items_found],
            )
            for entry in report.exploration_results
        ],
        trainings=[
            OfflineTrainingData(
                facility_name=entry.facility_name,
                message=entry.result.message,
                stats_gained=dict(entry.result.stats_gained),
            )
            for entry in report.training_results
        ],
    )
