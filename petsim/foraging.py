"""Foraging (exploration) resolver.

Foraging follows the same lifecycle as training, except that completion
rolls item drops. Those rolls need randomness, so every function that rolls
takes the caller's ``random.Random`` explicitly. Replaying the same seed
replays the same finds.

Why a multiplicative skill bonus?
---------------------------------
Each foraging skill level above 1 scales an entry's base rate by another 5%
(``base * (1 + (level - 1) * 0.05)``), capped at 1. Rare drops stay rare
for skilled players while common drops saturate, which an additive bonus
would not preserve.
"""

import logging
import random
from dataclasses import dataclass, field, replace
from typing import List, Optional, Tuple

from petsim.activity import (
    ActivityStartResult,
    CanStartResult,
    CancelResult,
    calculate_progress,
    check_activity_requirements,
    refund_energy,
    transition_activity,
)
from petsim.config.activities import DEFAULT_FORAGING_SKILL_LEVEL, SKILL_BONUS_PER_LEVEL
from petsim.content.forage import ForageEntry, ForageTable
from petsim.content.locations import FacilityType, LocationType
from petsim.content.registry import DEFAULT_CONTENT, ContentRegistry
from petsim.pet.models import IDLE, ActiveExploration, Exploring, Pet
from petsim.pet.stats import calculate_pet_max_stats
from petsim.state_machine import ActivityState
from petsim.util.rng import require_rng_param
from petsim.util.units import to_micro

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ExplorationDrop:
    item_id: str
    quantity: int


@dataclass(frozen=True)
class ExplorationResult:
    success: bool
    message: str
    items_found: Tuple[ExplorationDrop, ...] = field(default_factory=tuple)

    @property
    def item_count(self) -> int:
        return sum(drop.quantity for drop in self.items_found)


def _resolve_forage_table(
    location_id: str, content: ContentRegistry
) -> Tuple[Optional[ForageTable], str]:
    location = content.get_location(location_id)
    if location is None:
        logger.warning("Unknown location %s", location_id)
        return None, "Location not found."
    if location.location_type != LocationType.WILD:
        return None, "Can only forage in wild areas."
    if not location.has_facility(FacilityType.FORAGE_ZONE):
        return None, "This location has no forage zone."
    if not location.forage_table_id:
        return None, "Nothing to forage at this location."

    table = content.get_forage_table(location.forage_table_id)
    if table is None:
        logger.warning("Location %s names missing forage table %s", location_id, location.forage_table_id)
        return None, "Forage data not found."
    return table, ""


def can_start_foraging(
    pet: Pet, location_id: str, content: ContentRegistry = DEFAULT_CONTENT
) -> CanStartResult:
    table, message = _resolve_forage_table(location_id, content)
    if table is None:
        return CanStartResult(False, message)

    gate = check_activity_requirements(pet, "forage", table.base_energy_cost, ActivityState.EXPLORING)
    if not gate.allowed:
        return CanStartResult(False, gate.message)

    return CanStartResult(True, "Ready to forage!")


def start_foraging(
    pet: Pet, location_id: str, current_tick: int, content: ContentRegistry = DEFAULT_CONTENT
) -> ActivityStartResult:
    check = can_start_foraging(pet, location_id, content)
    if not check.allowed:
        return ActivityStartResult(False, pet, check.message)

    location = content.get_location(location_id)
    table = content.get_forage_table(location.forage_table_id)
    energy_cost = to_micro(table.base_energy_cost)

    active = ActiveExploration(
        location_id=location_id,
        forage_table_id=table.id,
        start_tick=current_tick,
        duration_ticks=table.base_duration_ticks,
        ticks_remaining=table.base_duration_ticks,
        energy_cost=energy_cost,
    )
    moved = transition_activity(pet, Exploring(active), current_tick)
    if moved.is_err():
        return ActivityStartResult(False, pet, moved.error)

    exploring = moved.unwrap()
    exploring = replace(
        exploring,
        energy_stats=replace(exploring.energy_stats, energy=max(0, pet.energy_stats.energy - energy_cost)),
    )
    return ActivityStartResult(True, exploring, f"Started foraging at {location.name}!")


def process_exploration_tick(exploration: ActiveExploration) -> Optional[ActiveExploration]:
    """Count down one tick; None means the trip just finished."""
    ticks_remaining = exploration.ticks_remaining - 1
    if ticks_remaining <= 0:
        return None
    return replace(exploration, ticks_remaining=ticks_remaining)


def effective_drop_rate(entry: ForageEntry, skill_level: int) -> float:
    bonus = (skill_level - 1) * SKILL_BONUS_PER_LEVEL
    return min(1.0, entry.base_drop_rate * (1 + bonus))


def calculate_forage_drops(
    table: ForageTable,
    rng: random.Random,
    skill_level: int = DEFAULT_FORAGING_SKILL_LEVEL,
) -> List[ExplorationDrop]:
    """Roll each entry independently.

    Entries whose ``min_skill_level`` exceeds ``skill_level`` never roll and
    consume no randomness.
    """
    rng = require_rng_param(rng, "calculate_forage_drops")
    drops: List[ExplorationDrop] = []
    for entry in table.entries:
        if skill_level < entry.min_skill_level:
            continue
        if rng.random() < effective_drop_rate(entry, skill_level):
            low, high = entry.quantity
            quantity = low if low == high else rng.randint(low, high)
            drops.append(ExplorationDrop(entry.item_id, quantity))
    return drops


def complete_foraging(
    pet: Pet,
    rng: random.Random,
    skill_level: int = DEFAULT_FORAGING_SKILL_LEVEL,
    content: ContentRegistry = DEFAULT_CONTENT,
) -> ExplorationResult:
    active = pet.active_exploration
    if active is None:
        return ExplorationResult(False, "No active exploration to complete.")

    table = content.get_forage_table(active.forage_table_id)
    if table is None:
        return ExplorationResult(False, "Forage data not found.")

    drops = calculate_forage_drops(table, rng, skill_level)
    if not drops:
        return ExplorationResult(True, "Foraging complete, but you didn't find anything this time.")

    count = sum(drop.quantity for drop in drops)
    plural = "" if count == 1 else "s"
    return ExplorationResult(True, f"Foraging complete! Found {count} item{plural}.", tuple(drops))


def apply_exploration_completion(
    pet: Pet,
    rng: random.Random,
    skill_level: int = DEFAULT_FORAGING_SKILL_LEVEL,
    content: ContentRegistry = DEFAULT_CONTENT,
) -> Tuple[Pet, ExplorationResult]:
    """Roll the finds and release the pet to Idle.

    Returns:
        (idle pet, result). Found items are reported, not stored on the pet;
        the inventory layer adds them.
    """
    result = complete_foraging(pet, rng, skill_level, content)
    if result.success:
        logger.debug("%s: %s", pet.identity.id, result.message)
    return replace(pet, activity=IDLE), result


def cancel_exploration(pet: Pet, content: ContentRegistry = DEFAULT_CONTENT) -> CancelResult:
    active = pet.active_exploration
    if active is None:
        return CancelResult(False, pet, "No exploration session to cancel.")

    max_stats = calculate_pet_max_stats(pet, content)
    energy = refund_energy(pet, active.energy_cost, max_stats.energy if max_stats else None)
    cancelled = replace(pet, activity=IDLE, energy_stats=replace(pet.energy_stats, energy=energy))
    return CancelResult(
        True,
        cancelled,
        "Exploration cancelled. Energy has been refunded.",
        refund=energy - pet.energy_stats.energy,
    )


def get_exploration_progress(exploration: ActiveExploration) -> int:
    return calculate_progress(exploration.duration_ticks, exploration.ticks_remaining)


def get_location_forage_info(
    location_id: str, content: ContentRegistry = DEFAULT_CONTENT
) -> Optional[ForageTable]:
    location = content.get_location(location_id)
    if location is None or not location.forage_table_id:
        return None
    return content.get_forage_table(location.forage_table_id)
