"""Derived maximum stats for a pet.

Caps depend on the growth stage, the species' care cap multiplier and any
permanent bonuses. They are recomputed on demand rather than stored, so a
stage transition automatically raises the caps used on the next tick.
"""

from dataclasses import dataclass
from typing import Optional

from petsim.config.care import BASE_HEALTH, HEALTH_PER_ENDURANCE
from petsim.content.registry import DEFAULT_CONTENT, ContentRegistry
from petsim.pet.models import BattleStats, Pet


@dataclass(frozen=True)
class PetMaxStats:
    """Upper bounds for a pet's stats (micro-units, battle in points)."""

    satiety: int
    hydration: int
    happiness: int
    energy: int
    care_life: int
    battle: BattleStats


def calculate_pet_max_stats(
    pet: Pet, content: ContentRegistry = DEFAULT_CONTENT
) -> Optional[PetMaxStats]:
    """Compute the caps for ``pet``.

    Returns:
        The caps, or None when the species or stage is not in ``content``
    """
    species = content.get_species(pet.identity.species_id)
    stage_def = content.get_growth_stage(pet.growth.stage)
    if species is None or stage_def is None:
        return None

    bonus = pet.bonus_max_stats
    care_base = int(stage_def.base_care_stat_max * species.care_cap_multiplier)
    energy_base = int(stage_def.base_energy_max * species.care_cap_multiplier)
    return PetMaxStats(
        satiety=care_base + bonus.satiety,
        hydration=care_base + bonus.hydration,
        happiness=care_base + bonus.happiness,
        energy=energy_base + bonus.energy,
        care_life=stage_def.care_life_max + bonus.care_life,
        battle=species.base_stats + bonus.battle,
    )


def calculate_max_health(battle_stats: BattleStats) -> int:
    """Max battle health in display units: 30 + 2 per endurance point."""
    return BASE_HEALTH + HEALTH_PER_ENDURANCE * battle_stats.endurance
