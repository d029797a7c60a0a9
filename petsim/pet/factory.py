"""Pet construction."""

import logging
from typing import Optional

from petsim.care.poop import get_initial_poop_timer
from petsim.content.registry import DEFAULT_CONTENT, ContentRegistry
from petsim.exceptions import ContentError
from petsim.pet.models import (
    CareLifeStats,
    CareStats,
    EnergyStats,
    HealthStats,
    Pet,
    PetGrowth,
    PetIdentity,
    PetPoop,
)
from petsim.pet.stats import calculate_max_health, calculate_pet_max_stats
from petsim.state_machine import GrowthStage

logger = logging.getLogger(__name__)


def create_pet(
    name: str,
    species_id: str,
    pet_id: Optional[str] = None,
    birth_time: int = 0,
    content: ContentRegistry = DEFAULT_CONTENT,
) -> Pet:
    """Hatch a new baby pet at full care, energy, care life and health.

    Args:
        name: Display name
        species_id: Species to hatch; must exist in ``content``
        pet_id: Stable id; defaults to ``"pet_<name>"``
        birth_time: Wall-clock birth timestamp in ms
        content: Content tables to read species data from

    Raises:
        ContentError: If the species is unknown. Creation is the one place an
            unknown species is a programming error rather than a degraded
            no-op.
    """
    species = content.get_species(species_id)
    if species is None:
        raise ContentError(f"Unknown species: {species_id}")

    identity = PetIdentity(id=pet_id or f"pet_{name.lower()}", name=name, species_id=species_id)
    shell = Pet(
        identity=identity,
        growth=PetGrowth(stage=GrowthStage.BABY, substage=1, birth_time=birth_time, age_ticks=0),
        care_stats=CareStats(0, 0, 0),
        energy_stats=EnergyStats(0),
        care_life_stats=CareLifeStats(0),
        health_stats=HealthStats(0),
        battle_stats=species.base_stats,
        poop=PetPoop(count=0, ticks_until_next=get_initial_poop_timer()),
    )
    max_stats = calculate_pet_max_stats(shell, content)
    if max_stats is None:
        raise ContentError(f"No growth stage data for {GrowthStage.BABY.value}")

    pet = Pet(
        identity=identity,
        growth=shell.growth,
        care_stats=CareStats(
            satiety=max_stats.satiety,
            hydration=max_stats.hydration,
            happiness=max_stats.happiness,
        ),
        energy_stats=EnergyStats(max_stats.energy),
        care_life_stats=CareLifeStats(max_stats.care_life),
        health_stats=HealthStats(calculate_max_health(species.base_stats)),
        battle_stats=species.base_stats,
        poop=shell.poop,
    )
    logger.debug("Hatched %s the %s", name, species.name)
    return pet
