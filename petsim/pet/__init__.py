"""Pet aggregate and derived stats."""

from petsim.pet.models import (
    IDLE,
    SLEEPING,
    ActiveBattleRef,
    ActiveExploration,
    ActiveTraining,
    Activity,
    BattleStats,
    Battling,
    BonusMaxStats,
    CareLifeStats,
    CareStats,
    EnergyStats,
    Exploring,
    HealthStats,
    Idle,
    Pet,
    PetGrowth,
    PetIdentity,
    PetPoop,
    PetSleep,
    Sleeping,
    Training,
)

__all__ = [
    "IDLE",
    "SLEEPING",
    "ActiveBattleRef",
    "ActiveExploration",
    "ActiveTraining",
    "Activity",
    "BattleStats",
    "Battling",
    "BonusMaxStats",
    "CareLifeStats",
    "CareStats",
    "EnergyStats",
    "Exploring",
    "HealthStats",
    "Idle",
    "Pet",
    "PetGrowth",
    "PetIdentity",
    "PetPoop",
    "PetSleep",
    "Sleeping",
    "Training",
]
