"""Species definitions.

A species fixes a pet's base battle stats, how fast each stat grows across
stage transitions, and a multiplier applied to the stage's care and energy
caps.
"""

from dataclasses import dataclass, field
from typing import Dict, Mapping

from petsim.pet.models import BattleStats


@dataclass(frozen=True)
class Species:
    """Read-only species data.

    Attributes:
        id: Stable identifier used by pets
        name: Display name
        description: Flavour text
        base_stats: Battle stats a newly hatched pet starts with
        stat_growth: Growth rate ("low", "medium", "high") per battle stat
        care_cap_multiplier: Scales the stage's care and energy caps
    """

    id: str
    name: str
    description: str
    base_stats: BattleStats
    stat_growth: Mapping[str, str] = field(default_factory=dict)
    care_cap_multiplier: float = 1.0


SPECIES: Dict[str, Species] = {
    "florabit": Species(
        id="florabit",
        name="Florabit",
        description="A gentle plant-like creature with balanced abilities.",
        base_stats=BattleStats(10, 10, 10, 10, 10, 10),
        stat_growth={
            "strength": "medium",
            "endurance": "medium",
            "agility": "medium",
            "precision": "medium",
            "fortitude": "medium",
            "cunning": "medium",
        },
        care_cap_multiplier=1.0,
    ),
    "sparkfin": Species(
        id="sparkfin",
        name="Sparkfin",
        description="A swift aquatic creature that strikes with precision.",
        base_stats=BattleStats(
            strength=8, endurance=6, agility=14, precision=14, fortitude=8, cunning=10
        ),
        stat_growth={
            "strength": "medium",
            "endurance": "low",
            "agility": "high",
            "precision": "high",
            "fortitude": "low",
            "cunning": "medium",
        },
        care_cap_multiplier=0.85,
    ),
    "rockpup": Species(
        id="rockpup",
        name="Rockpup",
        description="A sturdy rock-like creature with high endurance.",
        base_stats=BattleStats(
            strength=12, endurance=14, agility=6, precision=8, fortitude=14, cunning=6
        ),
        stat_growth={
            "strength": "medium",
            "endurance": "high",
            "agility": "low",
            "precision": "low",
            "fortitude": "high",
            "cunning": "low",
        },
        care_cap_multiplier=1.2,
    ),
}
