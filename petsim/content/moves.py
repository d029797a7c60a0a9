"""Battle move definitions.

Every move costs battle energy (display units). Status moves have zero power
and act only through their effects.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, Mapping, Optional, Tuple


class MoveCategory(Enum):
    PHYSICAL = "physical"
    SPECIAL = "special"
    STATUS = "status"


class MoveTarget(Enum):
    SELF = "self"
    OPPONENT = "opponent"


class EffectType(Enum):
    HEAL = "heal"
    STAT_CHANGE = "stat_change"
    STATUS_EFFECT = "status_effect"


@dataclass(frozen=True)
class StatusEffect:
    """A lingering condition on a battle pet.

    ``duration`` counts the end-of-turn upkeeps left; the effect is removed
    once it reaches zero.
    """

    id: str
    name: str
    description: str
    duration: int
    tick_damage: int = 0
    stat_modifiers: Mapping[str, int] = field(default_factory=dict)


@dataclass(frozen=True)
class MoveEffect:
    """Side effect of a move.

    Attributes:
        effect_type: What the effect does
        value: Heal percent of max health, or stat modifier delta
        stat: Modifier affected by STAT_CHANGE
        status_effect: Template applied by STATUS_EFFECT
        probability: Chance to trigger; None always triggers
    """

    effect_type: EffectType
    value: int = 0
    stat: Optional[str] = None
    status_effect: Optional[StatusEffect] = None
    probability: Optional[float] = None


@dataclass(frozen=True)
class Move:
    id: str
    name: str
    category: MoveCategory
    power: int
    accuracy: int
    energy_cost: int
    priority: int = 0
    effects: Tuple[MoveEffect, ...] = ()
    target: MoveTarget = MoveTarget.OPPONENT


FLINCH = StatusEffect(
    id="flinch", name="Flinched", description="Unable to act this turn", duration=1
)
CONFUSED = StatusEffect(
    id="confused",
    name="Confused",
    description="Confused by a mysterious ray",
    duration=3,
)

_MOVE_LIST = (
    Move("tackle", "Tackle", MoveCategory.PHYSICAL, power=25, accuracy=95, energy_cost=10),
    Move("scratch", "Scratch", MoveCategory.PHYSICAL, power=20, accuracy=100, energy_cost=8),
    Move(
        "bite",
        "Bite",
        MoveCategory.PHYSICAL,
        power=30,
        accuracy=90,
        energy_cost=12,
        effects=(
            MoveEffect(EffectType.STATUS_EFFECT, status_effect=FLINCH, probability=0.3),
        ),
    ),
    Move("energy_blast", "Energy Blast", MoveCategory.SPECIAL, power=35, accuracy=85, energy_cost=15),
    Move(
        "water_splash",
        "Water Splash",
        MoveCategory.SPECIAL,
        power=28,
        accuracy=95,
        energy_cost=12,
        effects=(
            MoveEffect(EffectType.STAT_CHANGE, value=-10, stat="accuracy", probability=0.4),
        ),
    ),
    Move(
        "focus",
        "Focus",
        MoveCategory.STATUS,
        power=0,
        accuracy=100,
        energy_cost=8,
        effects=(MoveEffect(EffectType.STAT_CHANGE, value=20, stat="attack"),),
        target=MoveTarget.SELF,
    ),
    Move(
        "defend",
        "Defend",
        MoveCategory.STATUS,
        power=0,
        accuracy=100,
        energy_cost=6,
        effects=(MoveEffect(EffectType.STAT_CHANGE, value=25, stat="defense"),),
        target=MoveTarget.SELF,
    ),
    Move(
        "quick_step",
        "Quick Step",
        MoveCategory.STATUS,
        power=0,
        accuracy=100,
        energy_cost=10,
        effects=(MoveEffect(EffectType.STAT_CHANGE, value=30, stat="speed"),),
        target=MoveTarget.SELF,
    ),
    Move(
        "recover",
        "Recover",
        MoveCategory.STATUS,
        power=0,
        accuracy=100,
        energy_cost=20,
        effects=(MoveEffect(EffectType.HEAL, value=50),),
        target=MoveTarget.SELF,
    ),
    Move("power_strike", "Power Strike", MoveCategory.PHYSICAL, power=45, accuracy=80, energy_cost=25),
    Move(
        "confusion_ray",
        "Confusion Ray",
        MoveCategory.STATUS,
        power=0,
        accuracy=75,
        energy_cost=18,
        effects=(
            MoveEffect(EffectType.STATUS_EFFECT, status_effect=CONFUSED, probability=1.0),
        ),
    ),
    # Heal lands on the move's target, so the drain tops up the opponent
    Move(
        "energy_drain",
        "Energy Drain",
        MoveCategory.SPECIAL,
        power=20,
        accuracy=90,
        energy_cost=15,
        effects=(MoveEffect(EffectType.HEAL, value=25),),
    ),
)

MOVES: Dict[str, Move] = {move.id: move for move in _MOVE_LIST}
