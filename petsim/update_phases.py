"""Phase definitions for one pet tick.

Why Explicit Phases?
--------------------
The order in which a tick applies its steps changes the result. Care life
must see the care stats as they stood at the end of the previous tick, so
that drain and recovery reflect sustained neglect or sustained care rather
than a same-tick snapshot. Naming the phases makes that order a documented
contract that ``process_pet_tick`` follows step by step and tests can
assert.

    for phase in TickPhase:
        pet = step_for[phase](pet)
"""

from enum import Enum
from typing import Dict

__all__ = [
    "TickPhase",
    "PHASE_DESCRIPTIONS",
    "TICK_PHASE_ORDER",
]


class TickPhase(Enum):
    """Steps of a single tick, in execution order.

    1. CARE_LIFE: Drain or recover care life from pre-decay care stats
    2. ENERGY: Regenerate energy (faster while sleeping)
    3. POOP: Count down the poop timer, maybe add a poop
    4. CARE_DECAY: Decay satiety, hydration and happiness
    5. SLEEP: Accumulate today's sleep
    6. GROWTH: Age one tick, check stage and substage transitions
    7. ACTIVITY: Progress training or exploration, applying completion
    """

    CARE_LIFE = 1
    ENERGY = 2
    POOP = 3
    CARE_DECAY = 4
    SLEEP = 5
    GROWTH = 6
    ACTIVITY = 7


TICK_PHASE_ORDER = tuple(TickPhase)

# Human-readable descriptions for debugging
PHASE_DESCRIPTIONS: Dict[TickPhase, str] = {
    TickPhase.CARE_LIFE: "Applying care life drain or recovery",
    TickPhase.ENERGY: "Regenerating energy",
    TickPhase.POOP: "Counting down to the next poop",
    TickPhase.CARE_DECAY: "Decaying care stats",
    TickPhase.SLEEP: "Tracking sleep time",
    TickPhase.GROWTH: "Aging and checking growth stage",
    TickPhase.ACTIVITY: "Progressing the active activity",
}
