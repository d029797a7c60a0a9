"""Immutable value objects describing a pet.

The ``Pet`` aggregate is owned by exactly one caller at a time. Every engine
operation takes a pet and returns a new one built with
``dataclasses.replace``; nothing here is ever mutated in place.

Activity is a tagged union. A pet is ``Idle``, ``Sleeping``, ``Training``,
``Exploring`` or ``Battling``, and only the busy variants carry their active
record. "Exactly one active field matches the activity state" is therefore a
property of the types rather than a convention callers must remember.
"""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from typing import ClassVar, Dict, Optional, Tuple, Union

from petsim.state_machine import ActivityState, GrowthStage

BATTLE_STAT_NAMES: Tuple[str, ...] = (
    "strength",
    "endurance",
    "agility",
    "precision",
    "fortitude",
    "cunning",
)

STARTER_MOVE_IDS: Tuple[str, ...] = ("tackle", "scratch", "focus", "defend")


@dataclass(frozen=True)
class BattleStats:
    """The six battle attributes."""

    strength: int = 0
    endurance: int = 0
    agility: int = 0
    precision: int = 0
    fortitude: int = 0
    cunning: int = 0

    def __add__(self, other: "BattleStats") -> "BattleStats":
        return BattleStats(
            **{name: getattr(self, name) + getattr(other, name) for name in BATTLE_STAT_NAMES}
        )

    def get(self, stat: str) -> int:
        return getattr(self, stat)

    def with_gains(self, gains: Dict[str, int]) -> "BattleStats":
        """Return a copy with ``gains`` added; unknown stat names are ignored."""
        changes = {
            stat: getattr(self, stat) + amount
            for stat, amount in gains.items()
            if stat in BATTLE_STAT_NAMES
        }
        return replace(self, **changes)

    def to_dict(self) -> Dict[str, int]:
        return {name: getattr(self, name) for name in BATTLE_STAT_NAMES}


ZERO_BATTLE_STATS = BattleStats()


@dataclass(frozen=True)
class PetIdentity:
    id: str
    name: str
    species_id: str


@dataclass(frozen=True)
class PetGrowth:
    """Age and life stage.

    Attributes:
        stage: Current growth stage
        substage: 1-based index within the stage
        birth_time: Wall-clock birth timestamp (ms) supplied by the caller
        age_ticks: Ticks lived so far
    """

    stage: GrowthStage = GrowthStage.BABY
    substage: int = 1
    birth_time: int = 0
    age_ticks: int = 0


@dataclass(frozen=True)
class CareStats:
    """Satiety, hydration and happiness in micro-units."""

    satiety: int
    hydration: int
    happiness: int


@dataclass(frozen=True)
class EnergyStats:
    energy: int  # micro-units


@dataclass(frozen=True)
class CareLifeStats:
    care_life: int  # micro-units


@dataclass(frozen=True)
class HealthStats:
    health: int  # display units, read and written by battles


@dataclass(frozen=True)
class BonusMaxStats:
    """Permanent cap increases from items, in micro-units (battle in points)."""

    satiety: int = 0
    hydration: int = 0
    happiness: int = 0
    energy: int = 0
    care_life: int = 0
    battle: BattleStats = field(default_factory=BattleStats)


@dataclass(frozen=True)
class PetPoop:
    """Poop count and the micro timer counting down to the next one."""

    count: int
    ticks_until_next: int


@dataclass(frozen=True)
class PetSleep:
    sleep_start_tick: Optional[int] = None
    sleep_ticks_today: int = 0


# ============================================================================
# Active activity records
# ============================================================================


@dataclass(frozen=True)
class ActiveTraining:
    """A running training session.

    ``energy_cost`` is the exact micro amount deducted at start, refunded in
    full on cancellation.
    """

    facility_id: str
    session_type: str
    start_tick: int
    duration_ticks: int
    ticks_remaining: int
    energy_cost: int


@dataclass(frozen=True)
class ActiveExploration:
    """A running foraging trip."""

    location_id: str
    forage_table_id: str
    start_tick: int
    duration_ticks: int
    ticks_remaining: int
    energy_cost: int
    activity_type: str = "forage"


@dataclass(frozen=True)
class ActiveBattleRef:
    """Pointer to a battle the caller holds; the pet never embeds the battle."""

    battle_id: str
    start_tick: int = 0


# ============================================================================
# Activity variants
# ============================================================================


@dataclass(frozen=True)
class Idle:
    state: ClassVar[ActivityState] = ActivityState.IDLE


@dataclass(frozen=True)
class Sleeping:
    state: ClassVar[ActivityState] = ActivityState.SLEEPING


@dataclass(frozen=True)
class Training:
    training: ActiveTraining
    state: ClassVar[ActivityState] = ActivityState.TRAINING


@dataclass(frozen=True)
class Exploring:
    exploration: ActiveExploration
    state: ClassVar[ActivityState] = ActivityState.EXPLORING


@dataclass(frozen=True)
class Battling:
    battle: ActiveBattleRef
    state: ClassVar[ActivityState] = ActivityState.BATTLING


Activity = Union[Idle, Sleeping, Training, Exploring, Battling]

IDLE = Idle()
SLEEPING = Sleeping()


@dataclass(frozen=True)
class Pet:
    """The central aggregate advanced by the tick engine."""

    identity: PetIdentity
    growth: PetGrowth
    care_stats: CareStats
    energy_stats: EnergyStats
    care_life_stats: CareLifeStats
    health_stats: HealthStats
    battle_stats: BattleStats
    poop: PetPoop
    trained_battle_stats: BattleStats = field(default_factory=BattleStats)
    bonus_max_stats: BonusMaxStats = field(default_factory=BonusMaxStats)
    sleep: PetSleep = field(default_factory=PetSleep)
    activity: Activity = IDLE
    move_ids: Tuple[str, ...] = STARTER_MOVE_IDS

    @property
    def activity_state(self) -> ActivityState:
        return self.activity.state

    @property
    def active_training(self) -> Optional[ActiveTraining]:
        return self.activity.training if isinstance(self.activity, Training) else None

    @property
    def active_exploration(self) -> Optional[ActiveExploration]:
        return self.activity.exploration if isinstance(self.activity, Exploring) else None

    @property
    def active_battle(self) -> Optional[ActiveBattleRef]:
        return self.activity.battle if isinstance(self.activity, Battling) else None

    @property
    def is_sleeping(self) -> bool:
        return isinstance(self.activity, Sleeping)

    @property
    def name(self) -> str:
        return self.identity.name

    @property
    def species_id(self) -> str:
        return self.identity.species_id
