"""Battle value objects.

A ``Battle`` holds two ``BattlePet`` projections, never the source pets.
Every resolver step returns a new ``Battle`` whose ``turns`` tuple extends
the previous one; recorded turns are never rewritten.
"""

from dataclasses import dataclass, field, replace
from enum import Enum
from typing import Optional, Tuple

from petsim.config.battle import STAT_MODIFIER_LIMIT
from petsim.content.moves import StatusEffect
from petsim.state_machine import BattleStatus

MODIFIER_STATS: Tuple[str, ...] = ("attack", "defense", "speed", "accuracy", "evasion")


class BattleType(Enum):
    WILD = "wild"
    TRAINER = "trainer"
    TOURNAMENT = "tournament"
    TRAINING = "training"


class TurnPhase(Enum):
    SELECT_ACTION = "select_action"
    EXECUTE_ACTIONS = "execute_actions"
    END_TURN = "end_turn"


class ActionType(Enum):
    MOVE = "move"
    FLEE = "flee"
    USE_ITEM = "use_item"


class ResultType(Enum):
    DAMAGE = "damage"
    HEAL = "heal"
    MISS = "miss"
    CRITICAL = "critical"
    STATUS_APPLIED = "status_applied"
    STATUS_REMOVED = "status_removed"
    STAT_CHANGED = "stat_changed"


@dataclass(frozen=True)
class StatModifiers:
    """Temporary battle modifiers, each saturating at +/-50."""

    attack: int = 0
    defense: int = 0
    speed: int = 0
    accuracy: int = 0
    evasion: int = 0

    def get(self, stat: str) -> int:
        return getattr(self, stat)

    def adjusted(self, stat: str, delta: int) -> "StatModifiers":
        if stat not in MODIFIER_STATS:
            return self
        value = max(-STAT_MODIFIER_LIMIT, min(STAT_MODIFIER_LIMIT, getattr(self, stat) + delta))
        return replace(self, **{stat: value})


@dataclass(frozen=True)
class BattlePet:
    """Battle-scoped projection of a combatant.

    Health and energy are display units. ``start_health`` and
    ``start_energy`` record the values at projection time so the losses can
    be applied back to the source pet when the battle ends.
    """

    id: str
    name: str
    species_id: str
    current_health: int
    max_health: int
    attack: int
    defense: int
    speed: int
    accuracy: int
    evasion: int
    current_energy: int
    max_energy: int
    move_ids: Tuple[str, ...]
    status_effects: Tuple[StatusEffect, ...] = ()
    modifiers: StatModifiers = field(default_factory=StatModifiers)
    start_health: int = 0
    start_energy: int = 0

    def effective(self, stat: str) -> int:
        """Base stat plus temporary and status-effect modifiers."""
        status_bonus = sum(effect.stat_modifiers.get(stat, 0) for effect in self.status_effects)
        return getattr(self, stat) + self.modifiers.get(stat) + status_bonus

    def has_status(self, effect_id: str) -> bool:
        return any(effect.id == effect_id for effect in self.status_effects)

    @property
    def is_defeated(self) -> bool:
        return self.current_health <= 0


@dataclass(frozen=True)
class BattleAction:
    action_type: ActionType
    pet_id: str
    move_id: Optional[str] = None
    item_id: Optional[str] = None
    priority: int = 0


@dataclass(frozen=True)
class BattleResult:
    """One line of the battle log."""

    result_type: ResultType
    target_id: str
    source_id: str
    message: str
    value: Optional[int] = None
    move_id: Optional[str] = None
    status_effect: Optional[StatusEffect] = None


@dataclass(frozen=True)
class BattleTurn:
    turn_number: int
    player_action: BattleAction
    opponent_action: BattleAction
    results: Tuple[BattleResult, ...]


@dataclass(frozen=True)
class Battle:
    id: str
    battle_type: BattleType
    status: BattleStatus
    player_pet: BattlePet
    opponent_pet: BattlePet
    location: str
    current_turn: int = 1
    turns: Tuple[BattleTurn, ...] = ()
    turn_phase: TurnPhase = TurnPhase.SELECT_ACTION
    experience: int = 0
    gold_reward: int = 0
    item_rewards: Tuple[str, ...] = ()
    start_tick: int = 0

    @property
    def is_over(self) -> bool:
        return self.status.is_terminal
