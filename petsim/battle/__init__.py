"""Turn-based battles between battle-scoped pet projections."""

from petsim.battle.models import (
    ActionType,
    Battle,
    BattleAction,
    BattlePet,
    BattleResult,
    BattleTurn,
    BattleType,
    ResultType,
    StatModifiers,
    TurnPhase,
)
from petsim.battle.resolver import (
    BattleResolver,
    apply_battle_results,
    create_battle_pet,
    enter_battle,
    initiate_battle,
    process_player_action,
)

__all__ = [
    "ActionType",
    "Battle",
    "BattleAction",
    "BattlePet",
    "BattleResolver",
    "BattleResult",
    "BattleTurn",
    "BattleType",
    "ResultType",
    "StatModifiers",
    "TurnPhase",
    "apply_battle_results",
    "create_battle_pet",
    "enter_battle",
    "initiate_battle",
    "process_player_action",
]
