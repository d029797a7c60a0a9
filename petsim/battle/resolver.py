"""Turn-based battle resolution.

A turn is resolved in a fixed order:

1. Validate the player's action; a rejected action leaves the battle as-is.
2. Pick the opponent's action: a random affordable move, or flee when it
   cannot afford any.
3. Order both actions by priority, then effective speed, then a coin flip.
4. Execute them in order, stopping early when a pet is defeated or a flee
   succeeds. A flinched pet loses its action.
5. Run status-effect upkeep on both pets.
6. Append the turn record and check for victory or defeat.

Every roll (hit, damage spread, critical, effect chance, tie break, flee,
opponent move choice, rewards) draws from the ``random.Random`` passed in, so
a battle replays exactly from its seed.

Why a projection?
-----------------
Battles run on ``BattlePet`` copies, never on the ``Pet`` the caller owns.
``apply_battle_results`` is the single place where battle damage and energy
spend flow back, measured against the values captured when the battle pet
was built.
"""

import logging
import math
import random
from dataclasses import replace
from typing import List, Optional, Tuple

from petsim.activity import transition_activity
from petsim.battle.models import (
    ActionType,
    Battle,
    BattleAction,
    BattlePet,
    BattleResult,
    BattleTurn,
    BattleType,
    ResultType,
    TurnPhase,
)
from petsim.config.battle import (
    BASE_ACCURACY,
    CRITICAL_HIT_CHANCE,
    CRITICAL_HIT_MULTIPLIER,
    CUNNING_SPEED_FACTOR,
    DAMAGE_RANDOM_MIN,
    DAMAGE_RANDOM_SPREAD,
    ENERGY_DRINK_REWARD_CHANCE,
    EXPERIENCE_HEALTH_DIVISOR,
    EXPERIENCE_TYPE_MULTIPLIERS,
    FLEE_PRIORITY,
    FLEE_SUCCESS_RATE,
    GOLD_HEALTH_DIVISOR,
    GOLD_TYPE_MULTIPLIERS,
    MAX_HIT_CHANCE,
    MAX_MOVES_PER_PET,
    MAX_STATUS_EFFECTS,
    MIN_BATTLE_ENERGY,
    MIN_HIT_CHANCE,
    TOURNAMENT_MEDICINE_REWARD_CHANCE,
)
from petsim.content.moves import FLINCH, EffectType, Move, MoveTarget
from petsim.content.registry import DEFAULT_CONTENT, ContentRegistry
from petsim.events import BattleEndedEvent, EventBus
from petsim.pet.models import IDLE, STARTER_MOVE_IDS, ActiveBattleRef, Battling, Pet
from petsim.pet.stats import calculate_max_health, calculate_pet_max_stats
from petsim.result import Err, Ok, Result
from petsim.state_machine import ActivityState, BattleStatus, create_battle_state_machine
from petsim.util.rng import require_rng_param
from petsim.util.units import to_display, to_micro

logger = logging.getLogger(__name__)


# ============================================================================
# Setup
# ============================================================================


def create_battle_pet(pet: Pet, content: ContentRegistry = DEFAULT_CONTENT) -> BattlePet:
    """Project ``pet`` into a battle-scoped combatant."""
    stats = pet.battle_stats
    max_health = calculate_max_health(stats)
    health = min(pet.health_stats.health, max_health)
    energy = to_display(pet.energy_stats.energy)
    max_stats = calculate_pet_max_stats(pet, content)
    max_energy = to_display(max_stats.energy) if max_stats else energy
    move_ids = tuple(pet.move_ids[:MAX_MOVES_PER_PET]) or STARTER_MOVE_IDS[:MAX_MOVES_PER_PET]

    return BattlePet(
        id=pet.identity.id,
        name=pet.identity.name,
        species_id=pet.identity.species_id,
        current_health=health,
        max_health=max_health,
        attack=stats.strength,
        defense=stats.fortitude,
        speed=stats.agility + math.floor(stats.cunning * CUNNING_SPEED_FACTOR),
        accuracy=BASE_ACCURACY + stats.precision,
        evasion=stats.agility // 2,
        current_energy=energy,
        max_energy=max_energy,
        move_ids=move_ids,
        start_health=health,
        start_energy=energy,
    )


def calculate_experience_reward(opponent: BattlePet, battle_type: BattleType) -> int:
    base = opponent.max_health // EXPERIENCE_HEALTH_DIVISOR
    return math.floor(base * EXPERIENCE_TYPE_MULTIPLIERS.get(battle_type.value, 1.0))


def calculate_gold_reward(opponent: BattlePet, battle_type: BattleType) -> int:
    base = opponent.max_health // GOLD_HEALTH_DIVISOR
    return math.floor(base * GOLD_TYPE_MULTIPLIERS.get(battle_type.value, 1.0))


def calculate_item_rewards(battle_type: BattleType, rng: random.Random) -> Tuple[str, ...]:
    rewards: List[str] = []
    if rng.random() < ENERGY_DRINK_REWARD_CHANCE:
        rewards.append("energy_drink")
    if battle_type == BattleType.TOURNAMENT and rng.random() < TOURNAMENT_MEDICINE_REWARD_CHANCE:
        rewards.append("basic_medicine")
    return tuple(rewards)


def initiate_battle(
    player: Pet,
    opponent: Pet,
    battle_type: BattleType,
    location: str,
    rng: random.Random,
    content: ContentRegistry = DEFAULT_CONTENT,
    current_tick: int = 0,
) -> Result[Battle, str]:
    """Build a new battle in the ``waiting`` state.

    Args:
        player: The caller's pet; must be Idle with health and 20+ energy
        opponent: Any pet-shaped combatant (wild, NPC, another player)
        battle_type: Affects experience, gold and item rewards
        location: Location id recorded on the battle
        rng: Source for the battle id and reward rolls
        content: Content tables for max-stat lookups
        current_tick: Tick the battle starts on

    Returns:
        Ok(battle) or Err(reason). Neither pet is modified; call
        ``enter_battle`` to mark the player's pet as Battling.
    """
    rng = require_rng_param(rng, "initiate_battle")
    if player.health_stats.health <= 0:
        return Err("Your pet is unable to battle - no health remaining")
    if to_display(player.energy_stats.energy) < MIN_BATTLE_ENERGY:
        return Err(f"Your pet is too tired to battle - needs at least {MIN_BATTLE_ENERGY} energy")
    if player.activity_state != ActivityState.IDLE:
        return Err("Your pet is busy and cannot battle right now")

    player_pet = create_battle_pet(player, content)
    opponent_pet = create_battle_pet(opponent, content)
    battle = Battle(
        id=f"battle_{current_tick}_{rng.getrandbits(32):08x}",
        battle_type=battle_type,
        status=BattleStatus.WAITING,
        player_pet=player_pet,
        opponent_pet=opponent_pet,
        location=location,
        experience=calculate_experience_reward(opponent_pet, battle_type),
        gold_reward=calculate_gold_reward(opponent_pet, battle_type),
        item_rewards=calculate_item_rewards(battle_type, rng),
        start_tick=current_tick,
    )
    return Ok(battle)


# ============================================================================
# Turn resolution
# ============================================================================


def validate_action(
    battle: Battle, action: BattleAction, content: ContentRegistry = DEFAULT_CONTENT
) -> Result[None, str]:
    if action.action_type == ActionType.FLEE:
        return Ok(None)
    if action.action_type != ActionType.MOVE:
        return Err("Invalid action type")
    if not action.move_id:
        return Err("Move ID is required for move actions")

    move = content.get_move(action.move_id)
    if move is None:
        return Err("Invalid move selected")
    if action.move_id not in battle.player_pet.move_ids:
        return Err("Pet doesn't know this move")
    if battle.player_pet.current_energy < move.energy_cost:
        return Err("Not enough energy for this move")
    return Ok(None)


def generate_opponent_action(
    battle: Battle, rng: random.Random, content: ContentRegistry = DEFAULT_CONTENT
) -> BattleAction:
    """Pick a random affordable move; flee when none is affordable."""
    opponent = battle.opponent_pet
    affordable: List[Move] = []
    for move_id in opponent.move_ids:
        move = content.get_move(move_id)
        if move is not None and opponent.current_energy >= move.energy_cost:
            affordable.append(move)

    if not affordable:
        return BattleAction(ActionType.FLEE, opponent.id, priority=FLEE_PRIORITY)

    move = rng.choice(affordable)
    return BattleAction(ActionType.MOVE, opponent.id, move_id=move.id, priority=move.priority)


def determine_action_order(
    battle: Battle,
    player_action: BattleAction,
    opponent_action: BattleAction,
    rng: random.Random,
) -> List[Tuple[BattleAction, bool]]:
    """Return ``[(action, is_player), ...]`` in execution order.

    Higher priority goes first, then higher effective speed. Only an exact
    tie on both consumes a roll.
    """
    player_first = [(player_action, True), (opponent_action, False)]
    opponent_first = [(opponent_action, False), (player_action, True)]

    if player_action.priority != opponent_action.priority:
        return player_first if player_action.priority > opponent_action.priority else opponent_first

    player_speed = battle.player_pet.effective("speed")
    opponent_speed = battle.opponent_pet.effective("speed")
    if player_speed != opponent_speed:
        return player_first if player_speed > opponent_speed else opponent_first

    return player_first if rng.random() < 0.5 else opponent_first


def calculate_accuracy(attacker: BattlePet, defender: BattlePet, move_accuracy: int) -> float:
    chance = move_accuracy + (attacker.effective("accuracy") - defender.effective("evasion")) / 10
    return max(MIN_HIT_CHANCE, min(MAX_HIT_CHANCE, chance))


def calculate_damage(
    attacker: BattlePet, defender: BattlePet, power: int, rng: random.Random
) -> int:
    """``floor(attack / max(1, defense) * power * U(0.85, 1.15))``, at least 1."""
    ratio = attacker.effective("attack") / max(1, defender.effective("defense"))
    spread = DAMAGE_RANDOM_MIN + rng.random() * DAMAGE_RANDOM_SPREAD
    return max(1, math.floor(ratio * power * spread))


def apply_critical(damage: int) -> int:
    # Floors of small values can collapse back to the base damage
    return max(damage + 1, math.floor(damage * CRITICAL_HIT_MULTIPLIER))


def execute_move(
    attacker: BattlePet,
    defender: BattlePet,
    move_id: str,
    rng: random.Random,
    content: ContentRegistry = DEFAULT_CONTENT,
) -> Tuple[BattlePet, BattlePet, List[BattleResult]]:
    """Resolve one move.

    Returns:
        (attacker, defender, results) with both pets updated
    """
    move = content.get_move(move_id)
    if move is None:
        message = f"{attacker.name} tried to use an unknown move!"
        return attacker, defender, [BattleResult(ResultType.MISS, defender.id, attacker.id, message, move_id=move_id)]

    if attacker.current_energy < move.energy_cost:
        message = f"{attacker.name} doesn't have enough energy to use {move.name}!"
        return attacker, defender, [BattleResult(ResultType.MISS, defender.id, attacker.id, message, move_id=move_id)]

    attacker = replace(attacker, current_energy=attacker.current_energy - move.energy_cost)
    results: List[BattleResult] = []

    hit_roll = rng.random() * 100
    if hit_roll > calculate_accuracy(attacker, defender, move.accuracy):
        message = f"{attacker.name}'s {move.name} missed!"
        results.append(BattleResult(ResultType.MISS, defender.id, attacker.id, message, move_id=move_id))
        return attacker, defender, results

    if move.power > 0:
        damage = calculate_damage(attacker, defender, move.power, rng)
        critical = rng.random() < CRITICAL_HIT_CHANCE
        if critical:
            damage = apply_critical(damage)
        defender = replace(defender, current_health=max(0, defender.current_health - damage))
        if critical:
            results.append(
                BattleResult(
                    ResultType.CRITICAL,
                    defender.id,
                    attacker.id,
                    f"Critical hit! {defender.name} took {damage} damage!",
                    value=damage,
                    move_id=move_id,
                )
            )
        else:
            results.append(
                BattleResult(
                    ResultType.DAMAGE,
                    defender.id,
                    attacker.id,
                    f"{defender.name} took {damage} damage from {move.name}!",
                    value=damage,
                    move_id=move_id,
                )
            )
    else:
        results.append(
            BattleResult(
                ResultType.STATUS_APPLIED,
                defender.id,
                attacker.id,
                f"{attacker.name} used {move.name}!",
                move_id=move_id,
            )
        )

    targets_self = move.target == MoveTarget.SELF
    for effect in move.effects:
        if effect.probability is not None and rng.random() > effect.probability:
            continue

        target = attacker if targets_self else defender
        if effect.effect_type == EffectType.HEAL:
            amount = math.floor(target.max_health * (effect.value / 100))
            target = replace(target, current_health=min(target.max_health, target.current_health + amount))
            results.append(
                BattleResult(
                    ResultType.HEAL,
                    target.id,
                    attacker.id,
                    f"{target.name} recovered {amount} health!",
                    value=amount,
                    move_id=move_id,
                )
            )
        elif effect.effect_type == EffectType.STAT_CHANGE and effect.stat:
            target = replace(target, modifiers=target.modifiers.adjusted(effect.stat, effect.value))
            direction = "increased" if effect.value > 0 else "decreased"
            results.append(
                BattleResult(
                    ResultType.STAT_CHANGED,
                    target.id,
                    attacker.id,
                    f"{target.name}'s {effect.stat} {direction}!",
                    value=effect.value,
                    move_id=move_id,
                )
            )
        elif effect.effect_type == EffectType.STATUS_EFFECT and effect.status_effect:
            if len(target.status_effects) >= MAX_STATUS_EFFECTS:
                continue
            target = replace(target, status_effects=target.status_effects + (effect.status_effect,))
            results.append(
                BattleResult(
                    ResultType.STATUS_APPLIED,
                    target.id,
                    attacker.id,
                    f"{target.name} is now {effect.status_effect.name.lower()}!",
                    move_id=move_id,
                    status_effect=effect.status_effect,
                )
            )

        if targets_self:
            attacker = target
        else:
            defender = target

    return attacker, defender, results


def attempt_flee(pet: BattlePet, rng: random.Random) -> BattleResult:
    if rng.random() < FLEE_SUCCESS_RATE:
        return BattleResult(
            ResultType.STATUS_APPLIED, pet.id, pet.id, f"{pet.name} successfully fled from battle!"
        )
    return BattleResult(ResultType.MISS, pet.id, pet.id, f"{pet.name} couldn't escape!")


def process_status_effects(pet: BattlePet) -> Tuple[BattlePet, List[BattleResult]]:
    """End-of-turn upkeep: tick damage, then expire effects that ran out."""
    results: List[BattleResult] = []
    remaining = []
    health = pet.current_health
    for effect in pet.status_effects:
        effect = replace(effect, duration=effect.duration - 1)
        if effect.tick_damage > 0:
            health = max(0, health - effect.tick_damage)
            results.append(
                BattleResult(
                    ResultType.DAMAGE,
                    pet.id,
                    pet.id,
                    f"{pet.name} took {effect.tick_damage} damage from {effect.name}!",
                    value=effect.tick_damage,
                )
            )
        if effect.duration <= 0:
            results.append(
                BattleResult(
                    ResultType.STATUS_REMOVED,
                    pet.id,
                    pet.id,
                    f"{pet.name} is no longer {effect.name.lower()}!",
                    status_effect=effect,
                )
            )
        else:
            remaining.append(effect)
    return replace(pet, current_health=health, status_effects=tuple(remaining)), results


def _move_status(battle: Battle, target: BattleStatus) -> Battle:
    machine = create_battle_state_machine(battle.status)
    return replace(battle, status=machine.transition(target))


def execute_turn(
    battle: Battle,
    player_action: BattleAction,
    opponent_action: BattleAction,
    rng: random.Random,
    content: ContentRegistry = DEFAULT_CONTENT,
) -> Battle:
    """Resolve both actions plus upkeep and append the turn record."""
    player = battle.player_pet
    opponent = battle.opponent_pet
    results: List[BattleResult] = []
    fled = False

    for action, is_player in determine_action_order(battle, player_action, opponent_action, rng):
        actor, target = (player, opponent) if is_player else (opponent, player)

        if actor.has_status(FLINCH.id):
            results.append(
                BattleResult(ResultType.MISS, actor.id, actor.id, f"{actor.name} flinched and couldn't move!")
            )
            continue

        if action.action_type == ActionType.MOVE and action.move_id:
            actor, target, move_results = execute_move(actor, target, action.move_id, rng, content)
            results.extend(move_results)
        elif action.action_type == ActionType.FLEE:
            flee_result = attempt_flee(actor, rng)
            results.append(flee_result)
            fled = flee_result.result_type == ResultType.STATUS_APPLIED

        if is_player:
            player, opponent = actor, target
        else:
            opponent, player = actor, target

        if fled:
            break
        if target.is_defeated:
            results.append(
                BattleResult(
                    ResultType.STATUS_APPLIED, target.id, actor.id, f"{target.name} has been defeated!"
                )
            )
            break

    player, player_upkeep = process_status_effects(player)
    opponent, opponent_upkeep = process_status_effects(opponent)
    results.extend(player_upkeep)
    results.extend(opponent_upkeep)

    turn = BattleTurn(battle.current_turn, player_action, opponent_action, tuple(results))
    updated = replace(
        battle,
        player_pet=player,
        opponent_pet=opponent,
        turns=battle.turns + (turn,),
        current_turn=battle.current_turn + 1,
        turn_phase=TurnPhase.SELECT_ACTION,
    )
    return _move_status(updated, BattleStatus.FLED if fled else BattleStatus.IN_PROGRESS)


def check_battle_end(battle: Battle) -> Battle:
    if battle.status.is_terminal:
        return battle
    if battle.player_pet.is_defeated:
        return _move_status(battle, BattleStatus.DEFEAT)
    if battle.opponent_pet.is_defeated:
        return _move_status(battle, BattleStatus.VICTORY)
    return battle


def process_player_action(
    battle: Battle,
    action: BattleAction,
    rng: random.Random,
    content: ContentRegistry = DEFAULT_CONTENT,
) -> Result[Battle, str]:
    """Resolve one full turn around the player's chosen action.

    Returns:
        Ok(next battle) or Err(reason); on Err no roll has been consumed
    """
    rng = require_rng_param(rng, "process_player_action")
    if battle.status not in (BattleStatus.WAITING, BattleStatus.IN_PROGRESS):
        return Err("Battle is not in progress")
    if battle.turn_phase != TurnPhase.SELECT_ACTION:
        return Err("Not currently accepting actions")

    valid = validate_action(battle, action, content)
    if valid.is_err():
        return Err(valid.error)

    # Turn order only trusts priorities from the move table
    if action.action_type == ActionType.MOVE:
        action = replace(action, priority=content.get_move(action.move_id).priority)
    else:
        action = replace(action, priority=FLEE_PRIORITY)

    opponent_action = generate_opponent_action(battle, rng, content)
    resolved = execute_turn(battle, action, opponent_action, rng, content)
    return Ok(check_battle_end(resolved))


# ============================================================================
# Pet write-back
# ============================================================================


def enter_battle(pet: Pet, battle: Battle, current_tick: int = 0) -> Result[Pet, str]:
    """Mark ``pet`` as Battling in ``battle``."""
    return transition_activity(pet, Battling(ActiveBattleRef(battle.id, current_tick)), current_tick)


def apply_battle_results(pet: Pet, battle: Battle) -> Result[Pet, str]:
    """Subtract the health and energy the battle pet lost, then release to Idle.

    Returns:
        Ok(updated pet), or Err when the battle is unfinished or is not this
        pet's battle
    """
    if not battle.status.is_terminal:
        return Err("Battle is still in progress")
    if battle.player_pet.id != pet.identity.id:
        return Err("This battle does not belong to this pet")

    fighter = battle.player_pet
    health_lost = max(0, fighter.start_health - fighter.current_health)
    energy_spent = max(0, fighter.start_energy - fighter.current_energy)
    return Ok(
        replace(
            pet,
            health_stats=replace(pet.health_stats, health=max(0, pet.health_stats.health - health_lost)),
            energy_stats=replace(
                pet.energy_stats, energy=max(0, pet.energy_stats.energy - to_micro(energy_spent))
            ),
            activity=IDLE,
        )
    )


# ============================================================================
# Engine-facing wrapper
# ============================================================================


class BattleResolver:
    """Battle operations bound to the engine's RNG, content and event bus.

    The module functions stay pure; this class only supplies the shared
    collaborators and reports battle endings.
    """

    def __init__(
        self,
        rng: Optional[random.Random] = None,
        content: ContentRegistry = DEFAULT_CONTENT,
        event_bus: Optional[EventBus] = None,
    ):
        self.rng = require_rng_param(rng, "BattleResolver.__init__")
        self.content = content
        self.event_bus = event_bus if event_bus is not None else EventBus()

    def start(
        self,
        player: Pet,
        opponent: Pet,
        battle_type: BattleType,
        location: str,
        current_tick: int = 0,
    ) -> Result[Tuple[Pet, Battle], str]:
        """Create a battle and move the player's pet into it."""
        created = initiate_battle(player, opponent, battle_type, location, self.rng, self.content, current_tick)
        if created.is_err():
            return Err(created.error)

        battle = created.unwrap()
        entered = enter_battle(player, battle, current_tick)
        if entered.is_err():
            return Err(entered.error)

        logger.debug("%s entered %s against %s", player.identity.id, battle.id, opponent.identity.id)
        return Ok((entered.unwrap(), battle))

    def act(self, battle: Battle, action: BattleAction) -> Result[Battle, str]:
        resolved = process_player_action(battle, action, self.rng, self.content)
        if resolved.is_ok() and resolved.unwrap().is_over:
            ended = resolved.unwrap()
            logger.info("Battle %s ended: %s after %d turns", ended.id, ended.status.value, len(ended.turns))
            self.event_bus.emit(
                BattleEndedEvent(
                    battle_id=ended.id,
                    pet_id=ended.player_pet.id,
                    status=ended.status,
                    turns=len(ended.turns),
                )
            )
        return resolved

    def finish(self, pet: Pet, battle: Battle) -> Result[Pet, str]:
        return apply_battle_results(pet, battle)
