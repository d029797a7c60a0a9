"""Command-line entry point for headless pet simulations.

Hatches a pet, optionally starts an activity or a battle, advances the clock
and prints the resulting payload as JSON. With the same ``--seed`` every run
prints the same output.
"""

import argparse
import logging
import random
import sys
from typing import List, Optional

from petsim.battle import ActionType, BattleAction, BattleResolver, BattleType
from petsim.constants import TICKS_PER_HOUR
from petsim.content import DEFAULT_CONTENT
from petsim.content.facilities import TrainingSessionType
from petsim.foraging import start_foraging
from petsim.logging_config import configure_logging
from petsim.payloads import build_offline_report, build_pet_status
from petsim.pet.factory import create_pet
from petsim.pet.models import Pet
from petsim.tick import TickProcessor
from petsim.training import start_training

logger = logging.getLogger(__name__)

MAX_AUTO_BATTLE_TURNS = 50


def _start_activity(pet: Pet, args: argparse.Namespace) -> Optional[Pet]:
    if args.forage:
        started = start_foraging(pet, args.forage, 0)
    elif args.train:
        started = start_training(pet, args.train, TrainingSessionType(args.session), 0)
    else:
        return pet

    if not started.success:
        logger.error(started.message)
        return None
    logger.info(started.message)
    return started.pet


def _auto_battle(pet: Pet, args: argparse.Namespace, rng: random.Random) -> Optional[Pet]:
    """Fight a wild opponent, always picking the first affordable move."""
    resolver = BattleResolver(rng)
    opponent = create_pet("Wild", args.battle, pet_id="wild_opponent")
    started = resolver.start(pet, opponent, BattleType.WILD, "meadow")
    if started.is_err():
        logger.error(started.error)
        return None

    pet, battle = started.unwrap()
    while not battle.is_over and len(battle.turns) < MAX_AUTO_BATTLE_TURNS:
        fighter = battle.player_pet
        move_id = next(
            (
                move_id
                for move_id in fighter.move_ids
                if DEFAULT_CONTENT.get_move(move_id).energy_cost <= fighter.current_energy
            ),
            None,
        )
        if move_id is None:
            action = BattleAction(ActionType.FLEE, fighter.id)
        else:
            action = BattleAction(ActionType.MOVE, fighter.id, move_id=move_id)
        battle = resolver.act(battle, action).unwrap()
        for result in battle.turns[-1].results:
            logger.info(result.message)

    if not battle.is_over:
        logger.warning("Battle %s did not finish in %d turns", battle.id, MAX_AUTO_BATTLE_TURNS)
        return pet
    return resolver.finish(pet, battle).unwrap()


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Headless virtual pet simulation",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Advance a new pet by one in-game hour
  petsim --name Mochi --species florabit --ticks 120

  # Forage in the meadow, replayed as offline catch-up
  petsim --forage meadow --ticks 600 --offline --seed 7

  # Fight a wild rockpup before advancing
  petsim --battle rockpup --seed 42
        """,
    )
    parser.add_argument("--name", default="Mochi", help="Pet name (default: Mochi)")
    parser.add_argument(
        "--species",
        default="florabit",
        choices=sorted(DEFAULT_CONTENT.species),
        help="Species to hatch (default: florabit)",
    )
    parser.add_argument(
        "--ticks",
        type=int,
        default=TICKS_PER_HOUR,
        help=f"Ticks to advance (default: {TICKS_PER_HOUR}, one in-game hour)",
    )
    parser.add_argument("--seed", type=int, default=0, help="Random seed (default: 0)")

    activity = parser.add_mutually_exclusive_group()
    activity.add_argument("--forage", metavar="LOCATION", help="Start foraging at LOCATION")
    activity.add_argument("--train", metavar="FACILITY", help="Start training at FACILITY")
    activity.add_argument(
        "--battle",
        metavar="SPECIES",
        choices=sorted(DEFAULT_CONTENT.species),
        help="Fight a wild SPECIES first",
    )
    parser.add_argument(
        "--session",
        default=TrainingSessionType.BASIC.value,
        choices=[t.value for t in TrainingSessionType],
        help="Training session type (default: basic)",
    )

    parser.add_argument(
        "--offline",
        action="store_true",
        help="Advance via offline catch-up and print the offline report",
    )
    parser.add_argument("--log-level", default=None, help="Override PETSIM_LOG_LEVEL")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    configure_logging(level=args.log_level)

    rng = random.Random(args.seed)
    processor = TickProcessor(rng)

    pet = create_pet(args.name, args.species)
    if args.battle:
        pet = _auto_battle(pet, args, rng)
    else:
        pet = _start_activity(pet, args)
    if pet is None:
        return 1

    if args.offline:
        caught_up = processor.process_offline_catchup(pet, args.ticks)
        payload = build_offline_report(caught_up.report)
    else:
        pet = processor.process_multiple_ticks(pet, args.ticks)
        payload = build_pet_status(pet)

    sys.stdout.write(payload.to_json().decode("utf-8") + "\n")
    return 0


if __name__ == "__main__":
    sys.exit(main())
