"""Deterministic virtual pet simulation engine.

The engine is a set of pure functions over frozen ``Pet`` values plus two
caller-owned engine objects:

- ``TickProcessor`` advances care, energy, poop, sleep, growth and timed
  activities one tick at a time, and replays offline time.
- ``BattleResolver`` runs turn-based battles on battle-scoped projections.

Both take an injected ``random.Random``; the same seed replays the same run.
"""

from petsim.battle import BattleResolver
from petsim.content import DEFAULT_CONTENT, ContentRegistry
from petsim.pet.factory import create_pet
from petsim.pet.models import Pet
from petsim.tick import TickProcessor

__version__ = "0.1.0"

__all__ = [
    "BattleResolver",
    "ContentRegistry",
    "DEFAULT_CONTENT",
    "Pet",
    "TickProcessor",
    "create_pet",
]
