"""Poop generation.

The poop timer is a micro countdown from ``POOP_MICRO_THRESHOLD``. It decays
faster awake than asleep, and food shortens it. When it runs out a poop is
added and the timer restarts, carrying the overshoot so no fraction of a tick
is lost.
"""

from petsim.config.care import (
    MAX_POOP_COUNT,
    POOP_DECAY_AWAKE,
    POOP_DECAY_SLEEPING,
    POOP_MICRO_THRESHOLD,
)
from petsim.pet.models import PetPoop


def process_poop_tick(poop: PetPoop, is_sleeping: bool) -> PetPoop:
    decay = POOP_DECAY_SLEEPING if is_sleeping else POOP_DECAY_AWAKE
    ticks_until_next = poop.ticks_until_next - decay

    if ticks_until_next <= 0:
        remainder = abs(ticks_until_next)
        return PetPoop(
            count=min(poop.count + 1, MAX_POOP_COUNT),
            ticks_until_next=POOP_MICRO_THRESHOLD - remainder,
        )

    return PetPoop(count=poop.count, ticks_until_next=ticks_until_next)


def get_initial_poop_timer() -> int:
    return POOP_MICRO_THRESHOLD


def remove_poop(current_count: int, poop_removed: int) -> int:
    return max(0, current_count - poop_removed)


def accelerate_poop(poop: PetPoop, acceleration: int) -> PetPoop:
    """Shorten the timer after a meal; it never goes below zero."""
    if acceleration <= 0:
        return poop
    return PetPoop(count=poop.count, ticks_until_next=max(0, poop.ticks_until_next - acceleration))
