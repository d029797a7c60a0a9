"""Activity gating and transitions.

Every busy activity (sleeping, training, exploring, battling) is entered from
Idle and always returns to Idle. Resolvers and care actions ask this module
whether the pet is free before doing anything; none of them re-implement the
rules.

Transitions are validated by a ``StateMachine`` over ``ActivityState`` so that
an illegal jump (Training straight to Battling) is reported as an ``Err``
instead of silently overwriting the active record.
"""

import logging
import math
from dataclasses import dataclass, replace
from typing import Optional

from petsim.config.activities import MAX_PERCENTAGE
from petsim.pet.models import IDLE, Activity, Pet
from petsim.result import Err, Ok, Result
from petsim.state_machine import ActivityState, create_activity_state_machine
from petsim.util.units import to_display

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ActivityGatingResult:
    allowed: bool
    message: str = ""


ALLOWED = ActivityGatingResult(allowed=True)


def get_activity_conflict_message(
    attempted_action: str,
    current_state: ActivityState,
    same_state: Optional[ActivityState] = None,
) -> str:
    if same_state is not None and current_state == same_state:
        return f"Your pet is already {current_state.value}."
    return f"Cannot {attempted_action} while {current_state.value}."


def check_activity_idle(
    pet: Pet, attempted_action: str, same_state: Optional[ActivityState] = None
) -> ActivityGatingResult:
    """Allow only when the pet is Idle.

    Args:
        pet: Pet to check
        attempted_action: Verb phrase used in the message ("train")
        same_state: The state the action would enter, for the
            "already doing it" wording
    """
    if pet.activity_state != ActivityState.IDLE:
        return ActivityGatingResult(
            allowed=False,
            message=get_activity_conflict_message(attempted_action, pet.activity_state, same_state),
        )
    return ALLOWED


def check_energy(current_energy: int, required_energy: int) -> ActivityGatingResult:
    """Compare micro ``current_energy`` against a display-unit requirement."""
    display_energy = to_display(current_energy)
    if display_energy < required_energy:
        return ActivityGatingResult(
            allowed=False,
            message=f"Not enough energy. Need {required_energy}, have {display_energy}.",
        )
    return ALLOWED


def check_activity_requirements(
    pet: Pet,
    attempted_action: str,
    required_energy: Optional[int] = None,
    same_state: Optional[ActivityState] = None,
) -> ActivityGatingResult:
    activity_check = check_activity_idle(pet, attempted_action, same_state)
    if not activity_check.allowed:
        return activity_check

    if required_energy is not None:
        energy_check = check_energy(pet.energy_stats.energy, required_energy)
        if not energy_check.allowed:
            return energy_check

    return ALLOWED


def transition_activity(pet: Pet, activity: Activity, tick: int = 0) -> Result[Pet, str]:
    """Move ``pet`` into ``activity`` if the activity machine allows it.

    Returns:
        Ok(new pet) or Err(reason); the input pet is never modified
    """
    machine = create_activity_state_machine(pet.activity_state)
    result = machine.try_transition(activity.state, tick=tick)
    if result.is_err():
        return Err(result.error)

    logger.debug(
        "%s: %s -> %s at tick %d",
        pet.identity.id,
        pet.activity_state.value,
        activity.state.value,
        tick,
    )
    return Ok(replace(pet, activity=activity))


def return_to_idle(pet: Pet, tick: int = 0) -> Result[Pet, str]:
    return transition_activity(pet, IDLE, tick)


# ============================================================================
# Shared resolver result types
# ============================================================================


@dataclass(frozen=True)
class CanStartResult:
    allowed: bool
    message: str


@dataclass(frozen=True)
class ActivityStartResult:
    success: bool
    pet: Pet
    message: str


@dataclass(frozen=True)
class CancelResult:
    """Outcome of cancelling a timed activity.

    ``refund`` is the micro energy given back; zero when nothing was active.
    """

    success: bool
    pet: Pet
    message: str
    refund: int = 0


def calculate_progress(duration_ticks: int, ticks_remaining: int) -> int:
    """Whole percent complete, rounded half up; zero-length activities are 100."""
    if duration_ticks <= 0:
        return MAX_PERCENTAGE
    elapsed = duration_ticks - ticks_remaining
    return int(math.floor(elapsed / duration_ticks * 100 + 0.5))


def refund_energy(pet: Pet, refund: int, max_energy: Optional[int]) -> int:
    """Energy after giving back ``refund``, capped at ``max_energy``.

    With no known max (unknown species) the pet cannot regenerate, so its
    energy is still at or below the pre-activity level and the full refund
    never overshoots it.
    """
    energy = pet.energy_stats.energy + refund
    if max_energy is None:
        logger.warning(
            "%s: no max energy for species %r, refunding without a cap",
            pet.identity.id,
            pet.identity.species_id,
        )
        return energy
    return min(energy, max_energy)
