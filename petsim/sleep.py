"""Sleep transitions and daily sleep bookkeeping.

Sleeping is an activity like any other: the pet enters it from Idle and
leaves it back to Idle. ``is_sleeping`` is derived from the activity, so the
sleep record only tracks when sleep started and how much the pet slept today.
"""

from dataclasses import dataclass, replace

from petsim.activity import check_activity_idle, transition_activity
from petsim.content.growth_stages import GROWTH_STAGE_DEFINITIONS
from petsim.content.registry import DEFAULT_CONTENT, ContentRegistry
from petsim.pet.models import IDLE, SLEEPING, Pet, PetSleep
from petsim.state_machine import ActivityState, GrowthStage

SLEEP_ACTIVITY_REASON = "put to sleep"

MSG_NOW_SLEEPING = "Pet is now sleeping."
MSG_ALREADY_SLEEPING = "Pet is already sleeping."
MSG_NOW_AWAKE = "Pet is now awake."
MSG_ALREADY_AWAKE = "Pet is already awake."


@dataclass(frozen=True)
class SleepTransitionResult:
    success: bool
    pet: Pet
    message: str


def get_min_sleep_ticks(stage: GrowthStage, content: ContentRegistry = DEFAULT_CONTENT) -> int:
    stage_def = content.get_growth_stage(stage) or GROWTH_STAGE_DEFINITIONS[stage]
    return stage_def.min_sleep_ticks


def get_remaining_min_sleep(pet: Pet, content: ContentRegistry = DEFAULT_CONTENT) -> int:
    return max(0, get_min_sleep_ticks(pet.growth.stage, content) - pet.sleep.sleep_ticks_today)


def has_met_sleep_requirement(pet: Pet, content: ContentRegistry = DEFAULT_CONTENT) -> bool:
    return pet.sleep.sleep_ticks_today >= get_min_sleep_ticks(pet.growth.stage, content)


def put_to_sleep(pet: Pet, current_tick: int = 0) -> SleepTransitionResult:
    if pet.activity_state not in (ActivityState.IDLE, ActivityState.SLEEPING):
        gate = check_activity_idle(pet, SLEEP_ACTIVITY_REASON)
        return SleepTransitionResult(False, pet, gate.message)

    if pet.is_sleeping:
        return SleepTransitionResult(False, pet, MSG_ALREADY_SLEEPING)

    moved = transition_activity(pet, SLEEPING, current_tick)
    if moved.is_err():
        return SleepTransitionResult(False, pet, moved.error)

    asleep = replace(moved.unwrap(), sleep=replace(pet.sleep, sleep_start_tick=current_tick))
    return SleepTransitionResult(True, asleep, MSG_NOW_SLEEPING)


def wake_up(pet: Pet, current_tick: int = 0) -> SleepTransitionResult:
    if not pet.is_sleeping:
        return SleepTransitionResult(False, pet, MSG_ALREADY_AWAKE)

    moved = transition_activity(pet, IDLE, current_tick)
    if moved.is_err():
        return SleepTransitionResult(False, pet, moved.error)

    awake = replace(moved.unwrap(), sleep=replace(pet.sleep, sleep_start_tick=None))
    return SleepTransitionResult(True, awake, MSG_NOW_AWAKE)


def process_sleep_tick(sleep: PetSleep, is_sleeping: bool) -> PetSleep:
    if not is_sleeping:
        return sleep
    return replace(sleep, sleep_ticks_today=sleep.sleep_ticks_today + 1)


def reset_daily_sleep(sleep: PetSleep) -> PetSleep:
    return replace(sleep, sleep_ticks_today=0)
