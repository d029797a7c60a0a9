"""Tests for sleep transitions and daily sleep tracking."""

from dataclasses import replace

from petsim.pet.models import ActiveTraining, PetSleep, Training
from petsim.sleep import (
    MSG_ALREADY_AWAKE,
    MSG_ALREADY_SLEEPING,
    MSG_NOW_AWAKE,
    MSG_NOW_SLEEPING,
    get_min_sleep_ticks,
    get_remaining_min_sleep,
    has_met_sleep_requirement,
    process_sleep_tick,
    put_to_sleep,
    reset_daily_sleep,
    wake_up,
)
from petsim.state_machine import ActivityState, GrowthStage


def test_put_to_sleep_and_wake(baby_pet) -> None:
    asleep = put_to_sleep(baby_pet, current_tick=10)
    assert asleep.success
    assert asleep.message == MSG_NOW_SLEEPING
    assert asleep.pet.is_sleeping
    assert asleep.pet.activity_state == ActivityState.SLEEPING
    assert asleep.pet.sleep.sleep_start_tick == 10

    awake = wake_up(asleep.pet, current_tick=20)
    assert awake.success
    assert awake.message == MSG_NOW_AWAKE
    assert awake.pet.activity_state == ActivityState.IDLE
    assert awake.pet.sleep.sleep_start_tick is None


def test_double_sleep_and_double_wake_fail(baby_pet) -> None:
    asleep = put_to_sleep(baby_pet).pet
    again = put_to_sleep(asleep)
    assert not again.success
    assert again.message == MSG_ALREADY_SLEEPING
    assert again.pet is asleep

    not_sleeping = wake_up(baby_pet)
    assert not not_sleeping.success
    assert not_sleeping.message == MSG_ALREADY_AWAKE


def test_busy_pet_cannot_sleep(baby_pet) -> None:
    training = ActiveTraining("facility_strength", "basic", 0, 120, 120, 10_000)
    busy = replace(baby_pet, activity=Training(training))
    result = put_to_sleep(busy)
    assert not result.success
    assert result.message == "Cannot put to sleep while training."
    assert result.pet is busy


def test_sleep_ticks_accumulate_only_while_sleeping() -> None:
    sleep = PetSleep()
    sleep = process_sleep_tick(sleep, is_sleeping=True)
    sleep = process_sleep_tick(sleep, is_sleeping=True)
    sleep = process_sleep_tick(sleep, is_sleeping=False)
    assert sleep.sleep_ticks_today == 2
    assert reset_daily_sleep(sleep).sleep_ticks_today == 0


def test_min_sleep_by_stage(baby_pet) -> None:
    assert get_min_sleep_ticks(GrowthStage.BABY) == 16 * 120
    assert get_min_sleep_ticks(GrowthStage.ADULT) == 8 * 120

    assert get_remaining_min_sleep(baby_pet) == 1920
    rested = replace(baby_pet, sleep=PetSleep(sleep_ticks_today=2000))
    assert get_remaining_min_sleep(rested) == 0
    assert has_met_sleep_requirement(rested)
    assert not has_met_sleep_requirement(baby_pet)
