"""Tests for activity gating, transitions and progress."""

from dataclasses import replace

import pytest

from petsim.activity import (
    calculate_progress,
    check_activity_idle,
    check_activity_requirements,
    check_energy,
    get_activity_conflict_message,
    return_to_idle,
    transition_activity,
)
from petsim.pet.models import (
    IDLE,
    SLEEPING,
    ActiveBattleRef,
    ActiveExploration,
    ActiveTraining,
    Battling,
    Exploring,
    Training,
)
from petsim.state_machine import ActivityState

TRAINING = ActiveTraining("facility_strength", "basic", 0, 120, 120, 10_000)
EXPLORATION = ActiveExploration("meadow", "meadow_forage", 0, 2, 2, 5_000)


def _active_fields(pet):
    return [pet.active_training, pet.active_exploration, pet.active_battle]


@pytest.mark.parametrize(
    "activity, state, populated",
    [
        (IDLE, ActivityState.IDLE, 0),
        (SLEEPING, ActivityState.SLEEPING, 0),
        (Training(TRAINING), ActivityState.TRAINING, 1),
        (Exploring(EXPLORATION), ActivityState.EXPLORING, 1),
        (Battling(ActiveBattleRef("battle_1")), ActivityState.BATTLING, 1),
    ],
)
def test_activity_fields_match_state(baby_pet, activity, state, populated) -> None:
    pet = replace(baby_pet, activity=activity)
    assert pet.activity_state == state
    assert sum(field is not None for field in _active_fields(pet)) == populated


class TestGating:
    def test_idle_pet_is_allowed(self, baby_pet) -> None:
        assert check_activity_idle(baby_pet, "train").allowed

    def test_busy_pet_is_blocked_with_reason(self, baby_pet) -> None:
        busy = replace(baby_pet, activity=Exploring(EXPLORATION))
        gate = check_activity_idle(busy, "train")
        assert not gate.allowed
        assert gate.message == "Cannot train while exploring."

    def test_same_activity_wording(self) -> None:
        message = get_activity_conflict_message(
            "forage", ActivityState.EXPLORING, ActivityState.EXPLORING
        )
        assert message == "Your pet is already exploring."

    def test_energy_check(self) -> None:
        assert check_energy(10_000, 10).allowed
        gate = check_energy(9_999, 10)
        assert not gate.allowed
        assert gate.message == "Not enough energy. Need 10, have 9."

    def test_requirements_check_activity_before_energy(self, make_pet) -> None:
        tired_sleeper = replace(make_pet(energy=1), activity=SLEEPING)
        gate = check_activity_requirements(tired_sleeper, "train", 10)
        assert gate.message == "Cannot train while sleeping."


class TestTransitions:
    def test_enter_and_leave(self, baby_pet) -> None:
        training = transition_activity(baby_pet, Training(TRAINING), tick=5)
        assert training.is_ok()
        assert training.unwrap().active_training == TRAINING

        idle = return_to_idle(training.unwrap())
        assert idle.is_ok()
        assert idle.unwrap().activity_state == ActivityState.IDLE
        assert _active_fields(idle.unwrap()) == [None, None, None]

    def test_cannot_jump_between_busy_states(self, baby_pet) -> None:
        training = replace(baby_pet, activity=Training(TRAINING))
        result = transition_activity(training, Exploring(EXPLORATION))
        assert result.is_err()
        assert training.active_training == TRAINING

    def test_idle_to_idle_is_rejected(self, baby_pet) -> None:
        assert return_to_idle(baby_pet).is_err()


class TestProgress:
    def test_progress_bounds(self) -> None:
        assert calculate_progress(10, 10) == 0
        assert calculate_progress(10, 0) == 100
        assert calculate_progress(0, 0) == 100

    def test_progress_rounds_half_up(self) -> None:
        assert calculate_progress(8, 7) == 13  # 12.5
        assert calculate_progress(3, 2) == 33
