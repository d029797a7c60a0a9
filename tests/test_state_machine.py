"""Tests for the generic state machine and its activity/growth/battle tables."""

import pytest

from petsim.state_machine import (
    ActivityState,
    BattleStatus,
    GrowthStage,
    create_activity_state_machine,
    create_battle_state_machine,
    create_growth_state_machine,
)


class TestActivityMachine:
    def test_idle_reaches_every_busy_state(self) -> None:
        for target in (
            ActivityState.SLEEPING,
            ActivityState.TRAINING,
            ActivityState.EXPLORING,
            ActivityState.BATTLING,
        ):
            machine = create_activity_state_machine()
            assert machine.try_transition(target).is_ok()
            assert machine.state == target

    def test_busy_states_only_return_to_idle(self) -> None:
        machine = create_activity_state_machine(ActivityState.TRAINING)
        result = machine.try_transition(ActivityState.BATTLING)
        assert result.is_err()
        assert "TRAINING -> BATTLING" in result.error
        assert machine.state == ActivityState.TRAINING
        assert machine.get_valid_transitions() == [ActivityState.IDLE]

    def test_transition_raises_on_invalid_target(self) -> None:
        machine = create_activity_state_machine(ActivityState.SLEEPING)
        with pytest.raises(ValueError):
            machine.transition(ActivityState.EXPLORING)

    def test_history_is_recorded_when_enabled(self) -> None:
        machine = create_activity_state_machine(track_history=True)
        machine.transition(ActivityState.SLEEPING, tick=3, reason="bedtime")
        machine.transition(ActivityState.IDLE, tick=9)

        history = machine.history
        assert [(h.from_state, h.to_state, h.tick) for h in history] == [
            (ActivityState.IDLE, ActivityState.SLEEPING, 3),
            (ActivityState.SLEEPING, ActivityState.IDLE, 9),
        ]
        assert history[0].reason == "bedtime"


class TestGrowthMachine:
    def test_growth_only_moves_forward(self) -> None:
        machine = create_growth_state_machine(GrowthStage.CHILD)
        assert machine.try_transition(GrowthStage.BABY).is_err()
        assert machine.try_transition(GrowthStage.ADULT).is_err()
        assert machine.try_transition(GrowthStage.TEEN).is_ok()

    def test_adult_is_terminal(self) -> None:
        machine = create_growth_state_machine(GrowthStage.ADULT)
        assert machine.get_valid_transitions() == []

    def test_display_names(self) -> None:
        assert GrowthStage.YOUNG_ADULT.display_name == "Young Adult"
        assert GrowthStage.YOUNG_ADULT.value == "youngAdult"


class TestBattleStatusMachine:
    def test_terminal_statuses(self) -> None:
        assert not BattleStatus.WAITING.is_terminal
        assert not BattleStatus.IN_PROGRESS.is_terminal
        assert BattleStatus.VICTORY.is_terminal
        assert BattleStatus.DEFEAT.is_terminal
        assert BattleStatus.FLED.is_terminal

    def test_finished_battle_cannot_resume(self) -> None:
        machine = create_battle_state_machine(BattleStatus.VICTORY)
        assert machine.try_transition(BattleStatus.IN_PROGRESS).is_err()

    def test_unknown_initial_state_rejected(self) -> None:
        from petsim.state_machine import StateMachine

        with pytest.raises(ValueError):
            StateMachine("nowhere", {"somewhere": []})
