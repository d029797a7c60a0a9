"""Tests for offline catch-up replay."""

import random

from petsim.config.engine_config import EngineConfig
from petsim.content.facilities import TrainingSessionType
from petsim.foraging import start_foraging
from petsim.state_machine import ActivityState
from petsim.tick import TickProcessor
from petsim.training import start_training


def test_catchup_equals_live_ticks(make_pet) -> None:
    pet = start_foraging(make_pet(energy=50), "meadow", 0).pet

    live = TickProcessor(random.Random(11)).process_multiple_ticks(pet, 300)
    offline = TickProcessor(random.Random(11)).process_offline_catchup(pet, 300)

    assert offline.pet == live
    assert offline.ticks_processed == 300
    assert not offline.was_capped


def test_catchup_is_capped(baby_pet) -> None:
    processor = TickProcessor(random.Random(1), config=EngineConfig(max_offline_ticks=50))
    result = processor.process_offline_catchup(baby_pet, 80, elapsed_ms=2_400_000)

    assert result.ticks_processed == 50
    assert result.was_capped
    assert result.pet.growth.age_ticks == 50
    assert result.report.elapsed_ms == 2_400_000


def test_report_contents(make_pet) -> None:
    pet = start_training(make_pet(energy=40), "facility_strength", TrainingSessionType.BASIC, 0).pet
    result = TickProcessor(random.Random(5)).process_offline_catchup(pet, 600)
    report = result.report

    assert report.pet_name == "Mochi"
    assert report.ticks_processed == 600
    assert report.elapsed_ms == 600 * 30_000
    assert report.before_stats.satiety == pet.care_stats.satiety
    assert report.after_stats.satiety == result.pet.care_stats.satiety
    assert report.max_stats.care_life == 72_000
    assert report.poop_before == 0
    assert report.poop_after == 1

    assert len(report.training_results) == 1
    training = report.training_results[0]
    assert training.facility_name == "Strength Gym"
    assert training.result.stats_gained == {"strength": 1}
    assert result.pet.activity_state == ActivityState.IDLE
    assert report.exploration_results == ()


def test_exploration_results_are_collected(make_pet) -> None:
    pet = start_foraging(make_pet(energy=50), "misty_woods", 0).pet
    report = TickProcessor(random.Random(2)).process_offline_catchup(pet, 10).report

    assert len(report.exploration_results) == 1
    assert report.exploration_results[0].location_name == "Misty Woods"


def test_zero_ticks(baby_pet) -> None:
    result = TickProcessor(random.Random(0)).process_offline_catchup(baby_pet, 0)
    assert result.pet == baby_pet
    assert result.ticks_processed == 0
    assert result.report.training_results == ()
