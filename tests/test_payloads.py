"""Tests for the UI payload builders."""

import random

import orjson

from petsim.content.facilities import TrainingSessionType
from petsim.payloads import build_offline_report, build_pet_status
from petsim.tick import TickProcessor
from petsim.training import start_training


def test_status_of_new_pet(baby_pet) -> None:
    payload = build_pet_status(baby_pet)

    assert payload.type == "pet_status"
    assert payload.id == "pet_mochi"
    assert payload.stage == "baby"
    assert payload.substage == 1
    assert payload.stage_progress == 0
    assert payload.care["satiety"].value == 50
    assert payload.care["satiety"].max == 50
    assert payload.care["satiety"].threshold == "content"
    assert payload.energy.value == 50
    assert payload.care_life.max == 72
    assert payload.health.value == payload.health.max == 50
    assert payload.battle_stats["strength"] == 10
    assert payload.activity.state == "idle"
    assert payload.activity.progress is None


def test_low_stat_threshold(make_pet) -> None:
    payload = build_pet_status(make_pet(hydration=2, happiness=0))
    assert payload.care["hydration"].value == 2
    assert payload.care["hydration"].threshold == "distressed"
    assert payload.care["happiness"].threshold == "critical"


def test_training_activity(baby_pet) -> None:
    pet = start_training(baby_pet, "facility_strength", TrainingSessionType.BASIC, 0).pet
    activity = build_pet_status(pet).activity

    assert activity.state == "training"
    assert activity.target_id == "facility_strength"
    assert activity.progress == 0
    assert activity.ticks_remaining == 120


def test_status_json(baby_pet) -> None:
    decoded = orjson.loads(build_pet_status(baby_pet).to_json())
    assert decoded["type"] == "pet_status"
    assert decoded["care"]["happiness"]["value"] == 50
    assert decoded["activity"] == {
        "state": "idle",
        "target_id": None,
        "progress": None,
        "ticks_remaining": None,
    }


def test_offline_report_payload(make_pet) -> None:
    pet = start_training(make_pet(energy=40), "facility_strength", TrainingSessionType.BASIC, 0).pet
    result = TickProcessor(random.Random(5)).process_offline_catchup(pet, 200)
    payload = build_offline_report(result.report)

    assert payload.type == "offline_report"
    assert payload.pet_name == "Mochi"
    assert payload.ticks_processed == 200
    assert payload.before.energy == 30
    assert payload.explorations == []
    assert len(payload.trainings) == 1
    assert payload.trainings[0].facility_name == "Strength Gym"
    assert payload.trainings[0].stats_gained == {"strength": 1}

    decoded = orjson.loads(payload.to_json())
    assert decoded["trainings"][0]["message"] == "Training complete! Gained +1 strength."
