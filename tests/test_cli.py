"""Tests for the headless command-line entry point."""

import orjson
import pytest

from petsim.cli import build_parser, main


def _run(capsys, *argv: str) -> dict:
    assert main(list(argv)) == 0
    return orjson.loads(capsys.readouterr().out)


def test_default_run_prints_status(capsys) -> None:
    payload = _run(capsys, "--ticks", "10")
    assert payload["type"] == "pet_status"
    assert payload["name"] == "Mochi"
    assert payload["age_ticks"] == 10


def test_species_and_name(capsys) -> None:
    payload = _run(capsys, "--name", "Pebble", "--species", "rockpup", "--ticks", "0")
    assert payload["id"] == "pet_pebble"
    assert payload["species_id"] == "rockpup"


def test_offline_forage_report(capsys) -> None:
    payload = _run(capsys, "--forage", "meadow", "--ticks", "600", "--offline", "--seed", "7")
    assert payload["type"] == "offline_report"
    assert payload["ticks_processed"] == 600
    assert not payload["was_capped"]
    assert len(payload["explorations"]) == 1


def test_same_seed_same_output(capsys) -> None:
    first = _run(capsys, "--forage", "misty_woods", "--ticks", "30", "--offline", "--seed", "3")
    second = _run(capsys, "--forage", "misty_woods", "--ticks", "30", "--offline", "--seed", "3")
    assert first == second


def test_battle_then_advance(capsys) -> None:
    payload = _run(capsys, "--battle", "rockpup", "--ticks", "1", "--seed", "42")
    assert payload["activity"]["state"] == "idle"
    assert payload["health"]["value"] <= payload["health"]["max"]


def test_rejected_activity_exits_nonzero(capsys) -> None:
    assert main(["--forage", "willowbrook"]) == 1
    assert capsys.readouterr().out == ""


def test_intensive_training_needs_child_stage() -> None:
    assert main(["--train", "facility_strength", "--session", "intensive"]) == 1


def test_activities_are_mutually_exclusive() -> None:
    with pytest.raises(SystemExit):
        build_parser().parse_args(["--forage", "meadow", "--train", "facility_strength"])
