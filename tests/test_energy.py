"""Tests for energy regeneration and unit handling."""

from petsim.energy import (
    apply_energy_regen,
    deduct_energy,
    get_energy_regen_rate,
    has_enough_energy,
    restore_energy,
)
from petsim.util.units import (
    calculate_elapsed_ticks,
    format_ticks_as_duration,
    ms_to_ticks,
    to_display,
    to_micro,
)


def test_regen_rates() -> None:
    assert get_energy_regen_rate(False) == 40
    assert get_energy_regen_rate(True) == 120


def test_regen_is_capped() -> None:
    assert apply_energy_regen(10_000, 50_000, False) == 10_040
    assert apply_energy_regen(49_990, 50_000, True) == 50_000
    assert apply_energy_regen(60_000, 50_000, False) == 50_000


def test_energy_checks_use_display_units() -> None:
    assert has_enough_energy(5_000, 5)
    assert not has_enough_energy(4_999, 5)


def test_deduct_and_restore() -> None:
    assert deduct_energy(12_000, 5) == 7_000
    assert deduct_energy(3_000, 5) == 0
    assert restore_energy(45_000, 20_000, 50_000) == 50_000


def test_unit_conversions() -> None:
    assert to_display(12_999) == 12
    assert to_micro(12) == 12_000
    assert ms_to_ticks(95_000) == 3


def test_elapsed_ticks_ignore_clock_skew() -> None:
    assert calculate_elapsed_ticks(0, 60_000) == 2
    assert calculate_elapsed_ticks(60_000, 0) == 0


def test_duration_formatting() -> None:
    assert format_ticks_as_duration(120) == "1h"
    assert format_ticks_as_duration(180) == "1h 30m"
    assert format_ticks_as_duration(10) == "5m"
