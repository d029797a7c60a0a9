"""Tests for unit conversions and RNG guards."""

import random

import pytest

from petsim.util import (
    MissingRNGError,
    calculate_elapsed_ticks,
    format_ticks_as_duration,
    ms_to_ticks,
    require_rng_param,
    ticks_to_ms,
    to_display,
    to_micro,
)


class TestUnits:
    def test_display_floors(self) -> None:
        assert to_display(49_999) == 49
        assert to_display(to_micro(7)) == 7

    def test_tick_time(self) -> None:
        assert ms_to_ticks(59_999) == 1
        assert ticks_to_ms(120) == 3_600_000

    def test_elapsed_ticks(self) -> None:
        assert calculate_elapsed_ticks(0, 90_000) == 3
        assert calculate_elapsed_ticks(90_000, 0) == 0

    @pytest.mark.parametrize(
        "ticks, expected",
        [(0, "0m"), (1, "0m"), (2, "1m"), (120, "1h"), (180, "1h 30m"), (-5, "0m")],
    )
    def test_duration_format(self, ticks, expected) -> None:
        assert format_ticks_as_duration(ticks) == expected


class TestRngGuards:
    def test_param_passes_through(self) -> None:
        rng = random.Random(0)
        assert require_rng_param(rng, "test") is rng

    def test_missing_param(self) -> None:
        with pytest.raises(MissingRNGError, match="initiate_battle"):
            require_rng_param(None, "initiate_battle")

