"""Tests for care stat decay, care life and thresholds."""

from petsim.care.care_life import (
    apply_care_life_change,
    calculate_care_life_change,
    count_critical_stats,
)
from petsim.care.care_stats import (
    CareThreshold,
    apply_care_decay,
    get_care_stat_threshold,
    get_care_threshold,
    get_poop_happiness_multiplier,
)
from petsim.pet.models import BattleStats, CareStats
from petsim.pet.stats import PetMaxStats

MAX = PetMaxStats(
    satiety=50_000,
    hydration=50_000,
    happiness=50_000,
    energy=50_000,
    care_life=72_000,
    battle=BattleStats(),
)


class TestCareDecay:
    def test_awake_decay(self) -> None:
        decayed = apply_care_decay(CareStats(10_000, 10_000, 10_000), False, 0, MAX)
        assert decayed == CareStats(9_950, 9_950, 9_950)

    def test_sleeping_decay_is_half(self) -> None:
        decayed = apply_care_decay(CareStats(10_000, 10_000, 10_000), True, 0, MAX)
        assert decayed == CareStats(9_975, 9_975, 9_975)

    def test_poop_scales_only_happiness(self) -> None:
        decayed = apply_care_decay(CareStats(10_000, 10_000, 10_000), True, 3, MAX)
        # 25 * 1.5 floors to 37
        assert decayed == CareStats(9_975, 9_975, 9_963)

    def test_dirty_habitat_triples_happiness_decay(self) -> None:
        decayed = apply_care_decay(CareStats(10_000, 10_000, 10_000), False, 7, MAX)
        assert decayed.happiness == 9_850

    def test_floors_at_zero(self) -> None:
        decayed = apply_care_decay(CareStats(10, 0, 30), False, 9, MAX)
        assert decayed == CareStats(0, 0, 0)

    def test_clamps_to_max(self) -> None:
        decayed = apply_care_decay(CareStats(90_000, 90_000, 90_000), False, 0, MAX)
        assert decayed == CareStats(50_000, 50_000, 50_000)

    def test_unknown_caps_leave_values_uncapped(self) -> None:
        decayed = apply_care_decay(CareStats(90_000, 90_000, 90_000), False, 0, None)
        assert decayed == CareStats(89_950, 89_950, 89_950)

    def test_poop_multiplier_table(self) -> None:
        assert get_poop_happiness_multiplier(0) == 1.0
        assert get_poop_happiness_multiplier(2) == 1.0
        assert get_poop_happiness_multiplier(3) == 1.5
        assert get_poop_happiness_multiplier(5) == 2.0
        assert get_poop_happiness_multiplier(12) == 3.0


class TestCareLife:
    def test_counts_stats_below_one_display_point(self) -> None:
        assert count_critical_stats(CareStats(999, 1_000, 0)) == 2

    def test_drain_by_critical_count(self) -> None:
        assert calculate_care_life_change(CareStats(0, 40_000, 40_000), 0, MAX) == -8
        assert calculate_care_life_change(CareStats(0, 0, 40_000), 0, MAX) == -25
        assert calculate_care_life_change(CareStats(0, 0, 0), 0, MAX) == -50

    def test_poop_adds_to_critical_drain(self) -> None:
        assert calculate_care_life_change(CareStats(0, 0, 0), 7, MAX) == -58

    def test_dirty_habitat_alone_drains(self) -> None:
        assert calculate_care_life_change(CareStats(50_000, 50_000, 50_000), 7, MAX) == -8

    def test_recovery_tiers(self) -> None:
        assert calculate_care_life_change(CareStats(50_000, 50_000, 50_000), 0, MAX) == 25
        assert calculate_care_life_change(CareStats(50_000, 40_000, 50_000), 0, MAX) == 16
        assert calculate_care_life_change(CareStats(25_000, 50_000, 50_000), 0, MAX) == 8
        assert calculate_care_life_change(CareStats(20_000, 50_000, 50_000), 0, MAX) == 0

    def test_apply_clamps_to_range(self) -> None:
        full = CareStats(50_000, 50_000, 50_000)
        assert apply_care_life_change(71_990, full, 0, MAX) == 72_000
        assert apply_care_life_change(20, CareStats(0, 0, 0), 0, MAX) == 0


class TestThresholds:
    def test_threshold_bands(self) -> None:
        assert get_care_threshold(0) == CareThreshold.CRITICAL
        assert get_care_threshold(25) == CareThreshold.DISTRESSED
        assert get_care_threshold(50) == CareThreshold.UNCOMFORTABLE
        assert get_care_threshold(75) == CareThreshold.OKAY
        assert get_care_threshold(76) == CareThreshold.CONTENT

    def test_stat_threshold_with_zero_cap(self) -> None:
        assert get_care_stat_threshold(10, 0) == CareThreshold.CRITICAL
        assert get_care_stat_threshold(40_000, 50_000) == CareThreshold.CONTENT
