"""Tests for aging, substages and stage transitions."""

from dataclasses import replace

from petsim.content import build_registry
from petsim.growth import (
    calculate_stage_transition_stat_gains,
    get_next_stage,
    get_stage_from_age,
    get_stage_progress_percent,
    get_stat_gain_for_rate,
    get_substage,
    get_ticks_until_next_stage,
    get_ticks_until_next_substage,
    process_growth_tick,
)
from petsim.pet.models import BattleStats, PetIdentity
from petsim.state_machine import GrowthStage


def _aged(pet, age_ticks, stage=GrowthStage.BABY, substage=1):
    return replace(pet, growth=replace(pet.growth, age_ticks=age_ticks, stage=stage, substage=substage))


class TestStageLookup:
    def test_stage_from_age(self) -> None:
        assert get_stage_from_age(0) == GrowthStage.BABY
        assert get_stage_from_age(172_799) == GrowthStage.BABY
        assert get_stage_from_age(172_800) == GrowthStage.CHILD
        assert get_stage_from_age(2_000_000) == GrowthStage.ADULT

    def test_substages_split_the_stage_in_thirds(self) -> None:
        assert get_substage(GrowthStage.BABY, 0) == 1
        assert get_substage(GrowthStage.BABY, 57_599) == 1
        assert get_substage(GrowthStage.BABY, 57_600) == 2
        assert get_substage(GrowthStage.BABY, 172_000) == 3

    def test_adult_substages_last_a_month(self) -> None:
        assert get_substage(GrowthStage.ADULT, 1_036_800 + 86_400) == 2
        assert get_substage(GrowthStage.ADULT, 9_999_999) == 3

    def test_next_stage(self) -> None:
        assert get_next_stage(GrowthStage.BABY) == GrowthStage.CHILD
        assert get_next_stage(GrowthStage.ADULT) is None

    def test_countdowns(self) -> None:
        assert get_ticks_until_next_substage(GrowthStage.BABY, 1, 100) == 57_500
        assert get_ticks_until_next_substage(GrowthStage.BABY, 3, 150_000) is None
        assert get_ticks_until_next_stage(GrowthStage.BABY, 100) == 172_700
        assert get_ticks_until_next_stage(GrowthStage.ADULT, 2_000_000) is None

    def test_progress_percent(self) -> None:
        assert get_stage_progress_percent(GrowthStage.BABY, 0) == 0
        assert get_stage_progress_percent(GrowthStage.BABY, 86_400) == 50


class TestStatGains:
    def test_midpoint_gain_per_rate(self) -> None:
        assert get_stat_gain_for_rate("low") == 1
        assert get_stat_gain_for_rate("medium") == 3
        assert get_stat_gain_for_rate("high") == 5

    def test_species_gains(self) -> None:
        gains = calculate_stage_transition_stat_gains("sparkfin")
        assert gains == BattleStats(
            strength=3, endurance=1, agility=5, precision=5, fortitude=1, cunning=3
        )

    def test_unknown_species_has_no_gains(self) -> None:
        assert calculate_stage_transition_stat_gains("dragon") is None


class TestGrowthTick:
    def test_plain_tick_only_ages(self, baby_pet) -> None:
        result = process_growth_tick(baby_pet)
        assert result.growth.age_ticks == 1
        assert result.growth.stage == GrowthStage.BABY
        assert not result.stage_transitioned
        assert not result.substage_transitioned
        assert result.battle_stats == baby_pet.battle_stats

    def test_substage_transition(self, baby_pet) -> None:
        result = process_growth_tick(_aged(baby_pet, 57_599))
        assert result.substage_transitioned
        assert result.previous_substage == 1
        assert result.growth.substage == 2

    def test_stage_transition_grants_gains(self, baby_pet) -> None:
        result = process_growth_tick(_aged(baby_pet, 172_799, substage=3))
        assert result.stage_transitioned
        assert not result.substage_transitioned
        assert result.previous_stage == GrowthStage.BABY
        assert result.growth.stage == GrowthStage.CHILD
        assert result.growth.substage == 1
        assert result.battle_stats == BattleStats(13, 13, 13, 13, 13, 13)

    def test_age_jump_pays_every_transition(self, baby_pet) -> None:
        result = process_growth_tick(_aged(baby_pet, 691_199))
        assert result.growth.stage == GrowthStage.YOUNG_ADULT
        assert result.battle_stats == BattleStats(19, 19, 19, 19, 19, 19)

    def test_adult_is_terminal(self, baby_pet) -> None:
        result = process_growth_tick(_aged(baby_pet, 3_000_000, stage=GrowthStage.ADULT, substage=3))
        assert result.growth.stage == GrowthStage.ADULT
        assert not result.stage_transitioned

    def test_unknown_species_still_grows_without_gains(self, baby_pet) -> None:
        stray = replace(_aged(baby_pet, 172_799), identity=PetIdentity("pet_x", "X", "dragon"))
        result = process_growth_tick(stray, build_registry())
        assert result.growth.stage == GrowthStage.CHILD
        assert result.battle_stats == baby_pet.battle_stats
