"""Per-stage caps and thresholds.

Pacing target is roughly twelve real months from hatching to Adult.
"""

from dataclasses import dataclass
from typing import Dict

from petsim.config.growth import (
    ADULT_MIN_AGE_TICKS,
    CHILD_MIN_AGE_TICKS,
    MIN_SLEEP_HOURS,
    SUBSTAGES_PER_STAGE,
    TEEN_MIN_AGE_TICKS,
    YOUNG_ADULT_MIN_AGE_TICKS,
)
from petsim.config.time import TICKS_PER_HOUR
from petsim.state_machine import GrowthStage


@dataclass(frozen=True)
class GrowthStageDefinition:
    """Caps and thresholds for one growth stage (stat values in micro-units)."""

    stage: GrowthStage
    name: str
    min_age_ticks: int
    base_care_stat_max: int
    base_energy_max: int
    care_life_max: int
    min_sleep_ticks: int
    substage_count: int = SUBSTAGES_PER_STAGE


def _min_sleep(stage: GrowthStage) -> int:
    return MIN_SLEEP_HOURS[stage.value] * TICKS_PER_HOUR


GROWTH_STAGE_DEFINITIONS: Dict[GrowthStage, GrowthStageDefinition] = {
    GrowthStage.BABY: GrowthStageDefinition(
        stage=GrowthStage.BABY,
        name="Baby",
        min_age_ticks=0,
        base_care_stat_max=50_000,
        base_energy_max=50_000,
        care_life_max=72_000,
        min_sleep_ticks=_min_sleep(GrowthStage.BABY),
    ),
    GrowthStage.CHILD: GrowthStageDefinition(
        stage=GrowthStage.CHILD,
        name="Child",
        min_age_ticks=CHILD_MIN_AGE_TICKS,
        base_care_stat_max=80_000,
        base_energy_max=75_000,
        care_life_max=120_000,
        min_sleep_ticks=_min_sleep(GrowthStage.CHILD),
    ),
    GrowthStage.TEEN: GrowthStageDefinition(
        stage=GrowthStage.TEEN,
        name="Teen",
        min_age_ticks=TEEN_MIN_AGE_TICKS,
        base_care_stat_max=120_000,
        base_energy_max=100_000,
        care_life_max=168_000,
        min_sleep_ticks=_min_sleep(GrowthStage.TEEN),
    ),
    GrowthStage.YOUNG_ADULT: GrowthStageDefinition(
        stage=GrowthStage.YOUNG_ADULT,
        name="Young Adult",
        min_age_ticks=YOUNG_ADULT_MIN_AGE_TICKS,
        base_care_stat_max=160_000,
        base_energy_max=150_000,
        care_life_max=240_000,
        min_sleep_ticks=_min_sleep(GrowthStage.YOUNG_ADULT),
    ),
    GrowthStage.ADULT: GrowthStageDefinition(
        stage=GrowthStage.ADULT,
        name="Adult",
        min_age_ticks=ADULT_MIN_AGE_TICKS,
        base_care_stat_max=200_000,
        base_energy_max=200_000,
        care_life_max=336_000,
        min_sleep_ticks=_min_sleep(GrowthStage.ADULT),
    ),
}
