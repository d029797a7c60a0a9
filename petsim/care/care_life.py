"""Care life: the slow meter that tracks sustained neglect or care.

Drain outruns recovery. Three empty care stats cost 50 micro a tick while
perfect care recovers only 25, so a pet left alone loses ground quickly and
wins it back slowly.
"""

from typing import List

from petsim.config.care import (
    CARE_LIFE_DRAIN_1_STAT,
    CARE_LIFE_DRAIN_2_STATS,
    CARE_LIFE_DRAIN_3_STATS,
    CARE_LIFE_DRAIN_POOP,
    CARE_LIFE_RECOVERY_ABOVE_50,
    CARE_LIFE_RECOVERY_ABOVE_75,
    CARE_LIFE_RECOVERY_AT_100,
    CARE_LIFE_RECOVERY_THRESHOLD_100,
    CARE_LIFE_RECOVERY_THRESHOLD_50,
    CARE_LIFE_RECOVERY_THRESHOLD_75,
    POOP_CARE_LIFE_DRAIN_THRESHOLD,
)
from petsim.pet.models import CareStats
from petsim.pet.stats import PetMaxStats
from petsim.util.units import to_display

_DRAIN_BY_CRITICAL_COUNT = {
    1: CARE_LIFE_DRAIN_1_STAT,
    2: CARE_LIFE_DRAIN_2_STATS,
    3: CARE_LIFE_DRAIN_3_STATS,
}


def count_critical_stats(care_stats: CareStats) -> int:
    values = (care_stats.satiety, care_stats.hydration, care_stats.happiness)
    return sum(1 for value in values if to_display(value) <= 0)


def _care_stat_percentages(care_stats: CareStats, max_stats: PetMaxStats) -> List[float]:
    pairs = (
        (care_stats.satiety, max_stats.satiety),
        (care_stats.hydration, max_stats.hydration),
        (care_stats.happiness, max_stats.happiness),
    )
    return [value / cap * 100 if cap > 0 else 0.0 for value, cap in pairs]


def calculate_care_life_change(care_stats: CareStats, poop_count: int, max_stats: PetMaxStats) -> int:
    """Signed micro change to care life for one tick."""
    dirty = poop_count >= POOP_CARE_LIFE_DRAIN_THRESHOLD
    critical = count_critical_stats(care_stats)

    if critical > 0:
        drain = _DRAIN_BY_CRITICAL_COUNT[critical]
        if dirty:
            drain += CARE_LIFE_DRAIN_POOP
        return -drain

    if dirty:
        return -CARE_LIFE_DRAIN_POOP

    min_percent = min(_care_stat_percentages(care_stats, max_stats))
    if min_percent >= CARE_LIFE_RECOVERY_THRESHOLD_100:
        return CARE_LIFE_RECOVERY_AT_100
    if min_percent >= CARE_LIFE_RECOVERY_THRESHOLD_75:
        return CARE_LIFE_RECOVERY_ABOVE_75
    if min_percent >= CARE_LIFE_RECOVERY_THRESHOLD_50:
        return CARE_LIFE_RECOVERY_ABOVE_50
    return 0


def apply_care_life_change(
    care_life: int, care_stats: CareStats, poop_count: int, max_stats: PetMaxStats
) -> int:
    """New care life after one tick, clamped to ``[0, care_life_max]``."""
    delta = calculate_care_life_change(care_stats, poop_count, max_stats)
    return max(0, min(care_life + delta, max_stats.care_life))
