"""Care stat decay and threshold classification.

Why floor happiness decay?
--------------------------
Happiness decays faster in a dirty habitat. The multiplied rate is floored
to stay an integer micro amount, so 25 micro asleep at x1.5 becomes 37.
"""

from dataclasses import replace
from enum import Enum
from typing import Optional

from petsim.config.care import (
    CARE_DECAY_AWAKE,
    CARE_DECAY_SLEEPING,
    CARE_THRESHOLD_CRITICAL,
    CARE_THRESHOLD_DISTRESSED,
    CARE_THRESHOLD_OKAY,
    CARE_THRESHOLD_UNCOMFORTABLE,
    POOP_HAPPINESS_MULTIPLIERS,
)
from petsim.pet.models import CareStats
from petsim.pet.stats import PetMaxStats


class CareThreshold(Enum):
    CONTENT = "content"
    OKAY = "okay"
    UNCOMFORTABLE = "uncomfortable"
    DISTRESSED = "distressed"
    CRITICAL = "critical"


def get_poop_happiness_multiplier(poop_count: int) -> float:
    for threshold, multiplier in POOP_HAPPINESS_MULTIPLIERS:
        if poop_count >= threshold:
            return multiplier
    return 1.0


def apply_care_decay(
    care_stats: CareStats,
    is_sleeping: bool,
    poop_count: int,
    max_stats: Optional[PetMaxStats],
) -> CareStats:
    """Decay all three care stats by one tick.

    Args:
        care_stats: Current values (micro)
        is_sleeping: Sleeping pets decay at half rate
        poop_count: Drives the happiness multiplier
        max_stats: Caps to clamp against; None leaves values uncapped

    Returns:
        New care stats, each in ``[0, max]``
    """
    rate = CARE_DECAY_SLEEPING if is_sleeping else CARE_DECAY_AWAKE
    happiness_decay = int(rate * get_poop_happiness_multiplier(poop_count))

    satiety = max(0, care_stats.satiety - rate)
    hydration = max(0, care_stats.hydration - rate)
    happiness = max(0, care_stats.happiness - happiness_decay)

    if max_stats is not None:
        satiety = min(satiety, max_stats.satiety)
        hydration = min(hydration, max_stats.hydration)
        happiness = min(happiness, max_stats.happiness)

    return replace(care_stats, satiety=satiety, hydration=hydration, happiness=happiness)


def get_care_threshold(percent: float) -> CareThreshold:
    """Classify a percent-of-max value."""
    if percent <= CARE_THRESHOLD_CRITICAL:
        return CareThreshold.CRITICAL
    if percent <= CARE_THRESHOLD_DISTRESSED:
        return CareThreshold.DISTRESSED
    if percent <= CARE_THRESHOLD_UNCOMFORTABLE:
        return CareThreshold.UNCOMFORTABLE
    if percent <= CARE_THRESHOLD_OKAY:
        return CareThreshold.OKAY
    return CareThreshold.CONTENT


def get_care_stat_threshold(value: int, max_value: int) -> CareThreshold:
    if max_value <= 0:
        return CareThreshold.CRITICAL
    return get_care_threshold(value / max_value * 100)
