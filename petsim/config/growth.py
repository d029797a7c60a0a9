"""Growth stage thresholds and per-stage stat caps.

Target pacing is roughly twelve real months from hatching to Adult:
1 day = 2880 ticks, 1 month = 86,400 ticks.
"""

# Minimum age (ticks) to reach each stage
CHILD_MIN_AGE_TICKS = 172_800  # ~2 months
TEEN_MIN_AGE_TICKS = 432_000  # ~5 months
YOUNG_ADULT_MIN_AGE_TICKS = 691_200  # ~8 months
ADULT_MIN_AGE_TICKS = 1_036_800  # ~12 months

SUBSTAGES_PER_STAGE = 3

# Battle stat gain per stage transition, by species growth rate.
# Ranges are low 1-2, medium 3-4, high 5-6; the floored midpoint is applied.
GROWTH_RATE_GAINS = {
    "low": (1, 2),
    "medium": (3, 4),
    "high": (5, 6),
}

# Minimum sleep per day in hours, by stage
MIN_SLEEP_HOURS = {
    "baby": 16,
    "child": 14,
    "teen": 12,
    "youngAdult": 10,
    "adult": 8,
}
