"""Training and foraging tuning constants."""

from petsim.config.time import TICKS_PER_HOUR

# =============================================================================
# TRAINING SESSIONS
# =============================================================================
# Energy costs are display units; gains are permanent battle stat points
BASIC_SESSION_DURATION_TICKS = TICKS_PER_HOUR
BASIC_SESSION_ENERGY_COST = 10
BASIC_SESSION_PRIMARY_GAIN = 1
BASIC_SESSION_SECONDARY_GAIN = 0

INTENSIVE_SESSION_DURATION_TICKS = TICKS_PER_HOUR * 2
INTENSIVE_SESSION_ENERGY_COST = 25
INTENSIVE_SESSION_PRIMARY_GAIN = 3
INTENSIVE_SESSION_SECONDARY_GAIN = 1

ADVANCED_SESSION_DURATION_TICKS = TICKS_PER_HOUR * 4
ADVANCED_SESSION_ENERGY_COST = 50
ADVANCED_SESSION_PRIMARY_GAIN = 6
ADVANCED_SESSION_SECONDARY_GAIN = 2

# =============================================================================
# FORAGING
# =============================================================================
# Multiplicative bonus per foraging skill level above 1
SKILL_BONUS_PER_LEVEL = 0.05
DEFAULT_FORAGING_SKILL_LEVEL = 1

# Progress percentage reported for a finished (or zero-length) activity
MAX_PERCENTAGE = 100
