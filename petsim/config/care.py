"""Care, energy, poop and sleep tuning constants (micro-units per tick)."""

# =============================================================================
# CARE STAT DECAY
# =============================================================================
# Awake: -50/tick = -6 display per hour. Sleeping decays at half rate.
CARE_DECAY_AWAKE = 50
CARE_DECAY_SLEEPING = 25

# Happiness decay multiplier by poop count, checked top to bottom
POOP_HAPPINESS_MULTIPLIERS = (
    (7, 3.0),
    (5, 2.0),
    (3, 1.5),
    (0, 1.0),
)

# =============================================================================
# CARE LIFE
# =============================================================================
# Drain when care stats sit at zero (display value)
CARE_LIFE_DRAIN_1_STAT = 8
CARE_LIFE_DRAIN_2_STATS = 25
CARE_LIFE_DRAIN_3_STATS = 50

# Extra drain from a dirty habitat
CARE_LIFE_DRAIN_POOP = 8
POOP_CARE_LIFE_DRAIN_THRESHOLD = 7

# Recovery when every care stat is at or above a percentage of its max
CARE_LIFE_RECOVERY_AT_100 = 25
CARE_LIFE_RECOVERY_ABOVE_75 = 16
CARE_LIFE_RECOVERY_ABOVE_50 = 8
CARE_LIFE_RECOVERY_THRESHOLD_100 = 100
CARE_LIFE_RECOVERY_THRESHOLD_75 = 75
CARE_LIFE_RECOVERY_THRESHOLD_50 = 50

# Care threshold cut points (percent of max, inclusive upper bounds)
CARE_THRESHOLD_CRITICAL = 0
CARE_THRESHOLD_DISTRESSED = 25
CARE_THRESHOLD_UNCOMFORTABLE = 50
CARE_THRESHOLD_OKAY = 75

# =============================================================================
# ENERGY
# =============================================================================
# Awake: +4.8 display per hour, sleeping: +14.4 display per hour
ENERGY_REGEN_AWAKE = 40
ENERGY_REGEN_SLEEPING = 120

# =============================================================================
# POOP
# =============================================================================
# Timer counts down from the threshold: 480 ticks awake, 960 asleep
POOP_MICRO_THRESHOLD = 960
POOP_DECAY_AWAKE = 2
POOP_DECAY_SLEEPING = 1
MAX_POOP_COUNT = 50

# Standard meal shortens the poop timer by 60 awake ticks
POOP_ACCELERATION_BASE = 120

# =============================================================================
# HEALTH
# =============================================================================
BASE_HEALTH = 30
HEALTH_PER_ENDURANCE = 2
