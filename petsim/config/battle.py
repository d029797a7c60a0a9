"""Battle resolution constants."""

MAX_MOVES_PER_PET = 4
CRITICAL_HIT_CHANCE = 0.0625  # 1/16
CRITICAL_HIT_MULTIPLIER = 1.5
BASE_ACCURACY = 100
MAX_STATUS_EFFECTS = 5
FLEE_SUCCESS_RATE = 0.8
FLEE_PRIORITY = -1

# Hit chance is clamped to this window (percent)
MIN_HIT_CHANCE = 5
MAX_HIT_CHANCE = 100

# Temporary stat modifiers saturate at +/- this value
STAT_MODIFIER_LIMIT = 50

# Damage roll spread: uniform(0.85, 1.15)
DAMAGE_RANDOM_MIN = 0.85
DAMAGE_RANDOM_SPREAD = 0.3

# Pets need this much display energy to start a battle
MIN_BATTLE_ENERGY = 20

# Share of cunning that adds to speed
CUNNING_SPEED_FACTOR = 0.3

# Rewards
EXPERIENCE_HEALTH_DIVISOR = 10
GOLD_HEALTH_DIVISOR = 20
EXPERIENCE_TYPE_MULTIPLIERS = {"training": 1.5, "tournament": 2.0}
GOLD_TYPE_MULTIPLIERS = {"wild": 0.5, "tournament": 3.0}
ENERGY_DRINK_REWARD_CHANCE = 0.3
TOURNAMENT_MEDICINE_REWARD_CHANCE = 0.5
