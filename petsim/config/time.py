"""Time and fixed-point unit constants.

All rates in the engine are expressed per tick. Stats are stored as
micro-units (integers) so that small per-tick decay amounts do not lose
precision; the UI shows them divided by MICRO_RATIO.
"""

# Fixed-point scale between stored micro values and displayed values
MICRO_RATIO = 1000

# One tick is 30 real seconds
TICK_DURATION_MS = 30_000
TICKS_PER_HOUR = 120
TICKS_PER_DAY = 2880
TICKS_PER_MONTH = 86_400  # 30 days

# Offline catch-up is capped at 30 days of ticks
MAX_OFFLINE_TICKS = TICKS_PER_DAY * 30
