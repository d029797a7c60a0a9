"""Configuration package for the pet simulation.

Tuning constants are split by concern (time, care, growth, activities,
battle) and re-exported through petsim/constants.py.
"""

from petsim.config.engine_config import EngineConfig

__all__ = ["EngineConfig"]
