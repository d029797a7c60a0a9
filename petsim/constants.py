"""Flat view of every tuning constant, for callers that want one import."""

from petsim.config.activities import *  # noqa: F401,F403
from petsim.config.battle import *  # noqa: F401,F403
from petsim.config.care import *  # noqa: F401,F403
from petsim.config.growth import *  # noqa: F401,F403
from petsim.config.time import *  # noqa: F401,F403
