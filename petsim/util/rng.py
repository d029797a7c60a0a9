"""RNG utilities for deterministic simulation.

Drop rolls, hit rolls, critical hits and turn-order tie breaks all draw from a
``random.Random`` the caller injects. These helpers fail loudly when one is
missing instead of silently creating an unseeded fallback, so that replaying
the same seed always replays the same battle or forage.
"""

import random
from typing import Optional


class MissingRNGError(RuntimeError):
    """Raised when an RNG is required but not available.

    This indicates a bug in engine setup: every component that rolls dice
    must be handed the engine's RNG.
    """


def require_rng_param(rng: Optional[random.Random], context: str) -> random.Random:
    """Validate that an RNG parameter was provided, failing loudly if not.

    Args:
        rng: The RNG that should have been provided
        context: Description of where this is called from (for error messages)

    Returns:
        The validated RNG

    Raises:
        MissingRNGError: If rng is None

    Example:
        def __init__(self, rng: Optional[random.Random] = None):
            self._rng = require_rng_param(rng, "BattleResolver.__init__")
    """
    if rng is None:
        raise MissingRNGError(f"RNG required: {context}. Pass the engine RNG explicitly.")
    return rng
