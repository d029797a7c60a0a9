"""Runtime configuration for a tick engine instance."""

from dataclasses import dataclass

from petsim.config.activities import DEFAULT_FORAGING_SKILL_LEVEL
from petsim.config.time import MAX_OFFLINE_TICKS
from petsim.exceptions import ConfigurationError


@dataclass(frozen=True)
class EngineConfig:
    """Configuration toggles for a TickProcessor.

    Attributes:
        max_offline_ticks: Upper bound on ticks replayed by offline catch-up.
        foraging_skill_level: Player foraging skill used for drop rolls.
        daily_sleep_reset: Reset ``sleep_ticks_today`` each time the pet's
            age crosses a whole day.
    """

    max_offline_ticks: int = MAX_OFFLINE_TICKS
    foraging_skill_level: int = DEFAULT_FORAGING_SKILL_LEVEL
    daily_sleep_reset: bool = True

    def __post_init__(self) -> None:
        if self.max_offline_ticks < 0:
            raise ConfigurationError(
                f"max_offline_ticks must be non-negative, got {self.max_offline_ticks}"
            )
        if self.foraging_skill_level < 1:
            raise ConfigurationError(
                f"foraging_skill_level must be at least 1, got {self.foraging_skill_level}"
            )
