"""Event bus and the notification events the engine emits."""

from petsim.events.domain_events import (
    BattleEndedEvent,
    ExplorationCompleteEvent,
    StageTransitionEvent,
    SubstageTransitionEvent,
    TrainingCompleteEvent,
)
from petsim.events.event_bus import EventBus

__all__ = [
    "BattleEndedEvent",
    "EventBus",
    "ExplorationCompleteEvent",
    "StageTransitionEvent",
    "SubstageTransitionEvent",
    "TrainingCompleteEvent",
]
