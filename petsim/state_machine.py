"""State machine abstractions for explicit state management.

This module provides tools for creating explicit state machines where:
- All valid states are enumerated
- Valid transitions are defined explicitly
- Invalid transitions are caught immediately (fail-fast)
- State history can be tracked for debugging

Three machines live here:

- ``ActivityState``: the pet's exclusive occupation. Idle is the hub; every
  other state is entered from Idle and leaves back to Idle.
- ``GrowthStage``: the life cycle, forward only.
- ``BattleStatus``: ``waiting -> in_progress -> {victory|defeat|fled}``.

Pets are immutable values, so callers usually build a throwaway machine from
the pet's current state and ask it whether a move is legal:

    machine = create_activity_state_machine(pet.activity_state)
    result = machine.try_transition(ActivityState.TRAINING)
    if result.is_err():
        logger.debug(result.error)
"""

from dataclasses import dataclass
from enum import Enum
from typing import Dict, Generic, List, Tuple, TypeVar

from petsim.result import Err, Ok, Result

S = TypeVar("S", bound=Enum)


@dataclass
class StateTransition(Generic[S]):
    """Record of a state transition for debugging.

    Attributes:
        from_state: The state before transition
        to_state: The state after transition
        tick: The simulation tick when transition occurred
        reason: Optional description of why transition happened
    """

    from_state: S
    to_state: S
    tick: int
    reason: str = ""


class StateMachine(Generic[S]):
    """A generic state machine with explicit transition validation.

    Example:
        machine = StateMachine(ActivityState.IDLE, ACTIVITY_TRANSITIONS)
        machine.transition(ActivityState.SLEEPING)  # OK
        machine.transition(ActivityState.TRAINING)  # Raises, must wake first
    """

    def __init__(
        self,
        initial_state: S,
        valid_transitions: Dict[S, List[S]],
        track_history: bool = False,
        max_history: int = 100,
    ) -> None:
        """Initialize the state machine.

        Args:
            initial_state: The starting state
            valid_transitions: Map of state -> list of valid target states
            track_history: Whether to record transition history
            max_history: Maximum number of transitions to keep in history
        """
        self._state = initial_state
        self._transitions = valid_transitions
        self._track_history = track_history
        self._max_history = max_history
        self._history: List[StateTransition[S]] = []

        if initial_state not in valid_transitions:
            raise ValueError(
                f"Initial state {initial_state} not in valid_transitions. "
                f"Valid states: {list(valid_transitions.keys())}"
            )

    @property
    def state(self) -> S:
        """Get the current state."""
        return self._state

    @property
    def history(self) -> List[StateTransition[S]]:
        """Get transition history (empty if tracking disabled)."""
        return self._history.copy()

    def can_transition(self, target: S) -> bool:
        """Check if transition to target state is valid."""
        return target in self._transitions.get(self._state, [])

    def try_transition(self, target: S, tick: int = 0, reason: str = "") -> Result[S, str]:
        """Attempt to transition to a new state.

        Args:
            target: The desired target state
            tick: The current simulation tick (for history)
            reason: Why this transition is happening (for debugging)

        Returns:
            Ok(new_state) if the move is legal, Err(message) otherwise
        """
        if not self.can_transition(target):
            valid_targets = self._transitions.get(self._state, [])
            return Err(
                f"Invalid transition: {self._state.name} -> {target.name}. "
                f"Valid targets from {self._state.name}: {[t.name for t in valid_targets]}"
            )

        old_state = self._state
        self._state = target

        if self._track_history:
            self._record_transition(old_state, target, tick, reason)

        return Ok(target)

    def transition(self, target: S, tick: int = 0, reason: str = "") -> S:
        """Transition to a new state, raising on invalid transition.

        Use this when an invalid transition is a programming error. Use
        try_transition() when the transition might legitimately fail.

        Raises:
            ValueError: If the transition is invalid
        """
        result = self.try_transition(target, tick, reason)
        if result.is_err():
            raise ValueError(result.error)
        return result.unwrap()

    def force_state(self, state: S, tick: int = 0, reason: str = "forced") -> None:
        """Force a state change without validation.

        Only for restoring externally loaded state or for tests.
        """
        old_state = self._state
        self._state = state

        if self._track_history:
            self._record_transition(old_state, state, tick, f"[FORCED] {reason}")

    def _record_transition(self, from_state: S, to_state: S, tick: int, reason: str) -> None:
        self._history.append(
            StateTransition(
                from_state=from_state,
                to_state=to_state,
                tick=tick,
                reason=reason,
            )
        )

        if len(self._history) > self._max_history:
            self._history = self._history[-self._max_history :]

    def get_valid_transitions(self) -> List[S]:
        """Get list of valid target states from current state."""
        return list(self._transitions.get(self._state, []))

    def __repr__(self) -> str:
        return f"StateMachine(state={self._state.name})"


# ============================================================================
# Activity State Machine
# ============================================================================


class ActivityState(Enum):
    """The exclusive occupation of a pet.

    Values double as the display names used in gating messages
    ("Cannot train while sleeping.").
    """

    IDLE = "idle"
    SLEEPING = "sleeping"
    TRAINING = "training"
    EXPLORING = "exploring"
    BATTLING = "battling"


# Every busy state is entered from Idle and always returns to Idle
ACTIVITY_TRANSITIONS: Dict[ActivityState, List[ActivityState]] = {
    ActivityState.IDLE: [
        ActivityState.SLEEPING,
        ActivityState.TRAINING,
        ActivityState.EXPLORING,
        ActivityState.BATTLING,
    ],
    ActivityState.SLEEPING: [ActivityState.IDLE],
    ActivityState.TRAINING: [ActivityState.IDLE],
    ActivityState.EXPLORING: [ActivityState.IDLE],
    ActivityState.BATTLING: [ActivityState.IDLE],
}


def create_activity_state_machine(
    initial_state: ActivityState = ActivityState.IDLE, track_history: bool = False
) -> StateMachine[ActivityState]:
    """Create a state machine for the pet activity cycle."""
    return StateMachine(
        initial_state=initial_state,
        valid_transitions=ACTIVITY_TRANSITIONS,
        track_history=track_history,
    )


# ============================================================================
# Growth Stage State Machine
# ============================================================================


class GrowthStage(Enum):
    """Life stages of a pet, in order."""

    BABY = "baby"
    CHILD = "child"
    TEEN = "teen"
    YOUNG_ADULT = "youngAdult"
    ADULT = "adult"

    @property
    def display_name(self) -> str:
        return GROWTH_STAGE_NAMES[self]


GROWTH_STAGE_ORDER: Tuple[GrowthStage, ...] = (
    GrowthStage.BABY,
    GrowthStage.CHILD,
    GrowthStage.TEEN,
    GrowthStage.YOUNG_ADULT,
    GrowthStage.ADULT,
)

GROWTH_STAGE_NAMES: Dict[GrowthStage, str] = {
    GrowthStage.BABY: "Baby",
    GrowthStage.CHILD: "Child",
    GrowthStage.TEEN: "Teen",
    GrowthStage.YOUNG_ADULT: "Young Adult",
    GrowthStage.ADULT: "Adult",
}

# Pets can only grow forward
GROWTH_STAGE_TRANSITIONS: Dict[GrowthStage, List[GrowthStage]] = {
    GrowthStage.BABY: [GrowthStage.CHILD],
    GrowthStage.CHILD: [GrowthStage.TEEN],
    GrowthStage.TEEN: [GrowthStage.YOUNG_ADULT],
    GrowthStage.YOUNG_ADULT: [GrowthStage.ADULT],
    GrowthStage.ADULT: [],  # Terminal
}


def create_growth_state_machine(
    initial_state: GrowthStage = GrowthStage.BABY, track_history: bool = False
) -> StateMachine[GrowthStage]:
    """Create a state machine for pet growth stages."""
    return StateMachine(
        initial_state=initial_state,
        valid_transitions=GROWTH_STAGE_TRANSITIONS,
        track_history=track_history,
    )


# ============================================================================
# Battle Status State Machine
# ============================================================================


class BattleStatus(Enum):
    """Lifecycle of a single battle."""

    WAITING = "waiting"
    IN_PROGRESS = "in_progress"
    VICTORY = "victory"
    DEFEAT = "defeat"
    FLED = "fled"

    @property
    def is_terminal(self) -> bool:
        return not BATTLE_STATUS_TRANSITIONS[self]


BATTLE_STATUS_TRANSITIONS: Dict[BattleStatus, List[BattleStatus]] = {
    BattleStatus.WAITING: [
        BattleStatus.IN_PROGRESS,
        BattleStatus.VICTORY,
        BattleStatus.DEFEAT,
        BattleStatus.FLED,
    ],
    BattleStatus.IN_PROGRESS: [
        BattleStatus.IN_PROGRESS,
        BattleStatus.VICTORY,
        BattleStatus.DEFEAT,
        BattleStatus.FLED,
    ],
    BattleStatus.VICTORY: [],
    BattleStatus.DEFEAT: [],
    BattleStatus.FLED: [],
}


def create_battle_state_machine(
    initial_state: BattleStatus = BattleStatus.WAITING, track_history: bool = False
) -> StateMachine[BattleStatus]:
    """Create a state machine for battle flow."""
    return StateMachine(
        initial_state=initial_state,
        valid_transitions=BATTLE_STATUS_TRANSITIONS,
        track_history=track_history,
    )
