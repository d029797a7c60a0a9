"""Result type for explicit success/failure handling.

Engine operations never raise for bad player input. They hand back a value
that says whether the operation happened and, if not, why. This module holds
the generic ``Ok``/``Err`` pair used by the battle resolver and the activity
state machine.

Why Result Types?
-----------------
Before (implicit failure):
    def initiate_battle(pet, opponent) -> Optional[Battle]:
        if pet.health_stats.health <= 0:
            return None  # Caller has no idea why

After (explicit failure):
    def initiate_battle(pet, opponent) -> Result[Battle, str]:
        if pet.health_stats.health <= 0:
            return Err("Your pet is unable to battle - no health remaining")
        return Ok(battle)

Usage:
------
    result = resolver.process_player_action(battle, action)
    if result.is_ok():
        battle = result.unwrap()
    else:
        show_message(result.error)

    # Pattern matching style
    match result:
        case Ok(value):
            ...
        case Err(error):
            ...
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Generic, List, TypeVar, Union

T = TypeVar("T")  # Success value type
E = TypeVar("E")  # Error type
U = TypeVar("U")  # Transformed value type
F = TypeVar("F")  # Transformed error type


@dataclass(frozen=True)
class Ok(Generic[T]):
    """A successful operation carrying its value."""

    value: T

    def is_ok(self) -> bool:
        return True

    def is_err(self) -> bool:
        return False

    def unwrap(self) -> T:
        """Get the success value."""
        return self.value

    def unwrap_or(self, default: T) -> T:
        return self.value

    @property
    def error(self) -> None:
        """Ok has no error, returns None."""
        return None

    def map(self, f: Callable[[T], U]) -> "Ok[U]":
        """Transform the success value.

        Example:
            Ok(battle).map(lambda b: b.status)  # Ok(BattleStatus.IN_PROGRESS)
        """
        return Ok(f(self.value))

    def map_err(self, f: Callable[[E], F]) -> "Ok[T]":
        return self

    def and_then(self, f: Callable[[T], "Result[U, E]"]) -> "Result[U, E]":
        """Chain another Result-returning operation."""
        return f(self.value)

    def __repr__(self) -> str:
        return f"Ok({self.value!r})"


@dataclass(frozen=True)
class Err(Generic[E]):
    """A failed operation carrying a human-readable reason."""

    error: E

    def is_ok(self) -> bool:
        return False

    def is_err(self) -> bool:
        return True

    def unwrap(self) -> T:
        """Raises ValueError since Err has no success value.

        Don't call this without checking is_ok() first!
        """
        raise ValueError(f"Called unwrap on Err: {self.error}")

    def unwrap_or(self, default: T) -> T:
        return default

    @property
    def value(self) -> None:
        """Err has no value, returns None."""
        return None

    def map(self, f: Callable[[T], U]) -> "Err[E]":
        return self

    def map_err(self, f: Callable[[E], F]) -> "Err[F]":
        """Transform the error.

        Example:
            Err("Invalid move selected").map_err(lambda e: f"Turn rejected: {e}")
        """
        return Err(f(self.error))

    def and_then(self, f: Callable[[T], "Result[U, E]"]) -> "Err[E]":
        return self

    def __repr__(self) -> str:
        return f"Err({self.error!r})"


Result = Union[Ok[T], Err[E]]


def collect_results(results: List[Result[T, E]]) -> Result[List[T], E]:
    """Collect a list of Results into a Result of list.

    Returns the first Err encountered, or Ok with every value in order.
    """
    values: List[T] = []
    for result in results:
        if isinstance(result, Err):
            return result
        values.append(result.value)
    return Ok(values)


def ok() -> Ok[None]:
    """Create an Ok(None) for operations that succeed with no return value."""
    return Ok(None)


def err(message: str) -> Err[str]:
    """Create an Err with a string message."""
    return Err(message)
