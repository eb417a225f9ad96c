"""Result types for railway-oriented programming.

Every item an EventSource produces is a Result: classified connection and
protocol failures travel as data instead of being raised, so a caller sees
one flat sequence of successes and failures.

Usage:
    async for item in source:
        match item:
            case Success(value=MessageEvent() as event):
                print(f"{event.event}: {event.data}")
            case Success(value=OpenEvent()):
                print("connected")
            case Failure(error=error):
                print(f"Error: {error}")
"""

from dataclasses import dataclass
from typing import Generic, TypeAlias, TypeVar

T = TypeVar("T")  # Success type
E = TypeVar("E")  # Error type


@dataclass(frozen=True, slots=True, kw_only=True)
class Success(Generic[T]):
    """Represents a successful operation result.

    Attributes:
        value: The successful result value.
    """

    value: T


@dataclass(frozen=True, slots=True, kw_only=True)
class Failure(Generic[E]):
    """Represents a failed operation result.

    Attributes:
        error: The error that occurred.
    """

    error: E


# Type alias for Result union
Result: TypeAlias = Success[T] | Failure[E]
