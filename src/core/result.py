"""Result types for railway-oriented programming.

Operations that can fail return ``Success`` or ``Failure`` instead of
raising, so every failure mode is visible in the signature and testable.

Usage:
    async def fetch_person(request: FetchRequest) -> Result[Person, SwapiError]:
        ...

    match await client.fetch_person(request):
        case Success(value=person):
            print(person.name)
        case Failure(error=error):
            print(f"Error: {error}")
"""

from dataclasses import dataclass
from typing import Generic, TypeVar

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
type Result[T, E] = Success[T] | Failure[E]
