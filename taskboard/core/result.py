"""Result types for railway-oriented programming.

Operations that can fail without it being a programming defect return a
Result instead of raising. This keeps authorization denials, configuration
mistakes and successes explicit at the call site.

Usage:
    result = authorization.evaluate(role=..., user_id=..., resource=..., action=...)
    match result:
        case Success(value=allowed):
            ...
        case Failure(error=error):
            ...
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
