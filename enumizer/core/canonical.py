"""Canonical shapes that generated aliases convert to and from.

Python has a built-in nullable form (``T | None``) but no built-in
success/failure or two-sided union, so this module defines them in the
railway-oriented style the normalizer also uses for its own results.

Usage:
    def parse(text: str) -> Result[int, str]:
        if not text.isdigit():
            return Failure(error=f"not a number: {text!r}")
        return Success(value=int(text))

    match parse("42"):
        case Success(value=value):
            print(f"Parsed: {value}")
        case Failure(error=error):
            print(f"Error: {error}")
"""

from dataclasses import dataclass
from typing import Generic, TypeVar

T = TypeVar("T")  # Success type
E = TypeVar("E")  # Error type
L = TypeVar("L")  # Left type
R = TypeVar("R")  # Right type


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


@dataclass(frozen=True, slots=True, kw_only=True)
class Left(Generic[L]):
    """Left side of a two-sided union.

    Attributes:
        value: The left value.
    """

    value: L


@dataclass(frozen=True, slots=True, kw_only=True)
class Right(Generic[R]):
    """Right side of a two-sided union.

    Attributes:
        value: The right value.
    """

    value: R


# Type alias for Result union
type Result[T, E] = Success[T] | Failure[E]

# Type alias for Either union
type Either[L, R] = Left[L] | Right[R]
