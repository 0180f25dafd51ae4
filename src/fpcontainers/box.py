"""
Box — the smallest possible container: exactly one value, no failure track.

A Box[T] always holds a value, so every transformation is total:

    Box(6).map(lambda x: x * 7)                  # → Box(42)
    Box(6).flat_map(lambda x: Box(x * 7))        # → Box(42)

`map` is defined in terms of `flat_map` (re-wrapping the mapped value),
which makes the two functor/monad laws hold by construction:

    box.map(lambda x: x) == box
    box.flat_map(lambda x: Box(f(x))) == box.map(f)
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Generic, TypeVar

T = TypeVar("T")
U = TypeVar("U")


@dataclass(frozen=True, slots=True)
class Box(Generic[T]):
    """A container that always holds exactly one value."""

    _value: T

    def __init__(self, value: T) -> None:
        object.__setattr__(self, "_value", value)

    def map(self, mapper: Callable[[T], U]) -> Box[U]:
        """Transform the held value. Cannot fail."""
        return self.flat_map(lambda v: Box(mapper(v)))

    def flat_map(self, mapper: Callable[[T], Box[U]]) -> Box[U]:
        """Apply a Box-returning function and return its Box directly (no nesting)."""
        return mapper(self._value)

    def get_or_else(self, default: T) -> T:  # noqa: ARG002
        """
        Return the held value.

        `default` is never used: a Box cannot be empty. The parameter is kept
        so Box exposes the same extraction surface as Option.
        """
        return self._value

    def __repr__(self) -> str:
        return f"Box({self._value!r})"


# Enable structural pattern matching: case Box(value)
Box.__match_args__ = ("_value",)
