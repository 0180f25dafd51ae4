"""
Option — a value that may be absent.

An Option[T] is either Some(value: T) or Nothing(). Transformations on
Nothing are no-ops: the mapper is never invoked and Nothing flows through.

    Option.parse_int("6").map(lambda x: x * 7)          # → Some(42)
    Option.parse_int("six").map(lambda x: x * 7)        # → Nothing
    Option.parse_int("six").get_or_else(0)              # → 0

Option retains no information about WHY a value is absent. When two
independent inputs fail, the caller cannot tell which one did. See
Validation for the error-accumulating alternative.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Callable, Generic, Optional, TypeVar

T = TypeVar("T")
U = TypeVar("U")

# Signed 32-bit integer range accepted by parse_int.
INT_MIN = -(2**31)
INT_MAX = 2**31 - 1

# Optional sign followed by ASCII digits only. int() alone is more lenient
# (surrounding whitespace, underscores, non-ASCII digits).
_DECIMAL_INTEGER = re.compile(r"[+-]?[0-9]+")


class Option(Generic[T]):
    """
    Optional value with two closed variants: Some and Nothing.

    >>> Option.some(6).flat_map(lambda x: Option.some(x * 7))
    Some(42)
    >>> Option.nothing().map(lambda x: x * 7)
    Nothing
    """

    # ──────────────────────── Introspection ────────────────────────

    def is_present(self) -> bool:
        return isinstance(self, Some)

    def is_absent(self) -> bool:
        return isinstance(self, Nothing)

    # ──────────────────────── Core Transformations ────────────────────────

    def map(self, mapper: Callable[[T], U]) -> Option[U]:
        """
        Transform the present value. Nothing passes through untouched.

            Option.some(5).map(lambda x: x * 2)   # → Some(10)
            Option.nothing().map(lambda x: x * 2)  # → Nothing

        `mapper` may return None: the result is Some(None). To treat None as
        absence, use `flat_map(lambda v: Option.of(lookup(v)))`.
        """
        match self:
            case Some(v):
                return Some(mapper(v))
            case Nothing():
                return Nothing()
        raise TypeError("unreachable")  # pragma: no cover

    def flat_map(self, mapper: Callable[[T], Option[U]]) -> Option[U]:
        """
        Chain an Option-returning function. Nothing short-circuits.

        The Option returned by `mapper` is returned as-is, never re-wrapped.
        """
        match self:
            case Some(v):
                return mapper(v)
            case Nothing():
                return Nothing()
        raise TypeError("unreachable")  # pragma: no cover

    def filter(self, predicate: Callable[[T], bool]) -> Option[T]:
        """Keep the value only if it satisfies the predicate."""
        return self.flat_map(lambda v: self if predicate(v) else Nothing())

    # ──────────────────────── Extraction ────────────────────────

    def get_or_else(self, default: T) -> T:
        """Extract the value, or return `default` when absent."""
        match self:
            case Some(v):
                return v
            case _:
                return default

    def or_else(self, alternative: Option[T]) -> Option[T]:
        """Return self if present, otherwise the alternative Option."""
        return self if self.is_present() else alternative

    # ──────────────────────── Static Factories ────────────────────────

    @staticmethod
    def some(value: T) -> Option[T]:
        return Some(value)

    @staticmethod
    def nothing() -> Option[T]:
        return Nothing()

    @staticmethod
    def of(value: Optional[T]) -> Option[T]:
        """
        Lift a nullable Python value into an Option.

            Option.of(user)   # Some(user) or Nothing if user is None
        """
        if value is None:
            return Nothing()
        return Some(value)

    @staticmethod
    def parse_int(text: str) -> Option[int]:
        """
        Parse a signed decimal integer.

        Returns Nothing for malformed text or values outside the signed
        32-bit range. The reason for the failure is not retained.

            Option.parse_int("6")     # → Some(6)
            Option.parse_int("six")   # → Nothing
        """
        if not isinstance(text, str) or _DECIMAL_INTEGER.fullmatch(text) is None:
            return Nothing()
        value = int(text)
        if not INT_MIN <= value <= INT_MAX:
            return Nothing()
        return Some(value)


@dataclass(frozen=True, slots=True)
class Some(Option[T]):
    """The present variant — wraps a value of type T."""

    _value: T

    def __init__(self, value: T) -> None:
        object.__setattr__(self, "_value", value)

    def __repr__(self) -> str:
        return f"Some({self._value!r})"


# Enable structural pattern matching: case Some(value)
Some.__match_args__ = ("_value",)


@dataclass(frozen=True, slots=True)
class Nothing(Option[T]):
    """The absent variant — carries no value."""

    def __repr__(self) -> str:
        return "Nothing"


def parse_and_multiply(value1: str, value2: str) -> Option[int]:
    """
    Parse two strings and multiply them.

    Nothing if either input fails to parse; no indication of which one.
    """
    return Option.parse_int(value1).flat_map(
        lambda x: Option.parse_int(value2).map(lambda y: x * y)
    )
