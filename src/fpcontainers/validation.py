"""
Validation — a value, or every reason it could not be produced.

A Validation[T] is either Success(value: T) or Failure(errors), where errors
is a non-empty, ordered tuple of human-readable messages.

The difference from Option (and from a short-circuiting Result) is `ap`:
combining two independent failures keeps BOTH error lists instead of
stopping at the first one.

    Validation.parse_int("six").ap(
        Validation.parse_int("seven").map(lambda x: lambda y: x * y)
    )
    # → Failure(['could not parse "six" as an integer',
    #            'could not parse "seven" as an integer'])

    ┌──────────────┐                ┌───────────────────────┐
    │ parse_int(a) │──────┐   ┌─────│ parse_int(b).map(...) │
    └──────────────┘      ▼   ▼     └───────────────────────┘
                        ┌───────┐
                        │  ap   │──→ Success(a*b) | Failure(errors_a ++ errors_b)
                        └───────┘
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Generic, Iterable, List, Sequence, TypeVar

from fpcontainers.option import Nothing, Option, Some

T = TypeVar("T")
U = TypeVar("U")
A = TypeVar("A")
B = TypeVar("B")
R = TypeVar("R")


class Validation(Generic[T]):
    """
    Error-accumulating container.

    Two possible states:
      - Success(value: T)
      - Failure(errors: tuple[str, ...]) — never empty

    >>> Validation.parse_int("6").map(lambda x: x * 7)
    Success(42)
    >>> Validation.parse_int("six")
    Failure(['could not parse "six" as an integer'])
    """

    # ──────────────────────── Introspection ────────────────────────

    def is_success(self) -> bool:
        return isinstance(self, Success)

    def is_failure(self) -> bool:
        return isinstance(self, Failure)

    def get_value(self) -> Option[T]:
        """The success value as an Option. Always Nothing on a Failure."""
        match self:
            case Success(v):
                return Some(v)
            case Failure(_):
                return Nothing()
        raise TypeError("unreachable")  # pragma: no cover

    def get_errors(self) -> Option[List[str]]:
        """The error messages as an Option. Always Nothing on a Success."""
        match self:
            case Failure(errors):
                return Some(list(errors))
            case Success(_):
                return Nothing()
        raise TypeError("unreachable")  # pragma: no cover

    # ──────────────────────── Core Transformations ────────────────────────

    def map(self, mapper: Callable[[T], U]) -> Validation[U]:
        """
        Transform the success value. A Failure is returned unchanged and
        `mapper` is not invoked.
        """
        match self:
            case Success(v):
                return Success(mapper(v))
            case Failure(errors):
                return Failure(errors)
        raise TypeError("unreachable")  # pragma: no cover

    def ap(self, wrapped: Validation[Callable[[T], U]]) -> Validation[U]:
        """
        Apply a validated function to this validated value.

          Success(v).ap(Success(g))    → Success(g(v))
          Success(v).ap(Failure(e))    → Failure(e)
          Failure(e).ap(Success(g))    → Failure(e)
          Failure(e1).ap(Failure(e2))  → Failure(e1 + e2)

        On a double failure this Validation's errors come first, then the
        errors of `wrapped`.
        """
        match (self, wrapped):
            case (Success(v), Success(fn)):
                return Success(fn(v))
            case (Success(_), Failure(errors)):
                return Failure(errors)
            case (Failure(errors), Success(_)):
                return Failure(errors)
            case (Failure(left), Failure(right)):
                return Failure(left + right)
        raise TypeError("unreachable")  # pragma: no cover

    def get_or_else(self, default: T) -> T:
        """Extract the value or return a default on failure."""
        return self.get_value().get_or_else(default)

    # ──────────────────────── Static Factories ────────────────────────

    @staticmethod
    def success(value: T) -> Validation[T]:
        return Success(value)

    @staticmethod
    def failure(errors: str | Sequence[str]) -> Validation[T]:
        return Failure(errors)

    @staticmethod
    def parse_int(text: str) -> Validation[int]:
        """
        Parse a signed decimal integer, reporting why it failed.

            Validation.parse_int("6")    # → Success(6)
            Validation.parse_int("six")  # → Failure(['could not parse "six" as an integer'])
        """
        return (
            Option.parse_int(text)
            .map(Success)
            .get_or_else(Failure(f'could not parse "{text}" as an integer'))
        )

    @staticmethod
    def map2(
        va: Validation[A],
        vb: Validation[B],
        combiner: Callable[[A, B], R],
    ) -> Validation[R]:
        """
        Combine two independent Validations. Errors from both are kept,
        those of `va` first.

            Validation.map2(parse_int("6"), parse_int("7"), operator.mul)  # → Success(42)
        """
        return va.ap(vb.map(lambda b: lambda a: combiner(a, b)))

    @staticmethod
    def all_of(validations: Iterable[Validation[T]]) -> Validation[List[T]]:
        """
        Collect Validations into a Validation of list.

        Unlike a short-circuiting collect, every failure is visited and all
        error messages are concatenated in input order.
        """
        values: list[T] = []
        errors: list[str] = []
        for v in validations:
            match v:
                case Success(value):
                    values.append(value)
                case Failure(errs):
                    errors.extend(errs)
                case _:
                    raise TypeError(f"Expected a Validation, got {type(v).__name__}")
        if errors:
            return Failure(errors)
        return Success(values)


@dataclass(frozen=True, slots=True)
class Success(Validation[T]):
    """The valid variant — wraps a value of type T."""

    _value: T

    def __init__(self, value: T) -> None:
        object.__setattr__(self, "_value", value)

    def __repr__(self) -> str:
        return f"Success({self._value!r})"


# Enable structural pattern matching: case Success(value)
Success.__match_args__ = ("_value",)


@dataclass(frozen=True, slots=True)
class Failure(Validation[T]):
    """The invalid variant — wraps one or more error messages, in order."""

    _errors: tuple[str, ...]

    def __init__(self, errors: str | Sequence[str]) -> None:
        if isinstance(errors, str):
            errors = (errors,)
        errors = tuple(errors)
        if not errors:
            raise ValueError("Failure requires at least one error message")
        object.__setattr__(self, "_errors", errors)

    def __repr__(self) -> str:
        return f"Failure({list(self._errors)!r})"


# Enable structural pattern matching: case Failure(errors)
Failure.__match_args__ = ("_errors",)


def parse_and_multiply(value1: str, value2: str) -> Validation[int]:
    """
    Parse two strings and multiply them, reporting every input that failed.
    """
    return Validation.parse_int(value1).ap(
        Validation.parse_int(value2).map(lambda x: lambda y: x * y)
    )
