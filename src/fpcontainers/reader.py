"""
Reader — a computation that needs an environment to run.

A Reader[E, A] wraps a function E → A. Nothing happens when a Reader is
built or composed; the wrapped function only runs when `run(env)` is called.
This lets a pipeline that needs a database handle be assembled before any
database exists, without threading the handle through every call site:

    pipeline = (
        get_balance(account_id)
        .map(log_balance)
        .and_then(set_balance(account_id, 6.0))
        .and_then(get_balance(account_id))
    )
    pipeline.run(database)   # ← the only point where any effect occurs

Every step of one `run` sees the same environment, so writes made by an
earlier step are visible to later ones.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Callable, Generic, Protocol, TypeVar, runtime_checkable

if TYPE_CHECKING:
    from fpcontainers.transactional import TransactionalEnvironment, TransactionalReader

E = TypeVar("E")
A = TypeVar("A")
B = TypeVar("B")
E_contra = TypeVar("E_contra", contravariant=True)
A_co = TypeVar("A_co", covariant=True)


@runtime_checkable
class Runnable(Protocol[E_contra, A_co]):
    """
    Anything that can be run against an environment.

    Both Reader and TransactionalReader satisfy this protocol structurally,
    so either can be used as the continuation of `flat_map` / `and_then`.
    """

    def run(self, env: E_contra) -> A_co: ...


@dataclass(frozen=True, slots=True)
class Reader(Generic[E, A]):
    """
    A deferred function from an environment E to a result A.

    >>> Reader(lambda env: env["rate"]).map(lambda r: r * 2).run({"rate": 21})
    42
    """

    _fn: Callable[[E], A]

    def run(self, env: E) -> A:
        """Invoke the wrapped function with `env`."""
        return self._fn(env)

    def map(self, mapper: Callable[[A], B]) -> Reader[E, B]:
        """
        Apply `mapper` to the result, once this Reader has run.

        Nothing is evaluated here; `mapper` runs as part of `run`.
        """
        fn = self._fn
        return Reader(lambda env: mapper(fn(env)))

    def flat_map(self, mapper: Callable[[A], Runnable[E, B]]) -> Reader[E, B]:
        """
        Chain a dependent step.

        On `run`: run self to get a, call mapper(a) to get the next computation,
        run it against the SAME environment and return its result.
        """
        fn = self._fn
        return Reader(lambda env: mapper(fn(env)).run(env))

    def and_then(self, following: Runnable[E, B]) -> Reader[E, B]:
        """Run `following` after self, discarding self's result."""
        return self.flat_map(lambda _: following)

    def transactional(
        self: Reader[TransactionalEnvironment, A],
    ) -> TransactionalReader[TransactionalEnvironment, A]:
        """Wrap this Reader so every `run` is bracketed by a transaction."""
        from fpcontainers.transactional import TransactionalReader

        return TransactionalReader(self)

    # ──────────────────────── Static Factories ────────────────────────

    @staticmethod
    def pure(value: A) -> Reader[E, A]:
        """A Reader that ignores its environment and returns `value`."""
        return Reader(lambda _env: value)

    @staticmethod
    def ask() -> Reader[E, E]:
        """A Reader that returns the environment itself."""
        return Reader(lambda env: env)

    def __repr__(self) -> str:
        name = getattr(self._fn, "__qualname__", type(self._fn).__name__)
        return f"Reader({name})"
