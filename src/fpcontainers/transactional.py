"""
Transactional Reader — a Reader whose every run is a transaction.

The bracket:

    tx_id = env.begin_transaction()
    ├── computation returns  → env.commit_transaction(tx_id)   → result
    └── computation raises   → env.rollback_transaction(tx_id) → re-raise

A TransactionalReader is built by composition, not inheritance: it holds a
plain Reader and adds the bracket around `run`. Each combinator rebuilds a
TransactionalReader around the newly composed Reader, so the bracket
survives any number of `map` / `flat_map` / `and_then` calls. A continuation
that is itself transactional opens its own, independent bracket when run;
transactions are never shared or nested logically.
"""

from __future__ import annotations

import logging
from contextlib import contextmanager
from dataclasses import dataclass
from typing import Any, Callable, Generic, Hashable, Iterator, Protocol, TypeVar, runtime_checkable

from fpcontainers.reader import Reader, Runnable

E = TypeVar("E", bound="TransactionalEnvironment")
A = TypeVar("A")
B = TypeVar("B")

logger = logging.getLogger("fpcontainers.transactional")


@runtime_checkable
class TransactionalEnvironment(Protocol):
    """
    An environment able to open and close transactions.

    The transaction id is opaque to the bracket: it is only handed back to
    commit or rollback.
    """

    def begin_transaction(self) -> Hashable: ...

    def commit_transaction(self, transaction_id: Any) -> None: ...

    def rollback_transaction(self, transaction_id: Any) -> None: ...


@contextmanager
def transaction(env: TransactionalEnvironment) -> Iterator[Hashable]:
    """
    Bracket a block of work in exactly one begin and one commit or rollback.

        with transaction(db) as tx_id:
            db.set_balance(1, 42.0)

    The exception that triggered a rollback propagates unchanged.
    """
    transaction_id = env.begin_transaction()
    logger.debug("[%s] Transaction begun", transaction_id)
    try:
        yield transaction_id
    except BaseException as e:
        env.rollback_transaction(transaction_id)
        logger.warning("[%s] Transaction rolled back: %r", transaction_id, e)
        raise
    env.commit_transaction(transaction_id)
    logger.debug("[%s] Transaction committed", transaction_id)


@dataclass(frozen=True, slots=True)
class TransactionalReader(Generic[E, A]):
    """
    A Reader whose `run` is bracketed by begin / commit / rollback.

        tx_reader = Reader(lambda db: db.get_balance(1)).transactional()
        tx_reader.map(format_usd)     # still a TransactionalReader
    """

    _reader: Reader[E, A]

    def run(self, env: E) -> A:
        with transaction(env):
            return self._reader.run(env)

    def map(self, mapper: Callable[[A], B]) -> TransactionalReader[E, B]:
        return TransactionalReader(self._reader.map(mapper))

    def flat_map(self, mapper: Callable[[A], Runnable[E, B]]) -> TransactionalReader[E, B]:
        return TransactionalReader(self._reader.flat_map(mapper))

    def and_then(self, following: Runnable[E, B]) -> TransactionalReader[E, B]:
        return TransactionalReader(self._reader.and_then(following))

    def transactional(self) -> TransactionalReader[E, A]:
        """Already transactional; returned as-is so brackets are never doubled."""
        return self

    def __repr__(self) -> str:
        return f"TransactionalReader({self._reader!r})"
