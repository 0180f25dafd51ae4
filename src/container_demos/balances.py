"""
Balance Readers — database operations as deferred computations.

Each factory returns a Reader that performs ONE call against the Database
when run. Pipelines are assembled from these without ever holding a
database handle:

    get_balance(1).and_then(set_balance(1, 6.0)).and_then(get_balance(1))
"""

from __future__ import annotations

from fpcontainers import Reader

from container_demos.domain.ports import BalanceStore


def get_balance(account_id: int) -> Reader[BalanceStore, float]:
    """Read the balance of an account (0.0 if unknown)."""
    return Reader(lambda db: db.get_balance(account_id))


def set_balance(account_id: int, balance: float) -> Reader[BalanceStore, float]:
    """Write the balance of an account, yielding the balance it replaced."""
    return Reader(lambda db: db.set_balance(account_id, balance))
