"""
Ports — Protocol-based interfaces for the environments Readers run against.

These define WHAT a Reader pipeline needs from its environment without
specifying HOW it is stored. Adapters satisfy a port simply by implementing
the methods, without inheritance.

  BalanceStore  → key/value balances (the imaginary SQL table)
  Database      → BalanceStore + begin/commit/rollback
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from fpcontainers import TransactionalEnvironment


@runtime_checkable
class BalanceStore(Protocol):
    """
    Port: read and write account balances.

    Unknown accounts read as 0.0. Writing returns the balance it replaced.
    """

    def get_balance(self, account_id: int) -> float: ...

    def set_balance(self, account_id: int, balance: float) -> float: ...


@runtime_checkable
class Database(BalanceStore, TransactionalEnvironment, Protocol):
    """Port: a balance store that can also bracket work in transactions."""
