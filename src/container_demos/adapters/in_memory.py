"""
In-memory database adapter — the imaginary SQL table behind the Reader demo.

Implements the Database port with a plain dict of balances and a counter of
transaction ids. Transactions are recorded, not enforced: there is no
isolation and a rollback does not restore earlier balances.

Every transaction event is appended to `journal` as (event, transaction_id),
so callers (and tests) can inspect exactly how work was bracketed.
"""

from __future__ import annotations

from itertools import count

import structlog

log = structlog.get_logger()


class InMemoryDatabase:
    """
    Dict-backed balance storage with recorded transaction boundaries.

    Implements the Database port.
    """

    def __init__(self, balances: dict[int, float] | None = None) -> None:
        self._balances: dict[int, float] = dict(balances or {})
        self._transaction_ids = count(1)
        self.journal: list[tuple[str, int]] = []

    # ──────────────────────── BalanceStore ────────────────────────

    def get_balance(self, account_id: int) -> float:
        return self._balances.get(account_id, 0.0)

    def set_balance(self, account_id: int, balance: float) -> float:
        previous = self.get_balance(account_id)
        self._balances[account_id] = balance
        log.debug(
            "database.balance_set",
            account_id=account_id,
            previous=previous,
            balance=balance,
        )
        return previous

    # ──────────────────────── Transactions ────────────────────────

    def begin_transaction(self) -> int:
        transaction_id = next(self._transaction_ids)
        self.journal.append(("begin", transaction_id))
        log.info("database.transaction_begun", transaction_id=transaction_id)
        return transaction_id

    def commit_transaction(self, transaction_id: int) -> None:
        self.journal.append(("commit", transaction_id))
        log.info("database.transaction_committed", transaction_id=transaction_id)

    def rollback_transaction(self, transaction_id: int) -> None:
        self.journal.append(("rollback", transaction_id))
        log.warning("database.transaction_rolled_back", transaction_id=transaction_id)
