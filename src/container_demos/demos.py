"""
Demo programs — one per container.

Each demo returns the lines it would print, in the form
`<description> = <printed container>`, so the CLI stays a thin shell and
the output can be asserted directly. The Reader demo is the exception: its
output is a side effect of running the pipeline, emitted through `emit`.
"""

from __future__ import annotations

from typing import Callable, Sequence

import structlog
from fpcontainers import Box, Reader, TransactionalReader, Validation
from fpcontainers import option as option_module
from fpcontainers import validation as validation_module

from container_demos import balances
from container_demos.config import ReaderDemoSettings
from container_demos.domain.ports import Database

log = structlog.get_logger()

# Inputs shown when the Option / Validation demos run without arguments.
EXAMPLE_PAIRS: tuple[tuple[str, str], ...] = (
    ("6", "7"),
    ("six", "7"),
    ("6", "seven"),
    ("six", "seven"),
)


# ──────────────────────── Box ────────────────────────


def box_demo() -> list[str]:
    return [
        f"Box(6).map(lambda x: x * 7) = {Box(6).map(lambda x: x * 7)!r}",
        f"Box(6).flat_map(lambda x: Box(x * 7)) = {Box(6).flat_map(lambda x: Box(x * 7))!r}",
        f"Box(6).get_or_else(0) = {Box(6).get_or_else(0)!r}",
    ]


# ──────────────────────── Option ────────────────────────


def option_demo(args: Sequence[str] = ()) -> list[str]:
    """
    Parse-and-multiply with Option.

    With two arguments, multiplies those; with none, walks EXAMPLE_PAIRS.
    """
    pairs = [tuple(args)] if args else list(EXAMPLE_PAIRS)
    lines = []
    for value1, value2 in pairs:
        product = option_module.parse_and_multiply(value1, value2)
        lines.append(f'parse_and_multiply("{value1}", "{value2}") = {product!r}')
    return lines


# ──────────────────────── Validation ────────────────────────


def validation_demo(args: Sequence[str] = ()) -> list[str]:
    """
    Parse-and-multiply with Validation.

    With two arguments, multiplies those. With none, shows parse_int, map
    and every success/failure combination of ap.
    """
    if args:
        value1, value2 = args
        product = validation_module.parse_and_multiply(value1, value2)
        return [f'parse_and_multiply("{value1}", "{value2}") = {product!r}']

    lines = [
        f'parse_int("6") = {Validation.parse_int("6")!r}',
        f'parse_int("6").map(lambda x: x * 7) = {Validation.parse_int("6").map(lambda x: x * 7)!r}',
        f'parse_int("six") = {Validation.parse_int("six")!r}',
        f'parse_int("six").map(lambda x: x * 7) = {Validation.parse_int("six").map(lambda x: x * 7)!r}',
    ]
    for value1, value2 in EXAMPLE_PAIRS:
        product = validation_module.parse_and_multiply(value1, value2)
        lines.append(
            f'parse_int("{value1}").ap(parse_int("{value2}").map(lambda x: lambda y: x * y)) '
            f"= {product!r}"
        )
    return lines


# ──────────────────────── Reader ────────────────────────


def format_usd(amount: float) -> str:
    """Format an amount as US dollars: 1234.5 → $1,234.50."""
    return f"${amount:,.2f}"


def make_balance_logger(emit: Callable[[str], None]) -> Callable[[float], float]:
    """Build a pass-through step that reports a balance and returns it unchanged."""

    def log_balance(balance: float) -> float:
        emit(f"Balance: {format_usd(balance)}")
        return balance

    return log_balance


def build_balance_pipeline(
    settings: ReaderDemoSettings,
    log_balance: Callable[[float], float],
) -> Reader[Database, float] | TransactionalReader[Database, float]:
    """
    Assemble the balance pipeline. Nothing touches a database here.

    read → log → set(initial) → read → log → set(balance × multiplier) → read → log

    In transactional mode every database step is a TransactionalReader: the
    whole pipeline runs in one transaction and each step opens its own.
    """
    account_id = settings.account_id

    def get(account: int) -> Reader[Database, float] | TransactionalReader[Database, float]:
        reader = balances.get_balance(account)
        return reader.transactional() if settings.transactional else reader

    def put(
        account: int, balance: float
    ) -> Reader[Database, float] | TransactionalReader[Database, float]:
        reader = balances.set_balance(account, balance)
        return reader.transactional() if settings.transactional else reader

    return (
        get(account_id)
        .map(log_balance)
        .and_then(put(account_id, settings.initial_balance))
        .and_then(get(account_id))
        .map(log_balance)
        .flat_map(lambda balance: put(account_id, balance * settings.multiplier))
        .and_then(get(account_id))
        .map(log_balance)
    )


def reader_demo(
    settings: ReaderDemoSettings,
    database: Database,
    emit: Callable[[str], None] = print,
) -> float:
    """Run the balance pipeline once against `database`; return the final balance."""
    pipeline = build_balance_pipeline(settings, make_balance_logger(emit))
    log.debug("reader_demo.pipeline_built", pipeline=repr(pipeline))
    final_balance = pipeline.run(database)
    log.info(
        "reader_demo.completed",
        account_id=settings.account_id,
        final_balance=final_balance,
        transactional=settings.transactional,
    )
    return final_balance
