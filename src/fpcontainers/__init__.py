"""
Composable computation containers for Python.

Small, immutable, generic containers with map / flat_map / ap:

    from fpcontainers import Box, Option, Validation, Reader

    Box(6).map(lambda x: x * 7)                          # Box(42)
    Option.parse_int("six").get_or_else(0)               # 0
    Validation.parse_int("six").ap(
        Validation.parse_int("seven").map(lambda x: lambda y: x * y)
    )                                                     # Failure([...two errors...])

    pipeline = Reader(lambda db: db.get_balance(1)).map(format_usd)
    pipeline.transactional().run(db)                      # begin … commit / rollback
"""

from fpcontainers.box import Box
from fpcontainers.option import Nothing, Option, Some
from fpcontainers.validation import Failure, Success, Validation
from fpcontainers.reader import Reader, Runnable
from fpcontainers.transactional import (
    TransactionalEnvironment,
    TransactionalReader,
    transaction,
)
from fpcontainers.assertions import OptionAssertions, ValidationAssertions

__all__ = [
    "Box",
    "Option",
    "Some",
    "Nothing",
    "Validation",
    "Success",
    "Failure",
    "Reader",
    "Runnable",
    "TransactionalEnvironment",
    "TransactionalReader",
    "transaction",
    "OptionAssertions",
    "ValidationAssertions",
]

__version__ = "0.1.0"
