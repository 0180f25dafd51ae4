"""
Application entry point — parses the command line and runs one demo.

Composition root: loads settings, configures logging, creates the
in-memory database and hands everything to the selected demo.

    container-demos box
    container-demos option [VALUE1 VALUE2]
    container-demos validation [VALUE1 VALUE2]
    container-demos reader [--transactional]

Demo output goes to stdout, one line per demonstrated operation.
Structured logs go to stderr.
"""

from __future__ import annotations

import argparse
import logging
import sys
from typing import Sequence

import structlog

from container_demos import __version__
from container_demos.adapters.in_memory import InMemoryDatabase
from container_demos.config import AppSettings
from container_demos.demos import box_demo, option_demo, reader_demo, validation_demo

TWO_ARGUMENTS_REQUIRED = "error: two arguments required"


def configure_structlog(log_level: str = "WARNING") -> None:
    """
    Configure structlog for human-readable console logging on stderr.

    stdout is reserved for demo output.
    """
    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.processors.add_log_level,
            structlog.processors.StackInfoRenderer(),
            structlog.dev.set_exc_info,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.dev.ConsoleRenderer(colors=False),
        ],
        wrapper_class=structlog.make_filtering_bound_logger(
            getattr(logging, log_level.upper(), logging.WARNING)
        ),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(file=sys.stderr),
        cache_logger_on_first_use=False,
    )
    logging.basicConfig(
        level=getattr(logging, log_level.upper(), logging.WARNING),
        stream=sys.stderr,
        format="%(levelname)s %(name)s: %(message)s",
    )


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="container-demos",
        description="Demonstrations of Box, Option, Validation and Reader containers.",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    subparsers = parser.add_subparsers(dest="demo", required=True)

    subparsers.add_parser("box", help="map and flat_map over a single value")

    for name, summary in (
        ("option", "parse and multiply, absent on any failure"),
        ("validation", "parse and multiply, accumulating every error"),
    ):
        sub = subparsers.add_parser(name, help=summary)
        sub.add_argument("values", nargs="*", metavar="VALUE", help="zero or two numbers")

    reader = subparsers.add_parser("reader", help="compose balance reads and writes")
    reader.add_argument(
        "--transactional",
        action="store_true",
        default=None,
        help="bracket every run in begin/commit/rollback (overrides READER__TRANSACTIONAL)",
    )
    return parser


def _emit(lines: Sequence[str]) -> None:
    for line in lines:
        print(line)  # noqa: T201


def main(argv: Sequence[str] | None = None) -> None:
    """Parse arguments, wire dependencies and run the selected demo."""
    args = build_parser().parse_args(argv)

    try:
        settings = AppSettings()
    except Exception as e:
        print(f"FATAL: Configuration error — {e}", file=sys.stderr)  # noqa: T201
        sys.exit(1)

    configure_structlog(settings.log_level)
    log = structlog.get_logger()
    log.info("app.starting", version=__version__, demo=args.demo, log_level=settings.log_level)

    match args.demo:
        case "box":
            _emit(box_demo())
        case "option" | "validation":
            if len(args.values) not in (0, 2):
                print(TWO_ARGUMENTS_REQUIRED)  # noqa: T201
                log.warning("app.bad_arguments", demo=args.demo, count=len(args.values))
                sys.exit(1)
            demo = option_demo if args.demo == "option" else validation_demo
            _emit(demo(args.values))
        case "reader":
            reader_settings = settings.reader
            if args.transactional is not None:
                reader_settings = reader_settings.model_copy(update={"transactional": True})
            database = InMemoryDatabase()
            reader_demo(reader_settings, database)
            log.info("app.transactions", journal=database.journal)


if __name__ == "__main__":
    main()
