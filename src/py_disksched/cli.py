"""Command-line entry point — ``py-disksched START DIRECTION``.

The CLI is the thin I/O wrapper around the engine: it validates the
arguments, loads (or generates) the request file, runs all six
policies and prints the report.  Anything that can go wrong is caught
here and turned into an ``ERROR:`` line on stderr and exit status 1;
the engine only ever sees valid input.

The helpers ``parse_start`` and ``parse_direction`` are pure and
testable.  ``main()`` is the I/O entrypoint.
"""

import argparse
import re
import sys
from collections.abc import Sequence
from pathlib import Path

from py_disksched.config import DiskConfig
from py_disksched.disk import Direction, DiskError, DiskScheduler
from py_disksched.logging import Logger, LogLevel
from py_disksched.report import format_report, format_summary
from py_disksched.requests import (
    MAX_CYLINDERS,
    RequestSourceError,
    dump_requests,
    generate_requests,
    load_requests,
)


_INTEGER = re.compile(r"-?[0-9]+")


class ArgumentError(Exception):
    """Raise when a command-line value is malformed or out of range."""


def parse_start(text: str, *, cylinders: int) -> int:
    """Parse the initial head position.

    Raises:
        ArgumentError: If *text* is not an integer in ``[0, cylinders - 1]``.

    """
    msg = f"Initial head must be between 0 and {cylinders - 1}."
    if _INTEGER.fullmatch(text) is None:
        raise ArgumentError(msg)
    head = int(text)
    if not 0 <= head < cylinders:
        raise ArgumentError(msg)
    return head


def parse_direction(text: str) -> Direction:
    """Parse a direction token (``LEFT`` or ``RIGHT``, case-sensitive).

    Raises:
        ArgumentError: For any other token.

    """
    try:
        return Direction(text)
    except ValueError:
        msg = "Direction must be LEFT or RIGHT."
        raise ArgumentError(msg) from None


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser."""
    parser = argparse.ArgumentParser(
        prog="py-disksched",
        description="Compare FCFS, SSTF, SCAN, C-SCAN, LOOK and C-LOOK disk scheduling.",
    )
    parser.add_argument("start", help="initial head position")
    parser.add_argument("direction", help="initial sweep direction: LEFT or RIGHT")
    parser.add_argument("--file", type=Path, default=None, help="binary request file")
    parser.add_argument("--cylinders", type=int, default=None, help="cylinders on the disk")
    parser.add_argument("--count", type=int, default=None, help="requests per run")
    parser.add_argument(
        "--generate",
        action="store_true",
        help="write a random request file before running",
    )
    parser.add_argument("--seed", type=int, default=None, help="seed for --generate")
    parser.add_argument("--summary", action="store_true", help="append a comparison table")
    parser.add_argument(
        "-v",
        "--verbose",
        action="count",
        default=0,
        help="print the run log to stderr (-vv includes debug entries)",
    )
    return parser


def _config_from(args: argparse.Namespace) -> DiskConfig:
    config = DiskConfig().with_overrides(
        cylinders=args.cylinders,
        request_count=args.count,
        request_file=args.file,
    )
    if not 1 <= config.cylinders <= MAX_CYLINDERS:
        msg = f"Cylinder count must be between 1 and {MAX_CYLINDERS}."
        raise ArgumentError(msg)
    if config.request_count < 0:
        msg = "Request count cannot be negative."
        raise ArgumentError(msg)
    return config


def _dump_log(logger: Logger, verbosity: int) -> None:
    min_level = LogLevel.for_verbosity(verbosity)
    if min_level is None:
        return
    text = logger.render(min_level=min_level)
    if text:
        print(text, file=sys.stderr)  # noqa: T201


def main(argv: Sequence[str] | None = None) -> int:
    """Run the scheduler from the command line.

    This is the ``py-disksched`` console entry point.

    Returns:
        Process exit status: 0 on success, 1 on any input error.

    """
    args = build_parser().parse_args(argv)
    logger = Logger()

    try:
        config = _config_from(args)
        head = parse_start(args.start, cylinders=config.cylinders)
        direction = parse_direction(args.direction)
        if args.generate:
            generated = generate_requests(
                config.request_count,
                max_cylinder=config.max_cylinder,
                seed=args.seed,
                logger=logger,
            )
            dump_requests(config.request_file, generated)
        requests = load_requests(
            config.request_file,
            count=config.request_count,
            max_cylinder=config.max_cylinder,
            logger=logger,
        )
        scheduler = DiskScheduler(requests, max_cylinder=config.max_cylinder, logger=logger)
        runs = scheduler.run_all(head=head, direction=direction)
    except (ArgumentError, RequestSourceError, DiskError) as exc:
        print(f"ERROR: {exc}", file=sys.stderr)  # noqa: T201
        _dump_log(logger, args.verbose)
        return 1

    print(format_report(runs, head=head, direction=direction, count=len(requests)))  # noqa: T201
    if args.summary:
        print(format_summary(runs))  # noqa: T201
    _dump_log(logger, args.verbose)
    return 0


if __name__ == "__main__":
    sys.exit(main())
