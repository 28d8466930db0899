"""
Replay a sequence of picker edits against one machine.

Each non-blank input line is ``start,end``; an empty side is the unset sentinel
and lines starting with ``#`` are skipped. Every line is sent as REVALIDATE and
the settled snapshot is printed as one JSON line.

Usage:
    python -m date_range_validation.cli replay edits.csv --first-allowed 2022-01-01
    cat edits.csv | python -m date_range_validation.cli replay --last-allowed today
"""

import argparse
import sys
from typing import Iterable, Iterator, List, Optional, TextIO, Tuple

from date_range_validation.cli.common import (
    EXIT_USAGE,
    add_machine_arguments,
    build_machine,
    exit_code_for,
    parse_date_arg,
    write_snapshot,
)
from date_range_validation.utils.logging import get_logger

logger = get_logger(__name__)


def iter_edits(lines: Iterable[str]) -> Iterator[Tuple[Optional[str], Optional[str]]]:
    """Yield (start_date, end_date) pairs from ``start,end`` lines."""
    for line_number, raw in enumerate(lines, start=1):
        line = raw.rstrip("\r\n")
        if not line.strip() or line.lstrip().startswith("#"):
            continue
        start, sep, end = line.partition(",")
        if not sep:
            logger.warning("replay.line_without_separator", line_number=line_number)
        yield parse_date_arg(start), parse_date_arg(end)


def _replay(args: argparse.Namespace, source: TextIO) -> int:
    machine = build_machine(args, sys.stderr)
    if machine is None:
        return EXIT_USAGE

    snapshot = machine.snapshot
    for start_date, end_date in iter_edits(source):
        snapshot = machine.revalidate(start_date, end_date)
        write_snapshot(snapshot, sys.stdout)

    return exit_code_for(snapshot)


def main(argv: Optional[List[str]] = None) -> int:
    """
    Replay edits from a file or stdin.

    Args:
        argv: Command line arguments (defaults to sys.argv[1:])

    Returns:
        Exit code of the final snapshot (0 when no edits were read)
    """
    parser = argparse.ArgumentParser(
        prog="date_range_validation.cli replay",
        description="Send each input line as REVALIDATE to a single machine",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "path",
        nargs="?",
        default="-",
        help="File with one 'start,end' edit per line ('-' reads stdin)",
    )
    add_machine_arguments(parser)

    args = parser.parse_args(argv)

    if args.path == "-":
        return _replay(args, sys.stdin)

    try:
        with open(args.path, encoding="utf-8") as source:
            return _replay(args, source)
    except OSError as exc:
        print(f"error: cannot read {args.path}: {exc}", file=sys.stderr)
        return EXIT_USAGE


if __name__ == "__main__":
    sys.exit(main())
