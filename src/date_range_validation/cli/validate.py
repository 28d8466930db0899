"""
Validate a single start/end pair.

Usage:
    python -m date_range_validation.cli validate --start 2022-01-09 --end 2022-01-10

    # Boundaries and short-circuit scope
    python -m date_range_validation.cli validate --start 2019-01-12 --end aaaaaa \\
        --first-allowed 2022-01-01 --last-allowed today --format-scope pair

Prints the settled snapshot as one JSON object. Exit code is 0 for success and
1 for failure.
"""

import argparse
import sys
from typing import List, Optional

from date_range_validation.cli.common import (
    EXIT_USAGE,
    add_machine_arguments,
    build_machine,
    exit_code_for,
    parse_date_arg,
    write_snapshot,
)


def main(argv: Optional[List[str]] = None) -> int:
    """
    Validate one pair of dates.

    Args:
        argv: Command line arguments (defaults to sys.argv[1:])

    Returns:
        Exit code
    """
    parser = argparse.ArgumentParser(
        prog="date_range_validation.cli validate",
        description="Validate one start/end date pair",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "--start", dest="start", default=None, help="Start date (omit for unset)"
    )
    parser.add_argument("--end", dest="end", default=None, help="End date (omit for unset)")
    add_machine_arguments(parser)

    args = parser.parse_args(argv)

    machine = build_machine(args, sys.stderr)
    if machine is None:
        return EXIT_USAGE

    snapshot = machine.revalidate(parse_date_arg(args.start), parse_date_arg(args.end))
    write_snapshot(snapshot, sys.stdout)
    return exit_code_for(snapshot)


if __name__ == "__main__":
    sys.exit(main())
