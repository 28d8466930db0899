"""
Unified CLI entry point for date range validation.

Usage:
    python -m date_range_validation.cli <command> [options]

Available commands:
    validate     - Validate one start/end pair and print the settled snapshot
    replay       - Feed a sequence of edits to one machine, one snapshot per line

Examples:
    python -m date_range_validation.cli validate --start 2022-01-09 --end 2022-01-10 \\
        --first-allowed 2022-01-01 --last-allowed today

    printf '2022-01-09,2022-01-10\\naaaa,2022-01-10\\n' | \\
        python -m date_range_validation.cli replay --first-allowed 2022-01-01
"""

import argparse
import sys
from typing import List, Optional


def main(argv: Optional[List[str]] = None) -> int:
    """
    Main CLI entry point with subcommand routing.

    Args:
        argv: Command line arguments (defaults to sys.argv[1:])

    Returns:
        Exit code (0 when the final state is success, 1 on failure, 2 on bad usage)
    """
    parser = argparse.ArgumentParser(
        prog="date_range_validation.cli",
        description="Date range validation CLI",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )

    subparsers = parser.add_subparsers(
        title="commands",
        description="Available commands",
        dest="command",
        required=True,
        help="Command to execute",
    )

    subparsers.add_parser(
        "validate",
        help="Validate one start/end pair",
        description="Validate one start/end pair and print the settled snapshot",
        add_help=False,  # Let the delegated module handle help
    )
    subparsers.add_parser(
        "replay",
        help="Replay a sequence of edits",
        description="Send each line of input as REVALIDATE to a single machine",
        add_help=False,  # Let the delegated module handle help
    )

    args, remaining_args = parser.parse_known_args(argv)

    if args.command == "validate":
        from date_range_validation.cli.validate import main as validate_main

        return validate_main(remaining_args)

    elif args.command == "replay":
        from date_range_validation.cli.replay import main as replay_main

        return replay_main(remaining_args)

    else:
        parser.print_help()
        return 1


if __name__ == "__main__":
    sys.exit(main())
