"""Argument and output helpers shared by the CLI commands."""

import argparse
import json
from typing import Optional, TextIO

from date_range_validation.exceptions import InvalidBoundaryError
from date_range_validation.machine import (
    UNSET,
    DateRangeValidationMachine,
    MachineSnapshot,
    create_validation_machine,
)

EXIT_SUCCESS = 0
EXIT_FAILURE = 1
EXIT_USAGE = 2


def add_machine_arguments(parser: argparse.ArgumentParser) -> None:
    """Add boundary and format-scope options."""
    parser.add_argument(
        "--first-allowed",
        dest="first_allowed",
        default=None,
        help="First allowed day (YYYY-MM-DD, 'today' or 'none'); default DRV_FIRST_ALLOWED_DATE",
    )
    parser.add_argument(
        "--last-allowed",
        dest="last_allowed",
        default=None,
        help="Last allowed day (YYYY-MM-DD, 'today' or 'none'); default DRV_LAST_ALLOWED_DATE",
    )
    parser.add_argument(
        "--format-scope",
        dest="format_scope",
        choices=["field", "pair"],
        default=None,
        help="Skip rules reading a malformed field, or all rules of the pair",
    )


def build_machine(
    args: argparse.Namespace, stderr: TextIO
) -> Optional[DateRangeValidationMachine]:
    """Create a machine from parsed options; report bad boundaries on stderr."""
    try:
        return create_validation_machine(
            _boundary_option(args.first_allowed),
            _boundary_option(args.last_allowed),
            format_scope=args.format_scope or UNSET,
            name="cli",
        )
    except InvalidBoundaryError as exc:
        print(f"error: {exc}", file=stderr)
        return None


def _boundary_option(value: Optional[str]):
    """Absent options use settings; 'none' disables the bound."""
    if value is None:
        return UNSET
    if value.strip().lower() == "none":
        return None
    return value


def parse_date_arg(value: Optional[str]) -> Optional[str]:
    """Map an empty command-line value to the unset sentinel."""
    if value is None:
        return None
    value = value.strip()
    return value or None


def write_snapshot(snapshot: MachineSnapshot, stream: TextIO) -> None:
    stream.write(json.dumps(snapshot.to_dict(), ensure_ascii=False) + "\n")


def exit_code_for(snapshot: MachineSnapshot) -> int:
    return EXIT_SUCCESS if snapshot.is_valid else EXIT_FAILURE
