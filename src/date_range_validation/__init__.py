"""
Date range validation - start/end date checks for calendar range pickers.

Validates a start/end date pair against fixed-format and boundary rules and
exposes the outcome as a small state machine (success/failure) with per-field
error codes.
"""

__version__ = "0.1.0"

from date_range_validation.exceptions import (
    DateRangeValidationError,
    InvalidBoundaryError,
    MachineReentryError,
)
from date_range_validation.machine import (
    DateRangeValidationMachine,
    MachineSnapshot,
    RevalidateEvent,
    ValidationState,
    apply_event,
    create_validation_machine,
    initial_snapshot,
)
from date_range_validation.validation import (
    DateValidationError,
    FormatScope,
    ValidationContext,
    ValidationResult,
    describe_error,
    evaluate_dates,
    validate,
)

__all__ = [
    "DateRangeValidationError",
    "DateRangeValidationMachine",
    "DateValidationError",
    "FormatScope",
    "InvalidBoundaryError",
    "MachineReentryError",
    "MachineSnapshot",
    "RevalidateEvent",
    "ValidationContext",
    "ValidationResult",
    "ValidationState",
    "apply_event",
    "create_validation_machine",
    "describe_error",
    "evaluate_dates",
    "initial_snapshot",
    "validate",
]
