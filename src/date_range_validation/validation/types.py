"""Validation types for the date range rule evaluator.

This module defines the closed error taxonomy and the value carriers shared by
the evaluator and the state machine:
- DateValidationError: one error kind per invalid field
- FormatScope: how far a malformed date short-circuits the other rules
- ValidationResult: the pair of per-field statuses produced by one pass
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Literal, Optional, Union


class DateValidationError(str, Enum):
    """Error kinds reported per field.

    Values:
        MALFORMED: Not in the fixed YYYY-MM-DD digit pattern
        START_DATE_AFTER_END_DATE: Start day falls after end day (start field only)
        FUTURE_DATE: Day falls after the last allowed day
        DATE_BEFORE_FIRST_ALLOWED: Day falls before the first allowed day
    """

    MALFORMED = "MALFORMED"
    START_DATE_AFTER_END_DATE = "START_DATE_AFTER_END_DATE"
    FUTURE_DATE = "FUTURE_DATE"
    DATE_BEFORE_FIRST_ALLOWED = "DATE_BEFORE_FIRST_ALLOWED"


class FormatScope(str, Enum):
    """Reach of the malformed-date short-circuit.

    Values:
        FIELD: Skip every rule that reads a malformed field
        PAIR: Skip every ordering/range rule when either field is malformed
    """

    FIELD = "field"
    PAIR = "pair"


# False is the "no error" status
FieldStatus = Union[Literal[False], DateValidationError]

NO_ERROR: Literal[False] = False

ERROR_MESSAGES: dict[DateValidationError, str] = {
    DateValidationError.MALFORMED: "Enter a date in the format YYYY-MM-DD.",
    DateValidationError.START_DATE_AFTER_END_DATE: (
        "The start date cannot be after the end date."
    ),
    DateValidationError.FUTURE_DATE: "The date cannot be after the last allowed date.",
    DateValidationError.DATE_BEFORE_FIRST_ALLOWED: (
        "The date cannot be before the first allowed date."
    ),
}

_missing = [kind for kind in DateValidationError if kind not in ERROR_MESSAGES]
if _missing:
    raise RuntimeError(f"Missing ERROR_MESSAGES for: {[m.value for m in _missing]}")


def describe_error(status: FieldStatus) -> Optional[str]:
    """Return the default message for an error status, or None for no error."""
    if not status:
        return None
    return ERROR_MESSAGES[DateValidationError(status)]


@dataclass(frozen=True)
class ValidationResult:
    """Per-field statuses from one validation pass.

    Attributes:
        start_date_invalid: False or the error kind for the start field
        end_date_invalid: False or the error kind for the end field

    Example:
        >>> result = ValidationResult(
        ...     start_date_invalid=DateValidationError.MALFORMED,
        ...     end_date_invalid=False,
        ... )
        >>> result.has_errors
        True
    """

    start_date_invalid: FieldStatus = NO_ERROR
    end_date_invalid: FieldStatus = NO_ERROR

    @property
    def has_errors(self) -> bool:
        return bool(self.start_date_invalid) or bool(self.end_date_invalid)

    def as_dict(self) -> dict[str, FieldStatus]:
        return {
            "start_date_invalid": self.start_date_invalid,
            "end_date_invalid": self.end_date_invalid,
        }


__all__ = [
    "DateValidationError",
    "ERROR_MESSAGES",
    "FieldStatus",
    "FormatScope",
    "NO_ERROR",
    "ValidationResult",
    "describe_error",
]
