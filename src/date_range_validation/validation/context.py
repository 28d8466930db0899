"""Validation context owned by one date range machine.

The context is immutable; every change produces a new instance via
``dataclasses.replace``. ``INITIAL_CONTEXT`` is only a template.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from datetime import datetime
from typing import Any, Optional

from date_range_validation.utils.dates import BoundaryInput, coerce_boundary, format_day
from date_range_validation.validation.types import (
    NO_ERROR,
    FieldStatus,
    ValidationResult,
)


@dataclass(frozen=True)
class ValidationContext:
    """Dates under validation, their boundaries and the per-field statuses.

    Attributes:
        start_date: None (unset) or the raw start date string
        end_date: None (unset) or the raw end date string
        first_allowed_date: Local midnight of the first allowed day, or None
        last_allowed_date: Local midnight of the last allowed day, or None
        start_date_invalid: False or the start field's error kind
        end_date_invalid: False or the end field's error kind
    """

    start_date: Optional[str] = None
    end_date: Optional[str] = None
    first_allowed_date: Optional[datetime] = None
    last_allowed_date: Optional[datetime] = None
    start_date_invalid: FieldStatus = NO_ERROR
    end_date_invalid: FieldStatus = NO_ERROR

    @property
    def has_errors(self) -> bool:
        return bool(self.start_date_invalid) or bool(self.end_date_invalid)

    @property
    def dates_unset(self) -> bool:
        return self.start_date is None and self.end_date is None

    def with_dates(
        self, start_date: Optional[str], end_date: Optional[str]
    ) -> "ValidationContext":
        """Replace both dates and clear both error fields."""
        return replace(
            self,
            start_date=start_date,
            end_date=end_date,
            start_date_invalid=NO_ERROR,
            end_date_invalid=NO_ERROR,
        )

    def with_result(self, result: ValidationResult) -> "ValidationContext":
        return replace(
            self,
            start_date_invalid=result.start_date_invalid,
            end_date_invalid=result.end_date_invalid,
        )

    def cleared(self) -> "ValidationContext":
        return replace(self, start_date_invalid=NO_ERROR, end_date_invalid=NO_ERROR)

    def to_dict(self) -> dict[str, Any]:
        """Observation view with boundaries rendered as YYYY-MM-DD."""
        return {
            "start_date": self.start_date,
            "end_date": self.end_date,
            "start_date_invalid": _status_value(self.start_date_invalid),
            "end_date_invalid": _status_value(self.end_date_invalid),
            "first_allowed_date": format_day(self.first_allowed_date),
            "last_allowed_date": format_day(self.last_allowed_date),
        }


def _status_value(status: FieldStatus) -> Any:
    return status.value if status else False


INITIAL_CONTEXT = ValidationContext()


def build_context(
    first_allowed_date: BoundaryInput = None,
    last_allowed_date: BoundaryInput = None,
) -> ValidationContext:
    """Create a fresh context from the template with the given boundaries.

    Raises:
        InvalidBoundaryError: If a boundary cannot be read as a calendar day
    """
    return replace(
        INITIAL_CONTEXT,
        first_allowed_date=coerce_boundary(first_allowed_date),
        last_allowed_date=coerce_boundary(last_allowed_date),
    )
