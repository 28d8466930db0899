"""States, events and snapshots of the date range validation machine."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, ClassVar, Optional

from date_range_validation.validation.context import ValidationContext
from date_range_validation.validation.types import FormatScope


class ValidationState(str, Enum):
    """Machine states.

    PLACEHOLDER and VALIDATION always fall through within one event, so only
    SUCCESS and FAILURE are ever observed between events.
    """

    PLACEHOLDER = "placeholder"
    VALIDATION = "validation"
    SUCCESS = "success"
    FAILURE = "failure"

    @property
    def is_stable(self) -> bool:
        return self in STABLE_STATES


STABLE_STATES = frozenset({ValidationState.SUCCESS, ValidationState.FAILURE})


@dataclass(frozen=True)
class RevalidateEvent:
    """New dates entered in the picker; None means the side is unset."""

    type: ClassVar[str] = "REVALIDATE"

    start_date: Optional[str] = None
    end_date: Optional[str] = None


@dataclass(frozen=True)
class MachineSnapshot:
    """Observable machine state between events.

    Attributes:
        value: Current state tag
        context: Dates, boundaries and per-field statuses
        format_scope: Malformed-date short-circuit used by each validation pass
    """

    value: ValidationState
    context: ValidationContext
    format_scope: FormatScope = field(default=FormatScope.FIELD)

    @property
    def is_valid(self) -> bool:
        return self.value is ValidationState.SUCCESS

    def to_dict(self) -> dict[str, Any]:
        return {"state": self.value.value, "context": self.context.to_dict()}
