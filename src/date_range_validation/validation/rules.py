"""Ordered rule evaluation for a start/end date pair.

The format check runs first. The remaining rules form a priority-ordered tuple
folded last-write-wins, so when two rules hold for the same field the later
one is reported. Reordering ``DATE_RULES`` changes results on boundary overlap.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Literal, Optional, Tuple, Union

from date_range_validation.utils.dates import (
    BoundaryInput,
    coerce_boundary,
    day_floor,
    is_correct_format,
    is_placeholder,
    is_strictly_after,
    is_strictly_before,
    parse_date_string,
)
from date_range_validation.utils.logging import get_logger
from date_range_validation.validation.context import ValidationContext
from date_range_validation.validation.types import (
    NO_ERROR,
    DateValidationError,
    FieldStatus,
    FormatScope,
    ValidationResult,
)

logger = get_logger(__name__)

DateField = Literal["start_date", "end_date"]

DATE_FIELDS: Tuple[DateField, ...] = ("start_date", "end_date")


@dataclass(frozen=True)
class DateRule:
    """A single ordering or range rule.

    Attributes:
        name: Identifier used in logs
        target: Field whose status is set when the predicate holds
        error: Error kind written to the target
        reads: Date fields the predicate reads; the rule is skipped if any is malformed
        predicate: Condition over the context; a ValueError from parsing a
            calendar-invalid day counts as False, other faults propagate
    """

    name: str
    target: DateField
    error: DateValidationError
    reads: Tuple[DateField, ...]
    predicate: Callable[[ValidationContext], bool]

    def holds(self, context: ValidationContext) -> bool:
        try:
            return bool(self.predicate(context))
        except ValueError as exc:
            logger.debug(
                "date_validation.rule_parse_failed",
                rule=self.name,
                error=str(exc),
            )
            return False


def _start_after_end(context: ValidationContext) -> bool:
    if is_placeholder(context.start_date) or is_placeholder(context.end_date):
        return False
    return is_strictly_after(
        parse_date_string(context.start_date), parse_date_string(context.end_date)
    )


def _after_last_allowed(field: DateField) -> Callable[[ValidationContext], bool]:
    def predicate(context: ValidationContext) -> bool:
        value = getattr(context, field)
        bound = context.last_allowed_date
        if is_placeholder(value) or not bound:
            return False
        return is_strictly_after(parse_date_string(value), day_floor(bound))

    return predicate


def _before_first_allowed(field: DateField) -> Callable[[ValidationContext], bool]:
    def predicate(context: ValidationContext) -> bool:
        value = getattr(context, field)
        bound = context.first_allowed_date
        if is_placeholder(value) or not bound:
            return False
        return is_strictly_before(parse_date_string(value), day_floor(bound))

    return predicate


DATE_RULES: Tuple[DateRule, ...] = (
    DateRule(
        name="start_after_end",
        target="start_date",
        error=DateValidationError.START_DATE_AFTER_END_DATE,
        reads=("start_date", "end_date"),
        predicate=_start_after_end,
    ),
    DateRule(
        name="start_after_last_allowed",
        target="start_date",
        error=DateValidationError.FUTURE_DATE,
        reads=("start_date",),
        predicate=_after_last_allowed("start_date"),
    ),
    DateRule(
        name="start_before_first_allowed",
        target="start_date",
        error=DateValidationError.DATE_BEFORE_FIRST_ALLOWED,
        reads=("start_date",),
        predicate=_before_first_allowed("start_date"),
    ),
    DateRule(
        name="end_after_last_allowed",
        target="end_date",
        error=DateValidationError.FUTURE_DATE,
        reads=("end_date",),
        predicate=_after_last_allowed("end_date"),
    ),
    DateRule(
        name="end_before_first_allowed",
        target="end_date",
        error=DateValidationError.DATE_BEFORE_FIRST_ALLOWED,
        reads=("end_date",),
        predicate=_before_first_allowed("end_date"),
    ),
)


def check_formats(context: ValidationContext) -> dict[str, FieldStatus]:
    """Return the format status of both date fields, keyed by field name."""
    return {
        field: NO_ERROR
        if is_correct_format(getattr(context, field))
        else DateValidationError.MALFORMED
        for field in DATE_FIELDS
    }


def validate(
    context: ValidationContext,
    *,
    format_scope: Union[FormatScope, str] = FormatScope.FIELD,
    rules: Tuple[DateRule, ...] = DATE_RULES,
) -> ValidationResult:
    """
    Evaluate the date rules against a context.

    Pure: the context is not modified, and nothing is raised for bad date
    strings. A boundary that is not a datetime raises TypeError.

    Args:
        context: Dates and boundaries to check; existing statuses are ignored
        format_scope: FIELD skips rules reading a malformed field, PAIR skips
            every rule as soon as either field is malformed
        rules: Ordered rules applied after the format check

    Returns:
        ValidationResult with each field's final status
    """
    scope = FormatScope(format_scope)
    statuses = check_formats(context)
    malformed = {field for field, status in statuses.items() if status}

    if malformed and scope is FormatScope.PAIR:
        return _to_result(statuses)

    for rule in rules:
        if malformed.intersection(rule.reads):
            continue
        if rule.holds(context):
            statuses[rule.target] = rule.error

    return _to_result(statuses)


def evaluate_dates(
    start_date: Optional[str],
    end_date: Optional[str],
    first_allowed_date: BoundaryInput = None,
    last_allowed_date: BoundaryInput = None,
    *,
    format_scope: Union[FormatScope, str] = FormatScope.FIELD,
) -> ValidationResult:
    """Evaluate a raw date pair without building a context first.

    Boundaries are coerced like machine boundaries, so ISO strings, "today",
    dates and aware datetimes are accepted. A bad boundary raises
    InvalidBoundaryError.
    """
    context = ValidationContext(
        start_date=start_date,
        end_date=end_date,
        first_allowed_date=coerce_boundary(first_allowed_date),
        last_allowed_date=coerce_boundary(last_allowed_date),
    )
    return validate(context, format_scope=format_scope)


def _to_result(statuses: dict[str, FieldStatus]) -> ValidationResult:
    return ValidationResult(
        start_date_invalid=statuses["start_date"],
        end_date_invalid=statuses["end_date"],
    )
