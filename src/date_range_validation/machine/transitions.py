"""
Pure transition function for the date range validation machine.

Every public function here returns a settled snapshot: the automatic
placeholder and validation steps run to completion before returning, so a
caller only ever sees SUCCESS or FAILURE.

Transition table:
    placeholder --(both dates unset)--> success   [clear errors]
    placeholder --(otherwise)---------> validation [run evaluator]
    validation  --(any error)---------> failure
    validation  --(no error)----------> success   [clear errors]
    success|failure --REVALIDATE------> placeholder [replace dates, clear errors]
"""

from __future__ import annotations

from dataclasses import replace
from typing import Union

from date_range_validation.machine.state import (
    MachineSnapshot,
    RevalidateEvent,
    ValidationState,
)
from date_range_validation.utils.dates import BoundaryInput
from date_range_validation.utils.logging import get_logger
from date_range_validation.validation.context import ValidationContext, build_context
from date_range_validation.validation.rules import validate
from date_range_validation.validation.types import FormatScope

logger = get_logger(__name__)


def _step(snapshot: MachineSnapshot) -> MachineSnapshot:
    """Take one automatic transition out of a pseudo-transient state."""
    context = snapshot.context

    if snapshot.value is ValidationState.PLACEHOLDER:
        if context.dates_unset:
            return replace(
                snapshot, value=ValidationState.SUCCESS, context=context.cleared()
            )
        result = validate(context, format_scope=snapshot.format_scope)
        return replace(
            snapshot,
            value=ValidationState.VALIDATION,
            context=context.with_result(result),
        )

    if snapshot.value is ValidationState.VALIDATION:
        if context.has_errors:
            return replace(snapshot, value=ValidationState.FAILURE)
        return replace(
            snapshot, value=ValidationState.SUCCESS, context=context.cleared()
        )

    return snapshot


def settle(snapshot: MachineSnapshot) -> MachineSnapshot:
    """Run automatic transitions until a stable state is reached."""
    while not snapshot.value.is_stable:
        snapshot = _step(snapshot)
    return snapshot


def initial_snapshot(
    first_allowed_date: BoundaryInput = None,
    last_allowed_date: BoundaryInput = None,
    *,
    format_scope: Union[FormatScope, str] = FormatScope.FIELD,
    context: Union[ValidationContext, None] = None,
) -> MachineSnapshot:
    """
    Build the settled starting snapshot for a new widget.

    Args:
        first_allowed_date: First allowed day, or None for no bound
        last_allowed_date: Last allowed day ("today" allowed), or None
        format_scope: Malformed-date short-circuit for every validation pass
        context: Prebuilt context; when given the boundary arguments are ignored

    Raises:
        InvalidBoundaryError: If a boundary cannot be read as a calendar day
    """
    if context is None:
        context = build_context(first_allowed_date, last_allowed_date)
    return settle(
        MachineSnapshot(
            value=ValidationState.PLACEHOLDER,
            context=context,
            format_scope=FormatScope(format_scope),
        )
    )


def apply_event(snapshot: MachineSnapshot, event: object) -> MachineSnapshot:
    """
    Apply one external event and return the new settled snapshot.

    Only REVALIDATE is accepted, and only from a stable state. Any other event
    leaves the snapshot unchanged.
    """
    if not isinstance(event, RevalidateEvent):
        logger.warning(
            "date_validation.event_ignored",
            state=snapshot.value.value,
            event_type=type(event).__name__,
        )
        return snapshot

    if not snapshot.value.is_stable:
        # Snapshots built by hand may sit mid-chain; finish it first
        snapshot = settle(snapshot)

    updated = replace(
        snapshot,
        value=ValidationState.PLACEHOLDER,
        context=snapshot.context.with_dates(event.start_date, event.end_date),
    )
    return settle(updated)
