"""Stateful wrapper that owns one machine snapshot per picker widget."""

from __future__ import annotations

from typing import Any, Callable, List, Optional, Union

from date_range_validation.config import Settings, get_settings
from date_range_validation.exceptions import MachineReentryError
from date_range_validation.machine.state import (
    MachineSnapshot,
    RevalidateEvent,
    ValidationState,
)
from date_range_validation.machine.transitions import apply_event, initial_snapshot
from date_range_validation.utils.dates import BoundaryInput
from date_range_validation.utils.logging import get_logger
from date_range_validation.validation.context import ValidationContext
from date_range_validation.validation.types import FormatScope

logger = get_logger(__name__)

Subscriber = Callable[[MachineSnapshot], None]

# Default for create_validation_machine options; an explicit None disables a bound
UNSET: Any = object()


class DateRangeValidationMachine:
    """
    Date range validation machine for a single widget.

    Processes one event at a time to completion. Subscribers are notified with
    each settled snapshot; sending an event from a subscriber raises
    MachineReentryError.

    Example:
        machine = DateRangeValidationMachine(
            first_allowed_date="2022-01-01", last_allowed_date="today"
        )
        machine.revalidate("2022-01-09", "2022-01-10")
        assert machine.state is ValidationState.SUCCESS
    """

    def __init__(
        self,
        first_allowed_date: BoundaryInput = None,
        last_allowed_date: BoundaryInput = None,
        *,
        format_scope: Union[FormatScope, str] = FormatScope.FIELD,
        name: Optional[str] = None,
    ) -> None:
        """Initialize the machine with its boundaries.

        Args:
            first_allowed_date: First allowed day, or None for no bound
            last_allowed_date: Last allowed day ("today" allowed), or None
            format_scope: Malformed-date short-circuit for every validation pass
            name: Optional widget name bound to log events

        Raises:
            InvalidBoundaryError: If a boundary cannot be read as a calendar day
        """
        self._snapshot = initial_snapshot(
            first_allowed_date, last_allowed_date, format_scope=format_scope
        )
        self._subscribers: List[Subscriber] = []
        self._handling = False
        self._logger = logger.bind(machine=name) if name else logger

    @property
    def snapshot(self) -> MachineSnapshot:
        return self._snapshot

    @property
    def state(self) -> ValidationState:
        return self._snapshot.value

    @property
    def context(self) -> ValidationContext:
        return self._snapshot.context

    def send(self, event: object) -> MachineSnapshot:
        """Process one event to completion and return the settled snapshot.

        Raises:
            MachineReentryError: If called while another event is being handled
        """
        if self._handling:
            raise MachineReentryError(
                "Cannot send an event while the previous one is being handled",
                pending_event=event,
            )

        self._handling = True
        try:
            previous = self._snapshot
            self._snapshot = apply_event(previous, event)
            if self._snapshot is not previous:
                self._logger.debug(
                    "date_validation.settled",
                    from_state=previous.value.value,
                    state=self._snapshot.value.value,
                    start_date=self._snapshot.context.start_date,
                    end_date=self._snapshot.context.end_date,
                    start_date_invalid=_status_name(
                        self._snapshot.context.start_date_invalid
                    ),
                    end_date_invalid=_status_name(
                        self._snapshot.context.end_date_invalid
                    ),
                )
                for subscriber in list(self._subscribers):
                    subscriber(self._snapshot)
        finally:
            self._handling = False

        return self._snapshot

    def revalidate(
        self, start_date: Optional[str], end_date: Optional[str]
    ) -> MachineSnapshot:
        """Send REVALIDATE with new date strings."""
        return self.send(RevalidateEvent(start_date=start_date, end_date=end_date))

    def subscribe(self, callback: Subscriber) -> Callable[[], None]:
        """Register a callback for settled snapshots; returns an unsubscribe function."""
        self._subscribers.append(callback)

        def unsubscribe() -> None:
            if callback in self._subscribers:
                self._subscribers.remove(callback)

        return unsubscribe


def _status_name(status: object) -> Optional[str]:
    return getattr(status, "value", None) if status else None


def create_validation_machine(
    first_allowed_date: BoundaryInput = UNSET,
    last_allowed_date: BoundaryInput = UNSET,
    *,
    format_scope: Union[FormatScope, str] = UNSET,
    settings: Optional[Settings] = None,
    name: Optional[str] = None,
) -> DateRangeValidationMachine:
    """
    Create a machine, filling unspecified options from settings.

    An omitted boundary falls back to DRV_FIRST_ALLOWED_DATE /
    DRV_LAST_ALLOWED_DATE; an explicit None disables the bound regardless of
    settings.

    Args:
        first_allowed_date: First allowed day, or None for no bound; omit to use
            the configured default
        last_allowed_date: Last allowed day, or None for no bound; omit to use
            the configured default
        format_scope: Short-circuit scope; omit to use DRV_FORMAT_SCOPE
        settings: Settings instance (defaults to get_settings())
        name: Optional widget name bound to log events
    """
    settings = settings or get_settings()
    if first_allowed_date is UNSET:
        first_allowed_date = settings.first_allowed_date
    if last_allowed_date is UNSET:
        last_allowed_date = settings.last_allowed_date
    if format_scope is UNSET or format_scope is None:
        format_scope = settings.format_scope

    return DateRangeValidationMachine(
        first_allowed_date,
        last_allowed_date,
        format_scope=format_scope,
        name=name,
    )
