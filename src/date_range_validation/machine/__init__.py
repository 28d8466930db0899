"""Finite state machine sequencing date range validation."""

from date_range_validation.machine.machine import (
    UNSET,
    DateRangeValidationMachine,
    create_validation_machine,
)
from date_range_validation.machine.state import (
    STABLE_STATES,
    MachineSnapshot,
    RevalidateEvent,
    ValidationState,
)
from date_range_validation.machine.transitions import (
    apply_event,
    initial_snapshot,
    settle,
)

__all__ = [
    "DateRangeValidationMachine",
    "MachineSnapshot",
    "RevalidateEvent",
    "STABLE_STATES",
    "UNSET",
    "ValidationState",
    "apply_event",
    "create_validation_machine",
    "initial_snapshot",
    "settle",
]
