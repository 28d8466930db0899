"""Exceptions raised for programming and configuration faults.

Invalid user input is never raised: the rule evaluator reports it as data
(see ``date_range_validation.validation.types.DateValidationError``).
"""


class DateRangeValidationError(Exception):
    """Base class for all errors raised by this package."""


class InvalidBoundaryError(DateRangeValidationError, ValueError):
    """Raised when a first/last allowed date cannot be read as a calendar day."""


class MachineReentryError(DateRangeValidationError, RuntimeError):
    """Raised when an event is sent while the machine is still handling one.

    Attributes:
        pending_event: The event that was rejected
    """

    def __init__(self, message: str, *, pending_event: object = None) -> None:
        super().__init__(message)
        self.pending_event = pending_event


__all__ = [
    "DateRangeValidationError",
    "InvalidBoundaryError",
    "MachineReentryError",
]
