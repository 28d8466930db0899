"""
Day-granularity date primitives for range validation.

Date strings entered in the picker use the fixed ``YYYY-MM-DD`` form and are
read as local midnight. Boundaries are normalized to local midnight as well, so
every comparison here is a comparison of calendar days.
"""

import re
from datetime import date, datetime, time
from typing import Optional, Union

from date_range_validation.exceptions import InvalidBoundaryError

# Digits only, exactly 4-2-2; says nothing about calendar validity
DATE_FORMAT_PATTERN = re.compile(r"^\d{4}-\d{2}-\d{2}$", re.ASCII)

TODAY = "today"

BoundaryInput = Union[datetime, date, str, None]


def is_placeholder(value: Optional[str]) -> bool:
    """Return True if ``value`` is the unset sentinel (no date entered yet)."""
    return value is None


def is_correct_format(value: Optional[str]) -> bool:
    """
    Check the fixed 4-2-2 digit pattern.

    The unset sentinel is always well-formed. ``"2022-02-31"`` is well-formed
    too; calendar validity is not checked here.
    """
    if is_placeholder(value):
        return True
    if not isinstance(value, str):
        return False
    # fullmatch so a trailing newline is not accepted
    return DATE_FORMAT_PATTERN.fullmatch(value) is not None


def day_floor(instant: Union[datetime, date]) -> datetime:
    """Truncate an instant to local midnight of its calendar day.

    Timezone-aware instants are converted to local time first, so the result
    is always naive and comparable with parsed date strings.
    """
    if isinstance(instant, datetime):
        if instant.tzinfo is not None:
            # Aware instants are read in local time, then compared naive
            instant = instant.astimezone().replace(tzinfo=None)
        return instant.replace(hour=0, minute=0, second=0, microsecond=0)
    if isinstance(instant, date):
        return datetime.combine(instant, time.min)
    raise TypeError(f"Cannot truncate {type(instant).__name__} to a day")


def is_strictly_after(a: datetime, b: datetime) -> bool:
    return a > b


def is_strictly_before(a: datetime, b: datetime) -> bool:
    return a < b


def parse_date_string(value: str) -> datetime:
    """
    Parse a ``YYYY-MM-DD`` string to local midnight.

    Raises:
        ValueError: If a component is not numeric or the day does not exist
            (e.g. ``"2022-02-30"``)
    """
    year, month, day = value.split("-")
    return day_floor(datetime(int(year), int(month), int(day)))


def coerce_boundary(value: BoundaryInput) -> Optional[datetime]:
    """
    Normalize a caller-supplied boundary to local midnight.

    Accepts ``datetime``, ``date``, ``"YYYY-MM-DD"``, ``"today"`` or ``None``
    (no bound).

    Raises:
        InvalidBoundaryError: If the value cannot be read as a calendar day
    """
    if value is None:
        return None
    if isinstance(value, (datetime, date)):
        return day_floor(value)
    if isinstance(value, str):
        text = value.strip()
        if text.lower() == TODAY:
            return day_floor(datetime.now())
        if not is_correct_format(text):
            raise InvalidBoundaryError(f"Boundary {value!r} is not in YYYY-MM-DD form")
        try:
            return parse_date_string(text)
        except ValueError as exc:
            raise InvalidBoundaryError(f"Boundary {value!r} is not a real day") from exc
    raise InvalidBoundaryError(
        f"Unsupported boundary type {type(value).__name__}: {value!r}"
    )


def format_day(instant: Optional[datetime]) -> Optional[str]:
    """Render a boundary as ``YYYY-MM-DD`` (``None`` stays ``None``)."""
    if instant is None:
        return None
    return instant.date().isoformat()
