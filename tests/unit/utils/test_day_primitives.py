"""
Tests for day-granularity date primitives.
"""

from datetime import date, datetime, timezone

import pytest

from date_range_validation.exceptions import InvalidBoundaryError
from date_range_validation.utils.dates import (
    coerce_boundary,
    day_floor,
    format_day,
    is_correct_format,
    is_placeholder,
    is_strictly_after,
    is_strictly_before,
    parse_date_string,
)


@pytest.mark.unit
class TestFormat:
    """Test the placeholder and fixed-pattern checks."""

    def test_placeholder(self):
        assert is_placeholder(None)
        assert not is_placeholder("")
        assert not is_placeholder("2022-01-01")

    def test_placeholder_is_well_formed(self):
        assert is_correct_format(None)

    def test_pattern(self):
        assert is_correct_format("2022-01-09")
        assert is_correct_format("9999-99-99")  # pattern only, no calendar check
        assert not is_correct_format("2022-1-9")
        assert not is_correct_format("2022-01-09\n")
        assert not is_correct_format(" 2022-01-09")
        assert not is_correct_format("20220109")

    def test_non_string_is_not_well_formed(self):
        assert not is_correct_format(20220109)  # type: ignore[arg-type]


@pytest.mark.unit
class TestDayFloor:
    """Test truncation to local midnight."""

    def test_datetime_truncated(self):
        assert day_floor(datetime(2022, 1, 9, 23, 59, 59, 999)) == datetime(2022, 1, 9)

    def test_date_promoted(self):
        assert day_floor(date(2022, 1, 9)) == datetime(2022, 1, 9)

    def test_aware_datetime_converted_to_local(self):
        aware = datetime(2022, 1, 9, 12, tzinfo=timezone.utc)
        local = aware.astimezone().replace(tzinfo=None)

        floored = day_floor(aware)

        assert floored.tzinfo is None
        assert floored == datetime(local.year, local.month, local.day)

    def test_rejects_other_types(self):
        with pytest.raises(TypeError):
            day_floor("2022-01-09")  # type: ignore[arg-type]


@pytest.mark.unit
class TestOrdering:
    def test_strict_comparisons(self):
        a = datetime(2022, 1, 9)
        b = datetime(2022, 1, 10)

        assert is_strictly_after(b, a)
        assert not is_strictly_after(a, a)
        assert is_strictly_before(a, b)
        assert not is_strictly_before(a, a)


@pytest.mark.unit
class TestParseDateString:
    def test_parses_local_midnight(self):
        assert parse_date_string("2022-01-09") == datetime(2022, 1, 9)

    def test_invalid_day_raises(self):
        with pytest.raises(ValueError):
            parse_date_string("2022-02-30")

    def test_year_zero_raises(self):
        with pytest.raises(ValueError):
            parse_date_string("0000-01-01")


@pytest.mark.unit
class TestCoerceBoundary:
    def test_none_means_no_bound(self):
        assert coerce_boundary(None) is None

    def test_datetime_and_date(self):
        assert coerce_boundary(datetime(2022, 1, 1, 12)) == datetime(2022, 1, 1)
        assert coerce_boundary(date(2022, 1, 1)) == datetime(2022, 1, 1)

    def test_aware_datetime_becomes_naive_local_midnight(self):
        aware = datetime(2022, 1, 1, 12).astimezone()

        bound = coerce_boundary(aware)

        assert bound == datetime(2022, 1, 1)
        assert bound.tzinfo is None
        assert is_strictly_after(datetime(2022, 1, 2), bound)

    def test_iso_string(self):
        assert coerce_boundary(" 2022-01-01 ") == datetime(2022, 1, 1)

    def test_today(self):
        today = date.today()
        assert coerce_boundary("Today") == datetime(today.year, today.month, today.day)

    @pytest.mark.parametrize("value", ["01/01/2022", "2022-02-30", "", 20220101])
    def test_invalid_boundaries(self, value):
        with pytest.raises(InvalidBoundaryError):
            coerce_boundary(value)

    def test_invalid_boundary_is_value_error(self):
        with pytest.raises(ValueError):
            coerce_boundary("soon")

    def test_format_day(self):
        assert format_day(datetime(2022, 1, 1)) == "2022-01-01"
        assert format_day(None) is None
