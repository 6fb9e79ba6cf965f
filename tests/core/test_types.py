"""
Tests for entry types, timestamps and integer bounds.
"""

from datetime import datetime, timezone

import pytest
from pydantic import ValidationError

from mtreespec.core.types import (
    MAX_TIMESTAMP_SECONDS,
    MIN_TIMESTAMP_SECONDS,
    EntryType,
    Timestamp,
    days_from_civil,
)


class TestEntryType:
    """Tests for the EntryType enumeration."""

    def test_exactly_seven_kinds(self):
        """Test that only the seven filesystem kinds exist."""
        assert {entry_type.value for entry_type in EntryType} == {
            "block",
            "char",
            "dir",
            "fifo",
            "file",
            "link",
            "socket",
        }

    def test_str_is_source_literal(self):
        """Test that str() gives the literal used in directive lines."""
        assert str(EntryType.FIFO) == "fifo"

    def test_unknown_literal_rejected(self):
        """Test that arbitrary strings are not entry types."""
        with pytest.raises(ValueError):
            EntryType("symlink")


class TestDaysFromCivil:
    """Tests for the proleptic Gregorian day count."""

    def test_epoch(self):
        assert days_from_civil(1970, 1, 1) == 0

    def test_day_before_epoch(self):
        assert days_from_civil(1969, 12, 31) == -1

    def test_leap_years_counted(self):
        """Test day count across the leap years 1972-1996."""
        assert days_from_civil(2000, 1, 1) == 10957
        assert days_from_civil(2000, 3, 1) == 10957 + 31 + 29

    def test_bounds_ordering(self):
        assert MIN_TIMESTAMP_SECONDS < 0 < MAX_TIMESTAMP_SECONDS


class TestTimestamp:
    """Tests for the Timestamp value model."""

    def test_valid_pair(self):
        timestamp = Timestamp(seconds=1769640177, nanoseconds=434772208)
        assert timestamp.seconds == 1769640177
        assert timestamp.nanoseconds == 434772208

    def test_nanoseconds_default_to_zero(self):
        assert Timestamp(seconds=5).nanoseconds == 0

    def test_pre_epoch_seconds_allowed(self):
        assert Timestamp(seconds=-86400, nanoseconds=1).seconds == -86400

    def test_nanoseconds_must_be_fraction_of_second(self):
        """Test that one full second of nanoseconds is rejected."""
        with pytest.raises(ValidationError):
            Timestamp(seconds=0, nanoseconds=1_000_000_000)

    def test_negative_nanoseconds_rejected(self):
        with pytest.raises(ValidationError):
            Timestamp(seconds=0, nanoseconds=-1)

    def test_seconds_outside_representable_range_rejected(self):
        with pytest.raises(ValidationError):
            Timestamp(seconds=MAX_TIMESTAMP_SECONDS + 1)
        with pytest.raises(ValidationError):
            Timestamp(seconds=MIN_TIMESTAMP_SECONDS - 1)

    def test_bounds_are_inclusive(self):
        assert Timestamp(seconds=MAX_TIMESTAMP_SECONDS).seconds == MAX_TIMESTAMP_SECONDS
        assert Timestamp(seconds=MIN_TIMESTAMP_SECONDS).seconds == MIN_TIMESTAMP_SECONDS

    def test_str_pads_nanoseconds(self):
        """Test the canonical seconds.nanoseconds rendering."""
        assert str(Timestamp(seconds=1630456800)) == "1630456800.000000000"
        assert str(Timestamp(seconds=1, nanoseconds=5)) == "1.000000005"
        assert str(Timestamp(seconds=-2, nanoseconds=10)) == "-2.000000010"

    def test_to_datetime(self):
        """Test conversion to an aware UTC datetime."""
        result = Timestamp(seconds=1630456800, nanoseconds=434772208).to_datetime()
        assert result == datetime(2021, 9, 1, 0, 40, 0, 434772, tzinfo=timezone.utc)

    def test_to_datetime_out_of_range(self):
        """Test that instants beyond year 9999 cannot become datetimes."""
        with pytest.raises(OverflowError):
            Timestamp(seconds=MAX_TIMESTAMP_SECONDS).to_datetime()

    def test_frozen(self):
        timestamp = Timestamp(seconds=1)
        with pytest.raises(ValidationError):
            timestamp.seconds = 2
