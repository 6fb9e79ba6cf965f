"""
Core type definitions for mtree directive values.

This module contains the entry type enumeration, the timestamp value used by
``time=`` keywords, and the integer bounds every numeric decoder checks against.
"""

from datetime import datetime, timedelta, timezone
from enum import Enum

from pydantic import BaseModel, ConfigDict, Field

UINT32_MAX = 2**32 - 1
UINT64_MAX = 2**64 - 1
INT64_MIN = -(2**63)
INT64_MAX = 2**63 - 1

NANOS_PER_SECOND = 1_000_000_000
SECONDS_PER_DAY = 86_400


def days_from_civil(year: int, month: int, day: int) -> int:
    """
    Count days between 1970-01-01 and a proleptic Gregorian date.

    Params:
        year: Calendar year, may be zero or negative
        month: Month number 1-12
        day: Day of month 1-31

    Returns:
        Signed day offset from the Unix epoch
    """
    year -= month <= 2
    era = year // 400
    year_of_era = year - era * 400
    day_of_year = (153 * (month + (-3 if month > 2 else 9)) + 2) // 5 + day - 1
    day_of_era = year_of_era * 365 + year_of_era // 4 - year_of_era // 100 + day_of_year
    return era * 146097 + day_of_era - 719468


# Representable instants span the years -262144 through 262143
MIN_TIMESTAMP_SECONDS = days_from_civil(-262144, 1, 1) * SECONDS_PER_DAY
MAX_TIMESTAMP_SECONDS = (
    days_from_civil(262143, 12, 31) * SECONDS_PER_DAY + SECONDS_PER_DAY - 1
)


class EntryType(Enum):
    """Kind of filesystem object an entry describes."""

    BLOCK = "block"
    CHAR = "char"
    DIR = "dir"
    FIFO = "fifo"
    FILE = "file"
    LINK = "link"
    SOCKET = "socket"

    def __str__(self) -> str:
        return self.value


class Timestamp(BaseModel):
    """
    An instant as whole seconds since the Unix epoch plus nanoseconds.

    Params:
        seconds: Signed seconds, negative values are pre-epoch
        nanoseconds: Sub-second part, always a valid fraction of a second
    """

    model_config = ConfigDict(frozen=True)

    seconds: int = Field(ge=MIN_TIMESTAMP_SECONDS, le=MAX_TIMESTAMP_SECONDS)
    nanoseconds: int = Field(default=0, ge=0, lt=NANOS_PER_SECOND)

    def __str__(self) -> str:
        """Return the ``seconds.nanoseconds`` form used in directive lines."""
        return f"{self.seconds}.{self.nanoseconds:09d}"

    def to_datetime(self) -> datetime:
        """
        Convert to an aware UTC datetime.

        Precision drops to microseconds.

        Raises:
            OverflowError: If the instant lies outside the datetime range
        """
        epoch = datetime(1970, 1, 1, tzinfo=timezone.utc)
        return epoch + timedelta(
            seconds=self.seconds, microseconds=self.nanoseconds // 1000
        )
