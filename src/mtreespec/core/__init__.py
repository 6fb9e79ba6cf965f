"""
Core mtreespec components.

This package provides the value types decoded from directive lines: entry
types, timestamps, keyword fields and commands.
"""

from mtreespec.core.commands import COMMAND_ADAPTER, Command, Entry, Set, Unset
from mtreespec.core.keywords import (
    KEYWORD_ADAPTER,
    Keyword,
    Link,
    Sha256,
    Size,
    Time,
    Type,
    Uid,
)
from mtreespec.core.types import (
    INT64_MAX,
    INT64_MIN,
    MAX_TIMESTAMP_SECONDS,
    MIN_TIMESTAMP_SECONDS,
    NANOS_PER_SECOND,
    UINT32_MAX,
    UINT64_MAX,
    EntryType,
    Timestamp,
)

__all__ = [
    "COMMAND_ADAPTER",
    "Command",
    "Entry",
    "Set",
    "Unset",
    "KEYWORD_ADAPTER",
    "Keyword",
    "Link",
    "Sha256",
    "Size",
    "Time",
    "Type",
    "Uid",
    "EntryType",
    "Timestamp",
    "INT64_MAX",
    "INT64_MIN",
    "MAX_TIMESTAMP_SECONDS",
    "MIN_TIMESTAMP_SECONDS",
    "NANOS_PER_SECOND",
    "UINT32_MAX",
    "UINT64_MAX",
]
