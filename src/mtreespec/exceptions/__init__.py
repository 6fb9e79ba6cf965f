"""
mtreespec exception classes.

This package provides all exception types raised while decoding directive
lines, for consistent error handling and reporting.
"""

from mtreespec.exceptions.core import (
    DirectiveParseError,
    DirectiveSyntaxError,
    ErrorContext,
    ErrorLevel,
    IntegerDecodeError,
    InvalidDigestError,
    InvalidTimestampError,
    MtreeSpecError,
    TrailingInputError,
    UnknownDirectiveError,
    UnknownKeywordError,
    UnknownTypeError,
)

__all__ = [
    "MtreeSpecError",
    "DirectiveParseError",
    "DirectiveSyntaxError",
    "ErrorContext",
    "ErrorLevel",
    "IntegerDecodeError",
    "InvalidDigestError",
    "InvalidTimestampError",
    "TrailingInputError",
    "UnknownDirectiveError",
    "UnknownKeywordError",
    "UnknownTypeError",
]
