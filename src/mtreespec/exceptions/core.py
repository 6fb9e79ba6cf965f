"""
Exception classes for mtree directive parsing.

This module defines the error taxonomy for directive lines. Every failure is
local to one line and carries the offset at which decoding stopped.
"""

from dataclasses import dataclass
from enum import Enum


class ErrorLevel(Enum):
    """Error message detail level for end users vs developers."""

    USER = "user"  # Location and source line only
    DEVELOPER = "developer"  # Also the token the decoder expected


@dataclass
class ErrorContext:
    """
    Location of a parse failure within a directive line.

    Params:
        line_text: The directive line being decoded
        position: Character offset into line_text where decoding failed
        line_number: 1-based line number when the line came from a stream
        expected: Description of what the decoder expected at position
    """

    line_text: str
    position: int
    line_number: int | None = None
    expected: str | None = None

    def format_location(self, error_level: ErrorLevel) -> str:
        """
        Format location information based on error level.

        Params:
            error_level: Whether to show USER or DEVELOPER level details

        Returns:
            Multi-line location block with a caret under the failing offset
        """
        lines = []

        if self.line_number is not None:
            lines.append(f"  at line {self.line_number}, column {self.position + 1}")
        else:
            lines.append(f"  at column {self.position + 1}")

        lines.append(f"  {self.line_text}")
        lines.append("  " + " " * self.position + "^")

        if error_level == ErrorLevel.DEVELOPER and self.expected:
            lines.append(f"  expected: {self.expected}")

        return "\n".join(lines)


class MtreeSpecError(Exception):
    """Base exception for all mtreespec errors."""

    pass


class DirectiveParseError(MtreeSpecError):
    """Raised when a directive line cannot be decoded."""

    def __init__(
        self,
        reason: str,
        text: str,
        position: int,
        expected: str | None = None,
        line_number: int | None = None,
        error_level: ErrorLevel = ErrorLevel.USER,
    ):
        """
        Initialize the exception.

        Params:
            reason: What went wrong, without location information
            text: The directive line being decoded
            position: Offset where decoding failed
            expected: What the decoder was looking for at position
            line_number: 1-based line number when known
            error_level: Level of detail to show in error message
        """
        self.reason = reason
        self.text = text
        self.position = position
        self.expected = expected
        self.context = ErrorContext(
            line_text=text,
            position=position,
            line_number=line_number,
            expected=expected,
        )
        self.error_level = error_level

        location_info = self.context.format_location(error_level)
        super().__init__(f"{reason}\n{location_info}")

    @property
    def line_number(self) -> int | None:
        return self.context.line_number


class DirectiveSyntaxError(DirectiveParseError):
    """Sentinel, '=', separator or other fixed syntax is missing or misplaced."""

    pass


class UnknownDirectiveError(DirectiveParseError):
    """The word after the sentinel is neither 'set' nor 'unset'."""

    pass


class UnknownKeywordError(DirectiveParseError):
    """A 'name=' pair uses a keyword name that is not recognized."""

    pass


class IntegerDecodeError(DirectiveParseError):
    """A digit run is empty or does not fit the target integer width."""

    pass


class InvalidTimestampError(DirectiveParseError):
    """A seconds/nanoseconds pair does not form a representable instant."""

    pass


class UnknownTypeError(DirectiveParseError):
    """The value after 'type=' is not one of the known entry types."""

    pass


class InvalidDigestError(DirectiveParseError):
    """The value after 'sha256=' is not a well-formed hex digest."""

    pass


class TrailingInputError(DirectiveParseError):
    """A complete directive is followed by unconsumed characters."""

    pass
