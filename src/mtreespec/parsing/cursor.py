"""
Input cursor shared by the directive decoders.

A cursor is a position into one directive line. Decoders advance it only when
they succeed, so a failed decoder leaves the cursor where it found it.
"""

import re
from dataclasses import dataclass

from mtreespec.exceptions.core import DirectiveParseError, ErrorLevel

WHITESPACE_PATTERN = re.compile(r"\s+")


@dataclass
class Cursor:
    """
    Read position into a single directive line.

    Params:
        text: The full line being decoded
        pos: Current offset into text
        line_number: 1-based line number for error reporting, if known
        error_level: Detail level for errors raised through this cursor
    """

    text: str
    pos: int = 0
    line_number: int | None = None
    error_level: ErrorLevel = ErrorLevel.USER

    def at_end(self) -> bool:
        return self.pos >= len(self.text)

    def startswith(self, literal: str) -> bool:
        return self.text.startswith(literal, self.pos)

    def match(self, pattern: re.Pattern) -> re.Match | None:
        """Match a compiled pattern anchored at the current position."""
        return pattern.match(self.text, self.pos)

    def advance(self, count: int) -> None:
        self.pos += count

    def consume(self, literal: str) -> bool:
        """Advance past literal if it is next in the input."""
        if not self.startswith(literal):
            return False
        self.advance(len(literal))
        return True

    def consume_whitespace(self) -> bool:
        """Advance past one whitespace run, returning False if there is none."""
        match = self.match(WHITESPACE_PATTERN)
        if match is None:
            return False
        self.pos = match.end()
        return True

    def error(
        self,
        error_class: type[DirectiveParseError],
        reason: str,
        expected: str | None = None,
        position: int | None = None,
    ) -> DirectiveParseError:
        """
        Build a parse error located at this cursor.

        Params:
            error_class: DirectiveParseError subclass to instantiate
            reason: What went wrong
            expected: What the decoder expected at the failing offset
            position: Failing offset, defaults to the current position

        Returns:
            The error instance, ready to be raised
        """
        return error_class(
            reason,
            self.text,
            self.pos if position is None else position,
            expected=expected,
            line_number=self.line_number,
            error_level=self.error_level,
        )
