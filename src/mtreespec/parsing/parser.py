"""
Parser for mtree directive lines.

A directive line starts with the '/' sentinel followed by either ``unset`` or
``set`` and a whitespace-separated keyword sequence. Each line decodes to one
Command or raises a DirectiveParseError; no partial results are produced.
"""

import logging
import re
from collections.abc import Iterable, Iterator
from dataclasses import dataclass

from mtreespec.config import DEFAULT_CONFIG, ParserConfig
from mtreespec.core.commands import Command, Set, Unset
from mtreespec.exceptions.core import (
    DirectiveParseError,
    DirectiveSyntaxError,
    TrailingInputError,
    UnknownDirectiveError,
)
from mtreespec.parsing.cursor import Cursor
from mtreespec.parsing.keywords import decode_keywords

logger = logging.getLogger(__name__)


class DirectiveParser:
    """Parser for single directive lines."""

    SENTINEL = "/"

    DIRECTIVE_WORD_PATTERN = re.compile(r"[A-Za-z]+")

    LINE_BREAK_PATTERN = re.compile(r"[\r\n]")

    def __init__(self, config: ParserConfig | None = None):
        self.config = config or DEFAULT_CONFIG

    def parse(self, line: str, line_number: int | None = None) -> Command:
        """
        Parse a directive line into a command.

        Params:
            line: One line of text without its line terminator
            line_number: 1-based line number used in error messages

        Returns:
            Set or Unset

        Raises:
            DirectiveParseError: If the line is not a complete, well-formed directive
        """
        cursor = Cursor(line, line_number=line_number, error_level=self.config.error_level)

        line_break = self.LINE_BREAK_PATTERN.search(line)
        if line_break:
            raise cursor.error(
                DirectiveSyntaxError,
                "Directive line contains a line break",
                expected="a single line",
                position=line_break.start(),
            )

        if not cursor.consume(self.SENTINEL):
            raise cursor.error(
                DirectiveSyntaxError,
                f"Directive must start with '{self.SENTINEL}'",
                expected=f"'{self.SENTINEL}'",
            )

        word_match = cursor.match(self.DIRECTIVE_WORD_PATTERN)
        word = word_match.group() if word_match else ""

        if word == "unset":
            cursor.advance(len(word))
            command = Unset()
        elif word == "set":
            cursor.advance(len(word))
            command = self._parse_set(cursor)
        else:
            raise cursor.error(
                UnknownDirectiveError,
                f"Unknown directive '{word}'" if word else "Missing directive name",
                expected="set | unset",
            )

        if not cursor.at_end():
            raise cursor.error(
                TrailingInputError,
                f"Unexpected input after directive: '{line[cursor.pos:]}'",
                expected="end of line",
            )

        logger.debug("Parsed directive %r as %s", line, command)
        return command

    def _parse_set(self, cursor: Cursor) -> Set:
        """Parse the remainder of a ``/set`` directive after the word itself."""
        if not cursor.consume_whitespace():
            raise cursor.error(
                DirectiveSyntaxError,
                "Expected whitespace after 'set'",
                expected="whitespace",
            )

        keywords = decode_keywords(cursor, self.config)
        if not keywords and self.config.require_fields:
            raise cursor.error(
                DirectiveSyntaxError,
                "'set' requires at least one keyword",
                expected="name=value",
            )

        return Set(keywords=keywords)


def parse_command(line: str, config: ParserConfig | None = None) -> Command:
    """
    Convenience function to parse a directive line.

    Params:
        line: The directive line to parse
        config: Parser options, defaults apply when omitted

    Returns:
        Set or Unset

    Raises:
        DirectiveParseError: If the line is malformed
    """
    parser = DirectiveParser(config)
    return parser.parse(line)


@dataclass
class ParsedLine:
    """
    Outcome of parsing one line from a stream.

    Params:
        line_number: 1-based position of the line in the stream
        text: The line without its terminator
        command: Decoded command, None if decoding failed
        error: The parse error, None if decoding succeeded
    """

    line_number: int
    text: str
    command: Command | None = None
    error: DirectiveParseError | None = None

    @property
    def ok(self) -> bool:
        return self.error is None


def _strip_line_terminator(line: str) -> str:
    if line.endswith("\r\n"):
        return line[:-2]
    if line.endswith("\n"):
        return line[:-1]
    return line


def parse_lines(
    lines: Iterable[str], config: ParserConfig | None = None
) -> Iterator[ParsedLine]:
    """
    Parse a stream of directive lines, one outcome per line.

    A failing line is reported on its own ParsedLine and parsing continues with
    the next line.

    Params:
        lines: Lines of text, with or without a trailing line terminator
        config: Parser options, defaults apply when omitted

    Yields:
        ParsedLine for each line that was not skipped
    """
    parser = DirectiveParser(config)
    for line_number, raw_line in enumerate(lines, start=1):
        text = _strip_line_terminator(raw_line)
        if parser.config.skip_blank_lines and not text.strip():
            continue

        try:
            command = parser.parse(text, line_number=line_number)
        except DirectiveParseError as exc:
            logger.warning("Line %d: %s", line_number, exc.reason)
            yield ParsedLine(line_number=line_number, text=text, error=exc)
            continue

        yield ParsedLine(line_number=line_number, text=text, command=command)
