"""
Keyword field and keyword sequence decoders.

A keyword is a ``name=value`` pair. The name selects the value decoder from an
ordered table; a sequence is one or more keywords separated by whitespace runs.
"""

import re
from collections.abc import Callable

from mtreespec.config import DEFAULT_CONFIG, ParserConfig
from mtreespec.core.keywords import Keyword, Link, Sha256, Size, Time, Type, Uid
from mtreespec.exceptions.core import (
    DirectiveParseError,
    DirectiveSyntaxError,
    TrailingInputError,
    UnknownKeywordError,
)
from mtreespec.parsing.cursor import Cursor
from mtreespec.parsing.primitives import (
    decode_digest,
    decode_entry_type,
    decode_path,
    decode_timestamp,
    decode_uint,
)

KeywordDecoder = Callable[[Cursor, ParserConfig], Keyword]

NAME_PATTERN = re.compile(r"(?P<name>[^\s=]+)(?P<equals>=)?")

# First match wins: sha256digest must stay ahead of sha256
KEYWORD_DECODERS: tuple[tuple[str, KeywordDecoder], ...] = (
    ("type", lambda cursor, config: Type(value=decode_entry_type(cursor))),
    ("uid", lambda cursor, config: Uid(value=decode_uint(cursor, 32))),
    ("time", lambda cursor, config: Time(value=decode_timestamp(cursor))),
    ("size", lambda cursor, config: Size(value=decode_uint(cursor, 64))),
    (
        "sha256digest",
        lambda cursor, config: Sha256(
            value=decode_digest(cursor, strict=config.strict_digests)
        ),
    ),
    (
        "sha256",
        lambda cursor, config: Sha256(
            value=decode_digest(cursor, strict=config.strict_digests)
        ),
    ),
    ("link", lambda cursor, config: Link(value=decode_path(cursor))),
)

KEYWORD_NAMES = frozenset(name for name, _ in KEYWORD_DECODERS)


def decode_keyword(cursor: Cursor, config: ParserConfig = DEFAULT_CONFIG) -> Keyword:
    """
    Decode a single ``name=value`` keyword at the cursor.

    Params:
        cursor: Input cursor
        config: Parser options

    Returns:
        The decoded keyword

    Raises:
        UnknownKeywordError: If the name before '=' is not recognized
        DirectiveSyntaxError: If there is no keyword or the '=' is missing
        DirectiveParseError: Any error raised by the value decoder
    """
    start = cursor.pos
    for name, decoder in KEYWORD_DECODERS:
        if cursor.consume(f"{name}="):
            try:
                return decoder(cursor, config)
            except DirectiveParseError:
                cursor.pos = start
                raise

    match = cursor.match(NAME_PATTERN)
    if match is None:
        raise cursor.error(
            DirectiveSyntaxError,
            "Expected a keyword",
            expected="name=value",
        )

    name = match.group("name")
    if match.group("equals"):
        raise cursor.error(
            UnknownKeywordError,
            f"Unknown keyword '{name}'",
            expected=" | ".join(sorted(KEYWORD_NAMES)),
        )
    if name in KEYWORD_NAMES:
        raise cursor.error(
            DirectiveSyntaxError,
            f"Missing '=' after keyword '{name}'",
            expected="'='",
            position=match.end(),
        )
    raise cursor.error(
        DirectiveSyntaxError,
        f"Expected a keyword, got '{name}'",
        expected="name=value",
    )


def decode_keywords(
    cursor: Cursor, config: ParserConfig = DEFAULT_CONFIG
) -> list[Keyword]:
    """
    Decode whitespace-separated keywords until the end of input.

    Empty input yields an empty list. Each keyword must be followed by a
    whitespace run or the end of input, and each whitespace run must be
    followed by another keyword. Leading or trailing whitespace is therefore
    rejected rather than ignored; callers strip line terminators only.

    Params:
        cursor: Input cursor
        config: Parser options

    Returns:
        Keywords in source order, duplicates kept

    Raises:
        DirectiveSyntaxError: If keywords are not separated by whitespace
        DirectiveParseError: Any error raised by a keyword decoder
    """
    keywords: list[Keyword] = []
    if cursor.at_end():
        return keywords

    keywords.append(decode_keyword(cursor, config))
    while not cursor.at_end():
        if not cursor.consume_whitespace():
            raise cursor.error(
                DirectiveSyntaxError,
                "Keywords must be separated by whitespace",
                expected="whitespace",
            )
        keywords.append(decode_keyword(cursor, config))

    return keywords


def parse_keyword(text: str, config: ParserConfig | None = None) -> Keyword:
    """
    Decode text that holds exactly one keyword.

    Raises:
        DirectiveParseError: If the text is not a single well-formed keyword
    """
    config = config or DEFAULT_CONFIG
    cursor = Cursor(text, error_level=config.error_level)
    keyword = decode_keyword(cursor, config)
    if not cursor.at_end():
        raise cursor.error(
            TrailingInputError,
            f"Unexpected input after keyword: '{text[cursor.pos:]}'",
            expected="end of input",
        )
    return keyword


def parse_keywords(text: str, config: ParserConfig | None = None) -> list[Keyword]:
    """
    Decode text that holds a whitespace-separated keyword sequence.

    Raises:
        DirectiveParseError: If any part of the text fails to decode
    """
    config = config or DEFAULT_CONFIG
    return decode_keywords(Cursor(text, error_level=config.error_level), config)
