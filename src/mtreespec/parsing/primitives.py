"""
Primitive value decoders for directive keywords.

Each decoder reads one atomic value at the cursor: an entry type tag, a
bounded unsigned integer, a timestamp, a hex digest or a path. On success the
cursor is advanced past the value; on failure a DirectiveParseError subclass is
raised and the cursor is left untouched.
"""

import re

from pydantic import ValidationError

from mtreespec.core.types import INT64_MAX, INT64_MIN, UINT32_MAX, EntryType, Timestamp
from mtreespec.exceptions.core import (
    DirectiveSyntaxError,
    IntegerDecodeError,
    InvalidDigestError,
    InvalidTimestampError,
    UnknownTypeError,
)
from mtreespec.parsing.cursor import Cursor

DIGITS_PATTERN = re.compile(r"[0-9]+")
SIGNED_DIGITS_PATTERN = re.compile(r"[+-]?[0-9]+")
TOKEN_PATTERN = re.compile(r"\S+")
IDENTIFIER_PATTERN = re.compile(r"[A-Za-z0-9_]+")
SHA256_PATTERN = re.compile(r"[0-9a-f]{64}")

ENTRY_TYPE_TAGS: tuple[tuple[str, EntryType], ...] = tuple(
    (entry_type.value, entry_type) for entry_type in EntryType
)


def _is_boundary(text: str, offset: int) -> bool:
    return offset == len(text) or text[offset].isspace()


def _token_at(cursor: Cursor) -> str:
    """Return the whitespace-delimited token at the cursor, possibly empty."""
    match = cursor.match(TOKEN_PATTERN)
    return match.group() if match else ""


def decode_entry_type(cursor: Cursor) -> EntryType:
    """
    Decode one of the seven entry type literals.

    The literal must be followed by whitespace or end of input, so neither
    prefixes ("di") nor extensions ("dirs") are accepted.

    Raises:
        UnknownTypeError: If no type literal matches as a whole token
    """
    for tag, entry_type in ENTRY_TYPE_TAGS:
        if cursor.startswith(tag):
            end = cursor.pos + len(tag)
            if _is_boundary(cursor.text, end):
                cursor.pos = end
                return entry_type

    token = _token_at(cursor)
    raise cursor.error(
        UnknownTypeError,
        f"Unknown entry type '{token}'",
        expected=" | ".join(tag for tag, _ in ENTRY_TYPE_TAGS),
    )


def _decode_int(
    cursor: Cursor, pattern: re.Pattern, minimum: int, maximum: int, what: str
) -> int:
    match = cursor.match(pattern)
    if match is None:
        raise cursor.error(
            IntegerDecodeError,
            f"Malformed {what}: expected decimal digits",
            expected="digits",
        )

    # int() only ever sees significant digits bounded by the target width
    text = match.group()
    digits = text.lstrip("+-").lstrip("0")
    max_digits = max(len(str(abs(minimum))), len(str(maximum)))
    if len(digits) > max_digits:
        value = None
    else:
        value = int(digits or "0")
        if text.startswith("-"):
            value = -value

    if value is None or not minimum <= value <= maximum:
        shown = text if len(text) <= 40 else f"{text[:40]}..."
        raise cursor.error(
            IntegerDecodeError,
            f"Integer overflow: {shown} does not fit {what}",
            expected=f"{what} in [{minimum}, {maximum}]",
        )

    cursor.pos = match.end()
    return value


def decode_uint(cursor: Cursor, bits: int) -> int:
    """
    Decode an unsigned decimal integer of the given bit width.

    Params:
        cursor: Input cursor
        bits: Target width, e.g. 32 for uid or 64 for size

    Returns:
        The decoded integer

    Raises:
        IntegerDecodeError: If there are no digits or the value overflows
    """
    return _decode_int(
        cursor, DIGITS_PATTERN, 0, 2**bits - 1, f"unsigned {bits}-bit integer"
    )


def decode_timestamp(cursor: Cursor) -> Timestamp:
    """
    Decode ``<seconds>.<nanoseconds>``.

    Seconds are a signed 64-bit integer and nanoseconds an unsigned 32-bit
    integer taken literally (``1.5`` is one second and five nanoseconds). The
    pair is validated as a whole once both parts are read.

    Raises:
        IntegerDecodeError: If either part is missing or overflows its width
        DirectiveSyntaxError: If the '.' separator is missing
        InvalidTimestampError: If the pair is not a representable instant
    """
    start = cursor.pos
    probe = Cursor(cursor.text, cursor.pos, cursor.line_number, cursor.error_level)

    seconds = _decode_int(
        probe, SIGNED_DIGITS_PATTERN, INT64_MIN, INT64_MAX, "signed 64-bit integer"
    )
    if not probe.consume("."):
        raise probe.error(
            DirectiveSyntaxError,
            "Timestamp is missing the '.' separator",
            expected="'.'",
        )
    nanoseconds = _decode_int(
        probe, DIGITS_PATTERN, 0, UINT32_MAX, "unsigned 32-bit integer"
    )

    try:
        timestamp = Timestamp(seconds=seconds, nanoseconds=nanoseconds)
    except ValidationError as exc:
        raise cursor.error(
            InvalidTimestampError,
            f"Invalid timestamp {seconds}.{nanoseconds}: not a representable instant",
            expected="seconds.nanoseconds with nanoseconds below 1000000000",
            position=start,
        ) from exc

    cursor.pos = probe.pos
    return timestamp


def decode_digest(cursor: Cursor, strict: bool = True) -> str:
    """
    Decode a SHA-256 hex digest token.

    Params:
        cursor: Input cursor
        strict: Require exactly 64 lowercase hex characters; otherwise accept
            any identifier-shaped token

    Raises:
        InvalidDigestError: If the token is not an acceptable digest
    """
    if strict:
        match = cursor.match(SHA256_PATTERN)
        if match is not None and _is_boundary(cursor.text, match.end()):
            cursor.pos = match.end()
            return match.group()

        token = _token_at(cursor)
        raise cursor.error(
            InvalidDigestError,
            f"Invalid sha256 digest '{token}': expected 64 lowercase hex characters, "
            f"got {len(token)} characters",
            expected="64 hex characters [0-9a-f]",
        )

    match = cursor.match(IDENTIFIER_PATTERN)
    if match is None:
        raise cursor.error(
            InvalidDigestError,
            f"Invalid sha256 digest '{_token_at(cursor)}'",
            expected="digest token [A-Za-z0-9_]+",
        )
    cursor.pos = match.end()
    return match.group()


def decode_path(cursor: Cursor) -> str:
    """
    Decode a path value verbatim.

    The path is the whole value region up to the next whitespace, so '.', '/'
    and leading '../' markers are kept as written.

    Raises:
        DirectiveSyntaxError: If the value region is empty
    """
    match = cursor.match(TOKEN_PATTERN)
    if match is None:
        raise cursor.error(DirectiveSyntaxError, "Empty path value", expected="path")
    cursor.pos = match.end()
    return match.group()
