"""
mtreespec parsing components.

This package provides the primitive value decoders, the keyword and keyword
sequence decoders and the directive line parser.
"""

from mtreespec.parsing.cursor import Cursor
from mtreespec.parsing.keywords import (
    KEYWORD_DECODERS,
    KEYWORD_NAMES,
    decode_keyword,
    decode_keywords,
    parse_keyword,
    parse_keywords,
)
from mtreespec.parsing.parser import (
    DirectiveParser,
    ParsedLine,
    parse_command,
    parse_lines,
)
from mtreespec.parsing.primitives import (
    decode_digest,
    decode_entry_type,
    decode_path,
    decode_timestamp,
    decode_uint,
)

__all__ = [
    "Cursor",
    "KEYWORD_DECODERS",
    "KEYWORD_NAMES",
    "decode_keyword",
    "decode_keywords",
    "parse_keyword",
    "parse_keywords",
    "DirectiveParser",
    "ParsedLine",
    "parse_command",
    "parse_lines",
    "decode_digest",
    "decode_entry_type",
    "decode_path",
    "decode_timestamp",
    "decode_uint",
]
