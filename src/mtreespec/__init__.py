"""
mtreespec - Parser for mtree-style metadata directive lines

mtreespec decodes ``/set`` and ``/unset`` directive lines into typed, immutable
command values for manifest and verification tools.
"""

from importlib.metadata import version

from mtreespec.config import DEFAULT_CONFIG, ParserConfig
from mtreespec.core import Command, EntryType, Keyword, Set, Timestamp, Unset
from mtreespec.exceptions import DirectiveParseError
from mtreespec.parsing import DirectiveParser, parse_command, parse_lines

__version__ = version("mtreespec")

__all__ = [
    "__version__",
    "Command",
    "EntryType",
    "Keyword",
    "Set",
    "Timestamp",
    "Unset",
    "DirectiveParseError",
    "DirectiveParser",
    "ParserConfig",
    "DEFAULT_CONFIG",
    "parse_command",
    "parse_lines",
]
