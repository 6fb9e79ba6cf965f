from attrs import evolve, frozen

from mtreespec.exceptions.core import ErrorLevel


@frozen
class ParserConfig:
    """Options controlling how strictly directive lines are decoded.

    Attributes:
      require_fields: Reject ``/set`` with no keywords.
      strict_digests: Require 64 lowercase hex characters for ``sha256``;
        when off any identifier-shaped token is accepted.
      skip_blank_lines: Let ``parse_lines`` pass over whitespace-only lines.
      error_level: Detail level of parse error messages.
    """

    require_fields: bool = True
    strict_digests: bool = True
    skip_blank_lines: bool = True
    error_level: ErrorLevel = ErrorLevel.USER

    def replace(self, **changes) -> "ParserConfig":
        """Return a copy with the given options overridden."""
        return evolve(self, **changes)


DEFAULT_CONFIG = ParserConfig()
