"""
Shared test fixtures and utilities for the mtreespec test suite.
"""

import pytest

from mtreespec.config import ParserConfig
from mtreespec.parsing.parser import DirectiveParser


@pytest.fixture
def parser():
    """Directive parser with default options."""
    return DirectiveParser()


@pytest.fixture
def lenient_config():
    """Options that accept empty /set lines and identifier-shaped digests.

    Usage:
        def test_something(lenient_config):
            parse_command("/set ", lenient_config)
    """
    return ParserConfig(require_fields=False, strict_digests=False)
