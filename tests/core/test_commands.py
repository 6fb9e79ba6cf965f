"""
Tests for keyword and command value models.

This module covers construction limits, canonical rendering, immutability and
serialization through the pydantic adapters.
"""

import pytest
from pydantic import ValidationError

from mtreespec.core import (
    COMMAND_ADAPTER,
    KEYWORD_ADAPTER,
    Entry,
    EntryType,
    Link,
    Set,
    Sha256,
    Size,
    Time,
    Timestamp,
    Type,
    Uid,
    Unset,
)

DIGEST = "e3b0c44298fc1c149afbf4c8996fb92427ae41e4649b934ca495991b7852b855"


class TestKeywordModels:
    """Tests for the individual keyword variants."""

    def test_uid_width(self):
        """Test that uid values are limited to 32 bits."""
        assert Uid(value=4294967295).value == 4294967295
        with pytest.raises(ValidationError):
            Uid(value=4294967296)
        with pytest.raises(ValidationError):
            Uid(value=-1)

    def test_size_width(self):
        """Test that size values are limited to 64 bits."""
        assert Size(value=18446744073709551615).value == 18446744073709551615
        with pytest.raises(ValidationError):
            Size(value=18446744073709551616)

    def test_link_must_not_be_empty(self):
        with pytest.raises(ValidationError):
            Link(value="")

    def test_keyword_equality_is_by_value(self):
        assert Type(value=EntryType.DIR) == Type(value=EntryType.DIR)
        assert Type(value=EntryType.DIR) != Type(value=EntryType.FILE)
        assert Uid(value=1) != Size(value=1)

    def test_keywords_are_frozen(self):
        keyword = Size(value=10)
        with pytest.raises(ValidationError):
            keyword.value = 11

    def test_rendering(self):
        """Test that each keyword renders as name=value."""
        cases = [
            (Type(value=EntryType.SOCKET), "type=socket"),
            (Uid(value=0), "uid=0"),
            (
                Time(value=Timestamp(seconds=1769640373, nanoseconds=412526597)),
                "time=1769640373.412526597",
            ),
            (Size(value=384), "size=384"),
            (Sha256(value=DIGEST), f"sha256={DIGEST}"),
            (Link(value="../../foo.bar"), "link=../../foo.bar"),
        ]
        for keyword, expected in cases:
            assert str(keyword) == expected

    def test_adapter_selects_variant_by_tag(self):
        """Test discriminated validation from plain data."""
        keyword = KEYWORD_ADAPTER.validate_python({"keyword": "type", "value": "fifo"})
        assert keyword == Type(value=EntryType.FIFO)

        keyword = KEYWORD_ADAPTER.validate_python(
            {"keyword": "time", "value": {"seconds": 1, "nanoseconds": 2}}
        )
        assert keyword == Time(value=Timestamp(seconds=1, nanoseconds=2))

    def test_adapter_rejects_unknown_tag(self):
        with pytest.raises(ValidationError):
            KEYWORD_ADAPTER.validate_python({"keyword": "mode", "value": "0755"})


class TestCommandModels:
    """Tests for Set and Unset."""

    def test_set_keeps_order_and_duplicates(self):
        keywords = [Size(value=1), Type(value=EntryType.DIR), Size(value=2)]
        command = Set(keywords=keywords)
        assert list(command.keywords) == keywords

    def test_set_rendering(self):
        command = Set(keywords=[Type(value=EntryType.DIR), Size(value=384)])
        assert str(command) == "/set type=dir size=384"

    def test_empty_set_rendering(self):
        assert str(Set()) == "/set "

    def test_unset_rendering(self):
        assert str(Unset()) == "/unset"

    def test_unset_instances_are_equal(self):
        assert Unset() == Unset()
        assert Unset() != Set()

    def test_json_serialization(self):
        """Test that commands survive a JSON dump and load."""
        command = Set(
            keywords=[
                Type(value=EntryType.LINK),
                Link(value="./target"),
                Time(value=Timestamp(seconds=-5, nanoseconds=7)),
            ]
        )
        payload = COMMAND_ADAPTER.dump_json(command)
        assert COMMAND_ADAPTER.validate_json(payload) == command

        assert COMMAND_ADAPTER.validate_python({"command": "unset"}) == Unset()


class TestEntry:
    """Tests for the Entry model."""

    def test_entry_holds_path(self):
        assert Entry(path="./usr/bin").path == "./usr/bin"
