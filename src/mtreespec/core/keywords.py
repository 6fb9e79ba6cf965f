"""
Keyword values carried by ``/set`` directives.

Each keyword is a frozen pydantic model tagged with its canonical name so that
the ``Keyword`` union can be validated and serialized as a discriminated union.
"""

from typing import Annotated, Literal, Union

from pydantic import BaseModel, ConfigDict, Field, TypeAdapter

from mtreespec.core.types import UINT32_MAX, UINT64_MAX, EntryType, Timestamp


class _KeywordBase(BaseModel):
    model_config = ConfigDict(frozen=True)

    def __str__(self) -> str:
        """Render the keyword as it appears in a directive line."""
        return f"{self.keyword}={self.value}"


class Type(_KeywordBase):
    """Entry kind (``type=dir``)."""

    keyword: Literal["type"] = "type"
    value: EntryType

    def __str__(self) -> str:
        return f"type={self.value.value}"


class Uid(_KeywordBase):
    """Owning user id (``uid=1000``)."""

    keyword: Literal["uid"] = "uid"
    value: int = Field(ge=0, le=UINT32_MAX)


class Time(_KeywordBase):
    """Modification time (``time=1630456800.0``)."""

    keyword: Literal["time"] = "time"
    value: Timestamp


class Size(_KeywordBase):
    """Size in bytes (``size=384``)."""

    keyword: Literal["size"] = "size"
    value: int = Field(ge=0, le=UINT64_MAX)


class Sha256(_KeywordBase):
    """Content digest, accepted as ``sha256=`` or ``sha256digest=``."""

    keyword: Literal["sha256"] = "sha256"
    value: str = Field(min_length=1)


class Link(_KeywordBase):
    """Symlink target, kept exactly as written."""

    keyword: Literal["link"] = "link"
    value: str = Field(min_length=1)


Keyword = Annotated[
    Union[Type, Uid, Time, Size, Sha256, Link], Field(discriminator="keyword")
]

KEYWORD_ADAPTER: TypeAdapter[Keyword] = TypeAdapter(Keyword)
