"""
Directive commands produced by the parser and the entries they apply to.
"""

from typing import Annotated, Literal, Union

from pydantic import BaseModel, ConfigDict, Field, TypeAdapter

from mtreespec.core.keywords import Keyword


class Set(BaseModel):
    """
    Assign metadata to the current entry (``/set type=dir size=384``).

    Params:
        keywords: Keyword assignments in source order, duplicates kept
    """

    model_config = ConfigDict(frozen=True)

    command: Literal["set"] = "set"
    keywords: tuple[Keyword, ...] = ()

    def __str__(self) -> str:
        """Return the canonical directive line.

        An empty set keeps the space after ``/set`` so that it parses back
        when fields are optional.
        """
        return "/set " + " ".join(str(keyword) for keyword in self.keywords)


class Unset(BaseModel):
    """Clear previously assigned metadata (``/unset``)."""

    model_config = ConfigDict(frozen=True)

    command: Literal["unset"] = "unset"

    def __str__(self) -> str:
        return "/unset"


Command = Annotated[Union[Set, Unset], Field(discriminator="command")]

COMMAND_ADAPTER: TypeAdapter[Command] = TypeAdapter(Command)


class Entry(BaseModel):
    """A path whose metadata is assembled from a stream of commands."""

    path: str
