"""Fragment models passed from the block segmenter to the paragraph grouper"""

from enum import Enum
from typing import Annotated, Literal, Union

from pydantic import BaseModel, Field


class ListKind(str, Enum):
    unordered = "ul"
    ordered = "ol"


class Blank(BaseModel):
    """A blank input line; closes paragraphs and lists, renders nothing."""
    kind: Literal["blank"] = "blank"


class Heading(BaseModel):
    kind: Literal["heading"] = "heading"
    level: int = Field(ge=1, le=6)
    content: str                    # already inline-formatted HTML

    @property
    def html(self) -> str:
        return f"<h{self.level}>{self.content}</h{self.level}>"


class ListOpen(BaseModel):
    kind: Literal["list_open"] = "list_open"
    list_kind: ListKind

    @property
    def html(self) -> str:
        return f"<{self.list_kind.value}>"


class ListClose(BaseModel):
    kind: Literal["list_close"] = "list_close"
    list_kind: ListKind

    @property
    def html(self) -> str:
        return f"</{self.list_kind.value}>"


class ListItem(BaseModel):
    kind: Literal["list_item"] = "list_item"
    content: str                    # already inline-formatted HTML

    @property
    def html(self) -> str:
        return f"<li>{self.content}</li>"


class RawText(BaseModel):
    """A trimmed text line awaiting paragraph grouping; not formatted yet."""
    kind: Literal["raw_text"] = "raw_text"
    content: str


class PreformattedBlock(BaseModel):
    """Finished HTML emitted by the grouper; passed through verbatim."""
    kind: Literal["preformatted"] = "preformatted"
    html: str


Fragment = Annotated[
    Union[Blank, Heading, ListOpen, ListClose, ListItem, RawText, PreformattedBlock],
    Field(discriminator="kind"),
]
