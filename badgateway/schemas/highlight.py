"""
Pydantic schemas for JSON highlighting.
"""

from typing import Literal

from pydantic import BaseModel, ConfigDict


# Style classes understood by the rendering layer
StyleClass = Literal["key", "string", "number", "keyword", "punctuation", "plain"]


class Span(BaseModel):
    """A fragment of text and the style used to draw it."""
    model_config = ConfigDict(frozen=True)

    text: str
    style: StyleClass


class FormatRequest(BaseModel):
    """Schema for formatting arbitrary response text."""
    text: str


class FormatResponse(BaseModel):
    """Pretty-printed text and its highlighted spans."""
    formatted: str
    spans: list[Span]
