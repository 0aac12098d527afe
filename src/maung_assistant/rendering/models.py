"""Content block models produced by the renderer.

A rendered reply is an ordered list of blocks. Consumers concatenate them in
order; payloads are already neutralized against markup injection.
"""

from typing import Annotated, Literal

from pydantic import BaseModel, ConfigDict, Field


class TextRun(BaseModel):
    """Literal text, safe to display verbatim."""

    model_config = ConfigDict(frozen=True)

    type: Literal["text"] = "text"
    text: str


class Emphasis(BaseModel):
    """Bold-styled text."""

    model_config = ConfigDict(frozen=True)

    type: Literal["emphasis"] = "emphasis"
    text: str


class InlineCode(BaseModel):
    """Inline code span."""

    model_config = ConfigDict(frozen=True)

    type: Literal["inline_code"] = "inline_code"
    text: str


class CodeBlock(BaseModel):
    """Fenced code block."""

    model_config = ConfigDict(frozen=True)

    type: Literal["code_block"] = "code_block"
    language: str | None = Field(default=None, description="Language tag of the fence")
    code: str


class LineBreak(BaseModel):
    """Explicit line break between text runs."""

    model_config = ConfigDict(frozen=True)

    type: Literal["line_break"] = "line_break"


ContentBlock = Annotated[
    TextRun | Emphasis | InlineCode | CodeBlock | LineBreak,
    Field(discriminator="type"),
]
