"""Rendering module for maung_assistant.

Turns assistant replies written in a small markdown subset into typed,
injection-safe content blocks.
"""

from .html import to_html
from .models import CodeBlock, ContentBlock, Emphasis, InlineCode, LineBreak, TextRun
from .renderer import neutralize, render, render_plain

__all__ = [
    "CodeBlock",
    "ContentBlock",
    "Emphasis",
    "InlineCode",
    "LineBreak",
    "TextRun",
    "neutralize",
    "render",
    "render_plain",
    "to_html",
]
