"""HTML serialization of content blocks.

Payloads are inserted as-is: they were neutralized by the renderer, and only
the tags emitted here are structural.
"""

from collections.abc import Iterable

from .models import CodeBlock, ContentBlock, Emphasis, InlineCode, LineBreak, TextRun


def block_to_html(block: ContentBlock) -> str:
    """Serialize a single content block."""
    if isinstance(block, TextRun):
        return block.text
    if isinstance(block, Emphasis):
        return f"<strong>{block.text}</strong>"
    if isinstance(block, InlineCode):
        return f"<code>{block.text}</code>"
    if isinstance(block, CodeBlock):
        language = block.language or ""
        return f'<pre><code data-language="{language}">{block.code}</code></pre>'
    if isinstance(block, LineBreak):
        return "<br>"
    raise TypeError(f"Unsupported content block: {type(block).__name__}")


def to_html(blocks: Iterable[ContentBlock]) -> str:
    """Serialize rendered blocks in order."""
    return "".join(block_to_html(block) for block in blocks)
