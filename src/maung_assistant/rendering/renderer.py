"""Markdown-subset renderer.

Hides the details of how assistant text becomes structured content. Only four
constructs are recognized: fenced code blocks, inline code, bold and line
breaks. Anything else, including malformed markdown, is literal text.
"""

import html
import re
from collections.abc import Callable, Iterator

from ..config import DEFAULT_CODE_LANGUAGE
from .models import CodeBlock, ContentBlock, Emphasis, InlineCode, LineBreak, TextRun

# Opening fence with an optional word tag, then a mandatory newline
_FENCE_RE = re.compile(r"```(\w+)?\n([\s\S]*?)```")
_INLINE_CODE_RE = re.compile(r"`([^`]+)`")
_BOLD_RE = re.compile(r"\*\*([^*]+)\*\*")


def neutralize(text: str) -> str:
    """Escape ``&``, ``<``, ``>``, ``"`` and ``'`` so no markup survives."""
    return html.escape(text, quote=True)


def _split(
    text: str,
    pattern: re.Pattern[str],
    make: Callable[[re.Match[str]], ContentBlock],
    rest: Callable[[str], Iterator[ContentBlock]],
) -> Iterator[ContentBlock]:
    """Yield ``make(match)`` for each match and ``rest(gap)`` for the text between."""
    pos = 0
    for match in pattern.finditer(text):
        if match.start() > pos:
            yield from rest(text[pos:match.start()])
        yield make(match)
        pos = match.end()
    if pos < len(text):
        yield from rest(text[pos:])


def _lines(text: str) -> Iterator[ContentBlock]:
    for i, line in enumerate(text.split("\n")):
        if i:
            yield LineBreak()
        if line:
            yield TextRun(text=line)


def _bold(text: str) -> Iterator[ContentBlock]:
    return _split(text, _BOLD_RE, lambda m: Emphasis(text=m.group(1)), _lines)


def _inline_code(text: str) -> Iterator[ContentBlock]:
    return _split(text, _INLINE_CODE_RE, lambda m: InlineCode(text=m.group(1)), _bold)


def _code_block(match: re.Match[str]) -> CodeBlock:
    return CodeBlock(
        language=match.group(1) or DEFAULT_CODE_LANGUAGE,
        code=match.group(2).strip(),
    )


def render(text: str) -> list[ContentBlock]:
    """Render assistant text into an ordered list of content blocks.

    Each stage only sees the text left over by the previous one: fenced
    blocks are consumed first, so backticks inside them are never read as
    inline code. Escaping happens once, up front, and is never undone.

    Args:
        text: Raw reply text from the backend

    Returns:
        Content blocks in display order (empty for empty input)
    """
    return list(_split(neutralize(text), _FENCE_RE, _code_block, _inline_code))


def render_plain(text: str) -> list[ContentBlock]:
    """Render user-authored text: escaped and split on newlines, no formatting."""
    return list(_lines(neutralize(text)))
