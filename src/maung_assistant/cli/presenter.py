"""Terminal presentation surface.

Turns session events into Rich output. Block payloads arrive HTML-escaped;
terminal text is never parsed as markup here, so they are unescaped for
display only.
"""

import html

from rich.console import Console, Group, RenderableType
from rich.panel import Panel
from rich.status import Status
from rich.syntax import Syntax
from rich.text import Text

from ..config import SUGGESTED_QUESTIONS, WELCOME_TEXT, WELCOME_TITLE
from ..models import Message, Role
from ..rendering import CodeBlock, ContentBlock, Emphasis, InlineCode, LineBreak, TextRun
from ..session import SessionListener


def blocks_to_renderable(blocks: list[ContentBlock]) -> RenderableType:
    """Build a Rich renderable from content blocks, preserving their order."""
    parts: list[RenderableType] = []
    line = Text(overflow="fold")

    for block in blocks:
        if isinstance(block, TextRun):
            line.append(html.unescape(block.text))
        elif isinstance(block, Emphasis):
            line.append(html.unescape(block.text), style="bold")
        elif isinstance(block, InlineCode):
            line.append(html.unescape(block.text), style="bold magenta")
        elif isinstance(block, LineBreak):
            line.append("\n")
        elif isinstance(block, CodeBlock):
            if line:
                parts.append(line)
                line = Text(overflow="fold")
            parts.append(Syntax(
                html.unescape(block.code),
                block.language or "text",
                theme="ansi_dark",
                word_wrap=True,
            ))

    if line:
        parts.append(line)
    return Group(*parts)


class ConsolePresenter(SessionListener):
    """Session listener that prints to a Rich console."""

    def __init__(self, console: Console, echo_user: bool = True) -> None:
        self.console = console
        self.echo_user = echo_user
        self._status: Status | None = None

    def show_welcome(self) -> None:
        body = Text(WELCOME_TEXT + "\n\n")
        for i, question in enumerate(SUGGESTED_QUESTIONS, 1):
            body.append(f"  {i}. ", style="bold cyan")
            body.append(question + "\n")
        body.append("\nType a number to ask a suggestion, /new for a new chat, /exit to leave.", style="dim")
        self.console.print(Panel(body, title=f"[bold]{WELCOME_TITLE}[/bold]", border_style="magenta"))

    def typing_started(self) -> None:
        self._status = self.console.status("[dim]Si Maung is typing...[/dim]")
        self._status.start()

    def typing_stopped(self) -> None:
        if self._status is not None:
            self._status.stop()
            self._status = None

    def message_added(self, message: Message, blocks: list[ContentBlock]) -> None:
        if message.role is Role.USER:
            if self.echo_user:
                self.console.print(Text.assemble(("You: ", "bold yellow"), message.content))
            return
        self.console.print(Text("Si Maung:", style="bold green"))
        self.console.print(blocks_to_renderable(blocks))
        self.console.print()

    def error(self, text: str) -> None:
        self.console.print(Text.assemble(("Error: ", "bold red"), text))

    def session_reset(self) -> None:
        self.console.clear()
        self.show_welcome()
