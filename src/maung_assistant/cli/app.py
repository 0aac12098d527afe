"""Main CLI application using Typer."""
import asyncio
import logging

import typer
from dotenv import load_dotenv
from rich.console import Console
from rich.table import Table

from ..config import SUGGESTED_QUESTIONS
from ..exceptions import StorageError
from ..session import ChatSession, SessionController, SessionListener, render_message
from ..storage import HistoryStore, KeyValueStore, create_key_value_store
from .presenter import ConsolePresenter, blocks_to_renderable
from .providers import get_storage, get_transport, setup_logging

# Load environment variables
load_dotenv()

# Create Typer app
app = typer.Typer(
    name="maung-assistant",
    help="Si Maung, the MaungDB assistant, in your terminal",
    no_args_is_help=True,
    add_completion=True,
)

# Console for rich output
console = Console()

logger = logging.getLogger(__name__)

EXIT_COMMANDS = ("/exit", "/quit", "q")


@app.callback()
def main_options(
    log_level: str | None = typer.Option(
        None,
        "--log-level",
        "-l",
        help="Logging level (overrides MAUNG_LOG_LEVEL)"
    )
):
    """Configure logging for every command."""
    setup_logging(log_level, console)


async def _open_storage(storage: KeyValueStore) -> KeyValueStore:
    """Connect ``storage``, falling back to an in-memory store if it cannot be opened.

    The session then starts with no history and nothing is saved past exit.
    """
    try:
        await storage.connect()
        return storage
    except StorageError as e:
        logger.warning("Storage unavailable, using in-memory history: %s", e)
        console.print("[yellow]Warning: history storage unavailable, this chat will not be saved[/yellow]")
        fallback = create_key_value_store("memory")
        await fallback.connect()
        return fallback


def _resolve_input(user_input: str, session: ChatSession) -> str:
    """Map a suggestion number to its question on an empty session."""
    text = user_input.strip()
    if not len(session) and text.isdigit():
        index = int(text) - 1
        if 0 <= index < len(SUGGESTED_QUESTIONS):
            return SUGGESTED_QUESTIONS[index]
    return text


@app.command()
def chat():
    """Interactive chat with the assistant."""
    async def _chat():
        storage = get_storage()
        transport = get_transport()

        try:
            storage = await _open_storage(storage)
            session = await ChatSession.create(HistoryStore(storage))
            controller = SessionController(session, transport)
            presenter = ConsolePresenter(console)
            controller.add_listener(presenter)

            console.print("[bold cyan]MaungDB Assistant[/bold cyan]")
            if len(session):
                controller.replay()
            else:
                presenter.show_welcome()
            presenter.echo_user = False

            while True:
                try:
                    user_input = console.input("[bold yellow]You:[/bold yellow] ")
                except (KeyboardInterrupt, EOFError):
                    console.print("\n[dim]Goodbye![/dim]")
                    break

                command = user_input.strip().lower()
                if command in EXIT_COMMANDS:
                    console.print("[dim]Goodbye![/dim]")
                    break
                if command == "/new":
                    await controller.new_chat()
                    continue

                question = _resolve_input(user_input, session)
                if question != user_input.strip():
                    await controller.ask(question)
                else:
                    await controller.send(user_input)
        finally:
            await transport.close()
            await storage.disconnect()

    asyncio.run(_chat())


class _ErrorCollector(SessionListener):
    def __init__(self) -> None:
        self.errors: list[str] = []

    def error(self, text: str) -> None:
        self.errors.append(text)


@app.command()
def ask(
    question: str = typer.Argument(..., help="Question to ask"),
    no_history: bool = typer.Option(
        False,
        "--no-history",
        help="Do not send or update the persisted conversation"
    )
):
    """Ask a single question and print the reply."""
    async def _ask() -> int:
        # A detached session never reads or writes the saved record
        storage = create_key_value_store("memory") if no_history else get_storage()
        transport = get_transport()

        try:
            storage = await _open_storage(storage)
            session = await ChatSession.create(HistoryStore(storage))
            controller = SessionController(session, transport)
            collector = _ErrorCollector()
            controller.add_listener(ConsolePresenter(console, echo_user=False))
            controller.add_listener(collector)

            await controller.send(question)
            return 1 if collector.errors else 0
        finally:
            await transport.close()
            await storage.disconnect()

    code = asyncio.run(_ask())
    if code:
        raise typer.Exit(code=code)


@app.command()
def history():
    """Show the persisted conversation history."""
    async def _history():
        storage = get_storage()
        try:
            await storage.connect()
            messages = await HistoryStore(storage).load()
        except StorageError as e:
            console.print(f"[red]Error: {e}[/red]")
            raise typer.Exit(code=1)
        finally:
            await storage.disconnect()

        if not messages:
            console.print("[dim]No history yet.[/dim]")
            return

        table = Table(title=f"History ({len(messages)} messages)", show_lines=True)
        table.add_column("#", style="dim", justify="right")
        table.add_column("Role", style="cyan")
        table.add_column("Content")
        for i, message in enumerate(messages, 1):
            table.add_row(str(i), message.role.value, blocks_to_renderable(render_message(message)))
        console.print(table)

    asyncio.run(_history())


@app.command()
def clear(
    yes: bool = typer.Option(
        False,
        "--yes",
        "-y",
        help="Skip confirmation"
    )
):
    """Delete the persisted conversation history."""
    if not yes and not typer.confirm("Delete the saved conversation?"):
        console.print("[dim]Aborted.[/dim]")
        return

    async def _clear():
        storage = get_storage()
        try:
            await storage.connect()
            await HistoryStore(storage).clear()
            console.print("[green]History cleared.[/green]")
        except StorageError as e:
            console.print(f"[red]Error: {e}[/red]")
            raise typer.Exit(code=1)
        finally:
            await storage.disconnect()

    asyncio.run(_clear())


def main():
    """Main entry point for the CLI."""
    app()


if __name__ == "__main__":
    main()
