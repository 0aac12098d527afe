"""Provider factory functions for CLI.

Centralizes creation of the transport and storage from environment variables.
Hides configuration details from command implementations.
"""

import logging
import os

from rich.console import Console
from rich.logging import RichHandler

from ..storage import KeyValueStore, create_key_value_store
from ..transport import AITransport, create_transport

DEFAULT_BASE_URL = "http://localhost:8080"
DEFAULT_STORAGE_PATH = "~/.maung/assistant.db"


def setup_logging(level: str | None = None, console: Console | None = None) -> None:
    """Route log records through Rich.

    Environment variables:
        MAUNG_LOG_LEVEL: Logging level name (default: WARNING)
    """
    level_name = (level or os.getenv("MAUNG_LOG_LEVEL", "WARNING")).upper()
    logging.basicConfig(
        level=getattr(logging, level_name, logging.WARNING),
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=console, rich_tracebacks=True, show_path=False)],
        force=True,
    )


def get_transport() -> AITransport:
    """Create the AI transport from environment variables.

    Environment variables:
        MAUNG_BASE_URL: Server root URL (default: http://localhost:8080)
        MAUNG_TIMEOUT: Request timeout in seconds (default: no timeout)
    """
    timeout = os.getenv("MAUNG_TIMEOUT")
    return create_transport(
        "http",
        base_url=os.getenv("MAUNG_BASE_URL", DEFAULT_BASE_URL),
        timeout=float(timeout) if timeout else None,
    )


def get_storage() -> KeyValueStore:
    """Create the key-value storage from environment variables.

    Environment variables:
        MAUNG_STORAGE: Backend type (sqlite or memory; default: sqlite)
        MAUNG_STORAGE_PATH: SQLite file (default: ~/.maung/assistant.db)
        MAUNG_PROFILE: Storage profile name (default: default)
    """
    backend = os.getenv("MAUNG_STORAGE", "sqlite").lower()
    if backend == "sqlite":
        return create_key_value_store(
            "sqlite",
            path=os.getenv("MAUNG_STORAGE_PATH", DEFAULT_STORAGE_PATH),
            profile=os.getenv("MAUNG_PROFILE", "default"),
        )
    return create_key_value_store(backend)
