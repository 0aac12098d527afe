"""Storage module for maung_assistant.

Provides string-keyed persistence and the bounded history record built on it.
"""

from .base import KeyValueStore
from .factory import create_key_value_store
from .history import HistoryStore
from .in_memory import InMemoryKeyValueStore

__all__ = [
    "HistoryStore",
    "InMemoryKeyValueStore",
    "KeyValueStore",
    "create_key_value_store",
]
