"""
maung_assistant: conversational assistant engine for the MaungDB web client.

Each module hides one design decision: how replies are rendered, where
history is persisted, how the backend is reached, and how a send is
sequenced.
"""

__version__ = "0.1.0"

from .exceptions import AssistantError, StorageError, TransportError
from .models import Message, Role
from .rendering import ContentBlock, render
from .session import ChatSession, SessionController, SessionListener
from .storage import HistoryStore, KeyValueStore, create_key_value_store
from .transport import AITransport, ChatRequest, ChatResponse, create_transport

__all__ = [
    "AITransport",
    "AssistantError",
    "ChatRequest",
    "ChatResponse",
    "ChatSession",
    "ContentBlock",
    "HistoryStore",
    "KeyValueStore",
    "Message",
    "Role",
    "SessionController",
    "SessionListener",
    "StorageError",
    "TransportError",
    "create_key_value_store",
    "create_transport",
    "render",
]
