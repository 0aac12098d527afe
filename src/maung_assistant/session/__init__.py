"""Session module for maung_assistant.

Module structure:
- state.py: Conversation state (message log, busy flag)
- events.py: Listener interface for the presentation surface
- controller.py: Request orchestration (how a send becomes a reply)
"""

from .controller import SessionController, render_message
from .events import SessionListener
from .state import ChatSession

__all__ = [
    "ChatSession",
    "SessionController",
    "SessionListener",
    "render_message",
]
