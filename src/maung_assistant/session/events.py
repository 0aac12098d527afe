"""Listener interface for session events.

Hides how the presentation surface receives updates from the controller.
Subclass and override only the hooks you need; the defaults do nothing.
"""

from ..models import Message
from ..rendering import ContentBlock


class SessionListener:
    """Receives controller events in the order they happen."""

    def typing_started(self) -> None:
        """A request is now in flight."""

    def typing_stopped(self) -> None:
        """The in-flight request has resolved, successfully or not."""

    def message_added(self, message: Message, blocks: list[ContentBlock]) -> None:
        """A message was appended to the log.

        Args:
            message: The appended message
            blocks: Display content for it, in order
        """

    def error(self, text: str) -> None:
        """A request failed; ``text`` is meant for the user."""

    def session_reset(self) -> None:
        """The conversation was cleared; redraw the initial greeting."""
