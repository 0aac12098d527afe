"""Request orchestration for a chat session.

SessionController is the single entry point for user-initiated sends. It
enforces at-most-one request in flight by dropping sends while the session is
busy, turns every failure into an ``error`` event, and never lets an
exception escape ``send``.
"""

import logging

from ..config import (
    CLEAR_ERROR_PREFIX,
    CONNECTION_ERROR_PREFIX,
    CONTEXT_WINDOW,
    GENERIC_ERROR_MESSAGE,
)
from ..exceptions import TransportError
from ..models import Message, Role
from ..rendering import ContentBlock, render, render_plain
from ..transport import AITransport, ChatRequest
from .events import SessionListener
from .state import ChatSession

logger = logging.getLogger(__name__)


def render_message(message: Message) -> list[ContentBlock]:
    """Display content for a message: markdown for the assistant, plain for the user."""
    if message.role is Role.ASSISTANT:
        return render(message.content)
    return render_plain(message.content)


class SessionController:
    """Drives a ChatSession against an AI transport and notifies listeners."""

    def __init__(
        self,
        session: ChatSession,
        transport: AITransport,
        context_window: int = CONTEXT_WINDOW,
    ) -> None:
        self.session = session
        self.transport = transport
        self.context_window = context_window
        self._listeners: list[SessionListener] = []

    def add_listener(self, listener: SessionListener) -> None:
        self._listeners.append(listener)

    def remove_listener(self, listener: SessionListener) -> None:
        if listener in self._listeners:
            self._listeners.remove(listener)

    def _emit(self, event: str, *args: object) -> None:
        for listener in list(self._listeners):
            try:
                getattr(listener, event)(*args)
            except Exception:
                logger.exception("Listener %r failed handling '%s'", listener, event)

    async def send(self, raw_input: str) -> None:
        """Send a user message and wait for the reply.

        Empty input and sends while a request is in flight are dropped
        silently. All outcomes end with ``typing_stopped`` and an idle session.
        """
        message = (raw_input or "").strip()
        if not message:
            logger.debug("Ignoring empty input")
            return
        if self.session.busy:
            logger.debug("Ignoring send while a request is in flight")
            return

        user_message = self.session.append(Role.USER, message)
        self._emit("message_added", user_message, render_plain(user_message.content))

        self.session.set_busy(True)
        self._emit("typing_started")
        try:
            await self._exchange(message)
        finally:
            self.session.set_busy(False)
            self._emit("typing_stopped")

    async def _exchange(self, message: str) -> None:
        request = ChatRequest(
            message=message,
            history=self.session.last_n(self.context_window),
        )
        try:
            response = await self.transport.chat(request)
        except TransportError as e:
            logger.warning("Transport failure: %s", e)
            self._emit("error", f"{CONNECTION_ERROR_PREFIX}{e}")
            return
        except Exception as e:
            logger.exception("Unexpected transport failure")
            self._emit("error", f"{CONNECTION_ERROR_PREFIX}{e}")
            return

        if not response.success:
            logger.warning("Backend reported failure: %s", response.error)
            self._emit("error", response.error or GENERIC_ERROR_MESSAGE)
            return

        reply = response.reply or ""
        blocks = render(reply)
        assistant_message = self.session.append(Role.ASSISTANT, reply)
        try:
            await self.session.save()
        except Exception:
            logger.exception("Failed to persist history")
        self._emit("message_added", assistant_message, blocks)

    async def ask(self, question: str) -> None:
        """Send one of the suggested questions."""
        await self.send(question)

    async def new_chat(self) -> None:
        """Start over: clear the log and persisted history, then announce the reset.

        The in-memory log is always emptied. If the persisted record cannot be
        removed, an ``error`` follows ``session_reset`` since the old history
        would come back on the next launch.
        """
        try:
            await self.session.clear()
        except Exception as e:
            logger.exception("Failed to clear persisted history")
            self._emit("session_reset")
            self._emit("error", f"{CLEAR_ERROR_PREFIX}{e}")
            return
        self._emit("session_reset")

    def replay(self) -> None:
        """Emit ``message_added`` for every message already in the log."""
        for message in self.session.log:
            self._emit("message_added", message, render_message(message))
