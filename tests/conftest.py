"""Pytest configuration and shared fixtures."""
import asyncio

import pytest

from maung_assistant.exceptions import TransportError
from maung_assistant.session import ChatSession, SessionController, SessionListener
from maung_assistant.storage import HistoryStore, InMemoryKeyValueStore
from maung_assistant.transport import AITransport, ChatRequest, ChatResponse


class FakeTransport(AITransport):
    """In-process transport returning queued outcomes.

    Each outcome is a ChatResponse (returned) or an exception (raised).
    When ``gate`` is set, every call waits for it before answering.
    """

    def __init__(self, *outcomes: ChatResponse | Exception) -> None:
        self.outcomes = list(outcomes)
        self.requests: list[ChatRequest] = []
        self.gate: asyncio.Event | None = None
        self.closed = False

    def reply_with(self, reply: str) -> None:
        self.outcomes.append(ChatResponse(success=True, reply=reply))

    async def chat(self, request: ChatRequest) -> ChatResponse:
        self.requests.append(request)
        if self.gate is not None:
            await self.gate.wait()
        if not self.outcomes:
            raise TransportError("no response queued")
        outcome = self.outcomes.pop(0)
        if isinstance(outcome, Exception):
            raise outcome
        return outcome

    async def close(self) -> None:
        self.closed = True


class RecordingListener(SessionListener):
    """Listener that records every event as a tuple."""

    def __init__(self) -> None:
        self.events: list[tuple] = []

    def typing_started(self) -> None:
        self.events.append(("typing_started",))

    def typing_stopped(self) -> None:
        self.events.append(("typing_stopped",))

    def message_added(self, message, blocks) -> None:
        self.events.append(("message_added", message, blocks))

    def error(self, text: str) -> None:
        self.events.append(("error", text))

    def session_reset(self) -> None:
        self.events.append(("session_reset",))

    def names(self) -> list[str]:
        return [event[0] for event in self.events]


class CountingHistoryStore(HistoryStore):
    """HistoryStore that counts save calls."""

    def __init__(self, *args, **kwargs) -> None:
        super().__init__(*args, **kwargs)
        self.save_calls = 0

    async def save(self, log) -> None:
        self.save_calls += 1
        await super().save(log)


@pytest.fixture
def kv_store():
    """Return an empty in-memory key-value store."""
    return InMemoryKeyValueStore()


@pytest.fixture
def history(kv_store):
    """Return a history store over the in-memory backend."""
    return CountingHistoryStore(kv_store)


@pytest.fixture
def transport():
    """Return a fake transport with no queued responses."""
    return FakeTransport()


@pytest.fixture
def listener():
    """Return a recording listener."""
    return RecordingListener()


@pytest.fixture
def session(history):
    """Return a fresh session over an empty history."""
    return ChatSession(history)


@pytest.fixture
def controller(session, transport, listener):
    """Return a controller wired to the fake transport and recording listener."""
    ctrl = SessionController(session, transport)
    ctrl.add_listener(listener)
    return ctrl
