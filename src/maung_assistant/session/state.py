"""In-memory conversation state.

ChatSession owns the message log and the busy flag. It assumes a single
logical thread of control: callers check ``busy`` before starting a request.
"""

from ..models import Message, Role
from ..storage import HistoryStore


class ChatSession:
    """Ordered message log plus busy flag, mirrored to a HistoryStore."""

    def __init__(self, history: HistoryStore):
        self._history = history
        self._log: list[Message] = []
        self._busy = False

    @classmethod
    async def create(cls, history: HistoryStore) -> "ChatSession":
        """Create a session seeded from persisted history."""
        session = cls(history)
        await session.load()
        return session

    @property
    def log(self) -> list[Message]:
        """Copy of the message log, oldest first."""
        return list(self._log)

    @property
    def busy(self) -> bool:
        return self._busy

    @property
    def history(self) -> HistoryStore:
        return self._history

    def __len__(self) -> int:
        return len(self._log)

    def append(self, role: Role, content: str) -> Message:
        """Append a message to the log.

        Raises:
            ValueError: If a user message has empty content
        """
        role = Role(role)
        if role is Role.USER and not content:
            raise ValueError("User messages must not be empty")
        message = Message(role=role, content=content)
        self._log.append(message)
        return message

    def set_busy(self, busy: bool) -> None:
        self._busy = busy

    def last_n(self, n: int) -> list[Message]:
        """Most recent ``n`` messages in original order."""
        if n <= 0:
            return []
        return self._log[-n:]

    async def load(self) -> None:
        """Replace the log with the persisted history."""
        self._log = await self._history.load()

    async def save(self) -> None:
        """Persist the log (bounded by the HistoryStore)."""
        await self._history.save(self._log)

    async def clear(self) -> None:
        """Empty the log and delete the persisted record. ``busy`` is untouched."""
        self._log = []
        await self._history.clear()
