"""Bounded conversation history on top of a key-value store.

The whole history lives under one key as a JSON array of
``{"role", "content"}`` objects, most recent ``limit`` messages only.
Each save replaces the previous record.
"""

import json
import logging
from collections.abc import Sequence

from pydantic import TypeAdapter, ValidationError

from ..config import HISTORY_KEY, HISTORY_LIMIT
from ..exceptions import StorageError
from ..models import Message
from .base import KeyValueStore

logger = logging.getLogger(__name__)

_RECORD = TypeAdapter(list[Message])


class HistoryStore:
    """Durable mirror of a session log, capped at ``limit`` entries."""

    def __init__(
        self,
        store: KeyValueStore,
        key: str = HISTORY_KEY,
        limit: int = HISTORY_LIMIT
    ):
        if limit < 1:
            raise ValueError(f"History limit must be positive, got {limit}")
        self._store = store
        self._key = key
        self._limit = limit

    @property
    def limit(self) -> int:
        return self._limit

    @property
    def key(self) -> str:
        return self._key

    async def save(self, log: Sequence[Message]) -> None:
        """Persist the most recent ``limit`` messages of ``log``.

        Raises:
            StorageError: If the backend fails to write
        """
        record = [message.to_wire() for message in log[-self._limit:]]
        await self._store.set(self._key, json.dumps(record, ensure_ascii=False))
        logger.debug("Saved %d history entries under '%s'", len(record), self._key)

    async def load(self) -> list[Message]:
        """Return the persisted messages, or an empty list if none are usable.

        A missing, corrupted or unreadable record means "no history"; it
        never fails the caller.
        """
        try:
            raw = await self._store.get(self._key)
        except StorageError as e:
            logger.warning("History unavailable, starting empty: %s", e)
            return []

        if raw is None:
            return []

        try:
            messages = _RECORD.validate_json(raw)
        except ValidationError as e:
            logger.warning(
                "Discarding corrupted history under '%s' (%d errors)",
                self._key, e.error_count()
            )
            return []
        return messages[-self._limit:]

    async def clear(self) -> None:
        """Delete the persisted record."""
        await self._store.remove(self._key)
        logger.debug("Cleared history under '%s'", self._key)
