"""SQLite key-value backend.

Provides durable storage in a SQLite database file, one row per
(profile, key). Uses aiosqlite for async access.
"""

from datetime import datetime, timezone
from pathlib import Path

import aiosqlite

from ..exceptions import StorageError
from .base import KeyValueStore


class SQLiteKeyValueStore(KeyValueStore):
    """SQLite-backed key-value storage.

    Several profiles can share one database file; each instance only sees
    the keys of its own profile.
    """

    def __init__(
        self,
        path: str | Path = "./maung_assistant.db",
        profile: str = "default"
    ):
        self._db_path = Path(path).expanduser()
        self._profile = profile
        self._connection: aiosqlite.Connection | None = None

    async def connect(self) -> None:
        """Open the database file and create the schema."""
        try:
            self._db_path.parent.mkdir(parents=True, exist_ok=True)
            self._connection = await aiosqlite.connect(self._db_path)
            await self._create_schema()
        except (OSError, aiosqlite.Error) as e:
            raise StorageError(f"Cannot open storage at {self._db_path}: {e}") from e

    async def _create_schema(self) -> None:
        """Create database tables."""
        await self._connection.execute("""
            CREATE TABLE IF NOT EXISTS kv_entries (
                profile TEXT NOT NULL,
                key TEXT NOT NULL,
                value TEXT NOT NULL,
                updated_at TEXT NOT NULL,
                PRIMARY KEY (profile, key)
            )
        """)
        await self._connection.commit()

    async def disconnect(self) -> None:
        """Close database connection."""
        if self._connection:
            await self._connection.close()
            self._connection = None

    def _require_connection(self) -> aiosqlite.Connection:
        if self._connection is None:
            raise StorageError("SQLite storage is not connected")
        return self._connection

    async def get(self, key: str) -> str | None:
        conn = self._require_connection()
        try:
            async with conn.execute(
                "SELECT value FROM kv_entries WHERE profile = ? AND key = ?",
                (self._profile, key)
            ) as cursor:
                row = await cursor.fetchone()
        except aiosqlite.Error as e:
            raise StorageError(f"Failed to read '{key}': {e}") from e
        return row[0] if row else None

    async def set(self, key: str, value: str) -> None:
        conn = self._require_connection()
        now = datetime.now(timezone.utc).isoformat()
        try:
            await conn.execute("""
                INSERT INTO kv_entries (profile, key, value, updated_at)
                VALUES (?, ?, ?, ?)
                ON CONFLICT(profile, key) DO UPDATE SET
                    value = excluded.value,
                    updated_at = excluded.updated_at
            """, (self._profile, key, value, now))
            await conn.commit()
        except aiosqlite.Error as e:
            raise StorageError(f"Failed to write '{key}': {e}") from e

    async def remove(self, key: str) -> None:
        conn = self._require_connection()
        try:
            await conn.execute(
                "DELETE FROM kv_entries WHERE profile = ? AND key = ?",
                (self._profile, key)
            )
            await conn.commit()
        except aiosqlite.Error as e:
            raise StorageError(f"Failed to remove '{key}': {e}") from e

    @property
    def backend_type(self) -> str:
        return "sqlite"

    @property
    def profile(self) -> str:
        return self._profile

    @property
    def db_path(self) -> Path:
        return self._db_path
