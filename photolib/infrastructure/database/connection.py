"""Async key/value store on top of aiosqlite.

Documents are JSON strings in a single table. Each get and put is
atomic for its key; there are no cross-key or read-then-write
transactions.
"""
import json
from pathlib import Path
from typing import Optional

import aiosqlite

SCHEMA = """
CREATE TABLE IF NOT EXISTS kv (
    key TEXT PRIMARY KEY,
    value TEXT NOT NULL
)
"""


class KeyValueStore:
    """JSON document store keyed by string.

    Examples:
        >>> store = await open_store(Path("photolib.db"))
        >>> await store.put("library-L1", {"id": "L1", "albums": []})
        >>> await store.get("library-L1")
        {'id': 'L1', 'albums': []}
    """

    def __init__(self, connection: aiosqlite.Connection):
        self._conn = connection

    async def get(self, key: str) -> Optional[dict]:
        """Return the parsed document stored under key, or None."""
        cursor = await self._conn.execute("SELECT value FROM kv WHERE key = ?", (key,))
        row = await cursor.fetchone()
        await cursor.close()
        if row is None:
            return None
        return json.loads(row[0])

    async def put(self, key: str, document: dict) -> None:
        """Store document under key, replacing any previous value."""
        await self._conn.execute(
            """INSERT INTO kv (key, value) VALUES (?, ?)
               ON CONFLICT(key) DO UPDATE SET value = excluded.value""",
            (key, json.dumps(document))
        )
        await self._conn.commit()

    async def close(self) -> None:
        await self._conn.close()


async def open_store(db_path: Path) -> KeyValueStore:
    """Open (creating if needed) the SQLite file and ensure the schema."""
    db_path = Path(db_path)
    db_path.parent.mkdir(parents=True, exist_ok=True)

    conn = await aiosqlite.connect(db_path)
    await conn.execute(SCHEMA)
    await conn.commit()
    return KeyValueStore(conn)
