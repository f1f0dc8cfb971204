"""
Database schema.

Every collection lives in one ``records`` table keyed by
``(collection, id)``; ``seq`` preserves insertion order. ``meta`` holds
small key/value flags such as ``seeded``.
"""

import aiosqlite

from retailpos.config import get_logger
from retailpos.infrastructure.storage.sqlite.connection import get_transaction

logger = get_logger(__name__)

SCHEMA_VERSION = "001"

SCHEMA_STATEMENTS = (
    """
    CREATE TABLE IF NOT EXISTS schema_migrations (
        version TEXT PRIMARY KEY,
        name TEXT NOT NULL,
        applied_at TEXT DEFAULT (datetime('now'))
    )
    """,
    """
    CREATE TABLE IF NOT EXISTS records (
        seq INTEGER PRIMARY KEY AUTOINCREMENT,
        collection TEXT NOT NULL,
        id TEXT NOT NULL,
        created_at TEXT NOT NULL,
        data TEXT NOT NULL,
        UNIQUE (collection, id)
    )
    """,
    "CREATE INDEX IF NOT EXISTS idx_records_created ON records(collection, created_at)",
    """
    CREATE TABLE IF NOT EXISTS meta (
        key TEXT PRIMARY KEY,
        value TEXT NOT NULL
    )
    """,
)


async def create_schema(conn: aiosqlite.Connection) -> None:
    """Create tables on an open connection. Safe to run repeatedly."""
    for statement in SCHEMA_STATEMENTS:
        await conn.execute(statement)
    await conn.execute(
        "INSERT OR IGNORE INTO schema_migrations (version, name) VALUES (?, ?)",
        (SCHEMA_VERSION, "records_and_meta"),
    )


async def initialize_database() -> None:
    """Create the schema in the configured database."""
    async with get_transaction() as conn:
        await create_schema(conn)
    logger.info("database_initialized", version=SCHEMA_VERSION)


async def get_meta(conn: aiosqlite.Connection, key: str) -> str | None:
    cursor = await conn.execute("SELECT value FROM meta WHERE key = ?", (key,))
    row = await cursor.fetchone()
    return row["value"] if row else None


async def set_meta(conn: aiosqlite.Connection, key: str, value: str) -> None:
    await conn.execute(
        "INSERT INTO meta (key, value) VALUES (?, ?) "
        "ON CONFLICT(key) DO UPDATE SET value = excluded.value",
        (key, value),
    )
