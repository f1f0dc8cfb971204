"""SQLite implementation of per-collection record storage."""

import json
import uuid
from collections.abc import AsyncIterator, Mapping
from contextlib import asynccontextmanager
from datetime import UTC, datetime
from typing import Any

import aiosqlite
import pydantic

from retailpos.config import get_logger
from retailpos.core.exceptions import DatabaseError, EntityNotFoundError, ValidationError
from retailpos.core.interfaces.entity_store import IEntityStore, T
from retailpos.infrastructure.storage.sqlite.connection import (
    get_connection,
    get_transaction,
)

logger = get_logger(__name__)

_IMMUTABLE_FIELDS = ("id", "created_at", "createdAt")


def new_id() -> str:
    """Fresh unique record id."""
    return uuid.uuid4().hex


def _invalid(collection: str, error: pydantic.ValidationError) -> ValidationError:
    first = error.errors()[0]
    field = ".".join(str(part) for part in first["loc"]) or collection
    return ValidationError(field, first["msg"], first.get("input"))


class SQLiteEntityStore(IEntityStore[T]):
    """
    One collection of the ``records`` table.

    With ``conn`` the store runs on that connection and leaves commit to
    the owner (a unit of work); without it every call takes a pooled
    connection and writes commit on their own.
    """

    def __init__(
        self,
        collection: str,
        model: type[T],
        conn: aiosqlite.Connection | None = None,
    ):
        self.collection = collection
        self._model = model
        self._conn = conn

    @asynccontextmanager
    async def _reader(self, operation: str) -> AsyncIterator[aiosqlite.Connection]:
        try:
            if self._conn is not None:
                yield self._conn
            else:
                async with get_connection() as conn:
                    yield conn
        except aiosqlite.Error as e:
            raise DatabaseError(f"{self.collection}.{operation}", str(e)) from e

    @asynccontextmanager
    async def _writer(self, operation: str) -> AsyncIterator[aiosqlite.Connection]:
        try:
            if self._conn is not None:
                yield self._conn
            else:
                async with get_transaction() as conn:
                    yield conn
        except aiosqlite.Error as e:
            raise DatabaseError(f"{self.collection}.{operation}", str(e)) from e

    async def get_all(self, newest_first: bool = False) -> list[T]:
        order = "created_at DESC, seq DESC" if newest_first else "seq"
        async with self._reader("get_all") as conn:
            cursor = await conn.execute(
                f"SELECT data FROM records WHERE collection = ? ORDER BY {order}",
                (self.collection,),
            )
            rows = await cursor.fetchall()
            return [self._row_to_record(row) for row in rows]

    async def get_by_id(self, entity_id: str) -> T | None:
        async with self._reader("get_by_id") as conn:
            cursor = await conn.execute(
                "SELECT data FROM records WHERE collection = ? AND id = ?",
                (self.collection, entity_id),
            )
            row = await cursor.fetchone()
            if row is None:
                return None
            return self._row_to_record(row)

    async def create(self, fields: Mapping[str, Any]) -> T:
        data = {k: v for k, v in fields.items() if k not in _IMMUTABLE_FIELDS}
        record = self._validate({**data, "id": new_id(), "created_at": datetime.now(UTC)})
        async with self._writer("create") as conn:
            await self._insert(conn, record)
        logger.debug("record_created", collection=self.collection, id=record.id)
        return record

    async def update(self, entity_id: str, fields: Mapping[str, Any]) -> T:
        changes = {k: v for k, v in fields.items() if k not in _IMMUTABLE_FIELDS}
        async with self._writer("update") as conn:
            cursor = await conn.execute(
                "SELECT data FROM records WHERE collection = ? AND id = ?",
                (self.collection, entity_id),
            )
            row = await cursor.fetchone()
            if row is None:
                raise EntityNotFoundError(self.collection, entity_id)

            current = self._row_to_record(row)
            record = self._validate({**current.model_dump(), **changes})
            await conn.execute(
                "UPDATE records SET data = ? WHERE collection = ? AND id = ?",
                (json.dumps(record.to_record()), self.collection, entity_id),
            )
        logger.debug("record_updated", collection=self.collection, id=entity_id)
        return record

    async def delete(self, entity_id: str) -> None:
        async with self._writer("delete") as conn:
            await conn.execute(
                "DELETE FROM records WHERE collection = ? AND id = ?",
                (self.collection, entity_id),
            )
        logger.debug("record_deleted", collection=self.collection, id=entity_id)

    async def replace_all(self, records: list[T]) -> None:
        async with self._writer("replace_all") as conn:
            await conn.execute(
                "DELETE FROM records WHERE collection = ?", (self.collection,)
            )
            for record in records:
                await self._insert(conn, record)
        logger.info("collection_replaced", collection=self.collection, count=len(records))

    def _validate(self, data: Mapping[str, Any]) -> T:
        try:
            return self._model.model_validate(data)
        except pydantic.ValidationError as e:
            raise _invalid(self.collection, e) from e

    async def _insert(self, conn: aiosqlite.Connection, record: T) -> None:
        await conn.execute(
            """
            INSERT INTO records (collection, id, created_at, data)
            VALUES (?, ?, ?, ?)
            """,
            (
                self.collection,
                record.id,
                record.created_at.isoformat(),
                json.dumps(record.to_record()),
            ),
        )

    def _row_to_record(self, row: aiosqlite.Row) -> T:
        """Convert a database row to the collection's record model."""
        return self._model.model_validate(json.loads(row["data"]))
