"""Tests for SQLiteUnitOfWork."""

import aiosqlite
import pytest

from retailpos.core.entities import InventoryLogEntry, InventoryLogType
from retailpos.core.entities import collections as c
from retailpos.core.exceptions import DatabaseError
from retailpos.core.services import InventoryLogBook, ProductLedger
from retailpos.infrastructure.storage.sqlite import SQLiteUnitOfWork, get_entity_store
from retailpos.infrastructure.storage.sqlite.connection import ConnectionPool


class TestUnitOfWork:
    async def test_commit(self, sqlite_db):
        async with SQLiteUnitOfWork() as uow:
            product = await uow.products.create({"name": "Cable", "quantity_in_stock": 2})

        assert await get_entity_store(c.PRODUCTS).get_by_id(product.id) is not None

    async def test_rollback_discards_every_write(self, sqlite_db):
        async with SQLiteUnitOfWork() as uow:
            product = await uow.products.create({"name": "Cable", "quantity_in_stock": 5})

        with pytest.raises(RuntimeError):
            async with SQLiteUnitOfWork() as uow:
                await ProductLedger(uow.products).set_stock(product.id, 2)
                await InventoryLogBook(uow.inventory_logs).append(
                    InventoryLogEntry(
                        product_id=product.id,
                        product_name=product.name,
                        quantity_change=-3,
                        new_quantity=2,
                        log_type=InventoryLogType.STOCK_TAKE,
                    )
                )
                raise RuntimeError("crash between writes")

        stored = await get_entity_store(c.PRODUCTS).get_by_id(product.id)
        assert stored.quantity_in_stock == 5
        assert await get_entity_store(c.INVENTORY_LOGS).get_all() == []

    async def test_stores_share_connection(self, sqlite_db):
        async with SQLiteUnitOfWork() as uow:
            assert uow.connection is not None
            assert uow.products._conn is uow.connection
            assert uow.inventory_logs._conn is uow.connection
        assert uow.connection is None

    async def test_store_lookup(self, sqlite_db):
        async with SQLiteUnitOfWork() as uow:
            assert uow.store(c.EXPENSE_CATEGORIES) is uow.expense_categories
            with pytest.raises(KeyError):
                uow.store("unknown")

    async def test_reads_see_own_writes(self, sqlite_db):
        async with SQLiteUnitOfWork() as uow:
            product = await uow.products.create({"name": "Cable"})
            assert await uow.products.get_by_id(product.id) == product


class TestLockedDatabase:
    @pytest.fixture
    async def locked(self, sqlite_db):
        """Second connection holding the write lock."""
        holder = await aiosqlite.connect(sqlite_db)
        await holder.execute("BEGIN IMMEDIATE")
        yield holder
        await holder.rollback()
        await holder.close()

    @pytest.fixture
    async def impatient_pool(self, sqlite_db):
        pool = ConnectionPool(sqlite_db, pool_size=1, busy_timeout=50)
        yield pool
        await pool.close()

    async def test_begin_failure_is_database_error(self, locked, impatient_pool):
        with pytest.raises(DatabaseError) as exc_info:
            async with SQLiteUnitOfWork(pool=impatient_pool):
                pass

        assert exc_info.value.code == "DATABASE_ERROR"
        assert exc_info.value.details["operation"] == "transaction"
        assert "locked" in exc_info.value.details["error"]

    async def test_connection_returned_after_failure(self, locked, impatient_pool):
        with pytest.raises(DatabaseError):
            async with SQLiteUnitOfWork(pool=impatient_pool):
                pass
        await locked.rollback()

        async with SQLiteUnitOfWork(pool=impatient_pool) as uow:
            product = await uow.products.create({"name": "Cable"})

        assert await get_entity_store(c.PRODUCTS).get_by_id(product.id) is not None
