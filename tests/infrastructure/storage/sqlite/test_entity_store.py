"""Tests for SQLiteEntityStore."""

import json
from datetime import UTC, datetime, timedelta

import pytest

from retailpos.core.entities import Customer, InventoryLog, InventoryLogType, Product
from retailpos.core.entities import collections as c
from retailpos.core.exceptions import EntityNotFoundError, ValidationError
from retailpos.infrastructure.storage.sqlite import SQLiteEntityStore, get_connection


@pytest.fixture
def products(sqlite_db) -> SQLiteEntityStore:
    return SQLiteEntityStore(c.PRODUCTS, Product)


@pytest.fixture
def customers(sqlite_db) -> SQLiteEntityStore:
    return SQLiteEntityStore(c.CUSTOMERS, Customer)


class TestCreate:
    async def test_assigns_id_and_timestamp(self, products):
        before = datetime.now(UTC)

        product = await products.create({"name": "Cable", "quantity_in_stock": 3})

        assert product.id
        assert product.created_at >= before - timedelta(seconds=1)
        assert product.created_at.tzinfo is not None

    async def test_supplied_identity_ignored(self, products):
        product = await products.create({"name": "Cable", "id": "mine", "createdAt": "2000-01-01"})
        assert product.id != "mine"
        assert product.created_at.year > 2000

    async def test_ids_unique(self, products):
        a = await products.create({"name": "A"})
        b = await products.create({"name": "B"})
        assert a.id != b.id

    async def test_stored_as_camel_case_json(self, products):
        product = await products.create({"name": "Cable", "selling_price": 4.5})

        async with get_connection() as conn:
            cursor = await conn.execute("SELECT data FROM records WHERE id = ?", (product.id,))
            data = json.loads((await cursor.fetchone())["data"])

        assert data["sellingPrice"] == 4.5
        assert data["quantityInStock"] == 0
        assert data["id"] == product.id

    async def test_invalid_fields_rejected(self, products):
        with pytest.raises(ValidationError) as exc_info:
            await products.create({"selling_price": 4.5})

        assert exc_info.value.details["field"] == "name"
        assert await products.get_all() == []


class TestRead:
    async def test_get_by_id(self, products):
        product = await products.create({"name": "Cable"})
        assert await products.get_by_id(product.id) == product

    async def test_get_by_id_missing(self, products):
        assert await products.get_by_id("nope") is None

    async def test_collections_are_separate(self, products, customers):
        await products.create({"name": "Cable"})
        assert await customers.get_all() == []

    async def test_get_all_orders(self, products):
        names = ["A", "B", "C"]
        for name in names:
            await products.create({"name": name})

        assert [p.name for p in await products.get_all()] == names
        assert [p.name for p in await products.get_all(newest_first=True)] == names[::-1]


class TestUpdate:
    async def test_partial_update(self, products):
        product = await products.create({"name": "Cable", "selling_price": 1.0})

        updated = await products.update(product.id, {"quantity_in_stock": 9})

        assert updated.quantity_in_stock == 9
        assert updated.selling_price == 1.0
        assert updated.created_at == product.created_at
        assert (await products.get_by_id(product.id)).quantity_in_stock == 9

    async def test_update_missing(self, products):
        with pytest.raises(EntityNotFoundError):
            await products.update("nope", {"name": "X"})

    async def test_identity_not_updatable(self, products):
        product = await products.create({"name": "Cable"})
        updated = await products.update(product.id, {"id": "other", "name": "Wire"})
        assert updated.id == product.id
        assert updated.name == "Wire"

    async def test_invalid_update_leaves_record(self, products):
        product = await products.create({"name": "Cable"})

        with pytest.raises(ValidationError) as exc_info:
            await products.update(product.id, {"name": ""})

        assert exc_info.value.code == "VALIDATION_ERROR"
        assert (await products.get_by_id(product.id)).name == "Cable"


class TestDelete:
    async def test_delete(self, products):
        product = await products.create({"name": "Cable"})
        await products.delete(product.id)
        assert await products.get_by_id(product.id) is None

    async def test_delete_missing_is_noop(self, products):
        await products.delete("nope")


class TestReplaceAll:
    async def test_replaces_collection_only(self, products, customers):
        await products.create({"name": "Old"})
        await customers.create({"name": "Ann"})
        imported = Product(id="p1", name="New", created_at=datetime(2024, 1, 1, tzinfo=UTC))

        await products.replace_all([imported])

        assert [p.id for p in await products.get_all()] == ["p1"]
        assert len(await customers.get_all()) == 1


class TestNewestFirstTies:
    async def test_same_timestamp_newest_insert_first(self, sqlite_db):
        logs = SQLiteEntityStore(c.INVENTORY_LOGS, InventoryLog)
        stamp = datetime(2024, 5, 1, tzinfo=UTC)
        records = [
            InventoryLog(
                id=f"l{i}",
                created_at=stamp,
                product_id="p1",
                product_name="Cable",
                quantity_change=1,
                new_quantity=i,
                log_type=InventoryLogType.STOCK_IN,
            )
            for i in range(1, 4)
        ]
        await logs.replace_all(records)

        newest = await logs.get_all(newest_first=True)

        assert [log.id for log in newest] == ["l3", "l2", "l1"]
