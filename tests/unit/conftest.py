"""In-memory stores and unit of work for service and use-case tests."""

from collections.abc import Mapping
from datetime import UTC, datetime, timedelta
from types import TracebackType
from typing import Any

import pydantic
import pytest

from retailpos.core.entities import InventoryLogEntry, InventoryLogType
from retailpos.core.entities import collections as c
from retailpos.core.exceptions import EntityNotFoundError, ValidationError
from retailpos.core.interfaces import IEntityStore, IUnitOfWork

_CLOCK_START = datetime(2024, 5, 1, 8, 0, tzinfo=UTC)


class InMemoryEntityStore(IEntityStore):
    """Dict-backed store; ids are ``<collection>-<n>`` and timestamps tick a second per create."""

    def __init__(self, collection: str):
        self.collection = collection
        self._model = c.COLLECTION_MODELS[collection]
        self.records: dict[str, Any] = {}
        self._counter = 0

    async def get_all(self, newest_first: bool = False) -> list:
        records = list(self.records.values())
        if newest_first:
            return list(reversed(records))
        return records

    async def get_by_id(self, entity_id: str):
        return self.records.get(entity_id)

    async def create(self, fields: Mapping[str, Any]):
        self._counter += 1
        data = {k: v for k, v in fields.items() if k not in ("id", "created_at", "createdAt")}
        record = self._validate(
            {
                **data,
                "id": f"{self.collection}-{self._counter}",
                "created_at": _CLOCK_START + timedelta(seconds=self._counter),
            }
        )
        self.records[record.id] = record
        return record

    async def update(self, entity_id: str, fields: Mapping[str, Any]):
        current = self.records.get(entity_id)
        if current is None:
            raise EntityNotFoundError(self.collection, entity_id)
        record = self._validate({**current.model_dump(), **fields})
        self.records[entity_id] = record
        return record

    async def delete(self, entity_id: str) -> None:
        self.records.pop(entity_id, None)

    async def replace_all(self, records: list) -> None:
        self.records = {r.id: r for r in records}

    def _validate(self, data: dict):
        try:
            return self._model.model_validate(data)
        except pydantic.ValidationError as e:
            first = e.errors()[0]
            raise ValidationError(".".join(map(str, first["loc"])), first["msg"]) from e


class InMemoryUnitOfWork(IUnitOfWork):
    """Restores every store to its entry state when the block raises."""

    def __init__(self):
        self.products = InMemoryEntityStore(c.PRODUCTS)
        self.sales = InMemoryEntityStore(c.SALES)
        self.inventory_logs = InMemoryEntityStore(c.INVENTORY_LOGS)
        self.customers = InMemoryEntityStore(c.CUSTOMERS)
        self.employees = InMemoryEntityStore(c.EMPLOYEES)
        self.expense_categories = InMemoryEntityStore(c.EXPENSE_CATEGORIES)
        self.income_categories = InMemoryEntityStore(c.INCOME_CATEGORIES)
        self.expenses = InMemoryEntityStore(c.EXPENSES)
        self.incomes = InMemoryEntityStore(c.INCOMES)
        self.commits = 0
        self.rollbacks = 0
        self._saved: dict[str, dict] = {}

    def _stores(self) -> list[InMemoryEntityStore]:
        return [self.store(key) for key in c.COLLECTION_MODELS]

    async def __aenter__(self) -> "InMemoryUnitOfWork":
        self._saved = {s.collection: dict(s.records) for s in self._stores()}
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        if exc is None:
            self.commits += 1
            return
        for store in self._stores():
            store.records = self._saved[store.collection]
        self.rollbacks += 1


@pytest.fixture
def uow() -> InMemoryUnitOfWork:
    return InMemoryUnitOfWork()


@pytest.fixture
def uow_factory(uow: InMemoryUnitOfWork):
    """Factory handing out the same in-memory unit of work every time."""
    return lambda: uow


@pytest.fixture
def store_factory(uow: InMemoryUnitOfWork):
    return uow.store


@pytest.fixture
def stocked(uow: InMemoryUnitOfWork):
    """Create a product with an Initial log; returns an async builder."""

    async def _stock(name: str = "Widget", quantity: int = 10, selling_price: float = 100.0):
        product = await uow.products.create(
            {
                "name": name,
                "purchase_price": 60.0,
                "selling_price": selling_price,
                "quantity_in_stock": quantity,
            }
        )
        await uow.inventory_logs.create(
            InventoryLogEntry(
                product_id=product.id,
                product_name=product.name,
                quantity_change=quantity,
                new_quantity=quantity,
                log_type=InventoryLogType.INITIAL,
            ).model_dump()
        )
        return product

    return _stock
