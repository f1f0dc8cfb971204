"""SQLite unit of work: every store bound to one transaction."""

from contextlib import AsyncExitStack
from types import TracebackType

import aiosqlite

from retailpos.config import get_logger
from retailpos.core.entities import collections as c
from retailpos.core.interfaces.unit_of_work import IUnitOfWork
from retailpos.infrastructure.storage.sqlite.connection import ConnectionPool, get_pool
from retailpos.infrastructure.storage.sqlite.entity_store import SQLiteEntityStore

logger = get_logger(__name__)


class SQLiteUnitOfWork(IUnitOfWork):
    """
    Opens an immediate transaction on one pooled connection.

    Usage:
        async with SQLiteUnitOfWork() as uow:
            await uow.products.update(...)
            await uow.inventory_logs.create(...)
    """

    def __init__(self, pool: ConnectionPool | None = None):
        self._pool = pool
        self._stack: AsyncExitStack | None = None
        self.connection: aiosqlite.Connection | None = None

    async def __aenter__(self) -> "SQLiteUnitOfWork":
        pool = self._pool or await get_pool()
        self._stack = AsyncExitStack()
        self.connection = await self._stack.enter_async_context(pool.transaction())
        self._bind(self.connection)
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        stack, self._stack = self._stack, None
        self.connection = None
        if stack is None:
            return
        await stack.__aexit__(exc_type, exc, tb)
        if exc is not None:
            logger.warning("unit_of_work_rolled_back", error=str(exc))

    def _bind(self, conn: aiosqlite.Connection) -> None:
        self.products = SQLiteEntityStore(c.PRODUCTS, c.COLLECTION_MODELS[c.PRODUCTS], conn)
        self.sales = SQLiteEntityStore(c.SALES, c.COLLECTION_MODELS[c.SALES], conn)
        self.inventory_logs = SQLiteEntityStore(
            c.INVENTORY_LOGS, c.COLLECTION_MODELS[c.INVENTORY_LOGS], conn
        )
        self.customers = SQLiteEntityStore(c.CUSTOMERS, c.COLLECTION_MODELS[c.CUSTOMERS], conn)
        self.employees = SQLiteEntityStore(c.EMPLOYEES, c.COLLECTION_MODELS[c.EMPLOYEES], conn)
        self.expense_categories = SQLiteEntityStore(
            c.EXPENSE_CATEGORIES, c.COLLECTION_MODELS[c.EXPENSE_CATEGORIES], conn
        )
        self.income_categories = SQLiteEntityStore(
            c.INCOME_CATEGORIES, c.COLLECTION_MODELS[c.INCOME_CATEGORIES], conn
        )
        self.expenses = SQLiteEntityStore(c.EXPENSES, c.COLLECTION_MODELS[c.EXPENSES], conn)
        self.incomes = SQLiteEntityStore(c.INCOMES, c.COLLECTION_MODELS[c.INCOMES], conn)
