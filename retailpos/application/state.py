"""
Application state façade.

Holds the latest snapshot of every collection and is the single entry point
for mutations. Each mutation runs under the write lock, then the whole
snapshot is re-read so consumers only ever see fully applied operations.
"""

import asyncio
from collections.abc import Awaitable, Callable, Mapping
from dataclasses import dataclass, field
from datetime import date
from typing import Any, TypeVar

from retailpos.application.dto.requests import (
    AdjustInventoryRequest,
    BulkOrderRequest,
    CreateSaleRequest,
    UpdateSaleStatusRequest,
)
from retailpos.application.use_cases import (
    AddProductUseCase,
    AdjustInventoryUseCase,
    CreateSaleUseCase,
    ExportDataUseCase,
    GenerateBulkOrdersUseCase,
    ImportDataResult,
    ImportDataUseCase,
    UpdateSaleStatusUseCase,
)
from retailpos.config import get_logger, get_settings
from retailpos.core.entities import (
    CashEntryFields,
    Category,
    CategoryFields,
    Customer,
    CustomerFields,
    DomainModel,
    Employee,
    EmployeeFields,
    Expense,
    Income,
    InventoryLog,
    NewSale,
    Product,
    ProductFields,
    Sale,
    SaleStatus,
    StockAdjustment,
)
from retailpos.core.entities import collections as c
from retailpos.core.exceptions import ValidationError
from retailpos.core.interfaces import IEntityStore, IUnitOfWork
from retailpos.core.services import (
    DailyRevenue,
    DashboardStats,
    SalesReport,
    StockAuditor,
    StockDiscrepancy,
    compute_dashboard_stats,
    daily_revenue_series,
    filter_by_date_range,
    sales_report,
)

logger = get_logger(__name__)

T = TypeVar("T")

_STOCK_FIELDS = ("quantity_in_stock", "quantityInStock")


@dataclass
class Snapshot:
    """Every collection as last fetched. Newest first except categories."""

    products: list[Product] = field(default_factory=list)
    sales: list[Sale] = field(default_factory=list)
    customers: list[Customer] = field(default_factory=list)
    employees: list[Employee] = field(default_factory=list)
    expense_categories: list[Category] = field(default_factory=list)
    income_categories: list[Category] = field(default_factory=list)
    expenses: list[Expense] = field(default_factory=list)
    incomes: list[Income] = field(default_factory=list)
    inventory_logs: list[InventoryLog] = field(default_factory=list)


_SNAPSHOT_KEYS: dict[str, str] = {
    "products": c.PRODUCTS,
    "sales": c.SALES,
    "customers": c.CUSTOMERS,
    "employees": c.EMPLOYEES,
    "expense_categories": c.EXPENSE_CATEGORIES,
    "income_categories": c.INCOME_CATEGORIES,
    "expenses": c.EXPENSES,
    "incomes": c.INCOMES,
    "inventory_logs": c.INVENTORY_LOGS,
}


class AppState:
    """In-memory view of the store plus every operation consumers may call."""

    def __init__(
        self,
        uow_factory: Callable[[], IUnitOfWork],
        store_factory: Callable[[str], IEntityStore],
    ):
        self._uow_factory = uow_factory
        self._store_factory = store_factory
        self._write_lock = asyncio.Lock()
        self.snapshot = Snapshot()
        self.loading = False

    # ---- snapshot accessors -------------------------------------------------

    @property
    def products(self) -> list[Product]:
        return self.snapshot.products

    @property
    def sales(self) -> list[Sale]:
        return self.snapshot.sales

    @property
    def customers(self) -> list[Customer]:
        return self.snapshot.customers

    @property
    def employees(self) -> list[Employee]:
        return self.snapshot.employees

    @property
    def expense_categories(self) -> list[Category]:
        return self.snapshot.expense_categories

    @property
    def income_categories(self) -> list[Category]:
        return self.snapshot.income_categories

    @property
    def expenses(self) -> list[Expense]:
        return self.snapshot.expenses

    @property
    def incomes(self) -> list[Income]:
        return self.snapshot.incomes

    @property
    def inventory_logs(self) -> list[InventoryLog]:
        return self.snapshot.inventory_logs

    # ---- refresh ------------------------------------------------------------

    async def fetch_data(self) -> Snapshot:
        """Re-read every collection and replace the snapshot."""
        self.loading = True
        try:
            names = list(_SNAPSHOT_KEYS)
            results = await asyncio.gather(
                *(
                    self._store_factory(_SNAPSHOT_KEYS[name]).get_all(
                        newest_first=_SNAPSHOT_KEYS[name] not in c.UNORDERED_COLLECTIONS
                    )
                    for name in names
                )
            )
            self.snapshot = Snapshot(**dict(zip(names, results)))
        except Exception as e:
            logger.error("fetch_data_failed", error=str(e))
            raise
        finally:
            self.loading = False

        logger.debug(
            "fetch_data_complete",
            products=len(self.snapshot.products),
            sales=len(self.snapshot.sales),
            logs=len(self.snapshot.inventory_logs),
        )
        return self.snapshot

    async def _mutate(self, operation: str, call: Callable[[], Awaitable[T]]) -> T:
        async with self._write_lock:
            self.loading = True
            try:
                result = await call()
            except Exception as e:
                self.loading = False
                logger.error("operation_failed", operation=operation, error=str(e))
                raise
            await self.fetch_data()
            return result

    # ---- core operations ----------------------------------------------------

    async def add_sale(self, sale: CreateSaleRequest | NewSale) -> Sale:
        use_case = CreateSaleUseCase(self._uow_factory)

        async def run() -> Sale:
            return (await use_case.execute(sale)).sale

        return await self._mutate("add_sale", run)

    async def update_sale_status(self, sale_id: str, status: SaleStatus) -> Sale:
        use_case = UpdateSaleStatusUseCase(self._uow_factory)
        request = UpdateSaleStatusRequest(sale_id=sale_id, status=status)

        async def run() -> Sale:
            return (await use_case.execute(request)).sale

        return await self._mutate("update_sale_status", run)

    async def adjust_inventory(
        self, product_id: str, product_name: str | None, adjustment: StockAdjustment
    ) -> Product:
        use_case = AdjustInventoryUseCase(self._uow_factory)
        request = AdjustInventoryRequest(
            product_id=product_id,
            product_name=product_name,
            kind=adjustment.kind,
            quantity=adjustment.quantity,
        )

        async def run() -> Product:
            return (await use_case.execute(request)).product

        return await self._mutate("adjust_inventory", run)

    async def generate_bulk_orders(self, request: BulkOrderRequest) -> list[Sale]:
        use_case = GenerateBulkOrdersUseCase(self._uow_factory)

        async def run() -> list[Sale]:
            return (await use_case.execute(request)).sales

        return await self._mutate("generate_bulk_orders", run)

    # ---- catalog ------------------------------------------------------------

    async def add_product(self, fields: ProductFields) -> Product:
        use_case = AddProductUseCase(self._uow_factory)

        async def run() -> Product:
            return (await use_case.execute(fields)).product

        return await self._mutate("add_product", run)

    async def update_product(self, product_id: str, fields: Mapping[str, Any]) -> Product:
        """Edit catalog fields. Stock is never edited here."""
        for name in _STOCK_FIELDS:
            if name in fields:
                raise ValidationError(
                    name,
                    "stock changes go through sales or inventory adjustments",
                    fields[name],
                )
        return await self._update(c.PRODUCTS, product_id, fields)

    async def delete_product(self, product_id: str) -> None:
        await self._delete(c.PRODUCTS, product_id)

    # ---- plain CRUD ---------------------------------------------------------

    async def add_customer(self, fields: CustomerFields) -> Customer:
        return await self._create(c.CUSTOMERS, fields)

    async def update_customer(self, customer_id: str, fields: Mapping[str, Any]) -> Customer:
        return await self._update(c.CUSTOMERS, customer_id, fields)

    async def delete_customer(self, customer_id: str) -> None:
        await self._delete(c.CUSTOMERS, customer_id)

    async def add_employee(self, fields: EmployeeFields) -> Employee:
        return await self._create(c.EMPLOYEES, fields)

    async def update_employee(self, employee_id: str, fields: Mapping[str, Any]) -> Employee:
        return await self._update(c.EMPLOYEES, employee_id, fields)

    async def delete_employee(self, employee_id: str) -> None:
        await self._delete(c.EMPLOYEES, employee_id)

    async def add_expense(self, fields: CashEntryFields) -> Expense:
        return await self._create(c.EXPENSES, fields)

    async def delete_expense(self, expense_id: str) -> None:
        await self._delete(c.EXPENSES, expense_id)

    async def add_income(self, fields: CashEntryFields) -> Income:
        return await self._create(c.INCOMES, fields)

    async def delete_income(self, income_id: str) -> None:
        await self._delete(c.INCOMES, income_id)

    async def add_expense_category(self, fields: CategoryFields) -> Category:
        return await self._create(c.EXPENSE_CATEGORIES, fields)

    async def delete_expense_category(self, category_id: str) -> None:
        await self._delete(c.EXPENSE_CATEGORIES, category_id)

    async def add_income_category(self, fields: CategoryFields) -> Category:
        return await self._create(c.INCOME_CATEGORIES, fields)

    async def delete_income_category(self, category_id: str) -> None:
        await self._delete(c.INCOME_CATEGORIES, category_id)

    async def _create(self, collection: str, fields: DomainModel) -> Any:
        async def run() -> Any:
            async with self._uow_factory() as uow:
                return await uow.store(collection).create(fields.model_dump())

        return await self._mutate(f"create_{collection}", run)

    async def _update(self, collection: str, entity_id: str, fields: Mapping[str, Any]) -> Any:
        async def run() -> Any:
            async with self._uow_factory() as uow:
                return await uow.store(collection).update(entity_id, fields)

        return await self._mutate(f"update_{collection}", run)

    async def _delete(self, collection: str, entity_id: str) -> None:
        async def run() -> None:
            async with self._uow_factory() as uow:
                await uow.store(collection).delete(entity_id)

        await self._mutate(f"delete_{collection}", run)

    # ---- data transfer ------------------------------------------------------

    async def export_data(self) -> dict[str, list[dict[str, Any]]]:
        async with self._write_lock:
            return await ExportDataUseCase(self._uow_factory).execute()

    async def import_data(self, document: dict[str, Any]) -> ImportDataResult:
        use_case = ImportDataUseCase(self._uow_factory)
        return await self._mutate("import_data", lambda: use_case.execute(document))

    # ---- derived views ------------------------------------------------------

    async def verify_stock(self) -> list[StockDiscrepancy]:
        """Audit the stored products against the stored audit trail."""
        products = await self._store_factory(c.PRODUCTS).get_all()
        logs = await self._store_factory(c.INVENTORY_LOGS).get_all()
        return StockAuditor().audit(products, logs)

    def dashboard_stats(self) -> DashboardStats:
        return compute_dashboard_stats(self.sales, self.expenses)

    def daily_revenue(self, days: int | None = None, today: date | None = None) -> list[DailyRevenue]:
        days = days or get_settings().pos.dashboard_days
        return daily_revenue_series(self.sales, days=days, today=today)

    def sales_report(self, start: date | None = None, end: date | None = None) -> SalesReport:
        """Revenue and gross profit of sales created between start and end (UTC days, inclusive)."""
        return sales_report(filter_by_date_range(self.sales, start, end))
