"""Abstract unit of work spanning every collection."""

from abc import ABC, abstractmethod
from types import TracebackType

from retailpos.core.entities import (
    Category,
    Customer,
    Employee,
    Expense,
    Income,
    InventoryLog,
    Product,
    Sale,
)
from retailpos.core.interfaces.entity_store import IEntityStore


class IUnitOfWork(ABC):
    """
    Groups the writes of one operation.

    Entering the context opens the boundary; leaving it normally commits,
    leaving it with an exception rolls every write back.
    """

    products: IEntityStore[Product]
    sales: IEntityStore[Sale]
    inventory_logs: IEntityStore[InventoryLog]
    customers: IEntityStore[Customer]
    employees: IEntityStore[Employee]
    expense_categories: IEntityStore[Category]
    income_categories: IEntityStore[Category]
    expenses: IEntityStore[Expense]
    incomes: IEntityStore[Income]

    def store(self, collection: str) -> IEntityStore:
        """Look up a store by its collection key."""
        for candidate in (
            self.products,
            self.sales,
            self.inventory_logs,
            self.customers,
            self.employees,
            self.expense_categories,
            self.income_categories,
            self.expenses,
            self.incomes,
        ):
            if candidate.collection == collection:
                return candidate
        raise KeyError(collection)

    @abstractmethod
    async def __aenter__(self) -> "IUnitOfWork":
        pass

    @abstractmethod
    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        pass
