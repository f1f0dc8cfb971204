"""Stable collection keys and the record model stored under each."""

from retailpos.core.entities.base import Record
from retailpos.core.entities.finance import Category, Expense, Income
from retailpos.core.entities.inventory import InventoryLog
from retailpos.core.entities.party import Customer, Employee
from retailpos.core.entities.product import Product
from retailpos.core.entities.sale import Sale

PRODUCTS = "products"
SALES = "sales"
CUSTOMERS = "customers"
EMPLOYEES = "employees"
EXPENSE_CATEGORIES = "expenseCategories"
INCOME_CATEGORIES = "incomeCategories"
EXPENSES = "expenses"
INCOMES = "incomes"
INVENTORY_LOGS = "inventoryLogs"

COLLECTION_MODELS: dict[str, type[Record]] = {
    PRODUCTS: Product,
    SALES: Sale,
    CUSTOMERS: Customer,
    EMPLOYEES: Employee,
    EXPENSE_CATEGORIES: Category,
    INCOME_CATEGORIES: Category,
    EXPENSES: Expense,
    INCOMES: Income,
    INVENTORY_LOGS: InventoryLog,
}

# Categories keep store order when listed.
UNORDERED_COLLECTIONS = frozenset({EXPENSE_CATEGORIES, INCOME_CATEGORIES})
