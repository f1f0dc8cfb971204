"""Core domain entities."""

from retailpos.core.entities.base import DomainModel, Record
from retailpos.core.entities.finance import (
    CashEntryFields,
    Category,
    CategoryFields,
    Expense,
    Income,
)
from retailpos.core.entities.inventory import (
    AdjustmentKind,
    InventoryLog,
    InventoryLogEntry,
    InventoryLogType,
    StockAdjustment,
)
from retailpos.core.entities.party import (
    Customer,
    CustomerFields,
    Employee,
    EmployeeFields,
)
from retailpos.core.entities.product import Product, ProductFields
from retailpos.core.entities.sale import NewSale, Sale, SaleItem, SaleStatus

__all__ = [
    "DomainModel",
    "Record",
    # Catalog
    "Product",
    "ProductFields",
    # Sales
    "NewSale",
    "Sale",
    "SaleItem",
    "SaleStatus",
    # Inventory
    "AdjustmentKind",
    "InventoryLog",
    "InventoryLogEntry",
    "InventoryLogType",
    "StockAdjustment",
    # People
    "Customer",
    "CustomerFields",
    "Employee",
    "EmployeeFields",
    # Finance
    "CashEntryFields",
    "Category",
    "CategoryFields",
    "Expense",
    "Income",
]
