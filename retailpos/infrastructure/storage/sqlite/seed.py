"""Demo data written the first time a database is initialized."""

from datetime import UTC, datetime

from retailpos.config import get_logger
from retailpos.core.entities import (
    InventoryLogEntry,
    InventoryLogType,
    NewSale,
    SaleItem,
    SaleStatus,
)
from retailpos.core.services import InventoryLogBook, ProductLedger, SaleLifecycleManager
from retailpos.infrastructure.storage.sqlite.schema import get_meta, set_meta
from retailpos.infrastructure.storage.sqlite.unit_of_work import SQLiteUnitOfWork

logger = get_logger(__name__)

SEEDED_FLAG = "seeded"

SEED_PRODUCTS = [
    {"name": 'Laptop Pro 15"', "purchase_price": 20_000_000, "selling_price": 25_000_000, "barcode": "LP15PRO", "quantity_in_stock": 10},
    {"name": "Wireless Mouse", "purchase_price": 300_000, "selling_price": 500_000, "barcode": "WMOUSE", "quantity_in_stock": 50},
    {"name": "Mechanical Keyboard", "purchase_price": 1_200_000, "selling_price": 1_800_000, "barcode": "MKEYB", "quantity_in_stock": 25},
    {"name": '4K Monitor 27"', "purchase_price": 5_000_000, "selling_price": 7_500_000, "barcode": "4KMON27", "quantity_in_stock": 15},
    {"name": "USB-C Hub", "purchase_price": 600_000, "selling_price": 900_000, "barcode": "USBCHUB", "quantity_in_stock": 40},
]

SEED_CUSTOMERS = [
    {"name": "Nguyen Van A", "phone": "0901234567", "email": "a@example.com", "address": "123 ABC Street, District 1"},
    {"name": "Tran Thi B", "phone": "0987654321", "email": "b@example.com", "address": "456 XYZ Street, District 3"},
]

SEED_EMPLOYEES = [
    {"name": "Le Minh C", "phone": "0912345678", "email": "c@store.com", "position": "Manager", "start_date": datetime(2022, 1, 1, tzinfo=UTC)},
    {"name": "Pham Thi D", "phone": "0923456789", "email": "d@store.com", "position": "Sales associate", "start_date": datetime(2023, 3, 15, tzinfo=UTC)},
]

SEED_EXPENSE_CATEGORIES = ["Rent", "Utilities", "Salaries"]
SEED_INCOME_CATEGORIES = ["Sales revenue", "Other income"]


async def seed_database(force: bool = False) -> bool:
    """
    Write demo data once.

    Returns True when data was written. Stock for the demo sale goes through
    the sale lifecycle so the audit trail matches the shelf.
    """
    async with SQLiteUnitOfWork() as uow:
        assert uow.connection is not None
        if not force and await get_meta(uow.connection, SEEDED_FLAG):
            return False

        log_book = InventoryLogBook(uow.inventory_logs)
        products = []
        for fields in SEED_PRODUCTS:
            product = await uow.products.create(fields)
            await log_book.append(
                InventoryLogEntry(
                    product_id=product.id,
                    product_name=product.name,
                    quantity_change=product.quantity_in_stock,
                    new_quantity=product.quantity_in_stock,
                    log_type=InventoryLogType.INITIAL,
                )
            )
            products.append(product)

        customers = [await uow.customers.create(f) for f in SEED_CUSTOMERS]
        employees = [await uow.employees.create(f) for f in SEED_EMPLOYEES]
        for name in SEED_EXPENSE_CATEGORIES:
            await uow.expense_categories.create({"name": name})
        for name in SEED_INCOME_CATEGORIES:
            await uow.income_categories.create({"name": name})

        lifecycle = SaleLifecycleManager(uow.sales, ProductLedger(uow.products), log_book)
        laptop, mouse = products[0], products[1]
        await lifecycle.create_sale(
            NewSale(
                items=[
                    SaleItem(
                        product_id=p.id,
                        product_name=p.name,
                        quantity=1,
                        price=p.selling_price,
                        purchase_price=p.purchase_price,
                    )
                    for p in (laptop, mouse)
                ],
                discount=500_000,
                status=SaleStatus.COMPLETED,
                customer_id=customers[0].id,
                customer_name=customers[0].name,
                employee_id=employees[1].id,
                employee_name=employees[1].name,
                notes="Express delivery",
            )
        )

        await set_meta(uow.connection, SEEDED_FLAG, "true")

    logger.info("database_seeded", products=len(products))
    return True
