"""Tests for the AppState façade over in-memory stores."""

from datetime import date

import pytest

from retailpos.application import AppState, CreateSaleRequest, SaleItemRequest
from retailpos.core.entities import (
    AdjustmentKind,
    CashEntryFields,
    CategoryFields,
    CustomerFields,
    EmployeeFields,
    ProductFields,
    SaleStatus,
    StockAdjustment,
)
from retailpos.core.exceptions import EntityNotFoundError, ProductNotFoundError, ValidationError


@pytest.fixture
async def state(uow_factory, store_factory) -> AppState:
    app = AppState(uow_factory=uow_factory, store_factory=store_factory)
    await app.fetch_data()
    return app


async def _add_product(state: AppState, stock: int = 10):
    return await state.add_product(
        ProductFields(name="Widget", purchase_price=6.0, selling_price=10.0, quantity_in_stock=stock)
    )


class TestSnapshot:
    async def test_starts_empty(self, state):
        assert state.products == []
        assert state.loading is False

    async def test_refreshed_after_mutation(self, state):
        product = await _add_product(state)

        assert [p.id for p in state.products] == [product.id]
        assert len(state.inventory_logs) == 1

    async def test_newest_first(self, state):
        first = await state.add_customer(CustomerFields(name="Ann"))
        second = await state.add_customer(CustomerFields(name="Bob"))

        assert [c.id for c in state.customers] == [second.id, first.id]

    async def test_categories_keep_store_order(self, state):
        await state.add_expense_category(CategoryFields(name="Rent"))
        await state.add_expense_category(CategoryFields(name="Power"))

        assert [c.name for c in state.expense_categories] == ["Rent", "Power"]


class TestCoreOperations:
    async def test_sale_then_return(self, state):
        product = await _add_product(state, stock=10)
        sale = await state.add_sale(
            CreateSaleRequest(
                items=[
                    SaleItemRequest(
                        product_id=product.id, product_name="Widget", quantity=3, price=10.0
                    )
                ],
                status=SaleStatus.COMPLETED,
            )
        )
        assert state.products[0].quantity_in_stock == 7

        await state.update_sale_status(sale.id, SaleStatus.RETURNED)

        assert state.products[0].quantity_in_stock == 10
        assert state.sales[0].status == SaleStatus.RETURNED
        assert await state.verify_stock() == []

    async def test_adjust_inventory(self, state):
        product = await _add_product(state, stock=5)

        updated = await state.adjust_inventory(
            product.id, None, StockAdjustment(kind=AdjustmentKind.STOCK_TAKE, quantity=2)
        )

        assert updated.quantity_in_stock == 2
        assert state.inventory_logs[0].quantity_change == -3

    async def test_failure_reraised_and_snapshot_kept(self, state):
        await _add_product(state)
        before = state.snapshot

        with pytest.raises(ProductNotFoundError):
            await state.adjust_inventory(
                "missing", None, StockAdjustment(kind=AdjustmentKind.STOCK_IN, quantity=1)
            )

        assert state.snapshot is before
        assert state.loading is False


class TestCatalog:
    async def test_update_product_rejects_stock(self, state):
        product = await _add_product(state)

        with pytest.raises(ValidationError):
            await state.update_product(product.id, {"quantity_in_stock": 99})
        with pytest.raises(ValidationError):
            await state.update_product(product.id, {"quantityInStock": 99})

    async def test_update_product_fields(self, state):
        product = await _add_product(state)

        updated = await state.update_product(product.id, {"selling_price": 12.5})

        assert updated.selling_price == 12.5
        assert updated.quantity_in_stock == product.quantity_in_stock
        assert state.products[0].selling_price == 12.5

    async def test_update_missing_customer(self, state):
        with pytest.raises(EntityNotFoundError):
            await state.update_customer("nope", {"name": "X"})

    async def test_invalid_update_is_domain_error(self, state):
        customer = await state.add_customer(CustomerFields(name="Ann"))

        with pytest.raises(ValidationError) as exc_info:
            await state.update_customer(customer.id, {"name": ""})

        assert exc_info.value.details["field"] == "name"
        assert state.customers[0].name == "Ann"

    async def test_delete_product_keeps_logs(self, state):
        product = await _add_product(state)

        await state.delete_product(product.id)

        assert state.products == []
        assert len(state.inventory_logs) == 1


class TestCrud:
    async def test_expenses_and_incomes(self, state):
        category = await state.add_expense_category(CategoryFields(name="Rent"))
        expense = await state.add_expense(
            CashEntryFields(
                description="May rent",
                amount=500.0,
                category_id=category.id,
                category_name=category.name,
            )
        )
        await state.add_income(CashEntryFields(description="Tips", amount=20.0))

        assert state.dashboard_stats().total_expenses == 500.0
        assert len(state.incomes) == 1

        await state.delete_expense(expense.id)
        assert state.expenses == []

    async def test_employee_lifecycle(self, state):
        employee = await state.add_employee(EmployeeFields(name="Dana", position="Cashier"))
        await state.update_employee(employee.id, {"position": "Manager"})
        assert state.employees[0].position == "Manager"

        await state.delete_employee(employee.id)
        assert state.employees == []


class TestDerivedViews:
    async def test_daily_revenue_uses_configured_window(self, state):
        series = state.daily_revenue(today=date(2024, 5, 7))
        assert len(series) == 7
        assert series[-1].day == date(2024, 5, 7)

    async def test_export_import(self, state):
        await _add_product(state)
        document = await state.export_data()
        await state.delete_product(state.products[0].id)

        result = await state.import_data(document)

        assert result.imported["products"] == 1
        assert len(state.products) == 1

    async def test_sales_report_for_range(self, state):
        product = await _add_product(state, stock=10)
        for quantity, status in ((3, SaleStatus.COMPLETED), (1, SaleStatus.PENDING)):
            await state.add_sale(
                CreateSaleRequest(
                    items=[
                        SaleItemRequest(
                            product_id=product.id,
                            product_name="Widget",
                            quantity=quantity,
                            price=10.0,
                            purchase_price=6.0,
                        )
                    ],
                    status=status,
                )
            )

        report = state.sales_report(date(2024, 5, 1), date(2024, 5, 1))

        assert report.total_sales == 2
        assert report.total_revenue == 30.0
        assert report.gross_profit == 12.0
        assert state.sales_report() == report
        assert state.sales_report(start=date(2024, 5, 2)).total_sales == 0
