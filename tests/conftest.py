"""Pytest configuration and fixtures."""

from collections.abc import AsyncGenerator
from datetime import UTC, datetime
from pathlib import Path
from unittest.mock import MagicMock, patch

import pytest

from retailpos.application import AppState
from retailpos.core.entities import (
    InventoryLog,
    InventoryLogType,
    Product,
    Sale,
    SaleItem,
    SaleStatus,
)
from retailpos.infrastructure.storage.sqlite import connection as conn_module
from retailpos.infrastructure.storage.sqlite import (
    close_pool,
    get_entity_store,
    get_unit_of_work,
    initialize_database,
)


@pytest.fixture
def temp_db_path(tmp_path: Path) -> Path:
    """Create a temporary database path."""
    return tmp_path / "test.db"


@pytest.fixture
def mock_settings(temp_db_path: Path):
    """Mock settings with temp database path."""
    mock = MagicMock()
    mock.storage.db_path = temp_db_path
    mock.storage.pool_size = 2
    mock.storage.busy_timeout = 5000
    return mock


@pytest.fixture
async def sqlite_db(mock_settings) -> AsyncGenerator[Path, None]:
    """Global pool pointed at a fresh temporary database with the schema applied."""
    conn_module._pool = None
    with patch.object(conn_module, "get_settings", return_value=mock_settings):
        await initialize_database()
        yield mock_settings.storage.db_path
        await close_pool()


@pytest.fixture
async def app_state(sqlite_db: Path) -> AppState:
    """AppState over the temporary database, with an empty first snapshot."""
    state = AppState(uow_factory=get_unit_of_work, store_factory=get_entity_store)
    await state.fetch_data()
    return state


@pytest.fixture
def make_product():
    """Build a stored-looking product."""

    def _make(product_id: str = "p1", stock: int = 10, **overrides) -> Product:
        fields = {
            "id": product_id,
            "name": f"Product {product_id}",
            "purchase_price": 60.0,
            "selling_price": 100.0,
            "quantity_in_stock": stock,
            "created_at": datetime(2024, 5, 1, 9, 0, tzinfo=UTC),
        }
        fields.update(overrides)
        return Product(**fields)

    return _make


@pytest.fixture
def make_sale():
    """Build a stored-looking sale of (product_id, quantity) lines."""

    def _make(
        *lines: tuple[str, int],
        status: SaleStatus = SaleStatus.COMPLETED,
        sale_id: str = "s1",
        discount: float = 0.0,
        created_at: datetime | None = None,
        price: float = 100.0,
        purchase_price: float = 60.0,
    ) -> Sale:
        return Sale(
            id=sale_id,
            created_at=created_at or datetime(2024, 5, 1, 10, 0, tzinfo=UTC),
            items=[
                SaleItem(
                    product_id=pid,
                    product_name=f"Product {pid}",
                    quantity=qty,
                    price=price,
                    purchase_price=purchase_price,
                )
                for pid, qty in lines
            ],
            discount=discount,
            status=status,
        )

    return _make


@pytest.fixture
def make_log():
    """Build a stored-looking inventory log entry."""
    counter = {"n": 0}

    def _make(
        product_id: str,
        change: int,
        new_quantity: int,
        log_type: InventoryLogType = InventoryLogType.STOCK_IN,
    ) -> InventoryLog:
        counter["n"] += 1
        return InventoryLog(
            id=f"log-{counter['n']}",
            created_at=datetime(2024, 5, 1, 9, counter["n"], tzinfo=UTC),
            product_id=product_id,
            product_name=f"Product {product_id}",
            quantity_change=change,
            new_quantity=new_quantity,
            log_type=log_type,
        )

    return _make
