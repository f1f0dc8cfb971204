"""Inventory audit trail entities."""

from enum import Enum

from pydantic import Field

from retailpos.core.entities.base import DomainModel, Record


class InventoryLogType(str, Enum):
    """Kinds of stock-changing events."""

    INITIAL = "Initial"
    STOCK_IN = "StockIn"
    SALE = "Sale"
    STOCK_TAKE = "StockTake"
    RETURN = "Return"
    ADJUSTMENT = "Adjustment"

    @classmethod
    def _missing_(cls, value):
        return _LEGACY_LOG_TYPES.get(value) if isinstance(value, str) else None


# Labels written by exports from the first release.
_LEGACY_LOG_TYPES = {
    "KHỞI TẠO": InventoryLogType.INITIAL,
    "NHẬP HÀNG": InventoryLogType.STOCK_IN,
    "BÁN HÀNG": InventoryLogType.SALE,
    "KIỂM KHO": InventoryLogType.STOCK_TAKE,
    "TRẢ HÀNG": InventoryLogType.RETURN,
    "SỬA ĐƠN HÀNG": InventoryLogType.ADJUSTMENT,
}


class AdjustmentKind(str, Enum):
    """Manual stock adjustments."""

    STOCK_IN = "StockIn"
    STOCK_TAKE = "StockTake"


class StockAdjustment(DomainModel):
    """A manual adjustment request.

    For STOCK_IN ``quantity`` is added to the shelf; for STOCK_TAKE it is the
    counted absolute level.
    """

    kind: AdjustmentKind
    quantity: int


class InventoryLogEntry(DomainModel):
    """Log data before it is appended."""

    product_id: str
    product_name: str
    quantity_change: int  # signed delta
    new_quantity: int  # stock right after the change
    log_type: InventoryLogType = Field(alias="type")
    sale_id: str | None = None


class InventoryLog(InventoryLogEntry, Record):
    """An appended, immutable audit entry."""
