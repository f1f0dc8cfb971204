"""Manual stock adjustments: stock-in and physical stock-take."""

from retailpos.config import get_logger
from retailpos.core.entities.inventory import (
    AdjustmentKind,
    InventoryLogEntry,
    InventoryLogType,
    StockAdjustment,
)
from retailpos.core.entities.product import Product
from retailpos.core.services.inventory_log import InventoryLogBook
from retailpos.core.services.product_ledger import ProductLedger

logger = get_logger(__name__)


class InventoryAdjustmentManager:
    """Applies a manual adjustment and records exactly one log entry for it."""

    def __init__(self, ledger: ProductLedger, log_book: InventoryLogBook) -> None:
        self._ledger = ledger
        self._log_book = log_book

    async def adjust(
        self,
        product_id: str,
        product_name: str | None,
        adjustment: StockAdjustment,
    ) -> Product:
        product = await self._ledger.require(product_id)
        current = product.quantity_in_stock

        if adjustment.kind is AdjustmentKind.STOCK_IN:
            new_quantity = current + adjustment.quantity
            change = adjustment.quantity
            log_type = InventoryLogType.STOCK_IN
        else:
            # Stock-take: the counted figure is authoritative.
            new_quantity = adjustment.quantity
            change = new_quantity - current
            log_type = InventoryLogType.STOCK_TAKE

        await self._log_book.append(
            InventoryLogEntry(
                product_id=product_id,
                product_name=product_name or product.name,
                quantity_change=change,
                new_quantity=new_quantity,
                log_type=log_type,
            )
        )
        updated = await self._ledger.set_stock(product_id, new_quantity)

        logger.info(
            "inventory_adjusted",
            product_id=product_id,
            kind=adjustment.kind.value,
            change=change,
            new_quantity=new_quantity,
        )
        return updated
