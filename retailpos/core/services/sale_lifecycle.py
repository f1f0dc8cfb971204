"""
Sale lifecycle: creation and status transitions.

Stock is "out" while a sale's items count as sold; ``Returned`` is the one
state in which they are back on the shelf. Entering ``Returned`` restocks
every item and leaving it deducts them again, so the two effects are exact
inverses of each other.
"""

from enum import Enum
from types import MappingProxyType

from retailpos.config import get_logger
from retailpos.core.entities.inventory import InventoryLogEntry, InventoryLogType
from retailpos.core.entities.sale import NewSale, Sale, SaleItem, SaleStatus
from retailpos.core.exceptions import SaleNotFoundError
from retailpos.core.interfaces.entity_store import IEntityStore
from retailpos.core.services.inventory_log import InventoryLogBook
from retailpos.core.services.product_ledger import ProductLedger

logger = get_logger(__name__)


class StockEffect(str, Enum):
    """What a status transition does to the stock of a sale's items."""

    NONE = "none"
    RESTOCK = "restock"
    DEDUCT = "deduct"


_P, _C, _R = SaleStatus.PENDING, SaleStatus.COMPLETED, SaleStatus.RETURNED

TRANSITIONS: MappingProxyType[tuple[SaleStatus, SaleStatus], StockEffect] = MappingProxyType(
    {
        (_P, _C): StockEffect.NONE,
        (_C, _P): StockEffect.NONE,
        (_P, _R): StockEffect.RESTOCK,
        (_C, _R): StockEffect.RESTOCK,
        (_R, _P): StockEffect.DEDUCT,
        (_R, _C): StockEffect.DEDUCT,
    }
)

# effect -> (sign applied to item quantity, log type)
_EFFECT_MOVES: dict[StockEffect, tuple[int, InventoryLogType]] = {
    StockEffect.RESTOCK: (1, InventoryLogType.RETURN),
    StockEffect.DEDUCT: (-1, InventoryLogType.ADJUSTMENT),
}


class SaleLifecycleManager:
    """Creates sales and moves them between statuses, keeping stock and logs in step."""

    def __init__(
        self,
        sales: IEntityStore[Sale],
        ledger: ProductLedger,
        log_book: InventoryLogBook,
    ) -> None:
        self._sales = sales
        self._ledger = ledger
        self._log_book = log_book

    async def create_sale(self, new_sale: NewSale) -> Sale:
        """
        Persist a sale and deduct its items from stock.

        Stock sufficiency is not checked here; callers that care (bulk
        orders) check before calling. Items whose product no longer exists
        stay on the sale but move no stock.
        """
        sale = await self._sales.create(new_sale.model_dump())

        for item in sale.items:
            await self._move_item(sale, item, -1, InventoryLogType.SALE)

        logger.info(
            "sale_created",
            sale_id=sale.id,
            status=sale.status.value,
            items=len(sale.items),
            final_amount=sale.final_amount,
        )
        return sale

    async def update_sale_status(self, sale_id: str, new_status: SaleStatus) -> Sale:
        """Move a sale to a new status, applying the transition's stock effect."""
        sale = await self._sales.get_by_id(sale_id)
        if sale is None:
            raise SaleNotFoundError(sale_id)

        if sale.status == new_status:
            return sale

        effect = TRANSITIONS[(sale.status, new_status)]
        if effect is not StockEffect.NONE:
            sign, log_type = _EFFECT_MOVES[effect]
            for item in sale.items:
                await self._move_item(sale, item, sign, log_type)

        updated = await self._sales.update(sale_id, {"status": new_status})
        logger.info(
            "sale_status_updated",
            sale_id=sale_id,
            from_status=sale.status.value,
            to_status=new_status.value,
            effect=effect.value,
        )
        return updated

    async def _move_item(
        self, sale: Sale, item: SaleItem, sign: int, log_type: InventoryLogType
    ) -> None:
        product = await self._ledger.get(item.product_id)
        if product is None:
            logger.warning(
                "sale_item_product_missing",
                sale_id=sale.id,
                product_id=item.product_id,
            )
            return

        change = sign * item.quantity
        new_quantity = product.quantity_in_stock + change
        await self._ledger.set_stock(item.product_id, new_quantity)
        await self._log_book.append(
            InventoryLogEntry(
                product_id=item.product_id,
                product_name=item.product_name,
                quantity_change=change,
                new_quantity=new_quantity,
                log_type=log_type,
                sale_id=sale.id,
            )
        )
