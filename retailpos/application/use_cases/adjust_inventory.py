"""Adjust Inventory Use Case - manual stock-in or stock-take."""

from collections.abc import Callable
from dataclasses import dataclass

from retailpos.application.dto.requests import AdjustInventoryRequest
from retailpos.config import get_logger
from retailpos.core.entities.product import Product
from retailpos.core.interfaces.unit_of_work import IUnitOfWork
from retailpos.core.services import (
    InventoryAdjustmentManager,
    InventoryLogBook,
    ProductLedger,
)

logger = get_logger(__name__)


@dataclass
class AdjustInventoryResult:
    """Result of an adjustment."""

    product: Product


class AdjustInventoryUseCase:
    """Apply a stock adjustment inside one unit of work."""

    def __init__(self, uow_factory: Callable[[], IUnitOfWork] | None = None):
        self._uow_factory = uow_factory

    def _new_uow(self) -> IUnitOfWork:
        if self._uow_factory is None:
            from retailpos.infrastructure.storage.sqlite import get_unit_of_work

            self._uow_factory = get_unit_of_work
        return self._uow_factory()

    async def execute(self, request: AdjustInventoryRequest) -> AdjustInventoryResult:
        """Execute adjust inventory use case."""
        logger.info(
            "adjust_inventory_started",
            product_id=request.product_id,
            kind=request.kind.value,
            quantity=request.quantity,
        )

        async with self._new_uow() as uow:
            manager = InventoryAdjustmentManager(
                ProductLedger(uow.products), InventoryLogBook(uow.inventory_logs)
            )
            product = await manager.adjust(
                request.product_id, request.product_name, request.to_adjustment()
            )

        logger.info(
            "adjust_inventory_complete",
            product_id=product.id,
            quantity_in_stock=product.quantity_in_stock,
        )
        return AdjustInventoryResult(product=product)
