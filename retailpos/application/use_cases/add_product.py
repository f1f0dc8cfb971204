"""Add Product Use Case - catalog entry with its opening audit entry."""

from collections.abc import Callable
from dataclasses import dataclass

from retailpos.config import get_logger
from retailpos.core.entities import (
    InventoryLog,
    InventoryLogEntry,
    InventoryLogType,
    Product,
    ProductFields,
)
from retailpos.core.interfaces.unit_of_work import IUnitOfWork
from retailpos.core.services import InventoryLogBook

logger = get_logger(__name__)


@dataclass
class AddProductResult:
    """Result of adding a product."""

    product: Product
    initial_log: InventoryLog


class AddProductUseCase:
    """Create a product and the Initial log that opens its audit trail."""

    def __init__(self, uow_factory: Callable[[], IUnitOfWork] | None = None):
        self._uow_factory = uow_factory

    def _new_uow(self) -> IUnitOfWork:
        if self._uow_factory is None:
            from retailpos.infrastructure.storage.sqlite import get_unit_of_work

            self._uow_factory = get_unit_of_work
        return self._uow_factory()

    async def execute(self, fields: ProductFields) -> AddProductResult:
        """Execute add product use case."""
        async with self._new_uow() as uow:
            product = await uow.products.create(fields.model_dump())
            log = await InventoryLogBook(uow.inventory_logs).append(
                InventoryLogEntry(
                    product_id=product.id,
                    product_name=product.name,
                    quantity_change=product.quantity_in_stock,
                    new_quantity=product.quantity_in_stock,
                    log_type=InventoryLogType.INITIAL,
                )
            )

        logger.info(
            "product_added",
            product_id=product.id,
            quantity_in_stock=product.quantity_in_stock,
        )
        return AddProductResult(product=product, initial_log=log)
