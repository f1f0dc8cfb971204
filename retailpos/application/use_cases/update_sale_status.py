"""Update Sale Status Use Case - status transition with its stock effect."""

from collections.abc import Callable
from dataclasses import dataclass

from retailpos.application.dto.requests import UpdateSaleStatusRequest
from retailpos.config import get_logger
from retailpos.core.entities.sale import Sale, SaleStatus
from retailpos.core.exceptions import SaleNotFoundError
from retailpos.core.interfaces.unit_of_work import IUnitOfWork
from retailpos.core.services import InventoryLogBook, ProductLedger, SaleLifecycleManager

logger = get_logger(__name__)


@dataclass
class UpdateSaleStatusResult:
    """Result of a status change."""

    sale: Sale
    previous_status: SaleStatus

    @property
    def changed(self) -> bool:
        return self.sale.status != self.previous_status


class UpdateSaleStatusUseCase:
    """Move a sale between Pending, Completed and Returned."""

    def __init__(self, uow_factory: Callable[[], IUnitOfWork] | None = None):
        self._uow_factory = uow_factory

    def _new_uow(self) -> IUnitOfWork:
        if self._uow_factory is None:
            from retailpos.infrastructure.storage.sqlite import get_unit_of_work

            self._uow_factory = get_unit_of_work
        return self._uow_factory()

    async def execute(self, request: UpdateSaleStatusRequest) -> UpdateSaleStatusResult:
        """Execute update sale status use case."""
        logger.info(
            "update_sale_status_started",
            sale_id=request.sale_id,
            status=request.status.value,
        )

        async with self._new_uow() as uow:
            previous = await uow.sales.get_by_id(request.sale_id)
            if previous is None:
                raise SaleNotFoundError(request.sale_id)
            lifecycle = SaleLifecycleManager(
                uow.sales,
                ProductLedger(uow.products),
                InventoryLogBook(uow.inventory_logs),
            )
            sale = await lifecycle.update_sale_status(request.sale_id, request.status)

        return UpdateSaleStatusResult(sale=sale, previous_status=previous.status)
