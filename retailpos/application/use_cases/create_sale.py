"""Create Sale Use Case - persists a sale and deducts its items from stock."""

from collections.abc import Callable
from dataclasses import dataclass

from retailpos.application.dto.requests import CreateSaleRequest
from retailpos.config import get_logger
from retailpos.core.entities.sale import NewSale, Sale
from retailpos.core.interfaces.unit_of_work import IUnitOfWork
from retailpos.core.services import InventoryLogBook, ProductLedger, SaleLifecycleManager

logger = get_logger(__name__)


@dataclass
class CreateSaleResult:
    """Result of creating a sale."""

    sale: Sale


class CreateSaleUseCase:
    """Create a sale inside one unit of work."""

    def __init__(self, uow_factory: Callable[[], IUnitOfWork] | None = None):
        self._uow_factory = uow_factory

    def _new_uow(self) -> IUnitOfWork:
        if self._uow_factory is None:
            from retailpos.infrastructure.storage.sqlite import get_unit_of_work

            self._uow_factory = get_unit_of_work
        return self._uow_factory()

    async def execute(self, request: CreateSaleRequest | NewSale) -> CreateSaleResult:
        """Execute create sale use case."""
        new_sale = request.to_new_sale() if isinstance(request, CreateSaleRequest) else request
        logger.info(
            "create_sale_started",
            items=len(new_sale.items),
            status=new_sale.status.value,
        )

        async with self._new_uow() as uow:
            lifecycle = SaleLifecycleManager(
                uow.sales,
                ProductLedger(uow.products),
                InventoryLogBook(uow.inventory_logs),
            )
            sale = await lifecycle.create_sale(new_sale)

        logger.info("create_sale_complete", sale_id=sale.id, total=sale.final_amount)
        return CreateSaleResult(sale=sale)
