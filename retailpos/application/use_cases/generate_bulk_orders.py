"""Generate Bulk Orders Use Case - one pending sale per listed customer."""

from collections.abc import Callable
from dataclasses import dataclass, field

from retailpos.application.dto.requests import BulkOrderRequest
from retailpos.config import get_logger
from retailpos.core.entities import NewSale, Sale, SaleItem, SaleStatus
from retailpos.core.exceptions import InsufficientStockError, ValidationError
from retailpos.core.interfaces.unit_of_work import IUnitOfWork
from retailpos.core.services import InventoryLogBook, ProductLedger, SaleLifecycleManager

logger = get_logger(__name__)


@dataclass
class BulkOrderResult:
    """Result of a bulk order run."""

    sales: list[Sale] = field(default_factory=list)

    @property
    def count(self) -> int:
        return len(self.sales)


class GenerateBulkOrdersUseCase:
    """
    Create the same order for many customers.

    Sale creation itself never checks stock, so the whole batch is checked
    up front here before the first sale is written.
    """

    def __init__(self, uow_factory: Callable[[], IUnitOfWork] | None = None):
        self._uow_factory = uow_factory

    def _new_uow(self) -> IUnitOfWork:
        if self._uow_factory is None:
            from retailpos.infrastructure.storage.sqlite import get_unit_of_work

            self._uow_factory = get_unit_of_work
        return self._uow_factory()

    async def execute(self, request: BulkOrderRequest) -> BulkOrderResult:
        """Execute bulk order generation."""
        logger.info(
            "bulk_orders_started",
            product_id=request.product_id,
            orders=len(request.customers),
            quantity_per_order=request.quantity_per_order,
        )

        result = BulkOrderResult()
        async with self._new_uow() as uow:
            ledger = ProductLedger(uow.products)
            product = await ledger.require(request.product_id)

            employee = await uow.employees.get_by_id(request.employee_id)
            if employee is None:
                raise ValidationError("employee_id", "employee not found", request.employee_id)

            needed = len(request.customers) * request.quantity_per_order
            if needed > product.quantity_in_stock:
                raise InsufficientStockError(
                    product_id=product.id,
                    requested=needed,
                    available=product.quantity_in_stock,
                )

            known_by_phone = {c.phone: c for c in await uow.customers.get_all() if c.phone}
            lifecycle = SaleLifecycleManager(uow.sales, ledger, InventoryLogBook(uow.inventory_logs))

            for entry in request.customers:
                customer = known_by_phone.get(entry.phone)
                sale = await lifecycle.create_sale(
                    NewSale(
                        items=[
                            SaleItem(
                                product_id=product.id,
                                product_name=product.name,
                                quantity=request.quantity_per_order,
                                price=product.selling_price,
                                purchase_price=product.purchase_price,
                            )
                        ],
                        discount=request.discount_per_order,
                        status=SaleStatus.PENDING,
                        customer_id=customer.id if customer else None,
                        customer_name=customer.name if customer else entry.name,
                        employee_id=employee.id,
                        employee_name=employee.name,
                    )
                )
                result.sales.append(sale)

        logger.info("bulk_orders_complete", product_id=request.product_id, created=result.count)
        return result
