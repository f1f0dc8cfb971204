"""
Application use cases.

Each mutating use case runs its writes inside one unit of work.
"""

from retailpos.application.use_cases.add_product import AddProductResult, AddProductUseCase
from retailpos.application.use_cases.adjust_inventory import (
    AdjustInventoryResult,
    AdjustInventoryUseCase,
)
from retailpos.application.use_cases.create_sale import CreateSaleResult, CreateSaleUseCase
from retailpos.application.use_cases.generate_bulk_orders import (
    BulkOrderResult,
    GenerateBulkOrdersUseCase,
)
from retailpos.application.use_cases.transfer_data import (
    ExportDataUseCase,
    ImportDataResult,
    ImportDataUseCase,
)
from retailpos.application.use_cases.update_sale_status import (
    UpdateSaleStatusResult,
    UpdateSaleStatusUseCase,
)

__all__ = [
    "AddProductUseCase",
    "AddProductResult",
    "AdjustInventoryUseCase",
    "AdjustInventoryResult",
    "CreateSaleUseCase",
    "CreateSaleResult",
    "GenerateBulkOrdersUseCase",
    "BulkOrderResult",
    "ExportDataUseCase",
    "ImportDataUseCase",
    "ImportDataResult",
    "UpdateSaleStatusUseCase",
    "UpdateSaleStatusResult",
]
