"""Data Transfer Objects for the application layer."""

from retailpos.application.dto.requests import (
    AdjustInventoryRequest,
    BulkCustomer,
    BulkOrderRequest,
    CreateSaleRequest,
    SaleItemRequest,
    UpdateSaleStatusRequest,
)

__all__ = [
    "AdjustInventoryRequest",
    "BulkCustomer",
    "BulkOrderRequest",
    "CreateSaleRequest",
    "SaleItemRequest",
    "UpdateSaleStatusRequest",
]
