"""
Application layer - use cases, DTOs, the state façade and service factories.

Consumers (CLI, UI) talk to ``AppState``; it runs use cases that coordinate
core services inside a unit of work.
"""

from retailpos.application.dto import (
    AdjustInventoryRequest,
    BulkCustomer,
    BulkOrderRequest,
    CreateSaleRequest,
    SaleItemRequest,
    UpdateSaleStatusRequest,
)
from retailpos.application.services import build_app_state, open_app_state, prepare_database
from retailpos.application.state import AppState, Snapshot

__all__ = [
    # DTOs
    "AdjustInventoryRequest",
    "BulkCustomer",
    "BulkOrderRequest",
    "CreateSaleRequest",
    "SaleItemRequest",
    "UpdateSaleStatusRequest",
    # State
    "AppState",
    "Snapshot",
    # Factories
    "build_app_state",
    "open_app_state",
    "prepare_database",
]
