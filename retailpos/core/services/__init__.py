"""
Core business logic services.

Layer-pure services that depend only on:
- retailpos/core/entities/*
- retailpos/core/interfaces/*
- retailpos/core/exceptions.py

NO infrastructure imports. All dependencies injected via constructor.
"""

from retailpos.core.services.dashboard import (
    DailyRevenue,
    DashboardStats,
    SalesReport,
    compute_dashboard_stats,
    daily_revenue_series,
    filter_by_date_range,
    sales_report,
    sum_amounts,
)
from retailpos.core.services.inventory_adjustment import InventoryAdjustmentManager
from retailpos.core.services.inventory_log import InventoryLogBook
from retailpos.core.services.product_ledger import ProductLedger
from retailpos.core.services.sale_lifecycle import (
    TRANSITIONS,
    SaleLifecycleManager,
    StockEffect,
)
from retailpos.core.services.stock_auditor import StockAuditor, StockDiscrepancy

__all__ = [
    # Stock
    "ProductLedger",
    "InventoryLogBook",
    "InventoryAdjustmentManager",
    # Sales
    "SaleLifecycleManager",
    "StockEffect",
    "TRANSITIONS",
    # Audit
    "StockAuditor",
    "StockDiscrepancy",
    # Reporting
    "DashboardStats",
    "DailyRevenue",
    "SalesReport",
    "compute_dashboard_stats",
    "daily_revenue_series",
    "filter_by_date_range",
    "sales_report",
    "sum_amounts",
]
