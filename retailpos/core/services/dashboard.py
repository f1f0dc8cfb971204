"""
Derived statistics for the dashboard and sales report.

Pure functions over already-consistent snapshots.
"""

from collections.abc import Iterable, Sequence
from dataclasses import dataclass
from datetime import UTC, date, datetime, timedelta
from typing import TypeVar

from retailpos.core.entities.base import Record
from retailpos.core.entities.finance import Expense, Income
from retailpos.core.entities.sale import Sale, SaleStatus

R = TypeVar("R", bound=Record)


@dataclass(frozen=True)
class DashboardStats:
    """Headline figures."""

    total_estimated_revenue: float  # non-returned sales, before discount
    total_actual_revenue: float  # completed sales, after discount
    total_expenses: float
    cost_of_goods_sold: float
    net_profit: float


@dataclass(frozen=True)
class DailyRevenue:
    """Revenue and gross profit of completed sales on one day."""

    day: date
    revenue: float
    gross_profit: float

    @property
    def label(self) -> str:
        return self.day.strftime("%d/%m")


@dataclass(frozen=True)
class SalesReport:
    total_revenue: float
    gross_profit: float
    total_sales: int


def completed(sales: Iterable[Sale]) -> list[Sale]:
    return [s for s in sales if s.status == SaleStatus.COMPLETED]


def sum_amounts(entries: Iterable[Expense | Income]) -> float:
    return sum(e.amount for e in entries)


def compute_dashboard_stats(sales: Sequence[Sale], expenses: Sequence[Expense]) -> DashboardStats:
    """Compute the dashboard headline figures."""
    done = completed(sales)
    estimated = sum(s.total_amount for s in sales if s.status != SaleStatus.RETURNED)
    actual = sum(s.final_amount for s in done)
    cogs = sum(s.cost_of_goods for s in done)
    total_expenses = sum_amounts(expenses)

    return DashboardStats(
        total_estimated_revenue=estimated,
        total_actual_revenue=actual,
        total_expenses=total_expenses,
        cost_of_goods_sold=cogs,
        net_profit=actual - total_expenses - cogs,
    )


def daily_revenue_series(
    sales: Sequence[Sale], days: int = 7, today: date | None = None
) -> list[DailyRevenue]:
    """Per-day revenue of completed sales for the last ``days`` days, oldest first.

    Days are UTC calendar days, matching ``created_at``.
    """
    today = today or datetime.now(UTC).date()
    window = [today - timedelta(days=offset) for offset in reversed(range(days))]

    series = []
    for day in window:
        day_sales = [s for s in completed(sales) if s.created_at.date() == day]
        revenue = sum(s.final_amount for s in day_sales)
        cost = sum(s.cost_of_goods for s in day_sales)
        series.append(DailyRevenue(day=day, revenue=revenue, gross_profit=revenue - cost))
    return series


def filter_by_date_range(
    records: Iterable[R], start: date | None = None, end: date | None = None
) -> list[R]:
    """Keep records created between start and end, both days inclusive."""
    kept = []
    for record in records:
        day = record.created_at.date()
        if start is not None and day < start:
            continue
        if end is not None and day > end:
            continue
        kept.append(record)
    return kept


def sales_report(sales: Sequence[Sale]) -> SalesReport:
    """Revenue and gross profit of the completed sales among ``sales``."""
    done = completed(sales)
    revenue = sum(s.final_amount for s in done)
    cost = sum(s.cost_of_goods for s in done)
    return SalesReport(total_revenue=revenue, gross_profit=revenue - cost, total_sales=len(sales))
