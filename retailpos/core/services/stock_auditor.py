"""
Stock auditor.

Replays each product's inventory log and reports where the trail and the
shelf disagree. Read-only; it never repairs anything.
"""

from collections import defaultdict
from dataclasses import dataclass

from retailpos.config import get_logger
from retailpos.core.entities.inventory import InventoryLog
from retailpos.core.entities.product import Product

logger = get_logger(__name__)


@dataclass(frozen=True)
class StockDiscrepancy:
    """One disagreement between a product and its audit trail."""

    product_id: str
    product_name: str
    reason: str  # "replay_mismatch" | "stock_mismatch" | "missing_trail"
    expected: int
    actual: int
    log_id: str | None = None


class StockAuditor:
    """Checks the log/product agreement for every product."""

    def audit(
        self, products: list[Product], logs: list[InventoryLog]
    ) -> list[StockDiscrepancy]:
        """
        Audit products against logs.

        Args:
            products: Every product.
            logs: Every log entry in creation order (oldest first).

        Returns:
            Discrepancies; empty when everything agrees.
        """
        by_product: dict[str, list[InventoryLog]] = defaultdict(list)
        for log in logs:
            by_product[log.product_id].append(log)

        discrepancies: list[StockDiscrepancy] = []
        for product in products:
            trail = by_product.get(product.id, [])
            discrepancies.extend(self._audit_product(product, trail))

        logger.info(
            "stock_audit_complete",
            products=len(products),
            logs=len(logs),
            discrepancies=len(discrepancies),
        )
        return discrepancies

    @staticmethod
    def _audit_product(product: Product, trail: list[InventoryLog]) -> list[StockDiscrepancy]:
        if not trail:
            if product.quantity_in_stock == 0:
                return []
            return [
                StockDiscrepancy(
                    product_id=product.id,
                    product_name=product.name,
                    reason="missing_trail",
                    expected=0,
                    actual=product.quantity_in_stock,
                )
            ]

        found: list[StockDiscrepancy] = []
        running = 0
        for log in trail:
            running += log.quantity_change
            if running != log.new_quantity:
                found.append(
                    StockDiscrepancy(
                        product_id=product.id,
                        product_name=product.name,
                        reason="replay_mismatch",
                        expected=running,
                        actual=log.new_quantity,
                        log_id=log.id,
                    )
                )
                # Continue from the recorded level so one bad entry is reported once.
                running = log.new_quantity

        latest = trail[-1]
        if latest.new_quantity != product.quantity_in_stock:
            found.append(
                StockDiscrepancy(
                    product_id=product.id,
                    product_name=product.name,
                    reason="stock_mismatch",
                    expected=latest.new_quantity,
                    actual=product.quantity_in_stock,
                    log_id=latest.id,
                )
            )
        return found
