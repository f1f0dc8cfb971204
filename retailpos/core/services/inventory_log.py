"""Append-only inventory audit trail."""

from retailpos.config import get_logger
from retailpos.core.entities.inventory import InventoryLog, InventoryLogEntry
from retailpos.core.interfaces.entity_store import IEntityStore

logger = get_logger(__name__)


class InventoryLogBook:
    """Appends and lists inventory log entries. Entries are never changed."""

    def __init__(self, logs: IEntityStore[InventoryLog]) -> None:
        self._logs = logs

    async def append(self, entry: InventoryLogEntry) -> InventoryLog:
        """Store an entry, assigning its id and timestamp."""
        log = await self._logs.create(entry.model_dump())
        logger.info(
            "inventory_log_appended",
            log_id=log.id,
            product_id=log.product_id,
            type=log.log_type.value,
            change=log.quantity_change,
            new_quantity=log.new_quantity,
        )
        return log

    async def list_all(self) -> list[InventoryLog]:
        """All entries, newest first."""
        return await self._logs.get_all(newest_first=True)

    async def list_for_product(self, product_id: str) -> list[InventoryLog]:
        """A product's entries in replay order (oldest first)."""
        return [log for log in await self._logs.get_all() if log.product_id == product_id]

    async def latest_for_product(self, product_id: str) -> InventoryLog | None:
        for log in await self.list_all():
            if log.product_id == product_id:
                return log
        return None
