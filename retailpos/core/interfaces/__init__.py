"""Core interfaces (ports) for dependency injection."""

from retailpos.core.interfaces.entity_store import IEntityStore
from retailpos.core.interfaces.unit_of_work import IUnitOfWork

__all__ = [
    "IEntityStore",
    "IUnitOfWork",
]
