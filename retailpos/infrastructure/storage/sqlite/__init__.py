"""SQLite storage implementations."""

from retailpos.core.entities.collections import COLLECTION_MODELS
from retailpos.infrastructure.storage.sqlite.connection import (
    ConnectionPool,
    close_pool,
    get_connection,
    get_pool,
    get_transaction,
)
from retailpos.infrastructure.storage.sqlite.entity_store import SQLiteEntityStore
from retailpos.infrastructure.storage.sqlite.schema import initialize_database
from retailpos.infrastructure.storage.sqlite.seed import seed_database
from retailpos.infrastructure.storage.sqlite.unit_of_work import SQLiteUnitOfWork

# Singleton read stores, one per collection
_stores: dict[str, SQLiteEntityStore] = {}


def get_entity_store(collection: str) -> SQLiteEntityStore:
    """Get the pooled (non-transactional) store for a collection."""
    if collection not in _stores:
        _stores[collection] = SQLiteEntityStore(collection, COLLECTION_MODELS[collection])
    return _stores[collection]


def get_unit_of_work() -> SQLiteUnitOfWork:
    """Create a fresh unit of work on the global pool."""
    return SQLiteUnitOfWork()


__all__ = [
    # Connection
    "ConnectionPool",
    "get_pool",
    "close_pool",
    "get_connection",
    "get_transaction",
    # Stores
    "SQLiteEntityStore",
    "SQLiteUnitOfWork",
    # Schema
    "initialize_database",
    "seed_database",
    # Factory functions
    "get_entity_store",
    "get_unit_of_work",
]
