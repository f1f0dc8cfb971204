"""Abstract interface for per-collection record storage."""

from abc import ABC, abstractmethod
from collections.abc import Mapping
from typing import Any, Generic, TypeVar

from retailpos.core.entities.base import Record

T = TypeVar("T", bound=Record)


class IEntityStore(ABC, Generic[T]):
    """CRUD over one collection of identified, timestamped records."""

    collection: str

    @abstractmethod
    async def get_all(self, newest_first: bool = False) -> list[T]:
        """List every record, in insertion order unless newest_first."""
        pass

    @abstractmethod
    async def get_by_id(self, entity_id: str) -> T | None:
        """Get a record by ID."""
        pass

    @abstractmethod
    async def create(self, fields: Mapping[str, Any]) -> T:
        """
        Store a new record, assigning a fresh id and the current timestamp.

        Raises ValidationError if the fields do not make a valid record.
        """
        pass

    @abstractmethod
    async def update(self, entity_id: str, fields: Mapping[str, Any]) -> T:
        """
        Merge fields into a record.

        Raises EntityNotFoundError if absent, ValidationError if the merged
        record is invalid.
        """
        pass

    @abstractmethod
    async def delete(self, entity_id: str) -> None:
        """Delete a record. Missing ids are ignored."""
        pass

    @abstractmethod
    async def replace_all(self, records: list[T]) -> None:
        """Replace the whole collection, keeping ids and timestamps."""
        pass
