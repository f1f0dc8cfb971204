"""Export / Import Use Cases - every collection to and from one JSON document."""

import json
from collections.abc import Callable
from dataclasses import dataclass, field
from typing import Any

import pydantic

from retailpos.config import get_logger
from retailpos.core.entities.base import Record
from retailpos.core.entities.collections import COLLECTION_MODELS
from retailpos.core.exceptions import ValidationError
from retailpos.core.interfaces.unit_of_work import IUnitOfWork

logger = get_logger(__name__)


class ExportDataUseCase:
    """Serialize every known collection, records in store order."""

    def __init__(self, uow_factory: Callable[[], IUnitOfWork] | None = None):
        self._uow_factory = uow_factory

    def _new_uow(self) -> IUnitOfWork:
        if self._uow_factory is None:
            from retailpos.infrastructure.storage.sqlite import get_unit_of_work

            self._uow_factory = get_unit_of_work
        return self._uow_factory()

    async def execute(self) -> dict[str, list[dict[str, Any]]]:
        document: dict[str, list[dict[str, Any]]] = {}
        async with self._new_uow() as uow:
            for key in COLLECTION_MODELS:
                records = await uow.store(key).get_all()
                document[key] = [r.to_record() for r in records]

        logger.info(
            "data_exported",
            collections=len(document),
            records=sum(len(v) for v in document.values()),
        )
        return document


@dataclass
class ImportDataResult:
    """Counts of records written per collection."""

    imported: dict[str, int] = field(default_factory=dict)
    ignored_keys: list[str] = field(default_factory=list)


class ImportDataUseCase:
    """
    Replace collections from an exported document.

    Every record is validated before anything is written; the replacement
    runs in a single unit of work.
    """

    def __init__(self, uow_factory: Callable[[], IUnitOfWork] | None = None):
        self._uow_factory = uow_factory

    def _new_uow(self) -> IUnitOfWork:
        if self._uow_factory is None:
            from retailpos.infrastructure.storage.sqlite import get_unit_of_work

            self._uow_factory = get_unit_of_work
        return self._uow_factory()

    @staticmethod
    def parse(text: str) -> dict[str, Any]:
        """Parse document text, rejecting anything but a JSON object."""
        try:
            document = json.loads(text)
        except json.JSONDecodeError as e:
            raise ValidationError("document", f"invalid JSON: {e.msg}") from e
        if not isinstance(document, dict):
            raise ValidationError("document", "expected a JSON object")
        return document

    async def execute(self, document: dict[str, Any]) -> ImportDataResult:
        """Execute import."""
        result = ImportDataResult()
        parsed: dict[str, list[Record]] = {}

        for key, value in document.items():
            model = COLLECTION_MODELS.get(key)
            if model is None:
                result.ignored_keys.append(key)
                continue
            parsed[key] = self._validate_collection(key, model, value)

        async with self._new_uow() as uow:
            for key, records in parsed.items():
                await uow.store(key).replace_all(records)
                result.imported[key] = len(records)

        logger.info(
            "data_imported",
            imported=result.imported,
            ignored=result.ignored_keys,
        )
        return result

    @staticmethod
    def _validate_collection(key: str, model: type[Record], value: Any) -> list[Record]:
        # Older exports hold each collection as a JSON-encoded string
        if isinstance(value, str):
            try:
                value = json.loads(value)
            except json.JSONDecodeError as e:
                raise ValidationError(key, f"invalid JSON: {e.msg}") from e
        if not isinstance(value, list):
            raise ValidationError(key, "expected a list of records", value)

        try:
            return [model.model_validate(item) for item in value]
        except pydantic.ValidationError as e:
            raise ValidationError(key, f"invalid record: {e.errors()[0]['msg']}") from e
