# storefront/services/record_store.py
"""
SQLAlchemy-backed record store.

Collections map onto the ORM models in ``storefront.models.COLLECTIONS``.
Records are exchanged by field name, translated through each model's
``record_fields``. A successful ``save`` commits and then fires the
after-create or after-update hooks for the record, so handlers only ever
see committed data.
"""

import logging
from typing import Any, Dict, Optional

from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from storefront.core.enums import MutationKind
from storefront.core.exceptions import (
    CollectionNotFoundError,
    InvalidFilterError,
    RecordNotFoundError,
    RecordPersistError,
)
from storefront.integrations.base import Collection, Record, RecordStore
from storefront.integrations.filters import parse_filter
from storefront.integrations.hooks import HookRegistry
from storefront.models import COLLECTIONS

logger = logging.getLogger(__name__)


class SQLAlchemyRecordStore(RecordStore):

    def __init__(self, db: AsyncSession, hooks: Optional[HookRegistry] = None):
        self.db = db
        self.hooks = hooks

    # ------------------------------------------------------------------
    # Collections
    # ------------------------------------------------------------------
    async def find_collection(self, name_or_id: str) -> Collection:
        model = COLLECTIONS.get(name_or_id)
        if model is None:
            model = next(
                (m for m in COLLECTIONS.values() if m.__name__.lower() == str(name_or_id).lower()),
                None,
            )
        if model is None:
            raise CollectionNotFoundError(name_or_id)
        return Collection(model.__tablename__, model.field_map().keys(), model=model)

    # ------------------------------------------------------------------
    # Reads
    # ------------------------------------------------------------------
    async def find_record_by_id(self, collection: str, record_id: str) -> Record:
        resolved = await self.find_collection(collection)
        instance = await self.db.get(resolved.model, record_id)
        if instance is None:
            raise RecordNotFoundError(resolved.name, record_id)
        return self._to_record(resolved, instance)

    async def find_first_by_filter(
        self,
        collection: str,
        filter_expr: str,
        params: Optional[Dict[str, Any]] = None,
    ) -> Optional[Record]:
        resolved = await self.find_collection(collection)
        model = resolved.model
        field_map = model.field_map()

        clauses = []
        for field, value in parse_filter(filter_expr, params):
            if not resolved.has_field(field):
                raise InvalidFilterError(f"Unknown field '{field}' in {resolved.name} filter")
            column = getattr(model, field_map[field])
            clauses.append(column.is_(None) if value is None else column == value)

        stmt = select(model).where(*clauses).order_by(model.created, model.id).limit(1)
        try:
            result = await self.db.execute(stmt)
        except SQLAlchemyError as e:
            raise RecordPersistError(f"Filter query on {resolved.name} failed: {e}") from e

        instance = result.scalar_one_or_none()
        return self._to_record(resolved, instance) if instance is not None else None

    # ------------------------------------------------------------------
    # Writes
    # ------------------------------------------------------------------
    async def save(self, record: Record) -> Record:
        collection = record.collection
        if collection.model is None:
            collection = await self.find_collection(collection.name)
            record.collection = collection
        model = collection.model
        attributes = self._to_attributes(model, record.data)
        creating = record.is_new()

        try:
            if creating:
                instance = model(**attributes)
                self.db.add(instance)
            else:
                instance = await self.db.get(model, record.id)
                if instance is None:
                    raise RecordNotFoundError(collection.name, record.id)
                for name, value in attributes.items():
                    if name != "id":
                        setattr(instance, name, value)

            await self.db.commit()
            await self.db.refresh(instance)
        except SQLAlchemyError as e:
            await self.db.rollback()
            action = "create" if creating else "update"
            raise RecordPersistError(f"Failed to {action} {collection.name} record: {e}") from e

        record.data = self._to_record(collection, instance).data
        record.mark_as_not_new()
        logger.debug(f"Saved {collection.name} record {record.id}")

        if self.hooks is not None:
            kind = MutationKind.AFTER_CREATE_SUCCESS if creating else MutationKind.AFTER_UPDATE_SUCCESS
            await self.hooks.trigger(self, kind, record)

        return record

    async def delete(self, record: Record) -> None:
        collection = await self.find_collection(record.collection.name)

        try:
            instance = await self.db.get(collection.model, record.id)
            if instance is None:
                raise RecordNotFoundError(collection.name, record.id)
            await self.db.delete(instance)
            await self.db.commit()
        except SQLAlchemyError as e:
            await self.db.rollback()
            raise RecordPersistError(f"Failed to delete {collection.name} record {record.id}: {e}") from e

        logger.debug(f"Deleted {collection.name} record {record.id}")

    # ------------------------------------------------------------------
    # Internals
    # ------------------------------------------------------------------
    @staticmethod
    def _to_record(collection: Collection, instance) -> Record:
        data = {
            field: getattr(instance, attribute)
            for field, attribute in type(instance).field_map().items()
        }
        return Record(collection, data, is_new=False)

    @staticmethod
    def _to_attributes(model, data: Dict[str, Any]) -> Dict[str, Any]:
        field_map = model.field_map()
        unknown = [field for field in data if field not in field_map]
        if unknown:
            raise RecordPersistError(f"Unknown fields for {model.__tablename__}: {', '.join(sorted(unknown))}")
        # Timestamps are maintained by the database
        return {
            field_map[field]: value
            for field, value in data.items()
            if field not in ("created", "updated") and not (field == "id" and value is None)
        }
