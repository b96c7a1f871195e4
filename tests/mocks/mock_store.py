from typing import Any, Dict, Iterable, List, Optional

from storefront.core.enums import MutationKind
from storefront.core.exceptions import (
    CollectionNotFoundError,
    RecordNotFoundError,
    RecordPersistError,
)
from storefront.integrations.base import Collection, Record, RecordStore
from storefront.integrations.filters import matches, parse_filter
from storefront.integrations.hooks import HookRegistry
from storefront.models.base import generate_record_id


class MockRecordStore(RecordStore):
    """In-memory record store with failure toggles for testing."""

    def __init__(
        self,
        collections: Iterable[str] = ("orders", "products", "notifications"),
        hooks: Optional[HookRegistry] = None,
    ):
        self.collections: Dict[str, Collection] = {name: Collection(name) for name in collections}
        self.rows: Dict[str, Dict[str, Dict[str, Any]]] = {name: {} for name in collections}
        self.hooks = hooks

        self.save_calls: list = []  # Track calls for testing
        self.delete_calls: list = []
        self.filter_calls: list = []

        # Toggles to test error scenarios
        self.fail_save_for: set = set()
        self.fail_delete = False
        self.fail_filter = False

    async def find_collection(self, name_or_id: str) -> Collection:
        if name_or_id not in self.collections:
            raise CollectionNotFoundError(name_or_id)
        return self.collections[name_or_id]

    async def save(self, record: Record) -> Record:
        name = record.collection.name
        self.save_calls.append({"collection": name, "data": dict(record.data), "new": record.is_new()})
        if name in self.fail_save_for:
            raise RecordPersistError(f"Simulated save failure on {name}")

        creating = record.is_new()
        if creating:
            record.set("id", record.id or generate_record_id())
        elif record.id not in self.rows[name]:
            raise RecordNotFoundError(name, record.id)

        self.rows[name][record.id] = dict(record.data)
        record.mark_as_not_new()

        if self.hooks is not None:
            kind = MutationKind.AFTER_CREATE_SUCCESS if creating else MutationKind.AFTER_UPDATE_SUCCESS
            await self.hooks.trigger(self, kind, record)
        return record

    async def delete(self, record: Record) -> None:
        name = record.collection.name
        self.delete_calls.append({"collection": name, "id": record.id})
        if self.fail_delete:
            raise RecordPersistError(f"Simulated delete failure on {name}")
        if record.id not in self.rows[name]:
            raise RecordNotFoundError(name, record.id)
        del self.rows[name][record.id]

    async def find_record_by_id(self, collection: str, record_id: str) -> Record:
        resolved = await self.find_collection(collection)
        if record_id not in self.rows[collection]:
            raise RecordNotFoundError(collection, record_id)
        return Record(resolved, dict(self.rows[collection][record_id]), is_new=False)

    async def find_first_by_filter(
        self,
        collection: str,
        filter_expr: str,
        params: Optional[Dict[str, Any]] = None,
    ) -> Optional[Record]:
        self.filter_calls.append({"collection": collection, "filter": filter_expr, "params": params})
        if self.fail_filter:
            raise RecordPersistError("Simulated lookup failure")
        resolved = await self.find_collection(collection)
        conditions = parse_filter(filter_expr, params)
        for data in self.rows[collection].values():
            if matches(data, conditions):
                return Record(resolved, dict(data), is_new=False)
        return None

    # --- Test helpers ---

    def seed(self, collection: str, fields: Dict[str, Any]) -> Record:
        """Insert a record directly, without firing hooks."""
        record_id = fields.get("id") or generate_record_id()
        self.rows[collection][record_id] = {**fields, "id": record_id}
        return Record(self.collections[collection], dict(self.rows[collection][record_id]), is_new=False)

    def all(self, collection: str) -> List[Dict[str, Any]]:
        return list(self.rows[collection].values())

    def notifications(self, **criteria) -> List[Dict[str, Any]]:
        return [
            row for row in self.all("notifications")
            if all(row.get(k) == v for k, v in criteria.items())
        ]
