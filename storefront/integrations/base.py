"""
Record store interface shared by the hooks, the notification rules and the
storage backends.

Records are addressed by collection field names (``stockQuantity``,
``reorderLevel``, ``type``, ...) rather than by table columns, so rules stay
independent of the persistence layer.
"""

from abc import ABC, abstractmethod
from typing import Any, Dict, Iterable, Optional


class Collection:
    """A named grouping of records sharing a schema."""

    def __init__(self, name: str, fields: Iterable[str] = (), model: Any = None):
        self.name = name
        self.fields = list(fields)
        self.model = model

    def has_field(self, name: str) -> bool:
        return name in self.fields

    def __repr__(self):
        return f"<Collection {self.name}>"


class Record:
    """A single entity of a collection, with typed accessors by field name."""

    def __init__(self, collection: Collection, data: Optional[Dict[str, Any]] = None, is_new: bool = True):
        self.collection = collection
        self.data: Dict[str, Any] = dict(data or {})
        self._is_new = is_new

    @property
    def id(self) -> Optional[str]:
        return self.data.get("id")

    def is_new(self) -> bool:
        return self._is_new

    def mark_as_not_new(self):
        self._is_new = False

    def get(self, field: str, default: Any = None) -> Any:
        return self.data.get(field, default)

    def set(self, field: str, value: Any):
        self.data[field] = value

    def get_string(self, field: str) -> str:
        value = self.data.get(field)
        return "" if value is None else str(value)

    def get_int(self, field: str) -> int:
        """Integer value of a field; missing or unparsable values read as 0."""
        value = self.data.get(field)
        if value is None or isinstance(value, bool):
            return int(bool(value))
        try:
            return int(value)
        except (TypeError, ValueError):
            try:
                return int(float(value))
            except (TypeError, ValueError):
                return 0

    def get_bool(self, field: str) -> bool:
        value = self.data.get(field)
        if isinstance(value, str):
            return value.strip().lower() in ("1", "true", "yes", "on")
        return bool(value)

    def __repr__(self):
        return f"<Record {self.collection.name}/{self.id}>"


class RecordStore(ABC):
    """Persistence collaborator used by the notification rules."""

    @abstractmethod
    async def find_collection(self, name_or_id: str) -> Collection:
        """Resolve a collection; raises CollectionNotFoundError."""
        pass

    def new_record(self, collection: Collection, fields: Optional[Dict[str, Any]] = None) -> Record:
        """Build an unsaved record of ``collection``."""
        return Record(collection, fields, is_new=True)

    @abstractmethod
    async def save(self, record: Record) -> Record:
        """Create or update ``record``; raises RecordPersistError."""
        pass

    @abstractmethod
    async def delete(self, record: Record) -> None:
        """Delete ``record``; raises RecordPersistError."""
        pass

    @abstractmethod
    async def find_record_by_id(self, collection: str, record_id: str) -> Record:
        """Point lookup; raises RecordNotFoundError."""
        pass

    async def create(self, collection: str, fields: Dict[str, Any]) -> Record:
        """Resolve ``collection`` and save a new record with ``fields``."""
        record = self.new_record(await self.find_collection(collection), fields)
        return await self.save(record)

    async def update(self, collection: str, record_id: str, fields: Dict[str, Any]) -> Record:
        """Apply ``fields`` to an existing record and save it."""
        record = await self.find_record_by_id(collection, record_id)
        for name, value in fields.items():
            record.set(name, value)
        return await self.save(record)

    @abstractmethod
    async def find_first_by_filter(
        self,
        collection: str,
        filter_expr: str,
        params: Optional[Dict[str, Any]] = None,
    ) -> Optional[Record]:
        """First record matching ``filter_expr`` with ``params`` bound, or None."""
        pass
