"""
Record mutation events delivered to bound handlers.

A RecordEvent is raised after a create or update of a record has been
committed. Handlers read the record through the typed accessors.
"""

from datetime import datetime, timezone

from pydantic import BaseModel, ConfigDict, Field

from storefront.core.enums import MutationKind
from storefront.integrations.base import Record


class RecordEvent(BaseModel):
    model_config = ConfigDict(arbitrary_types_allowed=True)

    kind: MutationKind
    collection: str
    record: Record
    timestamp: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))

    @property
    def record_id(self) -> str:
        return self.record.id

    def get_string(self, field: str) -> str:
        return self.record.get_string(field)

    def get_int(self, field: str) -> int:
        return self.record.get_int(field)

    def get_bool(self, field: str) -> bool:
        return self.record.get_bool(field)
