# storefront/models/base.py
"""
Columns and helpers shared by every collection table.

Records are keyed by 15 character lowercase alphanumeric ids and carry
``created``/``updated`` timestamps. Each model declares ``record_fields``,
the mapping from the collection's field names (as clients and filters use
them) to model attributes.
"""

import secrets
import string
from typing import ClassVar, Dict

from sqlalchemy import Column, DateTime, String
from sqlalchemy.sql import func

RECORD_ID_LENGTH = 15
RECORD_ID_ALPHABET = string.ascii_lowercase + string.digits


def generate_record_id() -> str:
    return "".join(secrets.choice(RECORD_ID_ALPHABET) for _ in range(RECORD_ID_LENGTH))


class RecordMixin:
    id = Column(String(RECORD_ID_LENGTH), primary_key=True, default=generate_record_id)
    created = Column(DateTime(timezone=True), server_default=func.now(), nullable=False, index=True)
    updated = Column(DateTime(timezone=True), server_default=func.now(), onupdate=func.now(), nullable=False)

    record_fields: ClassVar[Dict[str, str]] = {}

    @classmethod
    def field_map(cls) -> Dict[str, str]:
        """Record field name -> model attribute, including the system fields."""
        fields = {"id": "id", "created": "created", "updated": "updated"}
        fields.update(cls.record_fields)
        return fields

    def __repr__(self):
        return f"<{type(self).__name__} {self.id}>"
