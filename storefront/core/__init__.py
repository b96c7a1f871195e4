"""
Core module exports.
"""
from .enums import (
    NotificationType,
    OrderStatus,
    PaymentStatus,
    FulfillmentStatus,
    MutationKind
)

from .exceptions import (
    BaseServiceError,
    RecordStoreError,
    CollectionNotFoundError,
    RecordNotFoundError,
    RecordPersistError,
    InvalidFilterError,
    HookError
)
