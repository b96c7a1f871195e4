"""
Shared enums and constants used across the application.
"""

from enum import Enum


class NotificationType(str, Enum):
    """Kinds of dashboard notification"""
    NEW_ORDER = "new_order"
    LOW_STOCK = "low_stock"


class OrderStatus(str, Enum):
    PENDING = "pending"
    CONFIRMED = "confirmed"
    PREPARING = "preparing"
    SHIPPED = "shipped"
    DELIVERED = "delivered"
    CANCELLED = "cancelled"


class PaymentStatus(str, Enum):
    PENDING = "pending"
    COD_CONFIRMED = "cod-confirmed"
    PAID = "paid"
    FAILED = "failed"


class FulfillmentStatus(str, Enum):
    PENDING = "pending"
    PROCESSING = "processing"
    SHIPPED = "shipped"
    DELIVERED = "delivered"
    CANCELLED = "cancelled"


class MutationKind(str, Enum):
    """Record mutations the hook registry can bind to"""
    AFTER_CREATE_SUCCESS = "after_create_success"
    AFTER_UPDATE_SUCCESS = "after_update_success"
