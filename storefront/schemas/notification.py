"""
Schemas for notification endpoints.
"""

from typing import List, Optional
from datetime import datetime
from pydantic import BaseModel, ConfigDict, Field

from storefront.core.enums import NotificationType


class NotificationRead(BaseModel):
    model_config = ConfigDict(from_attributes=True, populate_by_name=True)

    id: str
    type: NotificationType
    order: Optional[str] = Field(default=None, validation_alias="order_id")
    product: Optional[str] = Field(default=None, validation_alias="product_id")
    read: bool = False
    created: Optional[datetime] = None
    updated: Optional[datetime] = None


class NotificationIds(BaseModel):
    ids: List[str] = Field(min_length=1)


class UnreadCount(BaseModel):
    unread: int
