"""
Schemas for order endpoints.
"""

from typing import Any, Dict, Optional
from datetime import datetime
from pydantic import BaseModel, ConfigDict, Field, field_validator

from storefront.core.enums import OrderStatus, PaymentStatus, FulfillmentStatus


class OrderCreate(BaseModel):
    """Body of POST /orders. Field names follow the orders collection."""
    model_config = ConfigDict(populate_by_name=True)

    order_number: Optional[str] = Field(default=None, alias="orderNumber")
    status: OrderStatus = OrderStatus.PENDING
    payment_status: PaymentStatus = Field(default=PaymentStatus.PENDING, alias="paymentStatus")
    fulfillment_status: FulfillmentStatus = Field(default=FulfillmentStatus.PENDING, alias="fulfillmentStatus")
    subtotal: float = 0.0
    shipping: float = 0.0
    total: float = 0.0
    shipping_address: Optional[Dict[str, Any]] = Field(default=None, alias="shippingAddress")
    customer_info: Optional[Dict[str, Any]] = Field(default=None, alias="customerInfo")
    estimated_delivery: Optional[datetime] = Field(default=None, alias="estimatedDelivery")
    notes: Optional[str] = None

    @field_validator('subtotal', 'shipping', 'total')
    @classmethod
    def validate_amount(cls, v):
        if v < 0:
            raise ValueError('Amounts cannot be negative')
        return v

    def to_fields(self) -> Dict[str, Any]:
        """Record fields for the orders collection."""
        fields = self.model_dump(by_alias=True, mode="json", exclude_none=True)
        if self.estimated_delivery is not None:
            fields["estimatedDelivery"] = self.estimated_delivery
        return fields


class OrderRead(BaseModel):
    id: str
    orderNumber: Optional[str] = None
    status: str
    paymentStatus: str
    fulfillmentStatus: str
    total: float = 0.0
    created: Optional[datetime] = None
