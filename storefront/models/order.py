# storefront/models/order.py
from sqlalchemy import Column, Integer, String, Float, DateTime, Text, ForeignKey, JSON
from sqlalchemy.orm import relationship

from storefront.database import Base
from storefront.core.enums import OrderStatus, PaymentStatus, FulfillmentStatus
from storefront.models.base import RecordMixin


class Order(RecordMixin, Base):
    __tablename__ = "orders"

    order_number = Column(String, index=True)
    status = Column(String, default=OrderStatus.PENDING.value, nullable=False, index=True)
    payment_status = Column(String, default=PaymentStatus.PENDING.value, nullable=False)
    fulfillment_status = Column(String, default=FulfillmentStatus.PENDING.value, nullable=False)

    # Totals
    subtotal = Column(Float, default=0)
    shipping = Column(Float, default=0)
    total = Column(Float, default=0)

    # Customer
    shipping_address = Column(JSON, nullable=True)
    customer_info = Column(JSON, nullable=True)

    estimated_delivery = Column(DateTime(timezone=True), nullable=True)
    notes = Column(Text)
    internal_notes = Column(Text)
    tracking_number = Column(String)

    record_fields = {
        "orderNumber": "order_number",
        "status": "status",
        "paymentStatus": "payment_status",
        "fulfillmentStatus": "fulfillment_status",
        "subtotal": "subtotal",
        "shipping": "shipping",
        "total": "total",
        "shippingAddress": "shipping_address",
        "customerInfo": "customer_info",
        "estimatedDelivery": "estimated_delivery",
        "notes": "notes",
        "internalNotes": "internal_notes",
        "trackingNumber": "tracking_number",
    }

    items = relationship("OrderItem", back_populates="order")
    notifications = relationship("Notification", back_populates="order")


class OrderItem(RecordMixin, Base):
    __tablename__ = "order_items"

    order_id = Column(String(15), ForeignKey("orders.id"), nullable=False, index=True)
    product_id = Column(String(15), ForeignKey("products.id"), nullable=True, index=True)
    product_name = Column(String)
    product_image = Column(String)
    quantity = Column(Integer, nullable=False, default=1)
    price = Column(Float, default=0)
    selected_variants = Column(JSON, nullable=True)

    record_fields = {
        "orderId": "order_id",
        "productId": "product_id",
        "productName": "product_name",
        "productImage": "product_image",
        "quantity": "quantity",
        "price": "price",
        "selectedVariants": "selected_variants",
    }

    order = relationship("Order", back_populates="items")
