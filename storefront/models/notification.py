# storefront/models/notification.py
from sqlalchemy import Column, String, Boolean, ForeignKey, false
from sqlalchemy.orm import relationship

from storefront.database import Base
from storefront.models.base import RecordMixin


class Notification(RecordMixin, Base):
    """
    Dashboard notification.

    ``new_order`` notifications reference an order, ``low_stock`` ones a
    product. At most one ``low_stock`` row per product is kept by the
    notification hooks; storage does not enforce it.
    """
    __tablename__ = "notifications"

    type = Column(String, nullable=False, index=True)
    order_id = Column(String(15), ForeignKey("orders.id"), nullable=True, index=True)
    product_id = Column(String(15), ForeignKey("products.id"), nullable=True, index=True)
    read = Column(Boolean, nullable=False, default=False, server_default=false())

    record_fields = {
        "type": "type",
        "order": "order_id",
        "product": "product_id",
        "read": "read",
    }

    order = relationship("Order", back_populates="notifications")
    product = relationship("Product", back_populates="notifications")
