"""
Catalogue products.

``stock_quantity`` and ``reorder_level`` drive the low-stock notifications.
"""

from sqlalchemy import Column, Integer, String, Float, Boolean, Text, JSON
from sqlalchemy.orm import relationship

from storefront.database import Base
from storefront.models.base import RecordMixin


class Product(RecordMixin, Base):
    __tablename__ = "products"

    # Core Product Information
    title = Column(String, nullable=False, default="")
    slug = Column(String, unique=True, index=True)
    sku = Column(String)
    description = Column(Text)

    # Stock
    stock_quantity = Column(Integer, nullable=False, default=0)
    reorder_level = Column(Integer, nullable=False, default=0)

    # Pricing Fields
    cost = Column(Float, default=0)
    profit = Column(Float, default=0)
    price = Column(Float, default=0)
    base_price = Column(Float)
    old_price = Column(Float)

    is_active = Column(Boolean, default=True)

    # Media and variants
    image = Column(String)
    variants = Column(JSON, nullable=True)

    record_fields = {
        "title": "title",
        "slug": "slug",
        "sku": "sku",
        "description": "description",
        "stockQuantity": "stock_quantity",
        "reorderLevel": "reorder_level",
        "cost": "cost",
        "profit": "profit",
        "price": "price",
        "basePrice": "base_price",
        "old_price": "old_price",
        "isActive": "is_active",
        "image": "image",
        "variants": "variants",
    }

    notifications = relationship("Notification", back_populates="product")
    cart_items = relationship("Cart", back_populates="product")
