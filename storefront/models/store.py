from sqlalchemy import Column, String, Boolean, Text, JSON

from storefront.database import Base
from storefront.models.base import RecordMixin


class Store(RecordMixin, Base):
    """Storefront settings. There is normally a single row."""
    __tablename__ = "stores"

    store_name = Column(String)
    store_description = Column(Text)
    currency = Column(String)
    is_active = Column(Boolean, default=True)

    # Contact
    address = Column(String)
    phone = Column(String)
    email = Column(String)
    website = Column(String)
    about_us = Column(Text)
    social_links = Column(JSON, nullable=True)
    business_hours = Column(JSON, nullable=True)

    # Checkout and appearance
    payment_method = Column(String)
    hero_background = Column(String)
    is_cart_enabled = Column(Boolean, default=True)
    category_images = Column(JSON, nullable=True)

    record_fields = {
        "storeName": "store_name",
        "storeDescription": "store_description",
        "currency": "currency",
        "isActive": "is_active",
        "address": "address",
        "phone": "phone",
        "email": "email",
        "website": "website",
        "aboutUs": "about_us",
        "socialLinks": "social_links",
        "businessHours": "business_hours",
        "paymentMethod": "payment_method",
        "heroBackground": "hero_background",
        "is_cart_enabled": "is_cart_enabled",
        "categoryImages": "category_images",
    }
