from sqlalchemy import Column, Integer, String, Float, Boolean, ForeignKey, JSON
from sqlalchemy.orm import relationship

from storefront.database import Base
from storefront.models.base import RecordMixin


class Cart(RecordMixin, Base):
    """A line in a shopper's cart."""
    __tablename__ = "carts"

    product_id = Column(String(15), ForeignKey("products.id"), nullable=True, index=True)
    quantity = Column(Integer, nullable=False, default=1)
    price = Column(Float)
    in_stock = Column(Boolean, default=True)

    selected_variants = Column(JSON, nullable=True)
    variant_price = Column(Float)
    variant_sku = Column(String)

    record_fields = {
        "productId": "product_id",
        "quantity": "quantity",
        "price": "price",
        "inStock": "in_stock",
        "selected_variants": "selected_variants",
        "variantPrice": "variant_price",
        "variantSku": "variant_sku",
    }

    product = relationship("Product", back_populates="cart_items")
