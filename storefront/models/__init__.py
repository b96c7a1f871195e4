from .base import RecordMixin, generate_record_id
from .product import Product
from .category import Category
from .store import Store
from .cart import Cart
from .order import Order, OrderItem
from .notification import Notification

# This ensures all models are registered with SQLAlchemy
__all__ = [
    'RecordMixin',
    'generate_record_id',
    'Product',
    'Category',
    'Store',
    'Cart',
    'Order',
    'OrderItem',
    'Notification',
]

# Collection name -> model, as resolved by the record store
COLLECTIONS = {
    model.__tablename__: model
    for model in (Product, Category, Store, Cart, Order, OrderItem, Notification)
}
