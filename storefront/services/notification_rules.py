"""
Notification rules bound to order and product mutations.

- new order   -> one ``new_order`` notification, no duplicate check
- product low -> one ``low_stock`` notification per product while
                 0 < stockQuantity <= reorderLevel
- product ok  -> the ``low_stock`` notification is removed once
                 stockQuantity > reorderLevel

A stock of 0 is out of stock, not low stock: neither rule acts on it.

Each rule reads what it needs from the store and returns a RuleOutcome; the
hook chain applies the write. Lookup failures are logged and the rule falls
through with no write. No rule ever stops the chain or raises.

The existence check and the create are two separate store calls, so two
concurrent updates of the same product can both create a notification.
"""

import logging

from storefront.core.config import get_settings
from storefront.core.enums import NotificationType
from storefront.core.exceptions import RecordStoreError
from storefront.integrations.base import RecordStore
from storefront.integrations.events import RecordEvent
from storefront.integrations.hooks import HookRegistry, RuleOutcome

logger = logging.getLogger(__name__)

LOW_STOCK_FILTER = f"type = '{NotificationType.LOW_STOCK.value}' && product = {{:product_id}}"


def is_low_stock(stock_quantity: int, reorder_level: int) -> bool:
    return 0 < stock_quantity <= reorder_level


def is_replenished(stock_quantity: int, reorder_level: int) -> bool:
    return stock_quantity > reorder_level


class NotificationRules:
    """The three notification rules, writing into ``notifications_collection``."""

    def __init__(self, notifications_collection: str = "notifications"):
        self.notifications_collection = notifications_collection

    async def new_order(self, store: RecordStore, event: RecordEvent) -> RuleOutcome:
        order_id = event.record_id
        logger.info(f"Creating notification for new order: {order_id}")

        return RuleOutcome.create(
            self.notifications_collection,
            {"type": NotificationType.NEW_ORDER.value, "order": order_id},
            label=f"notification for order: {order_id}",
        )

    async def low_stock(self, store: RecordStore, event: RecordEvent) -> RuleOutcome:
        product_id = event.record_id
        current_stock = event.get_int("stockQuantity")
        reorder_level = event.get_int("reorderLevel")

        if not is_low_stock(current_stock, reorder_level):
            return RuleOutcome.proceed()

        try:
            existing = await store.find_first_by_filter(
                self.notifications_collection,
                LOW_STOCK_FILTER,
                {"product_id": product_id},
            )
        except RecordStoreError as e:
            logger.error(f"Failed to look up low stock notification for product {product_id}: {e}")
            return RuleOutcome.proceed()

        if existing is not None:
            logger.info(f"Low stock notification already exists for product: {product_id}")
            return RuleOutcome.proceed()

        logger.info(
            f"Creating low stock notification for product: {product_id} "
            f"(stock: {current_stock}, reorder: {reorder_level})"
        )
        return RuleOutcome.create(
            self.notifications_collection,
            {"type": NotificationType.LOW_STOCK.value, "product": product_id},
            label=f"low stock notification for product: {product_id}",
        )

    async def clear_low_stock(self, store: RecordStore, event: RecordEvent) -> RuleOutcome:
        product_id = event.record_id
        current_stock = event.get_int("stockQuantity")
        reorder_level = event.get_int("reorderLevel")

        if not is_replenished(current_stock, reorder_level):
            return RuleOutcome.proceed()

        try:
            existing = await store.find_first_by_filter(
                self.notifications_collection,
                LOW_STOCK_FILTER,
                {"product_id": product_id},
            )
        except RecordStoreError as e:
            logger.debug(f"Low stock lookup failed for product {product_id}: {e}")
            return RuleOutcome.proceed()

        if existing is None:
            return RuleOutcome.proceed()

        logger.info(
            f"Removing low stock notification for product: {product_id} "
            f"(stock replenished: {current_stock})"
        )
        return RuleOutcome.delete(existing, label=f"low stock notification for product: {product_id}")


def register_notification_hooks(hooks: HookRegistry, settings=None) -> NotificationRules:
    """Bind the notification rules to the order and product collections."""
    settings = settings or get_settings()
    rules = NotificationRules(settings.NOTIFICATIONS_COLLECTION)

    hooks.on_record_after_create_success(settings.ORDERS_COLLECTION).bind_func(rules.new_order)

    # Creation before clearing; the two predicates never both hold.
    products = hooks.on_record_after_update_success(settings.PRODUCTS_COLLECTION)
    products.bind_func(rules.low_stock)
    products.bind_func(rules.clear_low_stock)

    logger.info(
        f"Notification hooks registered on '{settings.ORDERS_COLLECTION}' and "
        f"'{settings.PRODUCTS_COLLECTION}'"
    )
    return rules
