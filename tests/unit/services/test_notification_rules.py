# tests/unit/services/test_notification_rules.py
import logging

import pytest

from storefront.core.enums import MutationKind, NotificationType
from storefront.integrations.base import Record
from storefront.integrations.events import RecordEvent
from storefront.integrations.filters import parse_filter
from storefront.integrations.hooks import CreateRecord, DeleteRecord
from storefront.services.notification_rules import (
    LOW_STOCK_FILTER,
    NotificationRules,
    is_low_stock,
    is_replenished,
)
from tests.mocks.mock_store import MockRecordStore


def product_event(store: MockRecordStore, product_id: str, stock: int, reorder: int) -> RecordEvent:
    record = Record(
        store.collections["products"],
        {"id": product_id, "stockQuantity": stock, "reorderLevel": reorder},
        is_new=False,
    )
    return RecordEvent(kind=MutationKind.AFTER_UPDATE_SUCCESS, collection="products", record=record)


def order_event(store: MockRecordStore, order_id: str) -> RecordEvent:
    record = Record(store.collections["orders"], {"id": order_id}, is_new=False)
    return RecordEvent(kind=MutationKind.AFTER_CREATE_SUCCESS, collection="orders", record=record)


@pytest.fixture
def rules():
    return NotificationRules("notifications")


@pytest.fixture
def store():
    return MockRecordStore()


# --- Predicates ---

@pytest.mark.parametrize("stock, reorder, low, replenished", [
    (0, 10, False, False),
    (1, 10, True, False),
    (10, 10, True, False),
    (11, 10, False, True),
    (0, 0, False, False),
    (1, 0, False, True),
])
def test_predicates_partition_stock_levels(stock, reorder, low, replenished):
    assert is_low_stock(stock, reorder) is low
    assert is_replenished(stock, reorder) is replenished
    assert not (low and replenished)


def test_low_stock_filter_matches_created_type():
    conditions = parse_filter(LOW_STOCK_FILTER, {"product_id": "prod1"})

    assert conditions == [("type", NotificationType.LOW_STOCK.value), ("product", "prod1")]


# --- New order rule ---

@pytest.mark.asyncio
async def test_new_order_creates_notification_write(rules, store):
    outcome = await rules.new_order(store, order_event(store, "abc123"))

    assert isinstance(outcome.write, CreateRecord)
    assert outcome.write.collection == "notifications"
    assert outcome.write.fields == {"type": "new_order", "order": "abc123"}
    assert outcome.continue_chain is True


@pytest.mark.asyncio
async def test_new_order_does_not_look_for_existing_notifications(rules, store):
    store.seed("notifications", {"type": "new_order", "order": "abc123"})

    outcome = await rules.new_order(store, order_event(store, "abc123"))

    assert outcome.has_write
    assert store.filter_calls == []


# --- Low stock creation rule ---

@pytest.mark.asyncio
async def test_low_stock_creates_when_none_exists(rules, store):
    outcome = await rules.low_stock(store, product_event(store, "prod1", 8, 10))

    assert isinstance(outcome.write, CreateRecord)
    assert outcome.write.fields == {"type": "low_stock", "product": "prod1"}
    assert store.filter_calls == [{
        "collection": "notifications",
        "filter": LOW_STOCK_FILTER,
        "params": {"product_id": "prod1"},
    }]


@pytest.mark.asyncio
async def test_low_stock_fires_at_reorder_level(rules, store):
    outcome = await rules.low_stock(store, product_event(store, "prod1", 10, 10))
    assert outcome.has_write


@pytest.mark.asyncio
async def test_low_stock_skips_when_notification_exists(rules, store, caplog):
    store.seed("notifications", {"type": "low_stock", "product": "prod1"})

    with caplog.at_level(logging.INFO):
        outcome = await rules.low_stock(store, product_event(store, "prod1", 5, 10))

    assert not outcome.has_write
    assert outcome.continue_chain is True
    assert "already exists for product: prod1" in caplog.text


@pytest.mark.asyncio
async def test_low_stock_ignores_other_products_notifications(rules, store):
    store.seed("notifications", {"type": "low_stock", "product": "other"})
    store.seed("notifications", {"type": "new_order", "order": "prod1"})

    outcome = await rules.low_stock(store, product_event(store, "prod1", 5, 10))

    assert outcome.has_write


@pytest.mark.asyncio
@pytest.mark.parametrize("stock, reorder", [(0, 10), (11, 10), (50, 10), (0, 0)])
async def test_low_stock_no_op_outside_band(rules, store, stock, reorder):
    outcome = await rules.low_stock(store, product_event(store, "prod1", stock, reorder))

    assert not outcome.has_write
    assert store.filter_calls == []


@pytest.mark.asyncio
async def test_low_stock_lookup_failure_is_logged_and_skipped(rules, store, caplog):
    store.fail_filter = True

    with caplog.at_level(logging.ERROR):
        outcome = await rules.low_stock(store, product_event(store, "prod1", 5, 10))

    assert not outcome.has_write
    assert outcome.continue_chain is True
    assert "Failed to look up low stock notification for product prod1" in caplog.text


# --- Low stock clearing rule ---

@pytest.mark.asyncio
async def test_clear_low_stock_deletes_existing(rules, store):
    seeded = store.seed("notifications", {"type": "low_stock", "product": "prod1"})

    outcome = await rules.clear_low_stock(store, product_event(store, "prod1", 20, 10))

    assert isinstance(outcome.write, DeleteRecord)
    assert outcome.write.record.id == seeded.id


@pytest.mark.asyncio
async def test_clear_low_stock_no_op_when_nothing_to_clear(rules, store):
    outcome = await rules.clear_low_stock(store, product_event(store, "prod1", 20, 10))

    assert not outcome.has_write
    assert len(store.filter_calls) == 1


@pytest.mark.asyncio
@pytest.mark.parametrize("stock", [0, 5, 10])
async def test_clear_low_stock_no_op_at_or_below_reorder_level(rules, store, stock):
    store.seed("notifications", {"type": "low_stock", "product": "prod1"})

    outcome = await rules.clear_low_stock(store, product_event(store, "prod1", stock, 10))

    assert not outcome.has_write
    assert store.filter_calls == []


@pytest.mark.asyncio
async def test_clear_low_stock_lookup_failure_is_a_no_op(rules, store):
    store.seed("notifications", {"type": "low_stock", "product": "prod1"})
    store.fail_filter = True

    outcome = await rules.clear_low_stock(store, product_event(store, "prod1", 20, 10))

    assert not outcome.has_write
    assert outcome.continue_chain is True
