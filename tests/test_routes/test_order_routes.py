import pytest
from sqlalchemy import select

from storefront.models import Notification, Order


@pytest.mark.asyncio
async def test_create_order_notifies(test_client, db_session):
    payload = {
        "orderNumber": "SF-1001",
        "paymentStatus": "cod-confirmed",
        "subtotal": 40.0,
        "shipping": 5.0,
        "total": 45.0,
        "customerInfo": {"name": "Sam", "phone": "555-0100"},
    }

    response = await test_client.post("/orders", json=payload)

    assert response.status_code == 201
    data = response.json()
    assert data["orderNumber"] == "SF-1001"
    assert data["paymentStatus"] == "cod-confirmed"
    assert data["status"] == "pending"
    assert len(data["id"]) == 15

    order = await db_session.get(Order, data["id"])
    assert order.customer_info == {"name": "Sam", "phone": "555-0100"}

    notifications = (await db_session.execute(select(Notification))).scalars().all()
    assert [(n.type, n.order_id) for n in notifications] == [("new_order", data["id"])]


@pytest.mark.asyncio
async def test_each_order_gets_its_own_notification(test_client, db_session):
    for _ in range(2):
        assert (await test_client.post("/orders", json={"total": 10})).status_code == 201

    notifications = (await db_session.execute(select(Notification))).scalars().all()
    assert len(notifications) == 2
    assert len({n.order_id for n in notifications}) == 2


@pytest.mark.asyncio
async def test_create_order_rejects_negative_total(test_client):
    response = await test_client.post("/orders", json={"total": -1})

    assert response.status_code == 422


@pytest.mark.asyncio
async def test_create_order_rejects_unknown_status(test_client):
    response = await test_client.post("/orders", json={"status": "lost"})

    assert response.status_code == 422
