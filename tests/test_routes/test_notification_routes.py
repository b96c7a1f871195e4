from datetime import datetime, timedelta, timezone

import pytest

from storefront.models import Notification, Order, Product


@pytest.fixture
async def notifications(db_session):
    base = datetime(2025, 9, 1, 12, 0, tzinfo=timezone.utc)
    db_session.add_all([
        Order(id="order0000000001", total=12.0),
        Product(id="prod00000000001", title="Mug", slug="mug", stock_quantity=2, reorder_level=5),
        Notification(id="note00000000001", type="new_order", order_id="order0000000001", created=base),
        Notification(
            id="note00000000002", type="low_stock", product_id="prod00000000001",
            created=base + timedelta(minutes=1),
        ),
        Notification(
            id="note00000000003", type="new_order", order_id="order0000000001", read=True,
            created=base + timedelta(minutes=2),
        ),
    ])
    await db_session.commit()


@pytest.mark.asyncio
async def test_list_notifications(test_client, notifications):
    response = await test_client.get("/notifications")

    assert response.status_code == 200
    data = response.json()
    assert [n["id"] for n in data] == ["note00000000003", "note00000000002", "note00000000001"]
    assert data[1] == {
        "id": "note00000000002",
        "type": "low_stock",
        "order": None,
        "product": "prod00000000001",
        "read": False,
        "created": data[1]["created"],
        "updated": data[1]["updated"],
    }
    assert data[2]["order"] == "order0000000001"


@pytest.mark.asyncio
async def test_list_recent_and_unread(test_client, notifications):
    recent = (await test_client.get("/notifications", params={"limit": 1})).json()
    unread = (await test_client.get("/notifications", params={"unread": "true"})).json()

    assert [n["id"] for n in recent] == ["note00000000003"]
    assert [n["id"] for n in unread] == ["note00000000002", "note00000000001"]


@pytest.mark.asyncio
async def test_unread_count(test_client, notifications):
    response = await test_client.get("/notifications/unread-count")

    assert response.json() == {"unread": 2}


@pytest.mark.asyncio
async def test_mark_read(test_client, notifications):
    response = await test_client.post("/notifications/note00000000001/read")
    assert response.status_code == 200

    assert (await test_client.get("/notifications/unread-count")).json() == {"unread": 1}


@pytest.mark.asyncio
async def test_mark_read_unknown(test_client, notifications):
    response = await test_client.post("/notifications/missing00000000/read")

    assert response.status_code == 404


@pytest.mark.asyncio
async def test_mark_many_read(test_client, notifications):
    response = await test_client.post(
        "/notifications/read", json={"ids": ["note00000000001", "note00000000002"]}
    )

    assert response.status_code == 200
    assert response.json() == {"status": "ok", "updated": 2}
    assert (await test_client.get("/notifications/unread-count")).json() == {"unread": 0}


@pytest.mark.asyncio
async def test_mark_many_read_requires_ids(test_client):
    response = await test_client.post("/notifications/read", json={"ids": []})

    assert response.status_code == 422


@pytest.mark.asyncio
async def test_delete_notification(test_client, notifications):
    response = await test_client.delete("/notifications/note00000000002")
    assert response.status_code == 204

    remaining = (await test_client.get("/notifications")).json()
    assert [n["id"] for n in remaining] == ["note00000000003", "note00000000001"]

    again = await test_client.delete("/notifications/note00000000002")
    assert again.status_code == 404
