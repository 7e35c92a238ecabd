from app.services.exceptions import StorageUnavailable
from app.services.orders.sequencer import OrderIdentifierSequencer


async def test_create_order_assigns_sequential_identifiers(make_order):
    first = await make_order()
    second = await make_order(name="Anita Sharma")

    assert first["order_id"] == "ORD001"
    assert second["order_id"] == "ORD002"
    assert first["period_label"] == second["period_label"]
    assert first["status"] == "Pending"


async def test_create_order_uses_default_prices(make_order):
    order = await make_order(no_of_sets=2)

    assert order["shirt_amount"] == 500.0
    assert order["pant_amount"] == 400.0
    assert order["total_amount"] == 1800.0


async def test_client_supplied_identifier_is_ignored(make_order):
    order = await make_order(order_id="ORD999")

    assert order["order_id"] == "ORD001"


async def test_create_order_requires_name_and_phone(client):
    response = await client.post("/orders", json={"name": "Ravi Kumar"})

    assert response.status_code == 422


async def test_create_order_storage_unavailable(client, monkeypatch):
    async def unavailable(self):
        raise StorageUnavailable("Order counter storage is unavailable")

    monkeypatch.setattr(OrderIdentifierSequencer, "issue_next", unavailable)

    response = await client.post("/orders", json={"name": "Ravi Kumar", "phone": "9876543210"})

    assert response.status_code == 503
    assert (await client.get("/orders")).json() == []


async def test_preview_does_not_reserve(client, make_order):
    for _ in range(3):
        response = await client.get("/orders/generate/next-id")
        assert response.status_code == 200
        assert response.json()["next_id"] == "ORD001"
        assert response.json()["month_reset"] is False

    order = await make_order()

    assert order["order_id"] == "ORD001"
    preview = (await client.get("/orders/generate/next-id")).json()
    assert preview["next_id"] == "ORD002"
    assert preview["current_month"] == order["period_label"]


async def test_deleted_identifier_is_not_reused(client, make_order):
    await make_order()
    second = await make_order()

    response = await client.delete(f"/orders/{second['id']}")
    assert response.status_code == 200

    third = await make_order()
    assert third["order_id"] == "ORD003"


async def test_get_order(client, make_order):
    order = await make_order(shirt={"chest": 40, "length": 29.5})

    response = await client.get(f"/orders/{order['id']}")

    assert response.status_code == 200
    assert response.json()["shirt"] == {"chest": 40, "length": 29.5}


async def test_get_missing_order(client):
    assert (await client.get("/orders/01ARZ3NDEKTSV4RRFFQ69G5FAV")).status_code == 404
    assert (await client.get("/orders/not-a-ulid")).status_code == 404


async def test_civil_orders_exclude_company_orders(client, make_order):
    company = (await client.post("/companies", json={"name": "Acme Textiles"})).json()
    civil = await make_order()
    await make_order(company_id=company["id"], position="Driver")

    all_orders = (await client.get("/orders")).json()
    civil_orders = (await client.get("/orders/civil")).json()

    assert len(all_orders) == 2
    assert [o["id"] for o in civil_orders] == [civil["id"]]


async def test_update_status(client, make_order):
    order = await make_order()

    response = await client.patch(f"/orders/{order['id']}/status", json={"status": "In Progress"})

    assert response.status_code == 200
    assert response.json()["status"] == "In Progress"


async def test_update_status_rejects_unknown_status(client, make_order):
    order = await make_order()

    response = await client.patch(f"/orders/{order['id']}/status", json={"status": "Lost"})

    assert response.status_code == 422


async def test_update_order_recomputes_total(client, make_order):
    order = await make_order()

    response = await client.put(f"/orders/{order['id']}", json={"no_of_sets": 2, "shirt_amount": 600})

    assert response.status_code == 200
    body = response.json()
    assert body["total_amount"] == 2000.0
    assert body["order_id"] == order["order_id"]
    assert body["name"] == order["name"]


async def test_update_missing_order(client):
    response = await client.put("/orders/01ARZ3NDEKTSV4RRFFQ69G5FAV", json={"name": "Nobody"})

    assert response.status_code == 404
