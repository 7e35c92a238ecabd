import pytest


@pytest.fixture
async def worker(client) -> dict:
    response = await client.post(
        "/labour",
        json={"name": "Suresh", "category": "Tailor", "specialist": "Both", "phone": "9000000001"},
    )
    assert response.status_code == 201
    return response.json()


@pytest.fixture
async def order(make_order) -> dict:
    return await make_order(name="Anita Sharma")


async def assign(client, worker, order, **fields) -> dict:
    payload = {"labour_id": worker["id"], "order_id": order["id"], **fields}
    response = await client.post("/work-assignments", json=payload)
    assert response.status_code == 201, response.text
    return response.json()


async def test_assignment_priced_from_rates(client, worker, order):
    assignment = await assign(client, worker, order, work_type="Pant", quantity=3)

    assert assignment["wage_per_unit"] == 110.0
    assert assignment["total_wages"] == 330.0
    assert assignment["status"] == "Assigned"
    assert assignment["order_customer_name"] == "Anita Sharma"
    assert assignment["order_date"] == order["order_date"]


async def test_ironing_uses_pant_ironing_rate(client, worker, order):
    assignment = await assign(client, worker, order, work_type="Ironing", quantity=5)

    assert assignment["total_wages"] == 60.0


async def test_custom_wage(client, worker, order):
    assignment = await assign(client, worker, order, work_type="Shirt", quantity=2, custom_wage=140)

    assert assignment["wage_per_unit"] == 140.0
    assert assignment["custom_wage"] == 140.0
    assert assignment["total_wages"] == 280.0


async def test_rates_changed_later_do_not_reprice(client, worker, order):
    assignment = await assign(client, worker, order, work_type="Pant", quantity=1)
    await client.put(
        "/wages",
        json={"pant": 200, "shirt": 100, "ironing_pant": 12, "ironing_shirt": 10, "embroidery": 25},
    )

    listed = (await client.get(f"/work-assignments/labour/{worker['id']}")).json()

    assert [a["total_wages"] for a in listed] == [assignment["total_wages"]]


async def test_missing_worker_or_order(client, worker, order):
    no_worker = await client.post(
        "/work-assignments",
        json={"labour_id": 999, "order_id": order["id"], "work_type": "Pant", "quantity": 1},
    )
    no_order = await client.post(
        "/work-assignments",
        json={"labour_id": worker["id"], "order_id": "01ARZ3NDEKTSV4RRFFQ69G5FAV", "work_type": "Pant", "quantity": 1},
    )

    assert no_worker.status_code == 404
    assert no_order.status_code == 404


async def test_complete_assignment(client, worker, order):
    assignment = await assign(client, worker, order, work_type="Shirt", quantity=1)
    assert assignment["completed_date"] is None

    response = await client.patch(f"/work-assignments/{assignment['id']}/status", json={"status": "Completed"})

    assert response.status_code == 200
    assert response.json()["status"] == "Completed"
    assert response.json()["completed_date"] is not None


async def test_list_for_order(client, worker, order, make_order):
    other_order = await make_order()
    await assign(client, worker, order, work_type="Pant", quantity=1)
    await assign(client, worker, other_order, work_type="Shirt", quantity=1)

    listed = (await client.get(f"/work-assignments/order/{order['id']}")).json()

    assert [a["work_type"] for a in listed] == ["Pant"]


async def test_delete_assignment(client, worker, order):
    assignment = await assign(client, worker, order, work_type="Embroidery", quantity=2)

    assert (await client.delete(f"/work-assignments/{assignment['id']}")).status_code == 200
    assert (await client.delete(f"/work-assignments/{assignment['id']}")).status_code == 404


async def test_labour_summary(client, worker, order):
    first = await assign(client, worker, order, work_type="Pant", quantity=3)
    await assign(client, worker, order, work_type="Shirt", quantity=2)
    await client.patch(f"/work-assignments/{first['id']}/status", json={"status": "Completed"})

    summary = (await client.get(f"/work-assignments/summary/labour/{worker['id']}")).json()

    assert summary["total_assignments"] == 2
    assert summary["completed_assignments"] == 1
    assert summary["total_wages"] == 530.0
    assert summary["total_quantity"] == 5


async def test_labour_summary_date_range(client, worker, order):
    await assign(client, worker, order, work_type="Pant", quantity=1)

    past = await client.get(
        f"/work-assignments/summary/labour/{worker['id']}",
        params={"start_date": "2020-01-01", "end_date": "2020-01-31"},
    )
    around_order = await client.get(
        f"/work-assignments/summary/labour/{worker['id']}",
        params={"start_date": "2020-01-01", "end_date": "2099-12-31"},
    )

    assert past.json()["total_assignments"] == 0
    assert around_order.json()["total_assignments"] == 1
