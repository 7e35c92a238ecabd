import pytest


@pytest.fixture
def tailor_payload() -> dict:
    return {"name": "Suresh", "category": "Tailor", "specialist": "Shirt", "phone": "9000000001", "age": 34}


async def test_create_labour(client, tailor_payload):
    response = await client.post("/labour", json=tailor_payload)

    assert response.status_code == 201
    body = response.json()
    assert body["category"] == "Tailor"
    assert body["status"] == "Active"
    assert body["join_date"]


async def test_create_labour_rejects_unknown_category(client, tailor_payload):
    response = await client.post("/labour", json={**tailor_payload, "category": "Cutter"})

    assert response.status_code == 422


async def test_list_labour_by_category(client, tailor_payload):
    await client.post("/labour", json=tailor_payload)
    await client.post(
        "/labour",
        json={"name": "Raju", "category": "Iron Master", "specialist": "Both", "phone": "9000000002"},
    )

    iron_masters = (await client.get("/labour/category/Iron Master")).json()
    everyone = (await client.get("/labour")).json()

    assert [w["name"] for w in iron_masters] == ["Raju"]
    assert len(everyone) == 2


async def test_update_labour_can_clear_age(client, tailor_payload):
    worker = (await client.post("/labour", json=tailor_payload)).json()

    response = await client.put(f"/labour/{worker['id']}", json={"age": None, "status": "Inactive"})

    assert response.status_code == 200
    assert response.json()["age"] is None
    assert response.json()["status"] == "Inactive"
    assert response.json()["name"] == "Suresh"


async def test_delete_labour(client, tailor_payload):
    worker = (await client.post("/labour", json=tailor_payload)).json()

    assert (await client.delete(f"/labour/{worker['id']}")).status_code == 200
    assert (await client.get(f"/labour/{worker['id']}")).status_code == 404
    assert (await client.delete(f"/labour/{worker['id']}")).status_code == 404
