import pytest

from app.models.wages import DEFAULT_WAGE_RATES

CUSTOM_RATES = {"pant": 120, "shirt": 105, "ironing_pant": 15, "ironing_shirt": 12, "embroidery": 30}


async def test_defaults_on_first_access(client):
    response = await client.get("/wages")

    assert response.status_code == 200
    body = response.json()
    assert {name: body[name] for name in DEFAULT_WAGE_RATES} == DEFAULT_WAGE_RATES


async def test_update_rates(client):
    response = await client.put("/wages", json=CUSTOM_RATES)

    assert response.status_code == 200
    assert (await client.get("/wages")).json()["pant"] == 120


@pytest.mark.parametrize(
    "payload",
    [
        {**CUSTOM_RATES, "shirt": -1},
        {name: rate for name, rate in CUSTOM_RATES.items() if name != "embroidery"},
    ],
)
async def test_update_rejects_invalid_rates(client, payload):
    response = await client.put("/wages", json=payload)

    assert response.status_code == 422


async def test_reset_restores_defaults(client):
    await client.put("/wages", json=CUSTOM_RATES)

    response = await client.post("/wages/reset")

    assert response.status_code == 200
    assert response.json()["pant"] == DEFAULT_WAGE_RATES["pant"]
