"""Tests for the one-time expense endpoints."""


async def _add(client, name, amount, category=None):
    payload = {"name": name, "amount": amount}
    if category is not None:
        payload["category"] = category
    response = await client.post("/api/expenses", json=payload)
    assert response.status_code == 201
    return response.json()


async def test_create_defaults_category_and_date(client):
    expense = await _add(client, "Coffee", "4.5")
    assert expense["category"] == "General"
    assert expense["amount"] == "4.50"
    assert expense["date"]


async def test_blank_category_falls_back_to_general(client):
    expense = await _add(client, "Bus", 2, category="   ")
    assert expense["category"] == "General"


async def test_list_is_most_recent_first(client):
    first = await _add(client, "Groceries", "85.50", "Food")
    second = await _add(client, "Gas", "45.00", "Transport")

    response = await client.get("/api/expenses")
    assert response.status_code == 200
    assert [e["id"] for e in response.json()] == [second["id"], first["id"]]


async def test_delete_unknown_id_is_idempotent(client):
    await _add(client, "Groceries", "85.50", "Food")
    before = (await client.get("/api/expenses")).json()

    response = await client.delete("/api/expenses/9999")
    assert response.status_code == 204
    assert (await client.get("/api/expenses")).json() == before


async def test_delete_removes_row(client):
    expense = await _add(client, "Groceries", "85.50", "Food")
    response = await client.delete(f"/api/expenses/{expense['id']}")
    assert response.status_code == 204
    assert (await client.get("/api/expenses")).json() == []


async def test_clear_removes_everything(client):
    for name in ("Groceries", "Gas", "Movie Night"):
        await _add(client, name, "10")

    response = await client.delete("/api/expenses")
    assert response.status_code == 204
    assert (await client.get("/api/expenses")).json() == []


async def test_clear_on_empty_table(client):
    response = await client.delete("/api/expenses")
    assert response.status_code == 204


async def test_create_rejects_non_numeric_amount(client):
    response = await client.post("/api/expenses", json={"name": "Gas", "amount": "lots"})
    assert response.status_code == 400
    assert response.json()["field"] == "amount"
    assert (await client.get("/api/expenses")).json() == []


async def test_overlong_category_is_rejected(client):
    response = await client.post(
        "/api/expenses", json={"name": "Gadget", "amount": "10", "category": "x" * 101}
    )
    assert response.status_code == 400
    assert response.json()["field"] == "category"
    assert (await client.get("/api/expenses")).json() == []


async def test_category_at_length_limit_is_kept(client):
    expense = await _add(client, "Gadget", "10", category="y" * 100)
    assert expense["category"] == "y" * 100
