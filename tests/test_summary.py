"""Tests for the budget summary and demo data."""

from components.core.seed import seed_demo_data


async def test_empty_summary(client):
    response = await client.get("/api/summary")
    assert response.status_code == 200
    assert response.json() == {
        "monthlyIncome": "0.00",
        "recurringTotal": "0.00",
        "oneTimeTotal": "0.00",
        "debtTotal": "0.00",
        "totalExpenses": "0.00",
        "savings": "0.00",
        "spentPercentage": 0,
        "categories": [],
    }


async def test_summary_of_demo_data(client, session):
    assert await seed_demo_data(session) is True

    body = (await client.get("/api/summary")).json()
    assert body["monthlyIncome"] == "5000.00"
    assert body["recurringTotal"] == "1365.99"
    assert body["oneTimeTotal"] == "160.50"
    assert body["debtTotal"] == "2500.00"
    assert body["totalExpenses"] == "1526.49"
    assert body["savings"] == "3473.51"
    assert body["spentPercentage"] == 31
    assert body["categories"] == [
        {"category": "Food", "total": "85.50"},
        {"category": "Transport", "total": "45.00"},
        {"category": "Entertainment", "total": "30.00"},
    ]


async def test_inactive_entries_are_excluded(client):
    await client.post("/api/income", json={"amount": "1000"})
    await client.post("/api/recurring", json={"name": "Rent", "amount": "500"})
    await client.post(
        "/api/recurring", json={"name": "Old Gym", "amount": "40", "active": False}
    )
    await client.post(
        "/api/debts",
        json={"name": "Paid Off", "totalAmount": "300", "minPayment": "10", "active": False},
    )
    await client.post("/api/expenses", json={"name": "Shoes", "amount": "700"})

    body = (await client.get("/api/summary")).json()
    assert body["recurringTotal"] == "500.00"
    assert body["debtTotal"] == "0.00"
    assert body["totalExpenses"] == "1200.00"
    assert body["savings"] == "-200.00"
    assert body["spentPercentage"] == 100


async def test_seed_runs_only_once(session):
    assert await seed_demo_data(session) is True
    assert await seed_demo_data(session) is False
