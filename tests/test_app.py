"""Tests for application wiring: health check, logging and error responses."""

import logging

from httpx import ASGITransport, AsyncClient

from components.core.logging_config import configure_logging
from restapi.router import create_app


async def test_health_check(client):
    response = await client.get("/health_check/")
    assert response.status_code == 200
    assert response.json() == {"service_name": "Personal Finance API", "status": "healthy"}


async def test_invalid_path_id_is_a_validation_error(client):
    response = await client.post("/api/debts/abc/pay", json={"amount": "10"})
    assert response.status_code == 400
    assert response.json()["field"] == "debt_id"


async def test_malformed_json_is_a_validation_error(client):
    response = await client.post(
        "/api/expenses",
        content="{not json",
        headers={"Content-Type": "application/json"},
    )
    assert response.status_code == 400
    assert "message" in response.json()


async def test_storage_failure_is_a_generic_server_error(db_manager):
    app = create_app(db_manager)
    # Tables are gone, so every query fails inside the storage layer
    await db_manager.drop_tables()

    transport = ASGITransport(app=app, raise_app_exceptions=False)
    async with AsyncClient(transport=transport, base_url="http://test") as c:
        response = await c.get("/api/debts")

    assert response.status_code == 500
    assert response.json() == {"message": "Internal Server Error"}
    await db_manager.create_tables()


def test_logging_setup_adds_a_single_handler():
    configure_logging("INFO")
    count = len(logging.getLogger().handlers)
    configure_logging("DEBUG", json=False)
    assert len(logging.getLogger().handlers) == count
    assert logging.getLogger().level == logging.DEBUG
    configure_logging("INFO")
