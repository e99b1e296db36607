"""Shared fixtures: an in-memory database and an HTTP client bound to it."""

import pytest
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import create_async_engine
from sqlalchemy.pool import StaticPool

from components.core.database import DatabaseManager
from restapi.router import create_app


@pytest.fixture
async def db_manager():
    engine = create_async_engine(
        "sqlite+aiosqlite://",
        poolclass=StaticPool,
        connect_args={"check_same_thread": False},
    )
    manager = DatabaseManager(engine)
    await manager.create_tables()
    yield manager
    await manager.drop_tables()
    await manager.dispose()


@pytest.fixture
async def session(db_manager):
    async with db_manager.get_db() as db:
        yield db


@pytest.fixture
async def client(db_manager):
    app = create_app(db_manager)
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as c:
        yield c


@pytest.fixture
async def credit_card(client):
    """The credit card debt used throughout the payment scenarios."""
    response = await client.post(
        "/api/debts",
        json={"name": "Credit Card", "totalAmount": "2500.00", "minPayment": "100.00"},
    )
    assert response.status_code == 201
    return response.json()
