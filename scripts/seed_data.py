"""Script to seed demo data into the database."""

import asyncio

from components.core.database import DatabaseManager
from components.core.logging_config import configure_logging
from components.core.seed import seed_demo_data
# Import all models to ensure they're registered
import components.income.models
import components.recurring.models
import components.expense.models
import components.debt.models


async def seed_data():
    """Create the tables if needed and seed demo data."""
    db_manager = DatabaseManager()
    try:
        await db_manager.create_tables()
        async with db_manager.get_db() as db:
            await seed_demo_data(db)
    finally:
        await db_manager.dispose()


if __name__ == "__main__":
    configure_logging(json=False)
    asyncio.run(seed_data())
