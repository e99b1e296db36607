"""Demo data for a fresh database."""

from decimal import Decimal

import structlog
from sqlalchemy.ext.asyncio import AsyncSession

from components.debt.models import Debt
from components.expense.models import Expense
from components.income.models import Income
from components.income.repository import IncomeRepository
from components.recurring.models import RecurringExpense

logger = structlog.get_logger(__name__)


async def seed_demo_data(session: AsyncSession) -> bool:
    """
    Insert a demo data set unless an income has already been recorded.

    Returns True when rows were inserted.
    """
    if await IncomeRepository(session).get_current() is not None:
        logger.info("seed_skipped", reason="income already set")
        return False

    session.add(Income(amount=Decimal("5000.00")))
    session.add_all([
        RecurringExpense(name="Rent", amount=Decimal("1200.00"), active=True),
        RecurringExpense(name="Utilities", amount=Decimal("150.00"), active=True),
        RecurringExpense(name="Netflix", amount=Decimal("15.99"), active=True),
    ])
    session.add_all([
        Expense(name="Groceries", amount=Decimal("85.50"), category="Food"),
        Expense(name="Gas", amount=Decimal("45.00"), category="Transport"),
        Expense(name="Movie Night", amount=Decimal("30.00"), category="Entertainment"),
    ])
    session.add(
        Debt(
            name="Credit Card",
            total_amount=Decimal("2500.00"),
            min_payment=Decimal("100.00"),
            interest_rate=Decimal("19.99"),
            active=True,
        )
    )
    await session.commit()
    logger.info("seed_completed")
    return True
