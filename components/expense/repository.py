"""Repository for one-time expense operations."""

from typing import List

import structlog
from sqlalchemy import delete, select
from sqlalchemy.ext.asyncio import AsyncSession

from components.expense.models import Expense
from components.expense import schemas

logger = structlog.get_logger(__name__)


class ExpenseRepository:
    """Repository for one-time expense operations."""

    def __init__(self, session: AsyncSession):
        """Initialize repository with database session."""
        self.session = session

    async def get_all(self) -> List[Expense]:
        """Get all expenses, most recent first."""
        result = await self.session.execute(
            select(Expense).order_by(Expense.date.desc(), Expense.id.desc())
        )
        return list(result.scalars().all())

    async def create(self, expense: schemas.ExpenseCreate) -> Expense:
        """Create a new expense."""
        db_expense = Expense(
            name=expense.name,
            amount=expense.amount,
            category=expense.category,
        )
        self.session.add(db_expense)
        await self.session.commit()
        await self.session.refresh(db_expense)
        logger.info(
            "expense_created",
            expense_id=db_expense.id,
            category=db_expense.category,
            amount=str(db_expense.amount),
        )
        return db_expense

    async def delete(self, expense_id: int) -> None:
        """Delete expense by ID. Missing ids are ignored."""
        await self.session.execute(delete(Expense).where(Expense.id == expense_id))
        await self.session.commit()

    async def clear(self) -> int:
        """Delete every expense, e.g. at the start of a new month."""
        result = await self.session.execute(delete(Expense))
        await self.session.commit()
        logger.info("expenses_cleared", deleted=result.rowcount)
        return result.rowcount
