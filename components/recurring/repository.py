"""Repository for recurring expense operations."""

from typing import List, Optional

import structlog
from sqlalchemy import delete, select
from sqlalchemy.ext.asyncio import AsyncSession

from components.recurring.models import RecurringExpense
from components.recurring import schemas

logger = structlog.get_logger(__name__)


class RecurringExpenseRepository:
    """Repository for recurring expense operations."""

    def __init__(self, session: AsyncSession):
        """Initialize repository with database session."""
        self.session = session

    async def get_all(self) -> List[RecurringExpense]:
        """Get all recurring expenses, active or not."""
        result = await self.session.execute(
            select(RecurringExpense).order_by(RecurringExpense.id)
        )
        return list(result.scalars().all())

    async def get_by_id(self, expense_id: int) -> Optional[RecurringExpense]:
        """Get recurring expense by ID."""
        result = await self.session.execute(
            select(RecurringExpense).where(RecurringExpense.id == expense_id)
        )
        return result.scalar_one_or_none()

    async def create(self, expense: schemas.RecurringExpenseCreate) -> RecurringExpense:
        """Create a new recurring expense."""
        db_expense = RecurringExpense(
            name=expense.name,
            amount=expense.amount,
            active=expense.active,
        )
        self.session.add(db_expense)
        await self.session.commit()
        await self.session.refresh(db_expense)
        logger.info("recurring_expense_created", expense_id=db_expense.id, name=db_expense.name)
        return db_expense

    async def set_active(self, expense_id: int, active: bool) -> Optional[RecurringExpense]:
        """Toggle a recurring expense on or off."""
        db_expense = await self.get_by_id(expense_id)
        if not db_expense:
            return None

        db_expense.active = active
        await self.session.commit()
        await self.session.refresh(db_expense)
        return db_expense

    async def delete(self, expense_id: int) -> None:
        """Delete recurring expense by ID. Missing ids are ignored."""
        await self.session.execute(
            delete(RecurringExpense).where(RecurringExpense.id == expense_id)
        )
        await self.session.commit()
