"""Repository for income operations."""

from typing import List, Optional

import structlog
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from components.income.models import Income
from components.income import schemas

logger = structlog.get_logger(__name__)


class IncomeRepository:
    """Repository for income operations."""

    def __init__(self, session: AsyncSession):
        """Initialize repository with database session."""
        self.session = session

    async def get_current(self) -> Optional[Income]:
        """Get the most recently updated income row."""
        result = await self.session.execute(
            select(Income)
            .order_by(Income.updated_at.desc(), Income.id.desc())
            .limit(1)
        )
        return result.scalar_one_or_none()

    async def history(self) -> List[Income]:
        """Get every recorded income value, newest first."""
        result = await self.session.execute(
            select(Income).order_by(Income.updated_at.desc(), Income.id.desc())
        )
        return list(result.scalars().all())

    async def set_income(self, income: schemas.IncomeCreate) -> Income:
        """
        Record a new income value.

        Rows are appended rather than updated in place, so the new row
        becomes the current income and older values stay as history.
        """
        db_income = Income(amount=income.amount)
        self.session.add(db_income)
        await self.session.commit()
        await self.session.refresh(db_income)
        logger.info("income_updated", income_id=db_income.id, amount=str(db_income.amount))
        return db_income
