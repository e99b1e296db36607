"""Budget summary endpoint for the API."""

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from components.core.init_db import get_db
from components.summary.repository import SummaryRepository
from components.summary import schemas

router = APIRouter(
    prefix="/summary",
    tags=["summary"],
)


@router.get("", response_model=schemas.BudgetSummary)
async def get_summary(db: AsyncSession = Depends(get_db)):
    """
    Get the monthly budget overview.

    Returns income, recurring and one-time expense totals, spending per
    category, outstanding debt and projected savings.
    """
    repo = SummaryRepository(db)
    return await repo.get_summary()
