"""Income endpoints for the API."""

from typing import List
from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from components.core.init_db import get_db
from components.core.schemas import ErrorMessage
from components.income.repository import IncomeRepository
from components.income import schemas

router = APIRouter(
    prefix="/income",
    tags=["income"],
)


@router.get("", response_model=schemas.Income)
async def get_income(db: AsyncSession = Depends(get_db)):
    """Get the current monthly income, or zero if none was recorded yet."""
    repo = IncomeRepository(db)
    income = await repo.get_current()
    if income is None:
        return schemas.Income.empty()
    return income


@router.post(
    "",
    response_model=schemas.Income,
    responses={400: {"model": ErrorMessage}},
)
async def update_income(
    income: schemas.IncomeCreate,
    db: AsyncSession = Depends(get_db)
):
    """Record a new monthly income; it replaces the previous one as current."""
    repo = IncomeRepository(db)
    return await repo.set_income(income)


@router.get("/history", response_model=List[schemas.Income])
async def get_income_history(db: AsyncSession = Depends(get_db)):
    """Get all recorded income values, newest first."""
    repo = IncomeRepository(db)
    return await repo.history()
