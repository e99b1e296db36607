"""One-time expense endpoints for the API."""

from typing import List
from fastapi import APIRouter, Depends, Response, status
from sqlalchemy.ext.asyncio import AsyncSession

from components.core.init_db import get_db
from components.core.schemas import ErrorMessage
from components.expense.repository import ExpenseRepository
from components.expense import schemas

router = APIRouter(
    prefix="/expenses",
    tags=["expenses"],
    responses={400: {"model": ErrorMessage}},
)


@router.get("", response_model=List[schemas.Expense])
async def list_expenses(db: AsyncSession = Depends(get_db)):
    """Get all one-time expenses, most recent first."""
    repo = ExpenseRepository(db)
    return await repo.get_all()


@router.post(
    "",
    response_model=schemas.Expense,
    status_code=status.HTTP_201_CREATED,
)
async def create_expense(
    expense: schemas.ExpenseCreate,
    db: AsyncSession = Depends(get_db)
):
    """Create a new one-time expense."""
    repo = ExpenseRepository(db)
    return await repo.create(expense)


@router.delete("", status_code=status.HTTP_204_NO_CONTENT)
async def clear_expenses(db: AsyncSession = Depends(get_db)):
    """Delete all one-time expenses, e.g. at the start of a new month."""
    repo = ExpenseRepository(db)
    await repo.clear()
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.delete("/{expense_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_expense(
    expense_id: int,
    db: AsyncSession = Depends(get_db)
):
    """Delete a one-time expense."""
    repo = ExpenseRepository(db)
    await repo.delete(expense_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
