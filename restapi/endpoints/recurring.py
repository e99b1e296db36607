"""Recurring expense endpoints for the API."""

from typing import List
from fastapi import APIRouter, Depends, HTTPException, Response, status
from sqlalchemy.ext.asyncio import AsyncSession

from components.core.init_db import get_db
from components.core.schemas import ErrorMessage
from components.recurring.repository import RecurringExpenseRepository
from components.recurring import schemas

router = APIRouter(
    prefix="/recurring",
    tags=["recurring"],
    responses={400: {"model": ErrorMessage}},
)


@router.get("", response_model=List[schemas.RecurringExpense])
async def list_recurring_expenses(db: AsyncSession = Depends(get_db)):
    """Get all recurring expenses."""
    repo = RecurringExpenseRepository(db)
    return await repo.get_all()


@router.post(
    "",
    response_model=schemas.RecurringExpense,
    status_code=status.HTTP_201_CREATED,
)
async def create_recurring_expense(
    expense: schemas.RecurringExpenseCreate,
    db: AsyncSession = Depends(get_db)
):
    """Create a new recurring expense."""
    repo = RecurringExpenseRepository(db)
    return await repo.create(expense)


@router.patch(
    "/{expense_id}",
    response_model=schemas.RecurringExpense,
    responses={404: {"model": ErrorMessage}},
)
async def update_recurring_expense(
    expense_id: int,
    update: schemas.RecurringExpenseUpdate,
    db: AsyncSession = Depends(get_db)
):
    """Switch a recurring expense on or off."""
    repo = RecurringExpenseRepository(db)
    expense = await repo.set_active(expense_id, update.active)
    if expense is None:
        raise HTTPException(status_code=404, detail="Recurring expense not found")
    return expense


@router.delete("/{expense_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_recurring_expense(
    expense_id: int,
    db: AsyncSession = Depends(get_db)
):
    """Delete a recurring expense."""
    repo = RecurringExpenseRepository(db)
    await repo.delete(expense_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
