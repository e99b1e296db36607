"""Debt endpoints for the API."""

from typing import List
from fastapi import APIRouter, Depends, HTTPException, Response, status
from sqlalchemy.ext.asyncio import AsyncSession

from components.core.init_db import get_db
from components.core.schemas import ErrorMessage
from components.debt.repository import DebtRepository
from components.debt import schemas

router = APIRouter(
    prefix="/debts",
    tags=["debts"],
    responses={400: {"model": ErrorMessage}},
)


@router.get("", response_model=List[schemas.Debt])
async def list_debts(db: AsyncSession = Depends(get_db)):
    """Get all debts."""
    repo = DebtRepository(db)
    return await repo.get_all()


@router.post(
    "",
    response_model=schemas.Debt,
    status_code=status.HTTP_201_CREATED,
)
async def create_debt(
    debt: schemas.DebtCreate,
    db: AsyncSession = Depends(get_db)
):
    """Create a new debt."""
    repo = DebtRepository(db)
    return await repo.create(debt)


@router.delete("/{debt_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_debt(
    debt_id: int,
    db: AsyncSession = Depends(get_db)
):
    """Delete a debt and its payment history."""
    repo = DebtRepository(db)
    await repo.delete(debt_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.post(
    "/{debt_id}/pay",
    response_model=schemas.Debt,
    responses={404: {"model": ErrorMessage}},
)
async def pay_debt(
    debt_id: int,
    payment: schemas.DebtPaymentCreate,
    db: AsyncSession = Depends(get_db)
):
    """
    Record a payment against a debt.

    The payment is stored in the debt's history and the outstanding
    balance is reduced by the paid amount. Overpayments are accepted and
    leave a balance of zero.
    """
    repo = DebtRepository(db)
    debt = await repo.pay(debt_id, payment)
    if debt is None:
        raise HTTPException(status_code=404, detail="Debt not found")
    return debt


@router.get(
    "/{debt_id}/payments",
    response_model=List[schemas.DebtPayment],
    responses={404: {"model": ErrorMessage}},
)
async def list_debt_payments(
    debt_id: int,
    db: AsyncSession = Depends(get_db)
):
    """Get the payment history of a debt, newest first."""
    repo = DebtRepository(db)
    if await repo.get_by_id(debt_id) is None:
        raise HTTPException(status_code=404, detail="Debt not found")
    return await repo.get_payments(debt_id)
