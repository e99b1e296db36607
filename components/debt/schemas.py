"""Pydantic schemas for debt data validation."""

from datetime import datetime
from typing import Optional

from components.core.money import Money, MoneyIn, PositiveMoneyIn, RateIn, ZERO
from components.core.schemas import CamelModel, NonEmptyName


class DebtCreate(CamelModel):
    """Schema for debt creation."""
    name: NonEmptyName
    total_amount: MoneyIn
    min_payment: MoneyIn
    interest_rate: RateIn = ZERO
    active: bool = True


class Debt(CamelModel):
    """Schema for debt response."""
    id: int
    name: str
    total_amount: Money
    min_payment: Money
    interest_rate: Money
    active: bool


class DebtPaymentCreate(CamelModel):
    """
    Schema for a payment against a debt.

    When ``is_extra`` is omitted it is derived from the debt: a payment
    larger than the minimum payment counts as extra.
    """
    amount: PositiveMoneyIn
    is_extra: Optional[bool] = None


class DebtPayment(CamelModel):
    """Schema for debt payment response."""
    id: int
    debt_id: int
    amount: Money
    date: datetime
    is_extra: bool
