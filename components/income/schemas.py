"""Pydantic schemas for income data validation."""

from datetime import datetime
from typing import Optional

from components.core.money import Money, MoneyIn, ZERO
from components.core.schemas import CamelModel


class IncomeCreate(CamelModel):
    """Schema for setting the current income."""
    amount: MoneyIn


class Income(CamelModel):
    """Schema for income response."""
    id: Optional[int] = None
    amount: Money
    updated_at: Optional[datetime] = None

    @classmethod
    def empty(cls) -> "Income":
        """Zero income returned before anything was recorded."""
        return cls(amount=ZERO)
