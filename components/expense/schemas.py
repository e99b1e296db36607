"""Pydantic schemas for one-time expense data validation."""

from datetime import datetime
from typing import Optional

from pydantic import StringConstraints, field_validator
from typing_extensions import Annotated

from components.core.money import Money, MoneyIn
from components.core.schemas import CamelModel, NonEmptyName
from components.expense.models import DEFAULT_CATEGORY

Category = Annotated[str, StringConstraints(strip_whitespace=True, max_length=100)]


class ExpenseCreate(CamelModel):
    """Schema for expense creation."""
    name: NonEmptyName
    amount: MoneyIn
    category: Optional[Category] = DEFAULT_CATEGORY

    @field_validator("category")
    @classmethod
    def default_blank_category(cls, value: Optional[str]) -> str:
        return value or DEFAULT_CATEGORY


class Expense(CamelModel):
    """Schema for expense response."""
    id: int
    name: str
    amount: Money
    category: str
    date: datetime
