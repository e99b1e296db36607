"""Pydantic schemas for recurring expense data validation."""

from components.core.money import Money, MoneyIn
from components.core.schemas import CamelModel, NonEmptyName


class RecurringExpenseBase(CamelModel):
    name: NonEmptyName
    active: bool = True


class RecurringExpenseCreate(RecurringExpenseBase):
    """Schema for recurring expense creation."""
    amount: MoneyIn


class RecurringExpenseUpdate(CamelModel):
    """Schema for toggling a recurring expense."""
    active: bool


class RecurringExpense(RecurringExpenseBase):
    """Schema for recurring expense response."""
    id: int
    amount: Money
