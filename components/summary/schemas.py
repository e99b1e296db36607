"""Pydantic schemas for the budget summary."""

from typing import List

from components.core.money import Money
from components.core.schemas import CamelModel


class CategoryTotal(CamelModel):
    """Spending on one expense category."""
    category: str
    total: Money


class BudgetSummary(CamelModel):
    """Schema for the monthly budget overview."""
    monthly_income: Money
    recurring_total: Money
    one_time_total: Money
    debt_total: Money
    total_expenses: Money
    savings: Money
    spent_percentage: int
    categories: List[CategoryTotal] = []
