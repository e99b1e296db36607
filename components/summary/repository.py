"""Repository for the budget summary."""

from collections import defaultdict
from decimal import Decimal, ROUND_HALF_UP
from typing import Dict

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from components.core.money import ZERO, to_currency
from components.debt.models import Debt
from components.expense.models import Expense
from components.income.repository import IncomeRepository
from components.recurring.models import RecurringExpense
from components.summary import schemas


def spent_percentage(total_expenses: Decimal, income: Decimal) -> int:
    """Share of income already spent, as a whole percent capped at 100."""
    if income <= 0:
        return 0
    percent = (total_expenses / income * 100).quantize(Decimal("1"), rounding=ROUND_HALF_UP)
    return int(min(percent, Decimal(100)))


class SummaryRepository:
    """Repository for the budget summary."""

    def __init__(self, session: AsyncSession):
        """Initialize repository with database session."""
        self.session = session

    async def get_summary(self) -> schemas.BudgetSummary:
        """
        Build the monthly overview.

        Includes:
        - Current monthly income
        - Total of active recurring expenses
        - Total of one-time expenses, overall and per category
        - Outstanding balance of active debts
        - Projected savings (income minus all expenses)
        """
        current_income = await IncomeRepository(self.session).get_current()
        monthly_income = to_currency(current_income.amount) if current_income else ZERO

        result = await self.session.execute(
            select(RecurringExpense.amount).where(RecurringExpense.active.is_(True))
        )
        recurring_total = to_currency(sum((to_currency(a) for a in result.scalars()), ZERO))

        result = await self.session.execute(select(Expense.category, Expense.amount))
        by_category: Dict[str, Decimal] = defaultdict(lambda: ZERO)
        for category, amount in result.all():
            by_category[category] += to_currency(amount)
        one_time_total = to_currency(sum(by_category.values(), ZERO))

        result = await self.session.execute(
            select(Debt.total_amount).where(Debt.active.is_(True))
        )
        debt_total = to_currency(sum((to_currency(a) for a in result.scalars()), ZERO))

        total_expenses = recurring_total + one_time_total
        categories = [
            schemas.CategoryTotal(category=category, total=total)
            for category, total in sorted(
                by_category.items(), key=lambda item: (-item[1], item[0])
            )
        ]

        return schemas.BudgetSummary(
            monthly_income=monthly_income,
            recurring_total=recurring_total,
            one_time_total=one_time_total,
            debt_total=debt_total,
            total_expenses=total_expenses,
            savings=monthly_income - total_expenses,
            spent_percentage=spent_percentage(total_expenses, monthly_income),
            categories=categories,
        )
