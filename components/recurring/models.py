"""Recurring expense model for the database."""

from sqlalchemy import Boolean, Column, Integer, Numeric, String

from components.core.database import Base


class RecurringExpense(Base):
    """Fixed monthly obligation; inactive rows are excluded from totals."""
    __tablename__ = "recurring_expenses"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String(255), nullable=False)
    amount = Column(Numeric(12, 2), nullable=False)
    active = Column(Boolean, nullable=False, default=True)
