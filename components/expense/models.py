"""One-time expense model for the database."""

from sqlalchemy import Column, DateTime, Integer, Numeric, String, func

from components.core.database import Base

DEFAULT_CATEGORY = "General"


class Expense(Base):
    """A single dated transaction with a category tag."""
    __tablename__ = "expenses"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String(255), nullable=False)
    amount = Column(Numeric(12, 2), nullable=False)
    category = Column(String(100), nullable=False, default=DEFAULT_CATEGORY)
    date = Column(DateTime, nullable=False, server_default=func.now(), index=True)
