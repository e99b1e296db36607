"""Income model for the database."""

from sqlalchemy import Column, Integer, DateTime, Numeric, func

from components.core.database import Base


class Income(Base):
    """Monthly income figure; the most recently updated row is the current one."""
    __tablename__ = "incomes"

    id = Column(Integer, primary_key=True, index=True)
    amount = Column(Numeric(12, 2), nullable=False)
    updated_at = Column(DateTime, nullable=False, server_default=func.now(), index=True)
