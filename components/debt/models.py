"""Debt and debt payment models for the database."""

from sqlalchemy import Boolean, Column, DateTime, ForeignKey, Integer, Numeric, String, func

from components.core.database import Base


class Debt(Base):
    """Outstanding balance on a loan or credit line."""
    __tablename__ = "debts"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String(255), nullable=False)
    total_amount = Column(Numeric(12, 2), nullable=False)
    min_payment = Column(Numeric(12, 2), nullable=False)
    interest_rate = Column(Numeric(7, 2), nullable=False, default=0)
    active = Column(Boolean, nullable=False, default=True)


class DebtPayment(Base):
    """Append-only record of money applied to a debt."""
    __tablename__ = "debt_payments"

    id = Column(Integer, primary_key=True, index=True)
    debt_id = Column(
        Integer, ForeignKey("debts.id", ondelete="CASCADE"), nullable=False, index=True
    )
    amount = Column(Numeric(12, 2), nullable=False)
    date = Column(DateTime, nullable=False, server_default=func.now())
    is_extra = Column(Boolean, nullable=False, default=False)
