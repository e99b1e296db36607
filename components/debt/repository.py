"""Repository for debt operations."""

from decimal import Decimal
from typing import List, Optional

import structlog
from sqlalchemy import delete, select
from sqlalchemy.ext.asyncio import AsyncSession

from components.core.money import ZERO, to_currency
from components.debt.models import Debt, DebtPayment
from components.debt import schemas

logger = structlog.get_logger(__name__)


def remaining_balance(current_total: Decimal, payment_amount: Decimal) -> Decimal:
    """Balance after a payment, floored at zero and rounded to cents."""
    return to_currency(max(ZERO, to_currency(current_total) - to_currency(payment_amount)))


class DebtRepository:
    """Repository for debt operations."""

    def __init__(self, session: AsyncSession):
        """Initialize repository with database session."""
        self.session = session

    async def get_all(self) -> List[Debt]:
        """Get all debts."""
        result = await self.session.execute(select(Debt).order_by(Debt.id))
        return list(result.scalars().all())

    async def get_by_id(self, debt_id: int) -> Optional[Debt]:
        """Get debt by ID."""
        result = await self.session.execute(select(Debt).where(Debt.id == debt_id))
        return result.scalar_one_or_none()

    async def create(self, debt: schemas.DebtCreate) -> Debt:
        """Create a new debt."""
        db_debt = Debt(
            name=debt.name,
            total_amount=debt.total_amount,
            min_payment=debt.min_payment,
            interest_rate=debt.interest_rate,
            active=debt.active,
        )
        self.session.add(db_debt)
        await self.session.commit()
        await self.session.refresh(db_debt)
        logger.info(
            "debt_created",
            debt_id=db_debt.id,
            name=db_debt.name,
            total_amount=str(db_debt.total_amount),
        )
        return db_debt

    async def delete(self, debt_id: int) -> None:
        """
        Delete debt by ID together with its payment history.

        Both deletes share one transaction. Missing ids are ignored.
        """
        try:
            await self.session.execute(
                delete(DebtPayment).where(DebtPayment.debt_id == debt_id)
            )
            result = await self.session.execute(delete(Debt).where(Debt.id == debt_id))
            await self.session.commit()
        except Exception:
            await self.session.rollback()
            raise

        if result.rowcount:
            logger.info("debt_deleted", debt_id=debt_id)

    async def get_payments(self, debt_id: int) -> List[DebtPayment]:
        """Get payment history of a debt, newest first."""
        result = await self.session.execute(
            select(DebtPayment)
            .where(DebtPayment.debt_id == debt_id)
            .order_by(DebtPayment.date.desc(), DebtPayment.id.desc())
        )
        return list(result.scalars().all())

    async def pay(self, debt_id: int, payment: schemas.DebtPaymentCreate) -> Optional[Debt]:
        """
        Record a payment and reduce the debt balance.

        The debt row is locked for the duration of the transaction, the
        payment is appended to the history and the balance is decreased,
        never going below zero. Both writes are committed together or
        rolled back together.

        Returns the updated debt, or None if the debt does not exist.
        """
        try:
            result = await self.session.execute(
                select(Debt)
                .where(Debt.id == debt_id)
                .with_for_update()
                .execution_options(populate_existing=True)
            )
            db_debt = result.scalar_one_or_none()
            if db_debt is None:
                await self.session.rollback()
                return None

            is_extra = payment.is_extra
            if is_extra is None:
                is_extra = payment.amount > to_currency(db_debt.min_payment)

            self.session.add(
                DebtPayment(debt_id=db_debt.id, amount=payment.amount, is_extra=is_extra)
            )
            previous_total = to_currency(db_debt.total_amount)
            db_debt.total_amount = remaining_balance(previous_total, payment.amount)
            await self.session.flush()
            await self.session.commit()
        except Exception:
            await self.session.rollback()
            raise

        await self.session.refresh(db_debt)
        logger.info(
            "debt_payment_recorded",
            debt_id=db_debt.id,
            amount=str(payment.amount),
            is_extra=is_extra,
            previous_total=str(previous_total),
            new_total=str(db_debt.total_amount),
        )
        return db_debt
