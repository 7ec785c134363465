"""Billing business logic layer."""

from __future__ import annotations

import logging
from decimal import ROUND_HALF_UP, Decimal
from uuid import UUID

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from zabanyar.core.config import get_settings
from zabanyar.core.database import get_db_session
from zabanyar.core.enums import WalletTransactionTypeEnum
from zabanyar.modules.billing.models import TeacherWallet, WalletTransaction
from zabanyar.modules.billing.repository import BillingRepository
from zabanyar.modules.billing.schemas import EarningsSummary, WalletTransactionRead
from zabanyar.modules.identity.service import ensure_self_or_admin
from zabanyar.shared.exceptions import ValidationException
from zabanyar.shared.utils import ensure_utc, same_month, utc_now

logger = logging.getLogger(__name__)

CENT = Decimal("0.01")


def teacher_share(total_price: Decimal | float | int, commission_rate: float) -> Decimal:
    """Amount credited to the teacher after the platform commission."""
    total = Decimal(str(total_price))
    rate = Decimal(str(commission_rate))
    return (total * (Decimal(1) - rate)).quantize(CENT, rounding=ROUND_HALF_UP)


class BillingService:
    """Teacher wallets and booking payouts."""

    def __init__(self, repository: BillingRepository) -> None:
        self.repository = repository

    async def get_or_create_wallet(self, teacher_id: UUID) -> TeacherWallet:
        wallet = await self.repository.get_wallet_by_teacher(teacher_id)
        if wallet is None:
            wallet = await self.repository.create_wallet(teacher_id)
            logger.info("Created wallet for teacher %s", teacher_id)
        return wallet

    async def credit_booking(
        self,
        *,
        booking_id: UUID,
        teacher_id: UUID,
        total_price: Decimal,
        commission_rate: float | None = None,
    ) -> WalletTransaction:
        """Credit the teacher share of a booking once per booking."""
        existing = await self.repository.get_transaction_by_booking(booking_id)
        if existing is not None:
            return existing

        rate = get_settings().booking_commission_rate if commission_rate is None else commission_rate
        wallet = await self.get_or_create_wallet(teacher_id)
        amount = teacher_share(total_price, rate)
        return await self.repository.add_transaction(
            wallet,
            transaction_type=WalletTransactionTypeEnum.COMMISSION,
            amount=amount,
            booking_id=booking_id,
            description=f"Booking {booking_id} ({rate:.0%} platform commission)",
        )

    async def earnings_summary(self, teacher_id: UUID | None, actor) -> EarningsSummary:
        if teacher_id is None:
            raise ValidationException("Teacher ID is required")
        ensure_self_or_admin(actor, teacher_id)

        wallet = await self.get_or_create_wallet(teacher_id)
        all_time = await self.repository.list_transactions(
            wallet.id,
            transaction_type=WalletTransactionTypeEnum.COMMISSION,
        )
        now = utc_now()
        monthly = [item for item in all_time if same_month(ensure_utc(item.created_at), now)]

        return EarningsSummary(
            teacher_id=teacher_id,
            wallet_id=wallet.id,
            monthly_earnings=sum((Decimal(item.amount) for item in monthly), Decimal("0.00")),
            total_earnings=sum((Decimal(item.amount) for item in all_time), Decimal("0.00")),
            current_balance=Decimal(wallet.balance),
            monthly_transactions=[WalletTransactionRead.model_validate(item) for item in monthly],
            all_time_transactions=[WalletTransactionRead.model_validate(item) for item in all_time],
        )


async def get_billing_service(session: AsyncSession = Depends(get_db_session)) -> BillingService:
    """Dependency provider for billing service."""
    return BillingService(BillingRepository(session))
