"""Billing repository layer."""

from __future__ import annotations

from decimal import Decimal
from uuid import UUID

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from zabanyar.core.enums import WalletTransactionTypeEnum
from zabanyar.modules.billing.models import TeacherWallet, WalletTransaction


class BillingRepository:
    """DB access methods for billing."""

    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    async def get_wallet_by_teacher(self, teacher_id: UUID) -> TeacherWallet | None:
        stmt = select(TeacherWallet).where(TeacherWallet.teacher_id == teacher_id)
        return await self.session.scalar(stmt)

    async def create_wallet(self, teacher_id: UUID) -> TeacherWallet:
        wallet = TeacherWallet(teacher_id=teacher_id, balance=Decimal("0.00"), total_earned=Decimal("0.00"))
        self.session.add(wallet)
        await self.session.flush()
        return wallet

    async def get_transaction_by_booking(self, booking_id: UUID) -> WalletTransaction | None:
        stmt = select(WalletTransaction).where(WalletTransaction.booking_id == booking_id)
        return await self.session.scalar(stmt)

    async def add_transaction(
        self,
        wallet: TeacherWallet,
        *,
        transaction_type: WalletTransactionTypeEnum,
        amount: Decimal,
        booking_id: UUID | None,
        description: str | None,
    ) -> WalletTransaction:
        transaction = WalletTransaction(
            wallet_id=wallet.id,
            transaction_type=transaction_type,
            amount=amount,
            booking_id=booking_id,
            description=description,
        )
        if transaction_type == WalletTransactionTypeEnum.COMMISSION:
            wallet.balance = wallet.balance + amount
            wallet.total_earned = wallet.total_earned + amount
        else:
            wallet.balance = wallet.balance - amount
        self.session.add(transaction)
        await self.session.flush()
        return transaction

    async def list_transactions(
        self,
        wallet_id: UUID,
        *,
        transaction_type: WalletTransactionTypeEnum | None = None,
    ) -> list[WalletTransaction]:
        stmt = select(WalletTransaction).where(WalletTransaction.wallet_id == wallet_id)
        if transaction_type is not None:
            stmt = stmt.where(WalletTransaction.transaction_type == transaction_type)
        stmt = stmt.order_by(WalletTransaction.created_at.desc())
        return list((await self.session.scalars(stmt)).all())
