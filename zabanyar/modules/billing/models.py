"""Billing ORM models: teacher wallets and their ledger."""

from __future__ import annotations

from decimal import Decimal
from uuid import UUID

from sqlalchemy import Enum as SAEnum
from sqlalchemy import ForeignKey, Numeric, String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from zabanyar.core.database import Base, BaseModelMixin
from zabanyar.core.enums import WalletTransactionTypeEnum


class TeacherWallet(BaseModelMixin, Base):
    """Running balance of a teacher's booking income."""

    __tablename__ = "teacher_wallets"

    teacher_id: Mapped[UUID] = mapped_column(
        ForeignKey("teachers.id", ondelete="CASCADE"),
        unique=True,
        nullable=False,
    )
    balance: Mapped[Decimal] = mapped_column(Numeric(12, 2), default=Decimal("0.00"), nullable=False)
    total_earned: Mapped[Decimal] = mapped_column(Numeric(12, 2), default=Decimal("0.00"), nullable=False)

    transactions: Mapped[list[WalletTransaction]] = relationship(
        back_populates="wallet",
        cascade="all, delete-orphan",
    )


class WalletTransaction(BaseModelMixin, Base):
    """Ledger entry; commission rows carry the teacher share of a booking."""

    __tablename__ = "wallet_transactions"

    wallet_id: Mapped[UUID] = mapped_column(
        ForeignKey("teacher_wallets.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    transaction_type: Mapped[WalletTransactionTypeEnum] = mapped_column(
        SAEnum(WalletTransactionTypeEnum, name="wallet_transaction_type_enum", native_enum=False),
        nullable=False,
    )
    amount: Mapped[Decimal] = mapped_column(Numeric(12, 2), nullable=False)
    booking_id: Mapped[UUID | None] = mapped_column(
        ForeignKey("bookings.id", ondelete="SET NULL"),
        unique=True,
        nullable=True,
    )
    description: Mapped[str | None] = mapped_column(String(255), nullable=True)

    wallet: Mapped[TeacherWallet] = relationship(back_populates="transactions")
