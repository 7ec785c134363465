"""Billing schemas."""

from __future__ import annotations

from datetime import datetime
from decimal import Decimal
from uuid import UUID

from pydantic import BaseModel, ConfigDict

from zabanyar.core.enums import WalletTransactionTypeEnum


class WalletTransactionRead(BaseModel):
    """Wallet ledger entry."""

    model_config = ConfigDict(from_attributes=True)

    id: UUID
    wallet_id: UUID
    transaction_type: WalletTransactionTypeEnum
    amount: Decimal
    booking_id: UUID | None
    description: str | None
    created_at: datetime


class EarningsSummary(BaseModel):
    teacher_id: UUID
    wallet_id: UUID
    monthly_earnings: Decimal
    total_earnings: Decimal
    current_balance: Decimal
    monthly_transactions: list[WalletTransactionRead]
    all_time_transactions: list[WalletTransactionRead]
