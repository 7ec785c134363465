from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from decimal import Decimal
from types import SimpleNamespace
from uuid import UUID, uuid4

import pytest

import zabanyar.modules.billing.service as billing_service_module
from zabanyar.core.enums import RoleEnum, WalletTransactionTypeEnum
from zabanyar.modules.billing.service import BillingService, teacher_share
from zabanyar.shared.exceptions import UnauthorizedException, ValidationException

NOW = datetime(2026, 10, 19, 12, 0, tzinfo=timezone.utc)


@dataclass
class FakeWallet:
    id: UUID
    teacher_id: UUID
    balance: Decimal = Decimal("0.00")
    total_earned: Decimal = Decimal("0.00")


@dataclass
class FakeTransaction:
    id: UUID
    wallet_id: UUID
    transaction_type: WalletTransactionTypeEnum
    amount: Decimal
    booking_id: UUID | None
    description: str | None
    created_at: datetime


@dataclass
class FakeBillingRepository:
    wallets: dict[UUID, FakeWallet] = field(default_factory=dict)
    transactions: list[FakeTransaction] = field(default_factory=list)
    created_at: datetime = NOW

    async def get_wallet_by_teacher(self, teacher_id: UUID):
        return self.wallets.get(teacher_id)

    async def create_wallet(self, teacher_id: UUID) -> FakeWallet:
        wallet = FakeWallet(id=uuid4(), teacher_id=teacher_id)
        self.wallets[teacher_id] = wallet
        return wallet

    async def get_transaction_by_booking(self, booking_id: UUID):
        return next((item for item in self.transactions if item.booking_id == booking_id), None)

    async def add_transaction(self, wallet: FakeWallet, *, transaction_type, amount, booking_id, description):
        transaction = FakeTransaction(
            id=uuid4(),
            wallet_id=wallet.id,
            transaction_type=transaction_type,
            amount=amount,
            booking_id=booking_id,
            description=description,
            created_at=self.created_at,
        )
        if transaction_type == WalletTransactionTypeEnum.COMMISSION:
            wallet.balance += amount
            wallet.total_earned += amount
        else:
            wallet.balance -= amount
        self.transactions.append(transaction)
        return transaction

    async def list_transactions(self, wallet_id: UUID, *, transaction_type=None):
        return [
            item
            for item in reversed(self.transactions)
            if item.wallet_id == wallet_id and (transaction_type is None or item.transaction_type == transaction_type)
        ]


def make_actor(user_id: UUID, role: RoleEnum = RoleEnum.TEACHER) -> SimpleNamespace:
    return SimpleNamespace(id=user_id, role=SimpleNamespace(name=role))


@pytest.mark.parametrize(
    ("total", "rate", "expected"),
    [
        (Decimal("500000"), 0.10, Decimal("450000.00")),
        (Decimal("99.99"), 0.10, Decimal("89.99")),
        (150, 0.15, Decimal("127.50")),
        (Decimal("0.05"), 0.10, Decimal("0.05")),
    ],
)
def test_teacher_share_deducts_commission_and_rounds_half_up(total, rate, expected) -> None:
    assert teacher_share(total, rate) == expected


@pytest.mark.asyncio
async def test_credit_booking_creates_wallet_and_credits_once() -> None:
    repository = FakeBillingRepository()
    service = BillingService(repository)
    teacher_id, booking_id = uuid4(), uuid4()

    first = await service.credit_booking(
        booking_id=booking_id,
        teacher_id=teacher_id,
        total_price=Decimal("300000.00"),
        commission_rate=0.10,
    )
    again = await service.credit_booking(
        booking_id=booking_id,
        teacher_id=teacher_id,
        total_price=Decimal("300000.00"),
        commission_rate=0.10,
    )

    wallet = repository.wallets[teacher_id]
    assert again is first
    assert first.amount == Decimal("270000.00")
    assert first.transaction_type == WalletTransactionTypeEnum.COMMISSION
    assert wallet.balance == Decimal("270000.00")
    assert wallet.total_earned == Decimal("270000.00")
    assert len(repository.transactions) == 1


@pytest.mark.asyncio
async def test_credit_booking_uses_configured_commission_by_default(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr(billing_service_module, "get_settings", lambda: SimpleNamespace(booking_commission_rate=0.2))
    service = BillingService(FakeBillingRepository())

    transaction = await service.credit_booking(booking_id=uuid4(), teacher_id=uuid4(), total_price=Decimal("100"))

    assert transaction.amount == Decimal("80.00")
    assert "20% platform commission" in transaction.description


@pytest.mark.asyncio
async def test_earnings_summary_splits_current_month(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr(billing_service_module, "utc_now", lambda: NOW)
    repository = FakeBillingRepository()
    service = BillingService(repository)
    teacher_id = uuid4()

    repository.created_at = datetime(2026, 9, 30, 23, 0, tzinfo=timezone.utc)
    await service.credit_booking(booking_id=uuid4(), teacher_id=teacher_id, total_price=Decimal("100"), commission_rate=0.1)
    repository.created_at = datetime(2026, 10, 2, 9, 0, tzinfo=timezone.utc)
    await service.credit_booking(booking_id=uuid4(), teacher_id=teacher_id, total_price=Decimal("200"), commission_rate=0.1)

    summary = await service.earnings_summary(teacher_id, make_actor(teacher_id))

    assert summary.monthly_earnings == Decimal("180.00")
    assert summary.total_earnings == Decimal("270.00")
    assert summary.current_balance == Decimal("270.00")
    assert len(summary.monthly_transactions) == 1
    assert len(summary.all_time_transactions) == 2


@pytest.mark.asyncio
async def test_earnings_summary_requires_teacher_and_ownership() -> None:
    service = BillingService(FakeBillingRepository())

    with pytest.raises(ValidationException):
        await service.earnings_summary(None, make_actor(uuid4()))
    with pytest.raises(UnauthorizedException):
        await service.earnings_summary(uuid4(), make_actor(uuid4()))

    summary = await service.earnings_summary(uuid4(), make_actor(uuid4(), RoleEnum.ADMIN))
    assert summary.total_earnings == Decimal("0.00")
