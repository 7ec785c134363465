"""Billing API router."""

from __future__ import annotations

from uuid import UUID

from fastapi import APIRouter, Depends, Query

from zabanyar.modules.billing.schemas import EarningsSummary
from zabanyar.modules.billing.service import BillingService, get_billing_service
from zabanyar.modules.identity.service import get_current_user

router = APIRouter(tags=["billing"])


@router.get("/teacher-earnings", response_model=EarningsSummary)
async def get_teacher_earnings(
    teacher_id: UUID | None = Query(default=None),
    service: BillingService = Depends(get_billing_service),
    current_user=Depends(get_current_user),
) -> EarningsSummary:
    """Wallet balance plus this month's and all-time commission income."""
    return await service.earnings_summary(teacher_id, current_user)
