"""Booking API router."""

from __future__ import annotations

from uuid import UUID

from fastapi import APIRouter, Depends, Query, status

from zabanyar.modules.booking.schemas import (
    BookingCreate,
    BookingEnvelope,
    BookingList,
    BookingRead,
    BookingStatusUpdate,
)
from zabanyar.modules.booking.service import BookingService, get_booking_service
from zabanyar.modules.identity.service import get_current_user

router = APIRouter(prefix="/bookings", tags=["booking"])


@router.post("", response_model=BookingEnvelope, status_code=status.HTTP_201_CREATED)
async def create_booking(
    payload: BookingCreate,
    service: BookingService = Depends(get_booking_service),
) -> BookingEnvelope:
    """Create a pending booking; guests may book without an account."""
    booking = await service.create_booking(payload)
    return BookingEnvelope(booking=BookingRead.model_validate(booking), message="Booking created successfully")


@router.get("", response_model=BookingList)
async def list_bookings(
    student_id: UUID | None = Query(default=None),
    teacher_id: UUID | None = Query(default=None),
    service: BookingService = Depends(get_booking_service),
    current_user=Depends(get_current_user),
) -> BookingList:
    """List bookings newest first."""
    items = await service.list_bookings(student_id=student_id, teacher_id=teacher_id, actor=current_user)
    return BookingList(bookings=[BookingRead.model_validate(item) for item in items])


@router.patch("/{booking_id}/status", response_model=BookingEnvelope)
async def update_booking_status(
    booking_id: UUID,
    payload: BookingStatusUpdate,
    service: BookingService = Depends(get_booking_service),
    current_user=Depends(get_current_user),
) -> BookingEnvelope:
    booking = await service.update_status(booking_id, payload, current_user)
    return BookingEnvelope(booking=BookingRead.model_validate(booking))
