from uuid import UUID

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from app.db.session import get_db
from app.api.deps import get_current_user
from app.models.user import User
from app.schemas.booking import (
    BookingCreate,
    BookingUpdate,
    BookingStatusUpdate,
    Booking as BookingSchema,
)
from app.schemas.common import DataResponse, MessageResponse
from app.services import bookings as booking_service

router = APIRouter(prefix="/bookings", tags=["Bookings"])


# ---------------------------------------------------------------------------
# POST /bookings: reserve a venue for a day
# ---------------------------------------------------------------------------


@router.post("/", response_model=DataResponse[BookingSchema], status_code=status.HTTP_201_CREATED)
def create_booking(
    data: BookingCreate,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    """
    Book an approved venue.

    - `guest_count` must not exceed the venue's capacity.
    - A venue holds at most one booking per `reservation_date`.
    - The booking is recorded as `upcoming` and owned by the caller.
    """
    booking = booking_service.create_booking(db, data, current_user)
    return DataResponse(data=BookingSchema.model_validate(booking))


# ---------------------------------------------------------------------------
# /bookings/{id}
# ---------------------------------------------------------------------------


@router.get("/{booking_id}", response_model=DataResponse[BookingSchema])
def get_booking(
    booking_id: UUID,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    """Visible to the booking's author, the venue's owner and admins."""
    booking = booking_service.get_booking(db, booking_id, current_user)
    return DataResponse(data=BookingSchema.model_validate(booking))


@router.patch("/{booking_id}", response_model=DataResponse[BookingSchema])
def update_booking(
    booking_id: UUID,
    data: BookingUpdate,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    """Author or admin; a new date or guest count is re-checked against the venue."""
    booking = booking_service.update_booking(db, booking_id, data, current_user)
    return DataResponse(data=BookingSchema.model_validate(booking))


@router.delete("/{booking_id}", response_model=MessageResponse)
def delete_booking(
    booking_id: UUID,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    booking_service.delete_booking(db, booking_id, current_user)
    return MessageResponse(message="Booking removed")


# ---------------------------------------------------------------------------
# PATCH /bookings/{id}/status
# ---------------------------------------------------------------------------


@router.patch("/{booking_id}/status", response_model=DataResponse[BookingSchema])
def change_booking_status(
    booking_id: UUID,
    data: BookingStatusUpdate,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    """Venue owner or admin moves a booking between `upcoming` and `past`."""
    booking = booking_service.change_booking_status(db, booking_id, data.status, current_user)
    return DataResponse(data=BookingSchema.model_validate(booking))
