from typing import Optional
from pydantic import BaseModel, Field, UUID4, field_validator
from datetime import date, datetime

from app.models.booking import BookingStatus
from app.schemas.user import UserSummary


def _to_reservation_day(v):
    """Accept an ISO-8601 date or date-time; only the calendar day is kept."""
    if isinstance(v, datetime):
        return v.date()
    if isinstance(v, str):
        raw = v.strip()
        if raw.endswith("Z"):
            raw = raw[:-1] + "+00:00"
        try:
            return datetime.fromisoformat(raw).date()
        except ValueError:
            raise ValueError("Reservation date must be a valid ISO-8601 date")
    return v


# Booking: Create (POST /bookings)
class BookingCreate(BaseModel):
    venue_id: UUID4
    reservation_date: date
    guest_count: int = Field(ge=1)
    client_phone: str = Field(min_length=1, max_length=20)

    @field_validator("reservation_date", mode="before")
    @classmethod
    def parse_reservation_date(cls, v):
        return _to_reservation_day(v)


# Booking: Update (PATCH /bookings/{id}); venue, author and status are fixed
class BookingUpdate(BaseModel):
    reservation_date: Optional[date] = None
    guest_count: Optional[int] = Field(None, ge=1)
    client_phone: Optional[str] = Field(None, min_length=1, max_length=20)

    @field_validator("reservation_date", mode="before")
    @classmethod
    def parse_reservation_date(cls, v):
        return _to_reservation_day(v)


# PATCH /bookings/{id}/status
class BookingStatusUpdate(BaseModel):
    status: BookingStatus


# Nested venue for booking responses
class BookingVenueSummary(BaseModel):
    id: UUID4
    name: str
    address: str
    capacity: int
    price_seat: float
    phone_number: Optional[str] = None

    class Config:
        from_attributes = True


class Booking(BaseModel):
    id: UUID4
    venue_id: UUID4
    reservation_date: date
    guest_count: int
    client_phone: str
    user_id: UUID4
    status: BookingStatus
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None
    venue: Optional[BookingVenueSummary] = None
    user: Optional[UserSummary] = None

    class Config:
        from_attributes = True
