from typing import Optional, List
from pydantic import AliasChoices, BaseModel, Field, UUID4
from datetime import date, datetime

from app.models.venue import VenueStatus
from app.models.booking import BookingStatus
from app.schemas.user import UserSummary
from app.schemas.image import Image


# Venue Schemas
class VenueBase(BaseModel):
    name: str = Field(min_length=1, max_length=255)
    district_id: UUID4
    address: str = Field(min_length=1)
    capacity: int = Field(ge=1)
    price_seat: float = Field(ge=0)
    phone_number: str = Field(min_length=1, max_length=20)


# status is honoured only when an admin creates the venue
class VenueCreate(VenueBase):
    status: Optional[VenueStatus] = None


# status is dropped unless the caller is an admin
class VenueUpdate(BaseModel):
    name: Optional[str] = Field(None, min_length=1, max_length=255)
    district_id: Optional[UUID4] = None
    address: Optional[str] = Field(None, min_length=1)
    capacity: Optional[int] = Field(None, ge=1)
    price_seat: Optional[float] = Field(None, ge=0)
    phone_number: Optional[str] = Field(None, min_length=1, max_length=20)
    status: Optional[VenueStatus] = None


# Query-string filter for GET /venues
class VenueFilter(BaseModel):
    district: Optional[UUID4] = None
    status: Optional[VenueStatus] = None
    min_capacity: Optional[int] = Field(None, ge=0)
    max_capacity: Optional[int] = Field(None, ge=0)
    min_price: Optional[float] = Field(None, ge=0)
    max_price: Optional[float] = Field(None, ge=0)


# District name attached to venue reads
class VenueDistrict(BaseModel):
    id: UUID4
    name: str

    class Config:
        from_attributes = True


# Upcoming bookings attached to the venue detail view
class VenueBooking(BaseModel):
    id: UUID4
    reservation_date: date
    guest_count: int
    status: BookingStatus

    class Config:
        from_attributes = True


class Venue(VenueBase):
    id: UUID4
    status: VenueStatus
    owner_id: UUID4
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None
    district: Optional[VenueDistrict] = None
    owner: Optional[UserSummary] = None
    images: List[Image] = []

    class Config:
        from_attributes = True


# GET /venues/{id}
class VenueDetail(Venue):
    bookings: List[VenueBooking] = Field(
        [], validation_alias=AliasChoices("upcoming_bookings", "bookings")
    )

    class Config:
        from_attributes = True


# Compact venue for nested responses (district, user, booking)
class VenueSummary(BaseModel):
    id: UUID4
    name: str
    address: str
    capacity: int
    price_seat: float
    phone_number: Optional[str] = None
    status: VenueStatus

    class Config:
        from_attributes = True
