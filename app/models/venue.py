import uuid
import enum
from sqlalchemy import Column, String, DateTime, func, Text, Float, Integer, Uuid, Enum as SAEnum
from sqlalchemy.orm import relationship
from app.db.session import Base

class VenueStatus(str, enum.Enum):
    approved = "approved"
    pending = "pending"

class Venue(Base):
    __tablename__ = "venues"

    id = Column(Uuid, primary_key=True, default=uuid.uuid4)
    name = Column(String(255), nullable=False)
    # district_id / owner_id are plain references: deleting the district or
    # owner leaves them dangling instead of cascading.
    district_id = Column(Uuid, nullable=False, index=True)
    address = Column(Text, nullable=False)
    capacity = Column(Integer, nullable=False)
    price_seat = Column(Float, nullable=False)
    phone_number = Column(String(20), nullable=False)
    status = Column(
        SAEnum(VenueStatus, native_enum=False, length=20),
        nullable=False,
        default=VenueStatus.pending,
        index=True,
    )
    owner_id = Column(Uuid, nullable=False, index=True)
    created_at = Column(DateTime(timezone=True), server_default=func.now())
    updated_at = Column(DateTime(timezone=True), onupdate=func.now(), nullable=True)

    # Relationships
    district = relationship(
        "District", primaryjoin="foreign(Venue.district_id) == District.id", viewonly=True
    )
    owner = relationship(
        "User", primaryjoin="foreign(Venue.owner_id) == User.id", viewonly=True
    )
    images = relationship(
        "Image",
        primaryjoin="Venue.id == foreign(Image.venue_id)",
        viewonly=True,
        order_by="Image.created_at",
    )
    upcoming_bookings = relationship(
        "Booking",
        primaryjoin="and_(Venue.id == foreign(Booking.venue_id), Booking.status == 'upcoming')",
        viewonly=True,
        order_by="Booking.reservation_date",
    )
