import uuid
import enum
from sqlalchemy import Column, String, DateTime, func, Integer, Date, Uuid, UniqueConstraint, Enum as SAEnum
from sqlalchemy.orm import relationship
from app.db.session import Base

class BookingStatus(str, enum.Enum):
    upcoming = "upcoming"
    past = "past"

class Booking(Base):
    __tablename__ = "bookings"

    id = Column(Uuid, primary_key=True, default=uuid.uuid4)
    venue_id = Column(Uuid, nullable=False, index=True)
    reservation_date = Column(Date, nullable=False)
    guest_count = Column(Integer, nullable=False)
    client_phone = Column(String(20), nullable=False)
    user_id = Column(Uuid, nullable=False, index=True)
    status = Column(
        SAEnum(BookingStatus, native_enum=False, length=20),
        nullable=False,
        default=BookingStatus.upcoming,
        index=True,
    )
    created_at = Column(DateTime(timezone=True), server_default=func.now())
    updated_at = Column(DateTime(timezone=True), onupdate=func.now(), nullable=True)

    # Relationships
    venue = relationship(
        "Venue", primaryjoin="foreign(Booking.venue_id) == Venue.id", viewonly=True
    )
    user = relationship(
        "User", primaryjoin="foreign(Booking.user_id) == User.id", viewonly=True
    )

    __table_args__ = (
        # One booking per venue per day
        UniqueConstraint("venue_id", "reservation_date", name="uq_booking_venue_date"),
    )
