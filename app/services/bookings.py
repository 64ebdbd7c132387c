import logging
from datetime import date
from typing import List, Optional
from uuid import UUID

from sqlalchemy.orm import Session, selectinload

from app.core.errors import ConflictError, NotFoundError
from app.core.permissions import (
    can_manage_venue,
    can_modify_booking,
    can_view_booking,
    ensure,
)
from app.db.session import commit_or_conflict
from app.models.booking import Booking, BookingStatus
from app.models.user import User
from app.models.venue import Venue, VenueStatus
from app.schemas.booking import BookingCreate, BookingUpdate
from app.services.venues import get_venue_or_404

logger = logging.getLogger(__name__)

ALREADY_BOOKED = "Venue is already booked for this date"


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------


def _booking_query(db: Session):
    return db.query(Booking).options(
        selectinload(Booking.venue),
        selectinload(Booking.user),
    )


def _get_or_404(db: Session, booking_id: UUID) -> Booking:
    booking = db.query(Booking).filter(Booking.id == booking_id).first()
    if not booking:
        raise NotFoundError("Booking")
    return booking


def _load_booking(db: Session, booking_id: UUID) -> Booking:
    booking = _booking_query(db).filter(Booking.id == booking_id).first()
    if not booking:
        raise NotFoundError("Booking")
    return booking


def ensure_capacity(venue: Venue, guest_count: int) -> None:
    if guest_count > venue.capacity:
        raise ConflictError(f"Guest count exceeds venue capacity of {venue.capacity}")


def ensure_date_free(
    db: Session,
    venue_id: UUID,
    reservation_date: date,
    exclude_id: Optional[UUID] = None,
) -> None:
    """Pre-check for the (venue, date) unique index."""
    query = db.query(Booking.id).filter(
        Booking.venue_id == venue_id,
        Booking.reservation_date == reservation_date,
    )
    if exclude_id is not None:
        query = query.filter(Booking.id != exclude_id)
    if query.first() is not None:
        raise ConflictError(ALREADY_BOOKED)


# ---------------------------------------------------------------------------
# Reads
# ---------------------------------------------------------------------------


def list_all_bookings(db: Session) -> List[Booking]:
    return _booking_query(db).order_by(Booking.reservation_date.desc()).all()


def list_user_bookings(db: Session, current_user: User) -> List[Booking]:
    return (
        _booking_query(db)
        .filter(Booking.user_id == current_user.id)
        .order_by(Booking.reservation_date.desc())
        .all()
    )


def list_venue_bookings(db: Session, venue_id: UUID, current_user: User) -> List[Booking]:
    venue = get_venue_or_404(db, venue_id)
    ensure(
        can_manage_venue(current_user, venue),
        "Not authorized to view bookings for this venue",
    )
    return (
        _booking_query(db)
        .filter(Booking.venue_id == venue_id)
        .order_by(Booking.reservation_date.desc())
        .all()
    )


def get_booking(db: Session, booking_id: UUID, current_user: User) -> Booking:
    booking = _load_booking(db, booking_id)
    ensure(
        can_view_booking(current_user, booking, booking.venue),
        "Not authorized to view this booking",
    )
    return booking


# ---------------------------------------------------------------------------
# Mutations
# ---------------------------------------------------------------------------


def create_booking(db: Session, data: BookingCreate, current_user: User) -> Booking:
    """
    Reserve an approved venue for one day.

    - The venue must exist and be approved.
    - guest_count may not exceed the venue's capacity.
    - Only one booking per venue and date; the unique index settles races.
    """
    venue = get_venue_or_404(db, data.venue_id)
    if venue.status != VenueStatus.approved:
        raise ConflictError("Venue is not approved for bookings")
    ensure_capacity(venue, data.guest_count)
    ensure_date_free(db, venue.id, data.reservation_date)

    booking = Booking(
        venue_id=venue.id,
        reservation_date=data.reservation_date,
        guest_count=data.guest_count,
        client_phone=data.client_phone,
        user_id=current_user.id,
        status=BookingStatus.upcoming,
    )
    db.add(booking)
    commit_or_conflict(db, ALREADY_BOOKED)
    logger.info(
        "Booking %s: venue %s on %s by %s",
        booking.id, venue.id, data.reservation_date, current_user.username,
    )
    return _load_booking(db, booking.id)


def update_booking(db: Session, booking_id: UUID, data: BookingUpdate, current_user: User) -> Booking:
    booking = _get_or_404(db, booking_id)
    ensure(can_modify_booking(current_user, booking), "Not authorized to update this booking")

    changes = data.model_dump(exclude_unset=True, exclude_none=True)

    new_date = changes.get("reservation_date")
    if new_date is not None and new_date != booking.reservation_date:
        ensure_date_free(db, booking.venue_id, new_date, exclude_id=booking.id)

    if "guest_count" in changes:
        venue = get_venue_or_404(db, booking.venue_id)
        ensure_capacity(venue, changes["guest_count"])

    for field, value in changes.items():
        setattr(booking, field, value)

    commit_or_conflict(db, ALREADY_BOOKED)
    return _load_booking(db, booking.id)


def delete_booking(db: Session, booking_id: UUID, current_user: User) -> None:
    booking = _get_or_404(db, booking_id)
    ensure(can_modify_booking(current_user, booking), "Not authorized to delete this booking")
    db.delete(booking)
    db.commit()
    logger.info("Booking %s deleted by %s", booking_id, current_user.username)


def change_booking_status(
    db: Session,
    booking_id: UUID,
    status: BookingStatus,
    current_user: User,
) -> Booking:
    """Status moves are for the venue's owner or an admin, not the booking's author."""
    booking = _get_or_404(db, booking_id)
    venue = db.query(Venue).filter(Venue.id == booking.venue_id).first()
    ensure(can_manage_venue(current_user, venue), "Not authorized to change booking status")

    booking.status = status
    db.commit()
    logger.info("Booking %s status set to %s", booking_id, status.value)
    return _load_booking(db, booking.id)
