import logging
from typing import List, Optional, Sequence
from uuid import UUID

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session, selectinload

from app.core.errors import NotFoundError
from app.core.permissions import can_manage_venue, ensure, is_admin
from app.models.image import Image
from app.models.user import User
from app.models.venue import Venue, VenueStatus
from app.schemas.venue import VenueCreate, VenueFilter, VenueUpdate
from app.utils.uploads import remove_upload, save_upload, validate_image_uploads

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------


def _venue_query(db: Session):
    """Venue query with district, owner summary and images eager-loaded."""
    return db.query(Venue).options(
        selectinload(Venue.district),
        selectinload(Venue.owner),
        selectinload(Venue.images),
    )


def get_venue_or_404(db: Session, venue_id: UUID) -> Venue:
    venue = db.query(Venue).filter(Venue.id == venue_id).first()
    if not venue:
        raise NotFoundError("Venue")
    return venue


def _load_venue(db: Session, venue_id: UUID) -> Venue:
    venue = _venue_query(db).filter(Venue.id == venue_id).first()
    if not venue:
        raise NotFoundError("Venue")
    return venue


def _attach_uploads(db: Session, venue: Venue, uploads: Sequence) -> int:
    """Store uploaded files as images of ``venue``.

    Runs after the venue is committed; a failure here is logged and does not
    undo the venue. Files written before the failure are removed again.
    """
    saved = []
    try:
        for upload in uploads:
            url = save_upload(upload)
            saved.append(url)
            db.add(Image(venue_id=venue.id, image_url=url))
        db.commit()
    except (OSError, SQLAlchemyError):
        db.rollback()
        logger.exception("Could not store uploaded images for venue %s", venue.id)
        for url in saved:
            remove_upload(url)
        return 0
    return len(uploads)


# ---------------------------------------------------------------------------
# Reads
# ---------------------------------------------------------------------------


def list_venues(db: Session, filters: Optional[VenueFilter] = None) -> List[Venue]:
    query = _venue_query(db)
    if filters is not None:
        if filters.district:
            query = query.filter(Venue.district_id == filters.district)
        if filters.status:
            query = query.filter(Venue.status == filters.status)
        if filters.min_capacity is not None:
            query = query.filter(Venue.capacity >= filters.min_capacity)
        if filters.max_capacity is not None:
            query = query.filter(Venue.capacity <= filters.max_capacity)
        if filters.min_price is not None:
            query = query.filter(Venue.price_seat >= filters.min_price)
        if filters.max_price is not None:
            query = query.filter(Venue.price_seat <= filters.max_price)
    return query.order_by(Venue.created_at).all()


def get_venue(db: Session, venue_id: UUID) -> Venue:
    """Venue with district, owner, images and its upcoming bookings."""
    venue = (
        _venue_query(db)
        .options(selectinload(Venue.upcoming_bookings))
        .filter(Venue.id == venue_id)
        .first()
    )
    if not venue:
        raise NotFoundError("Venue")
    return venue


def list_owner_venues(db: Session, current_user: User) -> List[Venue]:
    return (
        _venue_query(db)
        .filter(Venue.owner_id == current_user.id)
        .order_by(Venue.created_at)
        .all()
    )


# ---------------------------------------------------------------------------
# Mutations
# ---------------------------------------------------------------------------


def create_venue(
    db: Session,
    data: VenueCreate,
    current_user: User,
    uploads: Sequence = (),
) -> Venue:
    """Create a venue owned by the caller; new venues wait for approval."""
    fields = data.model_dump(exclude={"status"})
    status = data.status if data.status and is_admin(current_user) else VenueStatus.pending
    validate_image_uploads(uploads)

    venue =Venue(**fields, owner_id=current_user.id, status=status)
    db.add(venue)
    db.commit()
    db.refresh(venue)
    logger.info("Venue %s created by %s", venue.id, current_user.username)

    if uploads:
        _attach_uploads(db, venue, uploads)

    return _load_venue(db, venue.id)


def update_venue(db: Session, venue_id: UUID, data: VenueUpdate, current_user: User) -> Venue:
    venue = get_venue_or_404(db, venue_id)
    ensure(can_manage_venue(current_user, venue), "Not authorized to update this venue")

    changes = data.model_dump(exclude_unset=True, exclude_none=True)
    if not is_admin(current_user):
        changes.pop("status", None)

    for field, value in changes.items():
        setattr(venue, field, value)

    db.commit()
    return _load_venue(db, venue.id)


def delete_venue(db: Session, venue_id: UUID, current_user: User) -> None:
    """Delete the venue and its images; its bookings are kept."""
    venue = get_venue_or_404(db, venue_id)
    ensure(can_manage_venue(current_user, venue), "Not authorized to delete this venue")

    image_urls = [url for (url,) in db.query(Image.image_url).filter(Image.venue_id == venue.id)]
    db.query(Image).filter(Image.venue_id == venue.id).delete(synchronize_session=False)
    db.delete(venue)
    db.commit()
    for url in image_urls:
        remove_upload(url)
    logger.info("Venue %s deleted by %s", venue_id, current_user.username)


def approve_venue(db: Session, venue_id: UUID) -> Venue:
    """Mark the venue approved; approving twice is a no-op."""
    venue = get_venue_or_404(db, venue_id)
    venue.status = VenueStatus.approved
    db.commit()
    logger.info("Venue %s approved", venue_id)
    return _load_venue(db, venue.id)
