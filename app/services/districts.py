import logging
from typing import List
from uuid import UUID

from sqlalchemy.orm import Session, selectinload

from app.core.errors import ConflictError, NotFoundError
from app.db.session import commit_or_conflict
from app.models.district import District
from app.models.venue import Venue, VenueStatus
from app.schemas.district import DistrictCreate, DistrictUpdate

logger = logging.getLogger(__name__)


def _get_or_404(db: Session, district_id: UUID) -> District:
    district = db.query(District).filter(District.id == district_id).first()
    if not district:
        raise NotFoundError("District")
    return district


def list_districts(db: Session) -> List[District]:
    return db.query(District).order_by(District.name).all()


def get_district(db: Session, district_id: UUID) -> District:
    district = (
        db.query(District)
        .options(selectinload(District.venues))
        .filter(District.id == district_id)
        .first()
    )
    if not district:
        raise NotFoundError("District")
    return district


def create_district(db: Session, data: DistrictCreate) -> District:
    if db.query(District.id).filter(District.name == data.name).first():
        raise ConflictError("District already exists")
    district = District(name=data.name)
    db.add(district)
    commit_or_conflict(db, "District already exists")
    db.refresh(district)
    logger.info("Created district %s", district.name)
    return district


def update_district(db: Session, district_id: UUID, data: DistrictUpdate) -> District:
    duplicate = (
        db.query(District.id)
        .filter(District.name == data.name, District.id != district_id)
        .first()
    )
    if duplicate:
        raise ConflictError("District with this name already exists")

    district = _get_or_404(db, district_id)
    district.name = data.name
    commit_or_conflict(db, "District with this name already exists")
    db.refresh(district)
    return district


def delete_district(db: Session, district_id: UUID) -> None:
    # Venues in the district are left in place with a dangling district_id
    district = _get_or_404(db, district_id)
    db.delete(district)
    db.commit()
    logger.info("Deleted district %s", district_id)


def list_approved_venues(db: Session, district_id: UUID) -> List[Venue]:
    """Approved venues of a district, each with its images."""
    _get_or_404(db, district_id)
    return (
        db.query(Venue)
        .options(selectinload(Venue.images))
        .filter(Venue.district_id == district_id, Venue.status == VenueStatus.approved)
        .order_by(Venue.created_at)
        .all()
    )
