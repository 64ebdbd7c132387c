from uuid import UUID

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from app.db.session import get_db
from app.api.deps import get_current_admin_user
from app.models.user import User
from app.schemas.common import DataResponse
from app.schemas.venue import Venue as VenueSchema
from app.services import venues as venue_service

router = APIRouter(prefix="/admin/venues", tags=["Admin - Venues"])


@router.patch("/{venue_id}/approve", response_model=DataResponse[VenueSchema])
def approve_venue(
    venue_id: UUID,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_admin_user),
):
    """Open a venue for bookings. Owners cannot approve their own venues."""
    venue = venue_service.approve_venue(db, venue_id)
    return DataResponse(data=VenueSchema.model_validate(venue))
