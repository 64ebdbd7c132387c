from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from app.db.session import get_db
from app.api.deps import get_current_user
from app.models.user import User
from app.schemas.booking import Booking as BookingSchema
from app.schemas.common import DataResponse, ListResponse
from app.schemas.user import User as UserSchema, ProfileUpdate
from app.schemas.venue import Venue as VenueSchema
from app.services import auth as auth_service
from app.services import bookings as booking_service
from app.services import venues as venue_service

router = APIRouter(prefix="/me", tags=["Me"])


# ---------------------------------------------------------------------------
# Profile
# ---------------------------------------------------------------------------


@router.get("/", response_model=DataResponse[UserSchema])
def get_me(current_user: User = Depends(get_current_user)):
    """Return the authenticated user's profile."""
    return DataResponse(data=UserSchema.model_validate(current_user))


@router.patch("/", response_model=DataResponse[UserSchema])
def update_me(
    data: ProfileUpdate,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    """Update the authenticated user's profile (names, username, password)."""
    user = auth_service.update_profile(db, current_user, data)
    return DataResponse(data=UserSchema.model_validate(user))


# ---------------------------------------------------------------------------
# Owned resources
# ---------------------------------------------------------------------------


@router.get("/venues", response_model=ListResponse[VenueSchema])
def list_my_venues(
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    """Venues owned by the authenticated user."""
    venues = venue_service.list_owner_venues(db, current_user)
    return ListResponse.of([VenueSchema.model_validate(v) for v in venues])


@router.get("/bookings", response_model=ListResponse[BookingSchema])
def list_my_bookings(
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    """The authenticated user's bookings, latest reservation date first."""
    bookings = booking_service.list_user_bookings(db, current_user)
    return ListResponse.of([BookingSchema.model_validate(b) for b in bookings])
