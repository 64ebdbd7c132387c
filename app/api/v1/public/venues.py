from typing import List, Optional
from uuid import UUID

from fastapi import APIRouter, Depends, File, Form, UploadFile, status
from pydantic import ValidationError as PydanticValidationError
from sqlalchemy.orm import Session

from app.db.session import get_db
from app.api.deps import get_current_user, get_current_owner_or_admin
from app.core.errors import ValidationError
from app.models.user import User
from app.schemas.booking import Booking as BookingSchema
from app.schemas.common import DataResponse, ListResponse, MessageResponse
from app.schemas.image import Image as ImageSchema
from app.schemas.venue import (
    VenueCreate,
    VenueUpdate,
    VenueFilter,
    Venue as VenueSchema,
    VenueDetail,
)
from app.services import bookings as booking_service
from app.services import images as image_service
from app.services import venues as venue_service

router = APIRouter(prefix="/venues", tags=["Venues"])


# ---------------------------------------------------------------------------
# Reads
# ---------------------------------------------------------------------------


@router.get("/", response_model=ListResponse[VenueSchema])
def list_venues(filters: VenueFilter = Depends(), db: Session = Depends(get_db)):
    """All venues, optionally filtered by district, status, capacity and price ranges."""
    venues = venue_service.list_venues(db, filters)
    return ListResponse.of([VenueSchema.model_validate(v) for v in venues])


@router.get("/{venue_id}", response_model=DataResponse[VenueDetail])
def get_venue(venue_id: UUID, db: Session = Depends(get_db)):
    """Single venue with images and upcoming bookings."""
    venue = venue_service.get_venue(db, venue_id)
    return DataResponse(data=VenueDetail.model_validate(venue))


@router.get("/{venue_id}/images", response_model=ListResponse[ImageSchema])
def list_venue_images(venue_id: UUID, db: Session = Depends(get_db)):
    images = image_service.list_venue_images(db, venue_id)
    return ListResponse.of([ImageSchema.model_validate(i) for i in images])


@router.get("/{venue_id}/bookings", response_model=ListResponse[BookingSchema])
def list_venue_bookings(
    venue_id: UUID,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    """Bookings of a venue; visible to its owner and admins."""
    bookings = booking_service.list_venue_bookings(db, venue_id, current_user)
    return ListResponse.of([BookingSchema.model_validate(b) for b in bookings])


# ---------------------------------------------------------------------------
# Mutations
# ---------------------------------------------------------------------------


@router.post("/", response_model=DataResponse[VenueSchema], status_code=status.HTTP_201_CREATED)
def create_venue(
    data: VenueCreate,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_owner_or_admin),
):
    venue = venue_service.create_venue(db, data, current_user)
    return DataResponse(data=VenueSchema.model_validate(venue))


@router.post("/upload", response_model=DataResponse[VenueSchema], status_code=status.HTTP_201_CREATED)
def create_venue_with_images(
    name: str = Form(...),
    district_id: str = Form(...),
    address: str = Form(...),
    capacity: str = Form(...),
    price_seat: str = Form(...),
    phone_number: str = Form(...),
    venue_status: Optional[str] = Form(None, alias="status"),
    images: List[UploadFile] = File(default=[]),
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_owner_or_admin),
):
    """Multipart variant of venue creation; every file becomes an image of the venue."""
    try:
        data = VenueCreate(
            name=name,
            district_id=district_id,
            address=address,
            capacity=capacity,
            price_seat=price_seat,
            phone_number=phone_number,
            status=venue_status or None,
        )
    except PydanticValidationError as exc:
        raise ValidationError.from_pydantic(exc.errors())

    uploads = [upload for upload in images if upload.filename]
    venue = venue_service.create_venue(db, data, current_user, uploads=uploads)
    return DataResponse(data=VenueSchema.model_validate(venue))


@router.patch("/{venue_id}", response_model=DataResponse[VenueSchema])
def update_venue(
    venue_id: UUID,
    data: VenueUpdate,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    """Owner or admin; `status` is ignored unless the caller is an admin."""
    venue = venue_service.update_venue(db, venue_id, data, current_user)
    return DataResponse(data=VenueSchema.model_validate(venue))


@router.delete("/{venue_id}", response_model=MessageResponse)
def delete_venue(
    venue_id: UUID,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    venue_service.delete_venue(db, venue_id, current_user)
    return MessageResponse(message="Venue removed")
