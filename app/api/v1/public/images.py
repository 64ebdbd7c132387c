from uuid import UUID

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from app.db.session import get_db
from app.api.deps import get_current_user
from app.models.user import User
from app.schemas.common import DataResponse, MessageResponse
from app.schemas.image import ImageCreate, ImageUpdate, ImageWithVenue
from app.services import images as image_service

router = APIRouter(prefix="/images", tags=["Images"])


@router.get("/{image_id}", response_model=DataResponse[ImageWithVenue])
def get_image(image_id: UUID, db: Session = Depends(get_db)):
    image = image_service.get_image(db, image_id)
    return DataResponse(data=ImageWithVenue.model_validate(image))


@router.post("/", response_model=DataResponse[ImageWithVenue], status_code=status.HTTP_201_CREATED)
def create_image(
    data: ImageCreate,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    """Attach an image URL to a venue the caller owns (or any venue, for admins)."""
    image = image_service.create_image(db, data, current_user)
    return DataResponse(data=ImageWithVenue.model_validate(image))


@router.patch("/{image_id}", response_model=DataResponse[ImageWithVenue])
def update_image(
    image_id: UUID,
    data: ImageUpdate,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    image = image_service.update_image(db, image_id, data, current_user)
    return DataResponse(data=ImageWithVenue.model_validate(image))


@router.delete("/{image_id}", response_model=MessageResponse)
def delete_image(
    image_id: UUID,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    image_service.delete_image(db, image_id, current_user)
    return MessageResponse(message="Image removed")
