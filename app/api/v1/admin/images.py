from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from app.db.session import get_db
from app.api.deps import get_current_admin_user
from app.models.user import User
from app.schemas.common import ListResponse
from app.schemas.image import ImageWithVenue
from app.services import images as image_service

router = APIRouter(prefix="/admin/images", tags=["Admin - Images"])


@router.get("/", response_model=ListResponse[ImageWithVenue])
def list_images(
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_admin_user),
):
    images = image_service.list_images(db)
    return ListResponse.of([ImageWithVenue.model_validate(i) for i in images])
