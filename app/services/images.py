from typing import List
from uuid import UUID

from sqlalchemy.orm import Session, selectinload

from app.core.errors import NotFoundError
from app.core.permissions import can_manage_venue, ensure
from app.models.image import Image
from app.models.user import User
from app.models.venue import Venue
from app.schemas.image import ImageCreate, ImageUpdate
from app.services.venues import get_venue_or_404
from app.utils.uploads import remove_upload


def _get_or_404(db: Session, image_id: UUID) -> Image:
    image = (
        db.query(Image)
        .options(selectinload(Image.venue))
        .filter(Image.id == image_id)
        .first()
    )
    if not image:
        raise NotFoundError("Image")
    return image


def _parent_venue(db: Session, image: Image):
    # Re-fetched only for the ownership check
    return db.query(Venue).filter(Venue.id == image.venue_id).first()


def list_images(db: Session) -> List[Image]:
    return db.query(Image).options(selectinload(Image.venue)).order_by(Image.created_at).all()


def get_image(db: Session, image_id: UUID) -> Image:
    return _get_or_404(db, image_id)


def list_venue_images(db: Session, venue_id: UUID) -> List[Image]:
    get_venue_or_404(db, venue_id)
    return db.query(Image).filter(Image.venue_id == venue_id).order_by(Image.created_at).all()


def create_image(db: Session, data: ImageCreate, current_user: User) -> Image:
    venue = get_venue_or_404(db, data.venue_id)
    ensure(can_manage_venue(current_user, venue), "Not authorized to add images to this venue")

    image = Image(venue_id=venue.id, image_url=str(data.image_url))
    db.add(image)
    db.commit()
    return _get_or_404(db, image.id)


def update_image(db: Session, image_id: UUID, data: ImageUpdate, current_user: User) -> Image:
    image = _get_or_404(db, image_id)
    ensure(
        can_manage_venue(current_user, _parent_venue(db, image)),
        "Not authorized to update this image",
    )
    image.image_url = str(data.image_url)
    db.commit()
    return _get_or_404(db, image.id)


def delete_image(db: Session, image_id: UUID, current_user: User) -> None:
    image = _get_or_404(db, image_id)
    ensure(
        can_manage_venue(current_user, _parent_venue(db, image)),
        "Not authorized to delete this image",
    )
    url = image.image_url
    db.delete(image)
    db.commit()
    remove_upload(url)
