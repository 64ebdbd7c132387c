from typing import Optional
from pydantic import BaseModel, HttpUrl, UUID4
from datetime import datetime


class ImageCreate(BaseModel):
    venue_id: UUID4
    image_url: HttpUrl


class ImageUpdate(BaseModel):
    image_url: HttpUrl


# Compact venue reference for image reads
class ImageVenue(BaseModel):
    id: UUID4
    name: str

    class Config:
        from_attributes = True


class Image(BaseModel):
    id: UUID4
    venue_id: UUID4
    image_url: str
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    class Config:
        from_attributes = True


# GET /images, GET /images/{id}
class ImageWithVenue(Image):
    venue: Optional[ImageVenue] = None

    class Config:
        from_attributes = True
