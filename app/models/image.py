import uuid
from sqlalchemy import Column, DateTime, func, Text, Uuid
from sqlalchemy.orm import relationship
from app.db.session import Base

class Image(Base):
    __tablename__ = "images"

    id = Column(Uuid, primary_key=True, default=uuid.uuid4)
    venue_id = Column(Uuid, nullable=False, index=True)
    image_url = Column(Text, nullable=False) # remote URL or /uploads/<file>
    created_at = Column(DateTime(timezone=True), server_default=func.now())
    updated_at = Column(DateTime(timezone=True), onupdate=func.now(), nullable=True)

    venue = relationship(
        "Venue", primaryjoin="foreign(Image.venue_id) == Venue.id", viewonly=True
    )
