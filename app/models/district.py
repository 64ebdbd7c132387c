import uuid
from sqlalchemy import Column, String, DateTime, func, Uuid
from sqlalchemy.orm import relationship
from app.db.session import Base

class District(Base):
    __tablename__ = "districts"

    id = Column(Uuid, primary_key=True, default=uuid.uuid4)
    name = Column(String(255), unique=True, nullable=False, index=True)
    created_at = Column(DateTime(timezone=True), server_default=func.now())
    updated_at = Column(DateTime(timezone=True), onupdate=func.now(), nullable=True)

    # Relationships
    venues = relationship(
        "Venue",
        primaryjoin="District.id == foreign(Venue.district_id)",
        viewonly=True,
        order_by="Venue.created_at",
    )
