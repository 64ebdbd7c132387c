import uuid
import enum
from sqlalchemy import Column, String, DateTime, func, Uuid, Enum as SAEnum
from sqlalchemy.orm import relationship
from app.db.session import Base

class UserRole(str, enum.Enum):
    admin = "admin"
    owner = "owner"
    user = "user"

class User(Base):
    __tablename__ = "users"

    id = Column(Uuid, primary_key=True, default=uuid.uuid4)
    firstname = Column(String(100), nullable=False)
    lastname = Column(String(100), nullable=False)
    username = Column(String(100), unique=True, nullable=False, index=True)
    password_hash = Column(String(255), nullable=False)
    role = Column(SAEnum(UserRole, native_enum=False, length=20), nullable=False, default=UserRole.user)
    created_at = Column(DateTime(timezone=True), server_default=func.now())
    updated_at = Column(DateTime(timezone=True), onupdate=func.now(), nullable=True)

    # Back-reference only; venues keep their owner_id after the user is deleted
    venues = relationship(
        "Venue",
        primaryjoin="User.id == foreign(Venue.owner_id)",
        viewonly=True,
        order_by="Venue.created_at",
    )

    @property
    def full_name(self) -> str:
        return f"{self.firstname} {self.lastname}"
