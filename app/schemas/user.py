from __future__ import annotations

from typing import Optional, List
from pydantic import BaseModel, Field, UUID4, field_validator
from datetime import datetime

from app.models.user import UserRole


# Shared properties
class UserBase(BaseModel):
    firstname: str = Field(min_length=1, max_length=100)
    lastname: str = Field(min_length=1, max_length=100)
    username: str = Field(min_length=1, max_length=100)

    @field_validator("firstname", "lastname", "username", mode="before")
    @classmethod
    def strip_names(cls, v):
        return v.strip() if isinstance(v, str) else v


# Properties to receive via API on creation (POST /auth/register, POST /admin/users)
class UserCreate(UserBase):
    password: str = Field(min_length=6)
    role: UserRole = UserRole.user


# Self-registration may only pick "user" or "owner"
class RegisterRequest(UserCreate):
    @field_validator("role")
    @classmethod
    def no_self_promotion(cls, v: UserRole) -> UserRole:
        if v == UserRole.admin:
            raise ValueError("Role must be owner or user")
        return v


# Properties to receive via API on admin creation (POST /auth/admin/register)
class AdminCreate(UserBase):
    password: str = Field(min_length=6)
    admin_secret: str


class LoginRequest(BaseModel):
    username: str = Field(min_length=1)
    password: str = Field(min_length=1)


# Properties to receive via API on update (PATCH /me)
class ProfileUpdate(BaseModel):
    firstname: Optional[str] = Field(None, min_length=1, max_length=100)
    lastname: Optional[str] = Field(None, min_length=1, max_length=100)
    username: Optional[str] = Field(None, min_length=1, max_length=100)
    password: Optional[str] = Field(None, min_length=6)

    @field_validator("firstname", "lastname", "username", mode="before")
    @classmethod
    def strip_names(cls, v):
        return v.strip() if isinstance(v, str) else v


# Admin may also change the role (PATCH /admin/users/{id})
class UserUpdate(ProfileUpdate):
    role: Optional[UserRole] = None


class User(BaseModel):
    id: UUID4
    firstname: str
    lastname: str
    username: str
    full_name: str
    role: UserRole
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    class Config:
        from_attributes = True


# Admin detail view: includes the user's venues
class UserDetail(User):
    venues: List[VenueSummary] = []

    class Config:
        from_attributes = True


# Compact user for nested responses (venue owner, booking author)
class UserSummary(BaseModel):
    id: UUID4
    firstname: str
    lastname: str
    username: str

    class Config:
        from_attributes = True


class Token(BaseModel):
    access_token: str
    token_type: str = "bearer"
    user: User


# Import at the bottom to avoid circular imports
from app.schemas.venue import VenueSummary  # noqa: E402

UserDetail.model_rebuild()
