from uuid import UUID

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from app.db.session import get_db
from app.api.deps import get_current_admin_user
from app.models.user import User
from app.schemas.common import DataResponse, ListResponse, MessageResponse
from app.schemas.user import UserCreate, UserUpdate, User as UserSchema, UserDetail
from app.services import users as user_service

router = APIRouter(prefix="/admin/users", tags=["Admin - Users"])


@router.get("/", response_model=ListResponse[UserSchema])
def list_users(
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_admin_user),
):
    users = user_service.list_users(db)
    return ListResponse.of([UserSchema.model_validate(u) for u in users])


@router.get("/{user_id}", response_model=DataResponse[UserDetail])
def get_user(
    user_id: UUID,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_admin_user),
):
    user = user_service.get_user(db, user_id)
    return DataResponse(data=UserDetail.model_validate(user))


@router.post("/", response_model=DataResponse[UserSchema], status_code=status.HTTP_201_CREATED)
def create_user(
    data: UserCreate,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_admin_user),
):
    """Create a user with any role, admin included."""
    user = user_service.create_user(db, data)
    return DataResponse(data=UserSchema.model_validate(user))


@router.patch("/{user_id}", response_model=DataResponse[UserSchema])
def update_user(
    user_id: UUID,
    data: UserUpdate,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_admin_user),
):
    """Partial update; a new password is hashed like on registration."""
    user = user_service.update_user(db, user_id, data)
    return DataResponse(data=UserSchema.model_validate(user))


@router.delete("/{user_id}", response_model=MessageResponse)
def delete_user(
    user_id: UUID,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_admin_user),
):
    user_service.delete_user(db, user_id)
    return MessageResponse(message="User removed")
