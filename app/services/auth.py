from sqlalchemy.orm import Session

from app.core.config import settings
from app.core.errors import AuthenticationError, AuthorizationError
from app.core.security import create_access_token, verify_password
from app.models.user import User, UserRole
from app.schemas.user import (
    AdminCreate,
    LoginRequest,
    ProfileUpdate,
    RegisterRequest,
    Token,
    User as UserSchema,
)
from app.services.users import apply_user_changes, create_user

# Same message for unknown username and wrong password
INVALID_CREDENTIALS = "Invalid credentials"


def build_token_response(user: User) -> Token:
    return Token(
        access_token=create_access_token(user.id),
        token_type="bearer",
        user=UserSchema.model_validate(user),
    )


def register(db: Session, data: RegisterRequest) -> Token:
    user = create_user(db, data)
    return build_token_response(user)


def register_admin(db: Session, data: AdminCreate) -> Token:
    if data.admin_secret != settings.ADMIN_SECRET_KEY:
        raise AuthorizationError("Invalid admin secret")
    user = create_user(db, data, role=UserRole.admin)
    return build_token_response(user)


def login(db: Session, data: LoginRequest) -> Token:
    user = db.query(User).filter(User.username == data.username).first()
    if not user or not verify_password(data.password, user.password_hash):
        raise AuthenticationError(INVALID_CREDENTIALS)
    return build_token_response(user)


def update_profile(db: Session, current_user: User, data: ProfileUpdate) -> User:
    """Self-service edit; the role cannot be changed from here."""
    return apply_user_changes(db, current_user, data.model_dump(exclude_unset=True, exclude_none=True))
