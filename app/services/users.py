import logging
from typing import List, Optional
from uuid import UUID

from sqlalchemy.orm import Session, selectinload

from app.core.errors import ConflictError, NotFoundError
from app.core.security import hash_password
from app.db.session import commit_or_conflict
from app.models.user import User, UserRole
from app.schemas.user import UserCreate, UserUpdate

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Helpers shared with the auth service
# ---------------------------------------------------------------------------


def ensure_username_free(db: Session, username: str, exclude_id: Optional[UUID] = None) -> None:
    query = db.query(User.id).filter(User.username == username)
    if exclude_id is not None:
        query = query.filter(User.id != exclude_id)
    if query.first() is not None:
        raise ConflictError("Username is already taken")


def apply_user_changes(db: Session, user: User, changes: dict) -> User:
    """Write ``changes`` onto ``user`` and commit.

    Every path that stores a password goes through here (or ``create_user``),
    so the plain value is always re-hashed.
    """
    username = changes.get("username")
    if username and username != user.username:
        ensure_username_free(db, username, exclude_id=user.id)

    password = changes.pop("password", None)
    if password:
        user.password_hash = hash_password(password)

    for field, value in changes.items():
        setattr(user, field, value)

    commit_or_conflict(db, "Username is already taken")
    db.refresh(user)
    return user


def create_user(db: Session, data: UserCreate, role: Optional[UserRole] = None) -> User:
    """Insert a new user; the username must be unused."""
    if db.query(User.id).filter(User.username == data.username).first():
        raise ConflictError("User already exists")

    user = User(
        firstname=data.firstname,
        lastname=data.lastname,
        username=data.username,
        password_hash=hash_password(data.password),
        role=role or getattr(data, "role", None) or UserRole.user,
    )
    db.add(user)
    commit_or_conflict(db, "User already exists")
    db.refresh(user)
    logger.info("Created user %s with role %s", user.username, user.role.value)
    return user


# ---------------------------------------------------------------------------
# Admin user management
# ---------------------------------------------------------------------------


def list_users(db: Session) -> List[User]:
    return db.query(User).order_by(User.created_at).all()


def get_user(db: Session, user_id: UUID) -> User:
    user = (
        db.query(User)
        .options(selectinload(User.venues))
        .filter(User.id == user_id)
        .first()
    )
    if not user:
        raise NotFoundError("User")
    return user


def update_user(db: Session, user_id: UUID, data: UserUpdate) -> User:
    user = db.query(User).filter(User.id == user_id).first()
    if not user:
        raise NotFoundError("User")
    return apply_user_changes(db, user, data.model_dump(exclude_unset=True, exclude_none=True))


def delete_user(db: Session, user_id: UUID) -> None:
    # Venues and bookings keep their reference to the removed user
    user = db.query(User).filter(User.id == user_id).first()
    if not user:
        raise NotFoundError("User")
    db.delete(user)
    db.commit()
    logger.info("Deleted user %s", user_id)
