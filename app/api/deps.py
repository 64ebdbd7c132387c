import uuid
from typing import Optional

from fastapi import Depends
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.orm import Session

from app.core.errors import AuthenticationError
from app.core.permissions import ensure_role
from app.core.security import read_token_subject
from app.db.session import get_db
from app.models.user import User, UserRole

bearer_scheme = HTTPBearer(auto_error=False)


def get_current_user(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(bearer_scheme),
    db: Session = Depends(get_db),
) -> User:
    """Resolve the bearer token to a stored user or fail with 401."""
    if credentials is None or not credentials.credentials:
        raise AuthenticationError()
    subject = read_token_subject(credentials.credentials)
    try:
        user_id = uuid.UUID(subject)
    except ValueError:
        raise AuthenticationError()
    user = db.query(User).filter(User.id == user_id).first()
    if not user:
        raise AuthenticationError()
    return user


def require_roles(*roles: UserRole):
    """Dependency factory: authenticated user whose role is one of ``roles``."""

    def checker(current_user: User = Depends(get_current_user)) -> User:
        ensure_role(current_user, *roles)
        return current_user

    return checker


get_current_admin_user = require_roles(UserRole.admin)
get_current_owner_or_admin = require_roles(UserRole.owner, UserRole.admin)
