"""Authorization decisions.

Every rule takes the acting principal (anything with ``id`` and ``role``) and
the resource it targets. Admins pass every check; everyone else needs the
ownership relation the action asks for. A denied check always raises
``AuthorizationError`` (403), never a different error.
"""

from typing import Optional

from app.core.errors import AuthorizationError
from app.models.user import UserRole


def is_admin(principal) -> bool:
    return principal.role == UserRole.admin


def is_self(principal, user_id) -> bool:
    return user_id is not None and principal.id == user_id


def owns_venue(principal, venue) -> bool:
    return venue is not None and principal.id == venue.owner_id


def can_manage_venue(principal, venue) -> bool:
    """Venue edits, image edits and booking-status changes."""
    return is_admin(principal) or owns_venue(principal, venue)


def can_modify_booking(principal, booking) -> bool:
    """Booking update and delete: the author or an admin."""
    return is_admin(principal) or is_self(principal, booking.user_id)


def can_view_booking(principal, booking, venue: Optional[object]) -> bool:
    """Booking reads: the author, an admin, or the venue's owner."""
    return can_modify_booking(principal, booking) or owns_venue(principal, venue)


def ensure(allowed: bool, message: str) -> None:
    if not allowed:
        raise AuthorizationError(message)


def ensure_role(principal, *roles: UserRole) -> None:
    """Role-restricted actions ignore ownership entirely."""
    if principal.role not in roles:
        role = getattr(principal.role, "value", principal.role)
        raise AuthorizationError(f"Role {role} is not authorized to access this route")
