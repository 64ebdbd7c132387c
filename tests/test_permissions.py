"""Unit tests for the authorization rules; no database involved."""

import uuid
from types import SimpleNamespace

import pytest

from app.core.errors import AuthorizationError
from app.core.permissions import (
    can_manage_venue,
    can_modify_booking,
    can_view_booking,
    ensure,
    ensure_role,
)
from app.models.user import UserRole


def principal(role=UserRole.user):
    return SimpleNamespace(id=uuid.uuid4(), role=role)


@pytest.fixture
def venue_owner():
    return principal(UserRole.owner)


@pytest.fixture
def venue(venue_owner):
    return SimpleNamespace(id=uuid.uuid4(), owner_id=venue_owner.id)


@pytest.fixture
def author():
    return principal()


@pytest.fixture
def booking(author, venue):
    return SimpleNamespace(id=uuid.uuid4(), user_id=author.id, venue_id=venue.id)


class TestVenueRules:
    def test_admin_manages_any_venue(self, venue):
        assert can_manage_venue(principal(UserRole.admin), venue)

    def test_owner_manages_own_venue(self, venue_owner, venue):
        assert can_manage_venue(venue_owner, venue)

    def test_other_owner_is_denied(self, venue):
        assert not can_manage_venue(principal(UserRole.owner), venue)

    def test_missing_venue_only_admin_passes(self, venue_owner):
        assert not can_manage_venue(venue_owner, None)
        assert can_manage_venue(principal(UserRole.admin), None)


class TestBookingRules:
    def test_author_and_admin_modify(self, author, booking):
        assert can_modify_booking(author, booking)
        assert can_modify_booking(principal(UserRole.admin), booking)

    def test_venue_owner_cannot_modify_but_can_view(self, venue_owner, booking, venue):
        assert not can_modify_booking(venue_owner, booking)
        assert can_view_booking(venue_owner, booking, venue)

    def test_stranger_cannot_view(self, booking, venue):
        assert not can_view_booking(principal(UserRole.owner), booking, venue)


class TestEnsure:
    def test_denial_is_always_403(self):
        with pytest.raises(AuthorizationError) as exc:
            ensure(False, "Not authorized to update this venue")
        assert exc.value.status_code == 403
        assert exc.value.message == "Not authorized to update this venue"

    def test_role_restriction_ignores_ownership(self, venue_owner):
        with pytest.raises(AuthorizationError) as exc:
            ensure_role(venue_owner, UserRole.admin)
        assert "owner" in exc.value.message

    def test_allowed_role_passes(self):
        ensure_role(principal(UserRole.admin), UserRole.admin)
