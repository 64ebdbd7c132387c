"""Pytest configuration and shared fixtures.

The app runs against an in-memory SQLite database; ``get_db`` is overridden
so every request shares one connection.
"""

import os
import tempfile

os.environ.setdefault("DATABASE_URL", "sqlite://")
os.environ.setdefault("UPLOAD_DIR", tempfile.mkdtemp(prefix="venue-uploads-"))

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from app.core.config import settings
from app.db.base import Base
from app.db.session import get_db
from app.main import app

API = settings.API_V1_STR


@pytest.fixture
def engine():
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(bind=engine)
    yield engine
    Base.metadata.drop_all(bind=engine)
    engine.dispose()


@pytest.fixture
def session_factory(engine):
    return sessionmaker(autocommit=False, autoflush=False, bind=engine)


@pytest.fixture
def db(session_factory):
    session = session_factory()
    yield session
    session.close()


@pytest.fixture
def client(session_factory):
    def override_get_db():
        session = session_factory()
        try:
            yield session
        finally:
            session.close()

    app.dependency_overrides[get_db] = override_get_db
    yield TestClient(app)
    app.dependency_overrides.clear()


# ---------------------------------------------------------------------------
# Accounts
# ---------------------------------------------------------------------------


def auth_headers(token: str) -> dict:
    return {"Authorization": f"Bearer {token}"}


def register(client, username: str, role: str = "user", password: str = "secret123") -> dict:
    """Register through the API; returns the user payload plus ready-made headers."""
    resp = client.post(
        f"{API}/auth/register",
        json={
            "firstname": username.capitalize(),
            "lastname": "Tester",
            "username": username,
            "password": password,
            "role": role,
        },
    )
    assert resp.status_code == 201, resp.text
    data = resp.json()["data"]
    return {"id": data["user"]["id"], "headers": auth_headers(data["access_token"]), **data["user"]}


@pytest.fixture
def admin(client):
    resp = client.post(
        f"{API}/auth/admin/register",
        json={
            "firstname": "Ada",
            "lastname": "Admin",
            "username": "admin",
            "password": "adminpass",
            "admin_secret": settings.ADMIN_SECRET_KEY,
        },
    )
    assert resp.status_code == 201, resp.text
    data = resp.json()["data"]
    return {"id": data["user"]["id"], "headers": auth_headers(data["access_token"])}


@pytest.fixture
def owner(client):
    return register(client, "owner_a", role="owner")


@pytest.fixture
def other_owner(client):
    return register(client, "owner_b", role="owner")


@pytest.fixture
def guest(client):
    return register(client, "guest", role="user")


# ---------------------------------------------------------------------------
# Resources
# ---------------------------------------------------------------------------


@pytest.fixture
def district(client, admin):
    resp = client.post(f"{API}/districts/", json={"name": "Chilanzar"}, headers=admin["headers"])
    assert resp.status_code == 201, resp.text
    return resp.json()["data"]


def venue_payload(district_id: str, **overrides) -> dict:
    payload = {
        "name": "Grand Hall",
        "district_id": district_id,
        "address": "1 Bunyodkor Ave",
        "capacity": 100,
        "price_seat": 25.5,
        "phone_number": "+998901234567",
    }
    payload.update(overrides)
    return payload


@pytest.fixture
def venue(client, owner, district):
    resp = client.post(f"{API}/venues/", json=venue_payload(district["id"]), headers=owner["headers"])
    assert resp.status_code == 201, resp.text
    return resp.json()["data"]


@pytest.fixture
def approved_venue(client, admin, venue):
    resp = client.patch(f"{API}/admin/venues/{venue['id']}/approve", headers=admin["headers"])
    assert resp.status_code == 200, resp.text
    return resp.json()["data"]


def booking_payload(venue_id: str, **overrides) -> dict:
    payload = {
        "venue_id": venue_id,
        "reservation_date": "2025-06-01",
        "guest_count": 50,
        "client_phone": "+998901112233",
    }
    payload.update(overrides)
    return payload


@pytest.fixture
def booking(client, guest, approved_venue):
    resp = client.post(
        f"{API}/bookings/", json=booking_payload(approved_venue["id"]), headers=guest["headers"]
    )
    assert resp.status_code == 201, resp.text
    return resp.json()["data"]
