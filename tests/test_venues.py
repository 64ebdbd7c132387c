"""Venue listing, ownership rules, approval and image cascade."""

import io
import os

from app.core.config import settings
from app.services import venues as venue_service
from conftest import API, booking_payload, register, venue_payload


def upload_form(district_id, **overrides):
    return {k: str(v) for k, v in venue_payload(district_id, **overrides).items()}


def stored_files():
    return set(os.listdir(settings.UPLOAD_DIR))


class TestVenueCreate:
    def test_new_venue_is_pending_and_owned_by_caller(self, client, owner, venue):
        assert venue["status"] == "pending"
        assert venue["owner_id"] == owner["id"]
        assert venue["owner"]["username"] == "owner_a"
        assert "password_hash" not in venue["owner"]
        assert venue["district"]["name"] == "Chilanzar"
        assert venue["images"] == []

    def test_owner_cannot_self_approve_on_create(self, client, owner, district):
        resp = client.post(
            f"{API}/venues/", json=venue_payload(district["id"], status="approved"), headers=owner["headers"]
        )
        assert resp.status_code == 201
        assert resp.json()["data"]["status"] == "pending"

    def test_admin_may_set_status_on_create(self, client, admin, district):
        resp = client.post(
            f"{API}/venues/", json=venue_payload(district["id"], status="approved"), headers=admin["headers"]
        )
        assert resp.json()["data"]["status"] == "approved"
        assert resp.json()["data"]["owner_id"] == admin["id"]

    def test_plain_user_cannot_create(self, client, guest, district):
        resp = client.post(f"{API}/venues/", json=venue_payload(district["id"]), headers=guest["headers"])
        assert resp.status_code == 403

    def test_range_rules(self, client, owner, district):
        resp = client.post(
            f"{API}/venues/",
            json=venue_payload(district["id"], capacity=0, price_seat=-1),
            headers=owner["headers"],
        )
        assert resp.status_code == 400
        fields = {e["field"] for e in resp.json()["errors"]}
        assert fields == {"capacity", "price_seat"}

    def test_upload_creates_one_image_per_file(self, client, owner, district):
        form = {k: str(v) for k, v in venue_payload(district["id"]).items()}
        files = [
            ("images", ("front.jpg", io.BytesIO(b"front"), "image/jpeg")),
            ("images", ("hall.png", io.BytesIO(b"hall"), "image/png")),
        ]
        resp = client.post(f"{API}/venues/upload", data=form, files=files, headers=owner["headers"])
        assert resp.status_code == 201, resp.text
        images = resp.json()["data"]["images"]
        assert len(images) == 2
        assert all(i["image_url"].startswith("/uploads/") for i in images)

        served = client.get(images[0]["image_url"])
        assert served.status_code == 200

    def test_upload_validates_form_fields(self, client, owner, district):
        resp = client.post(f"{API}/venues/upload", data=upload_form(district["id"], capacity=0), headers=owner["headers"])
        assert resp.status_code == 400
        assert resp.json()["errors"][0]["field"] == "capacity"

    def test_upload_rejects_non_image_files(self, client, owner, district):
        before = stored_files()
        files = [
            ("images", ("front.jpg", io.BytesIO(b"front"), "image/jpeg")),
            ("images", ("page.html", io.BytesIO(b"<script></script>"), "text/html")),
        ]
        resp = client.post(
            f"{API}/venues/upload", data=upload_form(district["id"]), files=files, headers=owner["headers"]
        )
        assert resp.status_code == 400
        assert resp.json()["errors"][0]["field"] == "images"
        assert client.get(f"{API}/venues/").json()["count"] == 0
        assert stored_files() == before

    def test_failed_image_batch_keeps_the_venue(self, client, owner, district, monkeypatch):
        real_save = venue_service.save_upload
        calls = []

        def save_then_fail(upload):
            calls.append(upload.filename)
            if len(calls) == 2:
                raise OSError("disk full")
            return real_save(upload)

        monkeypatch.setattr(venue_service, "save_upload", save_then_fail)
        before = stored_files()
        files = [
            ("images", ("front.jpg", io.BytesIO(b"front"), "image/jpeg")),
            ("images", ("hall.png", io.BytesIO(b"hall"), "image/png")),
        ]
        resp = client.post(
            f"{API}/venues/upload", data=upload_form(district["id"]), files=files, headers=owner["headers"]
        )
        assert resp.status_code == 201
        venue = resp.json()["data"]
        assert venue["images"] == []
        assert client.get(f"{API}/venues/{venue['id']}").status_code == 200
        # the file written before the failure is cleaned up
        assert stored_files() == before


class TestVenueReads:
    def test_filters_combine(self, client, admin, owner, district):
        small = venue_payload(district["id"], name="Small", capacity=20, price_seat=10)
        large = venue_payload(district["id"], name="Large", capacity=300, price_seat=40)
        client.post(f"{API}/venues/", json=small, headers=owner["headers"])
        client.post(f"{API}/venues/", json=large, headers=owner["headers"])

        resp = client.get(f"{API}/venues/", params={"min_capacity": 50, "max_price": 50})
        assert [v["name"] for v in resp.json()["data"]] == ["Large"]

        resp = client.get(f"{API}/venues/", params={"status": "pending", "district": district["id"]})
        assert resp.json()["count"] == 2

        resp = client.get(f"{API}/venues/", params={"status": "approved"})
        assert resp.json()["count"] == 0

    def test_no_filter_returns_all(self, client, venue):
        resp = client.get(f"{API}/venues/")
        assert resp.json()["success"] is True
        assert resp.json()["count"] == 1

    def test_detail_shows_only_upcoming_bookings(self, client, admin, guest, approved_venue):
        first = client.post(
            f"{API}/bookings/", json=booking_payload(approved_venue["id"]), headers=guest["headers"]
        ).json()["data"]
        second = client.post(
            f"{API}/bookings/",
            json=booking_payload(approved_venue["id"], reservation_date="2025-07-01"),
            headers=guest["headers"],
        ).json()["data"]
        client.patch(f"{API}/bookings/{first['id']}/status", json={"status": "past"}, headers=admin["headers"])

        resp = client.get(f"{API}/venues/{approved_venue['id']}")
        bookings = resp.json()["data"]["bookings"]
        assert [b["id"] for b in bookings] == [second["id"]]
        assert bookings[0]["status"] == "upcoming"

    def test_unknown_venue_is_404(self, client):
        resp = client.get(f"{API}/venues/0b5f3b0e-8a53-4d0b-8f0a-6b2f3c1e9d77")
        assert resp.status_code == 404

    def test_malformed_id_is_400(self, client):
        resp = client.get(f"{API}/venues/not-a-uuid")
        assert resp.status_code == 400

    def test_owner_sees_own_venues(self, client, owner, other_owner, venue, district):
        client.post(f"{API}/venues/", json=venue_payload(district["id"], name="B's"), headers=other_owner["headers"])
        resp = client.get(f"{API}/me/venues", headers=owner["headers"])
        assert [v["id"] for v in resp.json()["data"]] == [venue["id"]]


class TestVenueUpdate:
    def test_other_owner_is_forbidden_admin_is_not(self, client, admin, other_owner, venue):
        patch = {"address": "99 New Street"}
        denied = client.patch(f"{API}/venues/{venue['id']}", json=patch, headers=other_owner["headers"])
        assert denied.status_code == 403

        allowed = client.patch(f"{API}/venues/{venue['id']}", json=patch, headers=admin["headers"])
        assert allowed.status_code == 200
        assert client.get(f"{API}/venues/{venue['id']}").json()["data"]["address"] == "99 New Street"

    def test_owner_status_change_is_silently_dropped(self, client, owner, venue):
        resp = client.patch(
            f"{API}/venues/{venue['id']}", json={"status": "approved", "name": "Renamed"}, headers=owner["headers"]
        )
        assert resp.status_code == 200
        assert resp.json()["data"]["status"] == "pending"
        assert resp.json()["data"]["name"] == "Renamed"

    def test_admin_status_change_applies(self, client, admin, venue):
        resp = client.patch(f"{API}/venues/{venue['id']}", json={"status": "approved"}, headers=admin["headers"])
        assert resp.json()["data"]["status"] == "approved"

    def test_update_keeps_range_rules(self, client, owner, venue):
        resp = client.patch(f"{API}/venues/{venue['id']}", json={"capacity": 0}, headers=owner["headers"])
        assert resp.status_code == 400


class TestVenueApproval:
    def test_owner_cannot_approve_own_venue(self, client, owner, venue):
        resp = client.patch(f"{API}/admin/venues/{venue['id']}/approve", headers=owner["headers"])
        assert resp.status_code == 403

    def test_approve_is_idempotent(self, client, admin, venue):
        for _ in range(2):
            resp = client.patch(f"{API}/admin/venues/{venue['id']}/approve", headers=admin["headers"])
            assert resp.status_code == 200
            assert resp.json()["data"]["status"] == "approved"

    def test_approve_unknown_venue_is_404(self, client, admin):
        resp = client.patch(
            f"{API}/admin/venues/0b5f3b0e-8a53-4d0b-8f0a-6b2f3c1e9d77/approve", headers=admin["headers"]
        )
        assert resp.status_code == 404


class TestVenueDelete:
    def test_delete_cascades_images_but_not_bookings(self, client, owner, admin, booking, approved_venue):
        image = client.post(
            f"{API}/images/",
            json={"venue_id": approved_venue["id"], "image_url": "https://cdn.example.com/a.jpg"},
            headers=owner["headers"],
        ).json()["data"]

        resp = client.delete(f"{API}/venues/{approved_venue['id']}", headers=owner["headers"])
        assert resp.status_code == 200
        assert client.get(f"{API}/images/{image['id']}").status_code == 404

        orphan = client.get(f"{API}/bookings/{booking['id']}", headers=admin["headers"])
        assert orphan.status_code == 200
        assert orphan.json()["data"]["venue"] is None

    def test_delete_removes_uploaded_files(self, client, owner, district):
        files = [("images", ("front.jpg", io.BytesIO(b"front"), "image/jpeg"))]
        venue = client.post(
            f"{API}/venues/upload", data=upload_form(district["id"]), files=files, headers=owner["headers"]
        ).json()["data"]
        stored = os.path.basename(venue["images"][0]["image_url"])
        assert stored in stored_files()

        client.delete(f"{API}/venues/{venue['id']}", headers=owner["headers"])
        assert stored not in stored_files()

    def test_stranger_cannot_delete(self, client, venue):
        stranger = register(client, "stranger")
        resp = client.delete(f"{API}/venues/{venue['id']}", headers=stranger["headers"])
        assert resp.status_code == 403
