"""Integration tests for the HTTP handlers.

Run with: pytest django-api/tests/test_reservation_api.py -v
"""

from datetime import timedelta

import pytest
from django.utils import timezone
from rest_framework.test import APIClient

from reservations import models


def booking_payload(*lines, total_price, on=None) -> dict:
    return {
        "reservation_date": (on or timezone.localdate()).isoformat(),
        "name": "Alice",
        "phone": "010-1111-2222",
        "email": "alice@example.com",
        "total_price": total_price,
        "items": [{"item_id": item.pk, "ticket_count": count} for item, count in lines],
    }


@pytest.fixture
def alice_client(auth_user) -> APIClient:
    client = APIClient()
    client.force_authenticate(user=auth_user)
    return client


@pytest.fixture
def bob_client(other_auth_user) -> APIClient:
    client = APIClient()
    client.force_authenticate(user=other_auth_user)
    return client


@pytest.mark.django_db
class TestStoreDetail:
    """Tests for GET /api/stores/{id}"""

    def test_returns_store_with_availability(
        self, api_client, db_store, db_kayak, db_paddleboard, db_deleted_item
    ):
        response = api_client.get(f"/api/stores/{db_store.pk}")

        assert response.status_code == 200
        body = response.json()
        assert body["name"] == "River Rentals"
        assert [(i["name"], i["remaining"]) for i in body["items"]] == [
            ("Kayak", 5),
            ("Paddleboard", 3),
        ]
        assert body["store_images"][0] == "https://img.example.com/thumb.png"
        assert body["profile_image"] == "https://img.example.com/owner.png"

    def test_store_not_found(self, api_client, db):
        response = api_client.get("/api/stores/999")

        assert response.status_code == 404
        assert response.json() == {"error": {"code": "STORE_NOT_FOUND", "message": "Store not found"}}


@pytest.mark.django_db
class TestCreateStore:
    """Tests for POST /api/stores"""

    payload = {
        "name": "Lake House",
        "category": "water",
        "address": "2 Lake Rd",
        "latitude": 35.1,
        "longitude": 129.0,
        "images": [
            {"link": "https://img.example.com/dock.png"},
            {"link": "https://img.example.com/lake.png", "is_thumbnail": True},
        ],
        "items": [
            {"name": "Canoe", "price": 15, "total_ticket": 4},
            {"name": "Raft", "price": 40, "total_ticket": 2},
        ],
    }

    def test_create_store(self, alice_client, api_client, db_member):
        response = alice_client.post("/api/stores", self.payload, format="json")

        assert response.status_code == 201
        body = response.json()
        assert body["name"] == "Lake House"
        assert [(i["name"], i["remaining"]) for i in body["items"]] == [("Canoe", 4), ("Raft", 2)]
        assert body["store_images"] == [
            "https://img.example.com/lake.png",
            "https://img.example.com/dock.png",
        ]
        store = models.Store.objects.get(pk=body["store_id"])
        assert store.owner_id == db_member.pk
        assert store.items.count() == 2

        detail = api_client.get(f"/api/stores/{body['store_id']}")
        assert detail.status_code == 200
        assert detail.json()["items"] == body["items"]

    def test_requires_authentication(self, api_client, db):
        response = api_client.post("/api/stores", self.payload, format="json")

        assert response.status_code in (401, 403)
        assert not models.Store.objects.exists()

    def test_out_of_range_coordinates(self, alice_client, db_member):
        response = alice_client.post(
            "/api/stores", {**self.payload, "latitude": 91}, format="json"
        )

        assert response.status_code == 400
        assert not models.Store.objects.exists()

    def test_unregistered_caller(self, other_auth_user, db):
        models.Member.objects.filter(email=other_auth_user.email).delete()
        client = APIClient()
        client.force_authenticate(user=other_auth_user)

        response = client.post("/api/stores", self.payload, format="json")

        assert response.status_code == 404
        assert response.json()["error"]["code"] == "MEMBER_NOT_FOUND"


@pytest.mark.django_db
class TestStoreItems:
    """Tests for GET /api/stores/{id}/items"""

    def test_items_for_date(self, alice_client, api_client, db_store, db_kayak):
        later = timezone.localdate() + timedelta(days=5)
        created = alice_client.post(
            f"/api/stores/{db_store.pk}/reservations",
            booking_payload((db_kayak, 4), total_price=40, on=later),
            format="json",
        )
        assert created.status_code == 201

        that_day = api_client.get(f"/api/stores/{db_store.pk}/items", {"date": later.isoformat()})
        today = api_client.get(f"/api/stores/{db_store.pk}/items")

        assert that_day.json()[0]["remaining"] == 1
        assert today.json()[0]["remaining"] == 5

    def test_invalid_date(self, api_client, db_store):
        response = api_client.get(f"/api/stores/{db_store.pk}/items", {"date": "tomorrow"})
        assert response.status_code == 400


@pytest.mark.django_db
class TestCreateReservation:
    """Tests for POST /api/stores/{id}/reservations"""

    def test_create_reservation(self, alice_client, db_store, db_kayak, db_paddleboard, db_member):
        response = alice_client.post(
            f"/api/stores/{db_store.pk}/reservations",
            booking_payload((db_kayak, 2), (db_paddleboard, 1), total_price=40),
            format="json",
        )

        assert response.status_code == 201
        body = response.json()
        assert body["status"] == "pending"
        assert body["member_id"] == db_member.pk
        assert [(i["item_id"], i["ticket_count"], i["unit_price"]) for i in body["items"]] == [
            (db_kayak.pk, 2, 10),
            (db_paddleboard.pk, 1, 20),
        ]
        assert models.ReservationItem.objects.count() == 2

    def test_requires_authentication(self, api_client, db_store, db_kayak):
        response = api_client.post(
            f"/api/stores/{db_store.pk}/reservations",
            booking_payload((db_kayak, 1), total_price=10),
            format="json",
        )
        assert response.status_code in (401, 403)
        assert not models.Reservation.objects.exists()

    def test_past_date_rejected(self, alice_client, db_store, db_kayak):
        response = alice_client.post(
            f"/api/stores/{db_store.pk}/reservations",
            booking_payload(
                (db_kayak, 1), total_price=10, on=timezone.localdate() - timedelta(days=1)
            ),
            format="json",
        )

        assert response.status_code == 400
        assert response.json()["error"]["code"] == "PAST_RESERVATION_DATE"
        assert not models.Reservation.objects.exists()

    def test_price_mismatch_rejected(self, alice_client, db_store, db_kayak):
        response = alice_client.post(
            f"/api/stores/{db_store.pk}/reservations",
            booking_payload((db_kayak, 2), total_price=21),
            format="json",
        )

        assert response.status_code == 400
        assert response.json()["error"]["code"] == "TOTAL_PRICE_MISMATCH"
        assert not models.Reservation.objects.exists()
        assert not models.ReservationItem.objects.exists()

    def test_over_capacity_rejected(self, alice_client, db_store, db_kayak):
        response = alice_client.post(
            f"/api/stores/{db_store.pk}/reservations",
            booking_payload((db_kayak, 6), total_price=60),
            format="json",
        )

        assert response.status_code == 400
        assert response.json()["error"]["code"] == "TICKET_COUNT_EXCEEDED"

    def test_malformed_body(self, alice_client, db_store):
        response = alice_client.post(
            f"/api/stores/{db_store.pk}/reservations",
            {"name": "Alice", "items": []},
            format="json",
        )
        assert response.status_code == 400

    def test_unknown_store(self, alice_client, db_kayak):
        response = alice_client.post(
            "/api/stores/999/reservations",
            booking_payload((db_kayak, 1), total_price=10),
            format="json",
        )
        assert response.status_code == 404


@pytest.mark.django_db
class TestReservationDetail:
    """Tests for GET, PATCH and DELETE /api/reservations/{id}"""

    @pytest.fixture
    def reservation_id(self, alice_client, db_store, db_kayak) -> int:
        response = alice_client.post(
            f"/api/stores/{db_store.pk}/reservations",
            booking_payload((db_kayak, 3), total_price=30),
            format="json",
        )
        return response.json()["reservation_id"]

    def test_get(self, alice_client, reservation_id):
        response = alice_client.get(f"/api/reservations/{reservation_id}")

        assert response.status_code == 200
        assert len(response.json()["items"]) == 1

    def test_get_not_found(self, alice_client, db):
        response = alice_client.get("/api/reservations/999")
        assert response.status_code == 404

    def test_list_mine(self, alice_client, bob_client, reservation_id):
        assert [r["reservation_id"] for r in alice_client.get("/api/reservations").json()] == [
            reservation_id
        ]
        assert bob_client.get("/api/reservations").json() == []

    def test_patch_by_owner(self, alice_client, reservation_id):
        response = alice_client.patch(
            f"/api/reservations/{reservation_id}", {"name": "Alice Kim"}, format="json"
        )

        assert response.status_code == 200
        assert response.json()["name"] == "Alice Kim"
        assert response.json()["phone"] == "010-1111-2222"

    def test_patch_by_other_member_forbidden(self, bob_client, reservation_id):
        response = bob_client.patch(
            f"/api/reservations/{reservation_id}", {"name": "Mallory"}, format="json"
        )

        assert response.status_code == 403
        assert models.Reservation.objects.get(pk=reservation_id).name == "Alice"

    def test_cancel_restores_availability(
        self, alice_client, api_client, db_store, reservation_id, django_capture_on_commit_callbacks
    ):
        before = api_client.get(f"/api/stores/{db_store.pk}").json()
        assert before["items"][0]["remaining"] == 2

        with django_capture_on_commit_callbacks(execute=True):
            response = alice_client.delete(f"/api/reservations/{reservation_id}")

        assert response.status_code == 204
        assert models.Reservation.objects.get(pk=reservation_id).status == "cancelled"
        after = api_client.get(f"/api/stores/{db_store.pk}").json()
        assert after["items"][0]["remaining"] == 5

    def test_cancel_by_other_member_forbidden(self, bob_client, reservation_id):
        response = bob_client.delete(f"/api/reservations/{reservation_id}")

        assert response.status_code == 403
        assert models.Reservation.objects.get(pk=reservation_id).status == "pending"
