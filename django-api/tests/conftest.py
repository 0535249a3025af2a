"""Pytest configuration and shared fixtures."""

from datetime import date, datetime, timezone

import pytest
from rest_framework.test import APIClient

from reservations import models
from reservations.domain import (
    Capacity,
    Identity,
    Item,
    ItemId,
    ItemStatus,
    Member,
    MemberId,
    Money,
    Store,
    StoreId,
    StoreImage,
)
from reservations.services.inventory_service import InventoryService
from reservations.services.reservation_service import ReservationService
from reservations.services.store_service import StoreService
from tests.fakes import (
    InMemoryItemLookup,
    InMemoryMemberLookup,
    InMemoryReservationStore,
    InMemoryStoreRepository,
)

TODAY = date(2026, 10, 19)


@pytest.fixture
def api_client() -> APIClient:
    return APIClient()


@pytest.fixture(autouse=True)
def clear_cache():
    from django.core.cache import cache
    cache.clear()
    yield
    cache.clear()


# Domain fixtures for service tests.


@pytest.fixture
def owner() -> Member:
    return Member(id=MemberId(1), email="owner@example.com", name="Owner", profile_image_url=None)


@pytest.fixture
def alice() -> Member:
    return Member(id=MemberId(2), email="alice@example.com", name="Alice")


@pytest.fixture
def bob() -> Member:
    return Member(id=MemberId(3), email="bob@example.com", name="Bob")


@pytest.fixture
def kayak() -> Item:
    return Item(
        id=ItemId(10),
        store_id=StoreId(100),
        name="Kayak",
        price=Money(10),
        total_ticket=Capacity(5),
    )


@pytest.fixture
def paddleboard() -> Item:
    return Item(
        id=ItemId(11),
        store_id=StoreId(100),
        name="Paddleboard",
        price=Money(20),
        total_ticket=Capacity(3),
    )


@pytest.fixture
def retired_item() -> Item:
    return Item(
        id=ItemId(12),
        store_id=StoreId(100),
        name="Canoe",
        price=Money(30),
        total_ticket=Capacity(2),
        status=ItemStatus.DELETED,
    )


@pytest.fixture
def foreign_item() -> Item:
    return Item(
        id=ItemId(20),
        store_id=StoreId(200),
        name="Surfboard",
        price=Money(15),
        total_ticket=Capacity(4),
    )


@pytest.fixture
def store(owner, kayak, paddleboard, retired_item) -> Store:
    return Store(
        id=StoreId(100),
        owner_id=owner.id,
        name="River Rentals",
        category="water",
        body="Boats by the hour",
        address="1 River Rd",
        contact="010-0000-0000",
        latitude=37.5,
        longitude=127.0,
        created_at=datetime(2026, 1, 1, tzinfo=timezone.utc),
        items=(kayak, paddleboard, retired_item),
        images=(
            StoreImage(link="https://img.example.com/a.png"),
            StoreImage(link="https://img.example.com/thumb.png", is_thumbnail=True),
        ),
    )


@pytest.fixture
def stores(store) -> InMemoryStoreRepository:
    return InMemoryStoreRepository(store)


@pytest.fixture
def members(owner, alice, bob) -> InMemoryMemberLookup:
    return InMemoryMemberLookup(owner, alice, bob)


@pytest.fixture
def items(kayak, paddleboard, retired_item, foreign_item) -> InMemoryItemLookup:
    return InMemoryItemLookup(kayak, paddleboard, retired_item, foreign_item)


@pytest.fixture
def reservation_store() -> InMemoryReservationStore:
    return InMemoryReservationStore()


@pytest.fixture
def reservation_service(stores, members, items, reservation_store) -> ReservationService:
    return ReservationService(stores, members, items, reservation_store, today=lambda: TODAY)


@pytest.fixture
def inventory_service(stores, reservation_store) -> InventoryService:
    return InventoryService(stores, reservation_store, today=lambda: TODAY)


@pytest.fixture
def store_service(stores, members, inventory_service) -> StoreService:
    return StoreService(stores, members, inventory_service)


@pytest.fixture
def alice_identity(alice) -> Identity:
    return Identity(email=alice.email)


@pytest.fixture
def bob_identity(bob) -> Identity:
    return Identity(email=bob.email)


# ORM fixtures for integration tests.


@pytest.fixture
def db_owner(db) -> models.Member:
    return models.Member.objects.create(
        email="owner@example.com",
        name="Owner",
        profile_image_url="https://img.example.com/owner.png",
    )


@pytest.fixture
def db_member(db) -> models.Member:
    return models.Member.objects.create(email="alice@example.com", name="Alice")


@pytest.fixture
def db_other_member(db) -> models.Member:
    return models.Member.objects.create(email="bob@example.com", name="Bob")


@pytest.fixture
def db_store(db_owner) -> models.Store:
    store = models.Store.objects.create(
        owner=db_owner,
        name="River Rentals",
        category="water",
        body="Boats by the hour",
        address="1 River Rd",
        contact="010-0000-0000",
        latitude=37.5,
        longitude=127.0,
    )
    models.StoreImage.objects.create(store=store, link="https://img.example.com/a.png")
    models.StoreImage.objects.create(
        store=store, link="https://img.example.com/thumb.png", is_thumbnail=True
    )
    return store


@pytest.fixture
def db_kayak(db_store) -> models.Item:
    return models.Item.objects.create(store=db_store, name="Kayak", price=10, total_ticket=5)


@pytest.fixture
def db_paddleboard(db_store) -> models.Item:
    return models.Item.objects.create(store=db_store, name="Paddleboard", price=20, total_ticket=3)


@pytest.fixture
def db_deleted_item(db_store) -> models.Item:
    return models.Item.objects.create(
        store=db_store,
        name="Canoe",
        price=30,
        total_ticket=2,
        status=models.Item.Status.DELETED,
    )


@pytest.fixture
def auth_user(db, db_member):
    from django.contrib.auth import get_user_model

    return get_user_model().objects.create_user(
        username="alice", email=db_member.email, password="secret"
    )


@pytest.fixture
def other_auth_user(db, db_other_member):
    from django.contrib.auth import get_user_model

    return get_user_model().objects.create_user(
        username="bob", email=db_other_member.email, password="secret"
    )
