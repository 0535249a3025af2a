"""Domain models representing persisted state.

These are pure domain objects with no API input rules.
Django ORM models are in reservations/models.py (persistence layer).
"""

from dataclasses import dataclass
from datetime import date, datetime
from enum import Enum

from reservations.domain.value_objects import (
    Capacity,
    ItemId,
    MemberId,
    Money,
    ReservationId,
    StoreId,
    TicketCount,
)


class ItemStatus(Enum):
    ACTIVE = "active"
    DELETED = "deleted"


class ReservationStatus(Enum):
    """PENDING -> CANCELLED is the only transition."""

    PENDING = "pending"
    CANCELLED = "cancelled"


@dataclass(frozen=True)
class Identity:
    """The authenticated caller, identified by login email."""

    email: str


@dataclass(frozen=True)
class Member:
    """Domain representation of a Member."""

    id: MemberId
    email: str
    name: str
    profile_image_url: str | None = None


@dataclass(frozen=True)
class Item:
    """Domain representation of an Item sold by a store."""

    id: ItemId
    store_id: StoreId
    name: str
    price: Money
    total_ticket: Capacity
    status: ItemStatus = ItemStatus.ACTIVE

    @property
    def is_deleted(self) -> bool:
        return self.status is ItemStatus.DELETED


@dataclass(frozen=True)
class StoreImage:
    link: str
    is_thumbnail: bool = False


@dataclass(frozen=True)
class Store:
    """Domain representation of a Store, with its items in display order."""

    id: StoreId
    owner_id: MemberId
    name: str
    category: str
    body: str
    address: str
    contact: str
    latitude: float
    longitude: float
    created_at: datetime
    items: tuple[Item, ...] = ()
    images: tuple[StoreImage, ...] = ()


@dataclass(frozen=True)
class ItemDraft:
    """An item to be listed by a new store; capacity is fixed from here on."""

    name: str
    price: Money
    total_ticket: Capacity


@dataclass(frozen=True)
class StoreDraft:
    """Caller-supplied fields for a new store.

    Coordinates are passed in; geocoding the address happens elsewhere.
    """

    name: str
    category: str
    body: str
    address: str
    contact: str
    latitude: float
    longitude: float
    images: tuple[StoreImage, ...] = ()


@dataclass(frozen=True)
class ReservationItem:
    """One item-and-quantity line of a reservation.

    unit_price is the item price captured when the line was created; it is
    None only for lines that have not been reconciled against the catalog yet.
    """

    item_id: ItemId
    ticket_count: TicketCount
    unit_price: Money | None = None


@dataclass(frozen=True)
class Reservation:
    """Domain representation of a Reservation.

    id is None until the reservation has been saved.
    """

    id: ReservationId | None
    member_id: MemberId
    store_id: StoreId
    reservation_date: date
    name: str
    phone: str
    email: str
    total_price: Money
    status: ReservationStatus = ReservationStatus.PENDING
    items: tuple[ReservationItem, ...] = ()
    created_at: datetime | None = None

    @property
    def is_cancelled(self) -> bool:
        return self.status is ReservationStatus.CANCELLED


@dataclass(frozen=True)
class ReservationDraft:
    """Caller-supplied fields for a new reservation."""

    reservation_date: date
    name: str
    phone: str
    email: str
    total_price: int


@dataclass(frozen=True)
class ReservationPatch:
    """Contact fields to change; None or empty values are left untouched."""

    name: str | None = None
    phone: str | None = None
    email: str | None = None


@dataclass(frozen=True)
class ItemAvailability:
    """Remaining tickets for one item on one date."""

    item_id: ItemId
    name: str
    capacity: int
    price: int
    remaining: int


@dataclass(frozen=True)
class StoreDetail:
    """A store as shown to customers: today's stock and ordered images."""

    store: Store
    items: tuple[ItemAvailability, ...]
    image_links: tuple[str, ...]
    profile_image_url: str | None
