from reservations.domain.models import (
    Identity,
    Item,
    ItemDraft,
    ItemAvailability,
    ItemStatus,
    Member,
    Reservation,
    ReservationDraft,
    ReservationItem,
    ReservationPatch,
    ReservationStatus,
    Store,
    StoreDetail,
    StoreDraft,
    StoreImage,
)
from reservations.domain.value_objects import (
    Capacity,
    ItemId,
    MemberId,
    Money,
    ReservationId,
    StoreId,
    TicketCount,
)

__all__ = [
    "Identity",
    "Item",
    "ItemDraft",
    "ItemAvailability",
    "ItemStatus",
    "Member",
    "Reservation",
    "ReservationDraft",
    "ReservationItem",
    "ReservationPatch",
    "ReservationStatus",
    "Store",
    "StoreDetail",
    "StoreDraft",
    "StoreImage",
    "Capacity",
    "ItemId",
    "MemberId",
    "Money",
    "ReservationId",
    "StoreId",
    "TicketCount",
]
