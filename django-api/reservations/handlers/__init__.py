from reservations.handlers.views import (
    ReservationDetailView,
    ReservationListView,
    StoreCreateView,
    StoreDetailView,
    StoreItemListView,
    StoreReservationCreateView,
)

__all__ = [
    "ReservationDetailView",
    "ReservationListView",
    "StoreCreateView",
    "StoreDetailView",
    "StoreItemListView",
    "StoreReservationCreateView",
]
