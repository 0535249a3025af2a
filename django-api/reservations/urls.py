from django.urls import path

from reservations.handlers import (
    ReservationDetailView,
    ReservationListView,
    StoreCreateView,
    StoreDetailView,
    StoreItemListView,
    StoreReservationCreateView,
)

urlpatterns = [
    path("stores", StoreCreateView.as_view(), name="store-create"),
    path("stores/<int:store_id>", StoreDetailView.as_view(), name="store-detail"),
    path("stores/<int:store_id>/items", StoreItemListView.as_view(), name="store-items"),
    path(
        "stores/<int:store_id>/reservations",
        StoreReservationCreateView.as_view(),
        name="store-reservation-create",
    ),
    path("reservations", ReservationListView.as_view(), name="reservation-list"),
    path(
        "reservations/<int:reservation_id>",
        ReservationDetailView.as_view(),
        name="reservation-detail",
    ),
]
