"""HTTP handlers (views) - handle HTTP concerns only.

Handlers:
- Parse requests and validate input format
- Call services for business logic
- Leave domain errors to the exception handler in handlers/errors.py
- Never contain business logic
- Never expose internal error details
"""

from django.core.cache import cache
from django.utils import timezone
from rest_framework import serializers, status
from rest_framework.permissions import IsAuthenticated
from rest_framework.request import Request
from rest_framework.response import Response
from rest_framework.views import APIView

from reservations.cache import cache_timeout, store_detail_key, store_items_key
from reservations.domain import Identity
from reservations.handlers.serializers import (
    ItemAvailabilitySerializer,
    ReservationCreateSerializer,
    ReservationSerializer,
    ReservationUpdateSerializer,
    StoreCreateSerializer,
    StoreDetailSerializer,
)
from reservations.services.inventory_service import InventoryService
from reservations.services.reservation_service import ReservationService
from reservations.services.store_service import StoreService
from reservations.stores.django_store import (
    DjangoItemLookup,
    DjangoMemberLookup,
    DjangoReservationStore,
    DjangoStoreRepository,
)


def inventory_service() -> InventoryService:
    return InventoryService(DjangoStoreRepository(), DjangoReservationStore())


def store_service() -> StoreService:
    return StoreService(DjangoStoreRepository(), DjangoMemberLookup(), inventory_service())


def reservation_service() -> ReservationService:
    return ReservationService(
        DjangoStoreRepository(),
        DjangoMemberLookup(),
        DjangoItemLookup(),
        DjangoReservationStore(),
    )


def identity_of(request: Request) -> Identity:
    return Identity(email=request.user.email)


class AvailabilityQuerySerializer(serializers.Serializer):
    date = serializers.DateField(required=False)


class StoreCreateView(APIView):
    """Handler for POST /api/stores"""

    permission_classes = [IsAuthenticated]

    def post(self, request: Request) -> Response:
        body = StoreCreateSerializer(data=request.data)
        body.is_valid(raise_exception=True)
        service = store_service()
        store = service.create_store(identity_of(request), body.to_draft(), body.to_items())
        return Response(
            StoreDetailSerializer(service.describe(store)).data, status=status.HTTP_201_CREATED
        )


class StoreDetailView(APIView):
    """Handler for GET /api/stores/{store_id}"""

    def get(self, request: Request, store_id: int) -> Response:
        key = store_detail_key(store_id, timezone.localdate())
        data = cache.get(key)
        if data is None:
            data = StoreDetailSerializer(store_service().get_store_detail(store_id)).data
            cache.set(key, data, cache_timeout())
        return Response(data)


class StoreItemListView(APIView):
    """Handler for GET /api/stores/{store_id}/items?date=YYYY-MM-DD"""

    def get(self, request: Request, store_id: int) -> Response:
        query = AvailabilityQuerySerializer(data=request.query_params)
        query.is_valid(raise_exception=True)
        on_date = query.validated_data.get("date") or timezone.localdate()

        key = store_items_key(store_id, on_date)
        data = cache.get(key)
        if data is None:
            availability = inventory_service().availability(store_id, on_date)
            data = ItemAvailabilitySerializer(availability, many=True).data
            cache.set(key, data, cache_timeout())
        return Response(data)


class StoreReservationCreateView(APIView):
    """Handler for POST /api/stores/{store_id}/reservations"""

    permission_classes = [IsAuthenticated]

    def post(self, request: Request, store_id: int) -> Response:
        body = ReservationCreateSerializer(data=request.data)
        body.is_valid(raise_exception=True)
        reservation = reservation_service().create(
            identity_of(request), store_id, body.to_draft(), body.to_lines()
        )
        return Response(ReservationSerializer(reservation).data, status=status.HTTP_201_CREATED)


class ReservationListView(APIView):
    """Handler for GET /api/reservations"""

    permission_classes = [IsAuthenticated]

    def get(self, request: Request) -> Response:
        reservations = reservation_service().list_for_member(identity_of(request))
        return Response(ReservationSerializer(reservations, many=True).data)


class ReservationDetailView(APIView):
    """Handler for GET, PATCH and DELETE /api/reservations/{reservation_id}"""

    permission_classes = [IsAuthenticated]

    def get(self, request: Request, reservation_id: int) -> Response:
        reservation = reservation_service().get(reservation_id)
        return Response(ReservationSerializer(reservation).data)

    def patch(self, request: Request, reservation_id: int) -> Response:
        body = ReservationUpdateSerializer(data=request.data)
        body.is_valid(raise_exception=True)
        reservation = reservation_service().update(
            identity_of(request), reservation_id, body.to_patch()
        )
        return Response(ReservationSerializer(reservation).data)

    def delete(self, request: Request, reservation_id: int) -> Response:
        reservation_service().cancel(identity_of(request), reservation_id)
        return Response(status=status.HTTP_204_NO_CONTENT)
