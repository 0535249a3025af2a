"""Serializers for parsing requests and rendering domain models.

Input serializers check request format only; business rules live in the
services.
"""

from rest_framework import serializers

from reservations.domain import (
    Capacity,
    ItemDraft,
    ItemId,
    Money,
    ReservationDraft,
    ReservationItem,
    ReservationPatch,
    StoreDraft,
    StoreImage,
    TicketCount,
)
from reservations.domain.value_objects import MAX_ID


class ItemAvailabilitySerializer(serializers.Serializer):
    """Serializer for ItemAvailability domain model."""

    item_id = serializers.IntegerField(source="item_id.value")
    name = serializers.CharField()
    capacity = serializers.IntegerField()
    price = serializers.IntegerField()
    remaining = serializers.IntegerField()


class StoreDetailSerializer(serializers.Serializer):
    """Serializer for StoreDetail domain model."""

    store_id = serializers.IntegerField(source="store.id.value")
    name = serializers.CharField(source="store.name")
    category = serializers.CharField(source="store.category")
    body = serializers.CharField(source="store.body")
    address = serializers.CharField(source="store.address")
    contact = serializers.CharField(source="store.contact")
    latitude = serializers.FloatField(source="store.latitude")
    longitude = serializers.FloatField(source="store.longitude")
    created_at = serializers.DateTimeField(source="store.created_at")
    items = ItemAvailabilitySerializer(many=True)
    store_images = serializers.ListField(source="image_links", child=serializers.CharField())
    profile_image = serializers.CharField(source="profile_image_url", allow_null=True)


class ReservationItemSerializer(serializers.Serializer):
    """Serializer for ReservationItem domain model."""

    item_id = serializers.IntegerField(source="item_id.value")
    ticket_count = serializers.IntegerField(source="ticket_count.value")
    unit_price = serializers.IntegerField(source="unit_price.amount", allow_null=True)


class ReservationSerializer(serializers.Serializer):
    """Serializer for Reservation domain model."""

    reservation_id = serializers.IntegerField(source="id.value")
    store_id = serializers.IntegerField(source="store_id.value")
    member_id = serializers.IntegerField(source="member_id.value")
    reservation_date = serializers.DateField()
    name = serializers.CharField()
    phone = serializers.CharField()
    email = serializers.EmailField()
    status = serializers.CharField(source="status.value")
    total_price = serializers.IntegerField(source="total_price.amount")
    items = ReservationItemSerializer(many=True)
    created_at = serializers.DateTimeField(allow_null=True)


class ReservationLineInputSerializer(serializers.Serializer):
    item_id = serializers.IntegerField(min_value=1, max_value=MAX_ID)
    ticket_count = serializers.IntegerField(min_value=1)


class ReservationCreateSerializer(serializers.Serializer):
    """Request body for POST /api/stores/{store_id}/reservations."""

    reservation_date = serializers.DateField()
    name = serializers.CharField(max_length=100)
    phone = serializers.CharField(max_length=30)
    email = serializers.EmailField()
    total_price = serializers.IntegerField(min_value=0)
    items = ReservationLineInputSerializer(many=True, allow_empty=False)

    def to_draft(self) -> ReservationDraft:
        data = self.validated_data
        return ReservationDraft(
            reservation_date=data["reservation_date"],
            name=data["name"],
            phone=data["phone"],
            email=data["email"],
            total_price=data["total_price"],
        )

    def to_lines(self) -> list[ReservationItem]:
        return [
            ReservationItem(
                item_id=ItemId(line["item_id"]),
                ticket_count=TicketCount(line["ticket_count"]),
            )
            for line in self.validated_data["items"]
        ]


class ReservationUpdateSerializer(serializers.Serializer):
    """Request body for PATCH /api/reservations/{reservation_id}."""

    name = serializers.CharField(max_length=100, required=False, allow_blank=True)
    phone = serializers.CharField(max_length=30, required=False, allow_blank=True)
    email = serializers.EmailField(required=False, allow_blank=True)

    def to_patch(self) -> ReservationPatch:
        return ReservationPatch(**self.validated_data)


class StoreImageInputSerializer(serializers.Serializer):
    link = serializers.URLField(max_length=500)
    is_thumbnail = serializers.BooleanField(default=False)


class ItemInputSerializer(serializers.Serializer):
    name = serializers.CharField(max_length=100)
    price = serializers.IntegerField(min_value=0)
    total_ticket = serializers.IntegerField(min_value=0)


class StoreCreateSerializer(serializers.Serializer):
    """Request body for POST /api/stores."""

    name = serializers.CharField(max_length=255)
    category = serializers.CharField(max_length=100)
    body = serializers.CharField(required=False, allow_blank=True, default="")
    address = serializers.CharField(max_length=255)
    contact = serializers.CharField(max_length=50, required=False, allow_blank=True, default="")
    latitude = serializers.FloatField(min_value=-90, max_value=90)
    longitude = serializers.FloatField(min_value=-180, max_value=180)
    images = StoreImageInputSerializer(many=True, required=False, default=list)
    items = ItemInputSerializer(many=True, required=False, default=list)

    def to_draft(self) -> StoreDraft:
        data = self.validated_data
        return StoreDraft(
            name=data["name"],
            category=data["category"],
            body=data["body"],
            address=data["address"],
            contact=data["contact"],
            latitude=data["latitude"],
            longitude=data["longitude"],
            images=tuple(
                StoreImage(link=image["link"], is_thumbnail=image["is_thumbnail"])
                for image in data["images"]
            ),
        )

    def to_items(self) -> list[ItemDraft]:
        return [
            ItemDraft(
                name=item["name"],
                price=Money(item["price"]),
                total_ticket=Capacity(item["total_ticket"]),
            )
            for item in self.validated_data["items"]
        ]
