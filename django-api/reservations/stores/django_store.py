"""Django ORM implementations of the store interfaces.

Each method queries the ORM and converts rows to domain models.
"""

from collections.abc import Sequence
from contextlib import AbstractContextManager
from datetime import date

from django.db import transaction

from reservations import models
from reservations.domain import (
    Capacity,
    Item,
    ItemDraft,
    ItemId,
    ItemStatus,
    Member,
    MemberId,
    Money,
    Reservation,
    ReservationId,
    ReservationItem,
    ReservationStatus,
    Store,
    StoreDraft,
    StoreId,
    StoreImage,
    TicketCount,
)
from reservations.stores.interfaces import (
    ItemLookup,
    MemberLookup,
    ReservationStore,
    StoreLookup,
    StoreRepository,
)


def _to_member(row: models.Member) -> Member:
    return Member(
        id=MemberId(row.pk),
        email=row.email,
        name=row.name,
        profile_image_url=row.profile_image_url or None,
    )


def _to_item(row: models.Item) -> Item:
    return Item(
        id=ItemId(row.pk),
        store_id=StoreId(row.store_id),
        name=row.name,
        price=Money(row.price),
        total_ticket=Capacity(row.total_ticket),
        status=ItemStatus(row.status),
    )


def _to_store(row: models.Store) -> Store:
    return Store(
        id=StoreId(row.pk),
        owner_id=MemberId(row.owner_id),
        name=row.name,
        category=row.category,
        body=row.body,
        address=row.address,
        contact=row.contact,
        latitude=row.latitude,
        longitude=row.longitude,
        created_at=row.created_at,
        items=tuple(_to_item(item) for item in row.items.all()),
        images=tuple(
            StoreImage(link=image.link, is_thumbnail=image.is_thumbnail)
            for image in row.images.all()
        ),
    )


def _to_reservation(row: models.Reservation) -> Reservation:
    return Reservation(
        id=ReservationId(row.pk),
        member_id=MemberId(row.member_id),
        store_id=StoreId(row.store_id),
        reservation_date=row.reservation_date,
        name=row.name,
        phone=row.phone,
        email=row.email,
        total_price=Money(row.total_price),
        status=ReservationStatus(row.status),
        items=tuple(
            ReservationItem(
                item_id=ItemId(line.item_id),
                ticket_count=TicketCount(line.ticket_count),
                unit_price=Money(line.unit_price) if line.unit_price is not None else None,
            )
            for line in row.lines.all()
        ),
        created_at=row.created_at,
    )


class DjangoStoreLookup(StoreLookup):
    """Store reads backed by the Django ORM."""

    def find_by_id(self, store_id: StoreId) -> Store | None:
        row = (
            models.Store.objects.prefetch_related("items", "images")
            .filter(pk=store_id.value)
            .first()
        )
        return _to_store(row) if row is not None else None


class DjangoStoreRepository(DjangoStoreLookup, StoreRepository):
    """Store reads and writes backed by the Django ORM."""

    def save(self, owner_id: MemberId, draft: StoreDraft, items: Sequence[ItemDraft]) -> Store:
        with transaction.atomic():
            row = models.Store.objects.create(
                owner_id=owner_id.value,
                name=draft.name,
                category=draft.category,
                body=draft.body,
                address=draft.address,
                contact=draft.contact,
                latitude=draft.latitude,
                longitude=draft.longitude,
            )
            for image in draft.images:
                models.StoreImage.objects.create(
                    store=row, link=image.link, is_thumbnail=image.is_thumbnail
                )
            for item in items:
                models.Item.objects.create(
                    store=row,
                    name=item.name,
                    price=item.price.amount,
                    total_ticket=item.total_ticket.value,
                )
        return self.find_by_id(StoreId(row.pk))


class DjangoMemberLookup(MemberLookup):
    """Member reads backed by the Django ORM."""

    def find_by_email(self, email: str) -> Member | None:
        row = models.Member.objects.filter(email__iexact=email).first()
        return _to_member(row) if row is not None else None

    def find_by_id(self, member_id: MemberId) -> Member | None:
        row = models.Member.objects.filter(pk=member_id.value).first()
        return _to_member(row) if row is not None else None


class DjangoItemLookup(ItemLookup):
    """Item reads backed by the Django ORM."""

    def find_by_id(self, item_id: ItemId) -> Item | None:
        row = models.Item.objects.filter(pk=item_id.value).first()
        return _to_item(row) if row is not None else None


class DjangoReservationStore(ReservationStore):
    """Relational reservation store using the Django ORM."""

    def _query(self):
        return models.Reservation.objects.prefetch_related("lines")

    def save(self, reservation: Reservation) -> Reservation:
        with transaction.atomic():
            if reservation.id is None:
                row = models.Reservation.objects.create(
                    member_id=reservation.member_id.value,
                    store_id=reservation.store_id.value,
                    reservation_date=reservation.reservation_date,
                    name=reservation.name,
                    phone=reservation.phone,
                    email=reservation.email,
                    status=reservation.status.value,
                    total_price=reservation.total_price.amount,
                )
                for line in reservation.items:
                    models.ReservationItem.objects.create(
                        reservation=row,
                        item_id=line.item_id.value,
                        ticket_count=line.ticket_count.value,
                        unit_price=line.unit_price.amount if line.unit_price is not None else None,
                    )
                pk = row.pk
            else:
                # Lines are fixed once created; only header fields change.
                row = models.Reservation.objects.get(pk=reservation.id.value)
                row.name = reservation.name
                row.phone = reservation.phone
                row.email = reservation.email
                row.status = reservation.status.value
                row.save(update_fields=["name", "phone", "email", "status"])
                pk = row.pk
        return _to_reservation(self._query().get(pk=pk))

    def find_by_id(self, reservation_id: ReservationId) -> Reservation | None:
        row = self._query().filter(pk=reservation_id.value).first()
        return _to_reservation(row) if row is not None else None

    def delete(self, reservation: Reservation) -> None:
        if reservation.id is None:
            return
        models.Reservation.objects.filter(pk=reservation.id.value).delete()

    def find_by_date_and_store(self, on_date: date, store_id: StoreId) -> list[Reservation]:
        rows = self._query().filter(reservation_date=on_date, store_id=store_id.value)
        return [_to_reservation(row) for row in rows]

    def find_by_member(self, member_id: MemberId) -> list[Reservation]:
        rows = self._query().filter(member_id=member_id.value)
        return [_to_reservation(row) for row in rows]

    def atomic(self) -> AbstractContextManager[None]:
        return transaction.atomic()

    def lock_inventory(self, store_id: StoreId) -> None:
        # Row lock on the store serialises concurrent bookings for it.
        list(
            models.Store.objects.select_for_update()
            .filter(pk=store_id.value)
            .values_list("pk", flat=True)
        )
