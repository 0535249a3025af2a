"""Reservation service - all reservation business logic lives here.

Services:
- Depend only on interfaces (stores)
- Validate domain invariants
- Perform orchestration and error mapping
- Return domain models or domain errors

Every operation that acts for a caller takes an explicit Identity.
"""

from collections.abc import Callable, Sequence
from dataclasses import replace
from datetime import date

import structlog
from django.utils import timezone

from reservations.domain import (
    Identity,
    Item,
    ItemId,
    Member,
    Money,
    Reservation,
    ReservationDraft,
    ReservationId,
    ReservationItem,
    ReservationPatch,
    ReservationStatus,
    Store,
)
from reservations.domain.errors import (
    EmptyReservationError,
    InvalidIdError,
    ItemNotFoundError,
    MemberNotFoundError,
    PastReservationDateError,
    ReservationNotFoundError,
    ReservationOwnerMismatchError,
    StoreNotFoundError,
)
from reservations.domain.inventory import (
    aggregate_reserved_tickets,
    validate_ticket_count,
    validate_total_price,
)
from reservations.services.inventory_service import parse_store_id
from reservations.stores.interfaces import ItemLookup, MemberLookup, ReservationStore, StoreLookup

logger = structlog.get_logger(__name__)

_PATCHABLE_FIELDS = ("name", "phone", "email")


def parse_reservation_id(reservation_id: str | int) -> ReservationId:
    try:
        return ReservationId.from_string(reservation_id)
    except (TypeError, ValueError) as exc:
        raise InvalidIdError("reservation") from exc


class ReservationService:
    """Service for the reservation lifecycle: create, update, cancel, get."""

    def __init__(
        self,
        stores: StoreLookup,
        members: MemberLookup,
        items: ItemLookup,
        reservations: ReservationStore,
        today: Callable[[], date] = timezone.localdate,
    ) -> None:
        self._stores = stores
        self._members = members
        self._items = items
        self._reservations = reservations
        self._today = today

    def create(
        self,
        identity: Identity,
        store_id: str | int,
        draft: ReservationDraft,
        lines: Sequence[ReservationItem],
    ) -> Reservation:
        """Book tickets at a store for the caller.

        Lines are reconciled against the catalog while the store's inventory
        is locked: each item must be an active item of the store, ticket
        counts must fit the remaining stock for the reservation date, and the
        declared total must equal the sum of ticket_count * price. Nothing is
        persisted unless every check passes.

        Raises:
            InvalidIdError: If store_id is malformed.
            StoreNotFoundError: If the store does not exist.
            PastReservationDateError: If the date is before today.
            MemberNotFoundError: If the caller is not a registered member.
            EmptyReservationError: If no lines are given.
            ItemNotFoundError: If a line references an unknown, deleted or foreign item.
            TicketCountExceededError: If a line asks for more than remains.
            TotalPriceMismatchError: If the declared total is wrong.
        """
        parsed = parse_store_id(store_id)
        store = self._stores.find_by_id(parsed)
        if store is None:
            raise StoreNotFoundError(parsed.value)

        self._validate_reservation_date(draft.reservation_date)
        member = self._resolve_member(identity)
        if not lines:
            raise EmptyReservationError()

        with self._reservations.atomic():
            self._reservations.lock_inventory(store.id)
            reconciled = self._reconcile_lines(store, draft, lines)
            reservation = self._reservations.save(
                Reservation(
                    id=None,
                    member_id=member.id,
                    store_id=store.id,
                    reservation_date=draft.reservation_date,
                    name=draft.name,
                    phone=draft.phone,
                    email=draft.email,
                    total_price=Money(draft.total_price),
                    items=tuple(reconciled),
                )
            )

        logger.info(
            "Reservation created",
            reservation_id=reservation.id.value,
            store_id=store.id.value,
            member_id=member.id.value,
            reservation_date=draft.reservation_date.isoformat(),
            lines=len(reservation.items),
            total_price=reservation.total_price.amount,
        )
        return reservation

    def update(
        self, identity: Identity, reservation_id: str | int, patch: ReservationPatch
    ) -> Reservation:
        """Change the contact fields of the caller's reservation.

        Only fields given a non-empty value in the patch are changed.

        Raises:
            InvalidIdError: If reservation_id is malformed.
            ReservationNotFoundError: If the reservation does not exist.
            MemberNotFoundError: If the caller is not a registered member.
            ReservationOwnerMismatchError: If the caller does not own it.
        """
        with self._reservations.atomic():
            reservation = self._find_owned(identity, reservation_id)
            changes = {
                field: getattr(patch, field)
                for field in _PATCHABLE_FIELDS
                if getattr(patch, field)
            }
            if not changes:
                return reservation
            updated = self._reservations.save(replace(reservation, **changes))

        logger.info(
            "Reservation updated",
            reservation_id=updated.id.value,
            fields=sorted(changes),
        )
        return updated

    def cancel(self, identity: Identity, reservation_id: str | int) -> Reservation:
        """Cancel the caller's reservation.

        The record is kept with a cancelled status so it stays auditable and
        stops counting against availability. Cancelling twice is a no-op.

        Raises:
            InvalidIdError: If reservation_id is malformed.
            ReservationNotFoundError: If the reservation does not exist.
            MemberNotFoundError: If the caller is not a registered member.
            ReservationOwnerMismatchError: If the caller does not own it.
        """
        with self._reservations.atomic():
            reservation = self._find_owned(identity, reservation_id)
            if reservation.is_cancelled:
                return reservation
            # TODO: issue the refund once payment processing exists.
            cancelled = self._reservations.save(
                replace(reservation, status=ReservationStatus.CANCELLED)
            )

        logger.info(
            "Reservation cancelled",
            reservation_id=cancelled.id.value,
            store_id=cancelled.store_id.value,
            reservation_date=cancelled.reservation_date.isoformat(),
        )
        return cancelled

    def get(self, reservation_id: str | int) -> Reservation:
        """Return a reservation by ID.

        Raises:
            InvalidIdError: If reservation_id is malformed.
            ReservationNotFoundError: If the reservation does not exist.
        """
        parsed = parse_reservation_id(reservation_id)
        reservation = self._reservations.find_by_id(parsed)
        if reservation is None:
            raise ReservationNotFoundError(parsed.value)
        return reservation

    def list_for_member(self, identity: Identity) -> list[Reservation]:
        """Return the caller's reservations, latest date first."""
        member = self._resolve_member(identity)
        return self._reservations.find_by_member(member.id)

    def _validate_reservation_date(self, reservation_date: date) -> None:
        if reservation_date < self._today():
            logger.info("Rejected past reservation date", reservation_date=reservation_date.isoformat())
            raise PastReservationDateError(reservation_date)

    def _resolve_member(self, identity: Identity) -> Member:
        member = self._members.find_by_email(identity.email)
        if member is None:
            raise MemberNotFoundError(identity.email)
        return member

    def _find_owned(self, identity: Identity, reservation_id: str | int) -> Reservation:
        reservation = self.get(reservation_id)
        member = self._resolve_member(identity)
        if member.id != reservation.member_id:
            logger.warning(
                "Reservation owner mismatch",
                reservation_id=reservation.id.value,
                member_id=member.id.value,
            )
            raise ReservationOwnerMismatchError(reservation.id.value)
        return reservation

    def _reconcile_lines(
        self,
        store: Store,
        draft: ReservationDraft,
        lines: Sequence[ReservationItem],
    ) -> list[ReservationItem]:
        """Resolve each line's item, check stock and price, capture unit prices.

        Must run inside the inventory lock so the reserved totals it reads
        cannot change before the reservation is saved.
        """
        reserved = aggregate_reserved_tickets(
            self._reservations.find_by_date_and_store(draft.reservation_date, store.id)
        )
        requested: dict[ItemId, int] = {}
        resolved: list[tuple[ReservationItem, Item]] = []
        for line in lines:
            item = self._items.find_by_id(line.item_id)
            if item is None or item.store_id != store.id or item.is_deleted:
                raise ItemNotFoundError(line.item_id.value)

            validate_ticket_count(
                item,
                line.ticket_count.value,
                reserved.get(item.id, 0) + requested.get(item.id, 0),
            )
            requested[item.id] = requested.get(item.id, 0) + line.ticket_count.value
            resolved.append((replace(line, unit_price=item.price), item))

        validate_total_price(resolved, draft.total_price)
        return [line for line, _ in resolved]
