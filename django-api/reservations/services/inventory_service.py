"""Inventory service - reserved totals and remaining stock per item."""

from collections.abc import Callable
from datetime import date

import structlog
from django.utils import timezone

from reservations.domain import ItemAvailability, ItemId, Store, StoreId
from reservations.domain.errors import InvalidIdError, StoreNotFoundError
from reservations.domain.inventory import aggregate_reserved_tickets, compute_availability
from reservations.stores.interfaces import ReservationStore, StoreLookup

logger = structlog.get_logger(__name__)


def parse_store_id(store_id: str | int) -> StoreId:
    try:
        return StoreId.from_string(store_id)
    except (TypeError, ValueError) as exc:
        raise InvalidIdError("store") from exc


class InventoryService:
    """Service for ticket inventory queries."""

    def __init__(
        self,
        stores: StoreLookup,
        reservations: ReservationStore,
        today: Callable[[], date] = timezone.localdate,
    ) -> None:
        self._stores = stores
        self._reservations = reservations
        self._today = today

    def _get_store(self, store_id: str | int) -> Store:
        parsed = parse_store_id(store_id)
        store = self._stores.find_by_id(parsed)
        if store is None:
            raise StoreNotFoundError(parsed.value)
        return store

    def reserved_for(self, store: Store, on_date: date) -> dict[ItemId, int]:
        return aggregate_reserved_tickets(
            self._reservations.find_by_date_and_store(on_date, store.id)
        )

    def aggregate(self, store_id: str | int, on_date: date) -> dict[ItemId, int]:
        """Return reserved ticket totals per item for the store on a date.

        Raises:
            InvalidIdError: If store_id is malformed.
            StoreNotFoundError: If the store does not exist.
        """
        return self.reserved_for(self._get_store(store_id), on_date)

    def availability_for(self, store: Store, on_date: date | None = None) -> list[ItemAvailability]:
        on_date = on_date or self._today()
        availability = compute_availability(store.items, self.reserved_for(store, on_date))
        logger.debug(
            "Computed availability",
            store_id=store.id.value,
            date=on_date.isoformat(),
            items=len(availability),
        )
        return availability

    def availability(
        self, store_id: str | int, on_date: date | None = None
    ) -> list[ItemAvailability]:
        """Return remaining tickets per active item, defaulting to today.

        Raises:
            InvalidIdError: If store_id is malformed.
            StoreNotFoundError: If the store does not exist.
        """
        return self.availability_for(self._get_store(store_id), on_date)
