"""Store interfaces (repository pattern).

Stores must be swappable and return domain models.
"""

from abc import ABC, abstractmethod
from collections.abc import Sequence
from contextlib import AbstractContextManager
from datetime import date

from reservations.domain import (
    Item,
    ItemDraft,
    ItemId,
    Member,
    MemberId,
    Reservation,
    ReservationId,
    Store,
    StoreDraft,
    StoreId,
)


class StoreLookup(ABC):
    """Read access to stores."""

    @abstractmethod
    def find_by_id(self, store_id: StoreId) -> Store | None:
        """Return a store with its items (in display order) and images, or None."""
        ...


class StoreRepository(StoreLookup):
    """Read and write access to stores."""

    @abstractmethod
    def save(self, owner_id: MemberId, draft: StoreDraft, items: Sequence[ItemDraft]) -> Store:
        """Insert a store with its images and items, all linked to the new store.

        Returns the store as persisted, with identifiers assigned.
        """
        ...


class MemberLookup(ABC):
    """Read access to members."""

    @abstractmethod
    def find_by_email(self, email: str) -> Member | None:
        """Return the member registered under email, or None."""
        ...

    @abstractmethod
    def find_by_id(self, member_id: MemberId) -> Member | None:
        """Return a member by ID, or None if not found."""
        ...


class ItemLookup(ABC):
    """Read access to items."""

    @abstractmethod
    def find_by_id(self, item_id: ItemId) -> Item | None:
        """Return an item by ID regardless of status, or None."""
        ...


class ReservationStore(ABC):
    """Interface for reservation persistence operations."""

    @abstractmethod
    def save(self, reservation: Reservation) -> Reservation:
        """Insert or update a reservation and its lines.

        Returns the reservation as persisted, with identifiers assigned.
        """
        ...

    @abstractmethod
    def find_by_id(self, reservation_id: ReservationId) -> Reservation | None:
        """Return a reservation by ID, or None if not found."""
        ...

    @abstractmethod
    def delete(self, reservation: Reservation) -> None:
        """Remove a reservation and its lines."""
        ...

    @abstractmethod
    def find_by_date_and_store(self, on_date: date, store_id: StoreId) -> list[Reservation]:
        """Return every reservation for the store on the date, of any status."""
        ...

    @abstractmethod
    def find_by_member(self, member_id: MemberId) -> list[Reservation]:
        """Return a member's reservations, latest reservation date first."""
        ...

    @abstractmethod
    def atomic(self) -> AbstractContextManager[None]:
        """Open a transaction; everything written inside commits or rolls back together."""
        ...

    @abstractmethod
    def lock_inventory(self, store_id: StoreId) -> None:
        """Block other writers of the store's inventory until the transaction ends.

        Must be called inside ``atomic()``.
        """
        ...
