"""Domain error codes for the reservations module.

Every concrete error belongs to one of three kinds, which the handler layer
maps to HTTP statuses: NotFoundError, PermissionDeniedError and
InvalidArgumentError.
"""

from dataclasses import dataclass
from datetime import date
from enum import Enum


class ErrorCode(Enum):
    """Domain error codes."""

    STORE_NOT_FOUND = "STORE_NOT_FOUND"
    ITEM_NOT_FOUND = "ITEM_NOT_FOUND"
    RESERVATION_NOT_FOUND = "RESERVATION_NOT_FOUND"
    MEMBER_NOT_FOUND = "MEMBER_NOT_FOUND"
    RESERVATION_MEMBER_MISMATCH = "RESERVATION_MEMBER_MISMATCH"
    INVALID_ID = "INVALID_ID"
    PAST_RESERVATION_DATE = "PAST_RESERVATION_DATE"
    EMPTY_RESERVATION = "EMPTY_RESERVATION"
    TICKET_COUNT_EXCEEDED = "TICKET_COUNT_EXCEEDED"
    TOTAL_PRICE_MISMATCH = "TOTAL_PRICE_MISMATCH"


@dataclass(frozen=True)
class DomainError(Exception):
    """Base domain error with code and user-safe message."""

    code: ErrorCode
    message: str

    def __str__(self) -> str:
        return f"{self.code.value}: {self.message}"


class NotFoundError(DomainError):
    """A referenced store, item, reservation or member does not exist."""


class PermissionDeniedError(DomainError):
    """The caller may not act on the referenced resource."""


class InvalidArgumentError(DomainError):
    """The request breaks a business rule."""


class StoreNotFoundError(NotFoundError):
    """Raised when a store is not found."""

    def __init__(self, store_id: int) -> None:
        super().__init__(code=ErrorCode.STORE_NOT_FOUND, message="Store not found")
        self.store_id = store_id


class ItemNotFoundError(NotFoundError):
    """Raised when an item is missing, deleted, or sold by another store."""

    def __init__(self, item_id: int) -> None:
        super().__init__(code=ErrorCode.ITEM_NOT_FOUND, message="Item not found")
        self.item_id = item_id


class ReservationNotFoundError(NotFoundError):
    """Raised when a reservation is not found."""

    def __init__(self, reservation_id: int) -> None:
        super().__init__(
            code=ErrorCode.RESERVATION_NOT_FOUND,
            message="Reservation not found",
        )
        self.reservation_id = reservation_id


class MemberNotFoundError(NotFoundError):
    """Raised when no member is registered under the caller's email."""

    def __init__(self, email: str) -> None:
        super().__init__(code=ErrorCode.MEMBER_NOT_FOUND, message="Member not found")
        self.email = email


class ReservationOwnerMismatchError(PermissionDeniedError):
    """Raised when someone other than the owner modifies a reservation."""

    def __init__(self, reservation_id: int) -> None:
        super().__init__(
            code=ErrorCode.RESERVATION_MEMBER_MISMATCH,
            message="Reservation belongs to another member",
        )
        self.reservation_id = reservation_id


class InvalidIdError(InvalidArgumentError):
    """Raised when an identifier is malformed."""

    def __init__(self, kind: str) -> None:
        super().__init__(code=ErrorCode.INVALID_ID, message=f"Invalid {kind} ID format")


class PastReservationDateError(InvalidArgumentError):
    """Raised when a reservation date precedes today."""

    def __init__(self, reservation_date: date) -> None:
        super().__init__(
            code=ErrorCode.PAST_RESERVATION_DATE,
            message="Reservation date cannot be in the past",
        )
        self.reservation_date = reservation_date


class EmptyReservationError(InvalidArgumentError):
    """Raised when a reservation has no lines."""

    def __init__(self) -> None:
        super().__init__(
            code=ErrorCode.EMPTY_RESERVATION,
            message="Reservation must contain at least one item",
        )


class TicketCountExceededError(InvalidArgumentError):
    """Raised when a line asks for more tickets than remain."""

    def __init__(self, item_id: int, requested: int, remaining: int) -> None:
        super().__init__(
            code=ErrorCode.TICKET_COUNT_EXCEEDED,
            message="Not enough tickets remaining",
        )
        self.item_id = item_id
        self.requested = requested
        self.remaining = remaining


class TotalPriceMismatchError(InvalidArgumentError):
    """Raised when the declared total differs from the sum of the lines."""

    def __init__(self, declared: int, computed: int) -> None:
        super().__init__(
            code=ErrorCode.TOTAL_PRICE_MISMATCH,
            message="Total price does not match the ticket prices",
        )
        self.declared = declared
        self.computed = computed
