"""Ticket inventory reconciliation.

Pure functions shared by the availability listing and the reservation
lifecycle. None of them touch storage.
"""

from collections.abc import Iterable, Mapping

from reservations.domain.errors import TicketCountExceededError, TotalPriceMismatchError
from reservations.domain.models import Item, ItemAvailability, Reservation, ReservationItem
from reservations.domain.value_objects import ItemId, Money


def aggregate_reserved_tickets(reservations: Iterable[Reservation]) -> dict[ItemId, int]:
    """Sum reserved tickets per item across the given reservations.

    Cancelled reservations are skipped. Items nobody reserved are absent from
    the result, so callers read it with ``.get(item_id, 0)``.
    """
    reserved: dict[ItemId, int] = {}
    for reservation in reservations:
        if reservation.is_cancelled:
            continue
        for line in reservation.items:
            reserved[line.item_id] = reserved.get(line.item_id, 0) + line.ticket_count.value
    return reserved


def remaining_tickets(item: Item, reserved: Mapping[ItemId, int]) -> int:
    return max(item.total_ticket.value - reserved.get(item.id, 0), 0)


def compute_availability(
    items: Iterable[Item], reserved: Mapping[ItemId, int]
) -> list[ItemAvailability]:
    """Remaining stock per item, in the order given, skipping deleted items."""
    return [
        ItemAvailability(
            item_id=item.id,
            name=item.name,
            capacity=item.total_ticket.value,
            price=item.price.amount,
            remaining=remaining_tickets(item, reserved),
        )
        for item in items
        if not item.is_deleted
    ]


def validate_ticket_count(item: Item, requested: int, already_reserved: int = 0) -> None:
    """Raise TicketCountExceededError if ``requested`` exceeds the item's stock."""
    remaining = max(item.total_ticket.value - already_reserved, 0)
    if requested > remaining:
        raise TicketCountExceededError(item.id.value, requested, remaining)


def validate_total_price(lines: Iterable[tuple[ReservationItem, Item]], declared_total: int) -> None:
    """Check the declared total against ticket_count * item.price over all lines."""
    computed = sum((item.price * line.ticket_count.value for line, item in lines), Money(0))
    if computed.amount != declared_total:
        raise TotalPriceMismatchError(declared_total, computed.amount)
