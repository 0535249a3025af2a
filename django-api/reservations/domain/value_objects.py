"""Domain primitives that enforce validity at creation time."""

from dataclasses import dataclass
from typing import Self

MAX_ID = 2**63 - 1


@dataclass(frozen=True)
class _IntegerId:
    value: int

    def __post_init__(self) -> None:
        if isinstance(self.value, bool) or not isinstance(self.value, int):
            raise ValueError("Identifier must be an integer")
        if not 0 < self.value <= MAX_ID:
            raise ValueError("Identifier out of range")

    @classmethod
    def from_string(cls, value: str | int) -> Self:
        if isinstance(value, str):
            value = int(value.strip())
        return cls(value=value)

    def __str__(self) -> str:
        return str(self.value)


@dataclass(frozen=True)
class StoreId(_IntegerId):
    """Unique identifier for a Store."""


@dataclass(frozen=True)
class ItemId(_IntegerId):
    """Unique identifier for an Item."""


@dataclass(frozen=True)
class ReservationId(_IntegerId):
    """Unique identifier for a Reservation."""


@dataclass(frozen=True)
class MemberId(_IntegerId):
    """Unique identifier for a Member."""


@dataclass(frozen=True)
class Money:
    """Whole-unit price. Ticket prices carry no minor units."""

    amount: int

    def __post_init__(self) -> None:
        if self.amount < 0:
            raise ValueError("Money amount cannot be negative")

    def __mul__(self, count: int) -> "Money":
        return Money(self.amount * count)

    def __add__(self, other: "Money") -> "Money":
        return Money(self.amount + other.amount)

    def __str__(self) -> str:
        return str(self.amount)


@dataclass(frozen=True)
class Capacity:
    """Non-negative integer representing capacity."""

    value: int

    def __post_init__(self) -> None:
        if self.value < 0:
            raise ValueError("Capacity cannot be negative")


@dataclass(frozen=True)
class TicketCount:
    """Number of tickets on a reservation line; always at least one."""

    value: int

    def __post_init__(self) -> None:
        if self.value < 1:
            raise ValueError("Ticket count must be positive")
