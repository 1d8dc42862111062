"""Ticket types, prices and the request/total value objects.

Prices are whole currency units held as ints, so cost arithmetic never
rounds.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from enum import Enum
from types import MappingProxyType


class TicketType(Enum):
    ADULT = "ADULT"
    CHILD = "CHILD"
    INFANT = "INFANT"

    @property
    def price(self) -> int:
        return TICKET_PRICES[self]

    @property
    def occupies_seat(self) -> bool:
        """Infants sit on an adult's lap."""
        return self is not TicketType.INFANT


TICKET_PRICES: Mapping[TicketType, int] = MappingProxyType({
    TicketType.ADULT: 20,
    TicketType.CHILD: 10,
    TicketType.INFANT: 0,
})


@dataclass(frozen=True)
class TicketTypeRequest:
    """One line of a purchase: a ticket type and how many of it.

    Deliberately unvalidated; the aggregator rejects bad entries so that
    the rejection surfaces as a purchase error rather than at construction.
    """

    ticket_type: TicketType | None
    number_of_tickets: int


def tickets_for_type(counts: Mapping[TicketType, int], ticket_type: TicketType) -> int:
    """Number of tickets for *ticket_type*, or 0 when it is not listed."""
    return counts.get(ticket_type) or 0


@dataclass(frozen=True)
class TicketTotals:
    """Total tickets requested per type, with every known type present."""

    counts: Mapping[TicketType, int] = field(default_factory=dict)

    def __post_init__(self) -> None:
        for ticket_type, count in self.counts.items():
            if not isinstance(ticket_type, TicketType):
                raise ValueError(f"Unknown ticket type: {ticket_type!r}")
            if isinstance(count, bool) or not isinstance(count, int) or count < 0:
                raise ValueError(
                    f"Ticket count for {ticket_type.value} must be a "
                    f"non-negative integer, got {count!r}"
                )
        filled = {t: tickets_for_type(self.counts, t) for t in TicketType}
        object.__setattr__(self, "counts", MappingProxyType(filled))

    def __hash__(self) -> int:
        return hash(tuple(self.counts.items()))

    def __getitem__(self, ticket_type: TicketType) -> int:
        return self.counts[ticket_type]

    @property
    def adults(self) -> int:
        return self.counts[TicketType.ADULT]

    @property
    def children(self) -> int:
        return self.counts[TicketType.CHILD]

    @property
    def infants(self) -> int:
        return self.counts[TicketType.INFANT]

    def as_dict(self) -> dict[TicketType, int]:
        return dict(self.counts)


@dataclass(frozen=True)
class PurchaseOutcome:
    """Seats to reserve and amount to charge for a validated purchase."""

    total_seats: int
    total_cost: int
