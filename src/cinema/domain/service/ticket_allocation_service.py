"""Domain service: Ticket allocation and pricing.

Applies the cross-type rules to aggregated totals and works out how many
seats to reserve and how much to charge:

  * at least one ADULT ticket is required for any purchase;
  * there may be no more INFANT tickets than ADULT tickets, since every
    infant sits on an adult's lap;
  * only ADULT and CHILD tickets occupy a seat, and at most
    ``policy.max_tickets`` seats may be reserved at once.
"""

from __future__ import annotations

from cinema.domain.exceptions import (
    ErrorKind,
    SeatLimitExceededError,
    TicketValidationError,
)
from cinema.domain.model.policy import DEFAULT_POLICY, PurchasePolicy
from cinema.domain.model.ticket import PurchaseOutcome, TicketTotals, TicketType


class TicketAllocationService:

    def __init__(self, policy: PurchasePolicy = DEFAULT_POLICY) -> None:
        self._policy = policy

    def count_seats(self, totals: TicketTotals) -> int:
        """Validate the totals and return the number of seats to reserve."""
        adults = totals.adults

        if adults == 0:
            raise TicketValidationError(
                ErrorKind.NO_QUALIFYING_TICKET,
                "There were 0 ADULT tickets included in the request",
            )

        if totals.infants > adults:
            raise TicketValidationError(
                ErrorKind.TOO_MANY_DEPENDENTS,
                "There were more INFANT tickets requested than ADULT",
            )

        total_seats = sum(
            count for ticket_type, count in totals.counts.items()
            if ticket_type.occupies_seat
        )

        if total_seats > self._policy.max_tickets:
            raise SeatLimitExceededError(self._policy.max_tickets, total_seats)

        return total_seats

    @staticmethod
    def calculate_cost(totals: TicketTotals) -> int:
        """Price every type, infants included.

        Infants are free today, but keeping them in the sum means a price
        change needs no code change.
        """
        return sum(ticket_type.price * totals[ticket_type] for ticket_type in TicketType)

    def allocate(self, totals: TicketTotals) -> PurchaseOutcome:
        total_seats = self.count_seats(totals)
        return PurchaseOutcome(
            total_seats=total_seats,
            total_cost=self.calculate_cost(totals),
        )
