"""Domain service: Ticket aggregation.

Reduces a list of ticket requests into one total per ticket type. Each
entry is checked on the way through and the first bad entry (in list
order) rejects the whole purchase.
"""

from __future__ import annotations

from collections.abc import Iterable

from cinema.domain.exceptions import ErrorKind, TicketValidationError
from cinema.domain.model.policy import DEFAULT_POLICY, PurchasePolicy
from cinema.domain.model.ticket import TicketTotals, TicketType, TicketTypeRequest


class TicketAggregator:

    def __init__(self, policy: PurchasePolicy = DEFAULT_POLICY) -> None:
        self._policy = policy

    def aggregate(self, requests: Iterable[TicketTypeRequest]) -> TicketTotals:
        """Sum the requested tickets per type.

        Types that were not requested are present in the result with 0.
        """
        counts: dict[TicketType, int] = {t: 0 for t in TicketType}

        for request in requests:
            self._check_entry(request)
            counts[request.ticket_type] += request.number_of_tickets  # type: ignore[index]

        return TicketTotals(counts)

    # --- Internal helpers -----------------------------------------------------

    def _check_entry(self, request: TicketTypeRequest) -> None:
        if not isinstance(request.ticket_type, TicketType):
            raise TicketValidationError(
                ErrorKind.UNKNOWN_TICKET_TYPE,
                "There was an error with a ticket type",
            )

        # A single entry above the seat cap could never pass the
        # allocation rules, so it is rejected here already.
        qty = request.number_of_tickets
        if (
            isinstance(qty, bool)
            or not isinstance(qty, int)
            or qty <= 0
            or qty > self._policy.max_tickets_per_request
        ):
            raise TicketValidationError(
                ErrorKind.INVALID_TICKET_COUNT,
                "There was an error with a requested number of tickets",
            )
