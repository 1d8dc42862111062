"""Domain service: shape checks on the raw list of ticket requests.

Only the list itself is checked here. Individual entries are checked by
the aggregator, which visits each one anyway.
"""

from __future__ import annotations

from collections.abc import Sequence

from cinema.domain.exceptions import ErrorKind, TicketValidationError
from cinema.domain.model.policy import DEFAULT_POLICY, PurchasePolicy
from cinema.domain.model.ticket import TicketTypeRequest


class TicketRequestValidator:

    def __init__(self, policy: PurchasePolicy = DEFAULT_POLICY) -> None:
        self._policy = policy

    def validate(self, requests: Sequence[TicketTypeRequest] | None) -> None:
        if not requests:
            raise TicketValidationError(
                ErrorKind.REQUEST_SET_EMPTY,
                "The ticket type requests supplied are empty",
            )

        limit = self._policy.max_ticket_requests
        if len(requests) > limit:
            raise TicketValidationError(
                ErrorKind.TOO_MANY_REQUEST_ENTRIES,
                f"The maximum of {limit} ticket type requests allowed is exceeded",
            )
