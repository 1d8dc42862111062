"""Application service: Purchase Tickets use case.

Runs the domain checks in a fixed order and only then talks to the
payment and seat reservation providers. Nothing is charged or reserved
unless every check has passed.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable

from cinema.application.dto import PurchaseReceiptDTO, TicketLineDTO
from cinema.domain.exceptions import InvalidPurchaseError, TicketValidationError
from cinema.domain.gateway.payment_gateway import PaymentGateway
from cinema.domain.gateway.seat_reservation_gateway import SeatReservationGateway
from cinema.domain.model.policy import DEFAULT_POLICY, PurchasePolicy
from cinema.domain.model.ticket import PurchaseOutcome, TicketTotals, TicketTypeRequest
from cinema.domain.service.account_validator import AccountValidator
from cinema.domain.service.ticket_aggregator import TicketAggregator
from cinema.domain.service.ticket_allocation_service import TicketAllocationService
from cinema.domain.service.ticket_request_validator import TicketRequestValidator

logger = logging.getLogger(__name__)


class PurchaseTicketsHandler:

    def __init__(
        self,
        payment_gateway: PaymentGateway,
        seat_reservation_gateway: SeatReservationGateway,
        policy: PurchasePolicy = DEFAULT_POLICY,
    ) -> None:
        self._payment_gateway = payment_gateway
        self._seat_reservation_gateway = seat_reservation_gateway
        self._account_validator = AccountValidator()
        self._request_validator = TicketRequestValidator(policy)
        self._aggregator = TicketAggregator(policy)
        self._allocation = TicketAllocationService(policy)

    def handle(
        self,
        account_id: int | None,
        requests: Iterable[TicketTypeRequest] | None,
    ) -> PurchaseReceiptDTO:
        """Purchase tickets for an account.

        Steps:
        1. Validate the account id.
        2. Validate the request list (present, not too long).
        3. Aggregate entries into per-type totals (checks each entry).
        4. Apply the allocation rules, giving seats and cost.
        5. Take payment, then reserve seats.

        Any rule broken in steps 1-4 is raised as InvalidPurchaseError.
        """
        if requests is not None:
            requests = list(requests)

        try:
            self._account_validator.validate(account_id)
            self._request_validator.validate(requests)
            totals = self._aggregator.aggregate(requests)
            outcome = self._allocation.allocate(totals)
        except TicketValidationError as exc:
            logger.warning(
                "Purchase rejected for account %s: %s (%s)",
                account_id, exc.message, exc.kind.value,
            )
            raise InvalidPurchaseError(exc) from exc

        self._payment_gateway.make_payment(account_id, outcome.total_cost)
        self._seat_reservation_gateway.reserve_seats(account_id, outcome.total_seats)

        logger.info(
            "Total cost: £%d | Number of seats reserved: %d | Enjoy your movie",
            outcome.total_cost, outcome.total_seats,
        )
        return self._to_dto(account_id, totals, outcome)

    # --- Mapping --------------------------------------------------------------

    @staticmethod
    def _to_dto(
        account_id: int, totals: TicketTotals, outcome: PurchaseOutcome
    ) -> PurchaseReceiptDTO:
        return PurchaseReceiptDTO(
            account_id=account_id,
            total_seats=outcome.total_seats,
            total_cost=outcome.total_cost,
            tickets=[
                TicketLineDTO(
                    ticket_type=ticket_type.value,
                    quantity=count,
                    unit_price=ticket_type.price,
                    line_total=ticket_type.price * count,
                )
                for ticket_type, count in totals.counts.items()
                if count > 0
            ],
        )
