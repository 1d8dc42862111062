"""Stand-in for the external seat reservation provider."""

from __future__ import annotations

import logging

from cinema.domain.gateway.seat_reservation_gateway import SeatReservationGateway

logger = logging.getLogger(__name__)


class LoggingSeatReservationGateway(SeatReservationGateway):

    def reserve_seats(self, account_id: int, seat_count: int) -> None:
        logger.info("%d seat(s) reserved for account %d", seat_count, account_id)
