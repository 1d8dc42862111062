"""Abstract seat reservation provider."""

from __future__ import annotations

from abc import ABC, abstractmethod


class SeatReservationGateway(ABC):

    @abstractmethod
    def reserve_seats(self, account_id: int, seat_count: int) -> None:
        """Reserve *seat_count* seats for the account. Trusted to always succeed."""
