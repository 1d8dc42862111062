"""Application service: Show Prices use case (query)."""

from __future__ import annotations

from cinema.application.dto import TicketPriceDTO
from cinema.domain.model.ticket import TicketType


class ShowPricesHandler:

    def handle(self) -> list[TicketPriceDTO]:
        return [
            TicketPriceDTO(
                ticket_type=ticket_type.value,
                price=ticket_type.price,
                occupies_seat=ticket_type.occupies_seat,
            )
            for ticket_type in TicketType
        ]
