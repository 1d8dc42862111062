"""Data Transfer Objects returned by the application handlers.

Plain values only, so the CLI never touches ticket types or totals directly.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class TicketLineDTO:
    """Output: tickets of one type in a completed purchase."""

    ticket_type: str
    quantity: int
    unit_price: int
    line_total: int


@dataclass(frozen=True)
class PurchaseReceiptDTO:
    """Output: what was charged and reserved for a purchase."""

    account_id: int
    total_seats: int
    total_cost: int
    tickets: list[TicketLineDTO]


@dataclass(frozen=True)
class TicketPriceDTO:
    """Output: one row of the price list."""

    ticket_type: str
    price: int
    occupies_seat: bool
