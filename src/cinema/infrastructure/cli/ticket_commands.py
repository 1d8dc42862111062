"""CLI commands for buying tickets."""

from __future__ import annotations

import click

from cinema.application.dto import PurchaseReceiptDTO
from cinema.application.show_prices import ShowPricesHandler
from cinema.domain.exceptions import DomainException
from cinema.domain.model.ticket import TicketType, TicketTypeRequest
from cinema.infrastructure.bootstrap import purchase_tickets_handler


def _parse_tickets(raw: str) -> list[TicketTypeRequest]:
    """Parse 'ADULT:2,CHILD:1' into TicketTypeRequest list.

    Type names are case-insensitive. An unknown name is passed on without
    a type so the purchase itself rejects it.
    """
    requests: list[TicketTypeRequest] = []
    for pair in raw.split(","):
        pair = pair.strip()
        if ":" not in pair:
            raise click.BadParameter(
                f"Invalid ticket format '{pair}'. Expected 'Type:Quantity'."
            )
        name, qty_str = pair.rsplit(":", 1)
        try:
            qty = int(qty_str)
        except ValueError:
            raise click.BadParameter(
                f"Invalid quantity '{qty_str}' for ticket type '{name}'."
            )
        ticket_type = TicketType.__members__.get(name.strip().upper())
        requests.append(TicketTypeRequest(ticket_type, qty))
    return requests


def _display_receipt(dto: PurchaseReceiptDTO) -> None:
    click.echo(f"Purchase complete for account #{dto.account_id}")
    click.echo()
    click.echo(f"  {'Ticket':<10} {'Qty':>5} {'Price':>10} {'Total':>10}")
    click.echo(f"  {'-'*38}")
    for line in dto.tickets:
        click.echo(
            f"  {line.ticket_type:<10} {line.quantity:>5} "
            f"{_money(line.unit_price):>10} {_money(line.line_total):>10}"
        )
    click.echo(f"  {'-'*38}")
    click.echo(f"  {'Seats reserved':<18} {dto.total_seats:>19}")
    click.echo(f"  {'Total cost':<18} {_money(dto.total_cost):>19}")


def _money(amount: int) -> str:
    return f"£{amount:.2f}"


@click.command("purchase")
@click.option("--account", "account_id", required=True, type=int, help="Account ID to charge.")
@click.option("--tickets", required=True, help="Tickets as 'Type:Qty,Type:Qty'.")
def tickets_purchase(account_id: int, tickets: str) -> None:
    """Buy tickets: takes payment and reserves seats."""
    requests = _parse_tickets(tickets)
    handler = purchase_tickets_handler()

    try:
        dto = handler.handle(account_id, requests)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    _display_receipt(dto)


@click.command("prices")
def tickets_prices() -> None:
    """Show the ticket price list."""
    rows = ShowPricesHandler().handle()

    click.echo(f"{'Ticket':<10} {'Price':>10} {'Seat':>6}")
    click.echo("-" * 28)
    for row in rows:
        seat = "yes" if row.occupies_seat else "no"
        click.echo(f"{row.ticket_type:<10} {_money(row.price):>10} {seat:>6}")
