import logging

import click

from cinema.infrastructure.cli.ticket_commands import tickets_prices, tickets_purchase

LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR"]


@click.group()
@click.option(
    "--log-level",
    type=click.Choice(LOG_LEVELS, case_sensitive=False),
    default="WARNING",
    show_default=True,
    help="Logging verbosity.",
)
def cli(log_level: str) -> None:
    """Cinema — ticket purchasing"""
    logging.basicConfig(
        level=getattr(logging, log_level.upper()),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


@cli.group()
def tickets() -> None:
    """Buy tickets and view prices."""


# Register subcommands
tickets.add_command(tickets_prices)
tickets.add_command(tickets_purchase)
