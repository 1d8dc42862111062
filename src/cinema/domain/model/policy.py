"""Purchase policy: the limits every purchase is checked against."""

from __future__ import annotations

from dataclasses import dataclass


# ---------------------------------------------------------------------------
# Reference limits
# ---------------------------------------------------------------------------
MAX_TICKETS = 20

# Twice the seat cap: room for MAX_TICKETS single-ticket ADULT entries plus
# as many single-ticket INFANT entries, and nothing more.
MAX_TICKET_REQUESTS = 2 * MAX_TICKETS


@dataclass(frozen=True)
class PurchasePolicy:
    """Limits applied to a single purchase.

    ``max_tickets_per_request`` defaults to ``max_tickets``, since one entry
    can never legitimately ask for more than the whole purchase allows.
    ``max_ticket_requests`` defaults to twice ``max_tickets``.
    """

    max_tickets: int = MAX_TICKETS
    max_tickets_per_request: int | None = None
    max_ticket_requests: int | None = None

    def __post_init__(self) -> None:
        if self.max_tickets_per_request is None:
            object.__setattr__(self, "max_tickets_per_request", self.max_tickets)
        if self.max_ticket_requests is None:
            object.__setattr__(self, "max_ticket_requests", 2 * self.max_tickets)

        for name in ("max_tickets", "max_tickets_per_request", "max_ticket_requests"):
            value = getattr(self, name)
            if not isinstance(value, int) or value <= 0:
                raise ValueError(f"{name} must be a positive integer, got {value!r}")


DEFAULT_POLICY = PurchasePolicy()
