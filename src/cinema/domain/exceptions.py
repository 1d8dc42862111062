"""Domain-level exceptions.

Every rejected purchase is expressed as a TicketValidationError tagged with
an ErrorKind. The purchase handler wraps it exactly once into an
InvalidPurchaseError, so callers only ever catch one type.
"""

from __future__ import annotations

from enum import Enum


class ErrorKind(Enum):
    ACCOUNT_INVALID = "ACCOUNT_INVALID"
    REQUEST_SET_EMPTY = "REQUEST_SET_EMPTY"
    TOO_MANY_REQUEST_ENTRIES = "TOO_MANY_REQUEST_ENTRIES"
    UNKNOWN_TICKET_TYPE = "UNKNOWN_TICKET_TYPE"
    INVALID_TICKET_COUNT = "INVALID_TICKET_COUNT"
    NO_QUALIFYING_TICKET = "NO_QUALIFYING_TICKET"
    TOO_MANY_DEPENDENTS = "TOO_MANY_DEPENDENTS"
    SEAT_LIMIT_EXCEEDED = "SEAT_LIMIT_EXCEEDED"


class DomainException(Exception):
    """Base class for all domain errors."""


class TicketValidationError(DomainException):
    """A purchase request broke a business rule."""

    def __init__(self, kind: ErrorKind, message: str) -> None:
        super().__init__(message)
        self.kind = kind
        self.message = message


class SeatLimitExceededError(TicketValidationError):
    """Too many seat-occupying tickets; carries the limit and the total."""

    def __init__(self, limit: int, requested: int) -> None:
        super().__init__(
            ErrorKind.SEAT_LIMIT_EXCEEDED,
            f"Max tickets allowed is {limit}, "
            f"number of ADULT & CHILD tickets requested is {requested}",
        )
        self.limit = limit
        self.requested = requested


class InvalidPurchaseError(DomainException):
    """Outward-facing error raised by the purchase handler.

    The message and kind are those of the wrapped validation error, which is
    also chained as ``__cause__``.
    """

    def __init__(self, cause: TicketValidationError) -> None:
        super().__init__(cause.message)
        self.kind = cause.kind
        self.message = cause.message
