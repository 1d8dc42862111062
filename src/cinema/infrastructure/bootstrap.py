"""Composition root: picks the provider adapters and the purchase policy.

Only this module imports from every layer.
"""

from __future__ import annotations

from cinema.application.purchase_tickets import PurchaseTicketsHandler
from cinema.domain.model.policy import DEFAULT_POLICY, PurchasePolicy
from cinema.infrastructure.thirdparty.logging_payment_gateway import (
    LoggingPaymentGateway,
)
from cinema.infrastructure.thirdparty.logging_seat_reservation_gateway import (
    LoggingSeatReservationGateway,
)


def purchase_policy() -> PurchasePolicy:
    return DEFAULT_POLICY


def payment_gateway() -> LoggingPaymentGateway:
    return LoggingPaymentGateway()


def seat_reservation_gateway() -> LoggingSeatReservationGateway:
    return LoggingSeatReservationGateway()


def purchase_tickets_handler() -> PurchaseTicketsHandler:
    return PurchaseTicketsHandler(
        payment_gateway=payment_gateway(),
        seat_reservation_gateway=seat_reservation_gateway(),
        policy=purchase_policy(),
    )
