"""Stand-in for the external payment provider.

The real provider is trusted to always take the payment, so this
adapter only records the call in the log.
"""

from __future__ import annotations

import logging

from cinema.domain.gateway.payment_gateway import PaymentGateway

logger = logging.getLogger(__name__)


class LoggingPaymentGateway(PaymentGateway):

    def make_payment(self, account_id: int, amount: int) -> None:
        logger.info("Payment of £%d taken from account %d", amount, account_id)
