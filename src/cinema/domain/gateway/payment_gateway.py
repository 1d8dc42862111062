"""Abstract payment provider."""

from __future__ import annotations

from abc import ABC, abstractmethod


class PaymentGateway(ABC):

    @abstractmethod
    def make_payment(self, account_id: int, amount: int) -> None:
        """Charge *amount* to the account. Trusted to always succeed."""
