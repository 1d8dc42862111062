"""Domain service: Account validation."""

from __future__ import annotations

from cinema.domain.exceptions import ErrorKind, TicketValidationError


class AccountValidator:

    def validate(self, account_id: int | None) -> None:
        """Every account with an id greater than zero is valid."""
        if (
            account_id is None
            or isinstance(account_id, bool)
            or not isinstance(account_id, int)
            or account_id <= 0
        ):
            raise TicketValidationError(
                ErrorKind.ACCOUNT_INVALID, "The account id supplied is invalid"
            )
