"""Unit tests for the account and ticket request validators."""

import pytest

from cinema.domain.exceptions import ErrorKind, TicketValidationError
from cinema.domain.model.policy import PurchasePolicy
from cinema.domain.model.ticket import TicketType, TicketTypeRequest
from cinema.domain.service.account_validator import AccountValidator
from cinema.domain.service.ticket_request_validator import TicketRequestValidator


# ── AccountValidator ─────────────────────────────────────────────────────────


class TestAccountValidator:

    @pytest.mark.parametrize("account_id", [None, -(2**63), -1, 0])
    def test_invalid_account_rejected(self, account_id):
        with pytest.raises(TicketValidationError, match="account id supplied is invalid") as info:
            AccountValidator().validate(account_id)
        assert info.value.kind is ErrorKind.ACCOUNT_INVALID

    def test_boolean_is_not_an_account_id(self):
        with pytest.raises(TicketValidationError):
            AccountValidator().validate(True)

    @pytest.mark.parametrize("account_id", [1, 2, 2**63 - 1])
    def test_positive_account_accepted(self, account_id):
        AccountValidator().validate(account_id)


# ── TicketRequestValidator ───────────────────────────────────────────────────


def _adults(n: int) -> list[TicketTypeRequest]:
    return [TicketTypeRequest(TicketType.ADULT, 1) for _ in range(n)]


class TestTicketRequestValidator:

    @pytest.mark.parametrize("requests", [None, [], ()])
    def test_empty_requests_rejected(self, requests):
        with pytest.raises(TicketValidationError, match="requests supplied are empty") as info:
            TicketRequestValidator().validate(requests)
        assert info.value.kind is ErrorKind.REQUEST_SET_EMPTY

    def test_more_than_max_entries_rejected(self):
        with pytest.raises(TicketValidationError, match="maximum of 40") as info:
            TicketRequestValidator().validate(_adults(41))
        assert info.value.kind is ErrorKind.TOO_MANY_REQUEST_ENTRIES

    def test_single_entry_accepted(self):
        TicketRequestValidator().validate(_adults(1))

    def test_exactly_max_entries_accepted(self):
        TicketRequestValidator().validate(_adults(40))

    def test_entries_are_not_inspected(self):
        TicketRequestValidator().validate([TicketTypeRequest(None, 0)])

    def test_limit_comes_from_policy(self):
        validator = TicketRequestValidator(PurchasePolicy(max_tickets=5, max_ticket_requests=2))
        with pytest.raises(TicketValidationError, match="maximum of 2"):
            validator.validate(_adults(3))
