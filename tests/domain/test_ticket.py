"""Unit tests for ticket types and ticket value objects."""

from dataclasses import FrozenInstanceError

import pytest

from cinema.domain.model.ticket import (
    TICKET_PRICES,
    TicketTotals,
    TicketType,
    TicketTypeRequest,
    tickets_for_type,
)


# ── TicketType ───────────────────────────────────────────────────────────────


class TestTicketType:

    def test_prices(self):
        assert TicketType.ADULT.price == 20
        assert TicketType.CHILD.price == 10
        assert TicketType.INFANT.price == 0

    def test_only_infants_do_not_occupy_a_seat(self):
        assert TicketType.ADULT.occupies_seat
        assert TicketType.CHILD.occupies_seat
        assert not TicketType.INFANT.occupies_seat

    def test_price_table_is_read_only(self):
        with pytest.raises(TypeError):
            TICKET_PRICES[TicketType.INFANT] = 5  # type: ignore[index]


# ── TicketTypeRequest ────────────────────────────────────────────────────────


class TestTicketTypeRequest:

    def test_is_immutable(self):
        request = TicketTypeRequest(TicketType.ADULT, 2)
        with pytest.raises(FrozenInstanceError):
            request.number_of_tickets = 3  # type: ignore[misc]

    def test_invalid_values_are_accepted_at_construction(self):
        request = TicketTypeRequest(None, -1)
        assert request.ticket_type is None
        assert request.number_of_tickets == -1


# ── tickets_for_type ─────────────────────────────────────────────────────────


class TestTicketsForType:

    def test_zero_when_type_not_listed(self):
        assert tickets_for_type({}, TicketType.ADULT) == 0

    def test_value_when_type_listed(self):
        counts = {TicketType.ADULT: 1, TicketType.CHILD: 2, TicketType.INFANT: 3}
        assert tickets_for_type(counts, TicketType.ADULT) == 1
        assert tickets_for_type(counts, TicketType.CHILD) == 2
        assert tickets_for_type(counts, TicketType.INFANT) == 3


# ── TicketTotals ─────────────────────────────────────────────────────────────


class TestTicketTotals:

    def test_missing_types_are_zero_filled(self):
        totals = TicketTotals({TicketType.CHILD: 4})
        assert totals.as_dict() == {
            TicketType.ADULT: 0,
            TicketType.CHILD: 4,
            TicketType.INFANT: 0,
        }

    def test_named_accessors(self):
        totals = TicketTotals({TicketType.ADULT: 2, TicketType.CHILD: 1, TicketType.INFANT: 1})
        assert totals.adults == 2
        assert totals.children == 1
        assert totals.infants == 1
        assert totals[TicketType.CHILD] == 1

    def test_counts_cannot_be_mutated(self):
        totals = TicketTotals({TicketType.ADULT: 2})
        with pytest.raises(TypeError):
            totals.counts[TicketType.ADULT] = 5  # type: ignore[index]

    @pytest.mark.parametrize("count", [-5, -1, 1.5, "2", None, True])
    def test_invalid_count_rejected(self, count):
        with pytest.raises(ValueError, match="must be a non-negative integer"):
            TicketTotals({TicketType.ADULT: 1, TicketType.CHILD: count})

    def test_unknown_type_rejected(self):
        with pytest.raises(ValueError, match="Unknown ticket type"):
            TicketTotals({TicketType.ADULT: 1, "SENIOR": 2})  # type: ignore[dict-item]

    def test_zero_count_accepted(self):
        assert TicketTotals({TicketType.CHILD: 0}).children == 0

    def test_hashable_and_consistent_with_equality(self):
        a = TicketTotals({TicketType.ADULT: 2})
        b = TicketTotals({TicketType.ADULT: 2, TicketType.CHILD: 0})
        assert hash(a) == hash(b)
        assert len({a, b, TicketTotals({TicketType.ADULT: 3})}) == 2

    def test_equal_by_value(self):
        assert TicketTotals({TicketType.ADULT: 1}) == TicketTotals(
            {TicketType.ADULT: 1, TicketType.INFANT: 0}
        )
