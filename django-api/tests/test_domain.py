"""Unit tests for domain primitives.

These test invariants that must hold at construction time.
Run with: pytest tests/test_domain.py -v
"""

from decimal import Decimal
from uuid import UUID

import pytest

from checkout.domain import Price, Quantity
from events.domain import EventId, Money, PriceRange


class TestMoney:
    """Tests for Money value object."""

    def test_money_accepts_positive_amount(self):
        """Money can be created with positive amount."""
        assert Money(Decimal("12.50")).amount == Decimal("12.50")

    def test_money_accepts_zero(self):
        """Money can be created with zero."""
        assert Money(Decimal("0")).amount == 0

    def test_money_rejects_negative_amount(self):
        """Money raises ValueError for negative amount."""
        with pytest.raises(ValueError):
            Money(Decimal("-0.01"))

    def test_money_str_format(self):
        """Money string representation is formatted to 2 decimal places."""
        assert str(Money(Decimal("7.5"))) == "7.50"


class TestEventId:
    """Tests for EventId value object."""

    def test_from_string_valid_uuid(self):
        """EventId.from_string parses valid UUID."""
        raw = "8c1f6a2e-3b7d-4c55-9e0a-2f4b6d8e1a3c"
        assert EventId.from_string(raw).value == UUID(raw)

    def test_from_string_invalid_uuid(self):
        """EventId.from_string raises ValueError for invalid UUID."""
        with pytest.raises(ValueError):
            EventId.from_string("not-a-uuid")


class TestPriceRange:
    """Tests for the catalog price filter."""

    def test_parses_closed_range(self):
        assert PriceRange.parse("20-50") == PriceRange(Decimal(20), Decimal(50))

    def test_parses_open_range(self):
        assert PriceRange.parse("100+") == PriceRange(Decimal(100))

    @pytest.mark.parametrize("raw", [None, "", "All", "cheap", "a-b", "50"])
    def test_unparseable_means_no_filter(self, raw):
        assert PriceRange.parse(raw) is None

    def test_bounds_are_inclusive(self):
        band = PriceRange(Decimal(20), Decimal(50))
        assert band.contains(Decimal(20))
        assert band.contains(Decimal(50))
        assert not band.contains(Decimal("50.01"))

    def test_rejects_inverted_bounds(self):
        with pytest.raises(ValueError):
            PriceRange(Decimal(50), Decimal(20))


class TestQuantity:
    """Tests for the ticket quantity bound."""

    @pytest.mark.parametrize("value", [1, 3, 5])
    def test_accepts_values_in_range(self, value):
        assert Quantity(value).value == value

    @pytest.mark.parametrize("value", [0, 6, -1, 100])
    def test_rejects_values_out_of_range(self, value):
        with pytest.raises(ValueError):
            Quantity(value)

    @pytest.mark.parametrize("value", [True, 2.0, "2", None])
    def test_rejects_non_integers(self, value):
        with pytest.raises(ValueError):
            Quantity(value)


class TestPrice:
    """Tests for amount computation."""

    def test_minor_units_for_whole_price(self):
        """25.00 x 2 is 5000 paise."""
        assert Price(Decimal("25.00")).total_minor_units(Quantity(2)) == 5000

    def test_minor_units_round_half_up(self):
        """Half a paisa rounds away from zero."""
        assert Price(Decimal("0.005")).total_minor_units(Quantity(1)) == 1
        assert Price(Decimal("10.125")).total_minor_units(Quantity(1)) == 1013

    def test_total_in_major_units(self):
        assert Price(Decimal("19.99")).total(Quantity(3)) == Decimal("59.97")

    def test_rejects_negative_price(self):
        with pytest.raises(ValueError):
            Price(Decimal("-1"))
