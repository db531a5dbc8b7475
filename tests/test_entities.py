"""Tests for domain entities."""

import pytest
from decimal import Decimal

from tripledger.domain.entities import (
    DEFAULT_TRIP_AMOUNT,
    DailySummary,
    LedgerTotals,
    TripRecord,
    TripType,
)


class TestTripType:
    """Tests for TripType parsing."""

    def test_values(self):
        assert TripType.PICKUP.value == "Pickup"
        assert TripType.DROP.value == "Drop"
        assert str(TripType.DROP) == "Drop"

    @pytest.mark.parametrize("value", ["drop", "DROP", " Drop "])
    def test_parse_is_case_insensitive(self, value):
        assert TripType.parse(value) is TripType.DROP

    @pytest.mark.parametrize("value", [None, "", "  "])
    def test_parse_defaults_to_pickup(self, value):
        assert TripType.parse(value) is TripType.PICKUP

    def test_parse_rejects_unknown(self):
        with pytest.raises(ValueError, match="Unknown trip type"):
            TripType.parse("Detour")


class TestTripRecord:
    """Tests for TripRecord entity."""

    def test_defaults(self):
        trip = TripRecord(date="2024-01-01")
        assert trip.company == ""
        assert trip.location == ""
        assert trip.type is TripType.PICKUP
        assert trip.amount == DEFAULT_TRIP_AMOUNT

    def test_trip_immutability(self):
        """Test that TripRecord entities are immutable."""
        trip = TripRecord(date="2024-01-01", amount=100)
        with pytest.raises(Exception):  # dataclass frozen raises FrozenInstanceError
            trip.amount = 500

    def test_trip_equality(self):
        assert TripRecord(date="2024-01-01", amount="5") == TripRecord(date="2024-01-01", amount="5")
        assert TripRecord(date="2024-01-01", amount="5") != TripRecord(date="2024-01-01", amount=5)


def test_summary_values():
    assert DailySummary(count=2, earnings=Decimal(150)) == DailySummary(count=2, earnings=Decimal("150"))
    assert LedgerTotals(total_trips=0, total_earnings=Decimal(0)).total_trips == 0
