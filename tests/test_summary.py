"""Tests for daily summary and totals."""

from decimal import Decimal

from tripledger.domain.entities import DailySummary, LedgerTotals, TripRecord
from tripledger.domain.summary import (
    compute_daily_summary,
    compute_totals,
    filter_trips_by_date,
)


def _trips(*pairs):
    return [TripRecord(date=trip_date, amount=amount) for trip_date, amount in pairs]


def test_daily_summary_example():
    trips = _trips(("2024-01-01", 100), ("2024-01-01", 50), ("2024-01-02", 75))

    summary = compute_daily_summary(trips)

    assert summary == {
        "2024-01-02": DailySummary(count=1, earnings=Decimal(75)),
        "2024-01-01": DailySummary(count=2, earnings=Decimal(150)),
    }
    assert list(summary) == ["2024-01-02", "2024-01-01"]


def test_totals_example():
    trips = _trips(("2024-01-01", 100), ("2024-01-01", 50), ("2024-01-02", 75))
    assert compute_totals(trips) == LedgerTotals(total_trips=3, total_earnings=Decimal(225))


def test_daily_summary_orders_dates_descending_regardless_of_input():
    trips = _trips(
        ("2023-12-31", 1), ("2024-02-10", 1), ("2024-01-15", 1), ("2024-02-10", 1)
    )
    summary = compute_daily_summary(trips)
    assert list(summary) == ["2024-02-10", "2024-01-15", "2023-12-31"]
    assert summary["2024-02-10"].count == 2


def test_non_numeric_amounts_count_as_zero():
    trips = _trips(
        ("2024-03-01", "120"),
        ("2024-03-01", "abc"),
        ("2024-03-01", None),
        ("2024-03-01", ""),
        ("2024-03-02", 30.5),
    )

    summary = compute_daily_summary(trips)
    totals = compute_totals(trips)

    assert summary["2024-03-01"] == DailySummary(count=4, earnings=Decimal(120))
    assert summary["2024-03-02"].earnings == Decimal("30.5")
    assert totals.total_trips == 5
    assert totals.total_earnings == Decimal("150.5")


def test_empty_ledger():
    assert compute_daily_summary([]) == {}
    assert compute_totals([]) == LedgerTotals(total_trips=0, total_earnings=Decimal(0))


def test_summary_matches_totals(sample_trips):
    summary = compute_daily_summary(sample_trips)
    totals = compute_totals(sample_trips)
    assert sum(info.count for info in summary.values()) == totals.total_trips
    assert sum(info.earnings for info in summary.values()) == totals.total_earnings


class TestFilterTripsByDate:
    """Tests for filter_trips_by_date."""

    def test_no_bounds_returns_everything(self, sample_trips):
        assert filter_trips_by_date(sample_trips) == sample_trips

    def test_inclusive_bounds_preserve_order(self):
        trips = _trips(("2024-01-03", 1), ("2024-01-02", 2), ("2024-01-01", 3))
        result = filter_trips_by_date(trips, start_date="2024-01-02", end_date="2024-01-03")
        assert [trip.date for trip in result] == ["2024-01-03", "2024-01-02"]

    def test_single_bound(self):
        trips = _trips(("2024-01-03", 1), ("2024-01-01", 3))
        assert [t.date for t in filter_trips_by_date(trips, end_date="2024-01-02")] == ["2024-01-01"]
        assert [t.date for t in filter_trips_by_date(trips, start_date="2024-01-02")] == ["2024-01-03"]
