"""Domain layer for tripledger application."""

from tripledger.domain.ledger import TripLedger
from tripledger.domain.summary import compute_daily_summary, compute_totals
from tripledger.domain.csv_export import export_csv, write_export

__all__ = [
    "TripLedger",
    "compute_daily_summary",
    "compute_totals",
    "export_csv",
    "write_export",
]
