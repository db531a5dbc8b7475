"""Shared domain error messages and error types."""


class DomainError(ValueError):
    """Base class for domain-level errors.

    Subclasses provide semantic categories while preserving ValueError
    compatibility for existing error handling.
    """


class ValidationError(DomainError):
    """Invalid input or failed validation in domain logic."""


class EmptyExportError(DomainError):
    """Export requested while the ledger holds no trips."""


class PersistenceError(RuntimeError):
    """Base class for storage slot failures."""


class PersistenceReadError(PersistenceError):
    """Stored ledger could not be read or decoded."""


class PersistenceWriteError(PersistenceError):
    """Ledger could not be written to its storage slot."""


def missing_trip_date() -> str:
    """Return message for a trip submitted without a date."""
    return "Please enter Date (YYYY-MM-DD)"


def no_trips_to_export() -> str:
    """Return message for an export of an empty ledger."""
    return "No trips to export"


def unknown_trip_type(value: object) -> str:
    """Return message for an unrecognised pickup/drop value."""
    return f"Unknown trip type '{value}'. Must be one of: Pickup, Drop"
