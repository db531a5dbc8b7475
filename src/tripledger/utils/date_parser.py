"""Date parsing utilities."""

import re
from datetime import date, datetime, timedelta
from dateutil import parser as date_parser

_DAYS_AGO = re.compile(r"^(\d+)\s+days?\s+ago$")

# Two defaults that differ in year, month and day. A date parsed against
# both gives the same result only if the text names all three.
_COMPLETENESS_DEFAULTS = (datetime(2000, 1, 1), datetime(2001, 2, 2))


def parse_date(date_str: str) -> date:
    """Parse a date string into a date object.

    Supports various formats including relative dates:
    - Absolute dates: "2024-01-15", "January 15, 2024", etc.
    - Relative dates: "today", "yesterday", "tomorrow", "3 days ago"

    Absolute dates must name the year, month and day. Partial input such as
    "2024-01" or "5" is rejected rather than completed from today's date.

    Args:
        date_str: Date string in various formats

    Returns:
        Date object

    Raises:
        ValueError: If date string cannot be parsed or is incomplete
    """
    date_str = date_str.strip().lower()
    today = date.today()

    # Handle relative dates
    relative_dates = {
        "today": today,
        "yesterday": today - timedelta(days=1),
        "tomorrow": today + timedelta(days=1),
    }

    if date_str in relative_dates:
        return relative_dates[date_str]

    match = _DAYS_AGO.match(date_str)
    if match:
        return today - timedelta(days=int(match.group(1)))

    # Parse as absolute date against both defaults
    try:
        first, second = (
            date_parser.parse(date_str, default=default).date()
            for default in _COMPLETENESS_DEFAULTS
        )
    except (ValueError, OverflowError) as e:
        raise ValueError(f"Could not parse date '{date_str}': {e}")

    if first != second:
        raise ValueError(f"Date '{date_str}' is missing a year, month or day")
    return first


def normalize_trip_date(date_str: str | None) -> str:
    """Normalize a trip date entered by the user to YYYY-MM-DD.

    Trip dates are only required to be non-empty, so input that is not a
    complete date is kept as typed (trimmed) rather than rejected or filled
    in. Empty input stays empty so the ledger can report the missing date.

    Args:
        date_str: Date as entered

    Returns:
        ISO formatted date, or the trimmed input when it is not a full date
    """
    if date_str is None:
        return ""
    text = date_str.strip()
    if not text:
        return ""
    try:
        return parse_date(text).isoformat()
    except ValueError:
        return text
