"""Helpers for the API's year-month dates.

The API reports crime and outcome months as ``YYYY-MM``. Internally they
are ``date`` objects pinned to the first of the month so that only year
and month take part in comparisons and formatting.
"""

from datetime import date, datetime, timedelta

MONTH_FORMAT = "%Y-%m"


def parse_month(value: str) -> date:
    """Parse a ``YYYY-MM`` string into a date on the first of that month."""
    return datetime.strptime(value, MONTH_FORMAT).date()


def format_month(value: date) -> str:
    """Format a date as ``YYYY-MM``, ignoring the day."""
    return value.strftime(MONTH_FORMAT)


def current_month(today: date | None = None) -> date:
    today = today or date.today()
    return today.replace(day=1)


def previous_month(today: date | None = None) -> date:
    """First day of the calendar month before ``today``."""
    return (current_month(today) - timedelta(days=1)).replace(day=1)
