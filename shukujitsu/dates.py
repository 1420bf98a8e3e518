"""Calendar date utilities."""

from collections.abc import Iterator
from datetime import date, datetime, timedelta

SUNDAY = 0
MONDAY = 1
SATURDAY = 6


def to_date(value: date | datetime) -> date:
    """Drop the time of day (and timezone) from a datetime, keeping its calendar date."""
    if isinstance(value, datetime):
        return value.date()
    return value


def format_month_day(target_date: date) -> str:
    """Format a date as 'MM-DD'."""
    return f"{target_date.month:02d}-{target_date.day:02d}"


def day_of_week(target_date: date) -> int:
    """Day of week with 0 = Sunday, 1 = Monday, ..., 6 = Saturday."""
    return target_date.isoweekday() % 7


def week_of_month(target_date: date) -> int:
    """Ordinal of the weekday within its month (1-5)."""
    return (target_date.day + 6) // 7


def add_days(target_date: date, days: int) -> date:
    """Add (or subtract, when negative) calendar days."""
    return target_date + timedelta(days=days)


def day_count(start: date, end: date) -> int:
    """Number of days in the inclusive range [start, end], 0 if end < start."""
    return max(0, (end - start).days + 1)


def date_range(start: date, end: date) -> Iterator[date]:
    """Iterate over every date from start to end inclusive."""
    for offset in range(day_count(start, end)):
        yield start + timedelta(days=offset)
