"""
Date coercion helpers shared by the validators and the calculators.

All datetimes handled by the pipeline are naive local times; aware values are
converted to local time and stripped of their tzinfo, bare dates become
midnight.
"""

from datetime import date, datetime, time, timedelta

from dateutil import parser as date_parser
from dateutil.relativedelta import relativedelta


def to_naive_datetime(value: date) -> datetime:
    """
    Convert a date or datetime into a naive local datetime.

    Args:
        value: date or datetime instance

    Returns:
        Naive datetime
    """
    if isinstance(value, datetime):
        if value.tzinfo is not None:
            return value.astimezone().replace(tzinfo=None)
        return value
    return datetime.combine(value, time.min)


def parse_date_string(text: str) -> datetime:
    """
    Parse a date string leniently.

    Args:
        text: Date text such as "2024-01-15", "01/15/2024" or "Jan 15, 2024"

    Returns:
        Naive local datetime

    Raises:
        ValueError: If the string cannot be parsed as a date
    """
    try:
        parsed = date_parser.parse(text)
    except (ValueError, OverflowError) as e:
        raise ValueError(str(e)) from e
    return to_naive_datetime(parsed)


def coerce_datetime(value: object) -> datetime | None:
    """Best-effort conversion used by readers and calculators; None on failure."""
    if value is None:
        return None
    if isinstance(value, date):
        return to_naive_datetime(value)
    if isinstance(value, str) and value.strip():
        try:
            return parse_date_string(value.strip())
        except ValueError:
            return None
    return None


def days_ago(now: datetime, days: int) -> datetime:
    return now - timedelta(days=days)


def years_ago(now: datetime, years: int) -> datetime:
    return now - relativedelta(years=years)


def start_of_month(now: datetime) -> datetime:
    return datetime(now.year, now.month, 1)


def start_of_year(now: datetime) -> datetime:
    return datetime(now.year, 1, 1)


def month_key(value: datetime) -> str:
    """Format a datetime as YYYY-MM."""
    return value.strftime("%Y-%m")
