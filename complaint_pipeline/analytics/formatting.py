"""
Display helpers for currency and dates.
"""

import math
from datetime import date
from typing import Any

from ..utils.dates import coerce_datetime

INVALID_DATE = "Invalid Date"
NOT_AVAILABLE = "N/A"


def format_currency(value: float) -> str:
    """
    Format a number as whole US dollars.

    Examples:
        >>> format_currency(250000)
        '$250,000'
        >>> format_currency(-1500.6)
        '-$1,501'
    """
    if value is None or not math.isfinite(value):
        return "$NaN"
    rounded = math.floor(abs(value) + 0.5)
    sign = "-" if value < 0 and rounded else ""
    return f"{sign}${rounded:,}"


def format_date(value: Any) -> str:
    """
    Format a date as e.g. "Jan 15, 2024".

    Returns "N/A" for empty input and "Invalid Date" when unparseable.
    """
    if not value:
        return NOT_AVAILABLE
    parsed = value if isinstance(value, date) else coerce_datetime(value)
    if parsed is None:
        return INVALID_DATE
    return f"{parsed:%b} {parsed.day}, {parsed.year}"
