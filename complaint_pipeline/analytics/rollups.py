"""
Four-week roll-ups by county.
"""

from datetime import datetime

from ..core.models import FourWeekRollUp, FourWeekRollUpWeekly, ProcessedRecord
from ..utils.dates import days_ago
from .criteria import (
    county_of,
    dated_since,
    filter_valid_records,
    meets_criteria,
    qualifying_records,
    snapshot,
    upb_amount,
)

WINDOW_DAYS = 28


def calculate_four_week_roll_up(
    records: list[ProcessedRecord], now: datetime | None = None
) -> list[FourWeekRollUp]:
    """
    Per-county totals over the trailing 28 days.

    Complaint counts include every dated record in the window (invalid and
    duplicate rows too) for transparency; total UPB counts valid records only;
    the criteria sub-totals count valid, non-duplicate, criteria-meeting records.

    Returns:
        Roll-ups sorted alphabetically by county
    """
    now = snapshot(now)
    recent = dated_since(records, days_ago(now, WINDOW_DAYS))

    by_county: dict[str, FourWeekRollUp] = {}
    for record in recent:
        county = county_of(record)
        stats = by_county.setdefault(county, FourWeekRollUp(county=county))
        stats.total_complaints += 1
        if record.is_valid:
            stats.total_upb += upb_amount(record)

    for record in filter_valid_records(recent):
        if not meets_criteria(record):
            continue
        stats = by_county.get(county_of(record))
        if stats is not None:
            stats.total_meets_criteria += 1
            stats.total_upb_meets_criteria += upb_amount(record)

    return sorted(by_county.values(), key=lambda s: s.county)


def calculate_four_week_roll_up_weekly(
    records: list[ProcessedRecord], now: datetime | None = None
) -> list[FourWeekRollUpWeekly]:
    """
    Per-county criteria-meeting complaints split into four rolling weeks.

    Week 1 is the last 7 days, week 4 is 22-28 days ago.

    Returns:
        Roll-ups sorted alphabetically by county
    """
    now = snapshot(now)
    week_starts = [days_ago(now, 7 * week) for week in range(1, 5)]
    recent = dated_since(qualifying_records(records), week_starts[-1])

    by_county: dict[str, FourWeekRollUpWeekly] = {}
    for record in recent:
        county = county_of(record)
        stats = by_county.setdefault(county, FourWeekRollUpWeekly(county=county))
        upb = upb_amount(record)

        weeks = (stats.week1, stats.week2, stats.week3, stats.week4)
        for week, start in zip(weeks, week_starts):
            if record.complaint_date >= start:
                week.total_complaints += 1
                week.total_upb += upb
                break

        stats.total_complaints += 1
        stats.total_upb += upb
        stats.total_meets_criteria += 1
        stats.total_upb_meets_criteria += upb

    return sorted(by_county.values(), key=lambda s: s.county)
