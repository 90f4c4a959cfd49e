"""
Recent-activity lists projected for display.
"""

from datetime import datetime

from ..core.models import FlowThroughDeal, Last7DaysComplaint, ProcessedRecord, RecentComplaint
from ..utils.dates import days_ago, start_of_year
from .criteria import (
    address_of,
    county_of,
    dated_since,
    lender_of,
    qualifying_records,
    snapshot,
    upb_amount,
)

RECENT_DAYS = 15
LAST_WEEK_DAYS = 7


def _newest_first(records: list[ProcessedRecord], start: datetime) -> list[ProcessedRecord]:
    recent = dated_since(qualifying_records(records), start)
    return sorted(recent, key=lambda r: r.complaint_date, reverse=True)


def get_recent_complaints(
    records: list[ProcessedRecord], now: datetime | None = None
) -> list[RecentComplaint]:
    """Qualifying complaints from the trailing 15 days, newest first."""
    return [
        RecentComplaint(
            property_address=address_of(r),
            county=county_of(r),
            lender=lender_of(r),
            upb=upb_amount(r),
            complaint_date=r.complaint_date,
        )
        for r in _newest_first(records, days_ago(snapshot(now), RECENT_DAYS))
    ]


def get_last_7_days_complaints(
    records: list[ProcessedRecord], now: datetime | None = None
) -> list[Last7DaysComplaint]:
    """Qualifying complaints from the trailing 7 days, newest first."""
    return [
        Last7DaysComplaint(
            property_address=address_of(r),
            lender=lender_of(r),
            total_upb=upb_amount(r),
            complaint_date=r.complaint_date,
            county=county_of(r),
        )
        for r in _newest_first(records, days_ago(snapshot(now), LAST_WEEK_DAYS))
    ]


def _flow_through(records: list[ProcessedRecord], start: datetime) -> list[FlowThroughDeal]:
    return [
        FlowThroughDeal(
            property_address=address_of(r),
            county=county_of(r),
            lender=lender_of(r),
            upb=upb_amount(r),
            complaint_date=r.complaint_date,
            meets_criteria=True,
        )
        for r in _newest_first(records, start)
    ]


def get_flow_through_ytd(
    records: list[ProcessedRecord], now: datetime | None = None
) -> list[FlowThroughDeal]:
    """Qualifying complaints since January 1st, newest first."""
    return _flow_through(records, start_of_year(snapshot(now)))


def get_flow_through_last_week(
    records: list[ProcessedRecord], now: datetime | None = None
) -> list[FlowThroughDeal]:
    """Qualifying complaints from the trailing 7 days, newest first."""
    return _flow_through(records, days_ago(snapshot(now), LAST_WEEK_DAYS))
