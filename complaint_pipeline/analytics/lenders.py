"""
Lender-grouped calculators over criteria-meeting complaints.
"""

from datetime import datetime

from ..core.models import (
    LenderAnalysis,
    LenderCriteriaSummary,
    MonthlyLenderData,
    ProcessedRecord,
)
from ..utils.dates import month_key, start_of_month, start_of_year
from .criteria import lender_of, qualifying_records, snapshot, upb_amount


def calculate_lender_analysis(
    records: list[ProcessedRecord], now: datetime | None = None
) -> list[LenderAnalysis]:
    """
    YTD and current-month sub-totals per normalized lender.

    Every lender with a qualifying complaint gets an entry, even when none of
    its complaints fall in either window.

    Returns:
        Entries sorted by YTD UPB, highest first
    """
    now = snapshot(now)
    year_start = start_of_year(now)
    month_start = start_of_month(now)

    by_lender: dict[str, LenderAnalysis] = {}
    for record in qualifying_records(records):
        lender = lender_of(record)
        stats = by_lender.setdefault(lender, LenderAnalysis(lender=lender))
        date = record.complaint_date
        if date is None:
            continue
        upb = upb_amount(record)
        if date >= year_start:
            stats.ytd_complaints += 1
            stats.ytd_upb += upb
        if date >= month_start:
            stats.current_month_complaints += 1
            stats.current_month_upb += upb

    return sorted(by_lender.values(), key=lambda s: s.ytd_upb, reverse=True)


def calculate_lender_criteria_summary(records: list[ProcessedRecord]) -> list[LenderCriteriaSummary]:
    """Flat complaint count and UPB per lender, in first-seen order."""
    by_lender: dict[str, LenderCriteriaSummary] = {}
    for record in qualifying_records(records):
        lender = lender_of(record)
        stats = by_lender.setdefault(lender, LenderCriteriaSummary(lender=lender))
        stats.total_complaints += 1
        stats.total_upb += upb_amount(record)
    return list(by_lender.values())


def calculate_monthly_lender_data(records: list[ProcessedRecord]) -> list[MonthlyLenderData]:
    """
    Complaint count and UPB per (lender, month) pair.

    Returns:
        Entries sorted by month (newest first), then complaint count (highest first)
    """
    by_key: dict[tuple[str, str], MonthlyLenderData] = {}
    for record in qualifying_records(records):
        if record.complaint_date is None:
            continue
        month = month_key(record.complaint_date)
        lender = lender_of(record)
        data = by_key.setdefault(
            (lender, month), MonthlyLenderData(month=month, lender=lender)
        )
        data.number_of_complaints += 1
        data.total_upb += upb_amount(record)

    by_count = sorted(by_key.values(), key=lambda d: d.number_of_complaints, reverse=True)
    return sorted(by_count, key=lambda d: d.month, reverse=True)
