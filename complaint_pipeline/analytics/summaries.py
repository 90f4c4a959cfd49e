"""
Period statistics, monthly trends, region and year summaries.
"""

from collections.abc import Iterable
from datetime import datetime

from ..config import DEFAULT_SUMMARY_YEARS
from ..core.models import (
    CurrentMonthStats,
    MonthlyTrendSummary,
    ProcessedRecord,
    RegionSummary,
    YearSummary,
    YTDStats,
)
from ..core.normalization import get_ordered_regions, get_region_from_county
from ..utils.dates import month_key, start_of_month, start_of_year
from .criteria import dated_since, filter_valid_records, meets_criteria, snapshot, upb_amount


def _period_stats(records: list[ProcessedRecord], start: datetime, stats):
    period = dated_since(filter_valid_records(records), start)
    stats.total_complaints = len(period)
    for record in period:
        if meets_criteria(record):
            stats.total_meets_criteria += 1
            stats.total_upb_meets_criteria += upb_amount(record)
    return stats


def calculate_ytd_stats(records: list[ProcessedRecord], now: datetime | None = None) -> YTDStats:
    """Counts for valid, non-duplicate records dated since January 1st."""
    return _period_stats(records, start_of_year(snapshot(now)), YTDStats())


def calculate_current_month_stats(
    records: list[ProcessedRecord], now: datetime | None = None
) -> CurrentMonthStats:
    """Counts for valid, non-duplicate records dated since the 1st of this month."""
    return _period_stats(records, start_of_month(snapshot(now)), CurrentMonthStats())


def calculate_monthly_trend_summary(records: list[ProcessedRecord]) -> list[MonthlyTrendSummary]:
    """
    Totals vs criteria-meeting complaints per calendar month.

    Returns:
        One entry per YYYY-MM, newest month first
    """
    by_month: dict[str, MonthlyTrendSummary] = {}
    for record in filter_valid_records(records):
        if record.complaint_date is None:
            continue
        month = month_key(record.complaint_date)
        stats = by_month.setdefault(month, MonthlyTrendSummary(month=month))
        upb = upb_amount(record)
        stats.total_complaints += 1
        stats.total_upb += upb
        if meets_criteria(record):
            stats.complaints_meeting_criteria += 1
            stats.upb_meeting_criteria += upb

    return sorted(by_month.values(), key=lambda s: s.month, reverse=True)


def _accumulate(stats, record: ProcessedRecord) -> None:
    upb = upb_amount(record)
    stats.total_complaints += 1
    stats.total_upb += upb
    if meets_criteria(record):
        stats.complaints_meeting_criteria += 1
        stats.upb_meeting_criteria += upb


def _region_summary(records: list[ProcessedRecord], start: datetime) -> list[RegionSummary]:
    regions = get_ordered_regions()
    by_region = {region: RegionSummary(region=region) for region in regions}

    for record in dated_since(filter_valid_records(records), start):
        region = get_region_from_county(record.normalized_county or record.county)
        stats = by_region.get(region)
        if stats is None:
            # Other/Unmapped is never reported
            continue
        _accumulate(stats, record)

    return [by_region[r] for r in regions if by_region[r].total_complaints > 0]


def calculate_current_month_region_summary(
    records: list[ProcessedRecord], now: datetime | None = None
) -> list[RegionSummary]:
    """Region totals for the current month, in display order, empty regions omitted."""
    return _region_summary(records, start_of_month(snapshot(now)))


def calculate_ytd_region_summary(
    records: list[ProcessedRecord], now: datetime | None = None
) -> list[RegionSummary]:
    """Region totals since January 1st, in display order, empty regions omitted."""
    return _region_summary(records, start_of_year(snapshot(now)))


def calculate_year_summary(
    records: list[ProcessedRecord],
    years: Iterable[str] = DEFAULT_SUMMARY_YEARS,
) -> list[YearSummary]:
    """
    Totals per calendar year for the allowed years.

    Args:
        records: Processed records
        years: Allowed years, in output order

    Returns:
        One entry per allowed year that has complaints
    """
    years = [str(y) for y in years]
    by_year = {year: YearSummary(year=year) for year in years}

    for record in filter_valid_records(records):
        if record.complaint_date is None:
            continue
        stats = by_year.get(str(record.complaint_date.year))
        if stats is not None:
            _accumulate(stats, record)

    return [by_year[y] for y in years if by_year[y].total_complaints > 0]
