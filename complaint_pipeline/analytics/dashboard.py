"""
Runs every calculator against one snapshot of "now".
"""

from collections.abc import Iterable
from datetime import datetime
from typing import Any

from ..config import DEFAULT_SUMMARY_YEARS
from ..core.models import ProcessedRecord
from ..observability.logger import get_logger, log_operation
from .activity import (
    get_flow_through_last_week,
    get_flow_through_ytd,
    get_last_7_days_complaints,
    get_recent_complaints,
)
from .criteria import snapshot
from .lenders import (
    calculate_lender_analysis,
    calculate_lender_criteria_summary,
    calculate_monthly_lender_data,
)
from .rollups import calculate_four_week_roll_up, calculate_four_week_roll_up_weekly
from .summaries import (
    calculate_current_month_region_summary,
    calculate_current_month_stats,
    calculate_monthly_trend_summary,
    calculate_year_summary,
    calculate_ytd_region_summary,
    calculate_ytd_stats,
)

logger = get_logger(__name__)


def build_dashboard(
    records: list[ProcessedRecord],
    now: datetime | None = None,
    years: Iterable[str] = DEFAULT_SUMMARY_YEARS,
) -> dict[str, Any]:
    """
    Compute all aggregates for a set of processed records.

    Args:
        records: Pipeline output
        now: Reference time shared by every date-windowed calculator
        years: Allowed years for the year summary

    Returns:
        Mapping of aggregate name to its result (models or lists of models)
    """
    now = snapshot(now)
    with log_operation("build_dashboard", logger, record_count=len(records)):
        return {
            "generated_at": now,
            "four_week_roll_up": calculate_four_week_roll_up(records, now),
            "four_week_roll_up_weekly": calculate_four_week_roll_up_weekly(records, now),
            "ytd_stats": calculate_ytd_stats(records, now),
            "current_month_stats": calculate_current_month_stats(records, now),
            "lender_analysis": calculate_lender_analysis(records, now),
            "lender_criteria_summary": calculate_lender_criteria_summary(records),
            "monthly_trend_summary": calculate_monthly_trend_summary(records),
            "monthly_lender_data": calculate_monthly_lender_data(records),
            "current_month_region_summary": calculate_current_month_region_summary(records, now),
            "ytd_region_summary": calculate_ytd_region_summary(records, now),
            "year_summary": calculate_year_summary(records, years),
            "recent_complaints": get_recent_complaints(records, now),
            "last_7_days_complaints": get_last_7_days_complaints(records, now),
            "flow_through_ytd": get_flow_through_ytd(records, now),
            "flow_through_last_week": get_flow_through_last_week(records, now),
        }
