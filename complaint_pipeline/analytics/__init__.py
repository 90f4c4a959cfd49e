"""
Aggregate calculators over processed complaint records.

Every calculator is a pure reduction: valid, non-duplicate records only unless
stated otherwise, UPB counted as 0 when absent, and a single reference time per
call for date windows.
"""

from .activity import (
    get_flow_through_last_week,
    get_flow_through_ytd,
    get_last_7_days_complaints,
    get_recent_complaints,
)
from .criteria import filter_valid_records, meets_criteria
from .dashboard import build_dashboard
from .formatting import format_currency, format_date
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

__all__ = [
    "meets_criteria",
    "filter_valid_records",
    "calculate_four_week_roll_up",
    "calculate_four_week_roll_up_weekly",
    "calculate_ytd_stats",
    "calculate_current_month_stats",
    "calculate_lender_analysis",
    "calculate_lender_criteria_summary",
    "calculate_monthly_trend_summary",
    "calculate_monthly_lender_data",
    "calculate_current_month_region_summary",
    "calculate_ytd_region_summary",
    "calculate_year_summary",
    "get_recent_complaints",
    "get_last_7_days_complaints",
    "get_flow_through_ytd",
    "get_flow_through_last_week",
    "format_currency",
    "format_date",
    "build_dashboard",
]
