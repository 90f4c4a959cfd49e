"""
Core data models for the complaint data-quality pipeline.

All models use Pydantic for runtime validation and type safety.
"""

from .analytics import (
    CurrentMonthStats,
    FlowThroughDeal,
    FourWeekRollUp,
    FourWeekRollUpWeekly,
    Last7DaysComplaint,
    LenderAnalysis,
    LenderCriteriaSummary,
    MonthlyLenderData,
    MonthlyTrendSummary,
    RecentComplaint,
    RegionSummary,
    WeekData,
    YearSummary,
    YTDStats,
)
from .data_quality_issue import DataQualityIssue
from .duplicate_match import DuplicateMatch, DuplicateStrategy
from .json_field_result import JSONFieldResult
from .processed_record import ProcessedRecord
from .quality_summary import QualityReport, QualitySummary
from .raw_record import RawRecord

__all__ = [
    "RawRecord",
    "ProcessedRecord",
    "DataQualityIssue",
    "QualitySummary",
    "QualityReport",
    "DuplicateMatch",
    "DuplicateStrategy",
    "JSONFieldResult",
    "FourWeekRollUp",
    "FourWeekRollUpWeekly",
    "WeekData",
    "YTDStats",
    "CurrentMonthStats",
    "LenderAnalysis",
    "LenderCriteriaSummary",
    "MonthlyTrendSummary",
    "MonthlyLenderData",
    "RegionSummary",
    "YearSummary",
    "RecentComplaint",
    "Last7DaysComplaint",
    "FlowThroughDeal",
]
