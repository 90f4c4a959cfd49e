"""
Result models returned by the aggregate calculators.
"""

from datetime import datetime

from pydantic import BaseModel, Field


class FourWeekRollUp(BaseModel):
    """Per-county totals over the trailing 28 days."""

    county: str
    total_complaints: int = 0
    total_upb: float = 0.0
    total_meets_criteria: int = 0
    total_upb_meets_criteria: float = 0.0


class WeekData(BaseModel):
    """One week bucket; week 1 is the most recent seven days."""

    week: int = Field(..., ge=1, le=4)
    total_complaints: int = 0
    total_upb: float = 0.0


class FourWeekRollUpWeekly(FourWeekRollUp):
    """Per-county roll-up split into four rolling weeks."""

    week1: WeekData = Field(default_factory=lambda: WeekData(week=1))
    week2: WeekData = Field(default_factory=lambda: WeekData(week=2))
    week3: WeekData = Field(default_factory=lambda: WeekData(week=3))
    week4: WeekData = Field(default_factory=lambda: WeekData(week=4))


class PeriodStats(BaseModel):
    total_complaints: int = 0
    total_meets_criteria: int = 0
    total_upb_meets_criteria: float = 0.0


class YTDStats(PeriodStats):
    """Year-to-date counts."""


class CurrentMonthStats(PeriodStats):
    """Current calendar month counts."""


class LenderAnalysis(BaseModel):
    lender: str
    ytd_complaints: int = 0
    ytd_upb: float = 0.0
    current_month_complaints: int = 0
    current_month_upb: float = 0.0


class LenderCriteriaSummary(BaseModel):
    lender: str
    total_complaints: int = 0
    total_upb: float = 0.0


class MonthlyTrendSummary(BaseModel):
    month: str  # YYYY-MM
    total_complaints: int = 0
    complaints_meeting_criteria: int = 0
    total_upb: float = 0.0
    upb_meeting_criteria: float = 0.0


class MonthlyLenderData(BaseModel):
    month: str  # YYYY-MM
    lender: str
    number_of_complaints: int = 0
    total_upb: float = 0.0


class RegionSummary(BaseModel):
    region: str
    total_complaints: int = 0
    total_upb: float = 0.0
    complaints_meeting_criteria: int = 0
    upb_meeting_criteria: float = 0.0


class YearSummary(BaseModel):
    year: str
    total_complaints: int = 0
    total_upb: float = 0.0
    complaints_meeting_criteria: int = 0
    upb_meeting_criteria: float = 0.0


class RecentComplaint(BaseModel):
    property_address: str
    county: str
    lender: str
    upb: float
    complaint_date: datetime


class Last7DaysComplaint(BaseModel):
    property_address: str
    lender: str
    total_upb: float
    complaint_date: datetime
    county: str


class FlowThroughDeal(BaseModel):
    property_address: str
    county: str
    lender: str
    upb: float
    complaint_date: datetime
    meets_criteria: bool = True
