"""
DateValidator - coerces the complaint date and flags implausible values.
"""

from datetime import date, datetime
from typing import Any

import pandas as pd

from ...utils.dates import parse_date_string, to_naive_datetime, years_ago
from .base_validator import BaseValidator, FieldResult


class DateValidator(BaseValidator):
    """
    Validates a date field and coerces it to a naive datetime.

    Parameters:
    - label: Human-readable field name used in messages (default: "Complaint date")
    - max_age_years: Dates older than this raise a warning (default: 10)
    - now: Reference time for the future/age checks (default: current time)
    """

    def __init__(self, field_name: str, parameters: dict[str, Any] | None = None):
        super().__init__(field_name, parameters)
        self.label = self.parameters.get("label", "Complaint date")
        self.max_age_years = self.parameters.get("max_age_years", 10)
        self.now: datetime | None = self.parameters.get("now")

    def validate(self, value: Any, record: dict[str, Any]) -> FieldResult:
        result = FieldResult()

        if value is None or value == "":
            result.warning(self.field_name, f"{self.label} is missing")
            return result

        if isinstance(value, date):
            # pandas NaT is a datetime subclass with no value
            if pd.isna(value):
                result.error(self.field_name, "Invalid Date object")
                return result
            try:
                parsed = to_naive_datetime(value)
            except (OverflowError, ValueError, OSError):
                result.error(self.field_name, "Invalid Date object")
                return result
        elif isinstance(value, str):
            trimmed = value.strip()
            if trimmed == "":
                result.error(self.field_name, f"{self.label} is empty string")
                return result
            try:
                parsed = parse_date_string(trimmed)
            except ValueError:
                result.error(self.field_name, f'Invalid date format: "{trimmed}"')
                return result
        else:
            result.error(self.field_name, f"Invalid date type: {type(value).__name__}")
            return result

        self._check_plausibility(parsed, result)
        result.coerced["complaint_date"] = parsed
        return result

    def _check_plausibility(self, parsed: datetime, result: FieldResult) -> None:
        now = self.now or datetime.now()
        if parsed > now:
            result.warning(self.field_name, f"{self.label} is in the future")
        if parsed < years_ago(now, self.max_age_years):
            result.warning(
                self.field_name, f"{self.label} is more than {self.max_age_years} years old"
            )

    @property
    def rule_type(self) -> str:
        return "complaint_date"
