"""
ProcessedRecord model representing one validated complaint row.
"""

from datetime import datetime
from typing import Any

from pydantic import BaseModel, Field

from . import raw_record as fields


class ProcessedRecord(BaseModel):
    """
    A raw row plus its coerced values, canonical names and quality flags.

    Created once per raw row by the rule engine, then mutated in place by the
    normalization pass and the duplicate detector. Read-only for calculators.

    Attributes:
        row_index: Zero-based position of the row in the input batch
        raw: Original row exactly as received
        upb: Unpaid principal balance, absent if it could not be coerced
        complaint_date: Complaint date, absent if missing or invalid
        normalized_county: Canonical county ("" until normalized)
        normalized_lender: Canonical lender/plaintiff ("" until normalized)
        is_valid: True iff no error-class issue was found
        is_duplicate: True iff an earlier row matched under any key strategy
        duplicate_of: Index of the row this one duplicates
        errors: Error-class issues, in discovery order
        warnings: Warning-class issues; the duplicate marker is prepended here
    """

    row_index: int = Field(..., ge=0)
    raw: dict[str, Any] = Field(default_factory=dict)
    upb: float | None = None
    complaint_date: datetime | None = None
    normalized_county: str = ""
    normalized_lender: str = ""
    is_valid: bool = False
    is_duplicate: bool = False
    duplicate_of: int | None = None
    errors: list[str] = Field(default_factory=list)
    warnings: list[str] = Field(default_factory=list)

    @property
    def display_issues(self) -> list[str]:
        """Errors when there are any, otherwise warnings."""
        return self.errors if self.errors else self.warnings

    @property
    def property_address(self) -> Any:
        return self.raw.get(fields.PROPERTY_ADDRESS)

    @property
    def county(self) -> Any:
        return self.raw.get(fields.COUNTY)

    @property
    def lender(self) -> Any:
        return self.raw.get(fields.LENDER)

    @property
    def plaintiff(self) -> Any:
        return self.raw.get(fields.PLAINTIFF)

    @property
    def lender_or_plaintiff(self) -> Any:
        """The lender when it is truthy, else the plaintiff."""
        return self.lender or self.plaintiff

    @property
    def meets_criteria(self) -> Any:
        return self.raw.get(fields.MEETS_CRITERIA)

    class Config:
        json_schema_extra = {
            "example": {
                "row_index": 0,
                "raw": {
                    "propertyAddress": "123 Main St",
                    "county": "new york",
                    "lender": "ABC Mortgage Company Inc.",
                    "upb": 250000,
                    "meetsCriteria": "Meets criteria",
                    "complaintDate": "2024-01-15",
                },
                "upb": 250000.0,
                "complaint_date": "2024-01-15T00:00:00",
                "normalized_county": "New York",
                "normalized_lender": "Abc Mortgage Company",
                "is_valid": True,
                "is_duplicate": False,
                "errors": [],
                "warnings": [],
            }
        }
