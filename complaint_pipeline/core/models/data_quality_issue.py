"""
DataQualityIssue model: one report entry per problematic or duplicate row.
"""

from typing import Any

from pydantic import BaseModel, Field


class DataQualityIssue(BaseModel):
    """
    A row that has errors, warnings, or duplicates an earlier row.

    Attributes:
        row_index: Zero-based position of the row in the input batch
        row: The raw row as received
        errors: Human-readable issues; a duplicate marker is always first
        is_duplicate: Whether the row duplicates an earlier row
        duplicate_of: Zero-based index of the earlier row
    """

    row_index: int = Field(..., ge=0)
    row: dict[str, Any] = Field(default_factory=dict)
    errors: list[str] = Field(default_factory=list)
    is_duplicate: bool = False
    duplicate_of: int | None = None

    class Config:
        json_schema_extra = {
            "example": {
                "row_index": 4,
                "row": {"propertyAddress": "123 Main St.", "county": "Broward"},
                "errors": ["Duplicate row (matches row 1)"],
                "is_duplicate": True,
                "duplicate_of": 0,
            }
        }
