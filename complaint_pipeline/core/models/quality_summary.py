"""
QualitySummary and QualityReport models produced by the quality pipeline.
"""

from pydantic import BaseModel, Field, model_validator

from .data_quality_issue import DataQualityIssue
from .processed_record import ProcessedRecord


class QualitySummary(BaseModel):
    """
    Aggregate counts for one pipeline run.

    Attributes:
        total_rows: Rows received
        valid_rows: Rows that are valid and not duplicates
        invalid_rows: Everything else (invalid or duplicate)
        duplicate_rows: Rows flagged as duplicates
        rows_with_json_errors: Rows with at least one JSON-related issue
        rows_with_other_errors: Rows with issues, none of them JSON-related
    """

    total_rows: int = Field(0, ge=0)
    valid_rows: int = Field(0, ge=0)
    invalid_rows: int = Field(0, ge=0)
    duplicate_rows: int = Field(0, ge=0)
    rows_with_json_errors: int = Field(0, ge=0)
    rows_with_other_errors: int = Field(0, ge=0)

    @model_validator(mode="after")
    def check_row_accounting(self) -> "QualitySummary":
        """Validate that valid and invalid rows add up to the total."""
        if self.valid_rows + self.invalid_rows != self.total_rows:
            raise ValueError(
                f"valid_rows ({self.valid_rows}) + invalid_rows ({self.invalid_rows}) "
                f"must equal total_rows ({self.total_rows})"
            )
        return self


class QualityReport(BaseModel):
    """Full output of the quality pipeline."""

    processed: list[ProcessedRecord] = Field(default_factory=list)
    issues: list[DataQualityIssue] = Field(default_factory=list)
    summary: QualitySummary = Field(default_factory=QualitySummary)

    @property
    def clean_records(self) -> list[ProcessedRecord]:
        """Records that are valid and not duplicates."""
        return [r for r in self.processed if r.is_valid and not r.is_duplicate]
