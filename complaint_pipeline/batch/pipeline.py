"""
Quality pipeline orchestration.

Coordinates the flow: validate -> normalize -> deduplicate -> report
"""

from collections.abc import Iterable, Mapping
from datetime import datetime
from typing import Any

from ..core.dedup import DuplicateDetector
from ..core.models import (
    DataQualityIssue,
    ProcessedRecord,
    QualityReport,
    QualitySummary,
    RawRecord,
)
from ..core.normalization import NormalizationRegistry
from ..core.rules import RuleEngine
from ..observability import metrics
from ..observability.logger import get_logger, log_operation

logger = get_logger(__name__)


def _duplicate_message(duplicate_of: int | None) -> str:
    # Row numbers in messages are 1-based
    return f"Duplicate row (matches row {(duplicate_of or 0) + 1})"


def _has_json_issue(messages: list[str]) -> bool:
    return any("json" in message.lower() for message in messages)


class QualityPipeline:
    """
    Orchestrates the data-quality pipeline over one batch of raw rows.

    Flow:
    1. Validate every row (one bad row never aborts the batch)
    2. Normalize county and lender for all records
    3. Detect duplicates against the canonical names
    4. Merge duplicate findings into the issue list and summarize
    """

    def __init__(
        self,
        registry: NormalizationRegistry | None = None,
        rules: list[dict[str, Any]] | None = None,
        detector: DuplicateDetector | None = None,
    ):
        """
        Initialize the pipeline.

        Args:
            registry: Normalization registry (defaults to the base normalizers)
            rules: Validation rule configuration (defaults to the standard chain)
            detector: Duplicate detector
        """
        self.registry = registry or NormalizationRegistry()
        self.rules = rules
        self.detector = detector or DuplicateDetector()

    def process(self, rows: Iterable[RawRecord], now: datetime | None = None) -> QualityReport:
        """
        Run the pipeline over a batch of rows.

        Args:
            rows: Raw rows in input order
            now: Reference time for date plausibility checks (default: current time)

        Returns:
            QualityReport with processed records, issues and summary

        Raises:
            TypeError: If rows is not iterable
        """
        rows = list(rows)
        with metrics.processing_duration_seconds.time(), log_operation(
            "Quality pipeline", logger=logger, total_rows=len(rows)
        ):
            report = self._process(rows, now)

        summary = report.summary
        metrics.record_row_status("valid", summary.valid_rows)
        metrics.record_row_status("duplicate", summary.duplicate_rows)
        metrics.record_row_status("invalid", summary.invalid_rows - summary.duplicate_rows)
        logger.info(
            f"Quality summary: {summary.valid_rows}/{summary.total_rows} valid, "
            f"{summary.duplicate_rows} duplicates, "
            f"{summary.rows_with_json_errors} rows with JSON issues"
        )
        return report

    def _process(self, rows: list[Any], now: datetime | None) -> QualityReport:
        engine = RuleEngine(self.rules, now=now)
        processed: list[ProcessedRecord] = []
        issues: list[DataQualityIssue] = []
        rows_with_json_errors = 0
        rows_with_other_errors = 0

        # Step 1: validate every row
        for index, row in enumerate(rows):
            raw = {str(k): v for k, v in row.items()} if isinstance(row, Mapping) else {}
            try:
                record = engine.validate_row(row, index)
            except Exception as e:
                logger.warning(
                    f"Validation raised for row {index + 1}: {e}",
                    extra={"row_index": index, "error_type": type(e).__name__},
                )
                metrics.record_row_exception()
                processed.append(ProcessedRecord(
                    row_index=index,
                    raw=raw,
                    is_valid=False,
                    errors=[f"Validation failed: {e}"],
                ))
                issues.append(DataQualityIssue(
                    row_index=index,
                    row=raw,
                    errors=[f"Validation exception: {e}"],
                ))
                rows_with_other_errors += 1
                continue

            processed.append(record)
            metrics.record_validation_issues(len(record.errors), len(record.warnings))

            display = record.display_issues
            has_json_issue = _has_json_issue(display)
            if has_json_issue:
                rows_with_json_errors += 1

            if not record.is_valid or display:
                if not has_json_issue:
                    rows_with_other_errors += 1
                issues.append(DataQualityIssue(
                    row_index=index,
                    row=record.raw,
                    errors=list(display),
                ))

        # Step 2: normalize before deduplication so keys use canonical names
        for record in processed:
            record.normalized_county = self.registry.normalize_county(record.county)
            record.normalized_lender = self.registry.normalize_lender(record.lender_or_plaintiff)

        # Step 3: detect duplicates
        matches = self.detector.detect(processed)
        issues_by_row = {issue.row_index: issue for issue in issues}
        duplicate_rows = 0

        # Step 4: merge duplicate findings into the issue list
        for index, match in matches.items():
            if not match.is_duplicate:
                continue
            duplicate_rows += 1
            metrics.record_duplicate(match.strategy or "unknown")

            record = processed[index]
            message = _duplicate_message(match.duplicate_of)
            record.is_duplicate = True
            record.duplicate_of = match.duplicate_of
            record.warnings.insert(0, message)

            existing = issues_by_row.get(index)
            if existing is not None:
                existing.is_duplicate = True
                existing.duplicate_of = match.duplicate_of
                if not any(e.startswith("Duplicate row") for e in existing.errors):
                    existing.errors.insert(0, message)
            else:
                issue = DataQualityIssue(
                    row_index=index,
                    row=record.raw,
                    errors=[message],
                    is_duplicate=True,
                    duplicate_of=match.duplicate_of,
                )
                issues.append(issue)
                issues_by_row[index] = issue

        valid_rows = sum(1 for r in processed if r.is_valid and not r.is_duplicate)

        return QualityReport(
            processed=processed,
            issues=issues,
            summary=QualitySummary(
                total_rows=len(rows),
                valid_rows=valid_rows,
                invalid_rows=len(processed) - valid_rows,
                duplicate_rows=duplicate_rows,
                rows_with_json_errors=rows_with_json_errors,
                rows_with_other_errors=rows_with_other_errors,
            ),
        )


def process_rows_with_quality_checks(
    rows: Iterable[RawRecord],
    now: datetime | None = None,
    registry: NormalizationRegistry | None = None,
) -> QualityReport:
    """
    Validate, normalize and deduplicate a batch of raw rows.

    Args:
        rows: Raw rows in input order
        now: Reference time for date plausibility checks
        registry: Normalization registry with deployment-specific rules

    Returns:
        QualityReport(processed, issues, summary)
    """
    return QualityPipeline(registry=registry).process(rows, now=now)
