"""
Prometheus metrics collection for complaint-pipeline

Counts processed rows, validation issues, duplicates and per-row exceptions.
Metrics are side channels: recording them never changes pipeline output.
"""
from prometheus_client import (
    CollectorRegistry,
    Counter,
    Histogram,
    generate_latest,
)

# Private registry so embedding applications keep their own default registry clean
REGISTRY = CollectorRegistry()


# =======================
# PIPELINE METRICS
# =======================

rows_processed_total = Counter(
    name="complaint_pipeline_rows_processed_total",
    documentation="Total number of rows processed by the quality pipeline",
    labelnames=["status"],  # status: valid, invalid, duplicate
    registry=REGISTRY,
)

processing_duration_seconds = Histogram(
    name="complaint_pipeline_processing_duration_seconds",
    documentation="Time spent running the quality pipeline over one batch",
    buckets=[0.01, 0.05, 0.1, 0.5, 1.0, 2.0, 5.0, 10.0, 30.0],
    registry=REGISTRY,
)

# =======================
# DATA QUALITY METRICS
# =======================

validation_issues_total = Counter(
    name="complaint_pipeline_validation_issues_total",
    documentation="Total number of field validation issues",
    labelnames=["severity"],  # severity: error, warning
    registry=REGISTRY,
)

duplicates_total = Counter(
    name="complaint_pipeline_duplicates_total",
    documentation="Total number of duplicate rows by matching key strategy",
    labelnames=["strategy"],
    registry=REGISTRY,
)

row_exceptions_total = Counter(
    name="complaint_pipeline_row_exceptions_total",
    documentation="Rows whose validation raised an unexpected exception",
    registry=REGISTRY,
)


# =======================
# HELPER FUNCTIONS
# =======================

def record_row_status(status: str, count: int = 1) -> None:
    """
    Record processed rows.

    Args:
        status: valid, invalid or duplicate
        count: Number of rows
    """
    if count:
        rows_processed_total.labels(status=status).inc(count)


def record_validation_issues(errors: int, warnings: int) -> None:
    if errors:
        validation_issues_total.labels(severity="error").inc(errors)
    if warnings:
        validation_issues_total.labels(severity="warning").inc(warnings)


def record_duplicate(strategy: str) -> None:
    duplicates_total.labels(strategy=strategy).inc()


def record_row_exception() -> None:
    row_exceptions_total.inc()


def get_metrics() -> bytes:
    """
    Get current metrics in Prometheus text exposition format.

    Returns:
        Metrics data as bytes
    """
    return generate_latest(REGISTRY)
