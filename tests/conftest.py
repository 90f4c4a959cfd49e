"""
Pytest configuration and fixtures for complaint-pipeline tests

This module provides shared fixtures for unit, integration, and E2E tests.
"""
import os
from datetime import datetime

import pytest

from complaint_pipeline.core.models import ProcessedRecord


# =======================
# PYTEST CONFIGURATION
# =======================

def pytest_configure(config):
    """Configure pytest with custom markers"""
    config.addinivalue_line(
        "markers", "unit: Unit tests with no file system or process dependencies"
    )
    config.addinivalue_line(
        "markers", "integration: Tests that run the full quality pipeline"
    )
    config.addinivalue_line(
        "markers", "e2e: End-to-end tests that drive the command-line interface"
    )


# =======================
# TIME FIXTURES
# =======================

FIXED_NOW = datetime(2025, 3, 20, 12, 0, 0)


@pytest.fixture
def now() -> datetime:
    """
    Fixed reference time shared by date checks and calculators

    Returns:
        2025-03-20 12:00 (a Thursday)
    """
    return FIXED_NOW


# =======================
# ROW FIXTURES
# =======================

@pytest.fixture
def valid_row() -> dict:
    """A complete, valid complaint row as produced by the readers"""
    return {
        "propertyAddress": "123 Main St",
        "county": "new york",
        "lender": "ABC Mortgage Company Inc.",
        "upb": 250000,
        "meetsCriteria": "Meets criteria",
        "complaintDate": "2025-03-10",
    }


@pytest.fixture
def sample_rows() -> list[dict]:
    """
    A small dirty batch

    Row 0 and 1 differ only in address punctuation (duplicate),
    row 2 has malformed JSON metadata, row 3 lacks an address,
    row 4 is a clean criteria-miss in Broward.
    """
    return [
        {
            "propertyAddress": "123 Main St",
            "county": "new york",
            "lender": "ABC Mortgage Company Inc.",
            "upb": 250000,
            "meetsCriteria": "Meets criteria",
            "complaintDate": "2025-03-10",
        },
        {
            "propertyAddress": "123 Main St.",
            "county": "New York County, NY",
            "lender": "ABC Mortgage Co.",
            "upb": "$250,000",
            "meetsCriteria": "Meets criteria",
            "complaintDate": "03/10/2025",
        },
        {
            "propertyAddress": "77 Ocean Drive",
            "county": "Miami Dade",
            "lender": "Wells Fargo Bank, N.A.",
            "upb": 180000,
            "meetsCriteria": "Meets criteria",
            "complaintDate": "2025-03-18",
            "metadata": '{"incomplete": "json',
        },
        {
            "county": "Broward",
            "plaintiff": "JPMorgan Chase Bank",
            "upb": 90000,
            "complaintDate": "2025-02-01",
        },
        {
            "propertyAddress": "9 Las Olas Blvd",
            "county": "broward county, FL",
            "lender": "US Bank",
            "upb": 120000,
            "meetsCriteria": "Does not meet criteria",
            "complaintDate": "2025-03-01",
        },
    ]


@pytest.fixture
def make_record():
    """
    Factory for processed records used by calculator tests

    Returns:
        Callable building a valid, normalized ProcessedRecord
    """
    counter = iter(range(10_000))

    def _make(
        county: str = "New York",
        lender: str = "Abc Mortgage Company",
        upb: float | None = 100000.0,
        complaint_date: datetime | None = None,
        meets: bool = True,
        is_valid: bool = True,
        is_duplicate: bool = False,
        address: str | None = "1 Test Ave",
        normalized: bool = True,
    ) -> ProcessedRecord:
        raw = {
            "propertyAddress": address,
            "county": county,
            "lender": lender,
            "upb": upb,
            "meetsCriteria": "Meets criteria" if meets else "Does not meet criteria",
        }
        return ProcessedRecord(
            row_index=next(counter),
            raw=raw,
            upb=upb,
            complaint_date=complaint_date,
            normalized_county=county if normalized else "",
            normalized_lender=lender if normalized else "",
            is_valid=is_valid,
            is_duplicate=is_duplicate,
        )

    return _make


@pytest.fixture(scope="session")
def test_data_dir() -> str:
    """
    Get path to test data fixtures directory

    Returns:
        Path to tests/fixtures directory
    """
    return os.path.join(os.path.dirname(__file__), "fixtures")


@pytest.fixture
def clean_env(monkeypatch):
    """Remove pipeline environment variables for the duration of a test"""
    for name in (
        "LOG_LEVEL",
        "LOG_FORMAT",
        "NORMALIZATION_RULES_PATH",
        "COLUMN_MAPPING_PATH",
        "SUMMARY_YEARS",
    ):
        monkeypatch.delenv(name, raising=False)
    return monkeypatch
