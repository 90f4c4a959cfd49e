"""
Shared predicates and accessors for the aggregate calculators.
"""

import math
from collections.abc import Iterable, Mapping
from datetime import datetime
from typing import Any

from ..core.models import ProcessedRecord
from ..core.models import raw_record as fields
from ..core.normalization import normalize_county, normalize_lender

CRITERIA_PHRASE = "meets criteria"


def meets_criteria(record: ProcessedRecord | Mapping[str, Any]) -> bool:
    """
    Check whether a complaint meets the flow-through criteria.

    True iff the criteria-status text contains "meets criteria",
    case-insensitively ("Does not meet criteria" does not).

    Args:
        record: A processed record or a raw row mapping
    """
    if isinstance(record, ProcessedRecord):
        value = record.meets_criteria
    else:
        value = record.get(fields.MEETS_CRITERIA)
    if not value:
        return False
    return CRITERIA_PHRASE in str(value).lower()


def filter_valid_records(records: Iterable[ProcessedRecord]) -> list[ProcessedRecord]:
    """Records that are valid and not duplicates."""
    return [r for r in records if r.is_valid and not r.is_duplicate]


def qualifying_records(records: Iterable[ProcessedRecord]) -> list[ProcessedRecord]:
    """Valid, non-duplicate records that meet criteria."""
    return [r for r in filter_valid_records(records) if meets_criteria(r)]


def upb_amount(record: ProcessedRecord) -> float:
    """UPB for summation; 0 when absent or not a finite number."""
    upb = record.upb
    if isinstance(upb, (int, float)) and not isinstance(upb, bool) and math.isfinite(upb):
        return float(upb)
    return 0.0


def dated_since(records: Iterable[ProcessedRecord], start: datetime) -> list[ProcessedRecord]:
    """Records whose complaint date is on or after `start`."""
    return [r for r in records if r.complaint_date is not None and r.complaint_date >= start]


def county_of(record: ProcessedRecord) -> str:
    return record.normalized_county or normalize_county(record.county)


def lender_of(record: ProcessedRecord) -> str:
    return record.normalized_lender or normalize_lender(record.lender_or_plaintiff)


def address_of(record: ProcessedRecord) -> str:
    address = record.property_address
    return str(address) if address else "Unknown"


def snapshot(now: datetime | None) -> datetime:
    """The single reference time used for one calculation call."""
    return now or datetime.now()
