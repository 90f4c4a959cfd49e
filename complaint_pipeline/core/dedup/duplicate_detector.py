"""
Duplicate detection for processed complaint records.

Every valid record yields four comparison keys, from strictest to most
permissive. A record is a duplicate if any of its keys was already claimed by
an earlier record; otherwise it claims all of its keys (first seen wins).
Invalid records never claim keys and are never flagged.

Clusters are not closed transitively: the strategy order and first-seen-wins
rule decide which row is treated as the original.
"""

import re
from typing import Any

from ..models import DuplicateMatch, DuplicateStrategy, ProcessedRecord
from ..normalization import normalize_county, normalize_lender

KEY_STRATEGIES: tuple[DuplicateStrategy, ...] = (
    "exact",
    "without_upb",
    "address_date",
    "fuzzy_address",
)

FUZZY_ADDRESS_LENGTH = 20

_WHITESPACE = re.compile(r"\s+")
_PUNCTUATION = re.compile(r"[^\w\s]", re.ASCII)


def normalize_for_comparison(value: Any) -> str:
    """
    Lowercase, trim, collapse whitespace and strip punctuation.

    Examples:
        >>> normalize_for_comparison("  123 Main  St. ")
        '123 main st'
    """
    if not value:
        return ""
    text = _WHITESPACE.sub(" ", str(value).lower().strip())
    return _PUNCTUATION.sub("", text)


def _upb_key(upb: float | None) -> str:
    if upb is None:
        return ""
    if float(upb).is_integer():
        return str(int(upb))
    return repr(float(upb))


def create_row_keys(record: ProcessedRecord) -> dict[DuplicateStrategy, str]:
    """
    Build the comparison keys for one record.

    Args:
        record: A processed record (normalized names are used when set)

    Returns:
        Mapping of strategy name to key, in strategy order
    """
    address = normalize_for_comparison(record.property_address)
    county = normalize_for_comparison(record.normalized_county or normalize_county(record.county))
    lender = normalize_for_comparison(
        record.normalized_lender or normalize_lender(record.lender_or_plaintiff)
    )
    date_key = record.complaint_date.date().isoformat() if record.complaint_date else ""
    upb_key = _upb_key(record.upb)

    return {
        "exact": "|".join([address, county, lender, date_key, upb_key]),
        "without_upb": "|".join([address, county, lender, date_key]),
        "address_date": "|".join([address, date_key]),
        "fuzzy_address": "|".join([address[:FUZZY_ADDRESS_LENGTH], county, lender, date_key]),
    }


class DuplicateDetector:
    """
    Finds duplicates using the layered key strategies.
    """

    def detect(self, records: list[ProcessedRecord]) -> dict[int, DuplicateMatch]:
        """
        Detect duplicate records.

        Args:
            records: Records in input order

        Returns:
            Mapping of list position to DuplicateMatch for every record
        """
        results: dict[int, DuplicateMatch] = {}
        seen_keys: dict[str, int] = {}

        for index, record in enumerate(records):
            if not record.is_valid:
                results[index] = DuplicateMatch(is_duplicate=False)
                continue

            keys = create_row_keys(record)
            match = DuplicateMatch(is_duplicate=False)

            for strategy in KEY_STRATEGIES:
                original = seen_keys.get(keys[strategy])
                if original is not None and original != index:
                    match = DuplicateMatch(is_duplicate=True, duplicate_of=original, strategy=strategy)
                    break

            if not match.is_duplicate:
                for key in keys.values():
                    seen_keys.setdefault(key, index)

            results[index] = match

        return results


def detect_duplicates(records: list[ProcessedRecord]) -> dict[int, DuplicateMatch]:
    """Detect duplicates with the default detector."""
    return DuplicateDetector().detect(records)
